"""World/screen mapping."""

import math

import pytest

from pyargand.view import (
    View,
    clamp_zoom,
    is_drawable,
    parse_zoom,
    to_screen,
    to_world,
)


def test_center_and_half_spans():
    view = View(zoom=5, width=760, height=560)
    assert view.center == (380, 280)
    assert view.half_span_x == 76
    assert view.half_span_y == 56


def test_y_axis_is_inverted():
    view = View(zoom=100)
    assert to_screen(1, 1, view) == (480, 180)
    assert to_screen(-1, -1, view) == (280, 380)
    assert view.to_screen(0, 0) == view.center


@pytest.mark.parametrize("x, y", [
    (0.0, 0.0),
    (1.5, -2.25),
    (-3.75, 0.125),
    (1234.5, 987.25),
])
@pytest.mark.parametrize("zoom", [5, 100, 333.3])
def test_round_trip(x, y, zoom):
    view = View(zoom=zoom)
    px, py = to_screen(x, y, view)
    wx, wy = to_world(px, py, view)
    assert wx == pytest.approx(x, abs=1e-9)
    assert wy == pytest.approx(y, abs=1e-9)


def test_overflow_is_not_drawable():
    view = View(zoom=1e10)
    px, py = to_screen(1e300, 0, view)
    assert math.isinf(px)
    assert not is_drawable(px, py)
    assert is_drawable(*to_screen(1, 1, view))


@pytest.mark.parametrize("zoom", [0, -1, math.nan, math.inf])
def test_validated_rejects_bad_zoom(zoom):
    with pytest.raises(ValueError):
        View.validated(zoom)


def test_validated_rejects_empty_canvas():
    with pytest.raises(ValueError):
        View.validated(100, 0, 560)


def test_validated_rejects_zoom_with_overflowing_span():
    # 380 / 1e-310 overflows to inf
    with pytest.raises(ValueError):
        View.validated(1e-310)
    assert View.validated(1e-300).half_span_x == pytest.approx(3.8e302)


def test_zoom_entry():
    assert parse_zoom("250", 100.0) == 250.0
    assert parse_zoom("0", 100.0) == 100.0
    assert parse_zoom("-4", 100.0) == 100.0
    assert parse_zoom("", 100.0) == 100.0
    assert parse_zoom("abc", 100.0) == 100.0
    assert parse_zoom("100000", 100.0) == 600.0
    assert clamp_zoom(1000) == 600
    assert clamp_zoom(0.5) == 1
