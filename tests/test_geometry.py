"""Point, vector, arc and circle gating."""

import math

import pytest

from pyargand.geometry import (
    Segment,
    compute_arc,
    compute_point,
    compute_vector,
    magnitude_circle_radius,
    projections,
)
from pyargand.magnitude import resolve_magnitude
from pyargand.view import View


def test_point_at_zero_angle():
    assert compute_point(1, 0) == (1.0, 0.0)


def test_point_at_right_angle():
    x, y = compute_point(500, math.pi / 2)
    assert x == pytest.approx(0, abs=1e-9)
    assert y == pytest.approx(500)


def test_point_from_clamped_exponent_is_finite():
    x, y = compute_point(resolve_magnitude(1, 400), 0.3)
    assert math.isfinite(x) and math.isfinite(y)


def test_vector_from_origin():
    view = View(zoom=100)
    assert compute_vector(1, 0, view) == Segment(start=(380, 280), end=(480, 280))


def test_vector_skipped_on_overflow():
    assert compute_vector(1e300, 0.5, View(zoom=1e10)) is None


def test_zero_angle_arc_is_degenerate():
    arc = compute_arc(0, 1, View(zoom=100))
    assert arc.radius == 1
    assert arc.radius_px == 100
    assert arc.large_arc_flag == 0
    assert arc.sweep_flag == 0
    assert arc.start == arc.endpoint == (480, 280)
    assert arc.svg_path() == "M 480.0 280.0 A 100.0 100.0 0 0 0 480.0 280.0"


@pytest.mark.parametrize("r, expected", [
    (500, 1.0),
    (1e300, 1.0),
    (0.25, 0.25),
    (-0.5, 0.5),
    (0, 0.0),
])
def test_arc_radius_stays_inside_unit_circle(r, expected):
    assert compute_arc(1.0, r, View()).radius == expected


@pytest.mark.parametrize("theta, large, sweep", [
    (0.5, 0, 0),
    (-0.5, 0, 1),
    (math.pi, 0, 0),
    (3.5, 1, 0),
    (-3.5, 1, 1),
    (10.0, 1, 0),
])
def test_arc_flags(theta, large, sweep):
    arc = compute_arc(theta, 1, View())
    assert arc.large_arc_flag == large
    assert arc.sweep_flag == sweep


def test_arc_endpoint_quarter_turn():
    arc = compute_arc(math.pi / 2, 2, View(zoom=100))
    ex, ey = arc.endpoint
    assert ex == pytest.approx(380)
    assert ey == pytest.approx(180)
    assert arc.bounding_box() == (280, 180, 480, 380)


def test_arc_screen_angles():
    assert compute_arc(math.pi / 2, 1, View()).screen_angles() == pytest.approx((-90, 0))
    assert compute_arc(-math.pi / 2, 1, View()).screen_angles() == pytest.approx((0, 90))
    assert compute_arc(100.0, 1, View()).screen_angles() == pytest.approx((-360, 0))


def test_magnitude_circle_gate():
    # theta = pi/2, m = 5, exp = 2 -> r = 500
    assert magnitude_circle_radius(500, View(zoom=100)) is None
    assert magnitude_circle_radius(500, View(zoom=1)) == 500
    assert magnitude_circle_radius(500, View(zoom=5)) is None    # 2500 >= 3 * 760
    assert magnitude_circle_radius(400, View(zoom=5)) == 2000
    assert magnitude_circle_radius(-2, View(zoom=100)) == 200


def test_magnitude_circle_gate_non_finite():
    assert magnitude_circle_radius(1e300, View(zoom=1e10)) is None
    assert magnitude_circle_radius(math.inf, View()) is None


def test_projections():
    proj = projections((480, 180), View())
    assert proj.to_real_axis == Segment(start=(480, 180), end=(480, 280))
    assert proj.to_imag_axis == Segment(start=(480, 180), end=(380, 180))
    assert proj.marker == (470, 270, 480, 280)
    assert projections((math.inf, 0), View()) is None
