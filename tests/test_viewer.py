"""Typed controls and display-free viewer behaviour."""

import dataclasses
import math

import pytest

from pyargand.scene import ArgandState
from pyargand.viewer import CONTROLS, ArgandViewer, Typing


def control(name):
    return next(c for c in CONTROLS if c.name == name)


def test_one_control_per_state_field():
    fields = [f.name for f in dataclasses.fields(ArgandState)]
    assert [c.name for c in CONTROLS] == fields


def test_exponent_entry_is_clamped():
    state = ArgandState()
    control("exponent").assign(state, "1" + "0" * 400)
    assert control("exponent").show(state) == "300"
    assert state.r == 1e300

    control("exponent").assign(state, "-7")
    assert state.exponent == -7


def test_bad_exponent_keeps_clamped_current():
    state = ArgandState(exponent=10 ** 400)
    control("exponent").assign(state, "2.5")
    assert state.exponent == 300


def test_zoom_entry_uses_input_range():
    state = ArgandState()
    control("zoom").assign(state, "100000")
    assert state.zoom == 600.0
    control("zoom").assign(state, "-3")
    assert state.zoom == 600.0
    control("zoom").assign(state, "42")
    assert state.zoom == 42.0


def test_theta_garbage_keeps_value():
    state = ArgandState(theta=1.25)
    control("theta").assign(state, "north")
    assert state.theta == 1.25
    control("theta").assign(state, "nan")
    assert state.theta == 1.25
    control("theta").assign(state, "-0.5")
    assert state.theta == -0.5


def test_unparsable_mantissa_gives_zero_magnitude():
    state = ArgandState()
    control("mantissa").assign(state, "abc")
    assert math.isnan(state.mantissa)
    assert state.r == 0.0


def test_commit_applies_typed_text(capsys):
    viewer = ArgandViewer()
    viewer.typing = Typing(index=3, text="250")
    viewer._commit()
    assert viewer.state.zoom == 250.0
    assert "zoom = 250" in capsys.readouterr().out


def test_wheel_zoom_stops_at_slider_limits():
    viewer = ArgandViewer()
    for _ in range(100):
        viewer._zoom(1)
    assert viewer.state.zoom == 300
    for _ in range(100):
        viewer._zoom(-1)
    assert viewer.state.zoom == 5


@pytest.mark.parametrize("pos, theta", [
    ((380 + 50, 280), 0.0),
    ((380, 280 - 50), math.pi / 2),
    ((380, 280 + 50), -math.pi / 2),
])
def test_pointing_sets_theta(pos, theta):
    viewer = ArgandViewer(width=760, height=560)
    viewer._point_at(pos)
    assert viewer.state.theta == pytest.approx(theta)


def test_pointing_at_origin_keeps_theta():
    viewer = ArgandViewer(width=760, height=560, state=ArgandState(theta=2.0))
    viewer._point_at((380, 280))
    assert viewer.state.theta == 2.0
