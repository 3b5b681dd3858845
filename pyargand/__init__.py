"""Euler on the Argand plane: geometry and view engine for z = r e^(i theta)."""

from .formatting import format_complex, format_number
from .geometry import (
    Arc,
    Projections,
    Segment,
    compute_arc,
    compute_point,
    compute_vector,
    magnitude_circle_radius,
    projections,
)
from .grid import axis_ticks, nice_step, tick_labels, ticks
from .magnitude import clamp_exponent, resolve_magnitude
from .motion import Rotator, advance, wrap_angle
from .scene import ArgandState, DisplayOptions, Scene, build_scene
from .view import View, is_drawable, to_screen, to_world

__all__ = [
    "Arc",
    "ArgandState",
    "DisplayOptions",
    "Projections",
    "Rotator",
    "Scene",
    "Segment",
    "View",
    "advance",
    "axis_ticks",
    "build_scene",
    "clamp_exponent",
    "compute_arc",
    "compute_point",
    "compute_vector",
    "format_complex",
    "format_number",
    "is_drawable",
    "magnitude_circle_radius",
    "nice_step",
    "projections",
    "resolve_magnitude",
    "tick_labels",
    "ticks",
    "to_screen",
    "to_world",
    "wrap_angle",
]
