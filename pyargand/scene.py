"""Compose the core functions into one frame's worth of drawables.

The caller rebuilds the scene whenever any input changes; nothing is
cached between frames.
"""

from dataclasses import dataclass, field
from typing import Optional
import math

import numpy as np

from .constants import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    DEFAULT_EXPONENT,
    DEFAULT_MANTISSA,
    DEFAULT_ZOOM,
    TARGET_LINES,
    UNIT_TOLERANCE,
)
from .formatting import format_complex, format_number
from .geometry import (
    Arc,
    Pixel,
    Projections,
    Segment,
    compute_arc,
    compute_point,
    compute_vector,
    magnitude_circle_radius,
    projections,
)
from .grid import axis_ticks, tick_labels
from .magnitude import clamp_exponent, resolve_magnitude
from .view import View, is_drawable, to_screen


# =============================================================================
# State Dataclasses
# =============================================================================

@dataclass
class ArgandState:
    """Raw control values as the UI holds them."""
    theta: float = 0.0
    mantissa: float = DEFAULT_MANTISSA
    exponent: float = DEFAULT_EXPONENT
    zoom: float = DEFAULT_ZOOM

    @property
    def r(self) -> float:
        return resolve_magnitude(self.mantissa, self.exponent)

    def reset(self):
        self.theta = 0.0
        self.mantissa, self.exponent = DEFAULT_MANTISSA, DEFAULT_EXPONENT
        self.zoom = DEFAULT_ZOOM


@dataclass
class DisplayOptions:
    show_projections: bool = True
    show_arc: bool = True


@dataclass
class Scene:
    """Everything a renderer needs for one frame, already in pixels."""
    view: View
    r: float
    exponent: int
    point: tuple[float, float]
    point_px: Pixel
    x_ticks: np.ndarray
    y_ticks: np.ndarray
    x_labels: list = field(default_factory=list)
    y_labels: list = field(default_factory=list)
    unit_radius_px: float = 0.0
    magnitude_radius_px: Optional[float] = None
    arc: Optional[Arc] = None
    projections: Optional[Projections] = None
    vector: Optional[Segment] = None
    point_label: Optional[str] = None
    readouts: dict = field(default_factory=dict)

    @property
    def point_visible(self) -> bool:
        return self.vector is not None


# =============================================================================
# Composition
# =============================================================================

def readouts(r: float, theta: float) -> dict:
    """Text lines for the numeric side panel."""
    cos = math.cos(theta)
    sin = math.sin(theta)
    return {
        "r": f"r = {format_number(r)}",
        "cos": f"cos θ = {format_number(cos)}",
        "sin": f"sin θ = {format_number(sin)}",
        "re": f"Re(z) = r·cos θ = {format_number(r * cos)}",
        "im": f"Im(z) = r·sin θ = {format_number(r * sin)}i",
    }


def build_scene(state: ArgandState, width: int = CANVAS_WIDTH,
                height: int = CANVAS_HEIGHT,
                options: Optional[DisplayOptions] = None,
                target_lines: int = TARGET_LINES) -> Scene:
    """Recompute every derived value from the raw state.

    Raises ValueError for a non-positive zoom or canvas; everything past
    that point is total.
    """
    options = options or DisplayOptions()
    view = View.validated(state.zoom, width, height)
    r = state.r
    theta = state.theta

    point = compute_point(r, theta)
    point_px = to_screen(point[0], point[1], view)
    x_ticks, y_ticks = axis_ticks(view, target_lines)

    radius_px = magnitude_circle_radius(r, view)
    # |z| = 1 already has the unit circle
    if radius_px is not None and abs(r - 1) <= UNIT_TOLERANCE:
        radius_px = None

    vector = compute_vector(r, theta, view)
    return Scene(
        view=view,
        r=r,
        exponent=clamp_exponent(state.exponent),
        point=point,
        point_px=point_px,
        x_ticks=x_ticks,
        y_ticks=y_ticks,
        x_labels=tick_labels(x_ticks),
        y_labels=tick_labels(y_ticks),
        unit_radius_px=view.zoom,
        magnitude_radius_px=radius_px,
        arc=compute_arc(theta, r, view) if options.show_arc else None,
        projections=projections(point_px, view) if options.show_projections else None,
        vector=vector,
        point_label=f"z = {format_complex(*point)}" if is_drawable(*point_px) else None,
        readouts=readouts(r, theta),
    )
