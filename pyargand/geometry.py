"""Derived geometry for z = r * e^(i*theta): point, vector, arc and circles.

Everything here works in world units first and then maps to pixels
through the view. Shapes that would overflow to non-finite pixels, or
that are far larger than the canvas, are reported as absent (None) so
the drawing layer can simply skip them.
"""

from dataclasses import dataclass
from typing import Optional
import math

from .constants import ARC_MAX_RADIUS, CIRCLE_GATE_FACTOR
from .view import View, is_drawable, to_screen

Pixel = tuple[float, float]


@dataclass(frozen=True)
class Segment:
    start: Pixel
    end: Pixel


@dataclass(frozen=True)
class Arc:
    """Angle arc from 0 to theta, SVG elliptical-arc style.

    `radius` is in world units (never above 1), `radius_px` in pixels.
    The flags follow SVG semantics on a Y-down canvas.
    """
    radius: float
    radius_px: float
    large_arc_flag: int
    sweep_flag: int
    center: Pixel
    start: Pixel
    endpoint: Pixel
    theta: float

    def svg_path(self) -> str:
        sx, sy = self.start
        ex, ey = self.endpoint
        r = self.radius_px
        return (f"M {sx} {sy} A {r} {r} 0 "
                f"{self.large_arc_flag} {self.sweep_flag} {ex} {ey}")

    def bounding_box(self) -> tuple[float, float, float, float]:
        cx, cy = self.center
        r = self.radius_px
        return cx - r, cy - r, cx + r, cy + r

    def screen_angles(self) -> tuple[float, float]:
        """(start, end) in degrees, clockwise from 3 o'clock, for raster arcs."""
        sweep = math.degrees(max(-2 * math.pi, min(2 * math.pi, self.theta)))
        if sweep >= 0:
            return -sweep, 0.0
        return 0.0, -sweep


@dataclass(frozen=True)
class Projections:
    """Dashed drop lines from the point to each axis plus the corner marker."""
    to_real_axis: Segment
    to_imag_axis: Segment
    marker: tuple[float, float, float, float]


def compute_point(r: float, theta: float) -> tuple[float, float]:
    """Polar to Cartesian: (r cos theta, r sin theta)."""
    return r * math.cos(theta), r * math.sin(theta)


def compute_vector(r: float, theta: float, view: View) -> Optional[Segment]:
    """Origin-to-point segment in pixels, or None if it cannot be drawn."""
    x, y = compute_point(r, theta)
    px, py = to_screen(x, y, view)
    if not is_drawable(px, py):
        return None
    return Segment(start=view.center, end=(px, py))


def compute_arc(theta: float, r: float, view: View) -> Arc:
    radius = min(ARC_MAX_RADIUS, abs(r))
    radius_px = radius * view.zoom
    cx, cy = view.center
    return Arc(
        radius=radius,
        radius_px=radius_px,
        large_arc_flag=1 if abs(theta) > math.pi else 0,
        # screen Y points down, so positive angles sweep counter-clockwise (0)
        sweep_flag=0 if theta >= 0 else 1,
        center=(cx, cy),
        start=(cx + radius_px, cy),
        endpoint=to_screen(radius * math.cos(theta), radius * math.sin(theta), view),
        theta=theta,
    )


def magnitude_circle_radius(r: float, view: View) -> Optional[float]:
    """Pixel radius of the |z| = r circle, or None when it is not worth drawing.

    The circle is skipped when its radius overflows or exceeds three times
    the larger canvas side.
    """
    radius_px = view.zoom * abs(r)
    if not math.isfinite(radius_px):
        return None
    if radius_px >= max(view.width, view.height) * CIRCLE_GATE_FACTOR:
        return None
    return radius_px


def projections(point_px: Pixel, view: View, marker_size: float = 10) -> Optional[Projections]:
    px, py = point_px
    if not is_drawable(px, py):
        return None
    cx, cy = view.center
    return Projections(
        to_real_axis=Segment(start=(px, py), end=(px, cy)),
        to_imag_axis=Segment(start=(px, py), end=(cx, py)),
        marker=(px - marker_size, cy - marker_size, px, cy),
    )
