"""World <-> screen mapping for a fixed-size canvas.

World units are the abstract Argand plane (real axis right, imaginary
axis up). Screen pixels grow right and down from the top-left corner, so
the Y axis flips between the two spaces.
"""

from dataclasses import dataclass
import math

from .constants import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    DEFAULT_ZOOM,
    ZOOM_INPUT_MAX,
    ZOOM_INPUT_MIN,
)


@dataclass(frozen=True)
class View:
    """Canvas size plus a pixels-per-unit zoom. Zoom must be positive."""
    zoom: float = DEFAULT_ZOOM
    width: int = CANVAS_WIDTH
    height: int = CANVAS_HEIGHT

    @classmethod
    def validated(cls, zoom: float, width: int = CANVAS_WIDTH,
                  height: int = CANVAS_HEIGHT) -> "View":
        """Build a view, rejecting degenerate zoom or canvas sizes."""
        if not math.isfinite(zoom) or zoom <= 0:
            raise ValueError(f"Zoom must be a positive number, got {zoom}")
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas must have positive size, got {width}x{height}")
        view = cls(zoom=zoom, width=width, height=height)
        if not (math.isfinite(view.half_span_x) and math.isfinite(view.half_span_y)):
            raise ValueError(f"Zoom {zoom} is too small for a {width}x{height} canvas")
        return view

    @property
    def center(self) -> tuple[float, float]:
        return self.width / 2, self.height / 2

    @property
    def half_span_x(self) -> float:
        """World units from the origin to the left/right edge."""
        return (self.width / 2) / self.zoom

    @property
    def half_span_y(self) -> float:
        """World units from the origin to the top/bottom edge."""
        return (self.height / 2) / self.zoom

    def to_screen(self, x: float, y: float) -> tuple[float, float]:
        return to_screen(x, y, self)

    def to_world(self, px: float, py: float) -> tuple[float, float]:
        return to_world(px, py, self)


def to_screen(x: float, y: float, view: View) -> tuple[float, float]:
    """Map world coordinates to pixels.

    Never raises; overflowing products come back as inf/nan and callers
    check them with is_drawable() before drawing.
    """
    cx, cy = view.center
    return cx + x * view.zoom, cy - y * view.zoom


def to_world(px: float, py: float, view: View) -> tuple[float, float]:
    """Inverse of to_screen() for the same view."""
    cx, cy = view.center
    return (px - cx) / view.zoom, (cy - py) / view.zoom


def is_drawable(px: float, py: float) -> bool:
    return math.isfinite(px) and math.isfinite(py)


def clamp_zoom(zoom: float, lo: float = ZOOM_INPUT_MIN,
               hi: float = ZOOM_INPUT_MAX) -> float:
    return max(lo, min(hi, zoom))


def parse_zoom(text: str, current: float) -> float:
    """Typed zoom entry: integers only, clamped to the input range.

    Non-positive or unparsable entries keep `current`.
    """
    try:
        value = int(text or "0", 10)
    except ValueError:
        return current
    if value <= 0:
        return current
    return float(clamp_zoom(value))
