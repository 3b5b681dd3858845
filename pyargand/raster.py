"""Draw a Scene onto a Pillow image.

Shapes arrive in pixel coordinates that may lie far outside the canvas
(huge r at a modest zoom), so every line is clipped to the canvas before
it reaches ImageDraw.
"""

from typing import Optional
import math

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from .constants import (
    COLORS,
    DASH,
    FONT_SIZE,
    LABEL_FONT_SIZE,
    POINT_RADIUS,
)
from .formatting import format_number
from .geometry import magnitude_circle_radius
from .scene import Scene


def clip_segment(start, end, width: float, height: float) -> Optional[tuple]:
    """Clip a segment to [0, width] x [0, height] (Liang-Barsky).

    Returns the clipped (start, end) pair, or None when nothing is visible.
    """
    x0, y0 = start
    x1, y1 = end
    dx = x1 - x0
    dy = y1 - y0
    t0, t1 = 0.0, 1.0
    for p, q in ((-dx, x0), (dx, width - x0), (-dy, y0), (dy, height - y0)):
        if p == 0:
            if q < 0:
                return None
            continue
        t = q / p
        if p < 0:
            if t > t1:
                return None
            t0 = max(t0, t)
        else:
            if t < t0:
                return None
            t1 = min(t1, t)
    return (x0 + t0 * dx, y0 + t0 * dy), (x0 + t1 * dx, y0 + t1 * dy)


def _inside(x: float, y: float, width: int, height: int, margin: float = 0) -> bool:
    return -margin <= x <= width + margin and -margin <= y <= height + margin


class SceneRenderer:
    """Rasterizes scenes at a fixed font size."""

    def __init__(self, font_size: int = FONT_SIZE, label_font_size: int = LABEL_FONT_SIZE):
        self.font = ImageFont.load_default(size=font_size)
        self.label_font = ImageFont.load_default(size=label_font_size)

    def render(self, scene: Scene) -> Image.Image:
        view = scene.view
        image = Image.new("RGB", (view.width, view.height), COLORS["background"])
        draw = ImageDraw.Draw(image)

        self._draw_grid(draw, scene)
        self._draw_axes(draw, scene)
        self._draw_tick_labels(draw, scene)
        self._draw_circles(draw, scene)
        if scene.arc is not None:
            self._draw_arc(draw, scene)
        if scene.projections is not None:
            self._draw_projections(draw, scene)
        if scene.vector is not None:
            self._draw_vector(draw, scene)
        return image

    def render_array(self, scene: Scene) -> np.ndarray:
        """RGB array of shape (height, width, 3)."""
        return np.asarray(self.render(scene), dtype=np.uint8)

    # =========================================================================
    # Primitives
    # =========================================================================

    def _line(self, draw, scene, start, end, color, width=1):
        clipped = clip_segment(start, end, scene.view.width, scene.view.height)
        if clipped is not None:
            draw.line(clipped, fill=color, width=width)

    def _dashed_line(self, draw, scene, start, end, color, width=1):
        clipped = clip_segment(start, end, scene.view.width, scene.view.height)
        if clipped is None:
            return
        (x0, y0), (x1, y1) = clipped
        length = math.hypot(x1 - x0, y1 - y0)
        if length == 0:
            return
        on, off = DASH
        for s in np.arange(0.0, length, on + off):
            e = min(s + on, length)
            draw.line(
                (x0 + (x1 - x0) * s / length, y0 + (y1 - y0) * s / length,
                 x0 + (x1 - x0) * e / length, y0 + (y1 - y0) * e / length),
                fill=color, width=width,
            )

    def _dashed_circle(self, draw, center, radius, color, width=1):
        cx, cy = center
        bbox = (cx - radius, cy - radius, cx + radius, cy + radius)
        on, off = DASH
        circumference = 2 * math.pi * radius
        pieces = max(1, int(circumference // (on + off)))
        step = 360.0 / pieces
        dash = step * on / (on + off)
        for a in np.arange(pieces) * step:
            draw.arc(bbox, a, a + dash, fill=color, width=width)

    def _text(self, draw, xy, text, color, font, align="start"):
        x, y = xy
        if align != "start":
            length = draw.textlength(text, font=font)
            x -= length / 2 if align == "middle" else length
        draw.text((x, y), text, fill=color, font=font)

    # =========================================================================
    # Layers
    # =========================================================================

    def _draw_grid(self, draw, scene):
        view = scene.view
        for x in scene.x_ticks:
            px, _ = view.to_screen(float(x), 0.0)
            self._line(draw, scene, (px, 0), (px, view.height), COLORS["grid"])
        for y in scene.y_ticks:
            _, py = view.to_screen(0.0, float(y))
            self._line(draw, scene, (0, py), (view.width, py), COLORS["grid"])

    def _draw_axes(self, draw, scene):
        view = scene.view
        cx, cy = view.center
        self._line(draw, scene, (0, cy), (view.width, cy), COLORS["axis"], width=2)
        self._line(draw, scene, (cx, 0), (cx, view.height), COLORS["axis"], width=2)
        self._text(draw, (view.width - 14, cy - 8 - FONT_SIZE), "Re",
                   COLORS["axis_caption"], self.font, align="end")
        self._text(draw, (cx + 10, 2), "Im", COLORS["axis_caption"], self.font)

    def _draw_tick_labels(self, draw, scene):
        view = scene.view
        cx, cy = view.center
        for x, label in scene.x_labels:
            px, _ = view.to_screen(x, 0.0)
            self._text(draw, (px, cy + 6), label, COLORS["tick_label"],
                       self.label_font, align="middle")
        for y, label in scene.y_labels:
            _, py = view.to_screen(0.0, y)
            self._text(draw, (cx - 8, py - LABEL_FONT_SIZE / 2), label,
                       COLORS["tick_label"], self.label_font, align="end")

    def _draw_circles(self, draw, scene):
        view = scene.view
        cx, cy = view.center
        unit = scene.unit_radius_px
        if magnitude_circle_radius(1.0, view) is not None:
            draw.ellipse((cx - unit, cy - unit, cx + unit, cy + unit),
                         outline=COLORS["unit_circle"], width=2)
            self._text(draw, (cx + unit + 8, cy - 8 - LABEL_FONT_SIZE), "|z| = 1",
                       COLORS["unit_label"], self.label_font)

        radius = scene.magnitude_radius_px
        if radius is not None and radius >= 1:
            self._dashed_circle(draw, (cx, cy), radius, COLORS["magnitude_circle"], width=2)
            self._text(draw, (cx + radius + 8, cy - 8 - LABEL_FONT_SIZE),
                       f"|z| = {format_number(scene.r)}",
                       COLORS["magnitude_label"], self.label_font)

    def _draw_arc(self, draw, scene):
        arc = scene.arc
        start, end = arc.screen_angles()
        if start == end or arc.radius_px < 1:
            return
        if magnitude_circle_radius(arc.radius, scene.view) is None:
            return
        draw.arc(arc.bounding_box(), start, end, fill=COLORS["arc"], width=3)

    def _draw_projections(self, draw, scene):
        proj = scene.projections
        for seg in (proj.to_real_axis, proj.to_imag_axis):
            self._dashed_line(draw, scene, seg.start, seg.end, COLORS["projection"])
        x0, y0, x1, y1 = proj.marker
        if _inside(x0, y0, scene.view.width, scene.view.height, margin=20):
            draw.rectangle((x0, y0, x1, y1), outline=COLORS["projection_box"])

    def _draw_vector(self, draw, scene):
        view = scene.view
        vector = scene.vector
        self._line(draw, scene, vector.start, vector.end, COLORS["vector"], width=3)

        px, py = vector.end
        if not _inside(px, py, view.width, view.height, margin=POINT_RADIUS):
            return
        draw.ellipse((px - POINT_RADIUS, py - POINT_RADIUS,
                      px + POINT_RADIUS, py + POINT_RADIUS), fill=COLORS["point"])
        if scene.point_label:
            self._text(draw, (px + 8, py - 8 - FONT_SIZE), scene.point_label,
                       COLORS["point_label"], self.font)


def render_scene(scene: Scene, img_name: str, renderer: Optional[SceneRenderer] = None) -> Image.Image:
    """Render `scene` and save it to `img_name`."""
    renderer = renderer or SceneRenderer()
    image = renderer.render(scene)
    image.save(img_name)
    return image
