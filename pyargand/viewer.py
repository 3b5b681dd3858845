#!/usr/bin/env python3
"""Interactive Argand plane viewer - pygame frontend over the geometry core.

The window shows the rendered scene with a bar of typed entries across
the top (theta, mantissa, exponent, zoom) and the numeric readouts in the
bottom-left corner. Each frame rebuilds the scene from ArgandState.
"""

from dataclasses import dataclass
from typing import Callable, Optional
import math
import time

import pygame

from .constants import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    HELP_OVERLAY_ALPHA,
    PADDING,
    ZOOM_FACTOR,
    ZOOM_SLIDER_MAX,
    ZOOM_SLIDER_MIN,
)
from .magnitude import clamp_exponent, parse_exponent, parse_mantissa
from .motion import Rotator, parse_theta, wrap_angle
from .raster import SceneRenderer
from .scene import ArgandState, DisplayOptions, build_scene
from .view import clamp_zoom, parse_zoom


# =============================================================================
# Constants
# =============================================================================

THETA_SPEED = 0.02        # radians per frame with Left/Right held
MANTISSA_SPEED = 0.01     # per frame with Up/Down held
ZOOM_KEY_INTERVAL = 0.1   # seconds between +/- zoom steps
OVERLAY_FONT_SIZE = 18
FPS = 60

TEXT_COLOR = (255, 255, 255)
VALUE_COLOR = (100, 200, 255)
TYPING_COLOR = (255, 255, 0)
PANEL_COLOR = (0, 0, 0)

HELP = (
    ("Left/Right", "rotate theta"),
    ("drag", "point theta at the cursor"),
    ("Space", "start/stop rotation"),
    ("Up/Down", "mantissa +/-"),
    ("PgUp/PgDn", "exponent +/-"),
    ("wheel, +/-", "zoom (pixels per unit)"),
    ("P / A", "projections / angle arc"),
    ("click value", "type theta, m, exp or zoom"),
    ("Tab", "next value while typing"),
    ("F", "readouts on/off"),
    ("0", "reset"),
    ("H / ?", "help"),
    ("Q / Esc", "quit"),
)


# =============================================================================
# Typed Controls
# =============================================================================

def _assign_theta(state: ArgandState, text: str):
    state.theta = parse_theta(text, state.theta)


def _assign_mantissa(state: ArgandState, text: str):
    state.mantissa = parse_mantissa(text)


def _assign_exponent(state: ArgandState, text: str):
    state.exponent = parse_exponent(text, clamp_exponent(state.exponent))


def _assign_zoom(state: ArgandState, text: str):
    state.zoom = parse_zoom(text, state.zoom)


@dataclass(frozen=True)
class Control:
    """A value in the top bar: its caption, how it reads and how typing sets it."""
    name: str
    caption: str
    show: Callable[[ArgandState], str]
    assign: Callable[[ArgandState, str], None]


CONTROLS = (
    Control("theta", "θ=", lambda s: f"{s.theta:.3f}", _assign_theta),
    Control("mantissa", "  m=", lambda s: f"{s.mantissa:g}", _assign_mantissa),
    Control("exponent", " x10^", lambda s: str(clamp_exponent(s.exponent)), _assign_exponent),
    Control("zoom", "  zoom=", lambda s: f"{s.zoom:g}", _assign_zoom),
)


@dataclass
class Typing:
    """The control currently receiving keystrokes, if any."""
    index: Optional[int] = None
    text: str = ""

    @property
    def active(self) -> bool:
        return self.index is not None


# =============================================================================
# Viewer
# =============================================================================

class ArgandViewer:
    """Interactive z = r e^(i theta) viewer."""

    def __init__(self, width: int = CANVAS_WIDTH, height: int = CANVAS_HEIGHT,
                 state: Optional[ArgandState] = None,
                 options: Optional[DisplayOptions] = None):
        self.width = width
        self.height = height
        self.state = state or ArgandState()
        self.options = options or DisplayOptions()
        self.rotator = Rotator()
        self.renderer = SceneRenderer()

        self.typing = Typing()
        self.control_rects = []
        self.dragging = False
        self.show_readouts = True
        self.show_help = False
        self.running = True
        self.dirty = True
        self.last_zoom_key = 0.0
        self.frame_ms = []

        self.screen = None
        self.font = None

    def run(self):
        pygame.init()
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption("Euler on the Argand Plane")
        self.font = pygame.font.SysFont("monospace", OVERLAY_FONT_SIZE)
        clock = pygame.time.Clock()
        try:
            while self.running:
                now = time.perf_counter()
                for event in pygame.event.get():
                    self._dispatch(event)
                self._apply_held_keys(now)
                if self.rotator.running:
                    self.state.theta = self.rotator.step(self.state.theta, now)
                    self.dirty = True
                if self.dirty:
                    self._draw_frame()
                    self.dirty = False
                clock.tick(FPS)
        finally:
            pygame.quit()

        if self.frame_ms:
            mean = sum(self.frame_ms) / len(self.frame_ms)
            print(f"\n{len(self.frame_ms)} frames drawn, {mean:.1f}ms each on average")

    # =========================================================================
    # Input
    # =========================================================================

    def _dispatch(self, event):
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.TEXTINPUT and self.typing.active:
            self.typing.text += event.text
        elif event.type == pygame.KEYDOWN:
            if self.typing.active:
                self._on_typing_key(event.key)
            else:
                self._on_key(event.key)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._on_click(event.pos)
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.dragging = False
        elif event.type == pygame.MOUSEMOTION and self.dragging:
            self._point_at(event.pos)
        elif event.type == pygame.MOUSEWHEEL:
            self._zoom(event.y)
        else:
            return
        self.dirty = True

    def _on_key(self, key):
        if key in (pygame.K_ESCAPE, pygame.K_q):
            self.running = False
        elif key in (pygame.K_h, pygame.K_SLASH, pygame.K_QUESTION):
            self.show_help = not self.show_help
        elif key == pygame.K_f:
            self.show_readouts = not self.show_readouts
        elif key == pygame.K_p:
            self.options.show_projections = not self.options.show_projections
        elif key == pygame.K_a:
            self.options.show_arc = not self.options.show_arc
        elif key == pygame.K_SPACE:
            self.rotator.toggle(time.perf_counter())
            print("Rotating" if self.rotator.running else "Paused")
        elif key == pygame.K_0:
            self.rotator.stop()
            self.state.reset()
        elif key in (pygame.K_PAGEUP, pygame.K_PAGEDOWN):
            delta = 1 if key == pygame.K_PAGEUP else -1
            self.state.exponent = clamp_exponent(clamp_exponent(self.state.exponent) + delta)
            print(f"r = {self.state.mantissa:g} x 10^{self.state.exponent}")

    def _on_typing_key(self, key):
        if key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            self._commit()
            self._stop_typing()
        elif key == pygame.K_ESCAPE:
            self._stop_typing()
        elif key == pygame.K_BACKSPACE:
            self.typing.text = self.typing.text[:-1]
        elif key == pygame.K_TAB:
            self._commit()
            back = pygame.key.get_mods() & pygame.KMOD_SHIFT
            self._start_typing((self.typing.index + (-1 if back else 1)) % len(CONTROLS))

    def _start_typing(self, index: int):
        if not self.typing.active:
            pygame.key.start_text_input()
        self.typing = Typing(index, CONTROLS[index].show(self.state))

    def _stop_typing(self):
        pygame.key.stop_text_input()
        self.typing = Typing()

    def _commit(self):
        control = CONTROLS[self.typing.index]
        control.assign(self.state, self.typing.text)
        print(f"{control.name} = {control.show(self.state)}")

    def _on_click(self, pos):
        if self.show_readouts:
            for index, rect in enumerate(self.control_rects):
                if rect.collidepoint(pos):
                    self._start_typing(index)
                    return
        if self.typing.active:
            self._stop_typing()
        self.dragging = True
        self._point_at(pos)

    def _point_at(self, pos):
        """Aim theta at the cursor, wrapped like the angle slider."""
        dx = pos[0] - self.width / 2
        dy = self.height / 2 - pos[1]
        if dx or dy:
            self.state.theta = wrap_angle(math.atan2(dy, dx))

    def _zoom(self, direction: int):
        factor = ZOOM_FACTOR if direction > 0 else 1 / ZOOM_FACTOR
        self.state.zoom = clamp_zoom(self.state.zoom * factor, ZOOM_SLIDER_MIN, ZOOM_SLIDER_MAX)

    def _apply_held_keys(self, now: float):
        if self.typing.active:
            return
        keys = pygame.key.get_pressed()
        turn = keys[pygame.K_RIGHT] - keys[pygame.K_LEFT]
        grow = keys[pygame.K_UP] - keys[pygame.K_DOWN]
        zoom = ((keys[pygame.K_EQUALS] or keys[pygame.K_KP_PLUS])
                - (keys[pygame.K_MINUS] or keys[pygame.K_KP_MINUS]))

        if turn:
            self.state.theta += turn * THETA_SPEED
        if grow:
            self.state.mantissa = max(0.0, self.state.mantissa + grow * MANTISSA_SPEED)
        if zoom and now - self.last_zoom_key >= ZOOM_KEY_INTERVAL:
            self._zoom(zoom)
            self.last_zoom_key = now
        if turn or grow or zoom:
            self.dirty = True

    # =========================================================================
    # Drawing
    # =========================================================================

    def _draw_frame(self):
        started = time.perf_counter()
        scene = build_scene(self.state, self.width, self.height, self.options)
        rgb = self.renderer.render_array(scene)
        self.screen.blit(pygame.surfarray.make_surface(rgb.swapaxes(0, 1)), (0, 0))

        if self.show_readouts:
            self._draw_controls()
            line = self.font.get_linesize()
            y = self.height - PADDING - line * len(scene.readouts)
            for text in scene.readouts.values():
                self._label(text, TEXT_COLOR, PADDING, y)
                y += line
        if self.show_help:
            self._draw_help()

        pygame.display.flip()
        self.frame_ms.append((time.perf_counter() - started) * 1000)

    def _label(self, text: str, color, x: int, y: int) -> pygame.Rect:
        return self.screen.blit(self.font.render(text, True, color, PANEL_COLOR), (x, y))

    def _draw_controls(self):
        """Top bar of captions and values; value rects become click targets."""
        x, y = PADDING, PADDING // 2
        self.control_rects = []
        for index, control in enumerate(CONTROLS):
            x = self._label(control.caption, TEXT_COLOR, x, y).right
            if self.typing.index == index:
                rect = self._label(self.typing.text + "|", TYPING_COLOR, x, y)
            else:
                rect = self._label(control.show(self.state), VALUE_COLOR, x, y)
            self.control_rects.append(rect)
            x = rect.right

    def _draw_help(self):
        width = max(len(keys) for keys, _ in HELP) + 2
        rows = [self.font.render(f"{keys:<{width}}{what}", True, TEXT_COLOR)
                for keys, what in HELP]
        line = self.font.get_linesize()
        panel = pygame.Surface((max(r.get_width() for r in rows) + 2 * PADDING,
                                line * len(rows) + 2 * PADDING))
        panel.set_alpha(HELP_OVERLAY_ALPHA)
        panel.fill(PANEL_COLOR)
        for i, row in enumerate(rows):
            panel.blit(row, (PADDING, PADDING + i * line))
        self.screen.blit(panel, (PADDING, line + PADDING))


def main():
    ArgandViewer().run()


if __name__ == "__main__":
    main()
