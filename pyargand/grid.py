"""Scale-adaptive grid ticks (1-2-5 x 10^k), Desmos style."""

import math

import numpy as np

from .constants import LOG_FLOOR, TARGET_LINES, TICK_DECIMALS, TICK_EPSILON
from .formatting import format_number
from .view import View


def nice_step(span_units: float, target_lines: int = TARGET_LINES) -> float:
    """Pick a tick spacing of 1, 2 or 5 times a power of ten.

    Aims for roughly `target_lines` ticks across `span_units`. Spans at or
    below zero are floored before taking the log. An infinite or NaN span
    is returned unchanged, which ticks() maps to a lone origin tick.
    """
    raw = span_units / target_lines
    if math.isnan(raw) or raw == math.inf:
        return raw
    pow10 = 10.0 ** math.floor(math.log10(max(raw, LOG_FLOOR)))
    norm = raw / pow10
    if norm < 1.5:
        nice = 1
    elif norm < 3.5:
        nice = 2
    elif norm < 7.5:
        nice = 5
    else:
        nice = 10
    return nice * pow10


def ticks(step: float, half: float) -> np.ndarray:
    """Tick positions from -ceil(half/step)*step to +ceil(half/step)*step.

    Values are multiples of `step`, rounded to 12 decimals, ordered and
    symmetric about zero (zero included).
    """
    if not step > 0 or not math.isfinite(half / step):
        return np.zeros(1)
    span = half / step
    n = max(math.ceil(span), 0)
    k = np.arange(-n, n + 1, dtype=np.float64)
    return np.round(k * step, TICK_DECIMALS) + 0.0


def axis_ticks(view: View, target_lines: int = TARGET_LINES) -> tuple[np.ndarray, np.ndarray]:
    """Ticks for the x and y axes, each from its own half-span."""
    x_half = view.half_span_x
    y_half = view.half_span_y
    x_ticks = ticks(nice_step(x_half, target_lines), x_half)
    y_ticks = ticks(nice_step(y_half, target_lines), y_half)
    return x_ticks, y_ticks


def tick_labels(values) -> list[tuple[float, str]]:
    """(value, label) pairs for every tick except the origin."""
    return [(float(v), format_number(float(v))) for v in values if abs(v) > TICK_EPSILON]
