"""Compact number labels for ticks and readouts."""

import math

from .constants import INFINITY_SYMBOL, SCI_LOWER, SCI_UPPER


def format_number(value: float) -> str:
    """Render a float as a short label.

    Non-finite values become the infinity symbol, magnitudes outside
    [1e-3, 1e6) use two-digit scientific notation (``1.23e+07``) and
    everything else uses up to three decimals with trailing zeros removed.
    """
    if not math.isfinite(value):
        return INFINITY_SYMBOL
    a = abs(value)
    if a == 0:
        return "0"
    if a >= SCI_UPPER or a < SCI_LOWER:
        return f"{value:.2e}"
    text = f"{value:.3f}"
    return text.rstrip("0").rstrip(".")


def format_complex(x: float, y: float) -> str:
    """Label for the plotted point, ``a + bi``."""
    return f"{format_number(x)} + {format_number(y)}i"
