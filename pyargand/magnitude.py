"""Magnitude r = mantissa * 10**exponent with a clamped exponent."""

import math

from .constants import EXPONENT_MAX, EXPONENT_MIN


def clamp_exponent(exponent: float) -> int:
    """Truncate and clamp an exponent to [-300, 300]; non-finite gives 0.

    Integers of any size are accepted and clamped without a float round trip.
    """
    if isinstance(exponent, float) and not math.isfinite(exponent):
        return 0
    return max(EXPONENT_MIN, min(EXPONENT_MAX, math.trunc(exponent)))


def _finite_or_zero(value) -> float:
    try:
        value = float(value)
    except OverflowError:
        return 0.0
    return value if math.isfinite(value) else 0.0


def resolve_magnitude(mantissa: float, exponent: float) -> float:
    """Combine mantissa and exponent into r without ever raising.

    A non-finite mantissa (or an integer too large for a float) counts as
    0. Since the exponent tops out at 300 and doubles reach ~1.8e308, any
    finite mantissa below 1e8 keeps r finite.
    """
    return _finite_or_zero(mantissa) * 10.0 ** clamp_exponent(exponent)


def parse_mantissa(text: str) -> float:
    """Typed mantissa entry. Unparsable text becomes NaN, which resolves to 0."""
    try:
        return float(text)
    except ValueError:
        return math.nan


def parse_exponent(text: str, current: int) -> int:
    """Typed exponent entry; blank means 0, garbage keeps `current`."""
    try:
        return int(text.strip() or "0", 10)
    except ValueError:
        return current
