import math


def is_close_to_int(value: float, tol: float = 1e-9) -> bool:
    """Check if a float is close to an integer within a tolerance."""
    return abs(value - round(value)) <= tol


def clamp(value, lo, hi):
    """Clamp ``value`` into ``[lo, hi]``. NaN collapses to ``lo``."""
    return max(lo, min(value, hi))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ``x.5`` going up (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def unit_to_byte(value: float) -> int:
    """Scale a unit-range channel to an integer in [0, 255]."""
    return clamp(round_half_up(value * 255), 0, 255)


def normalize_percent(ratio: float, allow_negative: bool = False) -> float:
    """
    Map a strength given either as a fraction or as a percent to a fraction.

    Values already in [0, 1] (or [-1, 0) when ``allow_negative``) are kept;
    anything else is read as a percent, clamped to [0, 100] ([-100, 100]) and
    divided by 100. NaN yields 0.

    Args:
        ratio: Fraction (0.42) or percent (42).
        allow_negative: Accept negative strengths.

    Returns:
        float: Fraction in [0, 1], or [-1, 1] with ``allow_negative``.
    """
    ratio = float(ratio)
    if math.isnan(ratio):
        return 0.0
    if 0 <= ratio <= 1:
        return ratio
    if allow_negative and -1 <= ratio < 0:
        return ratio
    lower = -100.0 if allow_negative else 0.0
    return clamp(ratio, lower, 100.0) / 100


def format_number(value: float, precision: int = 1) -> str:
    """Format a channel for display: integral values bare, others with at most ``precision`` decimals."""
    if is_close_to_int(value):
        return str(int(round(value)))
    text = f"{value:.{precision}f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text
