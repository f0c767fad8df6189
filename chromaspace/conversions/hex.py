import re

from ..types.color_types import RGBA
from ..types.warning_types import warn_fallback
from ..samples.css_colors import CSS_COLORS
from ..utils.num_utils import clamp, round_half_up

HEX_DIGITS = re.compile(r"[0-9a-f]{3}|[0-9a-f]{6}")

BLACK = RGBA(0, 0, 0, 1.0)


def hex_to_rgba(hex_string: str) -> RGBA:
    """
    Parse ``#rrggbb`` or ``#rgb`` (leading ``#`` optional, case-insensitive).

    Anything else falls back to opaque black with a ``ColorFallbackWarning``.

    Args:
        hex_string: Hex color string

    Returns:
        RGBA: parsed color, alpha 1
    """
    if not isinstance(hex_string, str):
        raise TypeError(f"Hex color must be a string, got {type(hex_string).__name__}")

    digits = hex_string.strip()
    if digits.startswith("#"):
        digits = digits[1:]
    digits = digits.lower()

    if HEX_DIGITS.fullmatch(digits) is None:
        warn_fallback(f"Invalid hex color {hex_string!r}, using black")
        return BLACK

    if len(digits) == 3:
        digits = "".join(d * 2 for d in digits)

    return RGBA(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def rgba_to_hex(color: RGBA, remove_hashtag: bool = False) -> str:
    """Format the RGB channels of ``color`` as lowercase ``#rrggbb``. Alpha is dropped."""
    digits = "".join(
        f"{clamp(round_half_up(channel), 0, 255):02x}" for channel in color[:3]
    )
    return digits if remove_hashtag else f"#{digits}"


def css_name_to_rgba(name: str) -> RGBA:
    """
    Look up a CSS named color (case-insensitive).

    Unknown names fall back to opaque black with a ``ColorFallbackWarning``.
    """
    if not isinstance(name, str):
        raise TypeError(f"Color name must be a string, got {type(name).__name__}")

    hex_string = CSS_COLORS.get(name.strip().lower())
    if hex_string is None:
        warn_fallback(f"Unknown CSS color {name!r}, using black")
        return BLACK
    return hex_to_rgba(hex_string)
