import sys
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import RGBA, HSL, HSV, HWB
from ..utils.num_utils import clamp, round_half_up
from ..utils.hue_utils import wrap_hue

# Float noise just below an x.5 boundary must not round down.
EPSILON = sys.float_info.epsilon


def unit_rgb_to_hue(r: float, g: float, b: float) -> float:
    """
    Hue in degrees of a unit-range RGB triple; 0 for achromatic input.

    Args:
        r: Red in [0, 1]
        g: Green in [0, 1]
        b: Blue in [0, 1]

    Returns:
        float: Hue in [0, 360)
    """
    hi = max(r, g, b)
    delta = hi - min(r, g, b)
    if delta == 0:
        return 0.0
    if hi == r:
        sector = ((g - b) / delta) % 6
    elif hi == g:
        sector = (b - r) / delta + 2
    else:
        sector = (r - g) / delta + 4
    return sector * 60


def rgba_to_hsl(color: RGBA) -> HSL:
    """
    Convert RGBA to HSL.

    Args:
        color: RGBA record, channels in [0, 255]

    Returns:
        HSL: hue in [0, 360), saturation and lightness in [0, 100], all integers
    """
    r, g, b = color.red / 255, color.green / 255, color.blue / 255
    hi, lo = max(r, g, b), min(r, g, b)
    delta = hi - lo

    lightness = (hi + lo) / 2
    spread = 1 - abs(2 * lightness - 1)
    saturation = 0.0 if delta == 0 or spread <= 0 else delta / spread

    return HSL(
        wrap_hue(round_half_up(unit_rgb_to_hue(r, g, b))),
        clamp(round_half_up((saturation + EPSILON) * 100), 0, 100),
        clamp(round_half_up((lightness + EPSILON) * 100), 0, 100),
    )


def rgba_to_hsv(color: RGBA) -> HSV:
    """
    Convert RGBA to HSV.

    Args:
        color: RGBA record, channels in [0, 255]

    Returns:
        HSV: hue in [0, 360), saturation and value in [0, 100], all integers
    """
    r, g, b = color.red / 255, color.green / 255, color.blue / 255
    hi, lo = max(r, g, b), min(r, g, b)
    saturation = 0.0 if hi == 0 else (hi - lo) / hi

    return HSV(
        wrap_hue(round_half_up(unit_rgb_to_hue(r, g, b))),
        clamp(round_half_up(saturation * 100), 0, 100),
        clamp(round_half_up(hi * 100), 0, 100),
    )


def rgba_to_hwb(color: RGBA) -> HWB:
    """
    Convert RGBA to HWB.

    Whiteness is the smallest channel, blackness the distance of the largest
    channel from full intensity, both in percent.
    """
    r, g, b = color.red / 255, color.green / 255, color.blue / 255

    return HWB(
        wrap_hue(round_half_up(unit_rgb_to_hue(r, g, b))),
        clamp(round_half_up(min(r, g, b) * 100), 0, 100),
        clamp(round_half_up(100 - max(r, g, b) * 100), 0, 100),
    )


## Vectorized

def _np_unit_rgb(rgb: NDArray) -> tuple[NDArray, NDArray, NDArray]:
    rgb = np.asarray(rgb, dtype=float)
    return rgb[..., 0] / 255, rgb[..., 1] / 255, rgb[..., 2] / 255


def np_unit_rgb_to_hue(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized ``unit_rgb_to_hue``."""
    hi = np.maximum(np.maximum(r, g), b)
    delta = hi - np.minimum(np.minimum(r, g), b)
    safe_delta = np.where(delta == 0, 1.0, delta)

    sector = np.where(
        hi == r,
        np.mod((g - b) / safe_delta, 6),
        np.where(hi == g, (b - r) / safe_delta + 2, (r - g) / safe_delta + 4),
    )
    return np.where(delta == 0, 0.0, sector * 60)


def np_rgba_to_hsl(rgb: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB(A) to HSL.

    Args:
        rgb: array of shape (..., 3) or (..., 4), channels in [0, 255]

    Returns:
        hsl: float array of shape (..., 3), hue in [0, 360), s and l in [0, 100]
    """
    r, g, b = _np_unit_rgb(rgb)
    hi = np.maximum(np.maximum(r, g), b)
    lo = np.minimum(np.minimum(r, g), b)
    delta = hi - lo

    lightness = (hi + lo) / 2
    denom = 1 - np.abs(2 * lightness - 1)
    saturation = np.where(delta == 0, 0.0, delta / np.where(denom == 0, 1.0, denom))

    hue = np_unit_rgb_to_hue(r, g, b) % 360
    return np.stack(
        [hue, np.clip(saturation * 100, 0, 100), np.clip(lightness * 100, 0, 100)],
        axis=-1,
    )


def np_rgba_to_hsv(rgb: NDArray) -> NDArray:
    """Vectorized: Convert RGB(A) of shape (..., 3|4) to HSV of shape (..., 3)."""
    r, g, b = _np_unit_rgb(rgb)
    hi = np.maximum(np.maximum(r, g), b)
    lo = np.minimum(np.minimum(r, g), b)
    saturation = np.where(hi == 0, 0.0, (hi - lo) / np.where(hi == 0, 1.0, hi))

    hue = np_unit_rgb_to_hue(r, g, b) % 360
    return np.stack([hue, saturation * 100, hi * 100], axis=-1)


def np_rgba_to_hwb(rgb: NDArray) -> NDArray:
    """Vectorized: Convert RGB(A) of shape (..., 3|4) to HWB of shape (..., 3)."""
    r, g, b = _np_unit_rgb(rgb)
    hi = np.maximum(np.maximum(r, g), b)
    lo = np.minimum(np.minimum(r, g), b)

    hue = np_unit_rgb_to_hue(r, g, b) % 360
    return np.stack([hue, lo * 100, 100 - hi * 100], axis=-1)
