import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import RGBA, HSL, HSV, HWB
from ..utils.num_utils import clamp, round_half_up, unit_to_byte
from ..utils.hue_utils import wrap_hue
from .from_hsl import hsl_to_rgba, np_hsl_to_rgba
from .from_hsv import hsv_to_hsl, np_hsv_to_hsl


def hwb_to_rgba(color: HWB) -> RGBA:
    """
    Convert HWB to RGBA.

    When whiteness and blackness add up to 100% or more the color is the gray
    ``whiteness / (whiteness + blackness)``. Otherwise the fully saturated color
    of the same hue is blended toward white and black.

    Args:
        color: HWB record, hue in degrees, whiteness and blackness in [0, 100]

    Returns:
        RGBA: integer channels in [0, 255], alpha 1
    """
    w = color.whiteness / 100
    b = color.blackness / 100

    if w + b >= 1:
        gray = unit_to_byte(w / (w + b))
        return RGBA(gray, gray, gray)

    reference = hsl_to_rgba(HSL(color.hue, 100, 50))
    return RGBA(*(unit_to_byte(c / 255 * (1 - w - b) + w) for c in reference[:3]))


def hwb_to_hsv(color: HWB) -> HSV:
    """Convert HWB to HSV. Whiteness plus blackness of 100% or more is the gray ``hwb_to_rgba`` gives."""
    w, b = color.whiteness, color.blackness
    total = w + b
    if total >= 100:
        w, b = w * 100 / total, b * 100 / total
    saturation = 0.0 if b == 100 else 100 - w / (100 - b) * 100

    return HSV(
        wrap_hue(color.hue),
        clamp(round_half_up(saturation), 0, 100),
        clamp(round_half_up(100 - b), 0, 100),
    )


def hwb_to_hsl(color: HWB) -> HSL:
    return hsv_to_hsl(hwb_to_hsv(color))


## Vectorized

def np_hwb_to_rgba(hwb: NDArray) -> NDArray:
    """
    Vectorized: Convert HWB to RGB.

    Args:
        hwb: array of shape (..., 3), hue in degrees, w and b in [0, 100]

    Returns:
        rgb: float array of shape (..., 3) in [0, 255]
    """
    hwb = np.asarray(hwb, dtype=float)
    h = hwb[..., 0]
    w = hwb[..., 1] / 100
    b = hwb[..., 2] / 100
    total = w + b

    gray = w / np.where(total == 0, 1.0, total) * 255

    reference = np_hsl_to_rgba(
        np.stack([h, np.full_like(h, 100.0), np.full_like(h, 50.0)], axis=-1)
    )
    blended = (reference / 255 * (1 - total)[..., None] + w[..., None]) * 255

    rgb = np.where((total >= 1)[..., None], gray[..., None], blended)
    return np.clip(rgb, 0, 255)


def np_hwb_to_hsv(hwb: NDArray) -> NDArray:
    """Vectorized: Convert HWB of shape (..., 3) to HSV of shape (..., 3)."""
    hwb = np.asarray(hwb, dtype=float)
    h, w, b = hwb[..., 0], hwb[..., 1], hwb[..., 2]

    total = w + b
    scale = np.where(total >= 100, 100 / np.where(total == 0, 1.0, total), 1.0)
    w, b = w * scale, b * scale

    remaining = 100 - b
    saturation = np.where(b == 100, 0.0, 100 - w / np.where(remaining == 0, 1.0, remaining) * 100)

    return np.stack(
        [h % 360, np.clip(saturation, 0, 100), np.clip(remaining, 0, 100)],
        axis=-1,
    )


def np_hwb_to_hsl(hwb: NDArray) -> NDArray:
    return np_hsv_to_hsl(np_hwb_to_hsv(hwb))
