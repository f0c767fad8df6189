import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import RGBA, HSL, HSV, HWB
from ..utils.num_utils import clamp, round_half_up, unit_to_byte
from ..utils.hue_utils import wrap_hue
from .from_hsv import hsv_to_hwb, np_hsv_to_hwb


def hue_to_rgb_value(p: float, q: float, t: float) -> float:
    """
    One RGB channel of an HSL color, for the hue ``t`` shifted by that channel's offset.

    Args:
        p: Lower bound of the channel ratio
        q: Upper bound of the channel ratio
        t: Shifted hue in degrees, within (-360, 720)

    Returns:
        float: Channel in [0, 1]
    """
    if t < 0:
        t += 360
    if t > 360:
        t -= 360

    if t < 60:
        return p + (q - p) * 6 * (t / 360)
    if t < 180:
        return q
    if t < 240:
        return p + (q - p) * ((240 - t) / 360) * 6
    return p


def hsl_to_rgba(color: HSL) -> RGBA:
    """
    Convert HSL to RGBA.

    Args:
        color: HSL record, hue in degrees, saturation and lightness in [0, 100]

    Returns:
        RGBA: integer channels in [0, 255], alpha 1
    """
    hue = wrap_hue(color.hue)
    s = color.saturation / 100
    l = color.lightness / 100

    if s == 0:
        gray = unit_to_byte(l)
        return RGBA(gray, gray, gray)

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q

    return RGBA(
        unit_to_byte(hue_to_rgb_value(p, q, hue + 120)),
        unit_to_byte(hue_to_rgb_value(p, q, hue)),
        unit_to_byte(hue_to_rgb_value(p, q, hue - 120)),
    )


def hsl_to_hsv(color: HSL) -> HSV:
    """
    Convert HSL to HSV.

    Args:
        color: HSL record

    Returns:
        HSV: same hue, saturation and value rounded to integers in [0, 100]
    """
    s, l = color.saturation, color.lightness
    chroma = s * (l if l < 50 else 100 - l) / 100
    saturation = 0.0 if chroma == 0 or l + chroma == 0 else 2 * chroma / (l + chroma) * 100

    return HSV(
        wrap_hue(color.hue),
        clamp(round_half_up(saturation), 0, 100),
        clamp(round_half_up(l + chroma), 0, 100),
    )


def hsl_to_hwb(color: HSL) -> HWB:
    return hsv_to_hwb(hsl_to_hsv(color))


## Vectorized

def _np_hue_to_rgb_value(p: NDArray, q: NDArray, t: NDArray) -> NDArray:
    t = np.where(t < 0, t + 360, t)
    t = np.where(t > 360, t - 360, t)
    return np.select(
        [t < 60, t < 180, t < 240],
        [p + (q - p) * 6 * (t / 360), q, p + (q - p) * ((240 - t) / 360) * 6],
        default=p,
    )


def np_hsl_to_rgba(hsl: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB.

    Args:
        hsl: array of shape (..., 3), hue in degrees, s and l in [0, 100]

    Returns:
        rgb: float array of shape (..., 3) in [0, 255]
    """
    hsl = np.asarray(hsl, dtype=float)
    h = hsl[..., 0] % 360
    s = hsl[..., 1] / 100
    l = hsl[..., 2] / 100

    # s == 0 gives p == q == l, a flat gray
    q = np.where(l < 0.5, l * (1 + s), l + s - l * s)
    p = 2 * l - q

    rgb = np.stack(
        [
            _np_hue_to_rgb_value(p, q, h + 120),
            _np_hue_to_rgb_value(p, q, h),
            _np_hue_to_rgb_value(p, q, h - 120),
        ],
        axis=-1,
    )
    return np.clip(rgb * 255, 0, 255)


def np_hsl_to_hsv(hsl: NDArray) -> NDArray:
    """Vectorized: Convert HSL of shape (..., 3) to HSV of shape (..., 3)."""
    hsl = np.asarray(hsl, dtype=float)
    h, s, l = hsl[..., 0], hsl[..., 1], hsl[..., 2]

    chroma = s * np.where(l < 50, l, 100 - l) / 100
    denom = l + chroma
    saturation = np.where(chroma == 0, 0.0, 2 * chroma / np.where(denom == 0, 1.0, denom) * 100)

    return np.stack(
        [h % 360, np.clip(saturation, 0, 100), np.clip(l + chroma, 0, 100)],
        axis=-1,
    )


def np_hsl_to_hwb(hsl: NDArray) -> NDArray:
    return np_hsv_to_hwb(np_hsl_to_hsv(hsl))
