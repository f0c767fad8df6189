import math
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import RGBA, HSL, HSV, HWB
from ..utils.num_utils import clamp, round_half_up, unit_to_byte
from ..utils.hue_utils import wrap_hue


def hsv_to_rgba(color: HSV) -> RGBA:
    """
    Convert HSV to RGBA with the six-sector algorithm.

    A non-finite hue yields opaque black.

    Args:
        color: HSV record, hue in degrees, saturation and value in [0, 100]

    Returns:
        RGBA: integer channels in [0, 255], alpha 1
    """
    if not math.isfinite(color.hue):
        return RGBA(0, 0, 0)

    h = wrap_hue(color.hue) / 360
    s = color.saturation / 100
    v = color.value / 100

    i = math.floor(h * 6)
    f = h * 6 - i
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    sector = i % 6
    if sector == 0:
        r, g, b = v, t, p
    elif sector == 1:
        r, g, b = q, v, p
    elif sector == 2:
        r, g, b = p, v, t
    elif sector == 3:
        r, g, b = p, q, v
    elif sector == 4:
        r, g, b = t, p, v
    else:
        r, g, b = v, p, q

    return RGBA(unit_to_byte(r), unit_to_byte(g), unit_to_byte(b))


def hsv_to_hsl(color: HSV) -> HSL:
    """
    Convert HSV to HSL.

    Args:
        color: HSV record

    Returns:
        HSL: same hue, saturation and lightness rounded to integers in [0, 100]
    """
    s, v = color.saturation, color.value
    doubled_lightness = (200 - s) * v / 100

    if doubled_lightness in (0, 200):
        saturation = 0.0
    else:
        denom = doubled_lightness if doubled_lightness <= 100 else 200 - doubled_lightness
        saturation = s * v / 100 / denom * 100

    return HSL(
        wrap_hue(color.hue),
        clamp(round_half_up(saturation), 0, 100),
        clamp(round_half_up(doubled_lightness / 2), 0, 100),
    )


def hsv_to_hwb(color: HSV) -> HWB:
    """Convert HSV to HWB: whiteness ``(100 - s) * v / 100``, blackness ``100 - v``."""
    return HWB(
        wrap_hue(color.hue),
        clamp(round_half_up((100 - color.saturation) * color.value / 100), 0, 100),
        clamp(round_half_up(100 - color.value), 0, 100),
    )


## Vectorized

def np_hsv_to_rgba(hsv: NDArray) -> NDArray:
    """
    Vectorized: Convert HSV to RGB.

    Args:
        hsv: array of shape (..., 3), hue in degrees, s and v in [0, 100]

    Returns:
        rgb: float array of shape (..., 3) in [0, 255]
    """
    hsv = np.asarray(hsv, dtype=float)
    finite = np.isfinite(hsv[..., 0])
    h = np.where(finite, hsv[..., 0], 0.0) % 360 / 360
    s = hsv[..., 1] / 100
    v = np.where(finite, hsv[..., 2] / 100, 0.0)

    i = np.floor(h * 6)
    f = h * 6 - i
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    sector = i.astype(int) % 6
    r = np.choose(sector, [v, q, p, p, t, v])
    g = np.choose(sector, [t, v, v, q, p, p])
    b = np.choose(sector, [p, p, t, v, v, q])

    return np.clip(np.stack([r, g, b], axis=-1) * 255, 0, 255)


def np_hsv_to_hsl(hsv: NDArray) -> NDArray:
    """Vectorized: Convert HSV of shape (..., 3) to HSL of shape (..., 3)."""
    hsv = np.asarray(hsv, dtype=float)
    h, s, v = hsv[..., 0], hsv[..., 1], hsv[..., 2]

    doubled_lightness = (200 - s) * v / 100
    denom = np.where(doubled_lightness <= 100, doubled_lightness, 200 - doubled_lightness)
    achromatic = (doubled_lightness == 0) | (doubled_lightness == 200)
    saturation = np.where(
        achromatic,
        0.0,
        s * v / 100 / np.where(denom == 0, 1.0, denom) * 100,
    )

    return np.stack(
        [h % 360, np.clip(saturation, 0, 100), np.clip(doubled_lightness / 2, 0, 100)],
        axis=-1,
    )


def np_hsv_to_hwb(hsv: NDArray) -> NDArray:
    """Vectorized: Convert HSV of shape (..., 3) to HWB of shape (..., 3)."""
    hsv = np.asarray(hsv, dtype=float)
    h, s, v = hsv[..., 0], hsv[..., 1], hsv[..., 2]
    return np.stack(
        [h % 360, np.clip((100 - s) * v / 100, 0, 100), np.clip(100 - v, 0, 100)],
        axis=-1,
    )
