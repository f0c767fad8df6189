import math

from ..types.color_types import RGBA
from ..types.model_type import DEFAULT_MIX_WEIGHT, LUMA_WEIGHTS
from ..utils.num_utils import clamp, normalize_percent, round_half_up


def mix_rgba(base: RGBA, additive: RGBA, weight: float = DEFAULT_MIX_WEIGHT) -> RGBA:
    """
    Blend ``additive`` into ``base``, Sass ``mix()`` style.

    The channel weights are skewed by the alpha difference of the two colors,
    so a more opaque color pulls harder. Alpha itself is blended linearly.

    Args:
        base: Color being mixed into
        additive: Color mixed in
        weight: Share of ``additive``, as a fraction or a percent

    Returns:
        RGBA: The mixed color
    """
    p = normalize_percent(weight)
    w = 2 * p - 1
    a = additive.alpha - base.alpha

    skewed = w if w * a == -1 else (w + a) / (1 + w * a)
    w1 = (skewed + 1) / 2
    w2 = 1 - w1

    red, green, blue = (
        clamp(round_half_up(w1 * add + w2 * own), 0, 255)
        for add, own in zip(additive[:3], base[:3])
    )
    alpha = clamp(additive.alpha * p + base.alpha * (1 - p), 0.0, 1.0)
    return RGBA(red, green, blue, alpha)


def grayscale_rgba(color: RGBA) -> RGBA:
    """Replace every RGB channel by the floored luma. Alpha is kept."""
    wr, wg, wb = LUMA_WEIGHTS
    luma = math.floor(color.red * wr + color.green * wg + color.blue * wb)
    return color._replace(red=luma, green=luma, blue=luma)
