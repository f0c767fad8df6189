import numpy as np
from typing import Callable

from ..types.model_type import ModelType, HUE_SPACES, CHANNEL_MAXIMA, resolve_model
from ..types.color_types import ColorRecord, RecordInput, to_record
from ..utils.num_utils import clamp

from .from_rgba import rgba_to_hsl, rgba_to_hsv, rgba_to_hwb, np_rgba_to_hsl, np_rgba_to_hsv, np_rgba_to_hwb
from .from_hsl import hsl_to_rgba, hsl_to_hsv, hsl_to_hwb, np_hsl_to_rgba, np_hsl_to_hsv, np_hsl_to_hwb
from .from_hsv import hsv_to_rgba, hsv_to_hsl, hsv_to_hwb, np_hsv_to_rgba, np_hsv_to_hsl, np_hsv_to_hwb
from .from_hwb import hwb_to_rgba, hwb_to_hsl, hwb_to_hsv, np_hwb_to_rgba, np_hwb_to_hsl, np_hwb_to_hsv

RGB, HSL, HSV, HWB = ModelType.RGB, ModelType.HSL, ModelType.HSV, ModelType.HWB

CONVERTERS: dict[tuple[ModelType, ModelType], Callable[[ColorRecord], ColorRecord]] = {
    (RGB, HSL): rgba_to_hsl,
    (RGB, HSV): rgba_to_hsv,
    (RGB, HWB): rgba_to_hwb,
    (HSL, RGB): hsl_to_rgba,
    (HSL, HSV): hsl_to_hsv,
    (HSL, HWB): hsl_to_hwb,
    (HSV, RGB): hsv_to_rgba,
    (HSV, HSL): hsv_to_hsl,
    (HSV, HWB): hsv_to_hwb,
    (HWB, RGB): hwb_to_rgba,
    (HWB, HSL): hwb_to_hsl,
    (HWB, HSV): hwb_to_hsv,
}

CONVERT_NUMPY: dict[tuple[ModelType, ModelType], Callable[[np.ndarray], np.ndarray]] = {
    (RGB, HSL): np_rgba_to_hsl,
    (RGB, HSV): np_rgba_to_hsv,
    (RGB, HWB): np_rgba_to_hwb,
    (HSL, RGB): np_hsl_to_rgba,
    (HSL, HSV): np_hsl_to_hsv,
    (HSL, HWB): np_hsl_to_hwb,
    (HSV, RGB): np_hsv_to_rgba,
    (HSV, HSL): np_hsv_to_hsl,
    (HSV, HWB): np_hsv_to_hwb,
    (HWB, RGB): np_hwb_to_rgba,
    (HWB, HSL): np_hwb_to_hsl,
    (HWB, HSV): np_hwb_to_hsv,
}


def _clamp_channels(record: ColorRecord, model: ModelType) -> ColorRecord:
    # Hue is left to the converters, which wrap it.
    maxima = CHANNEL_MAXIMA[model]
    start = 1 if model in HUE_SPACES else 0
    return record._replace(**{
        field: clamp(record[i], 0, maxima[i])
        for i, field in enumerate(record._fields) if i >= start
    })


def convert(color: RecordInput, from_space, to_space) -> ColorRecord:
    """
    Convert one color between models.

    Args:
        color: Record, channel sequence or channel mapping of ``from_space``
        from_space: Source model ("rgb", "hsl", "hsv", "hwb" or a ModelType)
        to_space: Target model

    Returns:
        ColorRecord: Record of ``to_space``; the source record itself when both
        models are the same. Out-of-range source channels are clamped first.
    """
    source = resolve_model(from_space)
    target = resolve_model(to_space)
    record = to_record(color, source)
    if source is target:
        return record
    return CONVERTERS[(source, target)](_clamp_channels(record, source))


def np_convert(
    color: np.ndarray,
    from_space,
    to_space,
    rounded: bool = False,
) -> np.ndarray:
    """
    Vectorized ``convert``.

    Args:
        color: Array of shape (..., 3). RGB input may carry a fourth alpha
            channel, which is passed through untouched.
        from_space: Source model
        to_space: Target model
        rounded: Round channels half-up (hue wrapped back into [0, 360))

    Returns:
        Float array of shape (..., 3), or (..., 4) when alpha was given.
    """
    source = resolve_model(from_space)
    target = resolve_model(to_space)
    arr = np.asarray(color, dtype=float)

    allowed = (3, 4) if source is RGB else (3,)
    if arr.ndim == 0 or arr.shape[-1] not in allowed:
        raise ValueError(
            f"{source.value} expects last dimension in {allowed}, got shape {arr.shape}"
        )

    alpha = arr[..., 3] if arr.shape[-1] == 4 else None
    base = arr[..., :3]

    if source is target:
        out = base.copy()
    else:
        out = CONVERT_NUMPY[(source, target)](base)

    if rounded:
        out = np.floor(out + 0.5)
        if target in HUE_SPACES:
            out[..., 0] = out[..., 0] % 360

    if alpha is not None:
        return np.concatenate([out, alpha[..., None]], axis=-1)
    return out
