import math

from ..types.model_type import HUE_360
from ..types.color_types import ColorRecord
from .num_utils import clamp, normalize_percent, round_half_up


def wrap_hue(hue: float) -> float:
    """Wrap a hue into [0, 360). Non-finite hues become 0."""
    if not math.isfinite(hue):
        return 0
    return hue % HUE_360


def rotate_hue(hue: float, degrees: float) -> float:
    """Rotate ``hue`` by ``degrees``; the result is in [0, 360)."""
    return wrap_hue(hue + degrees)


def set_channel_value(record: ColorRecord, channel: str, value: float) -> ColorRecord:
    """
    Return ``record`` with ``channel`` replaced by a clamped ``value``.

    Hue is clamped to [0, 360] and floored, RGB channels are floored into
    [0, 255], alpha is clamped to [0, 1] and every other channel to [0, 100].
    """
    if channel not in record._fields:
        raise KeyError(f"{type(record).__name__} has no channel {channel!r}")

    if channel == "hue":
        value = math.floor(clamp(value, 0, HUE_360))
    elif channel == "alpha":
        value = float(clamp(value, 0.0, 1.0))
    elif channel in ("red", "green", "blue"):
        value = math.floor(clamp(value, 0, 255))
    else:
        value = clamp(value, 0, 100)
    return record._replace(**{channel: value})


def adjust_relative_value(
    record: ColorRecord,
    channel: str,
    ratio: float,
    increase: bool = True,
) -> ColorRecord:
    """
    Move a [0, 100] channel by a fraction of its own current value.

    ``ratio`` goes through ``normalize_percent`` with negatives allowed, so
    ``0.2``, ``20`` and ``-0.2`` are all valid. The delta is rounded half-up
    and the result clamped to [0, 100].

    Args:
        record: HSL, HSV or HWB record.
        channel: Name of the channel to adjust.
        ratio: Strength relative to the current value.
        increase: Add the delta when True, subtract it otherwise.

    Returns:
        ColorRecord: New record of the same type.
    """
    if channel not in record._fields:
        raise KeyError(f"{type(record).__name__} has no channel {channel!r}")

    current = getattr(record, channel)
    delta = round_half_up(current * normalize_percent(ratio, allow_negative=True))
    adjusted = current + delta if increase else current - delta
    return record._replace(**{channel: clamp(adjusted, 0, 100)})
