from __future__ import annotations
from collections.abc import Mapping
from typing import NamedTuple, Union
from numpy import ndarray

from .model_type import ModelType

Scalar = int | float


class RGBA(NamedTuple):
    red: int
    green: int
    blue: int
    alpha: float = 1.0


class HSL(NamedTuple):
    hue: Scalar
    saturation: Scalar
    lightness: Scalar


class HSV(NamedTuple):
    hue: Scalar
    saturation: Scalar
    value: Scalar


class HWB(NamedTuple):
    hue: Scalar
    whiteness: Scalar
    blackness: Scalar


ColorRecord = Union[RGBA, HSL, HSV, HWB]
RecordInput = Union[ColorRecord, tuple, list, Mapping, ndarray]

RECORD_TYPES: dict[ModelType, type] = {
    ModelType.RGB: RGBA,
    ModelType.HSL: HSL,
    ModelType.HSV: HSV,
    ModelType.HWB: HWB,
}

RECORD_MODELS: dict[type, ModelType] = {cls: model for model, cls in RECORD_TYPES.items()}


def record_model(record: ColorRecord) -> ModelType:
    """Return the model a record instance belongs to."""
    try:
        return RECORD_MODELS[type(record)]
    except KeyError:
        raise TypeError(f"Not a color record: {record!r}") from None


def to_record(value: RecordInput, model: ModelType) -> ColorRecord:
    """
    Build the record of ``model`` from a record, a channel sequence or a mapping.

    Args:
        value: Record instance, tuple/list/1-D array of channels in record order,
            or a mapping of channel names to values.
        model: Target model.

    Returns:
        ColorRecord: The record (``value`` itself when it already has the right type).
    """
    record_type = RECORD_TYPES[model]
    if isinstance(value, record_type):
        return value

    fields = record_type._fields
    required = [f for f in fields if f not in record_type._field_defaults]

    if isinstance(value, Mapping):
        unknown = set(value) - set(fields)
        if unknown:
            raise KeyError(f"Unknown {model.value} channel(s): {sorted(unknown)}")
        missing = [f for f in required if f not in value]
        if missing:
            raise ValueError(f"{model.value} expects channels {missing}")
        return record_type(**value)

    if isinstance(value, ndarray):
        if value.ndim != 1:
            raise ValueError(f"{model.value} expects a 1-D channel array, got shape {value.shape}")
        value = value.tolist()

    if isinstance(value, (tuple, list)):
        if not len(required) <= len(value) <= len(fields):
            raise ValueError(
                f"{model.value} expects {len(required)} to {len(fields)} channels, got {len(value)}"
            )
        return record_type(*value)

    raise TypeError(f"Cannot build a {model.value} record from {type(value).__name__}")

