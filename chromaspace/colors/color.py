from __future__ import annotations
from typing import Optional, Union

from .color_base import ColorBase, build_registry
from .rgba import RGBASpace
from .hsl import HSLSpace
from .hsv import HSVSpace
from .hwb import HWBSpace
from ..conversions import convert
from ..types.model_type import ModelType, resolve_model

model_to_class: dict[ModelType, type[ColorBase]] = build_registry(
    RGBASpace,
    HSLSpace,
    HSVSpace,
    HWBSpace,
)


def get_color_class(space: Union[ModelType, str]) -> type[ColorBase]:
    return model_to_class[resolve_model(space)]


def color_to_space(self: ColorBase, target: Union[ModelType, str]) -> Optional[ColorBase]:
    """
    Convert this color into a new instance of another model.

    Args:
        target: Target model ("rgb", "hsl", "hsv", "hwb" or a ModelType)

    Returns:
        A new color of the target model, or None when ``target`` is this
        color's own model (use ``clone()`` for a copy).
    """
    target_model = resolve_model(target)
    if target_model is self.mode:
        return None
    cls = model_to_class[target_model]
    return cls(convert(self.value, self.mode, target_model))


ColorBase.to_space = color_to_space
