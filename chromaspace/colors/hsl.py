from typing import ClassVar

from ..types.model_type import ModelType
from ..types.color_types import HSL
from .color_base import ColorBase, channel_property


class HSLSpace(ColorBase):
    mode: ClassVar[ModelType] = ModelType.HSL
    record_type: ClassVar[type] = HSL

    hue = channel_property('hue')
    saturation = channel_property('saturation')
    lightness = channel_property('lightness')
