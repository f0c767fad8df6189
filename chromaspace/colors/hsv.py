from typing import ClassVar

from ..types.model_type import ModelType
from ..types.color_types import HSV
from .color_base import ColorBase, channel_property


class HSVSpace(ColorBase):
    mode: ClassVar[ModelType] = ModelType.HSV
    record_type: ClassVar[type] = HSV

    hue = channel_property('hue')
    saturation = channel_property('saturation')
    # `value` is the whole record on ColorBase
    brightness = channel_property('value')
