from typing import ClassVar

from ..types.model_type import ModelType
from ..types.color_types import HWB
from .color_base import ColorBase, channel_property


class HWBSpace(ColorBase):
    """HWB color. Whiteness plus blackness may exceed 100; such colors render as gray."""
    mode: ClassVar[ModelType] = ModelType.HWB
    record_type: ClassVar[type] = HWB

    hue = channel_property('hue')
    whiteness = channel_property('whiteness')
    blackness = channel_property('blackness')
