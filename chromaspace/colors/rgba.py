from typing import ClassVar

from ..types.model_type import ModelType, CHANNEL_MAXIMA, STRING_TEMPLATES
from ..types.color_types import RGBA
from ..utils.num_utils import clamp, round_half_up, format_number
from .color_base import ColorBase, WithAlpha, channel_property


class RGBASpace(ColorBase, WithAlpha):
    mode: ClassVar[ModelType] = ModelType.RGB
    record_type: ClassVar[type] = RGBA

    red = channel_property('red')
    green = channel_property('green')
    blue = channel_property('blue')

    @classmethod
    def _clamp(cls, record: RGBA) -> RGBA:
        *byte_maxima, alpha_max = CHANNEL_MAXIMA[cls.mode]
        red, green, blue = (
            round_half_up(clamp(c, 0, top)) for c, top in zip(record[:3], byte_maxima)
        )
        return RGBA(red, green, blue, float(clamp(record.alpha, 0.0, alpha_max)))

    def to_string(self, with_alpha: bool = False) -> str:
        """``rgb(r,g,b)``, or ``rgba(r,g,b,a)`` when ``with_alpha`` is set."""
        if with_alpha:
            red, green, blue, alpha = self._value
            return STRING_TEMPLATES['rgba'].format(red, green, blue, format_number(alpha, 3))
        return STRING_TEMPLATES['rgb'].format(*self._value[:3])
