from __future__ import annotations
from abc import ABC
from collections.abc import Mapping
from typing import Callable, ClassVar, Optional, Self, Union
from numpy import ndarray

from ..conversions import convert, hex_to_rgba, rgba_to_hex, css_name_to_rgba
from ..types.model_type import (
    ModelType,
    HUE_SPACES,
    CHANNEL_MAXIMA,
    NATURAL_SPACES,
    STRING_TEMPLATES,
    DEFAULT_MIX_WEIGHT,
)
from ..types.color_types import RGBA, ColorRecord, RecordInput, record_model, to_record
from ..utils.num_utils import clamp, normalize_percent, format_number
from ..utils.hue_utils import wrap_hue, rotate_hue, set_channel_value, adjust_relative_value
from .mixing import mix_rgba, grayscale_rgba


class ColorBase:
    """
    A color in one model, owning exactly one record.

    Mutators convert the record into the model the operation is defined in,
    adjust it, convert back and store the clamped result. They return ``self``
    so calls chain::

        HSLSpace((144, 50, 75)).lighten(0.2).rotate(90).to_string()
    """
    __slots__ = ('_value',)

    mode: ClassVar[ModelType]
    record_type: ClassVar[type]
    to_space: Callable[[ColorBase, Union[ModelType, str]], Optional[ColorBase]]

    def __init__(self, value: Union[RecordInput, ColorBase]) -> None:
        if isinstance(value, ColorBase):
            record = convert(value.value, value.mode, self.mode)
        else:
            record = to_record(value, self.mode)
        self._value = self._clamp(record)

    @classmethod
    def _clamp(cls, record: ColorRecord) -> ColorRecord:
        _, first_max, second_max = CHANNEL_MAXIMA[cls.mode]
        hue, first, second = record
        return record._replace(
            hue=wrap_hue(hue),
            **{
                record._fields[1]: clamp(first, 0, first_max),
                record._fields[2]: clamp(second, 0, second_max),
            },
        )

    @classmethod
    def from_hex(cls, hex_string: str) -> Self:
        """Build this variant from a ``#rrggbb`` / ``#rgb`` string; invalid input gives black."""
        return cls(convert(hex_to_rgba(hex_string), ModelType.RGB, cls.mode))

    @classmethod
    def from_css_color(cls, name: str) -> Self:
        """Build this variant from a CSS color name; unknown names give black."""
        return cls(convert(css_name_to_rgba(name), ModelType.RGB, cls.mode))

    # ------------------ ACCESSORS ------------------
    @property
    def value(self) -> ColorRecord:
        return self._value

    @property
    def channels(self) -> tuple[str, ...]:
        return self.record_type._fields

    @property
    def has_alpha(self) -> bool:
        """Check if this color space includes an alpha channel."""
        return 'alpha' in self.channels

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return self.mode in HUE_SPACES

    def color(self, channel: str):
        if channel not in self.channels:
            raise KeyError(f"{self.mode.value} has no channel {channel!r}")
        return getattr(self._value, channel)

    def set_color(self, channel: str, value: float) -> Self:
        self._value = set_channel_value(self._value, channel, value)
        return self

    # ------------------ MUTATORS ------------------
    def _natural(self, operation: str) -> tuple[ModelType, ColorRecord]:
        space = NATURAL_SPACES[operation]
        return space, convert(self._value, self.mode, space)

    def _store(self, record: ColorRecord, space: ModelType) -> Self:
        result = convert(record, space, self.mode)
        if self.mode is ModelType.RGB and space is not ModelType.RGB:
            # hue models carry no alpha
            result = result._replace(alpha=self._value.alpha)
        self._value = self._clamp(result)
        return self

    def _adjust(self, operation: str, channel: str, ratio: float, increase: bool) -> Self:
        space, record = self._natural(operation)
        return self._store(adjust_relative_value(record, channel, ratio, increase), space)

    def lighten(self, ratio: float) -> Self:
        return self._adjust('lighten', 'lightness', ratio, True)

    def darken(self, ratio: float) -> Self:
        return self._adjust('darken', 'lightness', ratio, False)

    def saturate(self, ratio: float) -> Self:
        return self._adjust('saturate', 'saturation', ratio, True)

    def desaturate(self, ratio: float) -> Self:
        return self._adjust('desaturate', 'saturation', ratio, False)

    def whiten(self, ratio: float) -> Self:
        return self._adjust('whiten', 'whiteness', ratio, True)

    def blacken(self, ratio: float) -> Self:
        return self._adjust('blacken', 'blackness', ratio, True)

    def rotate(self, degrees: float) -> Self:
        """Rotate the hue by ``degrees`` (negative turns the other way)."""
        space, record = self._natural('rotate')
        return self._store(record._replace(hue=rotate_hue(record.hue, degrees)), space)

    def grayscale(self) -> Self:
        space, record = self._natural('grayscale')
        return self._store(grayscale_rgba(record), space)

    def mix(self, color: Union[ColorBase, RecordInput], weight: float = DEFAULT_MIX_WEIGHT) -> Self:
        """
        Mix another color into this one.

        Args:
            color: A ColorBase, a record of any model, or channels of this
                color's own model (tuple, list, 1-D array or mapping)
            weight: Share of ``color`` in the result, fraction or percent

        Returns:
            Self: this color, mutated
        """
        space, base = self._natural('mix')
        return self._store(mix_rgba(base, _as_rgba(color, self.mode), weight), space)

    # ------------------ OUTPUT ------------------
    def clone(self) -> Self:
        return self.__class__(self._value)

    def to_array(self) -> list:
        return list(self._value)

    def to_object(self) -> dict:
        return dict(self._value._asdict())

    def to_hex_string(self, remove_hashtag: bool = False) -> str:
        return rgba_to_hex(convert(self._value, self.mode, ModelType.RGB), remove_hashtag)

    def to_string(self) -> str:
        template = STRING_TEMPLATES[self.mode.value]
        hue, first, second = self._value
        # 359.96 displays as 0, not 360
        hue = wrap_hue(round(hue, 1))
        return template.format(*(format_number(c) for c in (hue, first, second)))

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return self.mode is other.mode and self._value == other._value

    __hash__ = None  # mutable


def _as_rgba(color, mode: ModelType) -> RGBA:
    """RGBA of ``color``; plain channels are read in ``mode``."""
    if isinstance(color, ColorBase):
        return convert(color.value, color.mode, ModelType.RGB)
    if isinstance(color, tuple) and hasattr(color, '_fields'):
        return convert(color, record_model(color), ModelType.RGB)
    if isinstance(color, (tuple, list, Mapping, ndarray)):
        return convert(to_record(color, mode), mode, ModelType.RGB)
    raise TypeError(f"Cannot mix with {type(color).__name__}")


def channel_property(name: str) -> property:
    return property(lambda self: getattr(self._value, name), doc=f"The {name} channel.")


class WithAlpha(ABC):
    """
    Mixin for a ColorBase subclass whose record carries an alpha channel.

    Alpha is a fraction in [0, 1]; ``fade``/``fill`` take a ratio (fraction or
    percent) relative to the current alpha.
    """
    __slots__ = ()

    _value: RGBA

    @property
    def alpha(self) -> float:
        return self._value.alpha

    def _set_alpha(self, alpha: float) -> Self:
        self._value = self._value._replace(alpha=float(clamp(alpha, 0.0, 1.0)))
        return self

    def fade(self, ratio: float) -> Self:
        """Lower the alpha by ``ratio`` of its current value."""
        alpha = self._value.alpha
        return self._set_alpha(alpha - alpha * normalize_percent(ratio))

    def fill(self, ratio: float) -> Self:
        """Raise the alpha by ``ratio`` of its current value."""
        alpha = self._value.alpha
        return self._set_alpha(alpha + alpha * normalize_percent(ratio))

    def set_opacity(self, percent: float) -> Self:
        return self._set_alpha(normalize_percent(percent))


def build_registry(*classes: type[ColorBase]) -> dict[ModelType, type[ColorBase]]:
    return {cls.mode: cls for cls in classes}
