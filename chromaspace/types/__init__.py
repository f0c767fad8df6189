from .model_type import (
    ModelType,
    resolve_model,
    is_hue_space,
    HUE_360,
    HUE_SPACES,
    CHANNEL_MAXIMA,
    NATURAL_SPACES,
    STRING_TEMPLATES,
    DEFAULT_MIX_WEIGHT,
    LUMA_WEIGHTS,
)
from .color_types import RGBA, HSL, HSV, HWB, ColorRecord, RECORD_TYPES, record_model, to_record
from .warning_types import ColorFallbackWarning

__all__ = [
    'ModelType',
    'resolve_model',
    'is_hue_space',
    'HUE_360',
    'HUE_SPACES',
    'CHANNEL_MAXIMA',
    'NATURAL_SPACES',
    'STRING_TEMPLATES',
    'DEFAULT_MIX_WEIGHT',
    'LUMA_WEIGHTS',
    'RGBA',
    'HSL',
    'HSV',
    'HWB',
    'ColorRecord',
    'RECORD_TYPES',
    'record_model',
    'to_record',
    'ColorFallbackWarning',
]
