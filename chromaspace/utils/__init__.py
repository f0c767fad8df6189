from .num_utils import clamp, round_half_up, unit_to_byte, normalize_percent, format_number, is_close_to_int
from .hue_utils import wrap_hue, rotate_hue, set_channel_value, adjust_relative_value

__all__ = [
    'clamp',
    'round_half_up',
    'unit_to_byte',
    'normalize_percent',
    'format_number',
    'is_close_to_int',
    'wrap_hue',
    'rotate_hue',
    'set_channel_value',
    'adjust_relative_value',
]
