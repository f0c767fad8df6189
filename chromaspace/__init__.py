"""
chromaspace
===========

Color models (RGBA, HSL, HSV, HWB), the conversions between them and a
chainable mutation API.

>>> import chromaspace
>>> chromaspace.from_hsl(144, 50, 75).whiten(0.42).to_string()
'hsl(144,0%,88%)'
"""

from .types import (
    ModelType,
    RGBA,
    HSL,
    HSV,
    HWB,
    ColorFallbackWarning,
)
from .conversions import convert, np_convert
from .utils import normalize_percent, rotate_hue
from .colors import (
    ColorBase,
    RGBASpace,
    HSLSpace,
    HSVSpace,
    HWBSpace,
    mix_rgba,
    grayscale_rgba,
    from_hex,
    from_css_color,
    from_rgb,
    from_rgba,
    from_hsl,
    from_hsv,
    from_hwb,
)

__all__ = [
    'ModelType',
    'RGBA',
    'HSL',
    'HSV',
    'HWB',
    'ColorFallbackWarning',
    'convert',
    'np_convert',
    'normalize_percent',
    'rotate_hue',
    'ColorBase',
    'RGBASpace',
    'HSLSpace',
    'HSVSpace',
    'HWBSpace',
    'mix_rgba',
    'grayscale_rgba',
    'from_hex',
    'from_css_color',
    'from_rgb',
    'from_rgba',
    'from_hsl',
    'from_hsv',
    'from_hwb',
]
