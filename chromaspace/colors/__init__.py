"""
Chromaspace Color Classes
=========================

Mutable color values in four models, each owning one record:

    - RGBASpace: red, green, blue in [0, 255] and alpha in [0, 1]
    - HSLSpace: hue, saturation, lightness
    - HSVSpace: hue, saturation, value
    - HWBSpace: hue, whiteness, blackness

Mutators (lighten, darken, saturate, desaturate, whiten, blacken, rotate,
mix, grayscale) work in whichever model the operation is defined in and
store the result back in the color's own model. They return the color, so
calls chain.

Usage
-----
>>> from chromaspace.colors import RGBASpace, from_hex
>>> color = RGBASpace((200, 128, 75))
>>> color.rotate(90).to_string()
'rgb(86,200,76)'
>>> from_hex("#30e57f").to_space("hsl").to_string()
'hsl(146,78%,54%)'
>>> RGBASpace((200, 128, 75)).fade(0.5).to_string(with_alpha=True)
'rgba(200,128,75,0.5)'

Ratios
------
Strengths accept a fraction (0.42) or a percent (42). Lighten, darken and
the other relative mutators move a channel by that share of its *current*
value.
"""

from .color_base import ColorBase, WithAlpha
from .rgba import RGBASpace
from .hsl import HSLSpace
from .hsv import HSVSpace
from .hwb import HWBSpace
from .color import color_to_space, get_color_class, model_to_class
from .mixing import mix_rgba, grayscale_rgba
from .factory import from_hex, from_css_color, from_rgb, from_rgba, from_hsl, from_hsv, from_hwb

__all__ = [
    'ColorBase',
    'WithAlpha',
    'RGBASpace',
    'HSLSpace',
    'HSVSpace',
    'HWBSpace',
    'color_to_space',
    'get_color_class',
    'model_to_class',
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
