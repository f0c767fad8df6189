"""
Chromaspace Color Model Conversions
===================================

Converters between the four channel-set models, each with a scalar and a
vectorized (numpy) form.

Conventions
-----------
- RGB channels in [0, 255], alpha in [0, 1]
- Hue in degrees [0, 360)
- Saturation, lightness, value, whiteness, blackness in [0, 100]

Scalar converters take and return records (``RGBA``, ``HSL``, ``HSV``,
``HWB``). Their outputs are rounded half-up to integers and clamped.
Vectorized converters take arrays of shape (..., 3) and return unrounded
float arrays.

Conversion Functions
--------------------

RGBA → HSL / HSV / HWB:
    rgba_to_hsl, rgba_to_hsv, rgba_to_hwb
    np_rgba_to_hsl, np_rgba_to_hsv, np_rgba_to_hwb

HSL → RGBA / HSV / HWB:
    hsl_to_rgba, hsl_to_hsv, hsl_to_hwb
    np_hsl_to_rgba, np_hsl_to_hsv, np_hsl_to_hwb

HSV → RGBA / HSL / HWB:
    hsv_to_rgba, hsv_to_hsl, hsv_to_hwb
    np_hsv_to_rgba, np_hsv_to_hsl, np_hsv_to_hwb

HWB → RGBA / HSL / HSV:
    hwb_to_rgba, hwb_to_hsl, hwb_to_hsv
    np_hwb_to_rgba, np_hwb_to_hsl, np_hwb_to_hsv

Hex and named colors:
    hex_to_rgba, rgba_to_hex, css_name_to_rgba

High-Level API
--------------
    convert(color, from_space, to_space)
    np_convert(color, from_space, to_space, rounded=False)

Examples
--------
>>> from chromaspace.conversions import convert, hex_to_rgba
>>> convert(hex_to_rgba("#30e57f"), "rgb", "hsl")
HSL(hue=146, saturation=78, lightness=54)
>>> import numpy as np
>>> from chromaspace.conversions import np_convert
>>> np_convert(np.array([[255, 0, 0], [0, 0, 255]]), "rgb", "hsv", rounded=True)
array([[  0., 100., 100.],
       [240., 100., 100.]])
"""

from .from_rgba import (
    rgba_to_hsl,
    rgba_to_hsv,
    rgba_to_hwb,
    np_rgba_to_hsl,
    np_rgba_to_hsv,
    np_rgba_to_hwb,
)
from .from_hsl import (
    hsl_to_rgba,
    hsl_to_hsv,
    hsl_to_hwb,
    np_hsl_to_rgba,
    np_hsl_to_hsv,
    np_hsl_to_hwb,
)
from .from_hsv import (
    hsv_to_rgba,
    hsv_to_hsl,
    hsv_to_hwb,
    np_hsv_to_rgba,
    np_hsv_to_hsl,
    np_hsv_to_hwb,
)
from .from_hwb import (
    hwb_to_rgba,
    hwb_to_hsl,
    hwb_to_hsv,
    np_hwb_to_rgba,
    np_hwb_to_hsl,
    np_hwb_to_hsv,
)
from .hex import hex_to_rgba, rgba_to_hex, css_name_to_rgba

# High-level API
from .wrapper import convert, np_convert, CONVERTERS, CONVERT_NUMPY

from ..types.model_type import ModelType

__all__ = [
    'rgba_to_hsl',
    'rgba_to_hsv',
    'rgba_to_hwb',
    'np_rgba_to_hsl',
    'np_rgba_to_hsv',
    'np_rgba_to_hwb',

    'hsl_to_rgba',
    'hsl_to_hsv',
    'hsl_to_hwb',
    'np_hsl_to_rgba',
    'np_hsl_to_hsv',
    'np_hsl_to_hwb',

    'hsv_to_rgba',
    'hsv_to_hsl',
    'hsv_to_hwb',
    'np_hsv_to_rgba',
    'np_hsv_to_hsl',
    'np_hsv_to_hwb',

    'hwb_to_rgba',
    'hwb_to_hsl',
    'hwb_to_hsv',
    'np_hwb_to_rgba',
    'np_hwb_to_hsl',
    'np_hwb_to_hsv',

    'hex_to_rgba',
    'rgba_to_hex',
    'css_name_to_rgba',

    'convert',
    'np_convert',
    'CONVERTERS',
    'CONVERT_NUMPY',
    'ModelType',
]
