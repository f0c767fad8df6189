from ..conversions import hex_to_rgba, css_name_to_rgba
from ..types.color_types import RGBA, HSL, HSV, HWB
from .rgba import RGBASpace
from .hsl import HSLSpace
from .hsv import HSVSpace
from .hwb import HWBSpace


def from_hex(hex_string: str) -> RGBASpace:
    """RGBA color from ``#rrggbb`` or ``#rgb``. Invalid strings give black with a warning."""
    return RGBASpace(hex_to_rgba(hex_string))


def from_css_color(name: str) -> RGBASpace:
    """RGBA color from a CSS color name. Unknown names give black with a warning."""
    return RGBASpace(css_name_to_rgba(name))


def from_rgb(red: int, green: int, blue: int) -> RGBASpace:
    return RGBASpace(RGBA(red, green, blue, 1.0))


def from_rgba(red: int, green: int, blue: int, alpha: float = 1.0) -> RGBASpace:
    return RGBASpace(RGBA(red, green, blue, alpha))


def from_hsl(hue: float, saturation: float, lightness: float) -> HSLSpace:
    return HSLSpace(HSL(hue, saturation, lightness))


def from_hsv(hue: float, saturation: float, value: float) -> HSVSpace:
    return HSVSpace(HSV(hue, saturation, value))


def from_hwb(hue: float, whiteness: float, blackness: float) -> HWBSpace:
    return HWBSpace(HWB(hue, whiteness, blackness))
