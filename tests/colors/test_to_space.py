from chromaspace.colors import RGBASpace, HSLSpace, HSVSpace, HWBSpace, get_color_class
from chromaspace.types import ModelType, RGBA, HSL, HSV, HWB
import pytest


def test_to_space_builds_new_variant():
    rgba = RGBASpace((180, 33, 22))
    hsl = rgba.to_space('hsl')
    assert isinstance(hsl, HSLSpace)
    assert hsl.value == HSL(4, 78, 40)
    assert rgba.to_space(ModelType.HSV).value == HSV(4, 88, 71)
    assert rgba.to_space('HWB').value == HWB(4, 9, 29)


def test_to_space_from_hue_models():
    assert HSLSpace((180, 50, 55)).to_space('rgb').value == RGBA(83, 198, 198, 1.0)
    assert HSVSpace((180, 58, 78)).to_space('hsl').value == HSL(180, 51, 55)
    assert HWBSpace((180, 33, 22)).to_space('hsv').value == HSV(180, 58, 78)


def test_to_space_same_model_is_none():
    assert RGBASpace((1, 2, 3)).to_space('rgb') is None
    assert RGBASpace((1, 2, 3)).to_space('rgba') is None
    assert HWBSpace((1, 2, 3)).to_space(ModelType.HWB) is None


def test_to_space_does_not_touch_source():
    hsl = HSLSpace((144, 50, 75))
    rgba = hsl.to_space('rgb')
    rgba.lighten(0.5)
    assert hsl.value == HSL(144, 50, 75)


def test_to_space_unknown_model():
    with pytest.raises(ValueError, match='Unknown space'):
        RGBASpace((1, 2, 3)).to_space('lab')


def test_get_color_class():
    assert get_color_class('hsl') is HSLSpace
    assert get_color_class(ModelType.RGB) is RGBASpace
