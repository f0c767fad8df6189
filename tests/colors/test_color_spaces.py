from chromaspace.colors import RGBASpace, HSLSpace, HSVSpace, HWBSpace
from chromaspace.types import ModelType, RGBA, HSL, HSV, HWB
import pytest
from ..samples import mutations_rgba, mutations_hsl, mutations_hsv, mutations_hwb


def make_rgba():
    return RGBASpace(RGBA(200, 128, 75, 1.0))


def make_hsl():
    return HSLSpace(HSL(144, 50, 75))


def make_hsv():
    return HSVSpace(HSV(144, 50, 75))


def make_hwb():
    return HWBSpace(HWB(144, 20, 30))


@pytest.mark.parametrize("factory, mutations", [
    (make_rgba, mutations_rgba),
    (make_hsl, mutations_hsl),
    (make_hsv, mutations_hsv),
    (make_hwb, mutations_hwb),
])
def test_mutators(factory, mutations):
    for (method, args), expected in mutations.items():
        color = factory()
        result = getattr(color, method)(*args)
        assert result is color
        assert color.to_string() == expected, (method, args)


def test_whiten_and_rotate_through_natural_space():
    assert HSLSpace({'hue': 144, 'saturation': 50, 'lightness': 75}).whiten(0.42).to_string() == 'hsl(144,0%,88%)'
    assert RGBASpace({'red': 200, 'green': 128, 'blue': 75, 'alpha': 1}).rotate(90).to_string() == 'rgb(86,200,76)'


def test_chaining():
    color = make_hsl().lighten(0.2).rotate(90).desaturate(10)
    assert color.to_string() == 'hsl(234,45%,90%)'


def test_mutators_keep_rgba_alpha():
    color = RGBASpace(RGBA(200, 128, 75, 0.4))
    color.lighten(0.42)
    assert color.value == RGBA(227, 191, 165, 0.4)
    color.rotate(30).whiten(0.1).grayscale()
    assert color.alpha == 0.4


def test_hue_stays_in_range():
    color = make_hsl()
    for degrees in (-1000, 359, 721, -1):
        color.rotate(degrees)
        assert 0 <= color.hue < 360


def test_channels_stay_clamped():
    for color in (make_rgba(), make_hsl(), make_hsv(), make_hwb()):
        color.saturate(1000).lighten(1000).whiten(1000).darken(-1000).blacken(1000)
        maxima = (255, 255, 255, 1.0) if color.mode is ModelType.RGB else (359, 100, 100)
        for value, top in zip(color.value, maxima):
            assert 0 <= value <= top


def test_construction_clamps():
    assert RGBASpace((300, -5, 12.6, 7)).value == RGBA(255, 0, 13, 1.0)
    assert HSLSpace((-90, 120, -1)).value == HSL(270, 100, 0)
    assert HWBSpace([720, 50, 50]).value == HWB(0, 50, 50)
    assert RGBASpace((1, 2, 3)).alpha == 1.0


def test_construction_from_other_color():
    hsl = HSLSpace(RGBASpace((200, 128, 75)))
    assert hsl.value == HSL(25, 53, 54)
    copy = RGBASpace(RGBASpace((1, 2, 3, 0.5)))
    assert copy.value == RGBA(1, 2, 3, 0.5)


def test_construction_errors():
    with pytest.raises(ValueError):
        HSLSpace((1, 2))
    with pytest.raises(KeyError):
        HSVSpace({'hue': 1, 'saturation': 2, 'lightness': 3})
    with pytest.raises(TypeError):
        HWBSpace('hwb(1,2,3)')


def test_accessors():
    color = make_hsv()
    assert color.mode is ModelType.HSV
    assert color.channels == ('hue', 'saturation', 'value')
    assert color.color('value') == 75
    assert color.brightness == 75
    assert (color.hue, color.saturation) == (144, 50)
    assert color.has_hue and not color.has_alpha

    rgba = make_rgba()
    assert (rgba.red, rgba.green, rgba.blue, rgba.alpha) == (200, 128, 75, 1.0)
    assert rgba.has_alpha and not rgba.has_hue

    hwb = make_hwb()
    assert (hwb.whiteness, hwb.blackness) == (20, 30)
    assert make_hsl().lightness == 75

    with pytest.raises(KeyError):
        color.color('lightness')


def test_set_color():
    color = make_hsl()
    assert color.set_color('hue', 360) is color
    assert color.hue == 360
    color.set_color('saturation', 150).set_color('lightness', 12.5)
    assert color.value == HSL(360, 100, 12.5)

    rgba = make_rgba().set_color('red', 255.9).set_color('alpha', -1)
    assert rgba.value == RGBA(255, 128, 75, 0.0)

    with pytest.raises(KeyError):
        color.set_color('alpha', 1)


def test_clone_is_independent():
    original = make_hsl()
    copy = original.clone()
    assert copy == original and copy is not original
    copy.lighten(0.5)
    assert original.value == HSL(144, 50, 75)
    assert copy != original


def test_serialization():
    color = make_rgba()
    assert color.to_array() == [200, 128, 75, 1.0]
    assert color.to_object() == {'red': 200, 'green': 128, 'blue': 75, 'alpha': 1.0}
    assert color.to_hex_string() == '#c8804b'
    assert color.to_hex_string(remove_hashtag=True) == 'c8804b'
    assert make_hsl().to_hex_string() == '#9fdfb9'
    assert make_hsv().to_hex_string() == '#60bf86'
    assert make_hwb().to_hex_string() == '#33b366'
    assert make_hwb().to_object() == {'hue': 144, 'whiteness': 20, 'blackness': 30}


def test_string_forms():
    assert str(make_hsl()) == 'hsl(144,50%,75%)'
    assert make_hsv().to_string() == 'hsv(144,50%,75%)'
    assert make_hwb().to_string() == 'hwb(144,20%,30%)'
    assert HSLSpace((12.34, 50.05, 7)).to_string() in ('hsl(12.3,50%,7%)', 'hsl(12.3,50.1%,7%)')
    assert make_rgba().to_string() == 'rgb(200,128,75)'
    assert make_rgba().to_string(with_alpha=True) == 'rgba(200,128,75,1)'
    assert RGBASpace((1, 2, 3, 0.25)).to_string(with_alpha=True) == 'rgba(1,2,3,0.25)'
    assert repr(make_hwb()) == 'HWBSpace(HWB(hue=144, whiteness=20, blackness=30))'


def test_equality():
    assert make_hsl() == HSLSpace((144, 50, 75))
    assert make_hsl() != HSVSpace((144, 50, 75))
    assert make_hsl() != (144, 50, 75)


def test_degenerate_hwb_lighten_zero_keeps_color():
    color = HWBSpace((0, 80, 80))
    assert color.to_hex_string() == '#808080'
    assert color.to_space('hsl').to_string() == 'hsl(0,0%,50%)'
    assert color.lighten(0).to_hex_string() == '#808080'


def test_hue_string_never_reaches_360():
    assert HSLSpace((359.96, 50, 50)).to_string() == 'hsl(0,50%,50%)'
    assert HSVSpace((359.94, 50, 50)).to_string() == 'hsv(359.9,50%,50%)'
