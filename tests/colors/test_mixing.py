from chromaspace.colors import mix_rgba, grayscale_rgba, RGBASpace, HSLSpace, HWBSpace
from chromaspace.types import RGBA, HSL, HWB
import numpy as np
import pytest

WHITE = RGBA(255, 255, 255, 1.0)
BLACK = RGBA(0, 0, 0, 1.0)


def test_mix_white_and_black():
    assert mix_rgba(WHITE, BLACK, 0.5) == RGBA(128, 128, 128, 1.0)
    assert mix_rgba(WHITE, BLACK) == RGBA(128, 128, 128, 1.0)


def test_mix_weight_extremes():
    base = RGBA(200, 128, 75, 1.0)
    other = RGBA(255, 255, 0, 1.0)
    assert mix_rgba(base, other, 0) == base
    assert mix_rgba(base, other, 1) == other
    assert mix_rgba(base, other, 100) == other
    assert mix_rgba(base, other, 69) == mix_rgba(base, other, 0.69)


def test_mix_alpha_weighting():
    base = RGBA(200, 128, 75, 0.5)
    other = RGBA(255, 255, 0, 1.0)
    assert mix_rgba(base, other, 0.5) == RGBA(241, 223, 19, 0.75)


def test_mix_opposite_alpha_extremes():
    # w * a == -1 keeps the plain weight
    base = RGBA(200, 128, 75, 0.0)
    other = RGBA(255, 255, 0, 1.0)
    assert mix_rgba(base, other, 0) == RGBA(200, 128, 75, 0.0)


def test_grayscale_keeps_alpha():
    assert grayscale_rgba(RGBA(200, 128, 75, 0.3)) == RGBA(143, 143, 143, 0.3)
    assert grayscale_rgba(WHITE) == WHITE
    assert grayscale_rgba(BLACK) == BLACK


def test_color_mix_accepts_any_model():
    expected = RGBASpace((200, 128, 75)).mix((255, 255, 0, 1.0)).value
    assert RGBASpace((200, 128, 75)).mix(RGBASpace((255, 255, 0))).value == expected
    assert RGBASpace((200, 128, 75)).mix(HSL(60, 100, 50)).value == expected
    assert RGBASpace((200, 128, 75)).mix(HWBSpace((60, 0, 0))).value == expected
    assert RGBASpace((200, 128, 75)).mix({'red': 255, 'green': 255, 'blue': 0}).value == expected


def test_hsl_mix_with_hsl_record():
    color = HSLSpace((144, 50, 75)).mix(HSL(270, 64, 40))
    assert color.to_string() == 'hsl(241,23%,60%)'


def test_mix_rejects_unknown_input():
    with pytest.raises(TypeError):
        RGBASpace((1, 2, 3)).mix('yellow')


def test_hue_model_mix_reads_plain_channels_in_own_model():
    expected = HSLSpace((144, 50, 75)).mix(HSL(270, 64, 40)).to_string()
    assert HSLSpace((144, 50, 75)).mix((270, 64, 40)).to_string() == expected
    assert HSLSpace((144, 50, 75)).mix([270, 64, 40]).to_string() == expected
    assert HSLSpace((144, 50, 75)).mix(
        {'hue': 270, 'saturation': 64, 'lightness': 40}
    ).to_string() == expected
    assert HSLSpace((144, 50, 75)).mix(np.array([270, 64, 40])).to_string() == expected


def test_rgba_mix_accepts_channel_array():
    expected = RGBASpace((200, 128, 75)).mix((255, 255, 0)).value
    assert RGBASpace((200, 128, 75)).mix(np.array([255, 255, 0])).value == expected
