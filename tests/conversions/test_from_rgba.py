from chromaspace.conversions.from_rgba import (
    rgba_to_hsl,
    rgba_to_hsv,
    rgba_to_hwb,
    unit_rgb_to_hue,
    np_rgba_to_hsl,
    np_rgba_to_hsv,
    np_rgba_to_hwb,
)
from chromaspace.types import RGBA, HSL, HSV, HWB
import numpy as np
from ..samples import samples_rgb_hsl, samples_rgb_hsv, samples_rgb_hwb


def test_rgba_to_hsl():
    for rgb, expected in samples_rgb_hsl.items():
        assert rgba_to_hsl(RGBA(*rgb)) == HSL(*expected)


def test_rgba_to_hsv():
    for rgb, expected in samples_rgb_hsv.items():
        assert rgba_to_hsv(RGBA(*rgb)) == HSV(*expected)


def test_rgba_to_hwb():
    for rgb, expected in samples_rgb_hwb.items():
        assert rgba_to_hwb(RGBA(*rgb)) == HWB(*expected)


def test_rgba_to_hsl_ignores_alpha():
    assert rgba_to_hsl(RGBA(180, 33, 22, 0.1)) == rgba_to_hsl(RGBA(180, 33, 22, 1.0))


def test_achromatic_hue_is_zero():
    for gray in (0, 1, 127, 254, 255):
        assert unit_rgb_to_hue(gray / 255, gray / 255, gray / 255) == 0.0
        assert rgba_to_hsl(RGBA(gray, gray, gray)).saturation == 0
        assert rgba_to_hsv(RGBA(gray, gray, gray)).hue == 0


def test_hue_below_red_wraps():
    # red is max and blue > green: the sector is negative before wrapping
    assert rgba_to_hsl(RGBA(255, 0, 128)).hue == 330
    # 359.76 rounds to 360, stored as 0
    assert rgba_to_hsl(RGBA(255, 0, 1)).hue == 0


def test_rgba_to_hsl_numpy():
    the_matrix = np.array(list(samples_rgb_hsl.keys()))
    expected = np.array(list(samples_rgb_hsl.values()))
    result = np_rgba_to_hsl(the_matrix)
    assert result.shape == expected.shape
    assert np.allclose(result, expected, atol=1)


def test_rgba_to_hsv_numpy():
    the_matrix = np.array(list(samples_rgb_hsv.keys()))
    expected = np.array(list(samples_rgb_hsv.values()))
    assert np.allclose(np_rgba_to_hsv(the_matrix), expected, atol=1)


def test_rgba_to_hwb_numpy():
    the_matrix = np.array(list(samples_rgb_hwb.keys()))
    expected = np.array(list(samples_rgb_hwb.values()))
    assert np.allclose(np_rgba_to_hwb(the_matrix), expected, atol=1)


def test_numpy_accepts_alpha_column():
    rgba = np.array([[200, 128, 75, 0.5], [180, 33, 22, 1.0]])
    assert np.allclose(np_rgba_to_hsl(rgba), np_rgba_to_hsl(rgba[..., :3]))
