from chromaspace.conversions import convert, np_convert
from chromaspace.types import RGBA
import numpy as np
import pytest

# Records hold whole degrees and whole percents; one percent is 2.55 RGB
# units, so scalar round trips drift by a few units at most.
scalar_tolerance = {'hsl': 5, 'hsv': 3, 'hwb': 4}

grid = [
    (r, g, b)
    for r in range(0, 256, 15)
    for g in range(0, 256, 15)
    for b in range(0, 256, 15)
]


@pytest.mark.parametrize("space", ['hsl', 'hsv', 'hwb'])
def test_round_trip_rgb(space):
    tolerance = scalar_tolerance[space]
    for rgb in grid:
        back = convert(convert(RGBA(*rgb), 'rgb', space), space, 'rgb')
        assert max(abs(a - b) for a, b in zip(back[:3], rgb)) <= tolerance, (space, rgb, back)


def test_round_trip_hsl_hsv():
    for h in range(0, 360, 30):
        for s in range(0, 101, 10):
            for l in range(0, 101, 10):
                hsv = convert((h, s, l), 'hsl', 'hsv')
                h2, s2, l2 = convert(hsv, 'hsv', 'hsl')
                assert h2 == h
                assert abs(l2 - l) <= 1
                if 0 < l < 100:
                    assert abs(s2 - s) <= 2 or s2 == 0


@pytest.mark.parametrize("space", ['hsl', 'hsv', 'hwb'])
def test_round_trip_rgb_numpy(space):
    the_matrix = np.array(grid, dtype=float)
    back = np_convert(np_convert(the_matrix, 'rgb', space), space, 'rgb')
    assert np.allclose(back, the_matrix, atol=1e-6)
