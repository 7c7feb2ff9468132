from lumachroma.conversions.to_rgb import hsv_to_unit_rgb, np_hsv_to_unit_rgb, hsluv_to_unit_rgb, np_hsluv_to_unit_rgb
import numpy as np
from ..samples import samples_rgb_hsv, samples_rgb_hsluv
import pytest

def test_hsv_to_unit_rgb():
    for (r, g, b), (h, s, v) in samples_rgb_hsv.items():
        r_out, g_out, b_out = hsv_to_unit_rgb(h, s, v)

        assert abs(r_out - r) < 1e-9
        assert abs(g_out - g) < 1e-9
        assert abs(b_out - b) < 1e-9

def test_hsv_to_unit_rgb_numpy():
    expected = np.array(list(samples_rgb_hsv.keys()))
    the_matrix = np.array(list(samples_rgb_hsv.values()))
    rgb = np_hsv_to_unit_rgb(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert np.allclose(rgb, expected, atol=1e-9)

@pytest.mark.parametrize("h", [360.0, 720.0, -360.0])
def test_hsv_hue_wraps(h):
    assert np.allclose(hsv_to_unit_rgb(h, 1.0, 1.0), (1.0, 0.0, 0.0))
    assert np.allclose(hsv_to_unit_rgb(h + 120.0, 1.0, 1.0), (0.0, 1.0, 0.0))

def test_np_hsv_to_unit_rgb_scalar_input():
    rgb = np_hsv_to_unit_rgb(240.0, 1.0, 1.0)
    assert rgb.shape == (3,)
    assert np.allclose(rgb, (0.0, 0.0, 1.0))

def test_hsluv_to_unit_rgb():
    for (r, g, b), (h, s, l) in samples_rgb_hsluv.items():
        r_out, g_out, b_out = hsluv_to_unit_rgb(h, s, l)

        assert abs(r_out - r) < 1e-4
        assert abs(g_out - g) < 1e-4
        assert abs(b_out - b) < 1e-4

def test_hsluv_lightness_extremes():
    assert hsluv_to_unit_rgb(123.0, 80.0, 0.0) == (0.0, 0.0, 0.0)
    assert np.allclose(hsluv_to_unit_rgb(123.0, 80.0, 100.0), (1.0, 1.0, 1.0))

def test_hsluv_zero_saturation_is_grey():
    r, g, b = hsluv_to_unit_rgb(200.0, 0.0, 50.0)
    assert r == pytest.approx(g, abs=1e-9)
    assert g == pytest.approx(b, abs=1e-9)

def test_hsluv_to_unit_rgb_is_clamped():
    # saturation beyond the gamut pushes channels out of [0, 1]
    r, g, b = hsluv_to_unit_rgb(250.0, 200.0, 60.0)
    for channel in (r, g, b):
        assert 0.0 <= channel <= 1.0

def test_hsluv_to_unit_rgb_numpy():
    hsluv = np.array(list(samples_rgb_hsluv.values()) + [(10.0, 50.0, 0.0), (10.0, 50.0, 100.0)])
    expected = np.array(list(samples_rgb_hsluv.keys()) + [(0.0, 0.0, 0.0), (1.0, 1.0, 1.0)])
    rgb = np_hsluv_to_unit_rgb(hsluv[..., 0], hsluv[..., 1], hsluv[..., 2])
    assert np.allclose(rgb, expected, atol=1e-4)
