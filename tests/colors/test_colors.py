from lumachroma.colors import Color
from lumachroma.types.format_type import FormatType
import numpy as np
from ..samples import samples_rgb_hsv, samples_rgb_hsluv
import pytest

def test_rgba_constructors():
    c = Color.from_rgba(0.1, 0.2, 0.3, 0.4)
    assert c == Color(0.1, 0.2, 0.3, 0.4)
    assert c.r == np.float32(0.1)
    assert c.a == np.float32(0.4)
    assert isinstance(c.r, np.float32)

    assert Color.from_rgb(0.1, 0.2, 0.3).a == 1.0

def test_channels_are_not_clamped():
    c = Color.from_rgb(1.5, -0.25, 0.5)
    assert c.rgb == (1.5, -0.25, 0.5)

def test_int_constructors():
    c = Color.from_int_rgba(255, 0, 51, 102)
    assert c.rgba == pytest.approx((1.0, 0.0, 0.2, 0.4))

    c = Color.from_int_rgb(0, 255, 0)
    assert c.rgba == (0.0, 1.0, 0.0, 1.0)

@pytest.mark.parametrize("channels", [(256, 0, 0, 0), (0, -1, 0, 0), (0, 0, 0, 300)])
def test_int_constructor_range(channels):
    with pytest.raises(ValueError):
        Color.from_int_rgba(*channels)

def test_lightness_constructors():
    assert Color.from_lightness(0.25).rgba == (0.25, 0.25, 0.25, 1.0)
    assert Color.from_lightness_alpha(0.75, 0.5).rgba == (0.75, 0.75, 0.75, 0.5)

def test_hsv_constructors():
    for rgb, hsv in samples_rgb_hsv.items():
        assert Color.from_hsv(*hsv).rgb == pytest.approx(rgb, abs=1e-6)
    assert Color.from_hsva(120.0, 1.0, 1.0, 0.25).a == 0.25

def test_hsluv_constructors():
    for rgb, hsluv in samples_rgb_hsluv.items():
        assert Color.from_hsluv(*hsluv).rgb == pytest.approx(rgb, abs=1e-4)
    c = Color.from_hsluva(0.0, 0.0, 100.0, 0.5)
    assert c.rgba == pytest.approx((1.0, 1.0, 1.0, 0.5), abs=1e-6)

def test_hue():
    assert Color.from_rgb(0.0, 1.0, 0.0).hue() == pytest.approx(120.0)
    assert Color.from_rgba(0.0, 0.0, 1.0, 0.0).hue() == pytest.approx(240.0)
    assert Color.from_lightness(0.5).hue() == 0.0

def test_to_hsv_and_hsluv():
    c = Color.from_rgb(1.0, 0.0, 0.0)
    assert c.to_hsv() == pytest.approx((0.0, 1.0, 1.0))
    assert c.to_hsluv() == pytest.approx(samples_rgb_hsluv[(1.0, 0.0, 0.0)], abs=1e-4)

def test_greyscale_is_achromatic_in_hsluv():
    for hue_probe in (Color.from_lightness(0.5), Color.from_lightness_alpha(0.5, 0.1)):
        _, s, _ = hue_probe.to_hsluv()
        assert s == pytest.approx(0.0, abs=1e-6)

def test_immutability():
    c = Color.from_rgb(0.1, 0.2, 0.3)
    with pytest.raises(AttributeError):
        c._r = 0.5
    with pytest.raises(AttributeError):
        c.extra = 1
    assert c.rgb == pytest.approx((0.1, 0.2, 0.3))

def test_equality_and_hash():
    a = Color.from_int_rgb(10, 20, 30)
    b = Color.from_int_rgb(10, 20, 30)
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    assert a != a.with_alpha(0.5)
    assert a != (10, 20, 30)

def test_with_alpha():
    c = Color.from_rgb(0.1, 0.2, 0.3)
    d = c.with_alpha(0.5)
    assert d.a == 0.5
    assert d.rgb == c.rgb
    assert c.a == 1.0

def test_iter_and_repr():
    r, g, b, a = Color.from_rgba(0.5, 0.25, 0.125, 1.0)
    assert (r, g, b, a) == (0.5, 0.25, 0.125, 1.0)
    assert repr(Color.from_rgb(0.5, 0.25, 0.125)) == "Color(r=0.5, g=0.25, b=0.125, a=1)"

def test_to_tuple_formats():
    c = Color.from_int_rgba(255, 128, 0, 255)
    assert c.to_tuple(FormatType.INT) == (255, 128, 0, 255)
    assert c.to_tuple("percentage") == pytest.approx((100.0, 50.19608, 0.0, 100.0), abs=1e-3)
    assert c.to_tuple() == pytest.approx((1.0, 128 / 255, 0.0, 1.0))

def test_to_tuple_clamps():
    c = Color.from_rgba(1.5, -0.5, 0.5, 2.0)
    assert c.to_tuple(FormatType.INT) == (255, 0, 128, 255)
    assert c.to_tuple(FormatType.FLOAT) == (1.0, 0.0, 0.5, 1.0)
