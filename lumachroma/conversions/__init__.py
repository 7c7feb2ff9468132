"""
Lumachroma Color Space Conversions
==================================

Pure functions converting unit RGB triples to and from HSV and HSLuv, each in
a scalar form and a vectorized numpy form (``np_`` prefix).

Conversion Functions
-------------------

RGB → HSV:
    unit_rgb_to_hsv(r, g, b)
    np_unit_rgb_to_hsv(r, g, b)

HSV → RGB:
    hsv_to_unit_rgb(h, s, v)
    np_hsv_to_unit_rgb(h, s, v)

RGB → HSLuv:
    unit_rgb_to_hsluv(r, g, b)
    np_unit_rgb_to_hsluv(r, g, b)

HSLuv → RGB:
    hsluv_to_unit_rgb(h, s, l)
    np_hsluv_to_unit_rgb(h, s, l)

Gamut:
    max_chroma_for_lh(l, h)
        Largest CIELUV chroma inside sRGB at lightness l and hue h

High-Level API
-------------
    convert(color, from_space, to_space)
    np_convert(color, from_space, to_space)

Scales
------
RGB channels and HSV saturation/value are 0..1. HSLuv saturation and
lightness are 0..100. Hues are degrees in [0, 360).

Examples
--------
>>> from lumachroma.conversions import unit_rgb_to_hsluv, hsluv_to_unit_rgb
>>> h, s, l = unit_rgb_to_hsluv(1.0, 0.0, 0.0)
>>> r, g, b = hsluv_to_unit_rgb(h, s, l)
"""

from .srgb import srgb_to_linear, linear_to_srgb, np_srgb_to_linear, np_linear_to_srgb
from .to_hsv import unit_rgb_to_hsv, np_unit_rgb_to_hsv
from .to_hsluv import unit_rgb_to_hsluv, np_unit_rgb_to_hsluv
from .to_rgb import (
    hsv_to_unit_rgb,
    np_hsv_to_unit_rgb,
    hsluv_to_unit_rgb,
    np_hsluv_to_unit_rgb,
)
from .cieluv import max_chroma_for_lh, np_max_chroma_for_lh
from .wrapper import convert, np_convert

from ..types.color_types import ColorSpace

__all__ = [
    # sRGB transfer
    'srgb_to_linear',
    'linear_to_srgb',
    'np_srgb_to_linear',
    'np_linear_to_srgb',

    # RGB ↔ HSV
    'unit_rgb_to_hsv',
    'np_unit_rgb_to_hsv',
    'hsv_to_unit_rgb',
    'np_hsv_to_unit_rgb',

    # RGB ↔ HSLuv
    'unit_rgb_to_hsluv',
    'np_unit_rgb_to_hsluv',
    'hsluv_to_unit_rgb',
    'np_hsluv_to_unit_rgb',

    # Gamut
    'max_chroma_for_lh',
    'np_max_chroma_for_lh',

    # High-level API
    'convert',
    'np_convert',
    'ColorSpace',
]
