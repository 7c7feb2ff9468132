"""Lumachroma: immutable RGBA colors with HSV and HSLuv manipulation."""

from .colors import Color
from .conversions import (
    unit_rgb_to_hsv,
    hsv_to_unit_rgb,
    unit_rgb_to_hsluv,
    hsluv_to_unit_rgb,
    np_unit_rgb_to_hsv,
    np_hsv_to_unit_rgb,
    np_unit_rgb_to_hsluv,
    np_hsluv_to_unit_rgb,
    max_chroma_for_lh,
    convert,
    np_convert,
)
from .types.format_type import FormatType

__all__ = [
    # core color type
    "Color",
    "FormatType",
    # conversions
    "unit_rgb_to_hsv",
    "hsv_to_unit_rgb",
    "unit_rgb_to_hsluv",
    "hsluv_to_unit_rgb",
    "np_unit_rgb_to_hsv",
    "np_hsv_to_unit_rgb",
    "np_unit_rgb_to_hsluv",
    "np_hsluv_to_unit_rgb",
    "max_chroma_for_lh",
    "convert",
    "np_convert",
]
