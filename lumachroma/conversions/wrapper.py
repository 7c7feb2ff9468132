import numpy as np
from typing import Callable, Dict, Tuple

from ..types.color_types import ColorSpace, ColorTriple, split_channels
from .to_hsv import unit_rgb_to_hsv, np_unit_rgb_to_hsv
from .to_hsluv import unit_rgb_to_hsluv, np_unit_rgb_to_hsluv
from .to_rgb import (
    hsv_to_unit_rgb,
    hsluv_to_unit_rgb,
    np_hsv_to_unit_rgb,
    np_hsluv_to_unit_rgb,
)

ScalarConversion = Callable[[float, float, float], ColorTriple]
NumpyConversion = Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]

# Direct conversions; anything else goes through rgb
CONVERT_SCALAR: Dict[Tuple[str, str], ScalarConversion] = {
    ("rgb", "hsv"): unit_rgb_to_hsv,
    ("hsv", "rgb"): hsv_to_unit_rgb,
    ("rgb", "hsluv"): unit_rgb_to_hsluv,
    ("hsluv", "rgb"): hsluv_to_unit_rgb,
}

CONVERT_NUMPY: Dict[Tuple[str, str], NumpyConversion] = {
    ("rgb", "hsv"): np_unit_rgb_to_hsv,
    ("hsv", "rgb"): np_hsv_to_unit_rgb,
    ("rgb", "hsluv"): np_unit_rgb_to_hsluv,
    ("hsluv", "rgb"): np_hsluv_to_unit_rgb,
}

SPACES = ("rgb", "hsv", "hsluv")


def _route(from_space: str, to_space: str) -> Tuple[Tuple[str, str], ...]:
    for space in (from_space, to_space):
        if space not in SPACES:
            raise ValueError(f"Unknown space: {space}")
    if from_space == to_space:
        return ()
    if (from_space, to_space) in CONVERT_SCALAR:
        return ((from_space, to_space),)
    return ((from_space, "rgb"), ("rgb", to_space))


def convert(
    color: ColorTriple,
    from_space: ColorSpace,
    to_space: ColorSpace,
) -> ColorTriple:
    """
    Convert a single unit-scale triple between "rgb", "hsv" and "hsluv".

    RGB and HSV channels are on a 0..1 scale (hue in degrees); HSLuv uses
    0..100 for saturation and lightness.
    """
    a, b, c = color
    for key in _route(from_space.lower(), to_space.lower()):
        a, b, c = CONVERT_SCALAR[key](a, b, c)
    return a, b, c


def np_convert(
    color: np.ndarray,
    from_space: ColorSpace,
    to_space: ColorSpace,
) -> np.ndarray:
    """Vectorized :func:`convert` over an array of shape (..., 3)."""
    color = np.asarray(color, dtype=float)
    if color.shape[-1] != 3:
        raise ValueError(f"Expected last dimension to be 3, got shape {color.shape}")
    for key in _route(from_space.lower(), to_space.lower()):
        color = CONVERT_NUMPY[key](*split_channels(color))
    return color
