import math
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import RGBTuple
from ..types.format_type import HUE_360
from .cieluv import (
    lch_to_luv,
    luv_to_xyz,
    xyz_to_unit_rgb,
    np_lch_to_luv,
    np_luv_to_xyz,
    np_xyz_to_unit_rgb,
)
from .to_hsluv import hsluv_to_lch, np_hsluv_to_lch

# (r, g, b) as (chroma, x, 0) slots per 60 degree hue sector
_HSV_SECTORS = (
    (0, 1, 2),
    (1, 0, 2),
    (2, 0, 1),
    (2, 1, 0),
    (1, 2, 0),
    (0, 2, 1),
)


def hsv_to_unit_rgb(h: float, s: float, v: float) -> RGBTuple:
    """
    Convert HSV to unit RGB (0..1).

    Hue is wrapped into [0, 360) before the sector lookup.
    """
    h = math.fmod(h, HUE_360)
    if h < 0:
        h += HUE_360

    c = v * s
    hp = h / 60.0
    sector = int(math.floor(hp)) % 6
    x = c * (1 - abs(math.fmod(hp, 2) - 1))
    m = v - c

    slots = (c, x, 0.0)
    ri, gi, bi = _HSV_SECTORS[sector]
    return slots[ri] + m, slots[gi] + m, slots[bi] + m


def np_hsv_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized HSV to RGB.

    Args:
        h: array-like or scalar, hue in degrees
        s: array-like or scalar, [0,1] saturation
        v: array-like or scalar, [0,1] value

    Returns:
        rgb: array of shape (..., 3)
    """
    h, s, v = np.broadcast_arrays(
        np.asarray(h, dtype=float),
        np.asarray(s, dtype=float),
        np.asarray(v, dtype=float),
    )
    h = h % HUE_360

    c = v * s
    hp = h / 60.0
    sector = np.floor(hp).astype(int) % 6
    x = c * (1 - np.abs(hp % 2 - 1))
    m = v - c

    slots = np.stack([c, x, np.zeros_like(c)], axis=-1)
    order = np.array(_HSV_SECTORS)[sector]
    rgb = np.take_along_axis(slots, order, axis=-1)
    return rgb + np.asarray(m)[..., None]


def hsluv_to_unit_rgb(h: float, s: float, l: float) -> RGBTuple:
    """
    Convert HSLuv (h degrees, s and l in 0..100) to unit RGB.

    The result is clamped to [0, 1] to absorb floating point overshoot at the
    gamut boundary.
    """
    rgb = xyz_to_unit_rgb(*luv_to_xyz(*lch_to_luv(*hsluv_to_lch(h, s, l))))
    r, g, b = (max(0.0, min(1.0, channel)) for channel in rgb)
    return r, g, b


def np_hsluv_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized HSLuv to RGB.

    Returns:
        rgb: array of shape (..., 3), clamped to [0, 1]
    """
    lch = np_hsluv_to_lch(h, s, l)
    luv = np_lch_to_luv(lch[..., 0], lch[..., 1], lch[..., 2])
    xyz = np_luv_to_xyz(luv[..., 0], luv[..., 1], luv[..., 2])
    rgb = np_xyz_to_unit_rgb(xyz[..., 0], xyz[..., 1], xyz[..., 2])
    return np.clip(rgb, 0.0, 1.0)
