import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import ColorTriple, HSLuvTuple
from .cieluv import (
    L_MAX,
    L_MIN,
    max_chroma_for_lh,
    np_max_chroma_for_lh,
    unit_rgb_to_xyz,
    xyz_to_luv,
    luv_to_lch,
    np_unit_rgb_to_xyz,
    np_xyz_to_luv,
    np_luv_to_lch,
)


def lch_to_hsluv(l: float, c: float, h: float) -> HSLuvTuple:
    """LCh(uv) to HSLuv; saturation is chroma as a percentage of the gamut maximum."""
    if l > L_MAX:
        return h, 0.0, 100.0
    if l < L_MIN:
        return h, 0.0, 0.0

    return h, c / max_chroma_for_lh(l, h) * 100, l


def hsluv_to_lch(h: float, s: float, l: float) -> ColorTriple:
    """HSLuv to LCh(uv)."""
    if l > L_MAX:
        return 100.0, 0.0, h
    if l < L_MIN:
        return 0.0, 0.0, h

    return l, max_chroma_for_lh(l, h) / 100 * s, h


def unit_rgb_to_hsluv(r: float, g: float, b: float) -> HSLuvTuple:
    """
    Convert unit RGB (0..1) to HSLuv.

    Returns:
        h in [0, 360), s and l in [0, 100].
    """
    l, c, h = luv_to_lch(*xyz_to_luv(*unit_rgb_to_xyz(r, g, b)))
    return lch_to_hsluv(l, c, h)


def np_lch_to_hsluv(l: NDArray, c: NDArray, h: NDArray) -> NDArray:
    l, c, h = np.broadcast_arrays(
        np.asarray(l, dtype=float),
        np.asarray(c, dtype=float),
        np.asarray(h, dtype=float),
    )
    in_range = (l <= L_MAX) & (l >= L_MIN)
    max_chroma = np.where(in_range, np_max_chroma_for_lh(l, h), 1.0)

    s = np.where(in_range, c / max_chroma * 100, 0.0)
    l_out = np.where(l > L_MAX, 100.0, np.where(l < L_MIN, 0.0, l))
    return np.stack([h, s, l_out], axis=-1)


def np_hsluv_to_lch(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    h, s, l = np.broadcast_arrays(
        np.asarray(h, dtype=float),
        np.asarray(s, dtype=float),
        np.asarray(l, dtype=float),
    )
    in_range = (l <= L_MAX) & (l >= L_MIN)
    max_chroma = np.where(in_range, np_max_chroma_for_lh(l, h), 0.0)

    c = np.where(in_range, max_chroma / 100 * s, 0.0)
    l_out = np.where(l > L_MAX, 100.0, np.where(l < L_MIN, 0.0, l))
    return np.stack([l_out, c, h], axis=-1)


def np_unit_rgb_to_hsluv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized RGB to HSLuv.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsluv: array of shape (..., 3): (hue [0,360), saturation [0,100], lightness [0,100])
    """
    xyz = np_unit_rgb_to_xyz(r, g, b)
    luv = np_xyz_to_luv(xyz[..., 0], xyz[..., 1], xyz[..., 2])
    lch = np_luv_to_lch(luv[..., 0], luv[..., 1], luv[..., 2])
    return np_lch_to_hsluv(lch[..., 0], lch[..., 1], lch[..., 2])
