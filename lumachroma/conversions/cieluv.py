"""
CIE XYZ / CIELUV helpers underlying the HSLuv color space.

All transforms assume sRGB primaries with a D65 reference white. Lightness
``L*`` is on a 0..100 scale, ``u*``/``v*`` are unbounded and hue angles are in
degrees.

The gamut boundary used by HSLuv is the set of six lines (one per RGB channel
hitting 0 or 1) in the ``(u*, v*)`` plane at a fixed lightness. The maximum
chroma for a hue is the distance from the origin to the nearest of those lines
along the hue ray.
"""
from __future__ import annotations

import math
from typing import List, Tuple

import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import ColorTriple
from .srgb import (
    srgb_to_linear,
    linear_to_srgb,
    np_srgb_to_linear,
    np_linear_to_srgb,
)

# linear sRGB <- XYZ
M_XYZ_TO_RGB = np.array([
    [3.240969941904521, -1.537383177570093, -0.498610760293],
    [-0.96924363628087, 1.87596750150772, 0.041555057407175],
    [0.055630079696993, -0.20397695888897, 1.056971514242878],
])

# XYZ <- linear sRGB
M_RGB_TO_XYZ = np.array([
    [0.41239079926595, 0.35758433938387, 0.18048078840183],
    [0.21263900587151, 0.71516867876775, 0.072192315360733],
    [0.019330818715591, 0.11919477979462, 0.95053215224966],
])

REF_Y = 1.0
REF_U = 0.19783000664283
REF_V = 0.46831999493879

KAPPA = 903.2962962
EPSILON = 0.0088564516

L_MAX = 99.9999999
L_MIN = 0.00000001
CHROMA_EPSILON = 0.00000001

Line = Tuple[float, float]


# ---------------------------------------------------------------------------
# Gamut boundary
# ---------------------------------------------------------------------------

def get_bounds(l: float) -> List[Line]:
    """
    Return the six gamut boundary lines at lightness ``l``.

    Each line is a ``(slope, intercept)`` pair in the ``(u*, v*)`` plane.
    """
    sub1 = ((l + 16) ** 3) / 1560896
    sub2 = sub1 if sub1 > EPSILON else l / KAPPA

    bounds: List[Line] = []
    for m1, m2, m3 in M_XYZ_TO_RGB:
        for t in (0, 1):
            top1 = (284517 * m1 - 94839 * m3) * sub2
            top2 = (838422 * m3 + 769860 * m2 + 731718 * m1) * l * sub2 - 769860 * t * l
            bottom = (632260 * m3 - 126452 * m2) * sub2 + 126452 * t
            bounds.append((float(top1 / bottom), float(top2 / bottom)))
    return bounds


def length_of_ray_until_intersect(theta: float, line: Line) -> float:
    """Distance from the origin along angle ``theta`` (radians) to ``line``."""
    slope, intercept = line
    denominator = math.sin(theta) - slope * math.cos(theta)
    if denominator == 0:
        # parallel to the ray
        return math.inf
    return intercept / denominator


def max_chroma_for_lh(l: float, h: float) -> float:
    """
    Maximum chroma representable in sRGB for lightness ``l`` and hue ``h``.

    Args:
        l: CIELUV lightness, 0..100
        h: hue in degrees

    Returns:
        The smallest non-negative ray length to any gamut boundary line.
    """
    theta = math.radians(h)
    lengths = (
        length_of_ray_until_intersect(theta, bound) for bound in get_bounds(l)
    )
    return min((length for length in lengths if length >= 0), default=math.inf)


def np_get_bounds(l: NDArray) -> Tuple[NDArray, NDArray]:
    """
    Vectorized: gamut boundary lines for an array of lightness values.

    Returns:
        slopes, intercepts: arrays of shape (6, *l.shape)
    """
    l = np.asarray(l, dtype=float)
    sub1 = ((l + 16) ** 3) / 1560896
    sub2 = np.where(sub1 > EPSILON, sub1, l / KAPPA)

    slopes = []
    intercepts = []
    for m1, m2, m3 in M_XYZ_TO_RGB:
        for t in (0, 1):
            top1 = (284517 * m1 - 94839 * m3) * sub2
            top2 = (838422 * m3 + 769860 * m2 + 731718 * m1) * l * sub2 - 769860 * t * l
            bottom = (632260 * m3 - 126452 * m2) * sub2 + 126452 * t
            slopes.append(top1 / bottom)
            intercepts.append(top2 / bottom)
    return np.stack(slopes), np.stack(intercepts)


def np_max_chroma_for_lh(l: NDArray, h: NDArray) -> NDArray:
    """Vectorized version of :func:`max_chroma_for_lh`."""
    l = np.asarray(l, dtype=float)
    h = np.asarray(h, dtype=float)
    l, h = np.broadcast_arrays(l, h)

    theta = np.radians(h)
    with np.errstate(divide="ignore", invalid="ignore"):
        slopes, intercepts = np_get_bounds(l)
        lengths = intercepts / (np.sin(theta) - slopes * np.cos(theta))
    lengths = np.where(lengths >= 0, lengths, np.inf)
    return lengths.min(axis=0)


# ---------------------------------------------------------------------------
# RGB <-> XYZ
# ---------------------------------------------------------------------------

def unit_rgb_to_xyz(r: float, g: float, b: float) -> ColorTriple:
    """Nonlinear sRGB (0..1) to CIE XYZ."""
    linear = np.array([srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b)])
    x, y, z = M_RGB_TO_XYZ @ linear
    return float(x), float(y), float(z)


def xyz_to_unit_rgb(x: float, y: float, z: float) -> ColorTriple:
    """CIE XYZ to nonlinear sRGB (0..1), not clamped."""
    rl, gl, bl = M_XYZ_TO_RGB @ np.array([x, y, z])
    return (
        linear_to_srgb(float(rl)),
        linear_to_srgb(float(gl)),
        linear_to_srgb(float(bl)),
    )


def np_unit_rgb_to_xyz(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized: nonlinear sRGB (0..1) to XYZ, shape (..., 3)."""
    linear = np.stack(
        [np_srgb_to_linear(r), np_srgb_to_linear(g), np_srgb_to_linear(b)],
        axis=-1,
    )
    return linear @ M_RGB_TO_XYZ.T


def np_xyz_to_unit_rgb(x: NDArray, y: NDArray, z: NDArray) -> NDArray:
    """Vectorized: XYZ to nonlinear sRGB (0..1), shape (..., 3), not clamped."""
    xyz = np.stack(np.broadcast_arrays(
        np.asarray(x, dtype=float),
        np.asarray(y, dtype=float),
        np.asarray(z, dtype=float),
    ), axis=-1)
    return np_linear_to_srgb(xyz @ M_XYZ_TO_RGB.T)


# ---------------------------------------------------------------------------
# XYZ <-> LUV
# ---------------------------------------------------------------------------

def y_to_l(y: float) -> float:
    if y <= EPSILON:
        return (y / REF_Y) * KAPPA
    return 116 * ((y / REF_Y) ** (1 / 3)) - 16


def l_to_y(l: float) -> float:
    if l <= 8:
        return REF_Y * l / KAPPA
    return REF_Y * (((l + 16) / 116) ** 3)


def xyz_to_luv(x: float, y: float, z: float) -> ColorTriple:
    divider = x + 15 * y + 3 * z
    if divider == 0:
        var_u = var_v = 0.0
    else:
        var_u = 4 * x / divider
        var_v = 9 * y / divider

    l = y_to_l(y)
    if l == 0:
        return 0.0, 0.0, 0.0

    u = 13 * l * (var_u - REF_U)
    v = 13 * l * (var_v - REF_V)
    return l, u, v


def luv_to_xyz(l: float, u: float, v: float) -> ColorTriple:
    if l == 0:
        return 0.0, 0.0, 0.0

    var_u = u / (13 * l) + REF_U
    var_v = v / (13 * l) + REF_V

    y = l_to_y(l)
    x = -(9 * y * var_u) / ((var_u - 4) * var_v - var_u * var_v)
    z = (9 * y - 15 * var_v * y - var_v * x) / (3 * var_v)
    return x, y, z


def np_xyz_to_luv(x: NDArray, y: NDArray, z: NDArray) -> NDArray:
    x, y, z = np.broadcast_arrays(
        np.asarray(x, dtype=float),
        np.asarray(y, dtype=float),
        np.asarray(z, dtype=float),
    )
    divider = x + 15 * y + 3 * z
    safe_divider = np.where(divider == 0, 1.0, divider)
    var_u = np.where(divider == 0, 0.0, 4 * x / safe_divider)
    var_v = np.where(divider == 0, 0.0, 9 * y / safe_divider)

    l = np.where(
        y <= EPSILON,
        (y / REF_Y) * KAPPA,
        116 * np.cbrt(y / REF_Y) - 16,
    )
    black = l == 0
    u = np.where(black, 0.0, 13 * l * (var_u - REF_U))
    v = np.where(black, 0.0, 13 * l * (var_v - REF_V))
    return np.stack([l, u, v], axis=-1)


def np_luv_to_xyz(l: NDArray, u: NDArray, v: NDArray) -> NDArray:
    l, u, v = np.broadcast_arrays(
        np.asarray(l, dtype=float),
        np.asarray(u, dtype=float),
        np.asarray(v, dtype=float),
    )
    black = l == 0
    safe_l = np.where(black, 1.0, l)

    var_u = u / (13 * safe_l) + REF_U
    var_v = v / (13 * safe_l) + REF_V

    y = np.where(l <= 8, REF_Y * l / KAPPA, REF_Y * ((l + 16) / 116) ** 3)
    x = -(9 * y * var_u) / ((var_u - 4) * var_v - var_u * var_v)
    z = (9 * y - 15 * var_v * y - var_v * x) / (3 * var_v)

    xyz = np.stack([x, y, z], axis=-1)
    return np.where(np.asarray(black)[..., None], 0.0, xyz)


# ---------------------------------------------------------------------------
# LUV <-> LCh(uv)
# ---------------------------------------------------------------------------

def luv_to_lch(l: float, u: float, v: float) -> ColorTriple:
    c = math.sqrt(u * u + v * v)
    if c < CHROMA_EPSILON:
        h = 0.0
    else:
        h = math.degrees(math.atan2(v, u))
        if h < 0:
            h += 360
    return l, c, h


def lch_to_luv(l: float, c: float, h: float) -> ColorTriple:
    hrad = math.radians(h)
    return l, math.cos(hrad) * c, math.sin(hrad) * c


def np_luv_to_lch(l: NDArray, u: NDArray, v: NDArray) -> NDArray:
    l, u, v = np.broadcast_arrays(
        np.asarray(l, dtype=float),
        np.asarray(u, dtype=float),
        np.asarray(v, dtype=float),
    )
    c = np.hypot(u, v)
    h = np.degrees(np.arctan2(v, u)) % 360
    h = np.where(c < CHROMA_EPSILON, 0.0, h)
    return np.stack([l, c, h], axis=-1)


def np_lch_to_luv(l: NDArray, c: NDArray, h: NDArray) -> NDArray:
    l, c, h = np.broadcast_arrays(
        np.asarray(l, dtype=float),
        np.asarray(c, dtype=float),
        np.asarray(h, dtype=float),
    )
    hrad = np.radians(h)
    return np.stack([l, np.cos(hrad) * c, np.sin(hrad) * c], axis=-1)
