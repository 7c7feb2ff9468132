import math
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import HSVTuple
from ..types.format_type import HUE_360


def unit_rgb_to_hsv(r: float, g: float, b: float) -> HSVTuple:
    """
    Convert unit RGB (0..1) to HSV.

    Returns:
        h in [0, 360), s and v in [0, 1]. Achromatic colors get hue 0.
    """
    v = max(r, g, b)
    delta = v - min(r, g, b)

    if delta == 0:
        h = 0.0
    elif v == r:
        h = 60.0 * (((g - b) / delta) % 6)
    elif v == g:
        h = 60.0 * ((b - r) / delta + 2)
    else:
        h = 60.0 * ((r - g) / delta + 4)

    h = math.fmod(h, HUE_360)
    if h < 0:
        h += HUE_360

    s = 0.0 if v == 0 else delta / v
    return float(h), float(s), float(v)


def np_unit_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized RGB to HSV.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsv: array of shape (..., 3)
    """
    r, g, b = np.broadcast_arrays(
        np.asarray(r, dtype=float),
        np.asarray(g, dtype=float),
        np.asarray(b, dtype=float),
    )

    v = np.maximum.reduce([r, g, b])
    delta = v - np.minimum.reduce([r, g, b])
    safe_delta = np.where(delta == 0, 1.0, delta)

    h = np.select(
        [delta == 0, v == r, v == g],
        [
            0.0,
            60.0 * (((g - b) / safe_delta) % 6),
            60.0 * ((b - r) / safe_delta + 2),
        ],
        default=60.0 * ((r - g) / safe_delta + 4),
    )
    h = h % HUE_360

    safe_v = np.where(v == 0, 1.0, v)
    s = np.where(v == 0, 0.0, delta / safe_v)

    return np.stack([h, s, v], axis=-1)
