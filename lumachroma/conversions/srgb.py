import numpy as np
from numpy import ndarray as NDArray

SRGB_DECODE_THRESHOLD = 0.04045
SRGB_ENCODE_THRESHOLD = 0.0031308


def srgb_to_linear(c: float) -> float:
    """Convert nonlinear sRGB (0..1) to linear-light RGB."""
    if c <= SRGB_DECODE_THRESHOLD:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4

def linear_to_srgb(c: float) -> float:
    """Convert linear-light RGB (0..1) to nonlinear sRGB."""
    if c <= SRGB_ENCODE_THRESHOLD:
        return 12.92 * c
    return 1.055 * (c ** (1/2.4)) - 0.055

def np_srgb_to_linear(c: NDArray) -> NDArray:
    """Vectorized: Convert nonlinear sRGB (0..1) to linear-light RGB."""
    c = np.asarray(c, dtype=float)
    # abs keeps the discarded branch of np.where free of nan warnings
    return np.where(
        c <= SRGB_DECODE_THRESHOLD,
        c / 12.92,
        ((np.abs(c) + 0.055) / 1.055) ** 2.4
    )

def np_linear_to_srgb(c: NDArray) -> NDArray:
    """Vectorized: Convert linear-light RGB (0..1) to nonlinear sRGB."""
    c = np.asarray(c, dtype=float)
    return np.where(
        c <= SRGB_ENCODE_THRESHOLD,
        12.92 * c,
        1.055 * (np.abs(c) ** (1/2.4)) - 0.055
    )
