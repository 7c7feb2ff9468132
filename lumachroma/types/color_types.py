from __future__ import annotations
from typing import Literal, Tuple
from numpy import ndarray

RGBTuple = Tuple[float, float, float]
RGBATuple = Tuple[float, float, float, float]
HSVTuple = Tuple[float, float, float]
HSLuvTuple = Tuple[float, float, float]
ColorTriple = Tuple[float, float, float]
ColorSpace = Literal["rgb", "hsv", "hsluv"]


def split_channels(color: ndarray) -> Tuple[ndarray, ndarray, ndarray]:
    """Split a (..., 3) array into its three channel planes."""
    return color[..., 0], color[..., 1], color[..., 2]
