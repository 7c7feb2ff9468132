"""
Lumachroma Color
================

An immutable single-precision RGBA value type with conversions to HSV and
HSLuv and compact packed exports.

Usage
-----
>>> from lumachroma.colors import Color
>>>
>>> orange = Color.from_int_rgb(255, 128, 0)
>>> orange.pack_int() == 0xFF0080FF
True
>>>
>>> # Hue rotation with wraparound
>>> shifted = orange.shift(370, 0, 0)
>>>
>>> # Three lighten/darken families
>>> orange.shade(0.5)        # linear channel scaling
>>> orange.shade2(0.5)       # soft additive lift, capped at 1
>>> orange.shade_hsluv(0.5)  # perceptual lightness in HSLuv

Notes
-----
- Channels are numpy.float32 and are not clamped on construction
- pack_int / pack_float / to_tuple clamp to [0, 1] before quantizing
- Instances are frozen; every transform returns a new Color
"""

from .color import Color

__all__ = ['Color']
