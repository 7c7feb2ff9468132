from __future__ import annotations

import warnings
from typing import Any, ClassVar, Iterator, List, Tuple

import numpy as np
from numpy import ndarray
from boundednumbers.functions import clamp, cyclic_wrap_float

from ..conversions import (
    unit_rgb_to_hsv,
    hsv_to_unit_rgb,
    unit_rgb_to_hsluv,
    hsluv_to_unit_rgb,
)
from ..types.color_types import HSVTuple, HSLuvTuple, RGBTuple, RGBATuple
from ..types.format_type import FormatType, HUE_360, format_classes, max_non_hue

INT_MAX = 255


class Color:
    """
    Immutable single-precision RGBA color.

    Channels are stored as ``numpy.float32`` and are *not* clamped on
    construction: :meth:`lighten` may push them above 1. Packed exports
    (:meth:`pack_int`, :meth:`pack_float`, :meth:`to_tuple`) clamp to [0, 1]
    before quantizing. Every transform returns a new instance.
    """

    __slots__ = ('_r', '_g', '_b', '_a', '_is_frozen')  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 4
    dtype: ClassVar[type] = np.float32

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, r: float, g: float, b: float, a: float = 1.0) -> None:
        self._r = self.dtype(r)
        self._g = self.dtype(g)
        self._b = self.dtype(b)
        self._a = self.dtype(a)
        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_rgba(cls, r: float, g: float, b: float, a: float) -> Color:
        return cls(r, g, b, a)

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float) -> Color:
        return cls(r, g, b, 1.0)

    @classmethod
    def from_int_rgba(cls, r: int, g: int, b: int, a: int) -> Color:
        """Build from 8-bit channels (0-255), each divided by 255."""
        channels = (r, g, b, a)
        for value in channels:
            if not 0 <= value <= INT_MAX:
                raise ValueError(f"8-bit channel expected in [0, {INT_MAX}], got {value!r}")
        r, g, b, a = (cls.dtype(value) / cls.dtype(INT_MAX) for value in channels)
        return cls(r, g, b, a)

    @classmethod
    def from_int_rgb(cls, r: int, g: int, b: int) -> Color:
        return cls.from_int_rgba(r, g, b, INT_MAX)

    @classmethod
    def from_lightness_alpha(cls, lightness: float, a: float) -> Color:
        """Greyscale color with r = g = b = lightness."""
        return cls(lightness, lightness, lightness, a)

    @classmethod
    def from_lightness(cls, lightness: float) -> Color:
        return cls.from_lightness_alpha(lightness, 1.0)

    @classmethod
    def from_hsva(cls, h: float, s: float, v: float, a: float) -> Color:
        r, g, b = hsv_to_unit_rgb(h, s, v)
        return cls(r, g, b, a)

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float) -> Color:
        return cls.from_hsva(h, s, v, 1.0)

    @classmethod
    def from_hsluva(cls, h: float, s: float, l: float, a: float) -> Color:
        """Build from HSLuv (h in degrees, s and l in 0..100)."""
        r, g, b = hsluv_to_unit_rgb(h, s, l)
        return cls(r, g, b, a)

    @classmethod
    def from_hsluv(cls, h: float, s: float, l: float) -> Color:
        return cls.from_hsluva(h, s, l, 1.0)

    @classmethod
    def from_packed_int(cls, word: int) -> Color:
        """Inverse of :meth:`pack_int`: unpack an ``A<<24 | B<<16 | G<<8 | R`` word."""
        word = int(word)
        return cls.from_int_rgba(
            word & 0xFF,
            (word >> 8) & 0xFF,
            (word >> 16) & 0xFF,
            (word >> 24) & 0xFF,
        )

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def r(self) -> np.float32:
        return self._r

    @property
    def g(self) -> np.float32:
        return self._g

    @property
    def b(self) -> np.float32:
        return self._b

    @property
    def a(self) -> np.float32:
        return self._a

    @property
    def rgb(self) -> RGBTuple:
        return float(self._r), float(self._g), float(self._b)

    @property
    def rgba(self) -> RGBATuple:
        return float(self._r), float(self._g), float(self._b), float(self._a)

    # ------------------ QUERIES ------------------
    def hue(self) -> float:
        """HSV hue in degrees; alpha is ignored."""
        h, _, _ = self.to_hsv()
        return h

    def to_hsv(self) -> HSVTuple:
        return unit_rgb_to_hsv(*self.rgb)

    def to_hsluv(self) -> HSLuvTuple:
        return unit_rgb_to_hsluv(*self.rgb)

    # ------------------ TRANSFORMS ------------------
    def mix(self, other: Color, t: float) -> Color:
        """Linear interpolation of all four channels; ``t`` is clamped to [0, 1]."""
        if not isinstance(other, Color):
            raise TypeError(f"Cannot mix Color with {type(other).__name__}")
        t = self.dtype(clamp(float(t), 0.0, 1.0))
        return self.__class__(
            self._r + (other._r - self._r) * t,
            self._g + (other._g - self._g) * t,
            self._b + (other._b - self._b) * t,
            self._a + (other._a - self._a) * t,
        )

    def shift(self, h: float, s: float, v: float) -> Color:
        """
        Offset the color in HSV space.

        Hue wraps around 360 degrees; saturation and value are clamped to
        [0, 1]. Alpha is preserved.
        """
        h1, s1, v1 = self.to_hsv()

        h_r = cyclic_wrap_float(h1 + h, 0.0, HUE_360)
        s_r = clamp(s1 + s, 0.0, 1.0)
        v_r = clamp(v1 + v, 0.0, 1.0)

        return self.from_hsva(float(h_r), float(s_r), float(v_r), self._a)

    def shade(self, amount: float) -> Color:
        if amount < 0:
            return self.darken(-amount)
        return self.lighten(amount)

    def shade2(self, amount: float) -> Color:
        if amount < 0:
            return self.darken(-amount)
        return self.lighten2(amount)

    def shade_hsluv(self, amount: float) -> Color:
        if amount < 0:
            return self.darken_hsluv(-amount)
        return self.lighten_hsluv(amount)

    def darken(self, amount: float) -> Color:
        """Divide rgb by ``max(1, 1 + amount)``; negative amounts are a no-op."""
        scale = self.dtype(max(1.0, 1.0 + amount))
        return self.__class__(self._r / scale, self._g / scale, self._b / scale, self._a)

    def lighten(self, amount: float) -> Color:
        """Multiply rgb by ``max(1, 1 + amount)``. Channels may exceed 1."""
        scale = self.dtype(max(1.0, 1.0 + amount))
        return self.__class__(self._r * scale, self._g * scale, self._b * scale, self._a)

    def lighten2(self, amount: float) -> Color:
        """Softer lighten: a multiplicative lift plus an additive one, capped at 1."""
        amount = self.dtype(amount) * self.dtype(0.5)
        scale = self.dtype(1.0) + self.dtype(0.5) * amount
        one = self.dtype(1.0)

        return self.__class__(
            min(one, self._r * scale + amount),
            min(one, self._g * scale + amount),
            min(one, self._b * scale + amount),
            self._a,
        )

    def darken_hsluv(self, amount: float) -> Color:
        # NOTE: min(0, ...) is never positive, so lightness always collapses
        # to black. Suspected inversion of max(0, 1 - amount).
        scale = min(0.0, 1.0 - float(amount))
        h, s, l = self.to_hsluv()
        return self.from_hsluva(h, s, l * scale, self._a)

    def lighten_hsluv(self, amount: float) -> Color:
        """Pull HSLuv lightness toward 100 in proportion to ``amount``."""
        h, s, l = self.to_hsluv()
        return self.from_hsluva(h, s, 100 - (100 - l) * (1 - float(amount)), self._a)

    def with_alpha(self, alpha: float) -> Color:
        """Return a copy with the alpha channel replaced."""
        return self.__class__(self._r, self._g, self._b, alpha)

    # ------------------ EXPORT ------------------
    def pack_int(self) -> int:
        """
        Pack into a 32-bit ``A<<24 | B<<16 | G<<8 | R`` word.

        Channels are clamped to [0, 1], scaled by 255 in float32 and truncated
        to 8 bits. Out-of-range channels emit a ``UserWarning``.
        """
        vec = self.to_vec4()
        if np.any((vec < 0) | (vec > 1)):
            warnings.warn(
                f"Packing {self!r} with channels outside [0, 1]; values are clamped",
                stacklevel=2,
            )
        quantized = (np.clip(vec, 0.0, 1.0) * self.dtype(INT_MAX)).astype(np.uint32)
        r, g, b, a = (int(q) for q in quantized)
        return a << 24 | b << 16 | g << 8 | r

    def pack_float(self) -> np.float32:
        """The bits of :meth:`pack_int` reinterpreted as an IEEE-754 float32."""
        return np.array([self.pack_int()], dtype=np.uint32).view(np.float32)[0]

    def to_vec4(self) -> ndarray:
        return np.array([self._r, self._g, self._b, self._a], dtype=self.dtype)

    def to_array(self) -> List[float]:
        return [float(self._r), float(self._g), float(self._b), float(self._a)]

    def to_tuple(self, format_type: FormatType = FormatType.FLOAT) -> Tuple[Any, ...]:
        """
        RGBA clamped to [0, 1] and scaled for ``format_type``.

        INT gives rounded 0-255 integers, PERCENTAGE 0-100 floats.
        """
        format_type = FormatType(format_type)
        scaled = np.clip(self.to_vec4().astype(float), 0.0, 1.0) * max_non_hue[format_type]
        if format_type == FormatType.INT:
            scaled = np.rint(scaled)
        cast = format_classes[format_type]
        return tuple(cast(v) for v in scaled)

    # ------------------ DUNDER ------------------
    def __iter__(self) -> Iterator[np.float32]:
        return iter((self._r, self._g, self._b, self._a))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (self._r, self._g, self._b, self._a) == (other._r, other._g, other._b, other._a)

    def __hash__(self) -> int:
        return hash((float(self._r), float(self._g), float(self._b), float(self._a)))

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(r={float(self._r):.6g}, g={float(self._g):.6g}, "
            f"b={float(self._b):.6g}, a={float(self._a):.6g})"
        )
