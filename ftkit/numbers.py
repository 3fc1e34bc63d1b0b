"""Wrapping absolute values, a series exponential and a seeded linear congruential generator."""

from __future__ import annotations

import math
import struct
from typing import Optional

INT_MAX = 2**31 - 1
_MULTIPLIER = 1103515245
_INCREMENT = 12345
_MASK64 = 2**64 - 1


def _f32(x: float) -> float:
    """Round a float to single precision, overflowing to infinity."""
    try:
        return struct.unpack("f", struct.pack("f", x))[0]
    except OverflowError:
        return math.copysign(math.inf, x)


def abs_char(n: int) -> int:
    """Absolute value of a byte read as signed, returned as an unsigned byte."""
    n &= 0xFF
    signed = n - 0x100 if n > 0x7F else n
    return abs(signed) & 0xFF


def abs_int(n: int) -> int:
    """Absolute value of a 32-bit int read as signed, returned as unsigned."""
    n &= 0xFFFFFFFF
    signed = n - 2**32 if n > INT_MAX else n
    return abs(signed) & 0xFFFFFFFF


def expf(x: float) -> float:
    """e**x from the first 32 terms of its series, in single precision."""
    x = _f32(x)
    term = 1.0
    res = 1.0
    for n in range(1, 33):
        term = _f32(term * _f32(x / n))
        res = _f32(res + term)
    return res


class LinearCongruential:
    """Pseudo-random generator with a 64-bit state."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._seed = (id(self) if seed is None else seed) & _MASK64

    def seed(self, value: int) -> int:
        """Set the state when value is non-zero; return the current state."""
        if value:
            self._seed = value & _MASK64
        return self._seed

    def rand(self) -> int:
        """Next integer in 0..INT_MAX."""
        self._seed = (self._seed * _MULTIPLIER + _INCREMENT) & _MASK64
        return self._seed % (INT_MAX + 1)

    def randf(self) -> float:
        """Next single-precision float in 0.0..1.0."""
        return _f32(_f32(self.rand()) / _f32(INT_MAX))

    def randf_norm(self) -> float:
        """Mean of six draws of randf, roughly bell-shaped around 0.5."""
        total = 0.0
        for _ in range(6):
            total = _f32(total + self.randf())
        return _f32(total / 6)


_default = LinearCongruential()


def srand(value: int) -> int:
    """Seed the shared generator when value is non-zero; return its state."""
    return _default.seed(value)


def rand() -> int:
    """Next integer from the shared generator."""
    return _default.rand()


def randf() -> float:
    """Next float in 0.0..1.0 from the shared generator."""
    return _default.randf()


def randf_norm() -> float:
    """Next roughly normal float from the shared generator."""
    return _default.randf_norm()