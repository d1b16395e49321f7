"""Scalar helpers used by every color conversion.

All functions are total: NaN and infinities are mapped to defined values
instead of raising.
"""

from __future__ import annotations

import math


def clamp_to_byte(c: float) -> int:
    """Round to the nearest integer and clamp into [0, 255].

    NaN -> 0, +inf -> 255, -inf -> 0. Rounding is half to even.
    """
    if math.isnan(c):
        return 0
    if math.isinf(c):
        return 255 if c > 0 else 0

    c = round(c)
    if c <= 0:
        return 0
    if c >= 255:
        return 255
    return int(c)


def clamp_to_unit(c: float) -> float:
    """Clamp into [0, 1]. NaN -> 0, +inf -> 1, -inf -> 0."""
    if math.isnan(c):
        return 0.0
    if math.isinf(c):
        return 1.0 if c > 0 else 0.0

    if c <= 0:
        return 0.0
    if c >= 1:
        return 1.0
    return c


def degrees_to_radians(degrees: float) -> float:
    return degrees * (math.pi / 180.0)


def radians_to_degrees(radians: float) -> float:
    return radians * (180.0 / math.pi)


def lerp(left: float, right: float, scale: float) -> float:
    """Linear interpolation with `scale` saturated at both ends."""
    if scale <= 0:
        return left
    if scale >= 1:
        return right
    return left + scale * (right - left)


def lerp_byte(left: int, right: int, scale: float) -> int:
    """Byte-channel variant of :func:`lerp`; the result is rounded half to even."""
    if scale <= 0:
        return left
    if scale >= 1:
        return right
    if left == right:
        return left
    return int(round(left + scale * (right - left)))


__all__ = [
    "clamp_to_byte",
    "clamp_to_unit",
    "degrees_to_radians",
    "radians_to_degrees",
    "lerp",
    "lerp_byte",
]
