from __future__ import annotations

"""Color space conversion engine.

This module converts between normalized sRGB, HSL, CIE XYZ, CIE LAB and
CIE LCH, and interpolates colors within a chosen space.

Every conversion takes ``rounding`` and ``precision`` arguments that are
forwarded to the constructed result. Chained conversions pass
``rounding=False`` to their intermediate steps so that rounding is applied
only once, at the end of the chain.

XYZ/LAB conversions use the D65 white point for the 2 degree observer
(0.95047, 1.0, 1.08883).
"""

import math
from typing import Union

from ..util.math_utils import (
    clamp_to_unit,
    degrees_to_radians,
    lerp,
    lerp_byte,
    radians_to_degrees,
)
from .color_types import (
    DEFAULT_ROUNDING_PRECISION,
    HSL,
    LAB,
    LCH,
    XYZ,
    Color,
    InterpolationMode,
    NormalizedRGB,
)

RGBInput = Union[Color, NormalizedRGB]

# D65, 2 degree observer
WHITE_X = 0.95047
WHITE_Y = 1.0
WHITE_Z = 1.08883

# LAB runs at this precision before the polar step in rgb_to_lch
LCH_LAB_PRECISION = 4


def _as_normalized(rgb: RGBInput) -> NormalizedRGB:
    # 8-bit input is mapped without rounding; alpha is ignored
    if isinstance(rgb, Color):
        return NormalizedRGB.from_color(rgb, False)
    return rgb


# --- HSL ---------------------------------------------------------------


def rgb_to_hsl(
    rgb: RGBInput, rounding: bool = True, precision: int = DEFAULT_ROUNDING_PRECISION
) -> HSL:
    """Convert RGB to HSL with the min/max/delta hue-sector formula."""
    rgb = _as_normalized(rgb)
    max_c = max(rgb.r, rgb.g, rgb.b)
    min_c = min(rgb.r, rgb.g, rgb.b)
    delta = max_c - min_c

    if delta == 0:
        hue = 0.0
    elif max_c == rgb.r:
        hue = 60 * math.fmod((rgb.g - rgb.b) / delta, 6)
    elif max_c == rgb.g:
        hue = 60 * ((rgb.b - rgb.r) / delta + 2)
    else:
        hue = 60 * ((rgb.r - rgb.g) / delta + 4)

    if hue < 0:
        hue += 360

    lit = (max_c + min_c) / 2

    sat = 0.0
    if delta != 0:
        sat = delta / (1 - abs(2 * lit - 1))

    return HSL(hue, sat, lit, rounding, precision)


def hsl_to_rgb(
    hsl: HSL, rounding: bool = True, precision: int = DEFAULT_ROUNDING_PRECISION
) -> NormalizedRGB:
    """Convert HSL back to normalized RGB (chroma/sector formula)."""
    chroma = (1 - abs(2 * hsl.l - 1)) * hsl.s
    h_prime = math.fmod(hsl.h, 360.0) / 60.0
    if h_prime < 0:
        h_prime += 6.0
    x = chroma * (1 - abs(math.fmod(h_prime, 2) - 1))
    m = hsl.l - chroma / 2

    sector = int(h_prime) % 6
    if sector == 0:
        r, g, b = chroma, x, 0.0
    elif sector == 1:
        r, g, b = x, chroma, 0.0
    elif sector == 2:
        r, g, b = 0.0, chroma, x
    elif sector == 3:
        r, g, b = 0.0, x, chroma
    elif sector == 4:
        r, g, b = x, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, x

    return NormalizedRGB(r + m, g + m, b + m, rounding, precision)


# --- XYZ ---------------------------------------------------------------


def _srgb_to_linear(c: float) -> float:
    if c <= 0.04045:
        return c / 12.92
    return math.pow((c + 0.055) / 1.055, 2.4)


def _linear_to_srgb(c: float) -> float:
    if c <= 0.0031308:
        return c * 12.92
    return 1.055 * math.pow(c, 1 / 2.4) - 0.055


def rgb_to_xyz(
    rgb: RGBInput, rounding: bool = True, precision: int = DEFAULT_ROUNDING_PRECISION
) -> XYZ:
    """Convert sRGB to XYZ: gamma expansion then the sRGB (D65) matrix."""
    rgb = _as_normalized(rgb)
    r = _srgb_to_linear(rgb.r)
    g = _srgb_to_linear(rgb.g)
    b = _srgb_to_linear(rgb.b)

    x = r * 0.4124564 + g * 0.3575761 + b * 0.1804375
    y = r * 0.2126729 + g * 0.7151522 + b * 0.0721750
    z = r * 0.0193339 + g * 0.1191920 + b * 0.9503041

    return XYZ(x, y, z, rounding, precision)


def xyz_to_rgb(
    xyz: XYZ, rounding: bool = True, precision: int = DEFAULT_ROUNDING_PRECISION
) -> NormalizedRGB:
    """Convert XYZ to sRGB; every channel is clamped into [0, 1]."""
    r = _linear_to_srgb(xyz.x * 3.2404542 - xyz.y * 1.5371385 - xyz.z * 0.4985314)
    g = _linear_to_srgb(xyz.x * -0.9692660 + xyz.y * 1.8760108 + xyz.z * 0.0415560)
    b = _linear_to_srgb(xyz.x * 0.0556434 - xyz.y * 0.2040259 + xyz.z * 1.0572252)

    return NormalizedRGB(
        clamp_to_unit(r), clamp_to_unit(g), clamp_to_unit(b), rounding, precision
    )


# --- LAB ---------------------------------------------------------------


def _lab_f(i: float) -> float:
    if i > 0.008856452:
        return math.pow(i, 1.0 / 3.0)
    return i / 0.12841855 + 0.137931034


def _lab_f_inv(i: float) -> float:
    if i > 0.206896552:
        return math.pow(i, 3)
    return 0.12841855 * (i - 0.137931034)


def xyz_to_lab(
    xyz: XYZ, rounding: bool = True, precision: int = DEFAULT_ROUNDING_PRECISION
) -> LAB:
    x = _lab_f(xyz.x / WHITE_X)
    y = _lab_f(xyz.y / WHITE_Y)
    z = _lab_f(xyz.z / WHITE_Z)

    l = (116.0 * y) - 16.0  # noqa: E741
    a = 500.0 * (x - y)
    b = -200.0 * (z - y)

    return LAB(l, a, b, rounding, precision)


def lab_to_xyz(
    lab: LAB, rounding: bool = True, precision: int = DEFAULT_ROUNDING_PRECISION
) -> XYZ:
    y = (lab.l + 16.0) / 116.0
    x = y + (lab.a / 500.0)
    z = y - (lab.b / 200.0)

    x = WHITE_X * _lab_f_inv(x)
    y = WHITE_Y * _lab_f_inv(y)
    z = WHITE_Z * _lab_f_inv(z)

    return XYZ(x, y, z, rounding, precision)


def rgb_to_lab(
    rgb: RGBInput, rounding: bool = True, precision: int = DEFAULT_ROUNDING_PRECISION
) -> LAB:
    return xyz_to_lab(rgb_to_xyz(rgb, False), rounding, precision)


def lab_to_rgb(
    lab: LAB, rounding: bool = True, precision: int = DEFAULT_ROUNDING_PRECISION
) -> NormalizedRGB:
    return xyz_to_rgb(lab_to_xyz(lab, False), rounding, precision)


# --- LCH ---------------------------------------------------------------


def lab_to_lch(
    lab: LAB, rounding: bool = True, precision: int = DEFAULT_ROUNDING_PRECISION
) -> LCH:
    """Polar form of LAB.

    The hue is discontinuous at a == b == 0: 1e-7 and -1e-7 give very
    different angles. Callers starting from RGB should use :func:`rgb_to_lch`.
    """
    h = (radians_to_degrees(math.atan2(lab.b, lab.a)) + 360) % 360
    c = math.sqrt(lab.a * lab.a + lab.b * lab.b)
    return LCH(lab.l, c, h, rounding, precision)


def lch_to_lab(
    lch: LCH, rounding: bool = True, precision: int = DEFAULT_ROUNDING_PRECISION
) -> LAB:
    # h == 0 is a true zero angle: a and b stay 0 instead of going through trig
    a = 0.0
    b = 0.0
    if lch.h != 0:
        a = math.cos(degrees_to_radians(lch.h)) * lch.c
        b = math.sin(degrees_to_radians(lch.h)) * lch.c
    return LAB(lch.l, a, b, rounding, precision)


def rgb_to_lch(
    rgb: RGBInput, rounding: bool = True, precision: int = DEFAULT_ROUNDING_PRECISION
) -> LCH:
    """Convert RGB to LCH with the achromatic hue pinned to 0.

    LAB is always rounded to 4 digits here, whatever ``rounding`` says, and
    components that round to zero are replaced by a literal ``0.0``. Without
    this, white comes out with a = -0.0 and atan2 returns 180 degrees
    instead of 0.
    """
    lab = rgb_to_lab(rgb, True, LCH_LAB_PRECISION)

    l = 0.0 if lab.l == 0 else lab.l  # noqa: E741
    a = 0.0 if lab.a == 0 else lab.a
    b = 0.0 if lab.b == 0 else lab.b

    return lab_to_lch(LAB(l, a, b, False), rounding, precision)


def lch_to_rgb(
    lch: LCH, rounding: bool = True, precision: int = DEFAULT_ROUNDING_PRECISION
) -> NormalizedRGB:
    return lab_to_rgb(lch_to_lab(lch, False), rounding, precision)


# --- interpolation -----------------------------------------------------


def interpolate_rgb_color(left: Color, right: Color, position: float) -> Color:
    """Interpolate 8-bit colors channel by channel, alpha included."""
    if position <= 0:
        return left
    if position >= 1:
        return right
    return Color(
        lerp_byte(left.r, right.r, position),
        lerp_byte(left.g, right.g, position),
        lerp_byte(left.b, right.b, position),
        lerp_byte(left.a, right.a, position),
    )


def interpolate_rgb(left: NormalizedRGB, right: NormalizedRGB, position: float) -> NormalizedRGB:
    if position <= 0:
        return left
    if position >= 1:
        return right
    return NormalizedRGB(
        lerp(left.r, right.r, position),
        lerp(left.g, right.g, position),
        lerp(left.b, right.b, position),
        False,
    )


def interpolate_lab(left: LAB, right: LAB, position: float) -> LAB:
    """Interpolate in LAB; usually smoother than RGB."""
    if position <= 0:
        return left
    if position >= 1:
        return right
    return LAB(
        lerp(left.l, right.l, position),
        lerp(left.a, right.a, position),
        lerp(left.b, right.b, position),
        False,
    )


def interpolate_xyz(left: XYZ, right: XYZ, position: float) -> XYZ:
    """Interpolate in XYZ; can beat LAB for very dark colors."""
    if position <= 0:
        return left
    if position >= 1:
        return right
    return XYZ(
        lerp(left.x, right.x, position),
        lerp(left.y, right.y, position),
        lerp(left.z, right.z, position),
        False,
    )


def interpolate_color(
    left: NormalizedRGB,
    right: NormalizedRGB,
    position: float,
    mode: InterpolationMode = InterpolationMode.RGB,
) -> NormalizedRGB:
    """Interpolate two normalized colors in the space selected by ``mode``.

    Both ends are converted into the target space, interpolated there and
    converted back.
    """
    mode = InterpolationMode.from_value(mode)
    if mode == InterpolationMode.LAB:
        left_lab = rgb_to_lab(left, False)
        right_lab = rgb_to_lab(right, False)
        return lab_to_rgb(interpolate_lab(left_lab, right_lab, position))
    if mode == InterpolationMode.XYZ:
        left_xyz = rgb_to_xyz(left, False)
        right_xyz = rgb_to_xyz(right, False)
        return xyz_to_rgb(interpolate_xyz(left_xyz, right_xyz, position))
    return interpolate_rgb(left, right, position)


__all__ = [
    "WHITE_X",
    "WHITE_Y",
    "WHITE_Z",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_xyz",
    "xyz_to_rgb",
    "xyz_to_lab",
    "lab_to_xyz",
    "rgb_to_lab",
    "lab_to_rgb",
    "lab_to_lch",
    "lch_to_lab",
    "rgb_to_lch",
    "lch_to_rgb",
    "interpolate_rgb_color",
    "interpolate_rgb",
    "interpolate_lab",
    "interpolate_xyz",
    "interpolate_color",
]
