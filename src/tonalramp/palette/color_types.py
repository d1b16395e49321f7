from __future__ import annotations

"""Core color types used by the tonalramp engine.

This module defines the 8-bit :class:`Color` exchanged with callers, the
floating-point color space triples used internally (normalized RGB, HSL,
CIE LAB, CIE LCH, CIE XYZ) and the selector enums for interpolation and
blending.

Every triple is immutable and compares component-wise. Components are
rounded to ``precision`` decimal digits at construction unless
``rounding=False`` is passed, which conversion chains use to avoid
compounding rounding error.
"""

from dataclasses import InitVar, dataclass
from enum import Enum

from ..util.color import normalize_color, parse_hex_color_str
from ..util.math_utils import clamp_to_byte

DEFAULT_ROUNDING_PRECISION = 5


class InterpolationMode(Enum):
    """Color space in which two colors are interpolated."""

    RGB = "rgb"
    LAB = "lab"
    XYZ = "xyz"

    @classmethod
    def from_value(cls, value: "InterpolationMode | str") -> "InterpolationMode":
        if isinstance(value, cls):
            return value
        for mode in cls:
            if mode.value == str(value).lower():
                return mode
        raise ValueError(f"Unknown interpolation mode: {value}")


class BlendMode(Enum):
    """Photo-compositing blend modes operating per channel."""

    BURN = "burn"
    DARKEN = "darken"
    DODGE = "dodge"
    LIGHTEN = "lighten"
    MULTIPLY = "multiply"
    OVERLAY = "overlay"
    SCREEN = "screen"


def _set_components(
    obj: object, names: tuple[str, str, str], rounding: bool, precision: int
) -> None:
    if not rounding:
        return
    for name in names:
        object.__setattr__(obj, name, round(getattr(obj, name), precision))


@dataclass(frozen=True)
class Color:
    """8-bit sRGB color with alpha, the boundary type of the engine.

    Attributes
    ----------
    r, g, b:
        Channels in [0, 255].
    a:
        Alpha in [0, 255]; 255 is opaque.
    """

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        channels = normalize_color((self.r, self.g, self.b, self.a))
        for name, value in zip(("r", "g", "b", "a"), channels):
            object.__setattr__(self, name, value)

    @classmethod
    def from_argb(cls, a: int, r: int, g: int, b: int) -> "Color":
        return cls(r, g, b, a)

    @classmethod
    def from_uint32(cls, value: int) -> "Color":
        """Create a Color from a packed 0xAARRGGBB integer."""
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError(f"packed color out of range: {value!r}")
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, (value >> 24) & 0xFF)

    @classmethod
    def from_hex(cls, hex_str: str) -> "Color":
        """Create a Color from "#RRGGBB" or "#AARRGGBB" (see util.color)."""
        r, g, b, a = parse_hex_color_str(hex_str)
        return cls(r, g, b, a)

    @classmethod
    def coerce(cls, value: "Color | str | tuple | list") -> "Color":
        """Accept a Color, a hex string or an (r, g, b[, a]) tuple."""
        if isinstance(value, cls):
            return value
        r, g, b, a = normalize_color(value)
        return cls(r, g, b, a)

    def to_hex(self) -> str:
        """Return "#rrggbb" (alpha is dropped)."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def to_argb_hex(self) -> str:
        """Return "#aarrggbb"."""
        return f"#{self.a:02x}{self.r:02x}{self.g:02x}{self.b:02x}"

    def to_uint32(self) -> int:
        return (self.a << 24) | (self.r << 16) | (self.g << 8) | self.b


@dataclass(frozen=True)
class NormalizedRGB:
    """RGB with channels nominally in [0, 1].

    Values outside the range are allowed during intermediate computations
    (blending) as long as they are clamped eventually, for example by
    :meth:`denormalize`. Alpha is not represented.
    """

    r: float
    g: float
    b: float
    rounding: InitVar[bool] = True
    precision: InitVar[int] = DEFAULT_ROUNDING_PRECISION

    def __post_init__(self, rounding: bool, precision: int) -> None:
        _set_components(self, ("r", "g", "b"), rounding, precision)

    @classmethod
    def from_color(
        cls, color: Color, rounding: bool = True, precision: int = DEFAULT_ROUNDING_PRECISION
    ) -> "NormalizedRGB":
        """Map 8-bit channels onto [0, 1]; alpha is ignored."""
        return cls(color.r / 255.0, color.g / 255.0, color.b / 255.0, rounding, precision)

    def denormalize(self, alpha: int = 255) -> Color:
        """Convert back to an 8-bit Color, clamping every channel."""
        return Color(
            clamp_to_byte(self.r * 255.0),
            clamp_to_byte(self.g * 255.0),
            clamp_to_byte(self.b * 255.0),
            alpha,
        )

    def __str__(self) -> str:
        return f"{self.r},{self.g},{self.b}"


@dataclass(frozen=True)
class HSL:
    """Hue in [0, 360), saturation and lightness in [0, 1]."""

    h: float
    s: float
    l: float  # noqa: E741
    rounding: InitVar[bool] = True
    precision: InitVar[int] = DEFAULT_ROUNDING_PRECISION

    def __post_init__(self, rounding: bool, precision: int) -> None:
        _set_components(self, ("h", "s", "l"), rounding, precision)

    def __str__(self) -> str:
        return f"{self.h},{self.s},{self.l}"


@dataclass(frozen=True)
class LAB:
    """CIE 1976 L*a*b* (D65, 2 degree observer). L in [0, 100]; a and b unbounded."""

    l: float  # noqa: E741
    a: float
    b: float
    rounding: InitVar[bool] = True
    precision: InitVar[int] = DEFAULT_ROUNDING_PRECISION

    def __post_init__(self, rounding: bool, precision: int) -> None:
        _set_components(self, ("l", "a", "b"), rounding, precision)

    def __str__(self) -> str:
        return f"{self.l},{self.a},{self.b}"


@dataclass(frozen=True)
class LCH:
    """Polar form of LAB. L in [0, 100], C >= 0, H in [0, 360).

    H is unstable near C == 0: tiny sign noise in a/b flips it by about 180
    degrees.
    """

    l: float  # noqa: E741
    c: float
    h: float
    rounding: InitVar[bool] = True
    precision: InitVar[int] = DEFAULT_ROUNDING_PRECISION

    def __post_init__(self, rounding: bool, precision: int) -> None:
        _set_components(self, ("l", "c", "h"), rounding, precision)

    def __str__(self) -> str:
        return f"{self.l},{self.c},{self.h}"


@dataclass(frozen=True)
class XYZ:
    """CIE 1931 XYZ relative to the D65 white point."""

    x: float
    y: float
    z: float
    rounding: InitVar[bool] = True
    precision: InitVar[int] = DEFAULT_ROUNDING_PRECISION

    def __post_init__(self, rounding: bool, precision: int) -> None:
        _set_components(self, ("x", "y", "z"), rounding, precision)

    def __str__(self) -> str:
        return f"{self.x},{self.y},{self.z}"


__all__ = [
    "DEFAULT_ROUNDING_PRECISION",
    "InterpolationMode",
    "BlendMode",
    "Color",
    "NormalizedRGB",
    "HSL",
    "LAB",
    "LCH",
    "XYZ",
]
