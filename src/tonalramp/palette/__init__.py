"""Public entrypoint for the tonalramp color engine.

This module re-exports the main user-facing types and functions so that
applications can simply import from ``tonalramp.palette`` instead of
individual submodules.
"""

from .blending import DEFAULT_SATURATION_CONSTANT, blend, saturate_via_lch
from .color_types import (
    DEFAULT_ROUNDING_PRECISION,
    HSL,
    LAB,
    LCH,
    XYZ,
    BlendMode,
    Color,
    InterpolationMode,
    NormalizedRGB,
)
from .engine import interpolate_color
from .palette import ColorPalette
from .scale import ColorScale, ColorScaleStop
from .theme import ThemeResources, ThemeVariant, build_theme_resources
from .ui_helpers import (
    EXPORT_FORMAT_OPTIONS,
    INTERPOLATION_MODE_OPTIONS,
    BLEND_MODE_OPTIONS,
    ExportFormat,
    export_colors,
)

__all__ = [
    "Color",
    "NormalizedRGB",
    "HSL",
    "LAB",
    "LCH",
    "XYZ",
    "DEFAULT_ROUNDING_PRECISION",
    "InterpolationMode",
    "BlendMode",
    "interpolate_color",
    "blend",
    "saturate_via_lch",
    "DEFAULT_SATURATION_CONSTANT",
    "ColorScale",
    "ColorScaleStop",
    "ColorPalette",
    "ThemeVariant",
    "ThemeResources",
    "build_theme_resources",
    "ExportFormat",
    "export_colors",
    "INTERPOLATION_MODE_OPTIONS",
    "BLEND_MODE_OPTIONS",
    "EXPORT_FORMAT_OPTIONS",
]
