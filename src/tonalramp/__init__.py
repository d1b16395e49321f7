"""tonalramp: derive tonal theme palettes from a single seed color.

The color engine lives in :mod:`tonalramp.palette`; the most common names are
re-exported here.
"""

from .palette import (
    BlendMode,
    Color,
    ColorPalette,
    ColorScale,
    ColorScaleStop,
    InterpolationMode,
    build_theme_resources,
)

__version__ = "0.1.0"

__all__ = [
    "Color",
    "ColorPalette",
    "ColorScale",
    "ColorScaleStop",
    "InterpolationMode",
    "BlendMode",
    "build_theme_resources",
    "__version__",
]
