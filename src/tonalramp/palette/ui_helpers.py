from __future__ import annotations

"""Helper utilities for handing generated palettes to front ends.

This module exposes label/enum pairs for interpolation modes, blend modes
and export formats, and provides :func:`export_colors` to convert a list of
:class:`Color` values into hex strings, channel tuples or a NumPy array.
"""

from enum import Enum
from typing import Dict, List, Sequence

import numpy as np

from .color_types import BlendMode, Color, InterpolationMode


class ExportFormat(Enum):
    """Supported output formats for exported color lists."""

    HEX = "hex"
    ARGB_HEX = "argb_hex"
    RGB_255 = "rgb_255"
    RGB_01 = "rgb_01"
    ARRAY = "array"

    @classmethod
    def from_value(cls, value: str) -> "ExportFormat":
        for fmt in cls:
            if fmt.value == value:
                return fmt
        raise ValueError(f"Unknown export format: {value}")


# Label/Enum pairs for UI choices
INTERPOLATION_MODE_OPTIONS: List[tuple[str, InterpolationMode]] = [
    ("RGB", InterpolationMode.RGB),
    ("LAB", InterpolationMode.LAB),
    ("XYZ", InterpolationMode.XYZ),
]
BLEND_MODE_OPTIONS: List[tuple[str, BlendMode]] = [
    ("Burn", BlendMode.BURN),
    ("Darken", BlendMode.DARKEN),
    ("Dodge", BlendMode.DODGE),
    ("Lighten", BlendMode.LIGHTEN),
    ("Multiply", BlendMode.MULTIPLY),
    ("Overlay", BlendMode.OVERLAY),
    ("Screen", BlendMode.SCREEN),
]
EXPORT_FORMAT_OPTIONS: List[tuple[str, ExportFormat]] = [
    ("HEX", ExportFormat.HEX),
    ("ARGB HEX", ExportFormat.ARGB_HEX),
    ("sRGB (0-255)", ExportFormat.RGB_255),
    ("sRGB (0-1)", ExportFormat.RGB_01),
    ("RGBA array", ExportFormat.ARRAY),
]

INTERPOLATION_MODE_LABEL_MAP: Dict[str, InterpolationMode] = {
    label: value for label, value in INTERPOLATION_MODE_OPTIONS
}
BLEND_MODE_LABEL_MAP: Dict[str, BlendMode] = {label: value for label, value in BLEND_MODE_OPTIONS}


def colors_to_array(colors: Sequence[Color]) -> np.ndarray:
    """Pack colors into a ``(N, 4)`` uint8 RGBA array."""
    arr = np.zeros((len(colors), 4), dtype=np.uint8)
    for i, c in enumerate(colors):
        arr[i] = (c.r, c.g, c.b, c.a)
    return arr


def export_colors(colors: Sequence[Color], fmt: ExportFormat | str) -> List[object] | np.ndarray:
    """Convert colors to the desired format."""
    export_fmt = fmt if isinstance(fmt, ExportFormat) else ExportFormat.from_value(fmt)
    if export_fmt == ExportFormat.HEX:
        return [c.to_hex() for c in colors]
    if export_fmt == ExportFormat.ARGB_HEX:
        return [c.to_argb_hex() for c in colors]
    if export_fmt == ExportFormat.RGB_255:
        return [(c.r, c.g, c.b) for c in colors]
    if export_fmt == ExportFormat.RGB_01:
        return [(c.r / 255.0, c.g / 255.0, c.b / 255.0) for c in colors]
    if export_fmt == ExportFormat.ARRAY:
        return colors_to_array(colors)
    raise ValueError(f"Unsupported export format: {fmt}")


__all__ = [
    "ExportFormat",
    "INTERPOLATION_MODE_OPTIONS",
    "BLEND_MODE_OPTIONS",
    "EXPORT_FORMAT_OPTIONS",
    "INTERPOLATION_MODE_LABEL_MAP",
    "BLEND_MODE_LABEL_MAP",
    "colors_to_array",
    "export_colors",
]
