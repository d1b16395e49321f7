from __future__ import annotations

"""Palette recipe: derive an N-step tonal ramp from a single seed color.

This module defines :class:`ColorPalette`, a frozen parameter set. Its
:meth:`ColorPalette.get_palette_scale` builds a light -> seed -> dark
:class:`ColorScale` by clipping, saturating and blending the ends, and
:meth:`ColorPalette.generate_palette` samples that scale at ``steps``
evenly spaced positions.
"""

import logging
from dataclasses import dataclass, replace
from typing import List

from .blending import blend, saturate_via_lch
from .color_types import BlendMode, Color, InterpolationMode, NormalizedRGB
from .engine import interpolate_color, rgb_to_hsl
from .scale import ColorScale

logger = logging.getLogger(__name__)

WHITE = Color(0xFF, 0xFF, 0xFF, 0xFF)
BLACK = Color(0x00, 0x00, 0x00, 0xFF)
TRANSPARENT = Color(0x00, 0x00, 0x00, 0x00)


@dataclass(frozen=True)
class ColorPalette:
    """Palette generation recipe.

    Attributes
    ----------
    interpolation_mode:
        Space used for trimming, blend weighting and sampling.
    steps:
        Number of colors produced by :meth:`generate_palette`.
    scale_color_light, scale_color_dark:
        Ends of the base scale the seed is placed between.
    color:
        Seed color used by :meth:`generate_palette`.
    clip_light, clip_dark:
        Fractions cut off the light and dark ends of the base scale.
    saturation_adjustment_cutoff:
        Minimum HSL saturation of the seed for the LCH saturation step
        to run at all.
    saturation_light, saturation_dark:
        Chroma shift (in units of the saturation constant) of each end.
    overlay_light, overlay_dark, multiply_light, multiply_dark:
        Weights pulling each end toward its overlay/multiply blend with the
        seed. Zero disables the step.
    """

    interpolation_mode: InterpolationMode = InterpolationMode.RGB
    steps: int = 11
    scale_color_light: Color = WHITE
    scale_color_dark: Color = BLACK
    color: Color = TRANSPARENT
    clip_light: float = 0.185
    clip_dark: float = 0.160
    saturation_adjustment_cutoff: float = 0.05
    saturation_light: float = 0.35
    saturation_dark: float = 1.25
    overlay_light: float = 0.0
    overlay_dark: float = 0.25
    multiply_light: float = 0.0
    multiply_dark: float = 0.0

    def with_color(self, color: Color) -> "ColorPalette":
        """Return a copy of the recipe with a different seed color."""
        return replace(self, color=color)

    def get_palette_scale(self, color: Color) -> ColorScale:
        """Build the final light -> seed -> dark scale for ``color``."""
        mode = InterpolationMode.from_value(self.interpolation_mode)
        base_hsl = rgb_to_hsl(color)
        seed = NormalizedRGB.from_color(color)

        base_scale = ColorScale.from_colors([self.scale_color_light, color, self.scale_color_dark])

        trimmed = base_scale.trim(self.clip_light, 1.0 - self.clip_dark, mode)
        light = NormalizedRGB.from_color(trimmed.get_color(0, mode))
        dark = NormalizedRGB.from_color(trimmed.get_color(1, mode))

        if base_hsl.s >= self.saturation_adjustment_cutoff:
            logger.debug(
                "saturate ends: seed saturation %s >= cutoff %s",
                base_hsl.s,
                self.saturation_adjustment_cutoff,
            )
            light = saturate_via_lch(light, self.saturation_light)
            dark = saturate_via_lch(dark, self.saturation_dark)
        else:
            logger.debug(
                "skip saturation: seed saturation %s < cutoff %s",
                base_hsl.s,
                self.saturation_adjustment_cutoff,
            )

        light = _weighted_blend(seed, light, BlendMode.MULTIPLY, self.multiply_light, mode)
        dark = _weighted_blend(seed, dark, BlendMode.MULTIPLY, self.multiply_dark, mode)
        light = _weighted_blend(seed, light, BlendMode.OVERLAY, self.overlay_light, mode)
        dark = _weighted_blend(seed, dark, BlendMode.OVERLAY, self.overlay_dark, mode)

        return ColorScale.from_colors([light.denormalize(), color, dark.denormalize()])

    def generate_palette(self) -> List[Color]:
        """Sample the scale of :attr:`color` at :attr:`steps` positions.

        ``steps == 1`` yields the lightest color only.

        Raises
        ------
        ValueError
            If ``steps`` is less than 1.
        """
        if self.steps < 1:
            raise ValueError("steps must be positive.")
        scale = self.get_palette_scale(self.color)
        return scale.sample(self.steps, self.interpolation_mode)


def _weighted_blend(
    seed: NormalizedRGB,
    end: NormalizedRGB,
    mode: BlendMode,
    weight: float,
    interpolation: InterpolationMode,
) -> NormalizedRGB:
    """Move ``end`` toward its ``mode`` blend with ``seed`` by ``weight``."""
    if weight == 0:
        return end
    logger.debug("blend end with seed: %s weight %s", mode.value, weight)
    blended = blend(seed, end, mode)
    return interpolate_color(end, blended, weight, interpolation)


__all__ = ["ColorPalette", "WHITE", "BLACK", "TRANSPARENT"]
