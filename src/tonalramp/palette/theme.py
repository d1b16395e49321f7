from __future__ import annotations

"""Theme resource derivation from base/accent seed colors.

A theme variant needs a set of named system colors (accent, alt, base,
chrome and list slots). They are taken from two generated palettes, one
seeded by the variant's base color and one by its accent color, by picking
fixed palette indices per slot. Everything here is a pure mapping; nothing
is applied to any UI.
"""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Dict, List, Mapping, Optional, Union

from .color_types import Color
from .palette import BLACK, WHITE, ColorPalette

MIN_THEME_STEPS = 11
ACCENT_INDEX = 5


class ThemeVariant(Enum):
    LIGHT = "light"
    DARK = "dark"


@dataclass(frozen=True)
class ThemeResources:
    """Named system colors of one theme variant."""

    region_color: Color
    accent: Color
    alt_high: Color
    alt_low: Color
    alt_medium: Color
    alt_medium_high: Color
    alt_medium_low: Color
    base_high: Color
    base_low: Color
    base_medium: Color
    base_medium_high: Color
    base_medium_low: Color
    chrome_alt_low: Color
    chrome_black_high: Color
    chrome_black_low: Color
    chrome_black_medium: Color
    chrome_black_medium_low: Color
    chrome_disabled_high: Color
    chrome_disabled_low: Color
    chrome_gray: Color
    chrome_high: Color
    chrome_low: Color
    chrome_medium: Color
    chrome_medium_low: Color
    chrome_white: Color
    list_low: Color
    list_medium: Color

    def as_dict(self) -> Dict[str, Color]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


# Slot -> palette index of the base palette, or a fixed color.
SlotSource = Union[int, Color]

_SLOTS: Mapping[ThemeVariant, Mapping[str, SlotSource]] = {
    ThemeVariant.DARK: {
        "alt_high": BLACK,
        "alt_low": BLACK,
        "alt_medium": BLACK,
        "alt_medium_high": BLACK,
        "alt_medium_low": BLACK,
        "base_high": WHITE,
        "base_low": 5,
        "base_medium": 1,
        "base_medium_high": 0,
        "base_medium_low": 3,
        "chrome_alt_low": 0,
        "chrome_black_high": BLACK,
        "chrome_black_low": 0,
        "chrome_black_medium": BLACK,
        "chrome_black_medium_low": BLACK,
        "chrome_disabled_high": 5,
        "chrome_disabled_low": 1,
        "chrome_gray": 2,
        "chrome_high": 2,
        "chrome_low": 9,
        "chrome_medium": 8,
        "chrome_medium_low": 6,
        "chrome_white": WHITE,
        "list_low": 8,
        "list_medium": 5,
    },
    ThemeVariant.LIGHT: {
        "alt_high": WHITE,
        "alt_low": WHITE,
        "alt_medium": WHITE,
        "alt_medium_high": WHITE,
        "alt_medium_low": WHITE,
        "base_high": BLACK,
        "base_low": 5,
        "base_medium": 8,
        "base_medium_high": 10,
        "base_medium_low": 9,
        "chrome_alt_low": 10,
        "chrome_black_high": BLACK,
        "chrome_black_low": 5,
        "chrome_black_medium": 10,
        "chrome_black_medium_low": 8,
        "chrome_disabled_high": 5,
        "chrome_disabled_low": 8,
        "chrome_gray": 9,
        "chrome_high": 5,
        "chrome_low": 0,
        "chrome_medium": 1,
        "chrome_medium_low": 0,
        "chrome_white": WHITE,
        "list_low": 1,
        "list_medium": 5,
    },
}


def _palette_colors(recipe: ColorPalette, seed: Color) -> List[Color]:
    colors = recipe.with_color(seed).generate_palette()
    if len(colors) < MIN_THEME_STEPS:
        raise ValueError(
            f"theme derivation needs at least {MIN_THEME_STEPS} palette steps, got {len(colors)}"
        )
    return colors


def build_theme_resources(
    variant: ThemeVariant | str,
    region_color: Color,
    base_color: Color,
    accent_color: Color,
    recipe: Optional[ColorPalette] = None,
) -> ThemeResources:
    """Derive the named system colors of ``variant``.

    Parameters
    ----------
    variant:
        Light or dark theme (enum member or its value).
    region_color:
        Background region color, passed through unchanged.
    base_color, accent_color:
        Seeds of the base and accent palettes.
    recipe:
        Palette recipe shared by both palettes. Defaults to
        :class:`ColorPalette` with its documented defaults.
    """
    variant = ThemeVariant(variant) if not isinstance(variant, ThemeVariant) else variant
    if recipe is None:
        recipe = ColorPalette()

    base = _palette_colors(recipe, base_color)
    accent = _palette_colors(recipe, accent_color)

    values: Dict[str, Color] = {}
    for slot, source in _SLOTS[variant].items():
        values[slot] = base[source] if isinstance(source, int) else source

    return ThemeResources(region_color=region_color, accent=accent[ACCENT_INDEX], **values)


__all__ = ["ThemeVariant", "ThemeResources", "build_theme_resources", "MIN_THEME_STEPS"]
