from __future__ import annotations

import pytest

from tonalramp.palette import (
    Color,
    ColorPalette,
    ThemeResources,
    ThemeVariant,
    build_theme_resources,
)
from tonalramp.palette.palette import BLACK, WHITE

REGION = Color(0x1F, 0x1F, 0x1F)
BASE = Color(0x80, 0x80, 0x80)
ACCENT = Color(0, 120, 215)


@pytest.fixture()
def dark() -> ThemeResources:
    return build_theme_resources(ThemeVariant.DARK, REGION, BASE, ACCENT)


@pytest.fixture()
def light() -> ThemeResources:
    return build_theme_resources(ThemeVariant.LIGHT, Color(255, 255, 255), BASE, ACCENT)


def test_accent_is_middle_of_accent_palette(dark: ThemeResources, light: ThemeResources) -> None:
    assert dark.accent == ACCENT
    assert light.accent == ACCENT


def test_region_passes_through(dark: ThemeResources) -> None:
    assert dark.region_color == REGION


def test_dark_variant_slots(dark: ThemeResources) -> None:
    base = ColorPalette(color=BASE).generate_palette()
    assert dark.alt_high == BLACK
    assert dark.alt_medium_low == BLACK
    assert dark.base_high == WHITE
    assert dark.chrome_white == WHITE
    assert dark.base_low == base[5] == BASE
    assert dark.base_medium_high == base[0]
    assert dark.chrome_low == base[9]
    assert dark.list_low == base[8]


def test_light_variant_slots(light: ThemeResources) -> None:
    base = ColorPalette(color=BASE).generate_palette()
    assert light.alt_high == WHITE
    assert light.base_high == BLACK
    assert light.chrome_black_high == BLACK
    assert light.base_medium_high == base[10]
    assert light.chrome_low == base[0]
    assert light.list_medium == base[5]


def test_variant_by_value() -> None:
    assert build_theme_resources("dark", REGION, BASE, ACCENT) == build_theme_resources(
        ThemeVariant.DARK, REGION, BASE, ACCENT
    )
    with pytest.raises(ValueError):
        build_theme_resources("dim", REGION, BASE, ACCENT)


def test_custom_recipe_is_used() -> None:
    recipe = ColorPalette(steps=13)
    res = build_theme_resources(ThemeVariant.DARK, REGION, BASE, ACCENT, recipe)
    assert res.chrome_low == recipe.with_color(BASE).generate_palette()[9]


def test_short_palette_is_rejected() -> None:
    with pytest.raises(ValueError, match="at least 11"):
        build_theme_resources(ThemeVariant.LIGHT, REGION, BASE, ACCENT, ColorPalette(steps=5))


def test_as_dict_lists_every_slot(dark: ThemeResources) -> None:
    d = dark.as_dict()
    assert len(d) == 27
    assert d["accent"] == ACCENT
    assert all(isinstance(v, Color) for v in d.values())
