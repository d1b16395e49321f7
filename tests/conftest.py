"""Shared fixtures.

- the accent-blue seed color used by the end-to-end palette scenarios
- a default recipe
- an environment without TONALRAMP_* variables for settings tests
"""

from __future__ import annotations

import os
from typing import Iterator

import pytest

from tonalramp.common import settings
from tonalramp.palette import Color, ColorPalette


@pytest.fixture()
def seed_color() -> Color:
    return Color(0, 120, 215)


@pytest.fixture()
def default_recipe(seed_color: Color) -> ColorPalette:
    return ColorPalette(color=seed_color)


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in list(os.environ):
        if name.startswith("TONALRAMP_"):
            monkeypatch.delenv(name, raising=False)
    settings.reload_from_env()
    yield
    monkeypatch.undo()
    settings.reload_from_env()
