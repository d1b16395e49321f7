from __future__ import annotations

import pytest

from tonalramp.common import settings
from tonalramp.common.env import env_bool, env_float, env_int, env_str


def test_env_int_parsing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TONALRAMP_X", raising=False)
    assert env_int("TONALRAMP_X", 7) == 7
    monkeypatch.setenv("TONALRAMP_X", "12")
    assert env_int("TONALRAMP_X", 7) == 12
    monkeypatch.setenv("TONALRAMP_X", "-4")
    assert env_int("TONALRAMP_X", 7, min_value=0) == 0
    monkeypatch.setenv("TONALRAMP_X", "abc")
    assert env_int("TONALRAMP_X", 7) == 7


def test_env_bool_and_float(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TONALRAMP_B", "yes")
    assert env_bool("TONALRAMP_B") is True
    monkeypatch.setenv("TONALRAMP_B", "0")
    assert env_bool("TONALRAMP_B", True) is False
    monkeypatch.setenv("TONALRAMP_B", "maybe")
    assert env_bool("TONALRAMP_B", True) is True

    monkeypatch.setenv("TONALRAMP_F", "0.25")
    assert env_float("TONALRAMP_F", 1.0) == 0.25
    monkeypatch.setenv("TONALRAMP_F", "x")
    assert env_float("TONALRAMP_F", 1.0) == 1.0


def test_env_str_choices(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TONALRAMP_S", "LAB")
    assert env_str("TONALRAMP_S", "rgb", choices=("rgb", "lab")) == "lab"
    monkeypatch.setenv("TONALRAMP_S", "hsv")
    assert env_str("TONALRAMP_S", "rgb", choices=("rgb", "lab")) == "rgb"


def test_settings_defaults(clean_env: None) -> None:
    cfg = settings.get()
    assert cfg.DEFAULT_STEPS == 11
    assert cfg.DEFAULT_INTERPOLATION == "rgb"
    assert cfg.DEFAULT_EXPORT_FORMAT == "hex"
    assert cfg.LOG_LEVEL == "WARNING"
    assert cfg.DEBUG_RECIPE is False


def test_settings_reload_from_env(clean_env: None, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TONALRAMP_STEPS", "0")
    monkeypatch.setenv("TONALRAMP_INTERPOLATION", "XYZ")
    monkeypatch.setenv("TONALRAMP_FORMAT", "nope")
    monkeypatch.setenv("TONALRAMP_LOG_LEVEL", "debug")
    monkeypatch.setenv("TONALRAMP_DEBUG_RECIPE", "1")
    settings.reload_from_env()

    cfg = settings.get()
    assert cfg.DEFAULT_STEPS == 1
    assert cfg.DEFAULT_INTERPOLATION == "xyz"
    assert cfg.DEFAULT_EXPORT_FORMAT == "hex"
    assert cfg.LOG_LEVEL == "DEBUG"
    assert cfg.DEBUG_RECIPE is True
