"""
Typed, centrally managed settings read from `TONALRAMP_*` environment variables.

Only front ends consult these values. The color engine itself is a pure
function library and never reads settings.
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_int, env_str

INTERPOLATION_CHOICES = ("rgb", "lab", "xyz")
EXPORT_FORMAT_CHOICES = ("hex", "argb_hex", "rgb_255", "rgb_01")
LOG_LEVEL_CHOICES = ("debug", "info", "warning", "error", "critical")


@dataclass
class _Settings:
    # Palette defaults
    DEFAULT_STEPS: int = 11
    DEFAULT_INTERPOLATION: str = "rgb"

    # Output
    DEFAULT_EXPORT_FORMAT: str = "hex"

    # Diagnostics
    LOG_LEVEL: str = "WARNING"
    DEBUG_RECIPE: bool = False


_settings = _Settings()


def reload_from_env() -> None:
    """Reload every setting from the environment.

    - invalid values fall back to the defaults
    - `TONALRAMP_STEPS` is floored at 1
    """
    _settings.DEFAULT_STEPS = env_int("TONALRAMP_STEPS", 11, min_value=1) or 11
    _settings.DEFAULT_INTERPOLATION = env_str(
        "TONALRAMP_INTERPOLATION", "rgb", choices=INTERPOLATION_CHOICES
    )
    _settings.DEFAULT_EXPORT_FORMAT = env_str(
        "TONALRAMP_FORMAT", "hex", choices=EXPORT_FORMAT_CHOICES
    )
    _settings.LOG_LEVEL = env_str(
        "TONALRAMP_LOG_LEVEL", "warning", choices=LOG_LEVEL_CHOICES
    ).upper()
    _settings.DEBUG_RECIPE = env_bool("TONALRAMP_DEBUG_RECIPE", False)


def get() -> _Settings:
    """Return the current settings snapshot."""
    return _settings


# initial load
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
