"""
Small parsing helpers for environment variables.

Each helper returns the default when the variable is unset or cannot be
parsed, so callers never deal with `os.getenv` plus exception guards.
"""

from __future__ import annotations

import os
from typing import Iterable, Optional


def env_int(
    name: str, default: Optional[int] = None, *, min_value: Optional[int] = None
) -> Optional[int]:
    """Read an integer environment variable.

    Parameters
    ----------
    name : str
        Variable name.
    default : Optional[int]
        Returned when the variable is unset or not an integer.
    min_value : Optional[int]
        Lower bound; parsed values below it are raised to it.

    Returns
    -------
    Optional[int]
        Parsed value or `default`.
    """
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        val = int(raw.strip())
    except ValueError:
        return default
    if min_value is not None and val < min_value:
        val = min_value
    return val


def env_float(name: str, default: float) -> float:
    """Read a float environment variable (unset/invalid -> default)."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw.strip())
    except ValueError:
        return default


def env_bool(name: str, default: bool = False) -> bool:
    """Read a boolean environment variable (accepts 0/1 and true/false forms)."""
    raw = os.getenv(name)
    if raw is None:
        return bool(default)
    try:
        # numbers first
        return int(raw) != 0
    except ValueError:
        s = raw.strip().lower()
        if s in {"true", "t", "yes", "y", "on"}:
            return True
        if s in {"false", "f", "no", "n", "off"}:
            return False
        return bool(default)


def env_str(name: str, default: str, *, choices: Iterable[str] | None = None) -> str:
    """Read a string environment variable, lower-cased when `choices` is given.

    Values outside `choices` fall back to `default`.
    """
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip()
    if choices is None:
        return value or default
    value = value.lower()
    allowed = {c.lower() for c in choices}
    return value if value in allowed else default


__all__ = ["env_int", "env_float", "env_bool", "env_str"]
