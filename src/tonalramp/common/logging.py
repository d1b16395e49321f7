"""
Lightweight logging utilities for tonalramp.

Notes:
- Every module obtains its logger with `logging.getLogger(__name__)`.
- The library never configures logging itself; front ends (the CLI) call
  `setup_default_logging` once when the application has not done so.
"""

from __future__ import annotations

import logging

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def resolve_level(level: int | str) -> int:
    """Translate a level name or number into a `logging` level number."""
    if isinstance(level, str):
        lvl = getattr(logging, level.strip().upper(), None)
        return lvl if isinstance(lvl, int) else logging.WARNING
    return int(level)


def setup_default_logging(level: int | str = "WARNING") -> None:
    """Apply a minimal logging configuration once.

    - no-op when the root logger already has handlers
    - intended to be called from the CLI, never at import time
    """
    lvl = resolve_level(level)

    root = logging.getLogger()
    if root.handlers:
        # Assume the app has configured logging
        return
    logging.basicConfig(level=lvl, format=DEFAULT_FORMAT)


__all__ = ["setup_default_logging", "resolve_level", "DEFAULT_FORMAT"]
