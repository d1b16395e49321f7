"""
Parsing of user supplied colors into 8-bit channel tuples.

Accepted inputs are hex strings and `(r, g, b[, a])` sequences of 0-255
integers. Everything funnels through here so that the CLI, the theme helpers
and tests share the same acceptance rules and error messages.
"""

from __future__ import annotations

import operator
from typing import Sequence


def parse_hex_color_str(s: str) -> tuple[int, int, int, int]:
    """Return `(r, g, b, a)` in 0-255 from a hex string.

    Accepted forms: "#RRGGBB", "#AARRGGBB", "0xRRGGBB", "0xAARRGGBB",
    "RRGGBB", "AARRGGBB". Case-insensitive. The 8-digit form carries alpha
    first, matching the ARGB ordering of 32-bit color values.
    """
    t = s.strip()
    if t.startswith("#"):
        t = t[1:]
    elif t.lower().startswith("0x"):
        t = t[2:]
    if len(t) not in (6, 8):
        raise ValueError(f"invalid hex color length: '{s}' (expected RRGGBB or AARRGGBB)")
    try:
        value = int(t, 16)
    except ValueError as e:
        raise ValueError(f"invalid hex color: '{s}'") from e
    if len(t) == 6:
        value |= 0xFF000000
    return (
        (value >> 16) & 0xFF,
        (value >> 8) & 0xFF,
        value & 0xFF,
        (value >> 24) & 0xFF,
    )


def _as_sequence(value: object) -> Sequence[object] | None:
    if isinstance(value, (list, tuple)):
        return value
    return None


def _channel(value: object, name: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"channel {name} must be an integer in [0, 255], got {value!r}")
    try:
        value = operator.index(value)
    except TypeError as e:
        raise ValueError(f"channel {name} must be an integer in [0, 255], got {value!r}") from e
    if not 0 <= value <= 255:
        raise ValueError(f"channel {name} out of range [0, 255]: {value}")
    return value


def normalize_color(value: object) -> tuple[int, int, int, int]:
    """Normalize a hex string or `(r, g, b[, a])` tuple into `(r, g, b, a)`.

    Alpha defaults to 255 (opaque).
    """
    if isinstance(value, str):
        return parse_hex_color_str(value)
    seq = _as_sequence(value)
    if seq is None:
        raise ValueError(f"unsupported color type: {type(value)!r}")
    if len(seq) not in (3, 4):
        raise ValueError("color tuple/list must be length 3 or 4")
    r = _channel(seq[0], "r")
    g = _channel(seq[1], "g")
    b = _channel(seq[2], "b")
    a = _channel(seq[3], "a") if len(seq) == 4 else 255
    return (r, g, b, a)


__all__ = ["parse_hex_color_str", "normalize_color"]
