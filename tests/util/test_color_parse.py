from __future__ import annotations

import pytest

from tonalramp.util.color import normalize_color, parse_hex_color_str


def test_parse_hex_color_valid_variants() -> None:
    assert parse_hex_color_str("#0078D7") == (0x00, 0x78, 0xD7, 0xFF)
    assert parse_hex_color_str("0x800078d7") == (0x00, 0x78, 0xD7, 0x80)
    assert parse_hex_color_str("  112233 ") == (0x11, 0x22, 0x33, 0xFF)
    assert parse_hex_color_str("#00112233") == (0x11, 0x22, 0x33, 0x00)


def test_parse_hex_color_invalid() -> None:
    with pytest.raises(ValueError):
        parse_hex_color_str("#123")
    with pytest.raises(ValueError):
        parse_hex_color_str("not-a-color")
    with pytest.raises(ValueError):
        parse_hex_color_str("#GG0000")


def test_normalize_color_from_tuple() -> None:
    assert normalize_color((255, 128, 0)) == (255, 128, 0, 255)
    assert normalize_color([1, 2, 3, 4]) == (1, 2, 3, 4)
    assert normalize_color("#010203") == (1, 2, 3, 255)


def test_normalize_color_rejects_bad_channels() -> None:
    with pytest.raises(ValueError):
        normalize_color((256, 0, 0))
    with pytest.raises(ValueError):
        normalize_color((0.5, 0, 0))
    with pytest.raises(ValueError):
        normalize_color((True, 0, 0))
    with pytest.raises(ValueError):
        normalize_color((1, 2))
    with pytest.raises(ValueError):
        normalize_color(42)
