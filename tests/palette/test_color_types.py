from __future__ import annotations

import dataclasses

import pytest

from tonalramp.palette import HSL, LAB, LCH, XYZ, Color, InterpolationMode, NormalizedRGB


def test_color_hex_roundtrip_and_packing() -> None:
    c = Color.from_hex("#0078D7")
    assert c == Color(0, 120, 215, 255)
    assert c.to_hex() == "#0078d7"
    assert c.to_argb_hex() == "#ff0078d7"
    assert c.to_uint32() == 0xFF0078D7
    assert Color.from_uint32(0x800078D7) == Color(0, 120, 215, 0x80)
    assert Color.from_argb(0x80, 1, 2, 3) == Color(1, 2, 3, 0x80)


def test_color_validates_channels() -> None:
    with pytest.raises(ValueError):
        Color(256, 0, 0)
    with pytest.raises(ValueError):
        Color(0, -1, 0)
    with pytest.raises(ValueError):
        Color(0, 0, 0, 300)
    with pytest.raises(ValueError):
        Color.from_uint32(1 << 32)


def test_color_coerce() -> None:
    c = Color(1, 2, 3)
    assert Color.coerce(c) is c
    assert Color.coerce("#010203") == c
    assert Color.coerce((1, 2, 3)) == c


def test_triples_round_on_construction() -> None:
    lab = LAB(1.123456789, 2.0, -3.000004)
    assert lab.l == 1.12346
    assert lab.b == -3.0

    raw = LAB(1.123456789, 2.0, 3.0, False)
    assert raw.l == 1.123456789

    coarse = XYZ(0.123456, 0.5, 0.987654, True, 2)
    assert (coarse.x, coarse.y, coarse.z) == (0.12, 0.5, 0.99)


def test_triples_value_equality_ignores_rounding_flags() -> None:
    assert LAB(1.0, 2.0, 3.0) == LAB(1.0, 2.0, 3.0, False)
    assert hash(HSL(10.0, 0.5, 0.5)) == hash(HSL(10.0, 0.5, 0.5, False, 3))
    assert LCH(50.0, 10.0, 0.0) != LCH(50.0, 10.0, 180.0)


def test_triples_are_immutable() -> None:
    rgb = NormalizedRGB(0.1, 0.2, 0.3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        rgb.r = 0.5  # type: ignore[misc]


def test_normalized_rgb_color_conversion() -> None:
    rgb = NormalizedRGB.from_color(Color(255, 128, 0, 10))
    assert rgb == NormalizedRGB(1.0, 0.50196, 0.0)
    assert rgb.denormalize() == Color(255, 128, 0, 255)
    assert rgb.denormalize(alpha=10) == Color(255, 128, 0, 10)


def test_normalized_rgb_denormalize_clamps() -> None:
    rgb = NormalizedRGB(1.5, -0.2, float("nan"), False)
    assert rgb.denormalize() == Color(255, 0, 0)


def test_interpolation_mode_from_value() -> None:
    assert InterpolationMode.from_value("LAB") is InterpolationMode.LAB
    assert InterpolationMode.from_value(InterpolationMode.XYZ) is InterpolationMode.XYZ
    with pytest.raises(ValueError):
        InterpolationMode.from_value("hsv")
