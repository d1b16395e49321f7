from __future__ import annotations

import math

import pytest

from tonalramp.util.math_utils import (
    clamp_to_byte,
    clamp_to_unit,
    degrees_to_radians,
    lerp,
    lerp_byte,
    radians_to_degrees,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (float("nan"), 0),
        (float("inf"), 255),
        (float("-inf"), 0),
        (-3.0, 0),
        (300.0, 255),
        (254.6, 255),
        (12.4, 12),
        # half to even
        (127.5, 128),
        (128.5, 128),
    ],
)
def test_clamp_to_byte(value: float, expected: int) -> None:
    out = clamp_to_byte(value)
    assert out == expected
    assert isinstance(out, int)


@pytest.mark.parametrize(
    "value, expected",
    [
        (float("nan"), 0.0),
        (float("inf"), 1.0),
        (float("-inf"), 0.0),
        (-0.2, 0.0),
        (1.7, 1.0),
        (0.25, 0.25),
    ],
)
def test_clamp_to_unit(value: float, expected: float) -> None:
    assert clamp_to_unit(value) == expected


def test_lerp_saturates_at_both_ends() -> None:
    assert lerp(2.0, 4.0, -1.0) == 2.0
    assert lerp(2.0, 4.0, 0.0) == 2.0
    assert lerp(2.0, 4.0, 1.0) == 4.0
    assert lerp(2.0, 4.0, 5.0) == 4.0
    assert lerp(2.0, 4.0, 0.25) == pytest.approx(2.5)


def test_lerp_byte_rounds_and_shortcuts() -> None:
    assert lerp_byte(0, 255, 0.5) == 128
    assert lerp_byte(0, 255, 0.25) == 64
    assert lerp_byte(10, 10, 0.3) == 10
    assert lerp_byte(10, 200, 0.0) == 10
    assert lerp_byte(10, 200, 1.0) == 200


def test_degree_radian_conversion() -> None:
    assert degrees_to_radians(180.0) == pytest.approx(math.pi)
    assert radians_to_degrees(math.pi / 2) == pytest.approx(90.0)
    assert radians_to_degrees(degrees_to_radians(37.0)) == pytest.approx(37.0)
