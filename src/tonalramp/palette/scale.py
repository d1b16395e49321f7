from __future__ import annotations

"""Color scales: ordered color stops sampled by interpolation.

A :class:`ColorScale` holds one or more :class:`ColorScaleStop` values at
fractional positions in [0, 1]. Stops are expected in ascending position
order. This is the caller's responsibility: the order is not validated and
stops are never re-sorted, so sampling a scale built from unordered stops
gives an unspecified (but deterministic) result.
"""

import logging
import math
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from .color_types import Color, InterpolationMode
from .engine import (
    interpolate_lab,
    interpolate_rgb_color,
    interpolate_xyz,
    lab_to_rgb,
    rgb_to_lab,
    rgb_to_xyz,
    xyz_to_rgb,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ColorScaleStop:
    """A color anchored at ``position`` on a scale."""

    color: Color
    position: float


class ColorScale:
    """Immutable sequence of color stops.

    Use :meth:`from_colors` to space colors evenly over [0, 1], or
    :meth:`from_stops` to supply explicit positions.
    """

    __slots__ = ("_stops",)

    def __init__(self, stops: Iterable[ColorScaleStop]) -> None:
        if stops is None:
            raise ValueError("stops must not be None")
        copied = tuple(ColorScaleStop(s.color, float(s.position)) for s in stops)
        if not copied:
            raise ValueError("a color scale needs at least one stop")
        self._stops: Tuple[ColorScaleStop, ...] = copied

    @classmethod
    def from_colors(cls, colors: Iterable[Color]) -> "ColorScale":
        """Distribute ``colors`` evenly between 0 and 1.

        The first and last stops are placed at exactly 0 and 1.
        """
        if colors is None:
            raise ValueError("colors must not be None")
        items = list(colors)
        if not items:
            raise ValueError("a color scale needs at least one color")
        count = len(items)
        stops: List[ColorScaleStop] = []
        for index, color in enumerate(items):
            if index == 0:
                position = 0.0
            elif index == count - 1:
                position = 1.0
            else:
                position = index * (1.0 / (count - 1))
            stops.append(ColorScaleStop(color, position))
        return cls(stops)

    @classmethod
    def from_stops(cls, stops: Iterable[ColorScaleStop]) -> "ColorScale":
        return cls(stops)

    @property
    def stops(self) -> Tuple[ColorScaleStop, ...]:
        return self._stops

    def __len__(self) -> int:
        return len(self._stops)

    def __iter__(self):
        return iter(self._stops)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorScale):
            return NotImplemented
        return self._stops == other._stops

    def __hash__(self) -> int:
        return hash(self._stops)

    def __repr__(self) -> str:
        inner = ", ".join(f"{s.color.to_argb_hex()}@{s.position:g}" for s in self._stops)
        return f"ColorScale([{inner}])"

    def get_color(
        self, position: float, mode: InterpolationMode = InterpolationMode.RGB
    ) -> Color:
        """Sample the scale at ``position``.

        Positions at or beyond the ends return the first/last stop color.
        Otherwise the lower bound is the last stop whose position is
        <= ``position`` (later stops win ties) and the upper bound is the
        stop after it.

        Raises
        ------
        ValueError
            If ``position`` is NaN.
        """
        if math.isnan(position):
            raise ValueError("position must not be NaN")
        mode = InterpolationMode.from_value(mode)
        stops = self._stops
        if len(stops) == 1:
            return stops[0].color

        if position <= 0:
            return stops[0].color
        if position >= 1:
            return stops[-1].color

        lower_index = 0
        for i, stop in enumerate(stops):
            if stop.position <= position:
                lower_index = i

        upper_index = min(lower_index + 1, len(stops) - 1)

        lower = stops[lower_index]
        upper = stops[upper_index]
        span = upper.position - lower.position
        # zero span only happens when the lower bound is the last stop
        local = 1.0 if span == 0 else (position - lower.position) * (1.0 / span)

        if mode == InterpolationMode.LAB:
            left_lab = rgb_to_lab(lower.color, False)
            right_lab = rgb_to_lab(upper.color, False)
            return lab_to_rgb(interpolate_lab(left_lab, right_lab, local), False).denormalize()
        if mode == InterpolationMode.XYZ:
            left_xyz = rgb_to_xyz(lower.color, False)
            right_xyz = rgb_to_xyz(upper.color, False)
            return xyz_to_rgb(interpolate_xyz(left_xyz, right_xyz, local), False).denormalize()
        return interpolate_rgb_color(lower.color, upper.color, local)

    def trim(
        self,
        lower_bound: float,
        upper_bound: float,
        mode: InterpolationMode = InterpolationMode.RGB,
    ) -> "ColorScale":
        """Zoom into [lower_bound, upper_bound] and remap it onto [0, 1].

        Raises
        ------
        ValueError
            If the bounds are outside [0, 1], inverted or NaN.
        """
        if not (0.0 <= lower_bound <= upper_bound <= 1.0):
            raise ValueError(f"Invalid bounds: [{lower_bound}, {upper_bound}]")

        mode = InterpolationMode.from_value(mode)
        logger.debug(
            "trim scale of %d stops to [%s, %s] (%s)",
            len(self),
            lower_bound,
            upper_bound,
            mode.value,
        )

        if lower_bound == upper_bound:
            return ColorScale.from_colors([self.get_color(lower_bound, mode)])

        contained = [
            s for s in self._stops if lower_bound <= s.position <= upper_bound
        ]

        if not contained:
            return ColorScale.from_colors(
                [self.get_color(lower_bound, mode), self.get_color(upper_bound, mode)]
            )

        if contained[0].position != lower_bound:
            contained.insert(0, ColorScaleStop(self.get_color(lower_bound, mode), lower_bound))

        if contained[-1].position != upper_bound:
            contained.append(ColorScaleStop(self.get_color(upper_bound, mode), upper_bound))

        span = upper_bound - lower_bound
        return ColorScale(
            ColorScaleStop(s.color, (s.position - lower_bound) / span) for s in contained
        )

    def sample(
        self, steps: int, mode: InterpolationMode = InterpolationMode.RGB
    ) -> List[Color]:
        """Sample ``steps`` evenly spaced colors from 0 to 1 inclusive.

        ``steps == 1`` returns the color at position 0.
        """
        if steps < 1:
            raise ValueError("steps must be positive.")
        if steps == 1:
            return [self.get_color(0.0, mode)]
        return [self.get_color(i / (steps - 1), mode) for i in range(steps)]


__all__ = ["ColorScaleStop", "ColorScale"]
