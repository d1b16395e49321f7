from __future__ import annotations

"""Photo-compositing blend modes and LCH saturation adjustment.

Blends take a ``bottom`` and a ``top`` :class:`NormalizedRGB` and combine
them channel by channel. Channel formulas expect inputs in [0, 1]; inputs
are not clamped before combination, only overlay clamps its output.
"""

from typing import Callable

from ..util.math_utils import clamp_to_unit
from .color_types import LCH, BlendMode, NormalizedRGB
from .engine import lch_to_rgb, rgb_to_lch

DEFAULT_SATURATION_CONSTANT = 18.0


# --- single channel ----------------------------------------------------


def blend_burn_channel(bottom: float, top: float) -> float:
    if top == 0.0:
        # 0 rather than the limit value 1, as other implementations do
        return 0.0
    return 1.0 - (1.0 - bottom) / top


def blend_darken_channel(bottom: float, top: float) -> float:
    return min(bottom, top)


def blend_dodge_channel(bottom: float, top: float) -> float:
    if top >= 1.0:
        return 1.0
    value = bottom / (1.0 - top)
    if value >= 1.0:
        return 1.0
    return value


def blend_lighten_channel(bottom: float, top: float) -> float:
    return max(bottom, top)


def blend_multiply_channel(bottom: float, top: float) -> float:
    return bottom * top


def blend_overlay_channel(bottom: float, top: float) -> float:
    if bottom < 0.5:
        return clamp_to_unit(2.0 * top * bottom)
    return clamp_to_unit(1.0 - 2.0 * (1.0 - top) * (1.0 - bottom))


def blend_screen_channel(bottom: float, top: float) -> float:
    return 1.0 - (1.0 - top) * (1.0 - bottom)


# --- per color ---------------------------------------------------------


def _per_channel(
    fn: Callable[[float, float], float], bottom: NormalizedRGB, top: NormalizedRGB
) -> NormalizedRGB:
    return NormalizedRGB(
        fn(bottom.r, top.r), fn(bottom.g, top.g), fn(bottom.b, top.b), False
    )


def blend_burn(bottom: NormalizedRGB, top: NormalizedRGB) -> NormalizedRGB:
    return _per_channel(blend_burn_channel, bottom, top)


def blend_darken(bottom: NormalizedRGB, top: NormalizedRGB) -> NormalizedRGB:
    return _per_channel(blend_darken_channel, bottom, top)


def blend_dodge(bottom: NormalizedRGB, top: NormalizedRGB) -> NormalizedRGB:
    return _per_channel(blend_dodge_channel, bottom, top)


def blend_lighten(bottom: NormalizedRGB, top: NormalizedRGB) -> NormalizedRGB:
    return _per_channel(blend_lighten_channel, bottom, top)


def blend_multiply(bottom: NormalizedRGB, top: NormalizedRGB) -> NormalizedRGB:
    return _per_channel(blend_multiply_channel, bottom, top)


def blend_overlay(bottom: NormalizedRGB, top: NormalizedRGB) -> NormalizedRGB:
    return _per_channel(blend_overlay_channel, bottom, top)


def blend_screen(bottom: NormalizedRGB, top: NormalizedRGB) -> NormalizedRGB:
    return _per_channel(blend_screen_channel, bottom, top)


_BLENDERS: dict[BlendMode, Callable[[NormalizedRGB, NormalizedRGB], NormalizedRGB]] = {
    BlendMode.BURN: blend_burn,
    BlendMode.DARKEN: blend_darken,
    BlendMode.DODGE: blend_dodge,
    BlendMode.LIGHTEN: blend_lighten,
    BlendMode.MULTIPLY: blend_multiply,
    BlendMode.OVERLAY: blend_overlay,
    BlendMode.SCREEN: blend_screen,
}


def blend(bottom: NormalizedRGB, top: NormalizedRGB, mode: BlendMode) -> NormalizedRGB:
    """Blend ``top`` onto ``bottom`` with the given mode.

    Raises
    ------
    ValueError
        If ``mode`` is not a :class:`BlendMode` member.
    """
    try:
        fn = _BLENDERS[mode]
    except (KeyError, TypeError) as exc:
        raise ValueError(f"Unknown blend mode: {mode!r}") from exc
    return fn(bottom, top)


def saturate_via_lch(
    color: NormalizedRGB,
    saturation: float,
    saturation_constant: float = DEFAULT_SATURATION_CONSTANT,
) -> NormalizedRGB:
    """Shift chroma in LCH by ``saturation * saturation_constant``.

    Chroma is floored at 0. Lightness and hue are preserved.
    """
    lch = rgb_to_lch(color, False)
    saturated = lch.c + saturation * saturation_constant
    if saturated < 0:
        saturated = 0.0
    return lch_to_rgb(LCH(lch.l, saturated, lch.h, False), False)


__all__ = [
    "DEFAULT_SATURATION_CONSTANT",
    "blend",
    "blend_burn",
    "blend_darken",
    "blend_dodge",
    "blend_lighten",
    "blend_multiply",
    "blend_overlay",
    "blend_screen",
    "blend_burn_channel",
    "blend_darken_channel",
    "blend_dodge_channel",
    "blend_lighten_channel",
    "blend_multiply_channel",
    "blend_overlay_channel",
    "blend_screen_channel",
    "saturate_via_lch",
]
