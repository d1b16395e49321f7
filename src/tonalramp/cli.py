"""
Command line front end: print the tonal palette derived from a seed color.

Example::

    tonalramp "#0078D7" --steps 11 --mode lab --format rgb_255

Defaults for steps, interpolation mode, output format and log level come
from `tonalramp.common.settings` (`TONALRAMP_*` environment variables).
"""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

from .common import settings as settings_mod
from .common.logging import setup_default_logging
from .common.settings import EXPORT_FORMAT_CHOICES, INTERPOLATION_CHOICES
from .palette import Color, ColorPalette, InterpolationMode
from .palette.ui_helpers import export_colors

logger = logging.getLogger(__name__)


def _color_arg(value: str) -> Color:
    try:
        return Color.from_hex(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from e
    if n < 1:
        raise argparse.ArgumentTypeError("steps must be positive")
    return n


def _unit_float(value: str) -> float:
    try:
        f = float(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}") from e
    if not 0.0 <= f <= 1.0:
        raise argparse.ArgumentTypeError(f"must be within [0, 1]: {value}")
    return f


def build_parser() -> argparse.ArgumentParser:
    cfg = settings_mod.get()
    defaults = ColorPalette()

    p = argparse.ArgumentParser(
        prog="tonalramp",
        description="Generate a light-to-dark tonal palette from a seed color.",
    )
    p.add_argument("seed", type=_color_arg, help="seed color (#RRGGBB or #AARRGGBB)")
    p.add_argument("--steps", type=_positive_int, default=cfg.DEFAULT_STEPS)
    p.add_argument("--mode", choices=INTERPOLATION_CHOICES, default=cfg.DEFAULT_INTERPOLATION)
    p.add_argument(
        "--format", dest="fmt", choices=EXPORT_FORMAT_CHOICES, default=cfg.DEFAULT_EXPORT_FORMAT
    )
    p.add_argument(
        "--light",
        type=_color_arg,
        default=defaults.scale_color_light,
        help="light end of the base scale",
    )
    p.add_argument(
        "--dark",
        type=_color_arg,
        default=defaults.scale_color_dark,
        help="dark end of the base scale",
    )
    p.add_argument("--clip-light", type=_unit_float, default=defaults.clip_light)
    p.add_argument("--clip-dark", type=_unit_float, default=defaults.clip_dark)
    p.add_argument("--saturation-cutoff", type=float, default=defaults.saturation_adjustment_cutoff)
    p.add_argument("--saturation-light", type=float, default=defaults.saturation_light)
    p.add_argument("--saturation-dark", type=float, default=defaults.saturation_dark)
    p.add_argument("--overlay-light", type=float, default=defaults.overlay_light)
    p.add_argument("--overlay-dark", type=float, default=defaults.overlay_dark)
    p.add_argument("--multiply-light", type=float, default=defaults.multiply_light)
    p.add_argument("--multiply-dark", type=float, default=defaults.multiply_dark)
    p.add_argument(
        "--log-level", default=None, help="logging level (default from TONALRAMP_LOG_LEVEL)"
    )
    return p


def recipe_from_args(args: argparse.Namespace) -> ColorPalette:
    return ColorPalette(
        interpolation_mode=InterpolationMode.from_value(args.mode),
        steps=args.steps,
        scale_color_light=args.light,
        scale_color_dark=args.dark,
        color=args.seed,
        clip_light=args.clip_light,
        clip_dark=args.clip_dark,
        saturation_adjustment_cutoff=args.saturation_cutoff,
        saturation_light=args.saturation_light,
        saturation_dark=args.saturation_dark,
        overlay_light=args.overlay_light,
        overlay_dark=args.overlay_dark,
        multiply_light=args.multiply_light,
        multiply_dark=args.multiply_dark,
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    cfg = settings_mod.get()
    level = args.log_level or ("DEBUG" if cfg.DEBUG_RECIPE else cfg.LOG_LEVEL)
    setup_default_logging(level)

    if args.clip_light + args.clip_dark > 1.0:
        parser.error("--clip-light plus --clip-dark must not exceed 1")

    recipe = recipe_from_args(args)
    logger.info(
        "generating %d steps for %s (%s)", recipe.steps, recipe.color.to_argb_hex(), args.mode
    )

    for value in export_colors(recipe.generate_palette(), args.fmt):
        if isinstance(value, tuple):
            print(" ".join(f"{v:g}" if isinstance(v, float) else str(v) for v in value))
        else:
            print(value)
    return 0


__all__ = ["build_parser", "recipe_from_args", "main"]
