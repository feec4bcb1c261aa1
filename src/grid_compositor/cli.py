"""CLI argument parsing and main entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, TypeVar

import grid_compositor.config as gc_config
from grid_compositor.errors import CompositorError
from grid_compositor.logging_utils import logger
from grid_compositor.runtime import validate_input_paths, validate_output_path
from grid_compositor.sheet import (
    MODE_CHOICES,
    SheetOptions,
    build_sheet,
    non_negative_int,
    positive_int,
    size_2d,
)

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Callable, Sequence

T = TypeVar("T")


def _wrap_validator(
    validator: Callable[[str], T],
    error_cls: type[argparse.ArgumentTypeError] = argparse.ArgumentTypeError,
) -> Callable[[str], T]:
    """Convert ``ValueError`` from a validator into ``ArgumentTypeError``."""

    def wrapper(text: str) -> T:
        try:
            return validator(text)
        except ValueError as exc:
            raise error_cls(str(exc)) from exc

    return wrapper


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct the argument parser for the command-line interface."""
    p = argparse.ArgumentParser(
        description=(
            "Pack equally sized images left to right, top to bottom into "
            "a single grid image."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "grid-compositor frames/*.png --per-row 8 --out sheet.png\n"
            "grid-compositor a.jpg b.jpg c.jpg --per-row 2 --cell 128x128 "
            "--resize\n\n"
            "Note:\n"
            "  The cell size defaults to the size of the first image."
        ),
    )
    p.add_argument(
        "images", nargs="*", type=Path,
        help="Input images, placed in the order given")

    grid = p.add_argument_group("grid")
    grid.add_argument(
        "--per-row", type=_wrap_validator(positive_int),
        help="Number of images per row", default=None)
    grid.add_argument(
        "--cell", type=_wrap_validator(size_2d), default=None,
        help="Cell size as WxH, e.g., 64x64")
    grid.add_argument(
        "--initial-rows", type=_wrap_validator(positive_int),
        help="Rows allocated before the first image", default=None)
    grid.add_argument(
        "--expect", type=_wrap_validator(non_negative_int), default=None,
        help="Expected image count, used to pre-size the canvas")
    grid.add_argument(
        "--mode", choices=list(MODE_CHOICES), default=None,
        help="Pixel mode of the output canvas")

    io = p.add_argument_group("input/output")
    io.add_argument(
        "--resize", action="store_true",
        help="Resize images that do not match the cell size")
    io.add_argument(
        "--out", type=Path, default=None,
        help="Output image path")
    io.add_argument(
        "--verbose", action="store_true",
        help="Log every placement and growth event")

    cfg = p.add_argument_group("config")
    cfg.add_argument(
        "--config", type=str,
        help="Path to config.toml file")
    cfg.add_argument(
        "--validate-config-only", action="store_true",
        help="Validate config file and exit without compositing")

    return p


def log_parameters(options: SheetOptions) -> None:
    """Log the effective run parameters."""
    logger.info("Input images: %d", len(options.image_paths))
    logger.info("Images per row: %d", options.images_per_row)
    if options.cell_size is None:
        logger.info("Cell size: (from first image)")
    else:
        logger.info("Cell size: %dx%d", *options.cell_size)
    logger.info("Initial rows: %d", options.initial_rows)
    logger.info("Expected images: %s", options.expected_images or "(none)")
    logger.info("Pixel mode: %s", options.mode)
    logger.info("Resize mismatched: %s",
                "Enabled" if options.resize else "Disabled")
    logger.info("Output: %s", options.out_path)


def run_from_args(args: argparse.Namespace) -> Path | None:
    """Run the compositor from parsed command-line arguments."""
    base_cfg: gc_config.CompositorConfig | None = None
    if args.config:
        base_cfg = gc_config.ConfigLoader.load(args.config)
        if args.validate_config_only:
            logger.info("Config %s validated successfully.", args.config)
            return None

    cfg = gc_config.build_config_from_cli(vars(args), base_config=base_cfg)

    paths = validate_input_paths(args.images)
    validate_output_path(cfg.output.path)
    options = SheetOptions.from_config(cfg, paths)
    log_parameters(options)

    return build_sheet(options)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command-line interface."""
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args(argv)
    if args.validate_config_only and not args.config:
        arg_parser.error("--validate-config-only requires --config")
    if not args.validate_config_only and not args.images:
        arg_parser.error("the following arguments are required: images")
    if args.verbose:
        logger.setLevel(logging.DEBUG)

    try:
        run_from_args(args)
    except (CompositorError, FileNotFoundError, ValueError) as exc:
        arg_parser.error(str(exc))

    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
