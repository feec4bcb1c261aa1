"""
Contact sheet rendering API shared by the CLI and tests.

Streams image files from disk through a :class:`GridCompositor` one at a
time and writes the finished canvas. The options dataclass mirrors the
command-line flags so parsed arguments can be passed straight through.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from grid_compositor.config_defaults import (
    DEFAULT_EXPECTED_IMAGES,
    DEFAULT_IMAGES_PER_ROW,
    DEFAULT_INITIAL_ROWS,
    DEFAULT_MODE,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_RESIZE,
)
from grid_compositor.constants import PIXEL_FORMATS, SIZE_2D_PARTS
from grid_compositor.grid import GridCompositor
from grid_compositor.image_io import iter_images, load_image, save_canvas
from grid_compositor.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from grid_compositor.config import CompositorConfig
    from grid_compositor.type_defs import PixelMode, Size

MODE_CHOICES: tuple[str, ...] = tuple(PIXEL_FORMATS)


@dataclass(slots=True)
class SheetOptions:
    """Configuration for one contact sheet run."""

    image_paths: list[Path] = field(default_factory=list)
    out_path: Path = Path(DEFAULT_OUTPUT_PATH)
    images_per_row: int = DEFAULT_IMAGES_PER_ROW
    cell_size: Size | None = None
    initial_rows: int = DEFAULT_INITIAL_ROWS
    expected_images: int = DEFAULT_EXPECTED_IMAGES
    mode: PixelMode = DEFAULT_MODE
    resize: bool = DEFAULT_RESIZE

    @classmethod
    def from_config(
        cls,
        cfg: CompositorConfig,
        image_paths: list[Path],
    ) -> SheetOptions:
        """Build options from a validated config and input paths."""
        return cls(
            image_paths=list(image_paths),
            out_path=Path(cfg.output.path),
            images_per_row=cfg.grid.images_per_row,
            cell_size=cfg.grid.image_dimensions,
            initial_rows=cfg.grid.initial_rows,
            expected_images=cfg.grid.expected_images,
            mode=cfg.grid.mode,
            resize=cfg.input.resize,
        )


def positive_int(text: str) -> int:
    """Argparse-style validator that enforces a strictly positive integer."""
    try:
        value = int(text)
    except ValueError as exc:
        msg = "must be an integer"
        raise ValueError(msg) from exc
    if value <= 0:
        msg = "must be positive"
        raise ValueError(msg)
    return value


def non_negative_int(text: str) -> int:
    """Argparse-style validator for counts that may be zero."""
    try:
        value = int(text)
    except ValueError as exc:
        msg = "must be an integer"
        raise ValueError(msg) from exc
    if value < 0:
        msg = "must not be negative"
        raise ValueError(msg)
    return value


def size_2d(text: str) -> Size:
    """Parse ``WxH`` strings into integer tuples and validate positivity."""
    parts = text.lower().split("x")
    if len(parts) != SIZE_2D_PARTS:
        msg = "must look like WxH, e.g., 64x64"
        raise ValueError(msg)
    try:
        width, height = int(parts[0]), int(parts[1])
    except ValueError as exc:
        msg = "width and height must be integers"
        raise ValueError(msg) from exc
    if width <= 0 or height <= 0:
        msg = "width and height must be positive"
        raise ValueError(msg)
    return width, height


def _resolve_cell_size(options: SheetOptions) -> Size:
    """Use the configured cell size or fall back to the first image."""
    if options.cell_size is not None:
        return options.cell_size
    first = load_image(options.image_paths[0])
    return first.size


def build_sheet(options: SheetOptions) -> Path:
    """
    Composite every input image into one grid and save it.

    Images are read lazily, one per push. Returns the saved ``Path``.
    A :class:`ValueError` is raised when no inputs are given; size
    mismatches surface as ``DimensionMismatchError`` unless
    ``options.resize`` is set.
    """
    if not options.image_paths:
        msg = "No input images provided"
        raise ValueError(msg)

    cell = _resolve_cell_size(options)
    compositor = GridCompositor(
        cell,
        options.images_per_row,
        options.initial_rows,
        mode=options.mode,
        expected_images=options.expected_images or None,
    )

    resize_to = cell if options.resize else None
    for img in iter_images(options.image_paths, resize_to=resize_to):
        compositor.push(img)

    logger.info(
        "Composited %d image(s) into %d row(s) (%d growth event(s))",
        compositor.pasted_images_len(),
        compositor.total_rows,
        compositor.growth_count,
    )
    return save_canvas(compositor, options.out_path)


__all__ = [
    "MODE_CHOICES",
    "SheetOptions",
    "build_sheet",
    "non_negative_int",
    "positive_int",
    "size_2d",
]
