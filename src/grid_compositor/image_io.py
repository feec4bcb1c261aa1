"""Image loading, lazy streaming from disk, and saving finished grids."""
from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from PIL import Image

from grid_compositor.constants import DEFAULT_OUTPUT_SUFFIX
from grid_compositor.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterable, Iterator

    from grid_compositor.grid import GridCompositor
    from grid_compositor.type_defs import Size


def load_image(path: str | Path) -> Image.Image:
    """
    Load an image from a file path.

    The file is read eagerly so the handle is closed on return.

    Args:
        path: Path to the image file

    Returns:
        PIL Image in its native mode

    Raises:
        FileNotFoundError: If the image file does not exist
        IOError: If the image cannot be opened or processed

    """
    try:
        with Image.open(path) as img:
            img.load()
            return img.copy()
    except FileNotFoundError as e:
        msg = f"Image file not found: '{path}'"
        raise FileNotFoundError(msg) from e
    except OSError as e:
        msg = f"Error loading image '{path}': {e!s}"
        raise OSError(msg) from e


def iter_images(
    paths: Iterable[str | Path],
    *,
    resize_to: Size | None = None,
) -> Iterator[Image.Image]:
    """
    Yield images one at a time so a long list never sits in memory.

    When ``resize_to`` is set, images of any other size are resized to
    it with Lanczos resampling.
    """
    for path in paths:
        img = load_image(path)
        if resize_to is not None and img.size != tuple(resize_to):
            logger.debug(
                "Resizing %s from %dx%d to %dx%d",
                path,
                img.width,
                img.height,
                resize_to[0],
                resize_to[1],
            )
            img = img.resize(resize_to, Image.Resampling.LANCZOS)
        yield img


def _ensure_suffix(path: Path) -> Path:
    """Return a path with the default suffix when none is given."""
    return path if path.suffix else path.with_suffix(DEFAULT_OUTPUT_SUFFIX)


def save_canvas(compositor: GridCompositor, out_path: str | Path) -> Path:
    """
    Encode the compositor canvas to ``out_path``.

    Parent directories are created as needed. The format follows the
    file suffix, defaulting to PNG.
    """
    path = _ensure_suffix(Path(out_path))
    path.parent.mkdir(parents=True, exist_ok=True)

    img = compositor.to_image()
    img.save(path)
    logger.info(
        "Saved %d image(s) as %dx%d grid to: %s",
        compositor.pasted_images_len(),
        img.width,
        img.height,
        path,
    )
    return path
