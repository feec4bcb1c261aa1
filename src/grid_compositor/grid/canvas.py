"""
Canvas allocation, one-row growth, and overwrite blitting.

The canvas is a C-contiguous ``(height, width, channels)`` NumPy array.
Growth never resizes an array in place: a new buffer is built, the old
contents are copied into its prefix, and the caller swaps references
only once the copy has succeeded.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from grid_compositor.constants import MAX_CANVAS_PIXELS
from grid_compositor.errors import CanvasAllocationError
from grid_compositor.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from grid_compositor.pixels import PixelFormat
    from grid_compositor.type_defs import PixelArray, Point


def allocate_canvas(
    width: int,
    height: int,
    fmt: PixelFormat,
) -> PixelArray:
    """Allocate a zero-filled canvas, or raise CanvasAllocationError."""
    if width * height > MAX_CANVAS_PIXELS:
        logger.warning(
            "Canvas is large: %dx%d. Growth needs twice this memory.",
            width,
            height,
        )
    try:
        return np.zeros((height, width, fmt.channels), dtype=fmt.dtype)
    except MemoryError as exc:
        msg = (
            f"Could not allocate {width}x{height} canvas with "
            f"{fmt.channels} channel(s) of {fmt.dtype}"
        )
        raise CanvasAllocationError(msg) from exc


def grow_canvas(
    canvas: PixelArray,
    image_height: int,
    total_rows: int,
    fmt: PixelFormat,
) -> tuple[PixelArray, int]:
    """
    Return a copy of ``canvas`` with one more row of slots.

    The first ``width * height * channels`` elements of the new buffer
    equal the old buffer exactly; every added element is zero. The input
    array is left untouched, so a failed allocation leaves the caller
    with its previous canvas.
    """
    old_h, width = canvas.shape[0], canvas.shape[1]
    new_total_rows = total_rows + 1
    new_h = image_height * new_total_rows

    grown = allocate_canvas(width, new_h, fmt)
    # Row-major layout: the first old_h rows are the buffer prefix
    grown[:old_h] = canvas

    logger.debug(
        "Canvas grown from %d to %d rows (%dx%d -> %dx%d)",
        total_rows,
        new_total_rows,
        width,
        old_h,
        width,
        new_h,
    )
    return grown, new_total_rows


def blit(canvas: PixelArray, pixels: PixelArray, origin: Point) -> None:
    """
    Copy ``pixels`` into ``canvas`` at ``origin``, overwriting in place.

    Parts of the source falling outside the canvas are clipped. A source
    that lies entirely outside is a no-op.
    """
    x, y = origin
    src_h, src_w = pixels.shape[0], pixels.shape[1]
    dst_h, dst_w = canvas.shape[0], canvas.shape[1]

    x0, y0 = max(x, 0), max(y, 0)
    x1, y1 = min(x + src_w, dst_w), min(y + src_h, dst_h)
    if x0 >= x1 or y0 >= y1:
        return

    canvas[y0:y1, x0:x1] = pixels[y0 - y:y1 - y, x0 - x:x1 - x]
