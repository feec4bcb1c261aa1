"""
Streaming grid compositor.

Packs equally-sized images left-to-right, top-to-bottom into one canvas
that grows a row at a time, so callers can feed images from a generator
without knowing how many will arrive.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from grid_compositor.config_defaults import DEFAULT_INITIAL_ROWS, DEFAULT_MODE
from grid_compositor.errors import (
    DimensionMismatchError,
    UnsupportedOperationError,
)
from grid_compositor.grid.canvas import allocate_canvas, blit, grow_canvas
from grid_compositor.grid.slots import (
    available_slots,
    needs_growth,
    rows_for,
    slot_origin,
)
from grid_compositor.logging_utils import logger
from grid_compositor.pixels import (
    image_size,
    pixel_format,
    to_pil_image,
    to_pixel_array,
)

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterable

    from PIL import Image

    from grid_compositor.type_defs import (
        PixelArray,
        PixelMode,
        Point,
        Size,
        SourceImage,
    )


class GridCompositor:
    """
    Grow-on-demand image grid.

    The canvas width is fixed at ``image_width * num_images_per_row``;
    only the height changes, always in whole rows. The n-th pushed image
    lands at column ``n % num_images_per_row``, row
    ``n // num_images_per_row`` no matter when growth happened.

    Not thread-safe. Callers sharing an instance across threads must
    hold one lock around every ``push``.
    """

    def __init__(
        self,
        image_dimensions: Size,
        num_images_per_row: int,
        initial_rows: int = DEFAULT_INITIAL_ROWS,
        *,
        mode: PixelMode = DEFAULT_MODE,
        expected_images: int | None = None,
    ) -> None:
        image_w, image_h = image_dimensions
        if image_w <= 0 or image_h <= 0:
            msg = (
                f"Image dimensions must be positive, got "
                f"{image_w}x{image_h}"
            )
            raise ValueError(msg)
        if num_images_per_row < 1:
            msg = (
                "num_images_per_row must be at least 1, got "
                f"{num_images_per_row}"
            )
            raise ValueError(msg)
        if initial_rows < 1:
            msg = f"initial_rows must be at least 1, got {initial_rows}"
            raise ValueError(msg)
        if expected_images is not None and expected_images < 0:
            msg = (
                "expected_images must be non-negative, got "
                f"{expected_images}"
            )
            raise ValueError(msg)

        self._format = pixel_format(mode)
        self._image_dimensions: Size = (image_w, image_h)
        self._num_images_per_row = num_images_per_row
        self._num_images = 0
        self._last_pasted_index = -1
        self._growth_count = 0

        rows = initial_rows
        if expected_images:
            rows = max(rows, rows_for(expected_images, num_images_per_row))
        self._canvas = allocate_canvas(
            image_w * num_images_per_row,
            image_h * rows,
            self._format,
        )
        self._total_rows = rows

        logger.debug(
            "Grid compositor ready: %dx%d cells, %d per row, %d row(s), "
            "mode %s",
            image_w,
            image_h,
            num_images_per_row,
            rows,
            mode,
        )

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def image_dimensions(self) -> Size:
        """Cell size every pushed image must match."""
        return self._image_dimensions

    @property
    def num_images_per_row(self) -> int:
        return self._num_images_per_row

    @property
    def num_images(self) -> int:
        return self._num_images

    @property
    def last_pasted_index(self) -> int:
        """Index of the most recent image, -1 while empty."""
        return self._last_pasted_index

    @property
    def total_rows(self) -> int:
        return self._total_rows

    @property
    def capacity(self) -> int:
        """Number of slots the current canvas can hold."""
        return self._num_images_per_row * self._total_rows

    @property
    def growth_count(self) -> int:
        """Number of growth events since construction."""
        return self._growth_count

    @property
    def mode(self) -> str:
        return self._format.mode

    @property
    def canvas(self) -> PixelArray:
        """The backing ``(height, width, channels)`` pixel array."""
        return self._canvas

    @property
    def canvas_size(self) -> Size:
        """Return canvas (width, height) in pixels."""
        return int(self._canvas.shape[1]), int(self._canvas.shape[0])

    def __len__(self) -> int:
        return self._num_images

    def pasted_images_len(self) -> int:
        """Return the number of images placed so far."""
        return self._num_images

    def slot_origin(self, index: int) -> Point:
        """Return the top-left pixel of an already placed image."""
        if not 0 <= index < self._num_images:
            msg = (
                f"Slot index {index} out of range for "
                f"{self._num_images} placed image(s)"
            )
            raise IndexError(msg)
        return slot_origin(
            index, self._num_images_per_row, self._image_dimensions,
        )

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------

    def _grow(self) -> None:
        """Add one row of slots, swapping in the new canvas on success."""
        grown, new_rows = grow_canvas(
            self._canvas,
            self._image_dimensions[1],
            self._total_rows,
            self._format,
        )
        self._canvas = grown
        self._total_rows = new_rows
        self._growth_count += 1

    def _next_slot(self) -> Point:
        """Return the origin of the next free slot, growing if full."""
        if needs_growth(
            self._num_images, self._num_images_per_row, self._total_rows,
        ):
            self._grow()
        return slot_origin(
            self._last_pasted_index + 1,
            self._num_images_per_row,
            self._image_dimensions,
        )

    def _prepare(self, image: SourceImage) -> PixelArray:
        """Validate size and convert to the canvas pixel format."""
        actual = image_size(image)
        if actual != self._image_dimensions:
            raise DimensionMismatchError(self._image_dimensions, actual)
        return to_pixel_array(image, self._format)

    def _place(self, pixels: PixelArray) -> None:
        origin = self._next_slot()
        blit(self._canvas, pixels, origin)
        self._last_pasted_index += 1
        self._num_images += 1
        logger.debug(
            "Placed image %d at (%d, %d); %d slot(s) free",
            self._last_pasted_index,
            origin[0],
            origin[1],
            available_slots(
                self._num_images, self._num_images_per_row, self._total_rows,
            ),
        )

    def push(self, image: SourceImage) -> None:
        """
        Place the next image in the grid.

        The image is checked and converted before anything is written,
        so a failure leaves the compositor exactly as it was.

        Raises:
            DimensionMismatchError: If the image size differs from
                ``image_dimensions``.
            CanvasAllocationError: If growing the canvas fails.

        """
        self._place(self._prepare(image))

    def bulk_push(self, images: Iterable[SourceImage]) -> None:
        """
        Place several images as if pushed one by one.

        Every image is validated before the first one is written, so a
        size mismatch anywhere in ``images`` places none of them. All
        images are held in memory at once; prefer ``push`` in a loop for
        long streams.
        """
        prepared = [self._prepare(image) for image in images]
        for pixels in prepared:
            self._place(pixels)

    def remove_image(self, index: int) -> None:
        """Reject removal; the re-packing policy for gaps is undecided."""
        msg = (
            f"Removing image {index} is not supported: grids are "
            "append-only"
        )
        raise UnsupportedOperationError(msg)

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def to_image(self) -> Image.Image:
        """Return the canvas as a Pillow image in the compositor's mode."""
        return to_pil_image(self._canvas, self._format)
