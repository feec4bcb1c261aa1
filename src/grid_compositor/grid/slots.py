"""Slot arithmetic mapping insertion indices to canvas coordinates."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from grid_compositor.type_defs import Point, Size


def available_slots(
    num_images: int,
    num_images_per_row: int,
    total_rows: int,
) -> int:
    """Return how many free slots the allocated rows still hold."""
    return num_images_per_row * total_rows - num_images


def needs_growth(
    num_images: int,
    num_images_per_row: int,
    total_rows: int,
) -> bool:
    """Return True when every allocated slot is taken."""
    return available_slots(num_images, num_images_per_row, total_rows) <= 0


def slot_cell(index: int, num_images_per_row: int) -> tuple[int, int]:
    """Return the (column, row) cell of a 0-based insertion index."""
    if index < 0:
        msg = f"Slot index must be non-negative, got {index}"
        raise ValueError(msg)
    row, column = divmod(index, num_images_per_row)
    return column, row


def slot_origin(
    index: int,
    num_images_per_row: int,
    image_dimensions: Size,
) -> Point:
    """Return the top-left pixel coordinate of a slot."""
    column, row = slot_cell(index, num_images_per_row)
    image_w, image_h = image_dimensions
    return column * image_w, row * image_h


def rows_for(count: int, num_images_per_row: int) -> int:
    """Return the number of rows needed to hold ``count`` images."""
    return max(1, -(-count // num_images_per_row))
