"""
Grid compositing split into slot arithmetic, canvas buffers, and the
streaming compositor that ties them together.

The most commonly used entry points are re-exported here.
"""

from __future__ import annotations

from . import canvas, compositor, slots
from .canvas import allocate_canvas, blit, grow_canvas
from .compositor import GridCompositor
from .slots import (
    available_slots,
    needs_growth,
    rows_for,
    slot_cell,
    slot_origin,
)

__all__ = [
    "GridCompositor",
    "allocate_canvas",
    "available_slots",
    "blit",
    "canvas",
    "compositor",
    "grow_canvas",
    "needs_growth",
    "rows_for",
    "slot_cell",
    "slot_origin",
    "slots",
]
