"""Public package exports for the grid compositor."""

from __future__ import annotations

from .errors import (
    CanvasAllocationError,
    CompositorError,
    DimensionMismatchError,
    UnsupportedOperationError,
)
from .grid import GridCompositor
from .sheet import SheetOptions, build_sheet

__all__ = [
    "CanvasAllocationError",
    "CompositorError",
    "DimensionMismatchError",
    "GridCompositor",
    "SheetOptions",
    "UnsupportedOperationError",
    "build_sheet",
]
