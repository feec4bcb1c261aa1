"""
Exception types raised by the grid compositor.

Each error also derives from the closest built-in exception so callers
that only know about ``ValueError`` or ``MemoryError`` still catch it.
"""

from __future__ import annotations


class CompositorError(Exception):
    """Base class for all compositor failures."""


class DimensionMismatchError(CompositorError, ValueError):
    """A pushed image does not match the compositor's cell size."""

    def __init__(
        self,
        expected: tuple[int, int],
        actual: tuple[int, int],
    ) -> None:
        self.expected = expected
        self.actual = actual
        msg = (
            f"Image size {actual[0]}x{actual[1]} does not match grid cell "
            f"size {expected[0]}x{expected[1]}"
        )
        super().__init__(msg)


class CanvasAllocationError(CompositorError, MemoryError):
    """The canvas buffer could not be allocated."""


class UnsupportedOperationError(CompositorError, NotImplementedError):
    """The operation is declared but has no defined behavior."""
