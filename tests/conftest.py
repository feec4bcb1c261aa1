"""
Test configuration and shared fixtures for grid_compositor.

This module defines reusable pytest fixtures for building solid-color
source images, writing them to disk, and constructing compositors.

Note:
    This file is automatically loaded by pytest and should not be
    renamed.

"""
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from PIL import Image

from grid_compositor.grid import GridCompositor
from grid_compositor.logging_utils import logger

CELL = (10, 10)
PER_ROW = 3

ImageFactory = Callable[..., Image.Image]


@pytest.fixture
def make_image() -> ImageFactory:
    """Factory for solid-color Pillow images."""

    def _make(
        color: int | tuple[int, ...] = (255, 0, 0, 255),
        size: tuple[int, int] = CELL,
        mode: str = "RGBA",
    ) -> Image.Image:
        return Image.new(mode, size, color)

    return _make


@pytest.fixture
def make_image_file(
    tmp_path: Path,
    make_image: ImageFactory,
) -> Callable[..., Path]:
    """Save a solid-color image under tmp_path and return its path."""

    def _make(
        name: str,
        color: tuple[int, ...] = (0, 0, 255, 255),
        size: tuple[int, int] = CELL,
        mode: str = "RGBA",
    ) -> Path:
        path = tmp_path / name
        make_image(color, size, mode).save(path)
        return path

    return _make


@pytest.fixture
def compositor() -> GridCompositor:
    """Compositor with 10x10 cells, three per row, one initial row."""
    return GridCompositor(CELL, PER_ROW, 1)


@pytest.fixture(autouse=True)
def enable_logger_propagation(
    monkeypatch: pytest.MonkeyPatch,
) -> Generator[None, None, None]:
    """Enable propagation so caplog sees records; restore the level."""
    monkeypatch.setattr(logger, "propagate", True)
    level = logger.level
    yield
    logger.setLevel(level)
