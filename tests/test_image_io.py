"""
Tests for image loading, streaming, and saving.

Covers:
- Loading images and error handling
- Lazy iteration with optional resizing
- Saving a compositor canvas to disk
"""

import inspect
from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image

import grid_compositor.image_io as gc_image_io
from grid_compositor.grid import GridCompositor


class TestImageLoading:
    def test_load_image_valid(
        self,
        make_image_file: Callable[..., Path],
    ) -> None:
        path = make_image_file("blue.png")
        img = gc_image_io.load_image(path)
        assert isinstance(img, Image.Image)
        assert img.mode == "RGBA"
        assert img.size == (10, 10)

    def test_load_image_invalid_path(self) -> None:
        with pytest.raises(FileNotFoundError, match="Image file not found"):
            gc_image_io.load_image("nonexistent_image.png")

    def test_load_image_invalid_data(self, tmp_path: Path) -> None:
        bad = tmp_path / "broken.png"
        bad.write_bytes(b"not an image data")
        with pytest.raises(OSError, match="Error loading image"):
            gc_image_io.load_image(bad)


class TestIterImages:
    def test_is_lazy(
        self,
        make_image_file: Callable[..., Path],
        tmp_path: Path,
    ) -> None:
        """A missing file only fails once iteration reaches it."""
        good = make_image_file("good.png")
        stream = gc_image_io.iter_images([good, tmp_path / "missing.png"])
        assert inspect.isgenerator(stream)
        assert next(stream).size == (10, 10)
        with pytest.raises(FileNotFoundError):
            next(stream)

    def test_resize_to_cell(
        self,
        make_image_file: Callable[..., Path],
    ) -> None:
        paths = [
            make_image_file("small.png", size=(5, 5)),
            make_image_file("exact.png", size=(8, 6)),
        ]
        sizes = [
            img.size
            for img in gc_image_io.iter_images(paths, resize_to=(8, 6))
        ]
        assert sizes == [(8, 6), (8, 6)]


class TestSaveCanvas:
    def test_writes_png_and_creates_dirs(
        self,
        tmp_path: Path,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        comp = GridCompositor((4, 4), 2)
        comp.push(Image.new("RGBA", (4, 4), (9, 9, 9, 255)))
        out = tmp_path / "nested" / "dir" / "sheet.png"

        saved = gc_image_io.save_canvas(comp, out)

        assert saved == out
        assert "Saved 1 image(s) as 8x4 grid" in caplog.text
        with Image.open(saved) as img:
            assert img.format == "PNG"
            assert img.size == (8, 4)
            assert img.getpixel((1, 1)) == (9, 9, 9, 255)
            assert img.getpixel((5, 1)) == (0, 0, 0, 0)

    def test_adds_png_suffix(self, tmp_path: Path) -> None:
        comp = GridCompositor((2, 2), 1, mode="L")
        saved = gc_image_io.save_canvas(comp, tmp_path / "sheet")
        assert saved.suffix == ".png"
        assert saved.is_file()
