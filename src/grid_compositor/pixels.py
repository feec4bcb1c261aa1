"""Pixel format lookup and conversion of source images to raw arrays."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
from PIL import Image

from grid_compositor.constants import PIXEL_FORMATS

if TYPE_CHECKING:  # pragma: no cover
    from grid_compositor.type_defs import PixelArray, Size, SourceImage


@dataclass(frozen=True, slots=True)
class PixelFormat:
    """Channel layout of one canvas pixel."""

    mode: str
    channels: int
    dtype: np.dtype

    @property
    def zero(self) -> np.generic:
        """Return the zero value of the pixel representation."""
        return self.dtype.type(0)


def pixel_format(mode: str) -> PixelFormat:
    """Look up the pixel format for a Pillow mode string."""
    try:
        channels, dtype = PIXEL_FORMATS[mode]
    except KeyError as exc:
        supported = ", ".join(PIXEL_FORMATS)
        msg = f"Unsupported pixel mode '{mode}'. Expected one of: {supported}"
        raise ValueError(msg) from exc
    return PixelFormat(mode=mode, channels=channels, dtype=np.dtype(dtype))


def image_size(image: SourceImage) -> Size:
    """Return (width, height) of a Pillow image or pixel array."""
    if isinstance(image, Image.Image):
        return image.size
    if isinstance(image, np.ndarray) and image.ndim >= 2:  # noqa: PLR2004
        return int(image.shape[1]), int(image.shape[0])
    msg = f"Unsupported image type: {type(image).__name__}"
    raise TypeError(msg)


def to_pixel_array(image: SourceImage, fmt: PixelFormat) -> PixelArray:
    """
    Convert a source image into an (h, w, C) array in the given format.

    Pillow images are converted to the format's mode first. Arrays are
    taken as-is and must already carry the format's dtype; single
    channel formats also accept 2-D arrays.
    """
    if isinstance(image, Image.Image):
        if image.mode != fmt.mode:
            image = image.convert(fmt.mode)
        arr = np.asarray(image, dtype=fmt.dtype)
    elif isinstance(image, np.ndarray):
        if image.dtype != fmt.dtype:
            msg = (
                f"Array dtype {image.dtype} does not match canvas dtype "
                f"{fmt.dtype} for mode '{fmt.mode}'"
            )
            raise ValueError(msg)
        arr = image
    else:
        msg = f"Unsupported image type: {type(image).__name__}"
        raise TypeError(msg)

    if arr.ndim == 2 and fmt.channels == 1:  # noqa: PLR2004
        arr = arr[:, :, np.newaxis]
    if arr.ndim != 3 or arr.shape[2] != fmt.channels:  # noqa: PLR2004
        msg = (
            f"Pixel array shape {arr.shape} is incompatible with mode "
            f"'{fmt.mode}' ({fmt.channels} channel(s))"
        )
        raise ValueError(msg)
    return arr


def to_pil_image(pixels: PixelArray, fmt: PixelFormat) -> Image.Image:
    """Wrap an (h, w, C) array as a Pillow image in the format's mode."""
    height, width = pixels.shape[0], pixels.shape[1]
    raw = np.ascontiguousarray(pixels, dtype=fmt.dtype).tobytes()
    return Image.frombytes(fmt.mode, (width, height), raw)
