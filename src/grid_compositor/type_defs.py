"""
Defines shared type aliases for the grid compositor.

Centralizes reusable type hints to improve consistency and readability.
"""
from __future__ import annotations

from typing import Literal, Union

import numpy as np
import numpy.typing as npt
from PIL import Image

PixelMode = Literal["L", "LA", "RGB", "RGBA", "I;16", "F"]
Size = tuple[int, int]
Point = tuple[int, int]
PixelArray = npt.NDArray[np.generic]
SourceImage = Union[Image.Image, PixelArray]  # noqa: UP007
