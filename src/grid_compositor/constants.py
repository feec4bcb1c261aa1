"""
Constants used internally by the grid compositor.

These are implementation-level values that are not exposed through
config files or CLI arguments.
"""

import numpy as np

# Pixel formats keyed by Pillow mode: (channels, dtype)
PIXEL_FORMATS: dict[str, tuple[int, type[np.generic]]] = {
    "L": (1, np.uint8),
    "LA": (2, np.uint8),
    "RGB": (3, np.uint8),
    "RGBA": (4, np.uint8),
    "I;16": (1, np.uint16),
    "F": (1, np.float32),
}

# Canvases above this many pixels trigger a size warning
MAX_CANVAS_PIXELS = 100_000_000

# Output encoding, used when the output path has no suffix
DEFAULT_OUTPUT_SUFFIX = ".png"

# Shape of the WxH size strings accepted on the command line
SIZE_2D_PARTS = 2
