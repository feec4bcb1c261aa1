"""Shared default values for user-facing configuration settings."""
from grid_compositor.type_defs import PixelMode

# Grid
DEFAULT_IMAGES_PER_ROW = 8
DEFAULT_INITIAL_ROWS = 1
DEFAULT_EXPECTED_IMAGES = 0
DEFAULT_MODE: PixelMode = "RGBA"

# Input
DEFAULT_RESIZE = False

# Output
DEFAULT_OUTPUT_PATH = "grid.png"
