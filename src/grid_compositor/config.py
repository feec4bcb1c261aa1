"""
Configuration schema and loader for the grid compositor.

Defines Pydantic models representing structured configuration sections
and a TOML-based config loader with validation support.
"""

from pathlib import Path
from typing import Any

import tomlkit
from pydantic import BaseModel, Field

from grid_compositor.config_defaults import (
    DEFAULT_EXPECTED_IMAGES,
    DEFAULT_IMAGES_PER_ROW,
    DEFAULT_INITIAL_ROWS,
    DEFAULT_MODE,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_RESIZE,
)
from grid_compositor.type_defs import PixelMode


class GridConfig(BaseModel):
    """Cell size, row width, and pixel format of the grid."""

    image_width: int | None = Field(None, ge=1)
    image_height: int | None = Field(None, ge=1)
    images_per_row: int = Field(DEFAULT_IMAGES_PER_ROW, ge=1)
    initial_rows: int = Field(DEFAULT_INITIAL_ROWS, ge=1)
    expected_images: int = Field(DEFAULT_EXPECTED_IMAGES, ge=0)
    mode: PixelMode = Field(DEFAULT_MODE)

    @property
    def image_dimensions(self) -> tuple[int, int] | None:
        """Return (width, height) when both are configured."""
        if self.image_width is None or self.image_height is None:
            return None
        return self.image_width, self.image_height


class InputConfig(BaseModel):
    """Control how source images are read."""

    resize: bool = DEFAULT_RESIZE


class OutputConfig(BaseModel):
    """Configure where the finished grid is written."""

    path: str = Field(DEFAULT_OUTPUT_PATH)


class CompositorConfig(BaseModel):
    """
    Root configuration object combining all supported sections.

    Mirrors the structure of the TOML config file.
    """

    grid: GridConfig = Field(
        default_factory=lambda: GridConfig.model_validate({}),
    )
    input: InputConfig = Field(
        default_factory=lambda: InputConfig.model_validate({}),
    )
    output: OutputConfig = Field(
        default_factory=lambda: OutputConfig.model_validate({}),
    )


# CLI argument name -> (section, field)
_CLI_OVERRIDES: dict[str, tuple[str, str]] = {
    "per_row": ("grid", "images_per_row"),
    "initial_rows": ("grid", "initial_rows"),
    "expect": ("grid", "expected_images"),
    "mode": ("grid", "mode"),
    "resize": ("input", "resize"),
    "out": ("output", "path"),
}


def build_config_from_cli(
    args: dict[str, Any],
    base_config: CompositorConfig | None = None,
) -> CompositorConfig:
    """
    Overlay CLI values onto a base config and re-validate.

    Arguments that are absent or ``None`` keep the base value. A
    ``cell`` size tuple sets both image width and height.
    """
    base = base_config or CompositorConfig.model_validate({})
    data = base.model_dump()

    for arg_name, (section, field) in _CLI_OVERRIDES.items():
        value = args.get(arg_name)
        if value is None or (arg_name == "resize" and value is False):
            continue
        data[section][field] = str(value) if arg_name == "out" else value

    cell = args.get("cell")
    if cell is not None:
        data["grid"]["image_width"], data["grid"]["image_height"] = cell

    return CompositorConfig.model_validate(data)


class ConfigLoader:
    """
    Loads and parses a TOML configuration file into a typed config object.

    Falls back to defaults for any missing subsections or fields.
    """

    @staticmethod
    def load(path: str) -> CompositorConfig:
        """
        Load a compositor configuration from a TOML file.

        Returns a validated CompositorConfig instance based on the file
        contents.
        """
        config_path = Path(path)
        if not config_path.is_file():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)

        with config_path.open("r", encoding="utf-8") as f:
            doc = tomlkit.load(f)

        return CompositorConfig.model_validate(doc.unwrap())
