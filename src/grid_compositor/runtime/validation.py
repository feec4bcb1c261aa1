"""Input validation helpers for command-line runs."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from PIL import Image

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence


def validate_input_paths(paths: Sequence[str | Path]) -> list[Path]:
    """Ensure at least one input is given and every path is a file."""
    if not paths:
        msg = "At least one input image is required"
        raise ValueError(msg)
    resolved = [Path(p) for p in paths]
    missing = [str(p) for p in resolved if not p.is_file()]
    if missing:
        msg = f"Input image(s) not found: {', '.join(missing)}"
        raise FileNotFoundError(msg)
    return resolved


def validate_output_path(path: str | Path) -> None:
    """Ensure Pillow knows how to encode the output file's suffix."""
    suffix = Path(path).suffix.lower()
    if not suffix:
        return
    if suffix not in Image.registered_extensions():
        msg = f"Unsupported output format: '{suffix}'"
        raise ValueError(msg)
