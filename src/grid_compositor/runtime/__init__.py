"""Runtime helpers for command-line input validation."""

from .validation import validate_input_paths, validate_output_path

__all__ = ["validate_input_paths", "validate_output_path"]
