"""
Atomic file writer for generated examples.

Ensures that file writes are atomic to prevent a half written example
from an interrupted run.
"""

from __future__ import annotations

import json
import tempfile
from collections.abc import Callable
from pathlib import Path

from ..config import OutputMode


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file
    """

    def __init__(self, validate_json: Callable[[str], None] | None = None):
        """Initialize the atomic writer.

        Args:
            validate_json: Optional validation function for JSON output
        """
        self._validate_json = validate_json or self._default_validate_json

    def write(self, path: Path, content: str, output_format: str = "json", validate: bool = True) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write
            output_format: Format for validation ("json" or "html")
            validate: Whether to validate before finalizing

        Raises:
            ValueError: If validation fails
            OSError: If file operations fail
        """
        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )
        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)

            if validate and output_format == "json":
                self._validate_json(content)

            temp_path.replace(path)

        except Exception:
            if temp_path.exists():
                try:
                    temp_path.unlink()
                except OSError:
                    pass  # Best effort cleanup
            raise

    def write_with_mode(self, path: Path, content: str, mode: OutputMode, output_format: str = "json") -> None:
        """Write content, honoring the output mode for existing files.

        Raises:
            FileExistsError: If the file exists and mode is ERROR_IF_EXISTS
        """
        if mode == OutputMode.ERROR_IF_EXISTS and path.exists():
            raise FileExistsError(f"Output file already exists: {path}. Use --force to overwrite.")

        self.write(path, content, output_format)

    def _default_validate_json(self, content: str) -> None:
        """Check that the content parses back as JSON."""
        try:
            json.loads(content)
        except json.JSONDecodeError as e:
            raise ValueError(f"Generated JSON is not valid: {e}") from e
