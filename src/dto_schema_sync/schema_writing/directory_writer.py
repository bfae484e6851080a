"""Directory-backed schema file writer."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class SchemaWriteError(OSError):
    """Raised when the output directory or a schema file cannot be written."""


class SchemaWriter(Protocol):
    """Sink receiving one finished schema document at a time."""

    def write(self, file_name: str, content: str) -> Path: ...


class DirectorySchemaWriter:
    """Write schema documents as UTF-8 files into one directory."""

    def __init__(self, directory: Path | str) -> None:
        self._directory = Path(directory)

    def prepare(self) -> Path:
        """Create the output directory, including parents, when missing."""
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise SchemaWriteError(
                f"Could not create output directory {self._directory}: {exc}"
            ) from exc
        return self._directory.resolve()

    def write(self, file_name: str, content: str) -> Path:
        """Write one document, replacing any previous version of the file."""
        if not file_name or Path(file_name).name != file_name:
            raise SchemaWriteError(f"Schema file name must not contain a path: {file_name!r}")
        destination = self._directory / file_name
        try:
            destination.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise SchemaWriteError(
                f"Error while attempting to write output file {destination}: {exc}"
            ) from exc
        return destination.resolve()
