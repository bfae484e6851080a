"""Schema writing exports."""

from .directory_writer import DirectorySchemaWriter, SchemaWriteError, SchemaWriter

__all__ = [
    "DirectorySchemaWriter",
    "SchemaWriteError",
    "SchemaWriter",
]
