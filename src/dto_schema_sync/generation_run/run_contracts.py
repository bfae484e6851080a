"""Generation run entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from dto_schema_sync.schema_synthesis.document_models import SchemaDocument


@dataclass(frozen=True)
class GenerationRequest:
    """Input contract for one generation run."""

    config_path: str


@dataclass(frozen=True)
class GeneratedSchema:
    """One synthesized document and where it was written."""

    document: SchemaDocument
    path: Path


@dataclass(frozen=True)
class GenerationOutcome:
    """Output contract for one completed generation run."""

    output_directory: Path
    generated: tuple[GeneratedSchema, ...]

    @property
    def written_paths(self) -> tuple[Path, ...]:
        return tuple(schema.path for schema in self.generated)

    @property
    def omitted_field_count(self) -> int:
        """Number of fields left out across all documents."""
        return sum(len(schema.document.omitted_fields) for schema in self.generated)
