"""Schema synthesis entities."""

from __future__ import annotations

from dataclasses import dataclass

from dto_schema_sync.type_resolution.expression_models import ImportRequirement


@dataclass(frozen=True)
class FieldLine:
    """One resolved property of the object-shape declaration."""

    field_name: str
    expression: str


@dataclass(frozen=True)
class OmittedField:
    """A field left out of the document because its type could not be mapped."""

    field_name: str
    declared_type_name: str
    reason: str


@dataclass(frozen=True)
class SchemaDocument:
    """Complete schema source for one DTO, ready to be written."""

    dto_name: str
    schema_name: str
    file_name: str
    imports: tuple[ImportRequirement, ...]
    field_lines: tuple[FieldLine, ...]
    omitted_fields: tuple[OmittedField, ...]
    content: str

    @property
    def is_complete(self) -> bool:
        """Return True when every declared field made it into the document."""
        return not self.omitted_fields
