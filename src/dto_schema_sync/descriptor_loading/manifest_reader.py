"""DTO descriptor manifest reader."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from dto_schema_sync.dto_descriptors.descriptor_models import DtoDescriptor, FieldDescriptor
from dto_schema_sync.dto_descriptors.type_names import denotes_collection, is_identifier


class DescriptorManifestError(Exception):
    """Raised when a DTO descriptor manifest is missing or invalid."""


def load_descriptor_manifest(manifest_path: Path | str) -> tuple[DtoDescriptor, ...]:
    """Read DTO descriptors, in declaration order, from a YAML/JSON manifest."""
    path = Path(manifest_path)
    if not path.exists():
        raise DescriptorManifestError(f"Descriptor manifest not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DescriptorManifestError(f"Failed to read descriptor manifest {path}: {exc}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DescriptorManifestError(f"Failed to parse descriptor manifest: {exc}") from exc

    if parsed is None:
        parsed = {}
    if not isinstance(parsed, Mapping):
        raise DescriptorManifestError("Descriptor manifest root must be a mapping.")
    return parse_dto_entries(parsed.get("dtos"), section_name="dtos")


def parse_dto_entries(value: Any, *, section_name: str) -> tuple[DtoDescriptor, ...]:
    """Validate a list of raw DTO entries and convert it into descriptors."""
    entries = _require_list(value, section_name)
    dtos: list[DtoDescriptor] = []
    seen_names: set[str] = set()
    for index, entry in enumerate(entries):
        dto = _parse_dto_entry(entry, f"{section_name}[{index}]")
        if dto.name in seen_names:
            raise DescriptorManifestError(f"Duplicate DTO name detected: {dto.name}")
        seen_names.add(dto.name)
        dtos.append(dto)
    return tuple(dtos)


def _parse_dto_entry(entry: Any, label: str) -> DtoDescriptor:
    mapping = _require_mapping(entry, label)
    name = _require_identifier(mapping.get("name"), f"{label}.name")
    raw_fields = mapping.get("fields")
    field_entries = [] if raw_fields is None else _require_list(raw_fields, f"{label}.fields")

    fields: list[FieldDescriptor] = []
    seen_field_names: set[str] = set()
    for index, field_entry in enumerate(field_entries):
        field = _parse_field_entry(field_entry, f"{label}.fields[{index}]")
        if field.name in seen_field_names:
            raise DescriptorManifestError(f"Duplicate field '{field.name}' in DTO '{name}'.")
        seen_field_names.add(field.name)
        fields.append(field)
    return DtoDescriptor(name=name, fields=tuple(fields))


def _parse_field_entry(entry: Any, label: str) -> FieldDescriptor:
    mapping = _require_mapping(entry, label)
    name = _require_identifier(mapping.get("name"), f"{label}.name")
    declared_type_name = _require_non_empty_string(mapping.get("type"), f"{label}.type")
    element_type_name = _optional_string(mapping.get("element_type"), f"{label}.element_type")

    collection = mapping.get("collection")
    if collection is not None and not isinstance(collection, bool):
        raise DescriptorManifestError(f"{label}.collection must be a boolean.")
    if collection is None:
        collection = element_type_name is not None or denotes_collection(declared_type_name)
    if element_type_name is not None and not collection:
        raise DescriptorManifestError(f"{label}.element_type requires a collection field.")

    return FieldDescriptor(
        name=name,
        declared_type_name=declared_type_name,
        is_collection=collection,
        element_type_name=element_type_name,
    )


def _require_list(value: Any, label: str) -> Sequence[Any]:
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise DescriptorManifestError(f"{label} must be a list.")
    return value


def _require_identifier(value: Any, label: str) -> str:
    name = _require_non_empty_string(value, label)
    if not is_identifier(name):
        raise DescriptorManifestError(f"{label} must be an identifier.")
    return name


def _require_mapping(value: Any, label: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise DescriptorManifestError(f"{label} must be a mapping.")
    return value


def _require_non_empty_string(value: Any, label: str) -> str:
    if not isinstance(value, str):
        raise DescriptorManifestError(f"{label} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise DescriptorManifestError(f"{label} must not be empty.")
    return stripped


def _optional_string(value: Any, label: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise DescriptorManifestError(f"{label} must be a string.")
    stripped = value.strip()
    return stripped or None
