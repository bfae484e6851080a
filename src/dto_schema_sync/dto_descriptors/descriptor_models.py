"""DTO descriptor entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldDescriptor:
    """Name and declared type metadata of one DTO field."""

    name: str
    declared_type_name: str
    is_collection: bool = False
    element_type_name: str | None = None


@dataclass(frozen=True)
class DtoDescriptor:
    """One source type with its fields in declaration order."""

    name: str
    fields: tuple[FieldDescriptor, ...] = ()
