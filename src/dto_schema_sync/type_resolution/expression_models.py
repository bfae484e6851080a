"""Type resolution entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True, order=True)
class ImportRequirement:
    """A symbol that must be imported for a schema expression to compile."""

    source_module: str
    symbol_name: str


@dataclass(frozen=True)
class SchemaExpression:
    """Schema source text for one field plus the imports it introduces."""

    expression: str
    imports: frozenset[ImportRequirement] = frozenset()


class PrimitiveKind(str, Enum):
    """Scalar validators built into the validation library."""

    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    UUID = "uuid"


class TemporalKind(str, Enum):
    """Date/time flavours distinguished by the generated validators."""

    DATE_ONLY = "date_only"
    TIME_ONLY = "time_only"
    TIMESTAMP = "timestamp"


class EnumeratedKind(str, Enum):
    """Enumerated domains backed by a shared helper validator."""

    DAY_OF_WEEK = "day_of_week"


@dataclass(frozen=True)
class PrimitiveShape:
    kind: PrimitiveKind


@dataclass(frozen=True)
class TemporalShape:
    kind: TemporalKind


@dataclass(frozen=True)
class EnumeratedShape:
    kind: EnumeratedKind


@dataclass(frozen=True)
class ReferenceShape:
    """A user-defined DTO with its own generated schema."""

    type_name: str


ElementShape = PrimitiveShape | TemporalShape | EnumeratedShape | ReferenceShape


@dataclass(frozen=True)
class CollectionShape:
    """Ordered list of a single non-collection element shape."""

    element: ElementShape


FieldShape = ElementShape | CollectionShape
