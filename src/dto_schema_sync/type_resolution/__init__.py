"""Field type resolution exports."""

from .expression_models import (
    CollectionShape,
    EnumeratedKind,
    EnumeratedShape,
    FieldShape,
    ImportRequirement,
    PrimitiveKind,
    PrimitiveShape,
    ReferenceShape,
    SchemaExpression,
    TemporalKind,
    TemporalShape,
)
from .field_type_resolver import (
    UnsupportedTypeError,
    classify_field_shape,
    extract_generic_element_name,
    render_shape,
    resolve_field_type,
    schema_name_for,
)

__all__ = [
    "CollectionShape",
    "EnumeratedKind",
    "EnumeratedShape",
    "FieldShape",
    "ImportRequirement",
    "PrimitiveKind",
    "PrimitiveShape",
    "ReferenceShape",
    "SchemaExpression",
    "TemporalKind",
    "TemporalShape",
    "UnsupportedTypeError",
    "classify_field_shape",
    "extract_generic_element_name",
    "render_shape",
    "resolve_field_type",
    "schema_name_for",
]
