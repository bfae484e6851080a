"""Field type resolution service.

Resolution happens in two steps. ``classify_field_shape`` maps a field's
declared type onto one of a closed set of shapes (primitive, temporal,
enumerated, collection, reference). ``render_shape`` turns that shape into
schema source text plus the imports the text needs. Neither step keeps state,
so callers own import accumulation.
"""

from __future__ import annotations

from dto_schema_sync.configuration.runtime_settings import DEFAULT_TARGET, TargetSettings
from dto_schema_sync.dto_descriptors.descriptor_models import FieldDescriptor
from dto_schema_sync.dto_descriptors.type_names import (
    PATH_SEPARATORS,
    denotes_collection,
    is_identifier,
    simple_type_name,
)

from .expression_models import (
    CollectionShape,
    ElementShape,
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

SCHEMA_NAME_SUFFIX = "Schema"

DATE_ONLY_HELPER = "zDateOnly"
TIME_ONLY_HELPER = "zTimeOnly"
DAY_OF_WEEK_HELPER = "zDayOfWeek"

_PRIMITIVE_TYPE_NAMES: dict[str, PrimitiveKind] = {
    "long": PrimitiveKind.NUMBER,
    "integer": PrimitiveKind.NUMBER,
    "int": PrimitiveKind.NUMBER,
    "double": PrimitiveKind.NUMBER,
    "float": PrimitiveKind.NUMBER,
    "string": PrimitiveKind.STRING,
    "boolean": PrimitiveKind.BOOLEAN,
    "uuid": PrimitiveKind.UUID,
}
_TEMPORAL_TYPE_NAMES: dict[str, TemporalKind] = {
    "localdate": TemporalKind.DATE_ONLY,
    "localtime": TemporalKind.TIME_ONLY,
}
_ENUMERATED_TYPE_NAMES: dict[str, EnumeratedKind] = {
    "dayofweek": EnumeratedKind.DAY_OF_WEEK,
}

_TEMPORAL_HELPERS: dict[TemporalKind, str] = {
    TemporalKind.DATE_ONLY: DATE_ONLY_HELPER,
    TemporalKind.TIME_ONLY: TIME_ONLY_HELPER,
}
_ENUMERATED_HELPERS: dict[EnumeratedKind, str] = {
    EnumeratedKind.DAY_OF_WEEK: DAY_OF_WEEK_HELPER,
}

_RECURSIVE_COLLECTION_MESSAGE = "recursive collection not supported"


class UnsupportedTypeError(ValueError):
    """Raised when a field type cannot be mapped to a schema expression."""


def resolve_field_type(
    field: FieldDescriptor, target: TargetSettings = DEFAULT_TARGET
) -> SchemaExpression:
    """Return the schema expression and imports for one field."""
    return render_shape(classify_field_shape(field), target)


def classify_field_shape(field: FieldDescriptor) -> FieldShape:
    """Map a field descriptor onto a field shape.

    Raises:
      UnsupportedTypeError: If the declared type has no schema counterpart,
        nests collections, or carries a malformed generic signature.
    """
    if field.is_collection or denotes_collection(field.declared_type_name):
        element_type_name = field.element_type_name or extract_generic_element_name(
            field.declared_type_name
        )
        return CollectionShape(element=_classify_element(element_type_name))
    if "<" in field.declared_type_name:
        raise UnsupportedTypeError(
            f"generic type not supported: {field.declared_type_name.strip()}"
        )
    return classify_type_name(field.declared_type_name)


def classify_type_name(type_name: str) -> ElementShape:
    """Classify a non-collection type name, first match wins."""
    simple_name = simple_type_name(type_name)
    lowered = simple_name.lower()

    if "date" in lowered or "time" in lowered:
        return TemporalShape(kind=_TEMPORAL_TYPE_NAMES.get(lowered, TemporalKind.TIMESTAMP))
    if lowered in _PRIMITIVE_TYPE_NAMES:
        return PrimitiveShape(kind=_PRIMITIVE_TYPE_NAMES[lowered])
    if lowered in _ENUMERATED_TYPE_NAMES:
        return EnumeratedShape(kind=_ENUMERATED_TYPE_NAMES[lowered])
    if not is_identifier(simple_name):
        raise UnsupportedTypeError(f"type name is not a schema identifier: '{type_name}'")
    return ReferenceShape(type_name=simple_name)


def extract_generic_element_name(signature: str) -> str:
    """Return the element type name of a single-argument generic signature.

    ``java.util.List<java.lang.String>`` yields ``String``. The name is the text
    between the last path separator (or the opening bracket) and the final
    closing bracket.
    """
    opening = signature.find("<")
    closing = signature.rfind(">")
    if opening == -1 or closing == -1 or closing < opening:
        raise UnsupportedTypeError(f"Could not find simple type name: {signature}")

    head = signature[:closing]
    separator = max(head.rfind(candidate) for candidate in (*PATH_SEPARATORS, "<"))
    element_name = head[separator + 1 :].strip()
    if not element_name:
        raise UnsupportedTypeError(f"Could not find simple type name: {signature}")
    if ">" in element_name or denotes_collection(element_name):
        raise UnsupportedTypeError(_RECURSIVE_COLLECTION_MESSAGE)
    return element_name


def render_shape(shape: FieldShape, target: TargetSettings = DEFAULT_TARGET) -> SchemaExpression:
    """Render a field shape as schema source text."""
    core = target.core_symbol
    if isinstance(shape, CollectionShape):
        element = render_shape(shape.element, target)
        return SchemaExpression(
            expression=f"{core}.array({element.expression})", imports=element.imports
        )
    if isinstance(shape, PrimitiveShape):
        return SchemaExpression(expression=_primitive_expression(shape.kind, core))
    if isinstance(shape, TemporalShape):
        if shape.kind is TemporalKind.TIMESTAMP:
            return SchemaExpression(expression=f"{core}.date()")
        return _helper_reference(_TEMPORAL_HELPERS[shape.kind], target)
    if isinstance(shape, EnumeratedShape):
        return _helper_reference(_ENUMERATED_HELPERS[shape.kind], target)
    if isinstance(shape, ReferenceShape):
        schema_name = schema_name_for(shape.type_name)
        return SchemaExpression(
            expression=schema_name,
            imports=frozenset({sibling_schema_import(schema_name)}),
        )
    raise TypeError(f"Unsupported field shape: {shape!r}")


def schema_name_for(type_name: str) -> str:
    return f"{type_name}{SCHEMA_NAME_SUFFIX}"


def sibling_schema_import(schema_name: str) -> ImportRequirement:
    """Import of a schema generated into the same directory."""
    return ImportRequirement(source_module=f"./{schema_name}", symbol_name=schema_name)


def _classify_element(type_name: str) -> ElementShape:
    if "<" in type_name or ">" in type_name or denotes_collection(type_name):
        raise UnsupportedTypeError(_RECURSIVE_COLLECTION_MESSAGE)
    return classify_type_name(type_name)


def _primitive_expression(kind: PrimitiveKind, core: str) -> str:
    if kind is PrimitiveKind.NUMBER:
        return f"{core}.number()"
    if kind is PrimitiveKind.BOOLEAN:
        return f"{core}.boolean()"
    if kind is PrimitiveKind.UUID:
        return f"{core}.string().uuid()"
    return f"{core}.string()"


def _helper_reference(helper_symbol: str, target: TargetSettings) -> SchemaExpression:
    return SchemaExpression(
        expression=helper_symbol,
        imports=frozenset(
            {ImportRequirement(source_module=target.helpers_module, symbol_name=helper_symbol)}
        ),
    )
