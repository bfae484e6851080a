"""Schema document synthesis service."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from dto_schema_sync.configuration.runtime_settings import DEFAULT_TARGET, TargetSettings
from dto_schema_sync.dto_descriptors.descriptor_models import DtoDescriptor
from dto_schema_sync.type_resolution.expression_models import ImportRequirement
from dto_schema_sync.type_resolution.field_type_resolver import (
    UnsupportedTypeError,
    resolve_field_type,
    schema_name_for,
    sibling_schema_import,
)

from .document_models import FieldLine, OmittedField, SchemaDocument

_LOGGER = logging.getLogger(__name__)


def synthesize_schema(
    dto: DtoDescriptor, target: TargetSettings = DEFAULT_TARGET
) -> SchemaDocument:
    """Build the schema document for one DTO.

    Fields whose type cannot be mapped are logged and left out; the rest of the
    document is still produced.
    """
    schema_name = schema_name_for(dto.name)
    imports: set[ImportRequirement] = set()
    field_lines: list[FieldLine] = []
    omitted_fields: list[OmittedField] = []

    for field in dto.fields:
        try:
            resolved = resolve_field_type(field, target)
        except UnsupportedTypeError as exc:
            _LOGGER.error(
                "Could not parse field '%s', with declared type '%s' in DTO '%s', with error: %s",
                field.name,
                field.declared_type_name,
                dto.name,
                exc,
            )
            omitted_fields.append(
                OmittedField(
                    field_name=field.name,
                    declared_type_name=field.declared_type_name,
                    reason=str(exc),
                )
            )
            continue
        field_lines.append(FieldLine(field_name=field.name, expression=resolved.expression))
        imports.update(resolved.imports)

    # A self-referencing DTO uses its own schema name without importing it.
    imports.discard(sibling_schema_import(schema_name))
    ordered_imports = _order_imports(imports, target)
    return SchemaDocument(
        dto_name=dto.name,
        schema_name=schema_name,
        file_name=f"{schema_name}{target.file_extension}",
        imports=ordered_imports,
        field_lines=tuple(field_lines),
        omitted_fields=tuple(omitted_fields),
        content=render_schema_source(
            dto_name=dto.name,
            schema_name=schema_name,
            imports=ordered_imports,
            field_lines=field_lines,
            target=target,
        ),
    )


def render_schema_source(
    *,
    dto_name: str,
    schema_name: str,
    imports: Iterable[ImportRequirement],
    field_lines: Iterable[FieldLine],
    target: TargetSettings = DEFAULT_TARGET,
) -> str:
    """Assemble import, object-shape and inferred-type sections into source text."""
    core = target.core_symbol
    lines = [_import_statement(requirement) for requirement in imports]
    lines.append(f"export const {schema_name} = {core}.object({{")
    lines.extend(f"  {line.field_name}: {line.expression}," for line in field_lines)
    lines.append("});")
    lines.append(f"export type {dto_name} = {core}.infer<typeof {schema_name}>;")
    return "\n".join(lines) + "\n"


def _order_imports(
    imports: set[ImportRequirement], target: TargetSettings
) -> tuple[ImportRequirement, ...]:
    """Core validator import first, the rest in lexicographic order."""
    core_import = ImportRequirement(
        source_module=target.validation_library, symbol_name=target.core_symbol
    )
    return (core_import, *sorted(imports - {core_import}))


def _import_statement(requirement: ImportRequirement) -> str:
    return f"import {{ {requirement.symbol_name} }} from '{requirement.source_module}';"
