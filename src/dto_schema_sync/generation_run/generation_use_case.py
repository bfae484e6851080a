"""Schema generation use-case service."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from pathlib import Path

from dto_schema_sync.configuration import ConfigurationError, load_configuration
from dto_schema_sync.configuration.runtime_settings import (
    DEFAULT_TARGET,
    DescriptorSource,
    TargetSettings,
)
from dto_schema_sync.descriptor_loading import DescriptorManifestError, load_descriptor_manifest
from dto_schema_sync.dto_descriptors.descriptor_models import DtoDescriptor
from dto_schema_sync.schema_synthesis import synthesize_schema
from dto_schema_sync.schema_writing import DirectorySchemaWriter, SchemaWriter

from .run_contracts import GeneratedSchema, GenerationOutcome, GenerationRequest

PACKAGE_LOGGER_NAME = "dto_schema_sync"

_LOGGER = logging.getLogger(__name__)


class GenerationRunError(Exception):
    """Raised when a generation run cannot be completed."""


def generate_schemas(
    dtos: Iterable[DtoDescriptor],
    writer: SchemaWriter,
    target: TargetSettings = DEFAULT_TARGET,
) -> tuple[GeneratedSchema, ...]:
    """Synthesize and write one schema document per DTO, in order.

    Write failures propagate and stop the remaining DTOs.
    """
    generated: list[GeneratedSchema] = []
    for dto in dtos:
        document = synthesize_schema(dto, target)
        path = writer.write(document.file_name, document.content)
        _LOGGER.info("Wrote %s for DTO '%s'", path, dto.name)
        if document.omitted_fields:
            _LOGGER.warning(
                "DTO '%s' written without %d unmappable field(s): %s",
                dto.name,
                len(document.omitted_fields),
                ", ".join(omitted.field_name for omitted in document.omitted_fields),
            )
        generated.append(GeneratedSchema(document=document, path=path))
    return tuple(generated)


def execute_schema_generation_run(
    request: GenerationRequest,
    *,
    writer_factory: Callable[[Path], DirectorySchemaWriter] | None = None,
) -> GenerationOutcome:
    """Prepare the output directory and generate every configured DTO schema."""
    resolved_writer_factory = writer_factory or DirectorySchemaWriter
    try:
        configuration = load_configuration(request.config_path)
        dtos = load_dto_descriptors(configuration.descriptors)
    except (ConfigurationError, DescriptorManifestError) as exc:
        raise GenerationRunError(str(exc)) from exc

    logging.getLogger(PACKAGE_LOGGER_NAME).setLevel(configuration.logging.level)
    writer = resolved_writer_factory(configuration.output.directory)
    try:
        output_directory = writer.prepare()
        generated = generate_schemas(dtos, writer, configuration.target)
    except OSError as exc:
        _LOGGER.error("Schema generation aborted: %s", exc)
        raise GenerationRunError(str(exc)) from exc

    return GenerationOutcome(output_directory=output_directory, generated=generated)


def load_dto_descriptors(source: DescriptorSource) -> tuple[DtoDescriptor, ...]:
    """Return the DTO descriptors named by the configured source."""
    if source.manifest_path is not None:
        return load_descriptor_manifest(source.manifest_path)
    return source.inline_dtos
