"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from dto_schema_sync.dto_descriptors.descriptor_models import DtoDescriptor


@dataclass(frozen=True)
class TargetSettings:
    """Names used when emitting schema source for the validation library."""

    validation_library: str = "zod"
    core_symbol: str = "z"
    helpers_module: str = "../zod-mods"
    file_extension: str = ".ts"


DEFAULT_TARGET = TargetSettings()


@dataclass(frozen=True)
class DescriptorSource:
    """Where DTO descriptors come from: a manifest file or inline entries."""

    manifest_path: Path | None
    inline_dtos: tuple[DtoDescriptor, ...] = ()


@dataclass(frozen=True)
class OutputSettings:
    """Destination of generated schema files."""

    directory: Path


@dataclass(frozen=True)
class LoggingSettings:
    """Log verbosity for a generation run."""

    level: str = "INFO"


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    descriptors: DescriptorSource
    output: OutputSettings
    target: TargetSettings = field(default_factory=TargetSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)
