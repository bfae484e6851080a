"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from dto_schema_sync.descriptor_loading.manifest_reader import (
    DescriptorManifestError,
    parse_dto_entries,
)

from .runtime_settings import (
    Configuration,
    DescriptorSource,
    LoggingSettings,
    OutputSettings,
    TargetSettings,
)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Failed to read configuration file {path}: {exc}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    base_path = path.resolve().parent
    return Configuration(
        path=path,
        descriptors=_parse_descriptors_section(parsed.get("descriptors"), base_path),
        output=_parse_output_section(parsed.get("output"), base_path),
        target=_parse_target_section(parsed.get("target")),
        logging=_parse_logging_section(parsed.get("logging")),
    )


def _parse_descriptors_section(value: Any, base_path: Path) -> DescriptorSource:
    section = _require_mapping(value, "descriptors")
    inline = section.get("inline")
    path_value = section.get("path")
    if inline is not None and path_value:
        raise ConfigurationError("Descriptors must not set both inline and path.")
    if inline is not None:
        try:
            dtos = parse_dto_entries(inline, section_name="descriptors.inline")
        except DescriptorManifestError as exc:
            raise ConfigurationError(str(exc)) from exc
        return DescriptorSource(manifest_path=None, inline_dtos=dtos)
    if path_value:
        if not isinstance(path_value, str):
            raise ConfigurationError("descriptors.path must be a string.")
        manifest_path = _resolve_path(base_path, path_value)
        if not manifest_path.exists():
            raise ConfigurationError(f"Descriptor manifest not found: {manifest_path}")
        return DescriptorSource(manifest_path=manifest_path)
    raise ConfigurationError("Descriptors require either inline or path.")


def _parse_output_section(value: Any, base_path: Path) -> OutputSettings:
    section = _require_mapping(value, "output")
    directory = _require_non_empty_string(section.get("directory"), "output.directory")
    return OutputSettings(directory=_resolve_path(base_path, directory))


def _parse_target_section(value: Any) -> TargetSettings:
    if value is None:
        return TargetSettings()
    section = _require_mapping(value, "target")
    defaults = TargetSettings()
    file_extension = _optional_non_empty_string(
        section.get("file_extension"), "target.file_extension", defaults.file_extension
    )
    if not file_extension.startswith("."):
        raise ConfigurationError("target.file_extension must start with '.'.")
    return TargetSettings(
        validation_library=_optional_non_empty_string(
            section.get("validation_library"),
            "target.validation_library",
            defaults.validation_library,
        ),
        core_symbol=_optional_non_empty_string(
            section.get("core_symbol"), "target.core_symbol", defaults.core_symbol
        ),
        helpers_module=_optional_non_empty_string(
            section.get("helpers_module"), "target.helpers_module", defaults.helpers_module
        ),
        file_extension=file_extension,
    )


def _parse_logging_section(value: Any) -> LoggingSettings:
    if value is None:
        return LoggingSettings()
    section = _require_mapping(value, "logging")
    level = _optional_non_empty_string(section.get("level"), "logging.level", "INFO").upper()
    if level not in _LOG_LEVELS:
        raise ConfigurationError(f"logging.level must be one of: {', '.join(_LOG_LEVELS)}.")
    return LoggingSettings(level=level)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_non_empty_string(value: Any, field_name: str, default: str) -> str:
    if value is None:
        return default
    return _require_non_empty_string(value, field_name)
