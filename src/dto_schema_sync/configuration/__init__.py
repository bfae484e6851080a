"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration
from .runtime_settings import (
    DEFAULT_TARGET,
    Configuration,
    DescriptorSource,
    LoggingSettings,
    OutputSettings,
    TargetSettings,
)

__all__ = [
    "Configuration",
    "DescriptorSource",
    "LoggingSettings",
    "OutputSettings",
    "TargetSettings",
    "DEFAULT_TARGET",
    "ConfigurationError",
    "load_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
