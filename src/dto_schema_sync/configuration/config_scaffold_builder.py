"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "dto-schema-sync.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Generation configuration for dto-schema-sync.
# Replace every <REQUIRED> placeholder before running generate.
# Remove or fill <OPTIONAL> entries; omitted entries use the defaults shown.

descriptors:
  # Provide either a descriptor manifest path or an inline list of DTOs.
  path: "<REQUIRED>"
  # inline:
  #   - name: "User"
  #     fields:
  #       - name: "id"
  #         type: "UUID"
  #       - name: "tags"
  #         type: "java.util.List<java.lang.String>"

output:
  # Directory receiving one <Name>Schema file per DTO; created when missing.
  directory: "<REQUIRED>"

target:
  validation_library: "zod"       # <OPTIONAL>
  core_symbol: "z"                # <OPTIONAL>
  helpers_module: "../zod-mods"   # <OPTIONAL>
  file_extension: ".ts"           # <OPTIONAL>

logging:
  level: "INFO"                   # <OPTIONAL> DEBUG, INFO, WARNING, ERROR or CRITICAL
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
