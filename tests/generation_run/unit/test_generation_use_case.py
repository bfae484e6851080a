"""Generation run use-case tests."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from dto_schema_sync.configuration.runtime_settings import DescriptorSource
from dto_schema_sync.dto_descriptors import DtoDescriptor, FieldDescriptor
from dto_schema_sync.generation_run import (
    GenerationRequest,
    GenerationRunError,
    execute_schema_generation_run,
    generate_schemas,
    load_dto_descriptors,
)
from dto_schema_sync.schema_writing import DirectorySchemaWriter, SchemaWriteError


class _RecordingWriter:
    def __init__(self, fail_on: str | None = None) -> None:
        self.writes: list[tuple[str, str]] = []
        self._fail_on = fail_on

    def write(self, file_name: str, content: str) -> Path:
        if file_name == self._fail_on:
            raise SchemaWriteError(f"disk full while writing {file_name}")
        self.writes.append((file_name, content))
        return Path("/virtual") / file_name


def _dtos() -> tuple[DtoDescriptor, ...]:
    return (
        DtoDescriptor(name="Address", fields=(FieldDescriptor("street", "String"),)),
        DtoDescriptor(
            name="User",
            fields=(
                FieldDescriptor("address", "Address"),
                FieldDescriptor("grid", "List<List<Integer>>", True),
            ),
        ),
        DtoDescriptor(name="Empty"),
    )


def test_generate_schemas_writes_one_document_per_dto_in_order() -> None:
    writer = _RecordingWriter()

    generated = generate_schemas(_dtos(), writer)

    assert [name for name, _ in writer.writes] == [
        "AddressSchema.ts",
        "UserSchema.ts",
        "EmptySchema.ts",
    ]
    assert [schema.path for schema in generated] == [
        Path("/virtual/AddressSchema.ts"),
        Path("/virtual/UserSchema.ts"),
        Path("/virtual/EmptySchema.ts"),
    ]
    assert generated[1].document.omitted_fields[0].field_name == "grid"


def test_generate_schemas_logs_omitted_field_summary(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="dto_schema_sync"):
        generate_schemas(_dtos(), _RecordingWriter())

    warnings = [
        record.getMessage() for record in caplog.records if record.levelno == logging.WARNING
    ]
    assert warnings == ["DTO 'User' written without 1 unmappable field(s): grid"]


def test_write_failure_propagates_and_stops_remaining_dtos() -> None:
    writer = _RecordingWriter(fail_on="UserSchema.ts")

    with pytest.raises(SchemaWriteError, match="disk full"):
        generate_schemas(_dtos(), writer)

    assert [name for name, _ in writer.writes] == ["AddressSchema.ts"]


def test_load_dto_descriptors_prefers_manifest(tmp_path: Path) -> None:
    manifest_path = tmp_path / "dtos.json"
    manifest_path.write_text(json.dumps({"dtos": [{"name": "FromFile"}]}), encoding="utf-8")

    from_file = load_dto_descriptors(DescriptorSource(manifest_path=manifest_path))
    inline = load_dto_descriptors(
        DescriptorSource(manifest_path=None, inline_dtos=(DtoDescriptor(name="Inline"),))
    )

    assert [dto.name for dto in from_file] == ["FromFile"]
    assert [dto.name for dto in inline] == ["Inline"]


def _write_config(tmp_path: Path, output_directory: Path) -> Path:
    manifest_path = tmp_path / "dtos.yaml"
    manifest_path.write_text(
        """
dtos:
  - name: Role
    fields:
      - {name: label, type: String}
  - name: User
    fields:
      - {name: id, type: UUID}
      - {name: roles, type: "java.util.List<com.example.Role>"}
""",
        encoding="utf-8",
    )
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        f"descriptors:\n  path: dtos.yaml\noutput:\n  directory: '{output_directory}'\n",
        encoding="utf-8",
    )
    return config_path


def test_execute_run_prepares_directory_and_writes_files(tmp_path: Path) -> None:
    output_directory = tmp_path / "frontend" / "dtos"
    config_path = _write_config(tmp_path, output_directory)

    outcome = execute_schema_generation_run(GenerationRequest(config_path=str(config_path)))

    assert outcome.output_directory == output_directory.resolve()
    assert [path.name for path in outcome.written_paths] == ["RoleSchema.ts", "UserSchema.ts"]
    assert outcome.omitted_field_count == 0
    user_schema = (output_directory / "UserSchema.ts").read_text(encoding="utf-8")
    assert "import { RoleSchema } from './RoleSchema';" in user_schema
    assert "  roles: z.array(RoleSchema),\n" in user_schema


def test_execute_run_wraps_configuration_errors(tmp_path: Path) -> None:
    with pytest.raises(GenerationRunError, match="Configuration file not found"):
        execute_schema_generation_run(GenerationRequest(config_path=str(tmp_path / "none.yaml")))


def test_execute_run_wraps_directory_preparation_failure(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("file", encoding="utf-8")
    config_path = _write_config(tmp_path, blocker / "dtos")

    with pytest.raises(GenerationRunError, match="Could not create output directory"):
        execute_schema_generation_run(GenerationRequest(config_path=str(config_path)))


def test_execute_run_wraps_write_failure(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, tmp_path / "out")

    class _FailingWriter(DirectorySchemaWriter):
        def write(self, file_name: str, content: str) -> Path:
            raise SchemaWriteError(f"read-only file system: {file_name}")

    with pytest.raises(GenerationRunError, match="read-only file system: RoleSchema.ts"):
        execute_schema_generation_run(
            GenerationRequest(config_path=str(config_path)), writer_factory=_FailingWriter
        )
