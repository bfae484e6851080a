"""Boundary tests for type_resolution internal dependencies."""

from __future__ import annotations

from pathlib import Path


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def test_resolver_core_does_not_depend_on_io_or_synthesis_modules() -> None:
    resolution_dir = _project_root() / "src" / "dto_schema_sync" / "type_resolution"
    core_modules = (
        resolution_dir / "expression_models.py",
        resolution_dir / "field_type_resolver.py",
    )
    forbidden_import_fragments = (
        "import logging",
        "import yaml",
        "dto_schema_sync.schema_synthesis",
        "dto_schema_sync.schema_writing",
        "dto_schema_sync.generation_run",
    )

    for module_path in core_modules:
        text = module_path.read_text(encoding="utf-8")
        for fragment in forbidden_import_fragments:
            assert fragment not in text, f"Forbidden core dependency in {module_path}: {fragment}"
