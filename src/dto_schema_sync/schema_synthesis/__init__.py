"""Schema synthesis exports."""

from .document_models import FieldLine, OmittedField, SchemaDocument
from .schema_synthesizer import render_schema_source, synthesize_schema

__all__ = [
    "FieldLine",
    "OmittedField",
    "SchemaDocument",
    "render_schema_source",
    "synthesize_schema",
]
