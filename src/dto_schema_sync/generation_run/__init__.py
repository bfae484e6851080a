"""Generation run exports."""

from .generation_use_case import (
    GenerationRunError,
    execute_schema_generation_run,
    generate_schemas,
    load_dto_descriptors,
)
from .run_contracts import GeneratedSchema, GenerationOutcome, GenerationRequest

__all__ = [
    "GenerationRequest",
    "GenerationOutcome",
    "GeneratedSchema",
    "GenerationRunError",
    "execute_schema_generation_run",
    "generate_schemas",
    "load_dto_descriptors",
]
