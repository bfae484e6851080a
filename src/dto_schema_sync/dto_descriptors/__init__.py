"""DTO descriptor exports."""

from .descriptor_models import DtoDescriptor, FieldDescriptor
from .type_names import (
    COLLECTION_TYPE_NAMES,
    denotes_collection,
    is_identifier,
    simple_type_name,
)

__all__ = [
    "COLLECTION_TYPE_NAMES",
    "DtoDescriptor",
    "FieldDescriptor",
    "denotes_collection",
    "is_identifier",
    "simple_type_name",
]
