"""Helpers for reading host-language type names."""

from __future__ import annotations

import re

COLLECTION_TYPE_NAMES = frozenset(
    {
        "list",
        "arraylist",
        "linkedlist",
        "set",
        "hashset",
        "linkedhashset",
        "treeset",
        "sortedset",
        "collection",
        "iterable",
    }
)

PATH_SEPARATORS = (".", "$")
IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def simple_type_name(type_name: str) -> str:
    """Strip package and enclosing-class qualifiers from a type name."""
    stripped = type_name.strip()
    cut = max(stripped.rfind(separator) for separator in PATH_SEPARATORS)
    return stripped[cut + 1 :]


def denotes_collection(type_name: str) -> bool:
    """Return True when the type's base name is a list-like collection."""
    base_name = type_name.split("<", 1)[0]
    return simple_type_name(base_name).lower() in COLLECTION_TYPE_NAMES


def is_identifier(name: str) -> bool:
    """Return True when the name can be emitted as a schema-language identifier."""
    return IDENTIFIER_PATTERN.match(name) is not None
