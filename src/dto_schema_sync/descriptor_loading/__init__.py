"""Descriptor loading exports."""

from .manifest_reader import DescriptorManifestError, load_descriptor_manifest, parse_dto_entries

__all__ = [
    "DescriptorManifestError",
    "load_descriptor_manifest",
    "parse_dto_entries",
]
