"""SxS assembly manifest XML generation.

The module is organized into focused components:
- constants: Namespace URIs, element and attribute names
- identity, compatibility, dependency: One serializer per manifest section
- builder: Document assembly and in-memory convenience forms
- writer: File I/O
"""

from .builder import manifest_to_bytes, manifest_to_string, serialize_manifest
from .compatibility import serialize_compatibility
from .dependency import serialize_dependency
from .identity import serialize_assembly_identity
from .writer import save_manifest_payload, write_manifest_file

__all__ = [
    "manifest_to_bytes",
    "save_manifest_payload",
    "manifest_to_string",
    "serialize_assembly_identity",
    "serialize_compatibility",
    "serialize_dependency",
    "serialize_manifest",
    "write_manifest_file",
]
