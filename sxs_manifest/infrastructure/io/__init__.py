"""Infrastructure I/O layer.

This package contains the XML event writer, the manifest serializers and
file output.

Architecture note:
- Avoid re-exporting symbols from here; import from the defining modules.
- Application DTOs live in sxs_manifest.application.models.
"""

from .exceptions import (
    InvalidManifestError,
    ManifestDescriptionError,
    ManifestDescriptionNotFoundError,
    ManifestError,
    ManifestSerializationError,
    XmlWriteError,
)

__all__ = [
    "InvalidManifestError",
    "ManifestDescriptionError",
    "ManifestDescriptionNotFoundError",
    "ManifestError",
    "ManifestSerializationError",
    "XmlWriteError",
]
