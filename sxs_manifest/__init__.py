"""SxS assembly manifest generator.

This package builds Windows side-by-side (SxS) assembly manifests: an
in-memory model of the manifest and a streaming XML serializer for it.

Features:
- Compatibility section (supportedOS, maxversiontested)
- Dependent assembly declarations
- Compact or indented output
- TOML manifest descriptions and a command line interface
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("sxs-manifest")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

# Core exports
from sxs_manifest.config import ConfigLoader, WriterConfig
from sxs_manifest.domain.entities import (
    AssemblyIdentity,
    AssemblyManifest,
    AssemblyType,
    AssemblyVersion,
    Compatibility,
    Dependency,
    ManifestVersion,
    ProcessArchitecture,
    PublicKeyToken,
    SupportedOS,
    WindowsVersions,
)
from sxs_manifest.domain.services import ModelPath, ValidationIssue, validate_manifest
from sxs_manifest.infrastructure.io.exceptions import (
    InvalidManifestError,
    ManifestDescriptionError,
    ManifestDescriptionNotFoundError,
    ManifestError,
    ManifestSerializationError,
    XmlWriteError,
)
from sxs_manifest.infrastructure.io.manifest_xml import (
    manifest_to_bytes,
    manifest_to_string,
    serialize_manifest,
    write_manifest_file,
)
from sxs_manifest.infrastructure.repositories import load_manifest_description

__all__ = [
    "__version__",
    # Model
    "AssemblyIdentity",
    "AssemblyManifest",
    "AssemblyType",
    "AssemblyVersion",
    "Compatibility",
    "Dependency",
    "ManifestVersion",
    "ProcessArchitecture",
    "PublicKeyToken",
    "SupportedOS",
    "WindowsVersions",
    # Serialization
    "WriterConfig",
    "ConfigLoader",
    "manifest_to_bytes",
    "manifest_to_string",
    "serialize_manifest",
    "write_manifest_file",
    # Validation
    "ModelPath",
    "ValidationIssue",
    "validate_manifest",
    # Descriptions
    "load_manifest_description",
    # Errors
    "InvalidManifestError",
    "ManifestDescriptionError",
    "ManifestDescriptionNotFoundError",
    "ManifestError",
    "ManifestSerializationError",
    "XmlWriteError",
]
