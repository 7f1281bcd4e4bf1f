"""Repository implementations for data access.

This module provides concrete implementations of repository interfaces
for loading manifest descriptions from disk.
"""

from .manifest_description import (
    CompatibilityDescription,
    IdentityDescription,
    ManifestDescription,
    ManifestDescriptionRepository,
    load_manifest_description,
    parse_manifest_description,
)

__all__ = [
    "CompatibilityDescription",
    "IdentityDescription",
    "ManifestDescription",
    "ManifestDescriptionRepository",
    "load_manifest_description",
    "parse_manifest_description",
]
