"""Port interfaces for external dependencies.

This module defines abstract interfaces (protocols) that external
adapters must implement. This enables dependency injection and testing.
"""

from .repositories import ManifestDescriptionRepositoryPort
from .services import LoggerPort, ManifestXMLGeneratorPort

__all__ = [
    "LoggerPort",
    "ManifestDescriptionRepositoryPort",
    "ManifestXMLGeneratorPort",
]
