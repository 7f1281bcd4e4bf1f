"""Application layer for the SxS manifest generator.

This layer contains use cases and application-level orchestration logic.
It defines ports (interfaces) for external dependencies.
"""

from .models import GenerateManifestRequest, GenerateManifestResponse

# Import GenerateManifestUseCase directly when needed:
#   from sxs_manifest.application.generate_manifest_use_case import GenerateManifestUseCase

__all__ = [
    "GenerateManifestRequest",
    "GenerateManifestResponse",
]
