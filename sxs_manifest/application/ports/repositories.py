from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    from ...domain.entities.manifest import AssemblyManifest


@runtime_checkable
class ManifestDescriptionRepositoryPort(Protocol):
    pass

    def load(self, path: Path) -> AssemblyManifest: ...
