from __future__ import annotations

from typing import TYPE_CHECKING

from typing_extensions import override

from ...application.ports.services import ManifestXMLGeneratorPort
from .manifest_xml import manifest_to_bytes, save_manifest_payload

if TYPE_CHECKING:
    from pathlib import Path

    from ...config import WriterConfig
    from ...domain.entities.manifest import AssemblyManifest


class ManifestXMLGenerator(ManifestXMLGeneratorPort):
    pass

    @override
    def render(
        self, manifest: AssemblyManifest, config: WriterConfig | None = None
    ) -> bytes:
        return manifest_to_bytes(manifest, config)

    @override
    def save(self, payload: bytes, output_path: Path) -> Path:
        return save_manifest_payload(payload, output_path)
