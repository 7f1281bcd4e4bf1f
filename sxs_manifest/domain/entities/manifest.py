"""Root aggregate of an assembly manifest."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from .compatibility import Compatibility
from .dependency import Dependency

if TYPE_CHECKING:
    from ...config import WriterConfig
    from ...infrastructure.io.xml_writer import SinkT


class ManifestVersion(str, Enum):
    """Version of the manifest schema. Only 1.0 is valid."""

    V1_0 = "1.0"

    def render(self) -> str:
        return self.value


@dataclass(slots=True)
class AssemblyManifest:
    """Assembly manifest.

    Example:
        >>> manifest = AssemblyManifest()
        >>> manifest.compatibility.supported_os.add(SupportedOS.WINDOWS_10)
        >>> xml = manifest.serialize_to_string()
    """

    manifest_version: ManifestVersion = ManifestVersion.V1_0
    compatibility: Compatibility = field(default_factory=Compatibility)
    dependency: Dependency = field(default_factory=Dependency)

    def serialize(self, sink: SinkT, config: WriterConfig | None = None) -> SinkT:
        """Write the manifest into ``sink`` and return it.

        Output may be partially written when an error is raised.
        """
        # Import here to avoid circular dependency
        from ...infrastructure.io.manifest_xml import serialize_manifest

        return serialize_manifest(self, sink, config)

    def serialize_to_string(self, config: WriterConfig | None = None) -> str:
        """Serialize into a string; nothing is returned unless the whole call succeeds."""
        # Import here to avoid circular dependency
        from ...infrastructure.io.manifest_xml import manifest_to_string

        return manifest_to_string(self, config)
