"""Assembles a complete manifest document.

The document declaration and the ``assembly`` root are written here; the
sections are delegated to their serializers in schema order: compatibility
first, then dependencies.
"""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

from sxs_manifest.config import WriterConfig
from sxs_manifest.domain.services.model_path import ModelPath

from ..xml_writer import Attribute, EndElement, EventWriter, StartDocument, StartElement
from .compatibility import serialize_compatibility
from .constants import ASM_V1_NS, ASSEMBLY, ATTR_MANIFEST_VERSION
from .dependency import serialize_dependency

if TYPE_CHECKING:
    from sxs_manifest.domain.entities.manifest import AssemblyManifest

    from ..xml_writer import SinkT


def serialize_manifest(
    manifest: AssemblyManifest,
    sink: SinkT,
    config: WriterConfig | None = None,
) -> SinkT:
    """Write ``manifest`` as XML into ``sink``.

    Args:
        manifest: The manifest to serialize
        sink: Text or binary stream that receives the document
        config: Writer formatting options (default: compact UTF-8)

    Returns:
        The same sink, once the document is complete

    Raises:
        InvalidManifestError: A section holds values the schema does not allow
        XmlWriteError: The writer or the sink failed

    The first error aborts the call; whatever was already written stays in
    the sink.
    """
    writer = EventWriter(sink, config)
    writer.write(StartDocument(standalone=True))
    writer.write(
        StartElement(
            ASSEMBLY,
            (Attribute(ATTR_MANIFEST_VERSION, manifest.manifest_version.render()),),
            namespaces={None: ASM_V1_NS},
        )
    )

    serialize_compatibility(
        writer, manifest.compatibility, ModelPath.root("compatibility")
    )
    serialize_dependency(writer, manifest.dependency, ModelPath.root("dependency"))

    writer.write(EndElement())
    writer.into_inner()
    return sink


def manifest_to_bytes(
    manifest: AssemblyManifest, config: WriterConfig | None = None
) -> bytes:
    buffer = serialize_manifest(manifest, io.BytesIO(), config)
    return buffer.getvalue()


def manifest_to_string(
    manifest: AssemblyManifest, config: WriterConfig | None = None
) -> str:
    """Serialize into memory and decode only once the whole document is written."""
    config = config or WriterConfig()
    return manifest_to_bytes(manifest, config).decode(config.encoding)
