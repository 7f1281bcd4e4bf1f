"""Writer for manifest files.

The document is built in memory first so a failed serialization never leaves
a truncated manifest on disk.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from ..exceptions import XmlWriteError
from .builder import manifest_to_bytes

if TYPE_CHECKING:
    from sxs_manifest.config import WriterConfig
    from sxs_manifest.domain.entities.manifest import AssemblyManifest


def save_manifest_payload(payload: bytes, output: str | Path) -> Path:
    file_path = Path(output)
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_bytes(payload)
    except OSError as exc:
        raise XmlWriteError(f"cannot write {file_path}: {exc}") from exc
    return file_path


def write_manifest_file(
    manifest: AssemblyManifest,
    output: str | Path,
    config: WriterConfig | None = None,
) -> Path:
    """Serialize ``manifest`` and persist it to ``output``.

    Args:
        manifest: The manifest to write
        output: Destination file path; parent directories are created
        config: Writer formatting options

    Returns:
        The path that was written
    """
    return save_manifest_payload(manifest_to_bytes(manifest, config), output)
