"""Unit tests for writing manifests to disk."""

from pathlib import Path

import pytest

from sxs_manifest.config import WriterConfig
from sxs_manifest.domain.entities import (
    AssemblyManifest,
    AssemblyVersion,
    Compatibility,
    SupportedOS,
)
from sxs_manifest.infrastructure.io.exceptions import InvalidManifestError, XmlWriteError
from sxs_manifest.infrastructure.io.manifest_xml import (
    manifest_to_bytes,
    save_manifest_payload,
    write_manifest_file,
)
from sxs_manifest.infrastructure.io.manifest_xml_generator import ManifestXMLGenerator
from sxs_manifest.application.ports import ManifestXMLGeneratorPort


class TestWriteManifestFile:
    def test_writes_file_and_creates_parents(self, tmp_path: Path):
        output = tmp_path / "nested" / "dir" / "app.exe.manifest"

        written = write_manifest_file(AssemblyManifest(), output)

        assert written == output
        assert output.read_bytes() == manifest_to_bytes(AssemblyManifest())

    def test_pretty_config_is_applied(self, tmp_path: Path):
        manifest = AssemblyManifest(
            compatibility=Compatibility(supported_os={SupportedOS.WINDOWS_8})
        )
        output = tmp_path / "app.manifest"

        write_manifest_file(manifest, output, WriterConfig.pretty())

        assert "\n  <compatibility" in output.read_text(encoding="utf-8")

    def test_invalid_manifest_leaves_no_file(self, tmp_path: Path):
        manifest = AssemblyManifest(
            compatibility=Compatibility(max_version_tested=AssemblyVersion(10, 0, 0))
        )
        output = tmp_path / "app.manifest"

        with pytest.raises(InvalidManifestError):
            write_manifest_file(manifest, output)

        assert not output.exists()

    def test_unwritable_destination(self, tmp_path: Path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        with pytest.raises(XmlWriteError, match="cannot write"):
            save_manifest_payload(b"<assembly/>", blocker / "app.manifest")


class TestManifestXMLGenerator:
    def test_implements_port(self):
        assert isinstance(ManifestXMLGenerator(), ManifestXMLGeneratorPort)

    def test_render_and_save(self, tmp_path: Path):
        generator = ManifestXMLGenerator()
        payload = generator.render(AssemblyManifest())

        path = generator.save(payload, tmp_path / "out.manifest")

        assert path.read_bytes() == payload
        assert payload.endswith(b'manifestVersion="1.0"/>')
