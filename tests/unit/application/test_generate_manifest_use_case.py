"""Unit tests for GenerateManifestUseCase."""

from pathlib import Path

from sxs_manifest.application.generate_manifest_use_case import (
    GenerateManifestDependencies,
    GenerateManifestUseCase,
)
from sxs_manifest.application.models import GenerateManifestRequest
from sxs_manifest.config import WriterConfig
from sxs_manifest.domain.entities import (
    AssemblyIdentity,
    AssemblyManifest,
    AssemblyVersion,
    Compatibility,
    Dependency,
    SupportedOS,
)
from sxs_manifest.infrastructure.io.exceptions import XmlWriteError
from sxs_manifest.infrastructure.io.manifest_xml_generator import ManifestXMLGenerator
from sxs_manifest.infrastructure.logging import NullLogger


class RecordingLogger(NullLogger):
    def __init__(self) -> None:
        super().__init__()
        self.errors: list[str] = []
        self.issues = []
        self.written: list[tuple[str, Path | None, int]] = []

    def error(self, message: str) -> None:
        self.errors.append(message)

    def log_validation_issues(self, issues) -> None:
        self.issues.extend(issues)

    def log_manifest_written(self, name, output_path, size_bytes) -> None:
        self.written.append((name, output_path, size_bytes))


class FailingSaveGenerator(ManifestXMLGenerator):
    def save(self, payload: bytes, output_path: Path) -> Path:
        raise XmlWriteError("disk full")


def _use_case(logger=None, generator=None) -> GenerateManifestUseCase:
    return GenerateManifestUseCase(
        GenerateManifestDependencies(
            logger=logger or NullLogger(),
            xml_generator=generator or ManifestXMLGenerator(),
        )
    )


class TestGenerateManifestUseCase:
    def test_returns_xml_without_output_path(self):
        response = _use_case().execute(GenerateManifestRequest(manifest=AssemblyManifest()))

        assert response.success is True
        assert response.output_path is None
        assert response.error is None
        assert response.xml is not None
        assert response.xml.endswith('manifestVersion="1.0"/>')

    def test_writes_output_file(self, tmp_path: Path):
        logger = RecordingLogger()
        output = tmp_path / "app.exe.manifest"
        manifest = AssemblyManifest(
            compatibility=Compatibility(supported_os={SupportedOS.WINDOWS_10}),
            dependency=Dependency([AssemblyIdentity.new("Dep")]),
        )

        response = _use_case(logger).execute(
            GenerateManifestRequest(
                manifest=manifest,
                output_path=output,
                writer_config=WriterConfig.pretty(),
                name="app",
            )
        )

        assert response.success is True
        assert response.output_path == output
        assert output.read_text(encoding="utf-8") == response.xml
        assert logger.written == [("app", output, len(output.read_bytes()))]

    def test_validation_issues_stop_generation(self, tmp_path: Path):
        logger = RecordingLogger()
        output = tmp_path / "app.manifest"
        manifest = AssemblyManifest(
            compatibility=Compatibility(max_version_tested=AssemblyVersion(10, 0, 0))
        )

        response = _use_case(logger).execute(
            GenerateManifestRequest(manifest=manifest, output_path=output, name="app")
        )

        assert response.success is False
        assert response.xml is None
        assert response.error == "1 validation issue(s) in app"
        assert [issue.path for issue in response.issues] == [
            "compatibility.max_version_tested"
        ]
        assert logger.issues == response.issues
        assert not output.exists()

    def test_write_failure_is_reported(self, tmp_path: Path):
        logger = RecordingLogger()

        response = _use_case(logger, FailingSaveGenerator()).execute(
            GenerateManifestRequest(
                manifest=AssemblyManifest(),
                output_path=tmp_path / "app.manifest",
                name="app",
            )
        )

        assert response.success is False
        assert response.error == "XmlWrite failed - disk full"
        assert logger.errors == ["app: XmlWrite failed - disk full"]
        assert logger.written == []
