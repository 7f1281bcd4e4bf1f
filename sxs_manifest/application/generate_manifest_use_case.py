from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..config import WriterConfig
from ..domain.services.validation_rules import validate_manifest
from ..infrastructure.io.exceptions import ManifestError
from .models import GenerateManifestResponse

if TYPE_CHECKING:
    from .models import GenerateManifestRequest
    from .ports.services import LoggerPort, ManifestXMLGeneratorPort


@dataclass(slots=True)
class GenerateManifestDependencies:
    logger: LoggerPort
    xml_generator: ManifestXMLGeneratorPort


class GenerateManifestUseCase:
    """Validate a manifest, serialize it and optionally persist it.

    The XML is fully built in memory before anything is written to disk, so a
    failed request never leaves a partial file behind.
    """

    def __init__(self, dependencies: GenerateManifestDependencies) -> None:
        super().__init__()
        self.logger = dependencies.logger
        self._xml_generator = dependencies.xml_generator

    def execute(self, request: GenerateManifestRequest) -> GenerateManifestResponse:
        manifest = request.manifest
        config = request.writer_config or WriterConfig()
        self.logger.log_manifest_start(
            request.name,
            request.output_path,
            supported_os_count=len(manifest.compatibility.supported_os),
            dependency_count=len(manifest.dependency.dependent_assemblies),
        )

        issues = validate_manifest(manifest)
        if issues:
            self.logger.log_validation_issues(issues)
            return GenerateManifestResponse(
                success=False,
                error=f"{len(issues)} validation issue(s) in {request.name}",
                issues=issues,
            )

        try:
            payload = self._xml_generator.render(manifest, config)
            output_path = None
            if request.output_path is not None:
                output_path = self._xml_generator.save(payload, request.output_path)
        except ManifestError as exc:
            self.logger.error(f"{request.name}: {exc}")
            return GenerateManifestResponse(success=False, error=str(exc))

        self.logger.log_manifest_written(request.name, output_path, len(payload))
        return GenerateManifestResponse(
            success=True,
            xml=payload.decode(config.encoding),
            output_path=output_path,
        )
