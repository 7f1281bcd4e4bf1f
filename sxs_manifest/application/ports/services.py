from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    from ...config import WriterConfig
    from ...domain.entities.manifest import AssemblyManifest
    from ...domain.services.validation_rules import ValidationIssue


@runtime_checkable
class LoggerPort(Protocol):
    pass

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def verbose(self, message: str) -> None: ...

    def log_manifest_start(
        self,
        name: str,
        output_path: Path | None,
        *,
        supported_os_count: int,
        dependency_count: int,
    ) -> None: ...

    def log_validation_issues(self, issues: list[ValidationIssue]) -> None: ...

    def log_manifest_written(
        self, name: str, output_path: Path | None, size_bytes: int
    ) -> None: ...

    def log_final_stats(self) -> None: ...


@runtime_checkable
class ManifestXMLGeneratorPort(Protocol):
    pass

    def render(
        self, manifest: AssemblyManifest, config: WriterConfig | None = None
    ) -> bytes: ...

    def save(self, payload: bytes, output_path: Path) -> Path: ...
