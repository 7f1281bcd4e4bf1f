from __future__ import annotations

from typing import TYPE_CHECKING

from typing_extensions import override

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from pathlib import Path

    from ...domain.services.validation_rules import ValidationIssue


class NullLogger(LoggerPort):
    pass

    @override
    def info(self, message: str) -> None:
        return

    @override
    def success(self, message: str) -> None:
        return

    @override
    def warning(self, message: str) -> None:
        return

    @override
    def error(self, message: str) -> None:
        return

    @override
    def debug(self, message: str) -> None:
        return

    @override
    def verbose(self, message: str) -> None:
        return

    @override
    def log_manifest_start(
        self,
        name: str,
        output_path: Path | None,
        *,
        supported_os_count: int,
        dependency_count: int,
    ) -> None:
        return None

    @override
    def log_validation_issues(self, issues: list[ValidationIssue]) -> None:
        return None

    @override
    def log_manifest_written(
        self, name: str, output_path: Path | None, size_bytes: int
    ) -> None:
        return None

    @override
    def log_final_stats(self) -> None:
        return None
