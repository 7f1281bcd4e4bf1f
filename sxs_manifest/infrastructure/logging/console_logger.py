from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import TYPE_CHECKING

from typing_extensions import override

from rich.console import Console
from rich.markup import escape

from ...application.ports.services import LoggerPort
from ...constants import LogLevels

if TYPE_CHECKING:
    from pathlib import Path

    from ...domain.services.validation_rules import ValidationIssue


class LogLevel(IntEnum):
    NORMAL = LogLevels.NORMAL
    VERBOSE = LogLevels.VERBOSE
    DEBUG = LogLevels.DEBUG


@dataclass(slots=True)
class LogContext:
    manifest_name: str = ""
    output_file: str = ""
    operation: str = ""
    start_time: datetime = field(default_factory=datetime.now)

    def elapsed_ms(self) -> float:
        return (datetime.now() - self.start_time).total_seconds() * 1000


def _empty_stats() -> dict[str, int]:
    return {
        "manifests_written": 0,
        "dependencies_written": 0,
        "warnings": 0,
        "errors": 0,
    }


class ConsoleLogger(LoggerPort):
    pass

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        super().__init__()
        self.console = console or Console()
        self.verbosity = verbosity
        self._context: LogContext | None = None
        self._pending_dependencies = 0
        self._stats: dict[str, int] = _empty_stats()

    def set_context(self, **kwargs: str) -> None:
        if self._context is None:
            self._context = LogContext()
        for key, value in kwargs.items():
            if hasattr(self._context, key):
                setattr(self._context, key, value)

    def clear_context(self) -> None:
        self._context = None

    @override
    def info(self, message: str, *, level: int = LogLevel.NORMAL) -> None:
        if self.verbosity >= level:
            prefix = self._get_prefix()
            self.console.print(f"{prefix}{message}")

    @override
    def verbose(self, message: str) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            prefix = self._get_prefix()
            self.console.print(f"[dim]{prefix}{message}[/dim]")

    @override
    def debug(self, message: str) -> None:
        if self.verbosity >= LogLevel.DEBUG:
            prefix = self._get_prefix()
            self.console.print(f"[dim cyan]{prefix}{message}[/dim cyan]")

    @override
    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    @override
    def warning(self, message: str) -> None:
        self._stats["warnings"] += 1
        self.console.print(f"[yellow]⚠[/yellow] {message}")

    @override
    def error(self, message: str) -> None:
        self._stats["errors"] += 1
        self.console.print(f"[red]✗[/red] {escape(message)}")

    @override
    def log_manifest_start(
        self,
        name: str,
        output_path: Path | None,
        *,
        supported_os_count: int,
        dependency_count: int,
    ) -> None:
        self.set_context(
            manifest_name=name,
            output_file=str(output_path) if output_path else "",
            operation="generate",
        )
        self._pending_dependencies = dependency_count
        self.verbose(f"Generating manifest: {name}")
        self.verbose(f"Supported OS entries: {supported_os_count}")
        self.verbose(f"Dependent assemblies: {dependency_count}")
        if output_path is not None:
            self.debug(f"Output file: {output_path}")

    @override
    def log_validation_issues(self, issues: list[ValidationIssue]) -> None:
        for issue in issues:
            self.error(str(issue))

    @override
    def log_manifest_written(
        self, name: str, output_path: Path | None, size_bytes: int
    ) -> None:
        self._stats["manifests_written"] += 1
        self._stats["dependencies_written"] += self._pending_dependencies
        self._pending_dependencies = 0
        if output_path is not None:
            self.success(f"Wrote {name} to {output_path} ({size_bytes:,} bytes)")
        else:
            self.verbose(f"Rendered {name} ({size_bytes:,} bytes)")
        if self._context is not None:
            self.debug(f"Elapsed: {self._context.elapsed_ms():.1f} ms")

    @override
    def log_final_stats(self) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            self.console.print()
            self.console.print("[dim]Generation Statistics:[/dim]")
            self.console.print(
                f"[dim]  Manifests written: {self._stats['manifests_written']}[/dim]"
            )
            self.console.print(
                f"[dim]  Dependencies written: {self._stats['dependencies_written']}[/dim]"
            )
            if self._stats["warnings"] > 0:
                self.console.print(
                    f"[dim yellow]  Warnings: {self._stats['warnings']}[/dim yellow]"
                )
            if self._stats["errors"] > 0:
                self.console.print(
                    f"[dim red]  Errors: {self._stats['errors']}[/dim red]"
                )

    def get_stats(self) -> dict[str, int]:
        return self._stats.copy()

    def reset_stats(self) -> None:
        self._stats = _empty_stats()

    def _get_prefix(self) -> str:
        if self._context is None or self.verbosity < LogLevel.DEBUG:
            return ""
        parts: list[str] = []
        if self._context.manifest_name:
            parts.append(self._context.manifest_name)
        if self._context.operation:
            parts.append(self._context.operation)
        return f"\\[{':'.join(parts)}] " if parts else ""
