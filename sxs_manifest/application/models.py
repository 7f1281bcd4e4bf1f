from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from ..config import WriterConfig
    from ..domain.entities.manifest import AssemblyManifest
    from ..domain.services.validation_rules import ValidationIssue


def _empty_issue_list() -> list[ValidationIssue]:
    return []


@dataclass(slots=True)
class GenerateManifestRequest:
    manifest: AssemblyManifest
    output_path: Path | None = None
    writer_config: WriterConfig | None = None
    name: str = "manifest"


@dataclass(slots=True)
class GenerateManifestResponse:
    success: bool
    xml: str | None = None
    output_path: Path | None = None
    error: str | None = None
    issues: list[ValidationIssue] = field(default_factory=_empty_issue_list)
