"""Cross-field rules checked before a manifest section is written.

Each rule is named, inspects one section of the manifest and, when violated,
reports the offending field relative to that section's location. Rules are
grouped per section so new schema constraints only need a new entry in
``DEFAULT_RULES``.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .model_path import ModelPath

if TYPE_CHECKING:
    from ..entities.compatibility import Compatibility
    from ..entities.identity import AssemblyIdentity
    from ..entities.manifest import AssemblyManifest


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """A violated rule, located by its path from the manifest root."""

    rule: str
    path: str
    detail: str

    def __str__(self) -> str:
        return f"[{self.rule}] {self.path}: {self.detail}"


@dataclass(frozen=True, slots=True)
class ManifestRule:
    """A named check over one manifest section.

    Attributes:
        name: Stable identifier reported with every issue
        field: Field of the section the issue points at
        is_violated: Predicate over the section value
        detail: Human-readable hint on how to fix the violation
    """

    name: str
    field: str
    is_violated: Callable[[Any], bool]
    detail: str

    def check(self, subject: object, path: ModelPath) -> ValidationIssue | None:
        if not self.is_violated(subject):
            return None
        return ValidationIssue(
            rule=self.name,
            path=str(path.child(self.field)),
            detail=self.detail,
        )


def _max_version_without_os(compatibility: Compatibility) -> bool:
    return not compatibility.supported_os and compatibility.max_version_tested is not None


COMPATIBILITY_RULES: tuple[ManifestRule, ...] = (
    ManifestRule(
        name="max-version-tested-requires-supported-os",
        field="max_version_tested",
        is_violated=_max_version_without_os,
        detail="max_version_tested requires at least one supported_os",
    ),
)

DEFAULT_RULES: Mapping[str, Sequence[ManifestRule]] = {
    "compatibility": COMPATIBILITY_RULES,
    "assembly_identity": (),
}


def check_rules(
    subject: object, path: ModelPath, rules: Sequence[ManifestRule]
) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    for rule in rules:
        issue = rule.check(subject, path)
        if issue is not None:
            issues.append(issue)
    return issues


def check_compatibility(
    compatibility: Compatibility,
    path: ModelPath,
    rules: Mapping[str, Sequence[ManifestRule]] = DEFAULT_RULES,
) -> list[ValidationIssue]:
    return check_rules(compatibility, path, rules.get("compatibility", ()))


def check_assembly_identity(
    identity: AssemblyIdentity,
    path: ModelPath,
    rules: Mapping[str, Sequence[ManifestRule]] = DEFAULT_RULES,
) -> list[ValidationIssue]:
    return check_rules(identity, path, rules.get("assembly_identity", ()))


def validate_manifest(
    manifest: AssemblyManifest,
    rules: Mapping[str, Sequence[ManifestRule]] = DEFAULT_RULES,
) -> list[ValidationIssue]:
    """Run every rule over the manifest without writing anything.

    Args:
        manifest: The manifest to check
        rules: Rules per section name

    Returns:
        All issues found, in document order
    """
    issues = check_compatibility(
        manifest.compatibility, ModelPath.root("compatibility"), rules
    )
    dependency_path = ModelPath.root("dependency")
    for index, identity in enumerate(manifest.dependency.dependent_assemblies):
        issues.extend(
            check_assembly_identity(identity, dependency_path.child(index), rules)
        )
    return issues
