from .model_path import ModelPath
from .validation_rules import (
    DEFAULT_RULES,
    ManifestRule,
    ValidationIssue,
    check_assembly_identity,
    check_compatibility,
    validate_manifest,
)

__all__ = [
    "DEFAULT_RULES",
    "ManifestRule",
    "ModelPath",
    "ValidationIssue",
    "check_assembly_identity",
    "check_compatibility",
    "validate_manifest",
]
