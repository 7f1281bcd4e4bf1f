"""Manifest descriptions stored as TOML.

A description mirrors the manifest model with plain strings::

    [compatibility]
    supported_os = ["windows10", "windows8.1"]
    max_version_tested = "10.0.18362.0"

    [[dependency]]
    name = "Microsoft.Windows.Common-Controls"
    version = "6.0.0.0"
    process_architecture = "x86"
    public_key_token = "6595b64144ccf1df"
    language = "*"
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
import tomllib
from typing import Any

from typing_extensions import override

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ...application.ports.repositories import ManifestDescriptionRepositoryPort
from ...domain.entities import (
    AssemblyIdentity,
    AssemblyManifest,
    AssemblyType,
    AssemblyVersion,
    Compatibility,
    Dependency,
    ManifestVersion,
    ProcessArchitecture,
    PublicKeyToken,
    SupportedOS,
    WindowsVersions,
)
from ..io.exceptions import ManifestDescriptionError, ManifestDescriptionNotFoundError


def _parse_version(text: str) -> AssemblyVersion:
    predefined = WindowsVersions.get(text)
    if predefined is not None:
        return predefined
    return AssemblyVersion.parse(text)


class IdentityDescription(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    type: str = AssemblyType.WIN32.value
    language: str | None = None
    process_architecture: str | None = None
    version: str | None = None
    public_key_token: str | None = Field(default=None, min_length=16, max_length=16)

    @field_validator("type")
    @classmethod
    def _check_type(cls, value: str) -> str:
        AssemblyType(value.strip().lower())
        return value.strip().lower()

    @field_validator("process_architecture")
    @classmethod
    def _check_architecture(cls, value: str | None) -> str | None:
        if value is not None:
            ProcessArchitecture.from_name(value)
        return value

    @field_validator("version")
    @classmethod
    def _check_version(cls, value: str | None) -> str | None:
        if value is not None:
            AssemblyVersion.parse(value)
        return value

    @field_validator("public_key_token")
    @classmethod
    def _check_token(cls, value: str | None) -> str | None:
        if value is not None:
            PublicKeyToken.from_hex(value)
        return value

    def to_entity(self) -> AssemblyIdentity:
        return AssemblyIdentity(
            name=self.name,
            type=AssemblyType(self.type),
            language=self.language,
            process_architecture=(
                ProcessArchitecture.from_name(self.process_architecture)
                if self.process_architecture is not None
                else None
            ),
            version=AssemblyVersion.parse(self.version) if self.version else None,
            public_key_token=(
                PublicKeyToken.from_hex(self.public_key_token)
                if self.public_key_token is not None
                else None
            ),
        )


class CompatibilityDescription(BaseModel):
    model_config = ConfigDict(extra="forbid")

    supported_os: list[str] = Field(default_factory=list)
    max_version_tested: str | None = None

    @field_validator("supported_os")
    @classmethod
    def _check_supported_os(cls, value: list[str]) -> list[str]:
        for name in value:
            SupportedOS.from_name(name)
        return value

    @field_validator("max_version_tested")
    @classmethod
    def _check_max_version(cls, value: str | None) -> str | None:
        if value is not None:
            _parse_version(value)
        return value

    def to_entity(self) -> Compatibility:
        return Compatibility(
            supported_os={SupportedOS.from_name(name) for name in self.supported_os},
            max_version_tested=(
                _parse_version(self.max_version_tested)
                if self.max_version_tested is not None
                else None
            ),
        )


class ManifestDescription(BaseModel):
    model_config = ConfigDict(extra="forbid")

    manifest_version: str = ManifestVersion.V1_0.value
    compatibility: CompatibilityDescription = Field(
        default_factory=CompatibilityDescription
    )
    dependency: list[IdentityDescription] = Field(default_factory=list)

    @field_validator("manifest_version")
    @classmethod
    def _check_manifest_version(cls, value: str) -> str:
        ManifestVersion(value)
        return value

    def to_entity(self) -> AssemblyManifest:
        return AssemblyManifest(
            manifest_version=ManifestVersion(self.manifest_version),
            compatibility=self.compatibility.to_entity(),
            dependency=Dependency([item.to_entity() for item in self.dependency]),
        )


def parse_manifest_description(
    data: Mapping[str, Any], *, source: str = "<data>"
) -> AssemblyManifest:
    try:
        description = ManifestDescription.model_validate(data)
    except ValidationError as exc:
        raise ManifestDescriptionError(
            f"Invalid manifest description in {source}: {exc}"
        ) from exc
    return description.to_entity()


def load_manifest_description(path: str | Path) -> AssemblyManifest:
    file_path = Path(path)
    if not file_path.exists():
        raise ManifestDescriptionNotFoundError(
            f"Manifest description not found: {file_path}"
        )
    try:
        with file_path.open("rb") as handle:
            data = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ManifestDescriptionError(f"Invalid TOML in {file_path}: {exc}") from exc
    return parse_manifest_description(data, source=str(file_path))


class ManifestDescriptionRepository(ManifestDescriptionRepositoryPort):
    pass

    @override
    def load(self, path: Path) -> AssemblyManifest:
        return load_manifest_description(path)
