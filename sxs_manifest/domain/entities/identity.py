"""Assembly identity and the atomic values it is built from.

Every value type here exposes ``render()``, which returns the canonical text
used for the corresponding XML attribute. Rendering never fails and never
looks at surrounding context.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ...constants import Constraints


class AssemblyType(str, Enum):
    """Type of assembly. Only win32 is available."""

    WIN32 = "win32"

    def render(self) -> str:
        return self.value


class ProcessArchitecture(str, Enum):
    """Supported process architecture."""

    X86 = "x86"
    # x86_64 / amd64 machines are declared with the legacy ia64 token
    X86_64 = "ia64"

    def render(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> ProcessArchitecture:
        key = name.strip().lower()
        if key in ("x86", "i386", "win32"):
            return cls.X86
        if key in ("x86_64", "amd64", "x64", "ia64"):
            return cls.X86_64
        raise ValueError(f"Unknown process architecture: {name!r}")


@dataclass(frozen=True, slots=True)
class AssemblyVersion:
    """Four-part assembly version; ``revision`` renders as 0 when absent."""

    major: int
    minor: int
    build: int
    revision: int | None = None

    def __post_init__(self) -> None:
        for label, part in (
            ("major", self.major),
            ("minor", self.minor),
            ("build", self.build),
            ("revision", self.revision),
        ):
            if part is not None and part < 0:
                raise ValueError(f"{label} must be non-negative, got {part}")

    @classmethod
    def parse(cls, text: str) -> AssemblyVersion:
        """Parse ``major.minor.build[.revision]``.

        Args:
            text: Dotted version string with 3 or 4 numeric parts

        Returns:
            The parsed version; a 3-part string leaves ``revision`` unset
        """
        parts = text.strip().split(".")
        if len(parts) not in (3, 4) or not all(p.isdigit() for p in parts):
            raise ValueError(
                f"Version must look like 'major.minor.build[.revision]', got {text!r}"
            )
        numbers = [int(p) for p in parts]
        revision = numbers[3] if len(numbers) == 4 else None
        return cls(numbers[0], numbers[1], numbers[2], revision)

    def render(self) -> str:
        revision = self.revision if self.revision is not None else 0
        return f"{self.major}.{self.minor}.{self.build}.{revision}"


@dataclass(frozen=True, slots=True)
class PublicKeyToken:
    """The last 8 bytes of the SHA-1 hash of the signing public key."""

    value: bytes

    def __post_init__(self) -> None:
        if len(self.value) != Constraints.PUBLIC_KEY_TOKEN_BYTES:
            raise ValueError(
                f"PublicKeyToken requires {Constraints.PUBLIC_KEY_TOKEN_BYTES} bytes, "
                f"got {len(self.value)}"
            )

    @classmethod
    def from_hex(cls, text: str) -> PublicKeyToken:
        return cls(bytes.fromhex(text.strip()))

    def render(self) -> str:
        return "".join(f"{byte:02X}" for byte in self.value)


@dataclass(slots=True)
class AssemblyIdentity:
    """Identity of an assembly, either the manifest's subject or a dependency."""

    name: str
    type: AssemblyType = AssemblyType.WIN32
    language: str | None = None
    process_architecture: ProcessArchitecture | None = None
    version: AssemblyVersion | None = None
    public_key_token: PublicKeyToken | None = None

    @classmethod
    def new(cls, name: str) -> AssemblyIdentity:
        return cls(name=name)
