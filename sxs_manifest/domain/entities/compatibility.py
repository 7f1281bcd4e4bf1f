"""Compatibility section of the manifest.

Reference: https://learn.microsoft.com/windows/win32/sysinfo/targeting-your-application-at-windows-8-1
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar

from .identity import AssemblyVersion


class SupportedOS(str, Enum):
    """Windows release families that can be declared as supported."""

    WINDOWS_10 = "{8e0f7a12-bfb3-4fe8-b9a5-48fd50a15a9a}"  # also Server 2016/2019
    WINDOWS_8_1 = "{1f676c76-80e1-4239-95bb-83d0f6d0da78}"  # Server 2012 R2
    WINDOWS_8 = "{4a2f28e3-53b9-4441-ba9c-d69d4a4a6e38}"  # Server 2012
    WINDOWS_7 = "{35138b9a-5d96-4fbd-8e2d-a2440225f93a}"  # Server 2008 R2
    WINDOWS_VISTA = "{e2011457-1546-43c5-a5fe-008deee3d3f0}"  # Server 2008

    def render(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> SupportedOS:
        """Resolve a member from its name or a short alias such as ``windows8.1``."""
        key = name.strip().lower().replace(".", "_").replace("-", "_")
        key = _OS_ALIASES.get(key, key)
        for member in cls:
            if member.name.lower() == key:
                return member
        raise ValueError(f"Unknown supported OS: {name!r}")


_OS_ALIASES = {
    "windows10": "windows_10",
    "windows8_1": "windows_8_1",
    "windows81": "windows_8_1",
    "windows8": "windows_8",
    "windows7": "windows_7",
    "windowsvista": "windows_vista",
    "vista": "windows_vista",
}


class WindowsVersions:
    """Released Windows 10 versions, for use as ``max_version_tested``.

    Reference: https://learn.microsoft.com/windows/release-health/release-information
    """

    WINDOWS_10_1507 = AssemblyVersion(10, 0, 10240, 0)
    WINDOWS_10_1511 = AssemblyVersion(10, 0, 10586, 0)
    WINDOWS_10_1607 = AssemblyVersion(10, 0, 14393, 0)
    WINDOWS_10_1703 = AssemblyVersion(10, 0, 15063, 0)
    WINDOWS_10_1709 = AssemblyVersion(10, 0, 16299, 0)
    WINDOWS_10_1803 = AssemblyVersion(10, 0, 17134, 0)
    WINDOWS_10_1809 = AssemblyVersion(10, 0, 17763, 0)
    WINDOWS_10_1903 = AssemblyVersion(10, 0, 18362, 0)
    WINDOWS_10_2004 = AssemblyVersion(10, 0, 19041, 0)

    KEYS: ClassVar[tuple[str, ...]] = (
        "WINDOWS_10_1507",
        "WINDOWS_10_1511",
        "WINDOWS_10_1607",
        "WINDOWS_10_1703",
        "WINDOWS_10_1709",
        "WINDOWS_10_1803",
        "WINDOWS_10_1809",
        "WINDOWS_10_1903",
        "WINDOWS_10_2004",
    )

    @classmethod
    def get(cls, key: str) -> AssemblyVersion | None:
        normalized = key.strip().upper()
        if normalized not in cls.KEYS:
            return None
        return getattr(cls, normalized)


def _empty_os_set() -> set[SupportedOS]:
    return set()


@dataclass(slots=True)
class Compatibility:
    """Compatibility info about the assembly.

    ``max_version_tested`` is only meaningful together with at least one
    supported OS; the combination is checked when the manifest is serialized.
    It is required to use XAML Islands.
    """

    supported_os: set[SupportedOS] = field(default_factory=_empty_os_set)
    max_version_tested: AssemblyVersion | None = None

    def ordered_supported_os(self) -> list[SupportedOS]:
        """Supported OS members in declaration order."""
        return [member for member in SupportedOS if member in self.supported_os]
