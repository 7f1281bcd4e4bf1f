from .compatibility import Compatibility, SupportedOS, WindowsVersions
from .dependency import Dependency
from .identity import (
    AssemblyIdentity,
    AssemblyType,
    AssemblyVersion,
    ProcessArchitecture,
    PublicKeyToken,
)
from .manifest import AssemblyManifest, ManifestVersion

__all__ = [
    "AssemblyIdentity",
    "AssemblyManifest",
    "AssemblyType",
    "AssemblyVersion",
    "Compatibility",
    "Dependency",
    "ManifestVersion",
    "ProcessArchitecture",
    "PublicKeyToken",
    "SupportedOS",
    "WindowsVersions",
]
