from dataclasses import dataclass, field

from .identity import AssemblyIdentity


def _empty_identity_list() -> list[AssemblyIdentity]:
    return []


@dataclass(slots=True)
class Dependency:
    """Side-by-side dependencies of the assembly, kept in declaration order."""

    dependent_assemblies: list[AssemblyIdentity] = field(
        default_factory=_empty_identity_list
    )
