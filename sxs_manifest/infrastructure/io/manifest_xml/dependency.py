from __future__ import annotations

from typing import TYPE_CHECKING

from ..xml_writer import EndElement, StartElement
from .constants import DEPENDENCY, DEPENDENT_ASSEMBLY
from .identity import serialize_assembly_identity

if TYPE_CHECKING:
    from sxs_manifest.domain.entities.dependency import Dependency
    from sxs_manifest.domain.services.model_path import ModelPath

    from ..xml_writer import EventWriter


def serialize_dependency(
    writer: EventWriter, dependency: Dependency, path: ModelPath
) -> None:
    """Write one ``dependency/dependentAssembly`` block per dependent assembly.

    Blocks follow list order; an empty list writes nothing.
    """
    for index, identity in enumerate(dependency.dependent_assemblies):
        writer.write(StartElement(DEPENDENCY))
        writer.write(StartElement(DEPENDENT_ASSEMBLY))
        serialize_assembly_identity(writer, identity, path.child(index))
        writer.write(EndElement())
        writer.write(EndElement())
