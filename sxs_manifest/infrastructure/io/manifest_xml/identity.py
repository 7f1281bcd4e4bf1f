from __future__ import annotations

from typing import TYPE_CHECKING

from sxs_manifest.domain.services.validation_rules import check_assembly_identity

from ..exceptions import InvalidManifestError
from ..xml_writer import Attribute, EndElement, StartElement
from .constants import (
    ASSEMBLY_IDENTITY,
    ATTR_LANGUAGE,
    ATTR_NAME,
    ATTR_PROCESSOR_ARCHITECTURE,
    ATTR_PUBLIC_KEY_TOKEN,
    ATTR_TYPE,
    ATTR_VERSION,
)

if TYPE_CHECKING:
    from sxs_manifest.domain.entities.identity import AssemblyIdentity
    from sxs_manifest.domain.services.model_path import ModelPath

    from ..xml_writer import EventWriter


def identity_attributes(identity: AssemblyIdentity) -> tuple[Attribute, ...]:
    """Attributes of an ``assemblyIdentity`` element, in schema order.

    ``type`` and ``name`` are always present; the rest only when set.
    """
    attributes = [
        Attribute(ATTR_TYPE, identity.type.render()),
        Attribute(ATTR_NAME, identity.name),
    ]
    if identity.language is not None:
        attributes.append(Attribute(ATTR_LANGUAGE, identity.language))
    if identity.process_architecture is not None:
        attributes.append(
            Attribute(ATTR_PROCESSOR_ARCHITECTURE, identity.process_architecture.render())
        )
    if identity.version is not None:
        attributes.append(Attribute(ATTR_VERSION, identity.version.render()))
    if identity.public_key_token is not None:
        attributes.append(
            Attribute(ATTR_PUBLIC_KEY_TOKEN, identity.public_key_token.render())
        )
    return tuple(attributes)


def serialize_assembly_identity(
    writer: EventWriter, identity: AssemblyIdentity, path: ModelPath
) -> None:
    issues = check_assembly_identity(identity, path)
    if issues:
        issue = issues[0]
        raise InvalidManifestError(issue.path, issue.detail, rule=issue.rule)
    writer.write(StartElement(ASSEMBLY_IDENTITY, identity_attributes(identity)))
    writer.write(EndElement())
