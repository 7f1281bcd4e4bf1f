from __future__ import annotations

from typing import TYPE_CHECKING

from sxs_manifest.domain.services.validation_rules import check_compatibility

from ..exceptions import InvalidManifestError
from ..xml_writer import Attribute, EndElement, StartElement
from .constants import (
    APPLICATION,
    ATTR_ID,
    COMPAT_V1_NS,
    COMPATIBILITY,
    MAX_VERSION_TESTED,
    SUPPORTED_OS,
)

if TYPE_CHECKING:
    from sxs_manifest.domain.entities.compatibility import Compatibility
    from sxs_manifest.domain.services.model_path import ModelPath

    from ..xml_writer import EventWriter


def serialize_compatibility(
    writer: EventWriter, compatibility: Compatibility, path: ModelPath
) -> None:
    """Write the ``compatibility`` section.

    Nothing is written when no supported OS is declared. Supported OS
    elements follow the declaration order of ``SupportedOS``.

    Raises:
        InvalidManifestError: ``max_version_tested`` is set without any
            supported OS
    """
    issues = check_compatibility(compatibility, path)
    if issues:
        issue = issues[0]
        raise InvalidManifestError(issue.path, issue.detail, rule=issue.rule)
    if not compatibility.supported_os:
        return

    writer.write(StartElement(COMPATIBILITY, namespaces={None: COMPAT_V1_NS}))
    writer.write(StartElement(APPLICATION))

    if compatibility.max_version_tested is not None:
        version = compatibility.max_version_tested.render()
        writer.write(StartElement(MAX_VERSION_TESTED, (Attribute(ATTR_ID, version),)))
        writer.write(EndElement())

    for supported_os in compatibility.ordered_supported_os():
        writer.write(
            StartElement(SUPPORTED_OS, (Attribute(ATTR_ID, supported_os.render()),))
        )
        writer.write(EndElement())

    writer.write(EndElement())
    writer.write(EndElement())
