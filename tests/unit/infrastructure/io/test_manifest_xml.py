"""Unit tests for SxS manifest serialization."""

from io import BytesIO, StringIO

import pytest

from sxs_manifest.config import WriterConfig
from sxs_manifest.domain.entities import (
    AssemblyIdentity,
    AssemblyManifest,
    AssemblyVersion,
    Compatibility,
    Dependency,
    ProcessArchitecture,
    PublicKeyToken,
    SupportedOS,
)
from sxs_manifest.domain.services import ModelPath
from sxs_manifest.infrastructure.io.exceptions import (
    InvalidManifestError,
    ManifestSerializationError,
    XmlWriteError,
)
from sxs_manifest.infrastructure.io.manifest_xml import (
    manifest_to_bytes,
    manifest_to_string,
    serialize_assembly_identity,
    serialize_compatibility,
    serialize_dependency,
    serialize_manifest,
)
from sxs_manifest.infrastructure.io.manifest_xml.constants import ASM_V1_NS, ASSEMBLY
from sxs_manifest.infrastructure.io.manifest_xml.identity import identity_attributes
from sxs_manifest.infrastructure.io.xml_writer import EndElement, EventWriter, StartElement

DECLARATION = '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
ASSEMBLY_OPEN = '<assembly xmlns="urn:schemas-microsoft-com:asm.v1" manifestVersion="1.0">'
WINDOWS_10_ID = "{8e0f7a12-bfb3-4fe8-b9a5-48fd50a15a9a}"
BARE_ROOT_OPEN = '<assembly xmlns="urn:schemas-microsoft-com:asm.v1">'
EMPTY_BARE_ROOT = '<assembly xmlns="urn:schemas-microsoft-com:asm.v1"/>'


def _write_in_root(write_section) -> str:
    """Run a section serializer inside an ``assembly`` root and return the body."""
    writer = EventWriter(StringIO())
    writer.write(StartElement(ASSEMBLY, namespaces={None: ASM_V1_NS}))
    write_section(writer)
    writer.write(EndElement())
    output = writer.into_inner().getvalue()
    if output == EMPTY_BARE_ROOT:
        return ""
    return output.removeprefix(BARE_ROOT_OPEN).removesuffix("</assembly>")


def _common_controls() -> AssemblyIdentity:
    return AssemblyIdentity(
        name="Microsoft.Windows.Common-Controls",
        language="*",
        process_architecture=ProcessArchitecture.X86,
        version=AssemblyVersion(6, 0, 0, 0),
        public_key_token=PublicKeyToken.from_hex("6595b64144ccf1df"),
    )


class TestSerializeManifest:
    def test_default_manifest_exact_output(self):
        assert manifest_to_string(AssemblyManifest()) == (
            DECLARATION
            + '<assembly xmlns="urn:schemas-microsoft-com:asm.v1" manifestVersion="1.0"/>'
        )

    def test_windows10_with_max_version_tested(self):
        manifest = AssemblyManifest()
        manifest.compatibility.supported_os.add(SupportedOS.WINDOWS_10)
        manifest.compatibility.max_version_tested = AssemblyVersion(10, 0, 18358, 0)

        assert manifest_to_string(manifest) == (
            DECLARATION
            + ASSEMBLY_OPEN
            + '<compatibility xmlns="urn:schemas-microsoft-com:compatibility.v1">'
            + "<application>"
            + '<maxversiontested Id="10.0.18358.0"/>'
            + f'<supportedOS Id="{WINDOWS_10_ID}"/>'
            + "</application>"
            + "</compatibility>"
            + "</assembly>"
        )

    def test_max_version_without_os_fails_then_succeeds(self):
        manifest = AssemblyManifest()
        manifest.compatibility.max_version_tested = AssemblyVersion(10, 0, 18358, 0)

        with pytest.raises(InvalidManifestError) as exc_info:
            manifest_to_string(manifest)

        assert exc_info.value.path == "compatibility.max_version_tested"
        assert exc_info.value.rule == "max-version-tested-requires-supported-os"
        assert str(exc_info.value).startswith(
            "Invalid data found at compatibility.max_version_tested."
        )

        manifest.compatibility.supported_os.add(SupportedOS.WINDOWS_10)
        assert "maxversiontested" in manifest_to_string(manifest)

    def test_failure_leaves_partial_output_in_sink(self):
        manifest = AssemblyManifest(
            compatibility=Compatibility(max_version_tested=AssemblyVersion(10, 0, 0))
        )
        sink = StringIO()

        with pytest.raises(ManifestSerializationError):
            serialize_manifest(manifest, sink)

        partial = sink.getvalue()
        assert partial.startswith(DECLARATION + "<assembly")
        assert "</assembly>" not in partial

    def test_returns_same_sink(self):
        sink = BytesIO()

        assert serialize_manifest(AssemblyManifest(), sink) is sink
        assert sink.getvalue().endswith(b'manifestVersion="1.0"/>')

    def test_manifest_methods_delegate(self):
        manifest = AssemblyManifest()
        sink = StringIO()

        assert manifest.serialize(sink) is sink
        assert sink.getvalue() == manifest.serialize_to_string()

    def test_bytes_match_string(self):
        manifest = AssemblyManifest(dependency=Dependency([_common_controls()]))

        assert manifest_to_bytes(manifest) == manifest_to_string(manifest).encode("utf-8")

    def test_pretty_output(self):
        manifest = AssemblyManifest(
            compatibility=Compatibility(supported_os={SupportedOS.WINDOWS_10}),
            dependency=Dependency([AssemblyIdentity.new("Dep")]),
        )

        assert manifest_to_string(manifest, WriterConfig.pretty()) == "\n".join(
            [
                DECLARATION,
                ASSEMBLY_OPEN,
                '  <compatibility xmlns="urn:schemas-microsoft-com:compatibility.v1">',
                "    <application>",
                f'      <supportedOS Id="{WINDOWS_10_ID}"/>',
                "    </application>",
                "  </compatibility>",
                "  <dependency>",
                "    <dependentAssembly>",
                '      <assemblyIdentity type="win32" name="Dep"/>',
                "    </dependentAssembly>",
                "  </dependency>",
                "</assembly>",
            ]
        )

    def test_declaration_uses_configured_encoding(self):
        config = WriterConfig(encoding="UTF-16")

        output = manifest_to_string(AssemblyManifest(), config)

        assert output.startswith('<?xml version="1.0" encoding="UTF-16" standalone="yes"?>')


class TestSerializeCompatibility:
    def test_empty_compatibility_writes_nothing(self):
        body = _write_in_root(
            lambda writer: serialize_compatibility(
                writer, Compatibility(), ModelPath.root("compatibility")
            )
        )

        assert body == ""

    def test_supported_os_in_declaration_order(self):
        compat = Compatibility(
            supported_os={
                SupportedOS.WINDOWS_7,
                SupportedOS.WINDOWS_10,
                SupportedOS.WINDOWS_8_1,
            }
        )

        body = _write_in_root(
            lambda writer: serialize_compatibility(
                writer, compat, ModelPath.root("compatibility")
            )
        )

        ids = [SupportedOS.WINDOWS_10, SupportedOS.WINDOWS_8_1, SupportedOS.WINDOWS_7]
        positions = [body.index(member.render()) for member in ids]
        assert positions == sorted(positions)
        assert body.count("<supportedOS ") == 3
        assert "maxversiontested" not in body

    def test_error_path_uses_given_location(self):
        compat = Compatibility(max_version_tested=AssemblyVersion(1, 0, 0))
        writer = EventWriter(StringIO())

        with pytest.raises(InvalidManifestError) as exc_info:
            serialize_compatibility(writer, compat, ModelPath.root("compat"))

        assert exc_info.value.path == "compat.max_version_tested"


class TestSerializeDependency:
    def test_empty_list_writes_nothing(self):
        body = _write_in_root(
            lambda writer: serialize_dependency(
                writer, Dependency(), ModelPath.root("dependency")
            )
        )

        assert body == ""

    def test_one_wrapper_per_assembly_in_order(self):
        dependency = Dependency(
            [AssemblyIdentity.new(name) for name in ("First", "Second", "Third")]
        )

        body = _write_in_root(
            lambda writer: serialize_dependency(
                writer, dependency, ModelPath.root("dependency")
            )
        )

        assert body.count("<dependency>") == 3
        assert body.count("<dependentAssembly>") == 3
        assert body.index('name="First"') < body.index('name="Second"')
        assert body.index('name="Second"') < body.index('name="Third"')
        assert body.startswith(
            '<dependency><dependentAssembly><assemblyIdentity type="win32" name="First"/>'
            "</dependentAssembly></dependency>"
        )


class TestSerializeAssemblyIdentity:
    def test_full_identity_attribute_order(self):
        body = _write_in_root(
            lambda writer: serialize_assembly_identity(
                writer, _common_controls(), ModelPath.root("dependency").child(0)
            )
        )

        assert body == (
            '<assemblyIdentity type="win32" name="Microsoft.Windows.Common-Controls"'
            ' language="*" processorArchitecture="x86" version="6.0.0.0"'
            ' publicKeyToken="6595B64144CCF1DF"/>'
        )

    def test_minimal_identity_has_type_and_name(self):
        attributes = identity_attributes(AssemblyIdentity.new("Only.Name"))

        assert [(a.name, a.value) for a in attributes] == [
            ("type", "win32"),
            ("name", "Only.Name"),
        ]

    def test_x86_64_renders_ia64(self):
        identity = AssemblyIdentity(
            name="x", process_architecture=ProcessArchitecture.X86_64
        )

        attributes = dict((a.name, a.value) for a in identity_attributes(identity))

        assert attributes["processorArchitecture"] == "ia64"

    def test_control_character_in_name_is_rejected(self):
        manifest = AssemblyManifest(
            dependency=Dependency([AssemblyIdentity.new("Dep\x1bName")])
        )

        with pytest.raises(XmlWriteError, match="assemblyIdentity"):
            manifest_to_string(manifest)
