from typing import ClassVar


class Namespaces:
    ASSEMBLY_V1 = "urn:schemas-microsoft-com:asm.v1"
    COMPATIBILITY_V1 = "urn:schemas-microsoft-com:compatibility.v1"


class Defaults:
    INDENT_STRING = "  "
    LINE_SEPARATOR = "\n"
    ENCODING = "UTF-8"
    PERFORM_INDENT = False
    CONFIG_FILE = "sxs_manifest.toml"
    XML_VERSION = "1.0"


class Constraints:
    PUBLIC_KEY_TOKEN_BYTES = 8
    ALLOWED_LINE_SEPARATORS: ClassVar[tuple[str, ...]] = ("", "\n", "\r\n")
    INDENT_CHARACTERS = " \t"


class EnvVars:
    INDENT = "SXS_MANIFEST_INDENT"
    INDENT_STRING = "SXS_MANIFEST_INDENT_STRING"
    LINE_SEPARATOR = "SXS_MANIFEST_LINE_SEPARATOR"
    ENCODING = "SXS_MANIFEST_ENCODING"
    TRUTHY: ClassVar[tuple[str, ...]] = ("1", "true", "yes", "on")


class LogLevels:
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2


class Patterns:
    # Anything outside the XML 1.0 Char production
    XML_INVALID_CHAR = "[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
