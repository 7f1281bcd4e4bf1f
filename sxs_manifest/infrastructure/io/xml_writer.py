"""Event-based XML writer.

Thin adapter over ``xml.sax.saxutils.XMLGenerator``: callers push start
document / start element / end element events, the writer checks nesting and
namespace scoping, adds optional indentation and hands the sink back when the
document is complete. Attribute values are always escaped by the generator.
"""

from __future__ import annotations

from collections.abc import Mapping
import re
from dataclasses import dataclass, field
from typing import IO, Any, TypeAlias, TypeVar
from xml.sax.saxutils import XMLGenerator
from xml.sax.xmlreader import AttributesNSImpl

from ...config import WriterConfig
from ...constants import Defaults, Patterns
from .exceptions import XmlWriteError

SinkT = TypeVar("SinkT", bound=IO[Any])

_INVALID_CHAR_RE = re.compile(Patterns.XML_INVALID_CHAR)


@dataclass(frozen=True, slots=True)
class QName:
    local_name: str
    namespace: str | None = None


@dataclass(frozen=True, slots=True)
class Attribute:
    """An unqualified attribute."""

    name: str
    value: str


def _no_namespaces() -> dict[str | None, str]:
    return {}


@dataclass(frozen=True, slots=True)
class StartDocument:
    version: str = Defaults.XML_VERSION
    encoding: str | None = None
    standalone: bool | None = None


@dataclass(frozen=True, slots=True)
class StartElement:
    """Opens an element.

    ``namespaces`` maps prefixes (``None`` for the default namespace) to the
    URIs declared on this element; they stay in scope until it is closed.
    """

    name: QName
    attributes: tuple[Attribute, ...] = ()
    namespaces: Mapping[str | None, str] = field(default_factory=_no_namespaces)


@dataclass(frozen=True, slots=True)
class EndElement:
    pass


XmlEvent: TypeAlias = StartDocument | StartElement | EndElement


@dataclass(slots=True)
class _OpenElement:
    name: tuple[str | None, str]
    qname: str
    prefixes: tuple[str | None, ...]
    has_children: bool = False


class EventWriter:
    """Writes XML events into a text or binary sink."""

    def __init__(self, sink: IO[Any], config: WriterConfig | None = None) -> None:
        super().__init__()
        self.config = config or WriterConfig()
        self._sink = sink
        self._generator = XMLGenerator(
            sink, encoding=self.config.encoding, short_empty_elements=True
        )
        self._stack: list[_OpenElement] = []
        self._scopes: list[dict[str | None, str]] = [{}]
        self._document_started = False
        self._root_closed = False

    @property
    def depth(self) -> int:
        return len(self._stack)

    def write(self, event: XmlEvent) -> None:
        try:
            if isinstance(event, StartDocument):
                self._start_document(event)
            elif isinstance(event, StartElement):
                self._start_element(event)
            elif isinstance(event, EndElement):
                self._end_element()
            else:
                raise XmlWriteError(f"unsupported event {event!r}")
        except (OSError, ValueError) as exc:
            raise XmlWriteError(exc) from exc

    def into_inner(self) -> IO[Any]:
        """Finish the document and return the sink it was written to."""
        if self._stack:
            raise XmlWriteError(f"unclosed element <{self._stack[-1].qname}>")
        try:
            self._generator.endDocument()
        except (OSError, ValueError) as exc:
            raise XmlWriteError(exc) from exc
        return self._sink

    def _start_document(self, event: StartDocument) -> None:
        if self._document_started or self._stack or self._root_closed:
            raise XmlWriteError("document declaration must come first")
        encoding = event.encoding or self.config.encoding
        declaration = f'version="{event.version}" encoding="{encoding}"'
        if event.standalone is not None:
            declaration += f' standalone="{"yes" if event.standalone else "no"}"'
        self._generator.processingInstruction("xml", declaration)
        self._document_started = True

    def _start_element(self, event: StartElement) -> None:
        if self._root_closed:
            raise XmlWriteError(
                f"element <{event.name.local_name}> follows the closed root element"
            )
        scope = dict(self._scopes[-1])
        scope.update(event.namespaces)
        qname = self._qualify(event.name, scope)
        names = [attribute.name for attribute in event.attributes]
        if len(set(names)) != len(names):
            raise XmlWriteError(f"duplicate attribute on <{qname}>: {names}")
        for attribute in event.attributes:
            if match := _INVALID_CHAR_RE.search(attribute.value):
                raise XmlWriteError(
                    f"attribute {attribute.name!r} on <{qname}> contains "
                    f"character {match.group()!r} that XML 1.0 does not allow"
                )

        self._indent(self.depth, before_root=not self._stack)
        for prefix, uri in event.namespaces.items():
            self._generator.startPrefixMapping(prefix, uri)
        values = {(None, a.name): a.value for a in event.attributes}
        qnames = {(None, a.name): a.name for a in event.attributes}
        name = (event.name.namespace, event.name.local_name)
        self._generator.startElementNS(name, qname, AttributesNSImpl(values, qnames))

        if self._stack:
            self._stack[-1].has_children = True
        self._stack.append(
            _OpenElement(name=name, qname=qname, prefixes=tuple(event.namespaces))
        )
        self._scopes.append(scope)

    def _end_element(self) -> None:
        if not self._stack:
            raise XmlWriteError("end element without a matching start element")
        element = self._stack.pop()
        self._scopes.pop()
        if element.has_children:
            self._indent(self.depth)
        self._generator.endElementNS(element.name, element.qname)
        for prefix in reversed(element.prefixes):
            self._generator.endPrefixMapping(prefix)
        if not self._stack:
            self._root_closed = True

    def _qualify(self, name: QName, scope: Mapping[str | None, str]) -> str:
        if name.namespace is None:
            if None in scope:
                raise XmlWriteError(
                    f"<{name.local_name}> has no namespace but a default namespace is in scope"
                )
            return name.local_name
        if scope.get(None) == name.namespace:
            return name.local_name
        for prefix, uri in scope.items():
            if prefix is not None and uri == name.namespace:
                return f"{prefix}:{name.local_name}"
        raise XmlWriteError(
            f"namespace {name.namespace!r} of <{name.local_name}> is not declared"
        )

    def _indent(self, depth: int, *, before_root: bool = False) -> None:
        if not self.config.perform_indent:
            return
        if before_root and not self._document_started:
            return
        self._generator.ignorableWhitespace(
            self.config.line_separator + self.config.indent_string * depth
        )
