"""Parse context and the opening-tag verification primitive.

The context is the single owner of the token stream for one read. Every
consumer receives it, advances it, and returns without keeping a reference.
"""

from typing import TYPE_CHECKING, BinaryIO, Dict, Generic, List, Optional, Type, TypeVar

from gpx_stream_reader.shared import (
    DiagnosticEntry,
    DiagnosticSeverity,
    EventParsingError,
    MissingOpeningTag,
    ReaderConfig,
    TagMismatch,
    XmlStreamError,
    get_logger,
)
from gpx_stream_reader.tokenization import EventKind, TokenStream, XmlEvent
from gpx_stream_reader.types import GpxVersion

if TYPE_CHECKING:
    from .extensions import WaypointExtensions

V = TypeVar("V")


class ParseContext(Generic[V]):
    """Token stream, format version and extension hook of one read.

    Attributes:
        stream: Event source; anything with ``peek()`` and ``next_event()``
        version: Format version, set once the root element has been read
        extensions: Hook class consuming waypoint ``<extensions>`` elements
        config: Reader configuration
        diagnostics: Values dropped during the read, in document order
        line: Source line of the element opened most recently, if known
    """

    def __init__(
        self,
        stream: TokenStream,
        extensions: "Type[WaypointExtensions[V]]",
        version: GpxVersion = GpxVersion.UNKNOWN,
        config: Optional[ReaderConfig] = None
    ) -> None:
        self.stream = stream
        self.extensions = extensions
        self.version = version
        self.config = config or ReaderConfig()
        self.logger = get_logger(__name__, self.config.correlation_id, "parser")
        self.diagnostics: List[DiagnosticEntry] = []
        self.line: Optional[int] = None

    def peek(self, element: str) -> Optional[XmlEvent]:
        """Look at the next event on behalf of ``element`` without consuming it.

        Raises:
            EventParsingError: If the tokenizer failed, tagged with ``element``
        """
        try:
            return self.stream.peek()
        except XmlStreamError as e:
            raise EventParsingError(element, str(e)) from e

    def next_event(self, element: str) -> Optional[XmlEvent]:
        """Consume the next event on behalf of ``element``.

        Raises:
            EventParsingError: If the tokenizer failed, tagged with ``element``
        """
        try:
            return self.stream.next_event()
        except XmlStreamError as e:
            raise EventParsingError(element, str(e)) from e

    def consume_waypoint_extensions(self) -> V:
        return self.extensions.consume(self)

    def report_degraded(
        self, element: str, text: str, reason: str, line: Optional[int] = None
    ) -> None:
        """Record an optional value that was dropped because it could not be converted."""
        if not self.config.report_degraded_values:
            return

        entry = DiagnosticEntry(
            severity=DiagnosticSeverity.WARNING,
            message=f"Dropped unparsable value {text!r} in <{element}>",
            element=element,
            line=line,
            details={"text": text, "reason": reason},
            correlation_id=self.config.correlation_id,
        )
        self.diagnostics.append(entry)
        self.logger.warning(
            entry.message, extra={"element": element, "line": line, "reason": reason}
        )


def verify_starting_tag(context: ParseContext, local_name: str) -> Dict[str, str]:
    """Make sure the next structural event opens ``local_name``.

    Comments and processing instructions before the tag are skipped. On
    success the stream is left just after the opening tag.

    Args:
        context: Parse context to advance
        local_name: Expected element name

    Returns:
        Attributes of the opening tag, keyed by local name

    Raises:
        TagMismatch: If another element, a closing tag or text comes first
        MissingOpeningTag: If the stream ends first
    """
    while True:
        event = context.next_event(local_name)
        if event is None:
            raise MissingOpeningTag(local_name)
        if not event.is_structural:
            continue
        if event.kind is EventKind.START_ELEMENT:
            if event.name != local_name:
                raise TagMismatch(event.name, local_name)
            context.line = event.line
            return dict(event.attributes)
        if event.kind is EventKind.END_ELEMENT:
            raise TagMismatch(event.name, local_name)
        raise TagMismatch(event.text, local_name)


def create_context(
    source: BinaryIO,
    extensions: "Type[WaypointExtensions[V]]",
    version: GpxVersion = GpxVersion.UNKNOWN,
    config: Optional[ReaderConfig] = None
) -> ParseContext[V]:
    """Build a context reading from a binary source."""
    config = config or ReaderConfig()
    return ParseContext(TokenStream(source, config), extensions, version, config)
