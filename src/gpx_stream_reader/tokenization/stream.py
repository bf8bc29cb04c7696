"""Forward-only token stream over an XML byte source.

This module wraps ``lxml.etree.XMLPullParser`` and turns its element events
into the flat sequence of ``XmlEvent`` values the parsing layer consumes,
with one event of lookahead.

The pull parser reports elements, not text. Character data is recovered from
the tree lxml builds as it goes: the text preceding any event lives either in
the ``text`` of the element most recently opened or in the ``tail`` of the
node most recently closed, and it is complete by the time the next event has
been reported. Text is therefore emitted lazily, just before the event that
terminates it.
"""

from collections import deque
from typing import Any, BinaryIO, Deque, Iterator, Optional

from lxml import etree

from gpx_stream_reader.shared import ReaderConfig, XmlStreamError, get_logger

from .events import XmlEvent

PULL_EVENTS = ("start", "end", "comment", "pi")


def _local_name(tag: str) -> str:
    return etree.QName(tag).localname


def _namespace(tag: str) -> Optional[str]:
    return etree.QName(tag).namespace


class TokenStream:
    """Lazily tokenizes a binary source into ``XmlEvent`` values.

    Reading blocks only on ``source.read``. Events parsed before a
    tokenizer failure are delivered first; the failure is raised as
    ``XmlStreamError`` once they have been consumed.
    """

    def __init__(
        self,
        source: BinaryIO,
        config: Optional[ReaderConfig] = None
    ) -> None:
        """Initialize the stream.

        Args:
            source: Binary file-like object providing the document bytes
            config: Reader configuration (chunk size and lxml limits)
        """
        self.config = config or ReaderConfig()
        self.logger = get_logger(__name__, self.config.correlation_id, "token_stream")

        self._source = source
        self._parser = etree.XMLPullParser(
            events=PULL_EVENTS,
            huge_tree=self.config.huge_tree,
            remove_comments=False,
            remove_pis=False,
        )
        self._pending: Deque[XmlEvent] = deque()
        self._error: Optional[XmlStreamError] = None
        self._exhausted = False

        # Node whose text/tail precedes the next reported event
        self._last_node: Any = None
        self._last_action: Optional[str] = None
        self._depth = 0
        self.bytes_read = 0

    def __iter__(self) -> Iterator[XmlEvent]:
        return self

    def __next__(self) -> XmlEvent:
        event = self.next_event()
        if event is None:
            raise StopIteration
        return event

    def peek(self) -> Optional[XmlEvent]:
        """Return the next event without consuming it, or None at the end.

        Raises:
            XmlStreamError: If the tokenizer rejected the input at this point
        """
        self._fill()
        if self._pending:
            return self._pending[0]
        if self._error is not None:
            raise self._error
        return None

    def next_event(self) -> Optional[XmlEvent]:
        """Consume and return the next event, or None at the end.

        Raises:
            XmlStreamError: If the tokenizer rejected the input at this point
        """
        event = self.peek()
        if event is not None:
            self._pending.popleft()
        return event

    def _fill(self) -> None:
        while not self._pending and not self._exhausted:
            chunk = self._source.read(self.config.chunk_size)
            try:
                if chunk:
                    self.bytes_read += len(chunk)
                    self._parser.feed(chunk)
                else:
                    self._exhausted = True
                    self._parser.close()
            except etree.XMLSyntaxError as e:
                self._fail(e)
            try:
                self._drain()
            except etree.XMLSyntaxError as e:
                self._fail(e)

    def _fail(self, error: etree.XMLSyntaxError) -> None:
        self._exhausted = True
        line, column = getattr(error, "position", (None, None))
        self._error = XmlStreamError(str(error), line=line, column=column)
        self.logger.debug(
            "Tokenizer rejected input",
            extra={"line": line, "column": column, "bytes_read": self.bytes_read},
        )

    def _drain(self) -> None:
        for action, node in self._parser.read_events():
            self._emit_preceding_text()

            if action == "start":
                attributes = {
                    _local_name(key): value for key, value in node.attrib.items()
                }
                self._pending.append(
                    XmlEvent.start_element(
                        _local_name(node.tag), attributes, node.sourceline,
                        _namespace(node.tag),
                    )
                )
                self._depth += 1
            elif action == "end":
                self._pending.append(
                    XmlEvent.end_element(
                        _local_name(node.tag), node.sourceline, _namespace(node.tag)
                    )
                )
                self._depth -= 1
                self._release(node)
            elif action == "comment":
                self._pending.append(XmlEvent.comment(node.text))
            else:
                self._pending.append(
                    XmlEvent.processing_instruction(node.target, node.text)
                )

            self._last_node = node
            self._last_action = action

    def _emit_preceding_text(self) -> None:
        if self._last_node is None or self._depth == 0:
            return
        if self._last_action == "start":
            text = self._last_node.text
        else:
            text = self._last_node.tail
        if text:
            self._pending.append(XmlEvent.characters(text))

    @staticmethod
    def _release(node: Any) -> None:
        # Keep the tail: it is read when the next event arrives.
        node.clear(keep_tail=True)
        parent = node.getparent()
        if parent is not None:
            while node.getprevious() is not None:
                del parent[0]
