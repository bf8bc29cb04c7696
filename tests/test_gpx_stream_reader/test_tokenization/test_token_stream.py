"""Tests for the lxml-backed token stream."""

import io

import pytest

from gpx_stream_reader.shared import ReaderConfig, XmlStreamError
from gpx_stream_reader.tokenization import EventKind, TokenStream, XmlEvent

START = EventKind.START_ELEMENT
END = EventKind.END_ELEMENT
CHARS = EventKind.CHARACTERS
COMMENT = EventKind.COMMENT
PI = EventKind.PROCESSING_INSTRUCTION


def stream_of(data: bytes, chunk_size: int = 64 * 1024) -> TokenStream:
    return TokenStream(io.BytesIO(data), ReaderConfig(chunk_size=chunk_size))


def summary(stream: TokenStream):
    return [
        (event.kind, event.text if event.kind in (CHARS, COMMENT) else event.name)
        for event in stream
    ]


class TestEventSequence:
    """Test the order and content of produced events."""

    def test_elements_and_text(self):
        """Test text before and after a child arrives as separate events."""
        events = summary(stream_of(b'<a x="1">hi<b/>there</a>'))
        assert events == [
            (START, "a"),
            (CHARS, "hi"),
            (START, "b"),
            (END, "b"),
            (CHARS, "there"),
            (END, "a"),
        ]

    def test_comments_and_processing_instructions(self):
        """Test non-structural events keep their position between text runs."""
        events = summary(stream_of(b"<a>one<!--c-->two<?target data?></a>"))
        assert events == [
            (START, "a"),
            (CHARS, "one"),
            (COMMENT, "c"),
            (CHARS, "two"),
            (PI, "target"),
            (END, "a"),
        ]

    def test_cdata_is_text(self):
        """Test CDATA sections are delivered as character data."""
        events = summary(stream_of(b"<a><![CDATA[<not markup>]]></a>"))
        assert events == [(START, "a"), (CHARS, "<not markup>"), (END, "a")]

    def test_whitespace_is_kept(self):
        """Test whitespace-only text is delivered."""
        events = summary(stream_of(b"<a>\n  <b/>\n</a>"))
        assert events == [
            (START, "a"),
            (CHARS, "\n  "),
            (START, "b"),
            (END, "b"),
            (CHARS, "\n"),
            (END, "a"),
        ]

    def test_text_outside_root_is_dropped(self):
        """Test trailing whitespace after the root produces no event."""
        events = summary(stream_of(b"<a/>\n\n"))
        assert events == [(START, "a"), (END, "a")]

    def test_processing_instruction_text(self):
        """Test processing instruction events carry target and data."""
        stream = stream_of(b"<a><?target some data?></a>")
        events = [event for event in stream if event.kind is PI]
        assert events == [XmlEvent.processing_instruction("target", "some data")]

    def test_chunk_size_does_not_change_events(self, fixture_path):
        """Test feeding one byte at a time yields the same events."""
        data = fixture_path("strava_route_example.gpx").read_bytes()
        assert list(stream_of(data, chunk_size=1)) == list(stream_of(data))


class TestNames:
    """Test element names, namespaces, attributes and lines."""

    def test_namespaces_are_separated(self):
        """Test local names with the namespace URI kept on the event."""
        data = (
            b'<gpx xmlns="http://www.topografix.com/GPX/1/1" xmlns:x="urn:x">'
            b'<x:ext x:attr="v" plain="p"/></gpx>'
        )
        gpx, ext, ext_end, gpx_end = list(stream_of(data))

        assert gpx.name == "gpx"
        assert gpx.namespace == "http://www.topografix.com/GPX/1/1"
        assert ext.name == "ext"
        assert ext.namespace == "urn:x"
        assert ext.attributes == {"attr": "v", "plain": "p"}
        assert ext_end.is_end("ext")
        assert gpx_end.is_end("gpx")

    def test_no_namespace(self):
        """Test elements without a namespace report None."""
        event = stream_of(b"<gpx/>").peek()
        assert event.namespace is None

    def test_source_lines(self):
        """Test start events carry the line they appear on."""
        events = list(stream_of(b"<a>\n<b/>\n</a>"))
        starts = [event for event in events if event.is_start()]
        assert [event.line for event in starts] == [1, 2]


class TestLookahead:
    """Test peek, next_event and exhaustion."""

    def test_peek_does_not_consume(self):
        """Test repeated peeks return the same event."""
        stream = stream_of(b"<a/>")
        first = stream.peek()
        assert stream.peek() is first
        assert stream.next_event() is first
        assert stream.next_event().is_end("a")

    def test_exhaustion(self):
        """Test the end of input is reported as None."""
        stream = stream_of(b"<a/>")
        list(stream)
        assert stream.peek() is None
        assert stream.next_event() is None

    def test_bytes_read(self):
        """Test the counter covers the whole source once consumed."""
        data = b"<a><b>text</b></a>"
        stream = stream_of(data, chunk_size=4)
        list(stream)
        assert stream.bytes_read == len(data)

    def test_reads_lazily(self):
        """Test only the first chunk is read to produce the first event."""
        data = b"<a>" + b"<b/>" * 10000 + b"</a>"
        stream = stream_of(data, chunk_size=8)
        assert stream.peek().is_start("a")
        assert stream.bytes_read < len(data)


class TestErrors:
    """Test tokenizer failures."""

    def test_mismatched_closing_tag(self):
        """Test ill-formed input raises XmlStreamError."""
        with pytest.raises(XmlStreamError) as exc_info:
            list(stream_of(b"<a><b></a>"))
        assert exc_info.value.line == 1

    def test_invalid_encoding(self, fixture_path):
        """Test bytes that are not valid in the declared encoding."""
        data = fixture_path("badcharacter.xml").read_bytes()
        with pytest.raises(XmlStreamError):
            list(stream_of(data))

    def test_error_is_repeated(self):
        """Test a failed stream keeps raising the same error."""
        stream = stream_of(b"<a><b></a>")
        with pytest.raises(XmlStreamError) as first:
            list(stream)
        with pytest.raises(XmlStreamError) as second:
            stream.peek()
        assert second.value is first.value
