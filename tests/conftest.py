"""Shared fixtures for GPX stream reader tests."""

import io
from pathlib import Path
from typing import Iterable, List, Optional

import pytest

from gpx_stream_reader.parser import EmptyExtensions, ParseContext, create_context
from gpx_stream_reader.shared import ReaderConfig
from gpx_stream_reader.tokenization import XmlEvent
from gpx_stream_reader.types import GpxVersion

FIXTURES = Path(__file__).parent / "fixtures"


class EventListStream:
    """Token stream replaying a fixed list of events.

    Lets tests produce event sequences a well-formedness checking tokenizer
    would never deliver, such as a mismatched closing tag.
    """

    def __init__(self, events: Iterable[XmlEvent]) -> None:
        self._events: List[XmlEvent] = list(events)

    def peek(self) -> Optional[XmlEvent]:
        return self._events[0] if self._events else None

    def next_event(self) -> Optional[XmlEvent]:
        return self._events.pop(0) if self._events else None


def make_context(
    xml: str,
    version: GpxVersion = GpxVersion.GPX11,
    extensions=EmptyExtensions,
    config: Optional[ReaderConfig] = None
) -> ParseContext:
    return create_context(io.BytesIO(xml.encode("utf-8")), extensions, version, config)


@pytest.fixture
def context_for():
    """Factory building a parse context over an XML string."""
    return make_context


@pytest.fixture
def event_context():
    """Factory building a parse context over a list of events."""
    def factory(*events: XmlEvent, extensions=EmptyExtensions) -> ParseContext:
        return ParseContext(EventListStream(events), extensions, GpxVersion.GPX11)
    return factory


@pytest.fixture
def fixture_path():
    return lambda name: FIXTURES / name
