"""Consumer for elements whose content is a single string."""

from gpx_stream_reader.shared import (
    InvalidChildElement,
    InvalidClosingTag,
    MissingClosingTag,
    NoStringContent,
)
from gpx_stream_reader.tokenization import EventKind

from .context import ParseContext, verify_starting_tag


def consume(context: ParseContext, tagname: str, allow_empty: bool = False) -> str:
    """Consume ``<tagname>text</tagname>`` and return the text.

    When the content arrives as several text events (text split by a
    comment, for instance) the last one wins; earlier runs are discarded.

    Args:
        context: Parse context positioned before the element
        tagname: Name of the element to read
        allow_empty: Accept an element without content, returning ""

    Raises:
        InvalidChildElement: If the element contains markup
        InvalidClosingTag: If the element is closed by another name
        NoStringContent: If the content is empty and ``allow_empty`` is False
        MissingClosingTag: If the stream ends inside the element
    """
    verify_starting_tag(context, tagname)
    string = ""

    while True:
        event = context.next_event(tagname)
        if event is None:
            break
        if event.kind is EventKind.START_ELEMENT:
            raise InvalidChildElement(event.name, tagname)
        if event.kind is EventKind.CHARACTERS:
            string = event.text
        elif event.kind is EventKind.END_ELEMENT:
            if event.name != tagname:
                raise InvalidClosingTag(event.name, tagname)
            if allow_empty or string:
                return string
            raise NoStringContent(tagname)

    raise MissingClosingTag(tagname)
