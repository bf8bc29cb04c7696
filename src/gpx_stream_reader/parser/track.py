"""Consumer for ``<trk>``."""

from enum import Enum

from gpx_stream_reader.types import Track

from . import extensions, link, number, text, tracksegment
from .context import ParseContext, verify_starting_tag
from .element import ChildTable, append, assign, consume_children


class TrackChild(Enum):
    NAME = "name"
    COMMENT = "cmt"
    DESCRIPTION = "desc"
    SOURCE = "src"
    LINK = "link"
    NUMBER = "number"
    TYPE = "type"
    EXTENSIONS = "extensions"
    SEGMENT = "trkseg"


CHILDREN: ChildTable[Track] = ChildTable(TrackChild, {
    TrackChild.NAME: assign("name", lambda c: text.consume(c, "name", allow_empty=True)),
    TrackChild.COMMENT: assign("comment", lambda c: text.consume(c, "cmt", allow_empty=True)),
    TrackChild.DESCRIPTION: assign(
        "description", lambda c: text.consume(c, "desc", allow_empty=True)
    ),
    TrackChild.SOURCE: assign("source", lambda c: text.consume(c, "src", allow_empty=True)),
    TrackChild.LINK: append("links", link.consume),
    TrackChild.NUMBER: assign("number", lambda c: number.consume_non_negative_int(c, "number")),
    TrackChild.TYPE: assign("type", lambda c: text.consume(c, "type", allow_empty=True)),
    TrackChild.EXTENSIONS: extensions.skip_extensions,
    TrackChild.SEGMENT: append("segments", tracksegment.consume),
})


def consume(context: ParseContext) -> Track:
    verify_starting_tag(context, "trk")
    return consume_children(context, "trk", Track(), CHILDREN)
