"""Consumer for ``<trkseg>``."""

from enum import Enum

from gpx_stream_reader.types import TrackSegment

from . import extensions, waypoint
from .context import ParseContext, verify_starting_tag
from .element import ChildTable, append, consume_children


class TrackSegmentChild(Enum):
    POINT = "trkpt"
    EXTENSIONS = "extensions"


CHILDREN: ChildTable[TrackSegment] = ChildTable(TrackSegmentChild, {
    TrackSegmentChild.POINT: append("points", lambda c: waypoint.consume(c, "trkpt")),
    TrackSegmentChild.EXTENSIONS: extensions.skip_extensions,
})


def consume(context: ParseContext) -> TrackSegment:
    """Consume a track segment; an empty segment is valid."""
    verify_starting_tag(context, "trkseg")
    return consume_children(context, "trkseg", TrackSegment(), CHILDREN)
