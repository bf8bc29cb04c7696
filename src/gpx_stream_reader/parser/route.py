"""Consumer for ``<rte>``.

A route shares a track's descriptive fields but holds its points directly,
without segments.
"""

from enum import Enum

from gpx_stream_reader.types import Route

from . import extensions, link, number, text, waypoint
from .context import ParseContext, verify_starting_tag
from .element import ChildTable, append, assign, consume_children


class RouteChild(Enum):
    NAME = "name"
    COMMENT = "cmt"
    DESCRIPTION = "desc"
    SOURCE = "src"
    LINK = "link"
    NUMBER = "number"
    TYPE = "type"
    EXTENSIONS = "extensions"
    POINT = "rtept"


CHILDREN: ChildTable[Route] = ChildTable(RouteChild, {
    RouteChild.NAME: assign("name", lambda c: text.consume(c, "name", allow_empty=True)),
    RouteChild.COMMENT: assign("comment", lambda c: text.consume(c, "cmt", allow_empty=True)),
    RouteChild.DESCRIPTION: assign(
        "description", lambda c: text.consume(c, "desc", allow_empty=True)
    ),
    RouteChild.SOURCE: assign("source", lambda c: text.consume(c, "src", allow_empty=True)),
    RouteChild.LINK: append("links", link.consume),
    RouteChild.NUMBER: assign("number", lambda c: number.consume_non_negative_int(c, "number")),
    RouteChild.TYPE: assign("type", lambda c: text.consume(c, "type", allow_empty=True)),
    RouteChild.EXTENSIONS: extensions.skip_extensions,
    RouteChild.POINT: append("points", lambda c: waypoint.consume(c, "rtept")),
})


def consume(context: ParseContext) -> Route:
    verify_starting_tag(context, "rte")
    return consume_children(context, "rte", Route(), CHILDREN)
