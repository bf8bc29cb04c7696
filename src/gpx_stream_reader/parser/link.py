"""Consumer for ``<link>``."""

from enum import Enum

from gpx_stream_reader.shared import InvalidElementLacksAttribute
from gpx_stream_reader.types import Link

from . import text
from .context import ParseContext, verify_starting_tag
from .element import ChildTable, assign, consume_children


class LinkChild(Enum):
    TEXT = "text"
    TYPE = "type"


CHILDREN: ChildTable[Link] = ChildTable(LinkChild, {
    LinkChild.TEXT: assign("text", lambda c: text.consume(c, "text", allow_empty=True)),
    LinkChild.TYPE: assign("type", lambda c: text.consume(c, "type", allow_empty=True)),
})


def consume(context: ParseContext) -> Link:
    """Consume a link; the ``href`` attribute is mandatory.

    Raises:
        InvalidElementLacksAttribute: If ``href`` is missing
    """
    attributes = verify_starting_tag(context, "link")
    if "href" not in attributes:
        raise InvalidElementLacksAttribute("href", "link")
    return consume_children(context, "link", Link(href=attributes["href"]), CHILDREN)
