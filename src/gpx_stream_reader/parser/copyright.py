"""Consumer for ``<copyright>``."""

from enum import Enum

from gpx_stream_reader.types import Copyright

from . import number, text
from .context import ParseContext, verify_starting_tag
from .element import ChildTable, assign, consume_children


class CopyrightChild(Enum):
    YEAR = "year"
    LICENSE = "license"


CHILDREN: ChildTable[Copyright] = ChildTable(CopyrightChild, {
    # An unparsable year leaves the field absent; an empty one is an error.
    CopyrightChild.YEAR: assign(
        "year", lambda c: number.consume_int(c, "year", allow_empty=False)
    ),
    CopyrightChild.LICENSE: assign("license", lambda c: text.consume(c, "license")),
})


def consume(context: ParseContext) -> Copyright:
    """Consume a copyright block.

    When it returns, the stream is positioned after ``</copyright>``.
    """
    attributes = verify_starting_tag(context, "copyright")
    copyright = Copyright(author=attributes.get("author"))
    return consume_children(context, "copyright", copyright, CHILDREN)
