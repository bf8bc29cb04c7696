"""Consumer for ``<metadata>``."""

from enum import Enum

from gpx_stream_reader.types import Metadata

from . import bounds, copyright, extensions, link, person, text, timestamp
from .context import ParseContext, verify_starting_tag
from .element import ChildTable, append, assign, consume_children


class MetadataChild(Enum):
    NAME = "name"
    DESCRIPTION = "desc"
    AUTHOR = "author"
    COPYRIGHT = "copyright"
    LINK = "link"
    TIME = "time"
    KEYWORDS = "keywords"
    BOUNDS = "bounds"
    EXTENSIONS = "extensions"


CHILDREN: ChildTable[Metadata] = ChildTable(MetadataChild, {
    MetadataChild.NAME: assign("name", lambda c: text.consume(c, "name", allow_empty=True)),
    MetadataChild.DESCRIPTION: assign(
        "description", lambda c: text.consume(c, "desc", allow_empty=True)
    ),
    MetadataChild.AUTHOR: assign("author", lambda c: person.consume(c, "author")),
    MetadataChild.COPYRIGHT: assign("copyright", copyright.consume),
    MetadataChild.LINK: append("links", link.consume),
    MetadataChild.TIME: assign("time", timestamp.consume),
    MetadataChild.KEYWORDS: assign(
        "keywords", lambda c: text.consume(c, "keywords", allow_empty=True)
    ),
    MetadataChild.BOUNDS: assign("bounds", bounds.consume),
    MetadataChild.EXTENSIONS: extensions.skip_extensions,
})


def consume(context: ParseContext) -> Metadata:
    verify_starting_tag(context, "metadata")
    return consume_children(context, "metadata", Metadata(), CHILDREN)
