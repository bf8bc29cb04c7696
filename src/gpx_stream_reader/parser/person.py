"""Consumer for person elements such as ``<author>``."""

from enum import Enum

from gpx_stream_reader.types import Person

from . import email, link, text
from .context import ParseContext, verify_starting_tag
from .element import ChildTable, assign, consume_children


class PersonChild(Enum):
    NAME = "name"
    EMAIL = "email"
    LINK = "link"


CHILDREN: ChildTable[Person] = ChildTable(PersonChild, {
    PersonChild.NAME: assign("name", lambda c: text.consume(c, "name", allow_empty=True)),
    PersonChild.EMAIL: assign("email", email.consume),
    PersonChild.LINK: assign("link", link.consume),
})


def consume(context: ParseContext, tagname: str = "author") -> Person:
    verify_starting_tag(context, tagname)
    return consume_children(context, tagname, Person(), CHILDREN)
