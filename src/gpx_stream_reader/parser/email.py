"""Consumer for ``<email id="..." domain="..."/>``."""

from gpx_stream_reader.shared import InvalidElementLacksAttribute

from .context import ParseContext, verify_starting_tag
from .element import consume_until_closed


def consume(context: ParseContext) -> str:
    """Consume an email element and return the joined address.

    Raises:
        InvalidElementLacksAttribute: If ``id`` or ``domain`` is missing
    """
    attributes = verify_starting_tag(context, "email")
    for name in ("id", "domain"):
        if name not in attributes:
            raise InvalidElementLacksAttribute(name, "email")
    consume_until_closed(context, "email")
    return f"{attributes['id']}@{attributes['domain']}"
