"""Consumer for ISO 8601 timestamps."""

from datetime import datetime, timezone

from dateutil.parser import isoparse

from gpx_stream_reader.shared import InvalidTextContent

from . import text
from .context import ParseContext


def consume(context: ParseContext, tagname: str = "time") -> datetime:
    """Consume a timestamp element.

    Values without an offset are taken to be UTC, as GPX requires.

    Raises:
        InvalidTextContent: If the content is not an ISO 8601 timestamp
    """
    raw = text.consume(context, tagname, allow_empty=False)
    try:
        value = isoparse(raw.strip())
    except (ValueError, OverflowError) as e:
        raise InvalidTextContent(tagname, raw, str(e)) from e

    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value
