"""Consumer for the GPS fix type of a waypoint."""

from gpx_stream_reader.types import Fix

from . import text
from .context import ParseContext


def consume(context: ParseContext) -> Fix:
    return Fix.from_text(text.consume(context, "fix", allow_empty=False))
