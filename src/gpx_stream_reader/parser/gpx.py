"""Consumer for the document root, ``<gpx>``."""

from enum import Enum

from gpx_stream_reader.shared import UnknownVersionError
from gpx_stream_reader.types import Gpx, GpxVersion

from . import extensions, metadata, route, track, waypoint
from .context import ParseContext, verify_starting_tag
from .element import ChildTable, append, assign, consume_children


class GpxChild(Enum):
    METADATA = "metadata"
    WAYPOINT = "wpt"
    ROUTE = "rte"
    TRACK = "trk"
    EXTENSIONS = "extensions"


CHILDREN: ChildTable[Gpx] = ChildTable(GpxChild, {
    GpxChild.METADATA: assign("metadata", metadata.consume),
    GpxChild.WAYPOINT: append("waypoints", lambda c: waypoint.consume(c, "wpt")),
    GpxChild.ROUTE: append("routes", route.consume),
    GpxChild.TRACK: append("tracks", track.consume),
    GpxChild.EXTENSIONS: extensions.skip_extensions,
})


def _version(context: ParseContext, value: str) -> GpxVersion:
    version = GpxVersion.from_attribute(value)
    if version is not None:
        return version
    if context.config.strict_version:
        raise UnknownVersionError(value)
    context.logger.warning(
        "Unknown GPX version, reading as unknown", extra={"version": value}
    )
    return GpxVersion.UNKNOWN


def consume(context: ParseContext) -> Gpx:
    """Consume a whole document.

    The ``version`` attribute is required by the schema but missing from
    many files in the wild; without it the version stays UNKNOWN. Once
    read, the version is stored on the context for the rest of the parse.

    Raises:
        UnknownVersionError: For an unrecognised version in strict mode
    """
    attributes = verify_starting_tag(context, "gpx")
    document: Gpx = Gpx(creator=attributes.get("creator"))

    if "version" in attributes:
        document.version = _version(context, attributes["version"])
        context.version = document.version

    consume_children(context, "gpx", document, CHILDREN)
    document.diagnostics = list(context.diagnostics)
    return document
