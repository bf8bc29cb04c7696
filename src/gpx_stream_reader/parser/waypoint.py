"""Consumer for waypoints: ``<wpt>``, ``<trkpt>`` and ``<rtept>``.

All three share one content model. Coordinates are mandatory attributes of
the opening tag; the ``<extensions>`` child is handed to the extension hook
active for the read.
"""

from enum import Enum

from gpx_stream_reader.types import Waypoint

from . import fix, link, number, text, timestamp
from .bounds import required_float
from .context import ParseContext, verify_starting_tag
from .element import ChildTable, append, assign, consume_children


class WaypointChild(Enum):
    ELEVATION = "ele"
    TIME = "time"
    MAGNETIC_VARIATION = "magvar"
    GEOID_HEIGHT = "geoidheight"
    NAME = "name"
    COMMENT = "cmt"
    DESCRIPTION = "desc"
    SOURCE = "src"
    LINK = "link"
    SYMBOL = "sym"
    TYPE = "type"
    FIX = "fix"
    SAT = "sat"
    HDOP = "hdop"
    VDOP = "vdop"
    PDOP = "pdop"
    DGPS_AGE = "ageofdgpsdata"
    DGPS_ID = "dgpsid"
    EXTENSIONS = "extensions"


def _string(tagname: str):
    return lambda context: text.consume(context, tagname, allow_empty=True)


def _float(tagname: str):
    return lambda context: number.consume_float(context, tagname)


def _extensions(context: ParseContext, waypoint: Waypoint) -> None:
    waypoint.extensions = context.consume_waypoint_extensions()


CHILDREN: ChildTable[Waypoint] = ChildTable(WaypointChild, {
    WaypointChild.ELEVATION: assign("elevation", _float("ele")),
    WaypointChild.TIME: assign("time", timestamp.consume),
    WaypointChild.MAGNETIC_VARIATION: assign("magnetic_variation", _float("magvar")),
    WaypointChild.GEOID_HEIGHT: assign("geoid_height", _float("geoidheight")),
    WaypointChild.NAME: assign("name", _string("name")),
    WaypointChild.COMMENT: assign("comment", _string("cmt")),
    WaypointChild.DESCRIPTION: assign("description", _string("desc")),
    WaypointChild.SOURCE: assign("source", _string("src")),
    WaypointChild.LINK: append("links", link.consume),
    WaypointChild.SYMBOL: assign("symbol", _string("sym")),
    WaypointChild.TYPE: assign("type", _string("type")),
    WaypointChild.FIX: assign("fix", fix.consume),
    WaypointChild.SAT: assign("sat", lambda c: number.consume_non_negative_int(c, "sat")),
    WaypointChild.HDOP: assign("hdop", _float("hdop")),
    WaypointChild.VDOP: assign("vdop", _float("vdop")),
    WaypointChild.PDOP: assign("pdop", _float("pdop")),
    WaypointChild.DGPS_AGE: assign("dgps_age", _float("ageofdgpsdata")),
    WaypointChild.DGPS_ID: assign(
        "dgpsid", lambda c: number.consume_non_negative_int(c, "dgpsid")
    ),
    WaypointChild.EXTENSIONS: _extensions,
})


def consume(context: ParseContext, tagname: str) -> Waypoint:
    """Consume one waypoint element named ``tagname``.

    Raises:
        InvalidElementLacksAttribute: If ``lat`` or ``lon`` is missing
        InvalidAttributeValue: If either coordinate is not a number
    """
    attributes = verify_starting_tag(context, tagname)
    waypoint: Waypoint = Waypoint(
        latitude=required_float(attributes, "lat", tagname),
        longitude=required_float(attributes, "lon", tagname),
    )
    return consume_children(context, tagname, waypoint, CHILDREN)
