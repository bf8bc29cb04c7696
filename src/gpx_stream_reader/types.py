"""Typed in-memory model of a GPX document.

Every value here is produced by the parser and owned by its enclosing
entity. Entities that (transitively) contain waypoints are generic over the
value type produced by the active waypoint extension hook, so ``Gpx[None]``
is a document read without extensions.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Generic, List, Optional, Sequence, Tuple, TypeVar

from shapely.geometry import LineString, MultiLineString, Point

from .shared.result import DiagnosticEntry

V = TypeVar("V")


class GpxVersion(Enum):
    """GPX schema versions."""

    UNKNOWN = "unknown"
    GPX10 = "1.0"
    GPX11 = "1.1"

    @classmethod
    def from_attribute(cls, value: str) -> Optional["GpxVersion"]:
        """Map a root ``version`` attribute to a known version, or None."""
        for version in (cls.GPX10, cls.GPX11):
            if version.value == value:
                return version
        return None


class FixKind(Enum):
    """Closed set of GPS fix types, plus an escape for anything else."""

    NONE = auto()
    TWO_DIMENSIONAL = auto()
    THREE_DIMENSIONAL = auto()
    DGPS = auto()
    OTHER = auto()


_FIX_KINDS = {
    "none": FixKind.NONE,
    "2d": FixKind.TWO_DIMENSIONAL,
    "3d": FixKind.THREE_DIMENSIONAL,
    "dgps": FixKind.DGPS,
}


@dataclass(frozen=True)
class Fix:
    """Type of GPS fix reported for a waypoint.

    Values outside the closed set are kept verbatim with kind ``OTHER``;
    devices routinely write vendor-specific fix names.
    """

    kind: FixKind
    value: str

    @classmethod
    def from_text(cls, text: str) -> "Fix":
        return cls(_FIX_KINDS.get(text, FixKind.OTHER), text)

    @property
    def is_other(self) -> bool:
        return self.kind is FixKind.OTHER


@dataclass
class Link:
    """Link to an external resource with optional text and MIME type."""

    href: str
    text: Optional[str] = None
    type: Optional[str] = None


@dataclass
class Person:
    name: Optional[str] = None
    email: Optional[str] = None
    link: Optional[Link] = None


@dataclass
class Copyright:
    """Copyright holder, year and license of a document."""

    author: Optional[str] = None
    year: Optional[int] = None
    license: Optional[str] = None


@dataclass
class Bounds:
    """Two lat/lon pairs defining the extent of an element."""

    min_lat: float
    min_lon: float
    max_lat: float
    max_lon: float


@dataclass
class Metadata:
    """Information about the document as a whole."""

    name: Optional[str] = None
    description: Optional[str] = None
    author: Optional[Person] = None
    copyright: Optional[Copyright] = None
    links: List[Link] = field(default_factory=list)
    time: Optional[datetime] = None
    keywords: Optional[str] = None
    bounds: Optional[Bounds] = None


@dataclass
class Waypoint(Generic[V]):
    """A point of interest, a track point or a route point.

    Latitude and longitude are required; every other field is optional.
    ``extensions`` holds whatever the active extension hook produced for the
    point's ``<extensions>`` element.
    """

    latitude: float
    longitude: float
    elevation: Optional[float] = None
    time: Optional[datetime] = None
    magnetic_variation: Optional[float] = None
    geoid_height: Optional[float] = None
    name: Optional[str] = None
    comment: Optional[str] = None
    description: Optional[str] = None
    source: Optional[str] = None
    links: List[Link] = field(default_factory=list)
    symbol: Optional[str] = None
    type: Optional[str] = None
    fix: Optional[Fix] = None
    sat: Optional[int] = None
    hdop: Optional[float] = None
    vdop: Optional[float] = None
    pdop: Optional[float] = None
    dgps_age: Optional[float] = None
    dgpsid: Optional[int] = None
    extensions: Optional[V] = None

    @property
    def coordinates(self) -> Tuple[float, float]:
        """Return ``(longitude, latitude)``, x before y."""
        return (self.longitude, self.latitude)

    def point(self) -> Point:
        """Return the position as a shapely ``Point`` in (x=lon, y=lat) order."""
        return Point(self.longitude, self.latitude)


def _linestring(points: Sequence[Waypoint]) -> LineString:
    coordinates = [point.coordinates for point in points]
    # shapely needs two vertices; a lone point becomes a zero-length line.
    if len(coordinates) == 1:
        coordinates = coordinates * 2
    return LineString(coordinates)


@dataclass
class TrackSegment(Generic[V]):
    """Continuous span of track points, in recording order."""

    points: List[Waypoint[V]] = field(default_factory=list)

    def linestring(self) -> LineString:
        """Return the segment as a line in planar lon/lat coordinates."""
        return _linestring(self.points)


@dataclass
class Track(Generic[V]):
    """Ordered list of segments describing a path."""

    name: Optional[str] = None
    comment: Optional[str] = None
    description: Optional[str] = None
    source: Optional[str] = None
    links: List[Link] = field(default_factory=list)
    number: Optional[int] = None
    type: Optional[str] = None
    segments: List[TrackSegment[V]] = field(default_factory=list)

    def points(self) -> List[Waypoint[V]]:
        """All points of all segments in document order."""
        return [point for segment in self.segments for point in segment.points]

    def multilinestring(self) -> MultiLineString:
        """Return one line per non-empty segment, in document order."""
        return MultiLineString(
            [segment.linestring() for segment in self.segments if segment.points]
        )


@dataclass
class Route(Generic[V]):
    """Ordered list of route points leading to a destination."""

    name: Optional[str] = None
    comment: Optional[str] = None
    description: Optional[str] = None
    source: Optional[str] = None
    links: List[Link] = field(default_factory=list)
    number: Optional[int] = None
    type: Optional[str] = None
    points: List[Waypoint[V]] = field(default_factory=list)

    def linestring(self) -> LineString:
        return _linestring(self.points)


@dataclass
class Gpx(Generic[V]):
    """Root of a parsed document.

    ``diagnostics`` lists the optional values dropped during the read because
    they could not be converted, in document order.
    """

    version: GpxVersion = GpxVersion.UNKNOWN
    creator: Optional[str] = None
    metadata: Optional[Metadata] = None
    waypoints: List[Waypoint[V]] = field(default_factory=list)
    tracks: List[Track[V]] = field(default_factory=list)
    routes: List[Route[V]] = field(default_factory=list)
    diagnostics: List[DiagnosticEntry] = field(default_factory=list, compare=False)
