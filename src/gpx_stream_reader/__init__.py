"""GPX stream reader.

Reads GPX track, route and waypoint documents from a forward-only XML event
stream into typed, in-memory values.

Progressive API Disclosure:
- Level 1: Simple functions - read(), read_string(), read_file()
- Level 2: Custom waypoint data - read_with_extensions() with a hook class
- Level 3: Individual consumers - gpx_stream_reader.parser
"""

__version__ = "0.1.0"
__author__ = "GPX Stream Reader Team"

from .api import read, read_file, read_string, read_with_extensions
from .parser import (
    EmptyExtensions,
    TrackPointExtension,
    TrackPointExtensions,
    WaypointExtensions,
)
from .shared import GpxError, ReaderConfig
from .types import (
    Bounds,
    Copyright,
    Fix,
    FixKind,
    Gpx,
    GpxVersion,
    Link,
    Metadata,
    Person,
    Route,
    Track,
    TrackSegment,
    Waypoint,
)

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Simple reading functions
    "read",
    "read_file",
    "read_string",

    # Level 2: Extension hooks
    "read_with_extensions",
    "EmptyExtensions",
    "TrackPointExtension",
    "TrackPointExtensions",
    "WaypointExtensions",

    # Configuration and errors
    "GpxError",
    "ReaderConfig",

    # Document model
    "Bounds",
    "Copyright",
    "Fix",
    "FixKind",
    "Gpx",
    "GpxVersion",
    "Link",
    "Metadata",
    "Person",
    "Route",
    "Track",
    "TrackSegment",
    "Waypoint",
]
