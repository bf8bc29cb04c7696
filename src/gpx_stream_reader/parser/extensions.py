"""Waypoint extension hooks.

A hook class is chosen once per read and decides what a waypoint's
``<extensions>`` element turns into. The choice is part of the document's
type: a read with ``EmptyExtensions`` yields ``Gpx[None]``, one with
``TrackPointExtensions`` yields ``Gpx[Optional[TrackPointExtension]]``.

Hooks are called with the context positioned before ``<extensions>`` and
must leave it after ``</extensions>``.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

from gpx_stream_reader.shared import InvalidClosingTag, MissingClosingTag
from gpx_stream_reader.tokenization import EventKind, XmlEvent

from . import number
from .context import ParseContext, verify_starting_tag
from .element import ChildTable, assign, consume_children

V = TypeVar("V")

TRACK_POINT_EXTENSION_NAMESPACES = frozenset({
    "http://www.garmin.com/xmlschemas/TrackPointExtension/v1",
    "http://www.garmin.com/xmlschemas/TrackPointExtension/v2",
})


class WaypointExtensions(ABC, Generic[V]):
    """Capability that parses the ``<extensions>`` child of a waypoint."""

    @classmethod
    @abstractmethod
    def consume(cls, context: ParseContext) -> V:
        """Consume one ``<extensions>`` element and return its value."""


def skip_element(context: ParseContext, tagname: str) -> None:
    """Consume ``tagname`` and everything inside it, keeping nothing.

    Raises:
        InvalidClosingTag: If the element is closed by another name
        MissingClosingTag: If the stream ends inside the element
    """
    verify_starting_tag(context, tagname)
    depth = 1
    skipped = 0

    while True:
        event = context.next_event(tagname)
        if event is None:
            raise MissingClosingTag(tagname)
        if event.kind is EventKind.START_ELEMENT:
            depth += 1
            skipped += 1
        elif event.kind is EventKind.END_ELEMENT:
            depth -= 1
            if depth == 0:
                if event.name != tagname:
                    raise InvalidClosingTag(event.name, tagname)
                context.logger.bind("extensions").debug(
                    "Skipped element", extra={"element": tagname, "descendants": skipped}
                )
                return


def skip_extensions(context: ParseContext, target: Any) -> None:
    """Child handler discarding an ``<extensions>`` element."""
    skip_element(context, "extensions")


class EmptyExtensions(WaypointExtensions[None]):
    """Hook for reads that do not need waypoint extensions."""

    @classmethod
    def consume(cls, context: ParseContext) -> None:
        skip_element(context, "extensions")
        return None


@dataclass
class TrackPointExtension:
    """Garmin ``TrackPointExtension`` (v1 and v2) sensor data."""

    atemp: Optional[float] = None
    wtemp: Optional[float] = None
    depth: Optional[float] = None
    hr: Optional[int] = None
    cad: Optional[int] = None
    speed: Optional[float] = None
    course: Optional[float] = None
    bearing: Optional[float] = None


class TrackPointExtensionChild(Enum):
    AIR_TEMPERATURE = "atemp"
    WATER_TEMPERATURE = "wtemp"
    DEPTH = "depth"
    HEART_RATE = "hr"
    CADENCE = "cad"
    SPEED = "speed"
    COURSE = "course"
    BEARING = "bearing"
    EXTENSIONS = "Extensions"


def _float(tagname: str):
    return lambda context: number.consume_float(context, tagname)


def _count(tagname: str):
    return lambda context: number.consume_non_negative_int(context, tagname)


TRACK_POINT_CHILDREN: ChildTable[TrackPointExtension] = ChildTable(
    TrackPointExtensionChild,
    {
        TrackPointExtensionChild.AIR_TEMPERATURE: assign("atemp", _float("atemp")),
        TrackPointExtensionChild.WATER_TEMPERATURE: assign("wtemp", _float("wtemp")),
        TrackPointExtensionChild.DEPTH: assign("depth", _float("depth")),
        TrackPointExtensionChild.HEART_RATE: assign("hr", _count("hr")),
        TrackPointExtensionChild.CADENCE: assign("cad", _count("cad")),
        TrackPointExtensionChild.SPEED: assign("speed", _float("speed")),
        TrackPointExtensionChild.COURSE: assign("course", _float("course")),
        TrackPointExtensionChild.BEARING: assign("bearing", _float("bearing")),
        TrackPointExtensionChild.EXTENSIONS: lambda c, _: skip_element(c, "Extensions"),
    },
)


def _is_track_point_extension(event: XmlEvent) -> bool:
    # Garmin's GpxExtensions schema also defines a TrackPointExtension.
    return event.name == "TrackPointExtension" and (
        event.namespace is None or event.namespace in TRACK_POINT_EXTENSION_NAMESPACES
    )


class TrackPointExtensions(WaypointExtensions[Optional[TrackPointExtension]]):
    """Hook reading Garmin track point sensor data.

    Other vendors' blocks inside ``<extensions>`` are skipped; the value is
    None when no ``TrackPointExtension`` is present.
    """

    @classmethod
    def consume(cls, context: ParseContext) -> Optional[TrackPointExtension]:
        verify_starting_tag(context, "extensions")
        result: Optional[TrackPointExtension] = None

        while True:
            event = context.peek("extensions")
            if event is None:
                break

            if event.kind is EventKind.START_ELEMENT:
                if _is_track_point_extension(event):
                    verify_starting_tag(context, "TrackPointExtension")
                    result = consume_children(
                        context, "TrackPointExtension", TrackPointExtension(),
                        TRACK_POINT_CHILDREN,
                    )
                else:
                    skip_element(context, event.name)
            elif event.kind is EventKind.END_ELEMENT:
                if event.name != "extensions":
                    raise InvalidClosingTag(event.name, "extensions")
                context.next_event("extensions")
                return result
            else:
                context.next_event("extensions")

        raise MissingClosingTag("extensions")
