"""Consumer for ``<bounds>``, whose four edges are attributes."""

from typing import Dict

from gpx_stream_reader.shared import InvalidAttributeValue, InvalidElementLacksAttribute
from gpx_stream_reader.types import Bounds

from .context import ParseContext, verify_starting_tag
from .element import consume_until_closed
from .number import parse_float


def required_float(attributes: Dict[str, str], name: str, element: str) -> float:
    """Convert a mandatory numeric attribute.

    Raises:
        InvalidElementLacksAttribute: If the attribute is absent
        InvalidAttributeValue: If it is not a number
    """
    if name not in attributes:
        raise InvalidElementLacksAttribute(name, element)
    value = attributes[name]
    try:
        return parse_float(value)
    except ValueError as e:
        raise InvalidAttributeValue(name, value, element) from e


def consume(context: ParseContext) -> Bounds:
    attributes = verify_starting_tag(context, "bounds")
    bounds = Bounds(
        min_lat=required_float(attributes, "minlat", "bounds"),
        min_lon=required_float(attributes, "minlon", "bounds"),
        max_lat=required_float(attributes, "maxlat", "bounds"),
        max_lon=required_float(attributes, "maxlon", "bounds"),
    )
    consume_until_closed(context, "bounds")
    return bounds
