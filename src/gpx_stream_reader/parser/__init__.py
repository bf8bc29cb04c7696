"""Recursive-descent consumers turning token events into GPX entities.

Every consumer takes the parse context positioned before its element and
returns with the stream positioned after the element's closing tag.
"""

from .context import ParseContext, create_context, verify_starting_tag
from .element import ChildTable, consume_children
from .extensions import (
    EmptyExtensions,
    TrackPointExtension,
    TrackPointExtensions,
    WaypointExtensions,
    skip_element,
)

__all__ = [
    "ChildTable",
    "EmptyExtensions",
    "ParseContext",
    "TrackPointExtension",
    "TrackPointExtensions",
    "WaypointExtensions",
    "consume_children",
    "create_context",
    "skip_element",
    "verify_starting_tag",
]
