"""Tokenization layer for GPX stream reading.

Key Components:
    TokenStream: Forward-only event source with one event of lookahead
    XmlEvent: A single structural or non-structural event
    EventKind: Enumeration of event kinds
"""

from .events import EventKind, XmlEvent
from .stream import TokenStream

__all__ = [
    "EventKind",
    "TokenStream",
    "XmlEvent",
]
