"""Shared recursive-descent loop for composite entities.

Every composite entity is read by the same state machine; entities differ
only in their child vocabulary and in how each child is stored. A vocabulary
is an ``Enum`` whose values are element names, paired with a handler for
every member in a ``ChildTable``.
"""

from enum import Enum
from typing import Any, Callable, Dict, Generic, Mapping, Optional, Type, TypeVar

from gpx_stream_reader.shared import (
    InvalidChildElement,
    InvalidClosingTag,
    MissingClosingTag,
)
from gpx_stream_reader.tokenization import EventKind

from .context import ParseContext

T = TypeVar("T")

ChildHandler = Callable[[ParseContext, T], None]


class ChildTable(Generic[T]):
    """Closed mapping from child element names to handlers.

    Raises:
        ValueError: If a vocabulary member has no handler, or a handler is
            keyed by something outside the vocabulary
    """

    def __init__(
        self,
        vocabulary: Type[Enum],
        handlers: Mapping[Enum, ChildHandler]
    ) -> None:
        missing = [member.name for member in vocabulary if member not in handlers]
        foreign = [key for key in handlers if not isinstance(key, vocabulary)]
        if missing or foreign:
            raise ValueError(
                f"{vocabulary.__name__} handlers incomplete: "
                f"missing={missing}, foreign={foreign}"
            )
        self.vocabulary = vocabulary
        self._by_name: Dict[str, ChildHandler] = {
            member.value: handlers[member] for member in vocabulary
        }

    def handler_for(self, name: str) -> Optional[ChildHandler]:
        return self._by_name.get(name)


def assign(field_name: str, consumer: Callable[[ParseContext], Any]) -> ChildHandler:
    """Handler storing the child's value in a single-valued field (last wins)."""
    def handler(context: ParseContext, target: Any) -> None:
        setattr(target, field_name, consumer(context))
    return handler


def append(field_name: str, consumer: Callable[[ParseContext], Any]) -> ChildHandler:
    """Handler appending the child's value to a collection field."""
    def handler(context: ParseContext, target: Any) -> None:
        getattr(target, field_name).append(consumer(context))
    return handler


def consume_children(
    context: ParseContext,
    tagname: str,
    target: T,
    children: ChildTable[T]
) -> T:
    """Read the children of an already opened element into ``target``.

    Known children are dispatched to their handler without being consumed
    first; comments, processing instructions and text between children are
    discarded. Returns once the element's own closing tag has been consumed.

    Raises:
        InvalidChildElement: For a child outside the vocabulary
        InvalidClosingTag: For a closing tag of another element
        MissingClosingTag: If the stream ends first
    """
    while True:
        event = context.peek(tagname)
        if event is None:
            break

        if event.kind is EventKind.START_ELEMENT:
            handler = children.handler_for(event.name)
            if handler is None:
                raise InvalidChildElement(event.name, tagname)
            handler(context, target)
        elif event.kind is EventKind.END_ELEMENT:
            if event.name != tagname:
                raise InvalidClosingTag(event.name, tagname)
            context.next_event(tagname)
            return target
        else:
            context.next_event(tagname)

    raise MissingClosingTag(tagname)


def consume_until_closed(context: ParseContext, tagname: str) -> None:
    """Finish an element that carries everything in its attributes.

    Raises:
        InvalidChildElement: If the element has a child element
        InvalidClosingTag: For a closing tag of another element
        MissingClosingTag: If the stream ends first
    """
    while True:
        event = context.next_event(tagname)
        if event is None:
            raise MissingClosingTag(tagname)
        if event.kind is EventKind.START_ELEMENT:
            raise InvalidChildElement(event.name, tagname)
        if event.kind is EventKind.END_ELEMENT:
            if event.name != tagname:
                raise InvalidClosingTag(event.name, tagname)
            return
