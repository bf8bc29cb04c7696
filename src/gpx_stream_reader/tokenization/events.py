"""Structural events delivered by the token stream.

An event is one unit of the document as the parsing layer sees it: an element
opening (with its attributes), an element closing, a run of character data,
or non-structural noise such as a comment or processing instruction.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Mapping, Optional


class EventKind(Enum):
    """Kinds of events produced by the token stream."""

    START_ELEMENT = auto()
    END_ELEMENT = auto()
    CHARACTERS = auto()              # Text, whitespace-only text and CDATA
    COMMENT = auto()
    PROCESSING_INSTRUCTION = auto()


STRUCTURAL_KINDS = frozenset(
    {EventKind.START_ELEMENT, EventKind.END_ELEMENT, EventKind.CHARACTERS}
)


@dataclass(frozen=True)
class XmlEvent:
    """A single event with the information the parsing layer needs.

    Element names and attribute keys are local names. The namespace URI of
    an element, if any, is kept separately in ``namespace``.
    """

    kind: EventKind
    name: Optional[str] = None
    attributes: Mapping[str, str] = field(default_factory=dict)
    text: Optional[str] = None
    line: Optional[int] = None
    namespace: Optional[str] = None

    @classmethod
    def start_element(
        cls, name: str, attributes: Optional[Mapping[str, str]] = None,
        line: Optional[int] = None, namespace: Optional[str] = None
    ) -> "XmlEvent":
        return cls(
            EventKind.START_ELEMENT, name, dict(attributes or {}),
            line=line, namespace=namespace,
        )

    @classmethod
    def end_element(
        cls, name: str, line: Optional[int] = None, namespace: Optional[str] = None
    ) -> "XmlEvent":
        return cls(EventKind.END_ELEMENT, name, line=line, namespace=namespace)

    @classmethod
    def characters(cls, text: str) -> "XmlEvent":
        return cls(EventKind.CHARACTERS, text=text)

    @classmethod
    def comment(cls, text: Optional[str]) -> "XmlEvent":
        return cls(EventKind.COMMENT, text=text or "")

    @classmethod
    def processing_instruction(cls, target: str, text: Optional[str]) -> "XmlEvent":
        return cls(EventKind.PROCESSING_INSTRUCTION, name=target, text=text or "")

    @property
    def is_structural(self) -> bool:
        """True for element-open, element-close and text events."""
        return self.kind in STRUCTURAL_KINDS

    def is_start(self, name: Optional[str] = None) -> bool:
        return self.kind is EventKind.START_ELEMENT and (name is None or self.name == name)

    def is_end(self, name: Optional[str] = None) -> bool:
        return self.kind is EventKind.END_ELEMENT and (name is None or self.name == name)
