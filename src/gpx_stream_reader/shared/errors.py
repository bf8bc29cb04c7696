"""Error taxonomy for GPX stream reading.

Every failure is fatal to the read that raised it. Each exception keeps the
names involved (the element expected, the element found, the enclosing
entity) as attributes so a diagnostic can be rendered without re-reading the
input.
"""

from typing import Optional


class GpxError(Exception):
    """Base exception for all reading failures.

    Attributes:
        element: Entity that was being consumed when the failure was observed
    """

    def __init__(self, message: str, element: Optional[str] = None) -> None:
        super().__init__(message)
        self.element = element


class MissingOpeningTag(GpxError):
    """The stream ended before the expected element was opened."""

    def __init__(self, expected: str) -> None:
        super().__init__(f"missing opening tag <{expected}>", expected)
        self.expected = expected


class InvalidChildElement(GpxError):
    """An element outside the enclosing entity's child vocabulary was found."""

    def __init__(
        self, child: str, parent: str, message: Optional[str] = None
    ) -> None:
        super().__init__(
            message or f"invalid child element <{child}> in <{parent}>", parent
        )
        self.child = child
        self.parent = parent


class TagMismatch(InvalidChildElement):
    """The next structural event is not the opening tag that was expected.

    ``found`` is the name of the offending element, or the text content when
    character data appeared where a tag was required.
    """

    def __init__(self, found: str, expected: str) -> None:
        super().__init__(
            found, expected, f"expected opening tag <{expected}>, found {found!r}"
        )
        self.found = found
        self.expected = expected


class InvalidClosingTag(GpxError):
    """A closing tag does not match the element currently open."""

    def __init__(self, found: str, expected: str) -> None:
        super().__init__(
            f"invalid closing tag </{found}>, expected </{expected}>", expected
        )
        self.found = found
        self.expected = expected


class MissingClosingTag(GpxError):
    """The stream ended while an element was still open."""

    def __init__(self, element: str) -> None:
        super().__init__(f"missing closing tag for <{element}>", element)


class NoStringContent(GpxError):
    """A leaf that requires text content was empty."""

    def __init__(self, element: str) -> None:
        super().__init__(f"no string content in <{element}>", element)


class InvalidElementLacksAttribute(GpxError):
    """A required attribute is absent from an opening tag."""

    def __init__(self, attribute: str, element: str) -> None:
        super().__init__(
            f"element <{element}> lacks required attribute '{attribute}'", element
        )
        self.attribute = attribute


class InvalidAttributeValue(GpxError):
    """A required attribute is present but cannot be converted."""

    def __init__(self, attribute: str, value: str, element: str) -> None:
        super().__init__(
            f"invalid value {value!r} for attribute '{attribute}' of <{element}>",
            element,
        )
        self.attribute = attribute
        self.value = value


class InvalidTextContent(GpxError):
    """Text content of a typed leaf cannot be converted."""

    def __init__(self, element: str, text: str, reason: str) -> None:
        super().__init__(f"invalid content {text!r} in <{element}>: {reason}", element)
        self.text = text
        self.reason = reason


class UnknownVersionError(GpxError):
    """The root element declares a version this reader does not know."""

    def __init__(self, version: str) -> None:
        super().__init__(f"unknown GPX version {version!r}", "gpx")
        self.version = version


class XmlStreamError(GpxError):
    """The underlying XML tokenizer rejected the input."""

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None
    ) -> None:
        super().__init__(message)
        self.line = line
        self.column = column


class EventParsingError(GpxError):
    """A tokenizer failure observed while consuming a particular entity."""

    def __init__(self, element: str, reason: str) -> None:
        super().__init__(f"error while parsing <{element}>: {reason}", element)
        self.reason = reason
