"""Consumers for optional numeric elements.

Optional numbers are read leniently: text that does not convert is dropped
(and reported through the context) instead of failing the read. Most
elements also treat empty content as absent; those read with
``allow_empty=False`` reject it like any other required leaf.
"""

from typing import Callable, Optional, TypeVar

from . import text
from .context import ParseContext

N = TypeVar("N", int, float)


def _without_separators(value: str) -> str:
    # Python accepts "1_000"; GPX numbers carry no digit separators.
    if "_" in value:
        raise ValueError(f"digit separators are not allowed: {value!r}")
    return value


def parse_float(value: str) -> float:
    """Convert GPX decimal text, raising ValueError when it is not a number."""
    return float(_without_separators(value))


def parse_int(value: str) -> int:
    return int(_without_separators(value))


def _non_negative_int(value: str) -> int:
    number = parse_int(value)
    if number < 0:
        raise ValueError(f"expected a non-negative integer, got {number}")
    return number


def _consume(
    context: ParseContext,
    tagname: str,
    convert: Callable[[str], N],
    allow_empty: bool
) -> Optional[N]:
    raw = text.consume(context, tagname, allow_empty=allow_empty)
    line = context.line
    value = raw.strip()
    if not value:
        return None
    try:
        return convert(value)
    except ValueError as e:
        context.report_degraded(tagname, raw, str(e), line=line)
        return None


def consume_float(
    context: ParseContext, tagname: str, allow_empty: bool = True
) -> Optional[float]:
    return _consume(context, tagname, parse_float, allow_empty)


def consume_int(
    context: ParseContext, tagname: str, allow_empty: bool = True
) -> Optional[int]:
    """Read an integer leaf.

    Raises:
        NoStringContent: If the element is empty and ``allow_empty`` is False
    """
    return _consume(context, tagname, parse_int, allow_empty)


def consume_non_negative_int(
    context: ParseContext, tagname: str, allow_empty: bool = True
) -> Optional[int]:
    """Read a count or identifier such as ``sat`` or ``dgpsid``."""
    return _consume(context, tagname, _non_negative_int, allow_empty)
