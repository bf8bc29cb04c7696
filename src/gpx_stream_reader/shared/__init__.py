"""Shared utilities for GPX stream reading.

This module provides the configuration object, diagnostic records, the error
taxonomy and logging helpers used across the tokenization and parsing layers.
"""

from .config import (
    ConfigError,
    ConfigValidationError,
    ReaderConfig,
)
from .errors import (
    EventParsingError,
    GpxError,
    InvalidAttributeValue,
    InvalidChildElement,
    InvalidClosingTag,
    InvalidElementLacksAttribute,
    InvalidTextContent,
    MissingClosingTag,
    MissingOpeningTag,
    NoStringContent,
    TagMismatch,
    UnknownVersionError,
    XmlStreamError,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)
from .result import (
    DiagnosticEntry,
    DiagnosticSeverity,
)

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "ReaderConfig",
    "EventParsingError",
    "GpxError",
    "InvalidAttributeValue",
    "InvalidChildElement",
    "InvalidClosingTag",
    "InvalidElementLacksAttribute",
    "InvalidTextContent",
    "MissingClosingTag",
    "MissingOpeningTag",
    "NoStringContent",
    "TagMismatch",
    "UnknownVersionError",
    "XmlStreamError",
    "CorrelationLogger",
    "get_logger",
    "DiagnosticEntry",
    "DiagnosticSeverity",
]
