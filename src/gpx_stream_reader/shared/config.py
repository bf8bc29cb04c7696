"""Configuration for GPX stream reading.

This module provides the immutable configuration object consumed by the
reader entry points and the token stream.
"""

import json
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, List, Optional

MIN_CHUNK_SIZE = 1
MAX_CHUNK_SIZE = 16 * 1024 * 1024


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class ReaderConfig:
    """Settings for one read of a GPX document.

    Thread-safe due to frozen dataclass implementation; a single instance may
    be shared by any number of independent reads.

    Attributes:
        chunk_size: Bytes requested from the source per blocking read
        correlation_id: Optional ID attached to every log record of a read
        huge_tree: Lift lxml's safety limits on text size and tree depth
        strict_version: Reject root ``version`` values other than 1.0/1.1
        report_degraded_values: Log and record optional values dropped
            because they could not be converted
    """

    chunk_size: int = 64 * 1024
    correlation_id: Optional[str] = None
    huge_tree: bool = False
    strict_version: bool = True
    report_degraded_values: bool = True

    def __post_init__(self) -> None:
        """Validate reader configuration."""
        if not isinstance(self.chunk_size, int) or isinstance(self.chunk_size, bool):
            raise ConfigValidationError(
                "chunk_size must be an integer", field_name="chunk_size"
            )
        if not (MIN_CHUNK_SIZE <= self.chunk_size <= MAX_CHUNK_SIZE):
            raise ConfigValidationError(
                f"chunk_size must be between {MIN_CHUNK_SIZE} and {MAX_CHUNK_SIZE}",
                field_name="chunk_size",
                suggestions=["Use the default of 65536 bytes"],
            )

    def override(self, **kwargs: Any) -> "ReaderConfig":
        """Create a new configuration with specific overrides.

        Raises:
            ConfigValidationError: If a keyword does not name a field or the
                resulting configuration is invalid
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(kwargs) - known)
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration field(s): {', '.join(unknown)}",
                field_name=unknown[0],
                suggestions=sorted(known),
            )
        return replace(self, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ReaderConfig":
        """Create configuration from a dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})

    @classmethod
    def from_json(cls, json_str: str) -> "ReaderConfig":
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Invalid configuration JSON: {e}") from e
        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration JSON must be an object")
        return cls.from_dict(data)
