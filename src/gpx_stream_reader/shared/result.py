"""Diagnostic records produced while reading a GPX document.

Diagnostics never abort a read. They describe values the reader chose to
drop (an unparsable optional number, for instance) so callers can audit what
the resulting document is missing.
"""

import time
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, Optional


class DiagnosticSeverity(Enum):
    """Severity levels for diagnostic entries."""

    WARNING = auto()    # Value dropped, document still usable


@dataclass
class DiagnosticEntry:
    """Single diagnostic entry with the element it refers to."""

    severity: DiagnosticSeverity
    message: str
    element: str
    line: Optional[int] = None
    details: Optional[Dict[str, Any]] = None
    timestamp: float = field(default_factory=time.time)
    correlation_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate diagnostic entry."""
        if not self.message:
            raise ValueError("Diagnostic message cannot be empty")
        if not self.element:
            raise ValueError("Diagnostic element cannot be empty")
