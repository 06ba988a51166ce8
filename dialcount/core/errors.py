"""
Typed failures for dial command parsing.

Every failure is a RotationError tagged with an ErrorKind, so callers can
branch on `err.kind` instead of matching message strings:

    - InvalidFormat : empty / too short / unknown direction character
    - ParseError    : magnitude is not an unsigned base-10 integer
    - InvalidSteps  : magnitude parsed but equals zero
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(Enum):
    """Closed set of failure kinds."""
    INVALID_FORMAT = "invalid_format"
    PARSE_ERROR = "parse_error"
    INVALID_STEPS = "invalid_steps"


_LABELS = {
    ErrorKind.INVALID_FORMAT: "Invalid format",
    ErrorKind.PARSE_ERROR: "Parse error",
    ErrorKind.INVALID_STEPS: "Invalid step count",
}


class RotationError(ValueError):
    """Base class for all command failures. Subclasses fix `kind`."""

    kind: ErrorKind

    def __init__(self, message: str = "", line_no: Optional[int] = None) -> None:
        self.message = message
        self.line_no = line_no
        super().__init__(self._render())

    def _render(self) -> str:
        label = _LABELS[self.kind]
        return f"{label}: {self.message}" if self.message else label

    def as_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "message": str(self),
            "line": self.line_no,
        }


class InvalidFormat(RotationError):
    kind = ErrorKind.INVALID_FORMAT


class ParseError(RotationError):
    kind = ErrorKind.PARSE_ERROR


class InvalidSteps(RotationError):
    kind = ErrorKind.INVALID_STEPS
