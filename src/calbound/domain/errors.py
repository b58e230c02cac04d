"""Typed failures raised by the domain layer.

Both failures are local and immediate: no retry, no partial result.
The service layer translates them into structured ServiceError payloads.
"""

from __future__ import annotations

from typing import Any


class BoundaryError(ValueError):
    """Base for all boundary computation failures."""

    code = "BOUNDARY_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class OutOfRangeError(BoundaryError):
    """Year or tick arithmetic left the representable datetime range."""

    code = "OUT_OF_RANGE"


class InvalidTimeZoneError(BoundaryError):
    """Zone argument is absent or cannot be resolved to a rule set."""

    code = "INVALID_TIME_ZONE"
