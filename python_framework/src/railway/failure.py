"""
Failure description — structured error information for the failure track.

An ErrorCode says which kind of failure happened (and therefore which HTTP
status it maps to); the FailureDescription carries the user-facing message
plus the originating exception for diagnostics.
"""

from __future__ import annotations

import traceback
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum, unique


@unique
class ErrorCode(Enum):
    """
    Error codes for the failure track, grouped by HTTP status range.

    Client errors (4xx): VALIDATION, NOT_FOUND, BUSINESS_RULE
    Server errors (5xx): TECHNICAL, CONFIGURATION, EXTERNAL_SERVICE
    """

    VALIDATION_ERROR = "VALIDATION_ERROR"
    """Missing or malformed input (→ 400)."""

    NOT_FOUND = "NOT_FOUND"
    """Resource doesn't exist (→ 404)."""

    BUSINESS_RULE_ERROR = "BUSINESS_RULE_ERROR"
    """Resource exists but the request conflicts with it (→ 409)."""

    TECHNICAL_ERROR = "TECHNICAL_ERROR"
    """Unexpected exception inside our own code (→ 500)."""

    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    """System misconfiguration (→ 500)."""

    EXTERNAL_SERVICE_ERROR = "EXTERNAL_SERVICE_ERROR"
    """Upstream source unreachable or returned unusable data (→ 502)."""


@dataclass(frozen=True, slots=True)
class FailureDescription:
    """
    Immutable failure: error code, message, optional exception, and timestamp.

    >>> desc = FailureDescription(ErrorCode.NOT_FOUND, "Certificate not found")
    >>> desc.code
    <ErrorCode.NOT_FOUND: 'NOT_FOUND'>
    """

    code: ErrorCode
    message: str
    exception: BaseException | None = field(default=None, repr=False)
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    def full_stack_trace(self) -> str:
        """Message followed by the formatted exception chain, if any."""
        if self.exception is None:
            return self.message
        tb = "".join(
            traceback.format_exception(
                type(self.exception), self.exception, self.exception.__traceback__
            )
        )
        return f"{self.message}\n{tb}"
