"""
Railway-Oriented Programming (ROP) helpers used by cert-verifier.

Every core operation returns a Result instead of raising, so lookups,
downloads and parsing compose with flat_map and fail on one track:

    from railway import Result, ErrorCode

    def require_id(certificate_id: str) -> Result[str]:
        if not certificate_id.strip():
            return Result.failure(ErrorCode.VALIDATION_ERROR, "Certificate ID is required")
        return Result.success(certificate_id)
"""

from railway.assertions import ResultAssertions
from railway.execution import (
    ExecutionContext,
    LoggingExecutionContext,
)
from railway.failure import ErrorCode, FailureDescription
from railway.result import Failure, Result, Success

__all__ = [
    "Result",
    "Success",
    "Failure",
    "ErrorCode",
    "FailureDescription",
    "ExecutionContext",
    "LoggingExecutionContext",
    "ResultAssertions",
]

__version__ = "1.1.0"
