"""
Domain errors — the failure kinds of a verification attempt.

These are never raised across the core's public surface. They travel as
the `exception` of a FailureDescription so callers can tell failures apart
by type, while the FailureDescription message is what the user sees.
"""

from __future__ import annotations


class VerificationError(Exception):
    """Base class for every certificate verification failure."""


class InputError(VerificationError):
    """A required field was left blank."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class CertificateNotFoundError(VerificationError):
    """No record carries the requested certificate ID."""


class ContactMismatchError(VerificationError):
    """The certificate ID exists but neither email nor name matches."""


class FetchError(VerificationError):
    """
    The certificate sheet could not be retrieved or parsed.

    The underlying transport or parse error is chained as `__cause__`.
    """


class SheetFormatError(VerificationError):
    """The downloaded sheet is not a usable certificate table."""


class InsufficientDataError(SheetFormatError):
    """The sheet has no header or no data lines."""


class ColumnSchemaError(SheetFormatError):
    """A required column header is absent from the sheet."""

    def __init__(self, column: str) -> None:
        super().__init__(f'Required column "{column}" not found in CSV')
        self.column = column
