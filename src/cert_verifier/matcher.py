"""
Matcher — decide whether a certificate ID and contact identify one record.

Domain layer — pure business logic, no I/O, no logging.

Rules, checked in order:
  1. blank certificate ID            → VALIDATION_ERROR (InputError)
  2. blank contact                   → VALIDATION_ERROR (InputError)
  3. first record whose ID matches AND whose email OR name matches → Success
  4. some record's ID matches        → BUSINESS_RULE_ERROR (ContactMismatchError)
  5. otherwise                       → NOT_FOUND (CertificateNotFoundError)

All comparisons are exact after normalize(). Duplicate IDs are neither
merged nor reported; the first match in sheet order wins.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from railway import ErrorCode
from railway.result import Result

from cert_verifier.domain.errors import (
    CertificateNotFoundError,
    ContactMismatchError,
    InputError,
)
from cert_verifier.domain.models import Certificate, VerificationRequest

ID_REQUIRED_MESSAGE = "Certificate ID is required"
CONTACT_REQUIRED_MESSAGE = "Email or Name is required"
CONTACT_MISMATCH_MESSAGE = "Certificate ID found, but email or name does not match our records"
NOT_FOUND_MESSAGE = "Certificate not found with the provided information"

_WHITESPACE = re.compile(r"\s+")


def normalize(value: str | None) -> str:
    """
    Lowercase, trim, and collapse internal whitespace runs to one space.

    >>> normalize("  Jane \\t  DOE ")
    'jane doe'
    """
    return _WHITESPACE.sub(" ", (value or "").lower().strip())


def check_request(request: VerificationRequest) -> Result[VerificationRequest]:
    """Reject a request with a blank field. The ID is checked before the contact."""
    if not request.certificate_id.strip():
        return Result.failure(
            ErrorCode.VALIDATION_ERROR,
            ID_REQUIRED_MESSAGE,
            InputError("certificate_id", ID_REQUIRED_MESSAGE),
        )
    if not request.contact.strip():
        return Result.failure(
            ErrorCode.VALIDATION_ERROR,
            CONTACT_REQUIRED_MESSAGE,
            InputError("contact", CONTACT_REQUIRED_MESSAGE),
        )
    return Result.success(request)


def _find_match(
    records: Sequence[Certificate],
    certificate_id: str,
    contact: str,
) -> Result[Certificate]:
    search_id = normalize(certificate_id)
    search_contact = normalize(contact)

    for record in records:
        if normalize(record.id) == search_id and search_contact in (
            normalize(record.email),
            normalize(record.name),
        ):
            return Result.success(record)

    if any(normalize(record.id) == search_id for record in records):
        return Result.failure(
            ErrorCode.BUSINESS_RULE_ERROR,
            CONTACT_MISMATCH_MESSAGE,
            ContactMismatchError(certificate_id),
        )
    return Result.failure(
        ErrorCode.NOT_FOUND,
        NOT_FOUND_MESSAGE,
        CertificateNotFoundError(certificate_id),
    )


def validate(
    records: Sequence[Certificate],
    certificate_id: str,
    contact: str,
) -> Result[Certificate]:
    """
    Match a certificate ID and an email-or-name against the record set.

    Returns Result.success(record) for the first matching record, or a
    failure whose message is one of the fixed user-facing messages above.
    """
    return check_request(VerificationRequest(certificate_id, contact)).flat_map(
        lambda request: _find_match(records, request.certificate_id, request.contact)
    )
