"""
Domain models — immutable value objects for certificates and verification.

All models are frozen dataclasses: a Certificate is never mutated once
parsed from the sheet, and a request exists only for one verification.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Certificate:
    """
    One issued certificate — a single data row of the published sheet.

    `download_url` is taken verbatim from the sheet and may be empty or
    malformed; gate it with `is_valid_download_url` before offering it.
    """

    id: str
    name: str
    email: str
    download_url: str = ""


@dataclass(frozen=True, slots=True)
class VerificationRequest:
    """The two free-text strings a user submits: certificate ID and email or name."""

    certificate_id: str
    contact: str


@dataclass(frozen=True, slots=True)
class VerifiedCertificate:
    """
    User-visible view of a successful verification.

    `download_url` is None unless the sheet value is an http(s) URL.
    `permalink` points back at this service with the ID pre-filled.
    """

    id: str
    name: str
    email: str
    download_url: str | None
    permalink: str
