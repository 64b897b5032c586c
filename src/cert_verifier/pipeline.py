"""
Pipeline — the verification flow from user input to a presentable result.

Domain layer — all I/O is injected via the CertificateProvider port.

  check_request(request)
    → provider.get_records()
      → validate(records, certificate_id, contact)
        → present(certificate)

Each stage returns Result[T]. Blank input fails before any fetch, and
failures short-circuit through the railway — no try/except needed.
"""

from __future__ import annotations

from railway.result import Result

from cert_verifier.domain.models import Certificate, VerificationRequest, VerifiedCertificate
from cert_verifier.domain.ports import CertificateProvider
from cert_verifier.links import build_permalink, is_valid_download_url
from cert_verifier.matcher import check_request, validate


def present(certificate: Certificate, base_url: str) -> VerifiedCertificate:
    """Build the user-visible view; unsafe or empty download links are dropped."""
    download_url = (
        certificate.download_url if is_valid_download_url(certificate.download_url) else None
    )
    return VerifiedCertificate(
        id=certificate.id,
        name=certificate.name,
        email=certificate.email,
        download_url=download_url,
        permalink=build_permalink(certificate.id, base_url),
    )


def verify_certificate(
    provider: CertificateProvider,
    request: VerificationRequest,
    base_url: str,
) -> Result[VerifiedCertificate]:
    """
    Execute one verification attempt.

    Returns Result.success(VerifiedCertificate) on a match, or the failure
    from the first failing stage (input, fetch, not found, mismatch).
    """
    return (
        check_request(request)
        .flat_map(lambda _: provider.get_records())
        .flat_map(lambda records: validate(records, request.certificate_id, request.contact))
        .map(lambda certificate: present(certificate, base_url))
    )
