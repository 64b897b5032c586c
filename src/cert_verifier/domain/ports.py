"""
Ports — Protocol-based interfaces for infrastructure adapters.

These define WHAT the verification flow needs without specifying HOW:

  Domain ← Ports (protocols) ← Adapters (implementations)

Each port is a Protocol (structural typing) so adapters and test fakes
satisfy the contract simply by implementing the methods.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from railway.result import Result

from cert_verifier.domain.models import Certificate


@runtime_checkable
class SheetDownloader(Protocol):
    """
    Port: fetch the raw CSV export of the certificate sheet.

    Returns Result[str] with the full text, first line being the header.
    """

    def download(self) -> Result[str]: ...


@runtime_checkable
class CertificateTableParser(Protocol):
    """Port: turn raw CSV text into certificate records, in sheet order."""

    def parse(self, text: str) -> Result[tuple[Certificate, ...]]: ...


@runtime_checkable
class CertificateProvider(Protocol):
    """
    Port: supply the current certificate record set.

    Implemented by CertificateSource, which adds caching on top of a
    downloader and a parser.
    """

    def get_records(self) -> Result[tuple[Certificate, ...]]: ...
