"""
Shared test fixtures and helpers for the cert-verifier test suite.

Provides a realistic sheet export, the records it parses to, and a
manually advanced clock for cache freshness tests.
"""

from __future__ import annotations

import pytest

from cert_verifier.domain.models import Certificate

SHEET_CSV = (
    "ID,Name,Email,Downlod Link\r\n"
    "CERT-001,Jane Doe,jane@x.com,https://x/cert.pdf\r\n"
    'CERT-002,"Doe, John",john@example.org,\r\n'
    ",,,\r\n"
    "CERT-003,Ana  Maria   Lopez,ana@example.org,javascript:alert(1)\r\n"
)


class FakeClock:
    """Monotonic clock stand-in that only moves when told to."""

    def __init__(self, start: float = 1_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture()
def sheet_csv() -> str:
    """Return the sample sheet export used across tests."""
    return SHEET_CSV


@pytest.fixture()
def records() -> tuple[Certificate, ...]:
    """Return the records SHEET_CSV parses to, in sheet order."""
    return (
        Certificate("CERT-001", "Jane Doe", "jane@x.com", "https://x/cert.pdf"),
        Certificate("CERT-002", "Doe, John", "john@example.org", ""),
        Certificate("CERT-003", "Ana  Maria   Lopez", "ana@example.org", "javascript:alert(1)"),
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()
