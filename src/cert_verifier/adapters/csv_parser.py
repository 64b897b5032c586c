"""
CSV parser adapter — certificate sheet export → Certificate records.

Adapter layer — implements the CertificateTableParser port.

Pipeline:
  raw CSV text
    → split into lines (first line is the header)
    → header names → fixed column layout (resolved once, by index)
    → each data line scanned character by character into fields
    → Certificate per row with a non-empty ID

The scanner follows the sheet export's quoting rules: double quotes
enclose a field, `""` inside quotes is a literal quote, and a comma only
separates fields outside quotes. Records never span lines.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog
from railway import ErrorCode
from railway.result import Result

from cert_verifier.domain.errors import ColumnSchemaError, InsufficientDataError
from cert_verifier.domain.models import Certificate

log = structlog.get_logger()

# ─────────────────────── Sheet Columns ───────────────────────
# Header names as published by the sheet. "Downlod Link" is misspelled in
# the source sheet itself and must be matched exactly as spelled there.

ID_COLUMN = "ID"
NAME_COLUMN = "Name"
EMAIL_COLUMN = "Email"
DOWNLOAD_COLUMN = "Downlod Link"


@dataclass(frozen=True, slots=True)
class _ColumnLayout:
    """Positions of the required columns within each row."""

    id: int
    name: int
    email: int
    download_url: int

    @staticmethod
    def from_header(header: list[str]) -> _ColumnLayout:
        """Resolve required columns by case-insensitive name, or raise ColumnSchemaError."""
        lowered = [name.strip().lower() for name in header]

        def index_of(column: str) -> int:
            try:
                return lowered.index(column.lower())
            except ValueError:
                raise ColumnSchemaError(column) from None

        return _ColumnLayout(
            id=index_of(ID_COLUMN),
            name=index_of(NAME_COLUMN),
            email=index_of(EMAIL_COLUMN),
            download_url=index_of(DOWNLOAD_COLUMN),
        )


# ─────────────────────── Line Scanner ───────────────────────


def split_csv_line(line: str) -> list[str]:
    """
    Split one CSV line into trimmed fields.

    >>> split_csv_line('CERT-1,"Doe, Jane", x')
    ['CERT-1', 'Doe, Jane', 'x']
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    i = 0

    while i < len(line):
        char = line[i]
        if char == '"':
            if in_quotes and i + 1 < len(line) and line[i + 1] == '"':
                current.append('"')
                i += 1
            else:
                in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)
        i += 1

    fields.append("".join(current).strip())
    return fields


def _cell(values: list[str], index: int) -> str:
    """Return the trimmed cell at `index`, or "" if the row is too short."""
    return values[index].strip() if index < len(values) else ""


# ─────────────────────── Public Parser Class ───────────────────────


class CsvCertificateParser:
    """
    Parse the certificate sheet's CSV export into Certificate records.

    Implements the CertificateTableParser port.
    All exceptions are caught at this adapter boundary via Result.from_computation().
    """

    def parse(self, text: str) -> Result[tuple[Certificate, ...]]:
        """
        Parse CSV text into a tuple of Certificates, in sheet order.

        Returns Result.failure(VALIDATION_ERROR, ...) carrying an
        InsufficientDataError or ColumnSchemaError when the sheet is unusable.
        """
        return Result.from_computation(
            lambda: self._do_parse(text),
            ErrorCode.VALIDATION_ERROR,
            "Failed to parse certificate sheet",
        )

    def _do_parse(self, text: str) -> tuple[Certificate, ...]:
        """Internal parse — may raise SheetFormatError (caught by from_computation)."""
        lines = text.strip().split("\n")
        if len(lines) < 2:
            raise InsufficientDataError("Invalid CSV format: insufficient data")

        layout = _ColumnLayout.from_header(split_csv_line(lines[0]))

        certificates: list[Certificate] = []
        skipped = 0
        for line in lines[1:]:
            values = split_csv_line(line)
            certificate_id = _cell(values, layout.id)
            if not certificate_id:
                skipped += 1
                continue
            certificates.append(
                Certificate(
                    id=certificate_id,
                    name=_cell(values, layout.name),
                    email=_cell(values, layout.email),
                    download_url=_cell(values, layout.download_url),
                )
            )

        log.info("parser.complete", certificates=len(certificates), skipped_rows=skipped)
        return tuple(certificates)
