"""
Link utilities — verification permalinks and the download-URL gate.

A permalink is this service's public base URL with a single `verify`
query parameter carrying the certificate ID, so a verified result can be
bookmarked or shared and the ID pre-filled when the link is opened.
"""

from __future__ import annotations

from typing import Annotated
from urllib.parse import parse_qs, quote, urlsplit

from pydantic import AnyUrl, TypeAdapter, UrlConstraints, ValidationError

PERMALINK_PARAM = "verify"

# Characters encodeURIComponent leaves unescaped besides letters, digits and -_.~
_PERMALINK_SAFE = "!*'()"

# HttpUrl caps length at 2083 chars; signed storage links run longer.
_http_url = TypeAdapter(
    Annotated[AnyUrl, UrlConstraints(allowed_schemes=["http", "https"], host_required=True)]
)


def build_permalink(certificate_id: str, base_url: str) -> str:
    """
    Build a shareable verification link for `certificate_id`.

    >>> build_permalink("CERT 001/A", "https://verify.example.com")
    'https://verify.example.com?verify=CERT%20001%2FA'
    """
    return f"{base_url}?{PERMALINK_PARAM}={quote(certificate_id, safe=_PERMALINK_SAFE)}"


def read_permalink(url: str) -> str | None:
    """Return the certificate ID carried by a permalink, or None if absent or blank."""
    try:
        query = urlsplit(url).query
    except ValueError:
        return None
    values = parse_qs(query).get(PERMALINK_PARAM)
    if not values or not values[0].strip():
        return None
    return values[0]


def is_valid_download_url(url: str) -> bool:
    """
    Accept only well-formed absolute http(s) URLs.

    >>> is_valid_download_url("https://x/y"), is_valid_download_url("javascript:alert(1)")
    (True, False)
    """
    try:
        _http_url.validate_python(url)
    except ValidationError:
        return False
    return True
