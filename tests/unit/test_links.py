"""
Unit tests for link utilities — permalinks and the download-URL gate.
"""

from __future__ import annotations

import pytest

from cert_verifier.links import build_permalink, is_valid_download_url, read_permalink

BASE_URL = "https://verify.example.com"


class TestBuildPermalink:
    def test_plain_id(self) -> None:
        assert build_permalink("CERT-001", BASE_URL) == f"{BASE_URL}?verify=CERT-001"

    @pytest.mark.parametrize(
        "certificate_id,encoded",
        [
            ("CERT 001", "CERT%20001"),
            ("A/B&C=D", "A%2FB%26C%3DD"),
            ("a+b#c?", "a%2Bb%23c%3F"),
            ("it's(ok)!*~", "it's(ok)!*~"),
            ("Ünïcode", "%C3%9Cn%C3%AFcode"),
        ],
    )
    def test_id_is_escaped_like_encode_uri_component(
        self, certificate_id: str, encoded: str
    ) -> None:
        assert build_permalink(certificate_id, BASE_URL) == f"{BASE_URL}?verify={encoded}"


class TestReadPermalink:
    @pytest.mark.parametrize("certificate_id", ["CERT-001", "A/B&C=D", "a+b #c?", "Ünïcode"])
    def test_reads_back_built_permalink(self, certificate_id: str) -> None:
        assert read_permalink(build_permalink(certificate_id, BASE_URL)) == certificate_id

    @pytest.mark.parametrize(
        "url",
        [BASE_URL, f"{BASE_URL}?other=1", f"{BASE_URL}?verify=", f"{BASE_URL}?verify=%20%20"],
    )
    def test_missing_or_blank_parameter_is_none(self, url: str) -> None:
        assert read_permalink(url) is None

    def test_ignores_other_parameters(self) -> None:
        assert read_permalink(f"{BASE_URL}/?utm=x&verify=CERT-7") == "CERT-7"


class TestIsValidDownloadUrl:
    @pytest.mark.parametrize(
        "url",
        [
            "https://x/y",
            "http://example.com/cert.pdf",
            "https://drive.google.com/file/d/abc/view?usp=sharing",
        ],
    )
    def test_http_and_https_accepted(self, url: str) -> None:
        assert is_valid_download_url(url) is True

    def test_long_signed_url_accepted(self) -> None:
        """
        GIVEN a signed storage link longer than 2083 characters
        WHEN it is checked
        THEN it is still accepted.
        """
        url = "https://bucket.example.com/cert.pdf?sig=" + "a" * 2100
        assert len(url) > 2083
        assert is_valid_download_url(url) is True

    @pytest.mark.parametrize(
        "url",
        [
            "javascript:alert(1)",
            "not a url",
            "",
            "ftp://example.com/cert.pdf",
            "file:///etc/passwd",
            "data:text/html,<script>alert(1)</script>",
            "/relative/path.pdf",
            "https://",
        ],
    )
    def test_everything_else_rejected(self, url: str) -> None:
        assert is_valid_download_url(url) is False
