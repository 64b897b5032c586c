"""
HTTP adapter — download the certificate sheet's CSV export via httpx.

Adapter layer — implements the SheetDownloader port using httpx for a
sync GET with a cache-bypassing header. Published spreadsheet exports
answer with a redirect to the file host, so redirects are followed.

Retries (tenacity) apply to transient transport errors only and are off
by default (one attempt). All HTTP errors are captured into Result
failures — no exceptions leak to the business logic layer.
"""

from __future__ import annotations

import httpx
import structlog
from railway import ErrorCode
from railway.result import Result
from tenacity import (
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

log = structlog.get_logger()


class HttpSheetDownloader:
    """
    Download the published certificate sheet as CSV text.

    Implements the SheetDownloader port.
    """

    def __init__(
        self,
        csv_url: str,
        timeout: int = 30,
        retry_attempts: int = 1,
    ) -> None:
        self._csv_url = csv_url
        self._timeout = timeout
        self._retry_attempts = retry_attempts

    def download(self) -> Result[str]:
        """
        Fetch the full CSV export.

        Sends GET {csv_url} with Cache-Control: no-cache.
        Returns Result[str] with the response text on success,
        or Result.failure(EXTERNAL_SERVICE_ERROR, ...) on failure.
        """
        return Result.from_computation(
            self._download_with_retry,
            ErrorCode.EXTERNAL_SERVICE_ERROR,
            "Sheet download failed",
        )

    def _download_with_retry(self) -> str:
        retrying = Retrying(
            stop=stop_after_attempt(self._retry_attempts),
            wait=wait_exponential(multiplier=1, min=0.1, max=10),
            retry=retry_if_exception_type((httpx.TimeoutException, httpx.NetworkError)),
            reraise=True,
        )
        return retrying(self._do_download)

    def _do_download(self) -> str:
        """HTTP GET — exceptions caught by from_computation."""
        with httpx.Client(timeout=self._timeout, follow_redirects=True) as client:
            response = client.get(
                self._csv_url,
                headers={"Cache-Control": "no-cache"},
            )
            response.raise_for_status()
            text = response.text
            log.info("sheet.downloaded", size_chars=len(text))
            return text
