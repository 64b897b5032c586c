"""
Certificate source — cached access to the published certificate sheet.

Implements the CertificateProvider port:

  cache fresh?  ── yes ──▶ cached snapshot (no network)
       │ no
       ▼
  downloader.download() → parser.parse(text) → cache.put(records)

Any download or parse failure is replaced by one user-facing failure.
The original exception is chained onto a FetchError (`__cause__`) and
logged, so the detail survives for diagnostics without reaching users.
"""

from __future__ import annotations

import structlog
from railway import ErrorCode, FailureDescription
from railway.result import Result

from cert_verifier.cache import RecordSetCache
from cert_verifier.domain.errors import FetchError
from cert_verifier.domain.models import Certificate
from cert_verifier.domain.ports import CertificateTableParser, SheetDownloader

log = structlog.get_logger()

FETCH_FAILED_MESSAGE = "Unable to fetch certificate data. Please try again later."


def _to_fetch_failure(failure: FailureDescription) -> FailureDescription:
    """Wrap a download/parse failure into the single user-facing fetch failure."""
    error = FetchError(failure.message)
    error.__cause__ = failure.exception
    log.error(
        "source.fetch_failed",
        reason=failure.message,
        code=failure.code.value,
        cause=repr(failure.exception) if failure.exception is not None else None,
    )
    return FailureDescription(ErrorCode.EXTERNAL_SERVICE_ERROR, FETCH_FAILED_MESSAGE, error)


class CertificateSource:
    """
    Serve the certificate record set, fetching at most once per freshness window.

    The cache lock is held across check, fetch and store, so concurrent
    callers on an expired cache trigger a single download.
    """

    def __init__(
        self,
        downloader: SheetDownloader,
        parser: CertificateTableParser,
        cache: RecordSetCache | None = None,
    ) -> None:
        self._downloader = downloader
        self._parser = parser
        self._cache = cache if cache is not None else RecordSetCache()

    @property
    def cache(self) -> RecordSetCache:
        return self._cache

    def get_records(self) -> Result[tuple[Certificate, ...]]:
        """
        Return the current record set, from cache when fresh.

        Returns Result.failure(EXTERNAL_SERVICE_ERROR, FETCH_FAILED_MESSAGE)
        with a FetchError when the sheet cannot be downloaded or parsed.
        A failed fetch leaves any previous snapshot untouched.
        """
        with self._cache.lock:
            cached = self._cache.get()
            if cached is not None:
                log.debug("source.cache_hit", certificates=len(cached))
                return Result.success(cached)

            log.info("source.cache_miss")
            return (
                self._downloader.download()
                .flat_map(self._parser.parse)
                .peek(self._store)
                .map_failure(_to_fetch_failure)
            )

    def clear_cache(self) -> None:
        """Force the next get_records() call to fetch."""
        self._cache.clear()
        log.info("source.cache_cleared")

    def _store(self, records: tuple[Certificate, ...]) -> None:
        self._cache.put(records)
        log.info("source.cache_refreshed", certificates=len(records))
