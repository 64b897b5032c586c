"""
Application entry point — wires dependencies and serves the API.

Composition root: creates concrete adapters and injects them into the
CertificateSource. This is the ONLY place where concrete adapter classes
are instantiated; everything else depends on Protocol interfaces.

Responsibilities:
  1. Configure structlog for structured logging
  2. Load and validate configuration from environment
  3. Create the downloader, parser, cache and source
  4. Start Uvicorn with the ASGI app
"""

from __future__ import annotations

import logging
import sys

import structlog

from cert_verifier import __version__
from cert_verifier.adapters.csv_parser import CsvCertificateParser
from cert_verifier.adapters.http_client import HttpSheetDownloader
from cert_verifier.cache import RecordSetCache
from cert_verifier.config import AppSettings
from cert_verifier.source import CertificateSource


def configure_structlog(log_level: str = "INFO") -> None:
    """Configure structlog for human-readable console output at the given level."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def create_source(settings: AppSettings) -> CertificateSource:
    """Instantiate the sheet downloader, CSV parser and cache behind one source."""
    downloader = HttpSheetDownloader(
        csv_url=settings.sheet.url,
        timeout=settings.http_timeout_seconds,
        retry_attempts=settings.sheet.retry_attempts,
    )
    parser = CsvCertificateParser()
    cache = RecordSetCache(ttl_seconds=settings.sheet.cache_ttl_seconds)
    return CertificateSource(downloader=downloader, parser=parser, cache=cache)


def main() -> None:
    """Validate configuration and launch the API server."""
    try:
        settings = AppSettings()
    except Exception as e:
        print(f"FATAL: Configuration error: {e}", file=sys.stderr)  # noqa: T201
        sys.exit(1)

    configure_structlog(settings.log_level)
    log = structlog.get_logger()
    log.info(
        "app.starting",
        version=__version__,
        log_level=settings.log_level,
        sheet_url=settings.sheet.url,
        cache_ttl_seconds=settings.sheet.cache_ttl_seconds,
    )

    import uvicorn

    uvicorn.run(
        "cert_verifier.asgi:app",
        host="0.0.0.0",
        port=8000,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
