"""
FastAPI + Uvicorn ASGI application — the HTTP face of the verifier.

Endpoints:
  POST /verify        — verify a certificate ID + email or name
  GET  /permalink     — read the certificate ID out of a shared permalink
  POST /cache/clear   — drop the cached sheet so the next lookup refetches
  GET  /health        — liveness probe
  GET  /info          — application metadata

Failures are returned as {"error_code", "message", "timestamp"} with the
HTTP status from HttpStatusMapper. Fetch diagnostics go to the log only.

Entry point for production: uvicorn cert_verifier.asgi:app --host 0.0.0.0 --port 8000
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict
from typing import Any

import structlog
from fastapi import FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from railway import ErrorCode, LoggingExecutionContext, Result
from railway.http_support import build_response

from cert_verifier import __version__
from cert_verifier.config import AppSettings
from cert_verifier.domain.models import VerificationRequest
from cert_verifier.links import read_permalink
from cert_verifier.main import configure_structlog, create_source
from cert_verifier.pipeline import verify_certificate
from cert_verifier.source import CertificateSource

# ─────────────────────── Global State ───────────────────────
# Set during app startup and used by the request handlers.

_settings: AppSettings | None = None
_source: CertificateSource | None = None
_error_message: str | None = None
log = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Load settings and wire the certificate source on startup."""
    global _settings, _source, _error_message

    try:
        settings = AppSettings()
    except Exception as e:
        _error_message = f"Configuration error: {e}"
        log.error("asgi.startup_error", error=_error_message)
        raise

    configure_structlog(settings.log_level)
    _settings = settings
    _source = create_source(settings)

    log.info(
        "asgi.startup_complete",
        version=__version__,
        sheet_url=settings.sheet.url,
        cache_ttl_seconds=settings.sheet.cache_ttl_seconds,
    )

    yield

    log.info("asgi.shutdown")


app = FastAPI(
    title="cert-verifier",
    description="Verify event certificates against the published certificate sheet",
    version=__version__,
    lifespan=lifespan,
)


class VerifyBody(BaseModel):
    """Form fields of one verification attempt."""

    certificate_id: str = Field(default="", description="Certificate ID as printed")
    contact: str = Field(default="", description="Registrant email or full name")


def _unavailable() -> JSONResponse:
    return JSONResponse(
        status_code=503,
        content={"status": "unavailable", "reason": "Service not initialized"},
    )


def _log_outcome(result: Result[Any]) -> None:
    if result.is_success():
        log.info("verify.completed", certificate_id=result.value().id)
        return
    failure = result.error()
    if failure.code is ErrorCode.EXTERNAL_SERVICE_ERROR:
        log.error("verify.fetch_failed", detail=failure.full_stack_trace())
    else:
        log.info("verify.rejected", error_code=failure.code.value, reason=failure.message)


@app.post("/verify")
async def verify(body: VerifyBody) -> JSONResponse:
    """
    Verify a certificate.

    Returns 200 with id, name, email, download_url (null unless http/https)
    and permalink. Returns 400 for blank input, 404 for an unknown ID,
    409 when the ID exists but the contact does not match, and 502 when
    the certificate sheet cannot be fetched.
    """
    if _source is None or _settings is None:
        return _unavailable()

    source, base_url = _source, _settings.site.base_url
    request = VerificationRequest(certificate_id=body.certificate_id, contact=body.contact)
    ctx = LoggingExecutionContext(operation="CertificateVerification")

    result = await asyncio.to_thread(
        ctx.execute, lambda: verify_certificate(source, request, base_url)
    )
    _log_outcome(result)

    content, status = build_response(result.map(asdict))
    return JSONResponse(status_code=status, content=content)


@app.get("/permalink")
async def permalink(url: str) -> dict[str, str | None]:
    """Extract the certificate ID from a shared permalink, so a form can pre-fill it."""
    return {"certificate_id": read_permalink(url)}


@app.post("/cache/clear")
async def clear_cache() -> JSONResponse:
    """Drop the cached record set; the next verification downloads the sheet again."""
    if _source is None:
        return _unavailable()
    # Waits on the cache lock while a refresh is in flight; keep it off the event loop.
    await asyncio.to_thread(_source.clear_cache)
    return JSONResponse(status_code=200, content={"status": "cleared"})


@app.get("/health")
async def health() -> JSONResponse:
    """Liveness probe — 503 if startup failed."""
    if _error_message:
        return JSONResponse(
            status_code=503,
            content={"status": "unhealthy", "error": _error_message},
        )
    return JSONResponse(status_code=200, content={"status": "healthy"})


@app.get("/info")
async def info() -> dict[str, Any]:
    """Application metadata, for debugging and monitoring."""
    return {
        "name": "cert-verifier",
        "version": __version__,
        "initialized": _source is not None,
        "cache_ttl_seconds": _source.cache.ttl_seconds if _source is not None else None,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("cert_verifier.asgi:app", host="0.0.0.0", port=8000, log_level="info")
