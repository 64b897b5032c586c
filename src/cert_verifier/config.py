"""
Configuration — typed, validated settings loaded from environment/.env.

Uses pydantic-settings to:
  - Load from environment variables (12-factor app)
  - Fall back to .env file
  - Validate types and constraints at startup

Sub-settings are plain BaseModel classes populated by AppSettings via
env_nested_delimiter="__", so SHEET__URL maps to sheet.url and
SITE__BASE_URL maps to site.base_url. Every field has a default, so the
service starts against the published sheet with no configuration.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve the .env file relative to the project root (two levels above this file),
# so settings load correctly regardless of the working directory at runtime.
_ENV_FILE = Path(__file__).parent.parent.parent / ".env"

DEFAULT_SHEET_URL = (
    "https://docs.google.com/spreadsheets/d/"
    "1KfxWeP21U06emmQjDGQVg9cUcJbxMT29vOz6ZDTfH4I/export?format=csv"
)


class SheetSettings(BaseModel):
    """Published certificate sheet and how long a downloaded copy stays fresh."""

    url: str = Field(default=DEFAULT_SHEET_URL, description="CSV export URL of the sheet")
    cache_ttl_seconds: float = Field(
        default=300.0, ge=0, description="Freshness window of the cached record set"
    )
    retry_attempts: int = Field(
        default=1, ge=1, description="Download attempts on transient network errors"
    )


class SiteSettings(BaseModel):
    """Public origin of this service, used to build verification permalinks."""

    base_url: str = Field(default="http://localhost:8000", description="Public base URL")

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.strip().rstrip("/")


class AppSettings(BaseSettings):
    """
    Root application settings — aggregates all sub-settings.

    Load order (highest priority first):
      1. Environment variables
      2. .env file
      3. Default values
    """

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE,
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    sheet: SheetSettings = Field(default_factory=SheetSettings)
    site: SiteSettings = Field(default_factory=SiteSettings)

    http_timeout_seconds: int = Field(default=30, ge=1)
    log_level: str = Field(default="INFO")
