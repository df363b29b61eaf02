"""Centralized configuration management for the filtered responses API."""

from __future__ import annotations

import logging
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load a local .env before the settings singleton is created so every consumer
# importing :mod:`formfilter.settings` sees the same environment.
load_dotenv()

# -- Application-wide constants -------------------------------------------------

DEFAULT_UPSTREAM_BASE_URL = "https://api.fillout.com"
DEFAULT_LOG_LEVEL = "INFO"


def _normalize_origin(origin: str) -> str:
    """Return the origin stripped of whitespace and trailing slashes."""

    return origin.strip().rstrip("/")


class AppSettings(BaseSettings):
    """Typed configuration surface built on top of ``pydantic-settings``."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    upstream_base_url: str = Field(
        default=DEFAULT_UPSTREAM_BASE_URL,
        alias="UPSTREAM_BASE_URL",
        description="Base URL of the paginated submissions API.",
    )
    upstream_timeout_seconds: float | None = Field(
        default=None,
        alias="UPSTREAM_TIMEOUT_SECONDS",
        description=(
            "Per-request timeout applied to upstream calls. When unset the"
            " HTTP client's own default is used."
        ),
    )
    cors_allow_origins_raw: str | None = Field(
        default=None,
        alias="CORS_ALLOW_ORIGINS",
        description="Comma-separated list of CORS origins allowed to call the API.",
    )
    cors_allow_origin_regex: str | None = Field(
        default=None,
        alias="CORS_ALLOW_ORIGIN_REGEX",
        description="Optional regular expression evaluated by FastAPI's CORS middleware.",
    )
    log_level: str = Field(
        default=DEFAULT_LOG_LEVEL,
        alias="LOG_LEVEL",
        description="Root logging level (e.g. INFO, DEBUG, WARNING).",
    )

    @property
    def normalized_upstream_base_url(self) -> str:
        """Return the upstream base URL without a trailing slash."""

        return self.upstream_base_url.strip().rstrip("/")

    @property
    def cors_allow_origins(self) -> list[str]:
        """Return normalised CORS origins supplied via environment variables."""

        if not self.cors_allow_origins_raw:
            return []

        origins = [
            _normalize_origin(origin)
            for origin in self.cors_allow_origins_raw.split(",")
            if origin.strip()
        ]
        return [origin for origin in origins if origin]

    @property
    def log_level_numeric(self) -> int:
        """Translate ``log_level`` into the numeric constant expected by logging."""

        candidate = logging.getLevelName(self.log_level.upper())
        if isinstance(candidate, int):
            return candidate
        return logging.INFO

    def optional_config_warnings(self) -> list[str]:
        """Return human-readable warnings for unset optional configuration."""

        warnings: list[str] = []

        if not self.cors_allow_origins and not self.cors_allow_origin_regex:
            warnings.append(
                "CORS_ALLOW_ORIGINS is not set - browser clients on other origins "
                "will be rejected"
            )

        if self.upstream_timeout_seconds is None:
            warnings.append(
                "UPSTREAM_TIMEOUT_SECONDS is not set - using the HTTP client's "
                "default timeout for submissions API calls"
            )

        return warnings


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Return a cached instance of :class:`AppSettings`."""

    return AppSettings()


__all__ = [
    "AppSettings",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_UPSTREAM_BASE_URL",
    "get_settings",
]
