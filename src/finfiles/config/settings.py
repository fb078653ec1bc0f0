# src/finfiles/config/settings.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
"""Finfiles Configuration (Pydantic Settings, v2)

Summary:
    Typed, validated application configuration. Transport-level EDGAR knobs
    live in :mod:`finfiles.infrastructure.external_apis.edgar.settings`; this
    module covers everything else (environment, logging, audit, analysis
    backend selection, optional caching).

Design:
    - Pydantic v2 BaseSettings reading the process environment and ``.env``.
    - Explicit field declarations with constrained types and ranges.
    - Singleton accessor `get_settings()` with LRU cache.
    - Safe, structured logging (no secrets).
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import lru_cache

from pydantic import Field, ValidationError, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Environment(str, Enum):
    """Logical deployment environment."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """Typed application configuration for Finfiles."""

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Logical deployment environment.",
        validation_alias="ENVIRONMENT",
    )

    log_level: str = Field(
        default="INFO",
        description="Root log level name.",
        validation_alias="LOG_LEVEL",
    )

    user: str = Field(
        default="anonymous",
        min_length=1,
        description="User name written to audit entries.",
        validation_alias="FINFILES_USER",
    )

    audit_log_path: str = Field(
        default="finfiles_audit.log",
        min_length=1,
        description="JSON Lines file receiving audit entries.",
        validation_alias="FINFILES_AUDIT_LOG_PATH",
    )

    default_backend: str = Field(
        default="FINFILES AI",
        min_length=1,
        description="Analysis backend used when none is selected explicitly.",
        validation_alias="FINFILES_DEFAULT_BACKEND",
    )

    ticker_cache_ttl_s: float | None = Field(
        default=None,
        description=(
            "Seconds to keep the SEC ticker directory in memory between "
            "resolutions. Unset disables caching."
        ),
        validation_alias="FINFILES_TICKER_CACHE_TTL_S",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def _validate_levels_and_cache(self) -> Settings:
        """Normalize the log level and validate the cache TTL.

        Raises:
            ValueError: If the log level is unknown or the TTL is not positive.
        """
        level = self.log_level.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown LOG_LEVEL: {self.log_level!r}")
        self.log_level = level

        if self.ticker_cache_ttl_s is not None and self.ticker_cache_ttl_s <= 0:
            raise ValueError("FINFILES_TICKER_CACHE_TTL_S must be positive when set.")
        return self

    @property
    def ticker_cache_enabled(self) -> bool:
        return self.ticker_cache_ttl_s is not None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings singleton.

    Returns:
        Settings: Validated application settings.

    Raises:
        RuntimeError: If configuration is invalid.
    """
    try:
        settings = Settings()
    except ValidationError as exc:
        logger.exception("Invalid application configuration")
        raise RuntimeError(f"Invalid configuration: {exc}") from exc

    logger.info(
        "settings.initialized",
        extra={
            "extra": {
                "environment": settings.environment.value,
                "log_level": settings.log_level,
                "default_backend": settings.default_backend,
                "ticker_cache_enabled": settings.ticker_cache_enabled,
            }
        },
    )
    return settings
