# src/finfiles/infrastructure/external_apis/edgar/settings.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
"""EDGAR transport client settings.

Purpose:
    Provide Pydantic-based configuration for the EDGAR HTTP client, including
    endpoint URLs, user agent, timeout and retry policy.

Layer:
    infrastructure

Notes:
    - Values are sourced from environment variables prefixed with ``EDGAR_``.
    - The defaults reproduce the SEC's public endpoints and the pipeline's
      reference retry behavior (2 retries, fixed 2 second wait, 20 second
      timeout).
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EdgarSettings(BaseSettings):
    """Configuration for the EDGAR HTTP client.

    Environment variables (with ``model_config.env_prefix``):

    * ``EDGAR_BASE_URL``
    * ``EDGAR_TICKERS_URL``
    * ``EDGAR_USER_AGENT``
    * ``EDGAR_TIMEOUT_S``
    * ``EDGAR_MAX_RETRIES``
    * ``EDGAR_RETRY_DELAY_S``
    * ``EDGAR_RETRY_COMPANY_FACTS``
    """

    base_url: str = Field(
        "https://data.sec.gov",
        description="Base URL for the SEC submissions and XBRL APIs.",
    )
    tickers_url: str = Field(
        "https://www.sec.gov/files/company_tickers.json",
        description="Full URL of the bulk ticker → CIK directory.",
    )
    user_agent: str = Field(
        "FINFILES AI/1.0 (contact: ai@finfiles.ai)",
        description=(
            "User agent string sent to EDGAR. Must follow SEC guidelines and "
            "include contact details."
        ),
    )
    timeout_s: float = Field(
        20.0,
        gt=0,
        description="Per-request timeout in seconds for every outbound call.",
    )
    max_retries: int = Field(
        2,
        ge=0,
        description="Retries after the first attempt for connection-level failures.",
    )
    retry_delay_s: float = Field(
        2.0,
        ge=0,
        description="Fixed wait in seconds between attempts.",
    )
    retry_company_facts: bool = Field(
        False,
        description=(
            "Also retry the company facts download. Off by default: only the "
            "ticker directory and filing index are retried."
        ),
    )

    model_config: SettingsConfigDict = SettingsConfigDict(
        env_prefix="EDGAR_",
        env_nested_delimiter="__",
        extra="ignore",
    )
