# tests/conftest.py
from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest

from finfiles.config.settings import get_settings
from finfiles.domain.entities.fact_table import FactTable
from finfiles.infrastructure.external_apis.edgar.settings import EdgarSettings
from finfiles.infrastructure.resilience.retry import RetryPolicy

_FINFILES_ENV = (
    "ENVIRONMENT",
    "LOG_LEVEL",
    "FINFILES_USER",
    "FINFILES_AUDIT_LOG_PATH",
    "FINFILES_DEFAULT_BACKEND",
    "FINFILES_TICKER_CACHE_TTL_S",
    "EDGAR_BASE_URL",
    "EDGAR_TICKERS_URL",
    "EDGAR_USER_AGENT",
    "EDGAR_TIMEOUT_S",
    "EDGAR_MAX_RETRIES",
    "EDGAR_RETRY_DELAY_S",
    "EDGAR_RETRY_COMPANY_FACTS",
    "REQUEST_ID",
)


@pytest.fixture(autouse=True)
def _isolated_env(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> Generator[None, None, None]:
    """Run every test with a clean configuration and no .env file."""
    for key in _FINFILES_ENV:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Generator[None, None, None]:
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


# --------------------------------------------------------------------------- #
# EDGAR transport
# --------------------------------------------------------------------------- #


@pytest.fixture
def edgar_settings() -> EdgarSettings:
    return EdgarSettings()


@pytest.fixture
def no_wait_retry() -> RetryPolicy:
    """Two retries, no sleeping."""
    return RetryPolicy.fixed(retries=2, delay_s=0.0)


@pytest.fixture
def ticker_directory_payload() -> dict[str, Any]:
    return {
        "0": {"cik_str": 320193, "ticker": "AAPL", "title": "Apple Inc."},
        "1": {"cik_str": 789019, "ticker": "MSFT", "title": "MICROSOFT CORP"},
        "2": {"cik_str": "1652044", "ticker": "GOOGL", "title": "Alphabet Inc."},
    }


@pytest.fixture
def submissions_payload() -> dict[str, Any]:
    return {
        "cik": "320193",
        "name": "Apple Inc.",
        "filings": {
            "recent": {
                "accessionNumber": [
                    "0000320193-24-000081",
                    "0000320193-24-000069",
                    "0000320193-24-000010",
                ],
                "form": ["8-K", "10-Q", "10-K"],
                "filingDate": ["2024-08-01", "2024-08-02", "2024-02-02"],
            }
        },
    }


@pytest.fixture
def company_facts_payload() -> dict[str, Any]:
    return {
        "cik": 320193,
        "entityName": "Apple Inc.",
        "facts": {
            "dei": {
                "EntityCommonStockSharesOutstanding": {
                    "units": {"shares": [{"fp": "Q3", "val": 15_000_000_000}]}
                }
            },
            "us-gaap": {
                "Revenues": {
                    "label": "Revenues",
                    "units": {
                        "USD": [
                            {"fp": "Q1", "val": 90_000_000_000, "form": "10-Q"},
                            {"fp": "Q2", "val": 85_000_000_000, "form": "10-Q"},
                            {"fp": "Q3", "val": 80_000_000_000, "form": "10-Q"},
                        ]
                    },
                },
                "NetIncomeLoss": {
                    "units": {
                        "USD": [
                            {"fp": "Q2", "val": 21_000_000_000},
                            {"fp": "Q3", "val": 20_000_000_000},
                            {"val": 1},
                        ]
                    }
                },
            },
        },
    }


@pytest.fixture
def sample_table() -> FactTable:
    return FactTable.from_columns(
        ["Q4", "Q3", "Q2", "Q1"],
        {
            "Revenues_USD": [1.0, 2.0, 3.0, 4.0],
            "NetIncomeLoss_USD": [0.5, 0.5, 0.5, 0.5],
        },
    )
