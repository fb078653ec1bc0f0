# src/finfiles/domain/exceptions/edgar.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
"""EDGAR domain exceptions.

Purpose:
    Provide EDGAR-specific error types for the ingestion pipeline: transport
    failures, malformed payloads, unresolved tickers, missing filings and
    empty normalization results.

Layer:
    domain

Notes:
    - Infrastructure and adapters translate httpx and pydantic errors into
      these types; transport exception types never cross that boundary.
"""

from __future__ import annotations

from finfiles.domain.exceptions.base import FinfilesError


class EdgarError(FinfilesError):
    """Base class for EDGAR-related domain errors."""

    code = "EDGAR_ERROR"


class NetworkFailure(EdgarError):
    """Raised on connection failures, timeouts or unusable HTTP statuses."""

    code = "NETWORK_FAILURE"


class ParseFailure(EdgarError):
    """Raised when an EDGAR payload is not valid JSON or has an unexpected shape."""

    code = "PARSE_FAILURE"


class TickerNotFound(EdgarError):
    """Raised when a ticker does not match any entry in the ticker directory."""

    code = "TICKER_NOT_FOUND"


class NoQualifyingFiling(EdgarError):
    """Raised when a company has no 10-K or 10-Q in its recent filings."""

    code = "NO_QUALIFYING_FILING"


class NoData(EdgarError):
    """Raised when normalization yields zero reporting periods."""

    code = "NO_DATA"
