# src/finfiles/infrastructure/external_apis/edgar/client.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
"""EDGAR transport client: bounded retries, instrumented, async.

This transport is framework-agnostic and provides:

* Async HTTP (httpx) with a per-request timeout.
* Fixed-delay retries on connection-level failures only (bounded).
* Deterministic mapping to Finfiles domain errors.
* Prometheus-style metrics.

Endpoints:
    * fetch_company_tickers: www.sec.gov/files/company_tickers.json (retried)
    * fetch_company_submissions: submissions/CIK##########.json (retried)
    * fetch_company_facts: api/xbrl/companyfacts/CIK##########.json
      (retried only when ``EdgarSettings.retry_company_facts`` is set)

Notes:
    * CIKs are normalized to 10-digit, zero-padded strings; the SEC's
      addressing scheme requires it.
    * HTTP error statuses and undecodable bodies fail immediately.
    * Caller-facing exceptions are always Finfiles domain exceptions; httpx
      types are never allowed to cross the boundary.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from contextlib import suppress
from types import TracebackType
from typing import Any, Final, cast

import httpx

from finfiles.domain.exceptions.edgar import NetworkFailure, ParseFailure
from finfiles.infrastructure.external_apis.edgar.settings import EdgarSettings
from finfiles.infrastructure.external_apis.edgar.types import (
    EdgarCompanyFactsRoot,
    EdgarSubmissionsRoot,
    EdgarTickerDirectory,
)
from finfiles.infrastructure.logging.logger import get_request_id
from finfiles.infrastructure.observability.metrics_edgar import (
    get_edgar_errors_total,
    get_edgar_http_status_total,
    get_edgar_latency_seconds,
    get_edgar_retries_total,
)
from finfiles.infrastructure.resilience.retry import RetryPolicy, retry_async

logger = logging.getLogger(__name__)

_CIK_WIDTH: Final[int] = 10


class EdgarClient:
    """Transport client for the SEC EDGAR JSON endpoints."""

    def __init__(
        self,
        settings: EdgarSettings,
        *,
        http: httpx.AsyncClient | None = None,
        retry_policy: RetryPolicy | None = None,
    ) -> None:
        """Initialize the transport client.

        Args:
            settings: Provider settings loaded from environment or DI.
            http: Optional shared ``httpx.AsyncClient``. If omitted, a client
                is created and owned by this instance.
            retry_policy: Optional retry configuration; defaults to a fixed
                policy built from ``settings``.
        """
        self._settings = settings
        self._base_url = str(settings.base_url).rstrip("/")
        self._timeout = float(settings.timeout_s)

        default_headers = {
            "Accept": "application/json",
            "User-Agent": settings.user_agent,
        }
        self._owns_client = http is None
        self._client = http or httpx.AsyncClient(
            timeout=self._timeout,
            headers=default_headers,
        )
        if http is not None:
            for key, value in default_headers.items():
                self._client.headers.setdefault(key, value)

        self._retry = retry_policy or RetryPolicy.fixed(
            retries=settings.max_retries,
            delay_s=settings.retry_delay_s,
        )

        # Metrics handles.
        self._latency = get_edgar_latency_seconds()
        self._errors = get_edgar_errors_total()
        self._status_total = get_edgar_http_status_total()
        self._retries_total = get_edgar_retries_total()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance owns it."""
        if self._owns_client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> EdgarClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    async def fetch_company_tickers(self) -> EdgarTickerDirectory:
        """Fetch the bulk ticker → CIK directory."""
        payload = await self._get_json(
            self._settings.tickers_url,
            endpoint="company_tickers",
            retry=True,
        )
        return cast(EdgarTickerDirectory, payload)

    async def fetch_company_submissions(self, cik: str) -> EdgarSubmissionsRoot:
        """Fetch the company submissions (filing index) document for a CIK."""
        url = f"{self._base_url}/submissions/CIK{self.normalize_cik(cik)}.json"
        payload = await self._get_json(url, endpoint="company_submissions", retry=True)
        return cast(EdgarSubmissionsRoot, payload)

    async def fetch_company_facts(self, cik: str) -> EdgarCompanyFactsRoot:
        """Fetch the XBRL company facts document for a CIK."""
        url = f"{self._base_url}/api/xbrl/companyfacts/CIK{self.normalize_cik(cik)}.json"
        payload = await self._get_json(
            url,
            endpoint="company_facts",
            retry=self._settings.retry_company_facts,
        )
        return cast(EdgarCompanyFactsRoot, payload)

    @staticmethod
    def normalize_cik(cik: str) -> str:
        """Normalize a CIK string to a 10-digit, zero-padded value.

        Non-digit characters are stripped; remaining digits are left-padded
        with zeros up to 10 characters.

        Raises:
            ParseFailure: If no digits remain after normalization.
        """
        digits = "".join(ch for ch in str(cik) if ch.isdigit())
        if not digits:
            raise ParseFailure(
                "CIK must contain at least one digit.",
                details={"cik": cik},
            )
        return digits.zfill(_CIK_WIDTH)

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    async def _get_json(self, url: str, *, endpoint: str, retry: bool) -> Mapping[str, Any]:
        """Perform a GET request and return a parsed JSON object.

        Args:
            url: Absolute request URL.
            endpoint: Logical endpoint name for metrics and logs.
            retry: Whether connection-level failures are retried.

        Raises:
            NetworkFailure: On transport failures, timeouts or HTTP error statuses.
            ParseFailure: On non-JSON bodies or non-object JSON.
        """
        headers: dict[str, str] = {}
        request_id = get_request_id()
        if request_id:
            headers["X-Request-ID"] = request_id

        async def _call() -> httpx.Response:
            """Execute a single HTTP GET; transport errors propagate for retry."""
            return await self._client.get(url, headers=headers, timeout=self._timeout)

        def _retry_predicate(exc: Exception) -> bool:
            """Return True for connection-level failures only."""
            if not retry or not isinstance(exc, httpx.TransportError):
                return False
            with suppress(Exception):
                self._retries_total.labels(endpoint, type(exc).__name__).inc()
            return True

        policy = self._retry if retry else RetryPolicy.fixed(retries=0, delay_s=0.0)
        start = time.perf_counter()
        error_reason: str | None = None

        try:
            try:
                response = await retry_async(
                    _call,
                    policy=policy,
                    retry_on=_retry_predicate,
                    label=f"edgar.{endpoint}",
                )
            except httpx.TimeoutException as exc:
                raise NetworkFailure(
                    "EDGAR request timed out.",
                    details={"endpoint": endpoint, "url": url, "timeout_s": self._timeout},
                ) from exc
            except httpx.HTTPError as exc:
                raise NetworkFailure(
                    "EDGAR transport failure.",
                    details={"endpoint": endpoint, "url": url, "error": str(exc)},
                ) from exc
            return self._handle_json_response(response, endpoint=endpoint, url=url)
        except (NetworkFailure, ParseFailure) as exc:
            error_reason = type(exc).__name__
            logger.warning(
                "edgar.http.failed",
                extra={"extra": {"endpoint": endpoint, "url": url, "reason": error_reason}},
            )
            raise
        finally:
            elapsed = time.perf_counter() - start
            outcome = "error" if error_reason else "success"
            with suppress(Exception):
                self._latency.labels(endpoint=endpoint, outcome=outcome).observe(elapsed)
                if error_reason:
                    self._errors.labels(endpoint=endpoint, reason=error_reason).inc()

    def _handle_json_response(
        self,
        response: httpx.Response,
        *,
        endpoint: str,
        url: str,
    ) -> Mapping[str, Any]:
        """Map an HTTP response into a JSON object or domain error."""
        with suppress(Exception):
            self._status_total.labels(endpoint, str(response.status_code)).inc()

        if response.status_code >= 400:
            raise NetworkFailure(
                f"EDGAR returned HTTP {response.status_code}.",
                details={"endpoint": endpoint, "url": url, "status": response.status_code},
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise ParseFailure(
                "EDGAR returned a non-JSON response.",
                details={"endpoint": endpoint, "url": url},
            ) from exc

        if not isinstance(payload, Mapping):
            raise ParseFailure(
                "EDGAR returned an unexpected JSON shape.",
                details={"endpoint": endpoint, "url": url, "type": type(payload).__name__},
            )
        return payload
