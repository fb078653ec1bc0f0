# src/finfiles/dependencies/pipeline.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
"""Dependency wiring for the ingestion pipeline.

Purpose:
    Build the concrete collaborators (EDGAR client, gateway, audit sink,
    analysis backends) from settings, and expose one coroutine that runs the
    whole ticker → fact table pipeline with a correctly closed HTTP client.

Layer:
    dependencies
"""

from __future__ import annotations

import uuid
from functools import lru_cache

from cachetools import TTLCache

from finfiles.adapters.backends.analysis_backends import default_backends, select_backend
from finfiles.adapters.gateways.edgar_facts_gateway import (
    HttpEdgarFactsGateway,
    build_ticker_directory_cache,
)
from finfiles.application.use_cases.pipeline.load_fact_table import (
    LoadedFactTable,
    LoadFactTableRequest,
    LoadFactTableUseCase,
)
from finfiles.config.settings import Settings, get_settings
from finfiles.domain.entities.company_ticker import CompanyTickerEntry
from finfiles.domain.interfaces.analysis_backend import AnalysisBackend
from finfiles.infrastructure.audit.jsonl_audit_sink import JsonlAuditSink
from finfiles.infrastructure.external_apis.edgar.client import EdgarClient
from finfiles.infrastructure.external_apis.edgar.settings import EdgarSettings
from finfiles.infrastructure.logging.logger import set_request_context
from finfiles.infrastructure.resilience.retry import RetryPolicy


@lru_cache(maxsize=8)
def _shared_directory_cache(ttl_s: float) -> TTLCache[str, tuple[CompanyTickerEntry, ...]]:
    """Process-wide ticker directory cache, one per TTL value."""
    return build_ticker_directory_cache(ttl_s)


def build_edgar_client(
    edgar_settings: EdgarSettings | None = None,
    *,
    retry_policy: RetryPolicy | None = None,
) -> EdgarClient:
    """Return an :class:`EdgarClient` that owns its HTTP connection pool."""
    return EdgarClient(edgar_settings or EdgarSettings(), retry_policy=retry_policy)


def build_gateway(client: EdgarClient, settings: Settings) -> HttpEdgarFactsGateway:
    """Return the HTTP gateway, with the directory cache when enabled."""
    cache = (
        _shared_directory_cache(settings.ticker_cache_ttl_s)
        if settings.ticker_cache_ttl_s is not None
        else None
    )
    return HttpEdgarFactsGateway(client, directory_cache=cache)


def build_audit_sink(settings: Settings) -> JsonlAuditSink:
    return JsonlAuditSink(settings.audit_log_path)


def build_backend(name: str | None = None, *, settings: Settings | None = None) -> AnalysisBackend:
    """Return the analysis backend called ``name`` (default from settings).

    Raises:
        UnknownBackend: If the name is not registered.
    """
    settings = settings or get_settings()
    return select_backend(name or settings.default_backend, default_backends())


async def load_company_table(
    ticker: str,
    *,
    settings: Settings | None = None,
    edgar_settings: EdgarSettings | None = None,
    retry_policy: RetryPolicy | None = None,
) -> LoadedFactTable:
    """Run the pipeline for ``ticker`` and close the HTTP client afterwards.

    Each call gets a fresh correlation id for its log lines and outbound
    ``X-Request-ID`` headers.

    Raises:
        FinfilesError: Any pipeline failure (see :class:`LoadFactTableUseCase`).
    """
    settings = settings or get_settings()
    set_request_context(request_id=uuid.uuid4().hex)
    try:
        async with build_edgar_client(edgar_settings, retry_policy=retry_policy) as client:
            use_case = LoadFactTableUseCase(
                build_gateway(client, settings),
                build_audit_sink(settings),
            )
            return await use_case.execute(
                LoadFactTableRequest(ticker=ticker, user=settings.user)
            )
    finally:
        set_request_context(request_id=None)
