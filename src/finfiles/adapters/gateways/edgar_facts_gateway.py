# src/finfiles/adapters/gateways/edgar_facts_gateway.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
"""HTTP-backed EDGAR facts gateway.

Purpose:
    Implement :class:`EdgarFactsGateway` on top of :class:`EdgarClient`:
    fetch SEC JSON, validate it with the payload schemas and map it into
    domain entities.

Layer:
    adapters/gateways

Notes:
    - pydantic ``ValidationError`` is translated into ``ParseFailure`` here
      and never reaches use cases.
    - The ticker directory can optionally be cached with a
      ``cachetools.TTLCache``. Without a cache every call refetches.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Final, TypeVar

from cachetools import TTLCache
from pydantic import BaseModel, ValidationError

from finfiles.adapters.schemas.edgar_payloads import (
    CompanyFactsPayload,
    SubmissionsPayload,
    TickerDirectoryPayload,
)
from finfiles.domain.entities.company_ticker import CompanyTickerEntry
from finfiles.domain.entities.fact_document import FactDocument, FactObservation
from finfiles.domain.entities.filing_index import FilingIndex
from finfiles.domain.exceptions.edgar import ParseFailure
from finfiles.infrastructure.external_apis.edgar.client import EdgarClient

logger = logging.getLogger(__name__)

PayloadT = TypeVar("PayloadT", bound=BaseModel)

_DIRECTORY_CACHE_KEY: Final[str] = "company_tickers"


def build_ticker_directory_cache(ttl_s: float) -> TTLCache[str, tuple[CompanyTickerEntry, ...]]:
    """Return a single-slot TTL cache for the parsed ticker directory."""
    return TTLCache(maxsize=1, ttl=ttl_s)


def _validate(model: type[PayloadT], raw: Mapping[str, Any], *, document: str) -> PayloadT:
    """Validate ``raw`` against ``model`` or raise ``ParseFailure``."""
    try:
        return model.model_validate(raw)
    except ValidationError as exc:
        raise ParseFailure(
            f"Failed to parse {document}.",
            details={"document": document, "errors": exc.error_count()},
        ) from exc


class HttpEdgarFactsGateway:
    """EDGAR facts gateway backed by the SEC JSON endpoints.

    Args:
        client: EDGAR transport client.
        directory_cache: Optional cache for the ticker directory. Sharing one
            cache between gateways shares the directory between pipelines.
    """

    def __init__(
        self,
        client: EdgarClient,
        *,
        directory_cache: TTLCache[str, tuple[CompanyTickerEntry, ...]] | None = None,
    ) -> None:
        self._client = client
        self._directory_cache = directory_cache

    async def fetch_ticker_directory(self) -> Sequence[CompanyTickerEntry]:
        """Fetch and parse the bulk ticker directory."""
        if self._directory_cache is not None:
            cached = self._directory_cache.get(_DIRECTORY_CACHE_KEY)
            if cached is not None:
                logger.debug("edgar.ticker_directory.cache_hit")
                return cached

        raw = await self._client.fetch_company_tickers()
        payload = _validate(TickerDirectoryPayload, raw, document="ticker directory")
        entries = tuple(
            CompanyTickerEntry(cik=row.cik_str, ticker=row.ticker, title=row.title)
            for row in payload.root.values()
        )

        if self._directory_cache is not None:
            self._directory_cache[_DIRECTORY_CACHE_KEY] = entries
        return entries

    async def fetch_filing_index(self, cik: str) -> FilingIndex:
        """Fetch the recent filings of ``cik`` as a :class:`FilingIndex`."""
        raw = await self._client.fetch_company_submissions(cik)
        payload = _validate(SubmissionsPayload, raw, document="company submissions")
        recent = payload.filings.recent
        return FilingIndex.from_columns(
            cik=cik,
            accession_numbers=recent.accession_number,
            forms=recent.form,
        )

    async def fetch_company_facts(self, cik: str) -> FactDocument:
        """Fetch the company facts of ``cik`` as a :class:`FactDocument`."""
        raw = await self._client.fetch_company_facts(cik)
        payload = _validate(CompanyFactsPayload, raw, document="company facts")

        facts = {
            taxonomy: {
                metric: {
                    unit: tuple(
                        FactObservation(fiscal_period=row.fiscal_period, value=row.value)
                        for row in rows
                    )
                    for unit, rows in metric_facts.units.items()
                }
                for metric, metric_facts in metrics.items()
            }
            for taxonomy, metrics in payload.facts.items()
        }
        return FactDocument(cik=cik, entity_name=payload.entity_name, facts=facts)
