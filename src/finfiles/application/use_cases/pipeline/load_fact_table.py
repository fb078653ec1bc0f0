# src/finfiles/application/use_cases/pipeline/load_fact_table.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
"""
Use Case: Load Fact Table

Purpose:
    Run the whole ingestion pipeline for one ticker: audit the request,
    resolve the ticker, fetch the company facts and normalize them into a
    :class:`FactTable`.

Layer: application/use_cases

Notes:
    Each call builds its own table; nothing is shared between calls except
    what the gateway chooses to cache.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from finfiles.application.use_cases.pipeline.fetch_company_facts import (
    FetchCompanyFactsUseCase,
)
from finfiles.application.use_cases.pipeline.resolve_ticker import ResolveTickerUseCase
from finfiles.domain.entities.company_ticker import CompanyTickerEntry
from finfiles.domain.entities.fact_table import FactTable
from finfiles.domain.exceptions.base import FinfilesError
from finfiles.domain.interfaces.audit_sink import AuditEntry, AuditSink
from finfiles.domain.interfaces.gateways.edgar_facts_gateway import EdgarFactsGateway
from finfiles.domain.services.fact_normalizer import FactNormalizer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadFactTableRequest:
    """Input of :class:`LoadFactTableUseCase`.

    Attributes:
        ticker: Ticker symbol as entered by the user.
        user: User recorded in the audit entry.
    """

    ticker: str
    user: str


@dataclass(frozen=True)
class LoadedFactTable:
    """Output of :class:`LoadFactTableUseCase`."""

    company: CompanyTickerEntry
    table: FactTable


class LoadFactTableUseCase:
    """Ticker → normalized fact table.

    Args:
        gateway: EDGAR facts gateway.
        audit_sink: Receives one ``fetch_filings`` entry per call.
        normalizer: Fact normalizer; defaults to the us-gaap, four-period
            configuration.
    """

    def __init__(
        self,
        gateway: EdgarFactsGateway,
        audit_sink: AuditSink,
        normalizer: FactNormalizer | None = None,
    ) -> None:
        self._resolve = ResolveTickerUseCase(gateway)
        self._fetch = FetchCompanyFactsUseCase(gateway)
        self._audit_sink = audit_sink
        self._normalizer = normalizer or FactNormalizer()

    async def execute(self, request: LoadFactTableRequest) -> LoadedFactTable:
        """Load the fact table for ``request.ticker``.

        Raises:
            TickerNotFound: Ticker blank or unknown.
            NoQualifyingFiling: No 10-K or 10-Q on file.
            NoData: No usable us-gaap observations.
            NetworkFailure: Transport failure or HTTP error status.
            ParseFailure: Malformed SEC payload.
        """
        ticker = request.ticker.strip()
        await self._audit_sink.record(AuditEntry.fetch_filings(request.user, [ticker]))
        logger.info("pipeline.load.start", extra={"extra": {"ticker": ticker}})

        try:
            company = await self._resolve.execute(ticker)
            document = await self._fetch.execute(company.cik)
            table = self._normalizer.normalize(document)
        except FinfilesError as exc:
            logger.warning(
                "pipeline.load.failed",
                extra={"extra": {"ticker": ticker, "code": exc.code}},
            )
            raise

        logger.info(
            "pipeline.load.success",
            extra={
                "extra": {
                    "ticker": ticker,
                    "cik": company.cik,
                    "periods": table.period_count,
                    "metrics": len(table.metric_names),
                }
            },
        )
        return LoadedFactTable(company=company, table=table)
