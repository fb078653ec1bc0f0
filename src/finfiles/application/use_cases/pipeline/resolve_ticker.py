# src/finfiles/application/use_cases/pipeline/resolve_ticker.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
"""
Use Case: Resolve Ticker

Purpose:
    Map a ticker symbol to the issuer's SEC directory entry (and thereby its
    CIK) using the bulk ticker directory.

Layer: application/use_cases
"""

from __future__ import annotations

import logging

from finfiles.domain.entities.company_ticker import CompanyTickerEntry
from finfiles.domain.exceptions.edgar import TickerNotFound
from finfiles.domain.interfaces.gateways.edgar_facts_gateway import EdgarFactsGateway
from finfiles.domain.services.ticker_resolution import find_company

logger = logging.getLogger(__name__)


class ResolveTickerUseCase:
    """Resolve a ticker symbol to its directory entry.

    Args:
        gateway: EDGAR facts gateway providing the ticker directory.
    """

    def __init__(self, gateway: EdgarFactsGateway) -> None:
        self._gateway = gateway

    async def execute(self, ticker: str) -> CompanyTickerEntry:
        """Return the directory entry for ``ticker``.

        Raises:
            TickerNotFound: If the ticker is blank or not in the directory.
                Blank tickers fail without fetching the directory.
            NetworkFailure: If the directory cannot be fetched.
            ParseFailure: If the directory is malformed.
        """
        wanted = ticker.strip()
        if not wanted:
            raise TickerNotFound("Ticker must not be empty.", details={"ticker": ticker})

        entries = await self._gateway.fetch_ticker_directory()
        company = find_company(entries, wanted)
        logger.info(
            "edgar.ticker.resolved",
            extra={"extra": {"ticker": wanted, "cik": company.cik}},
        )
        return company
