# src/finfiles/domain/interfaces/gateways/edgar_facts_gateway.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
"""Domain-level EDGAR facts gateway protocol.

Purpose:
    Define the contract that application use-cases rely on for EDGAR data:

        * The bulk ticker directory (ticker → CIK).
        * A company's recent filing index.
        * A company's XBRL company facts document.

Implementations:
    :class:`finfiles.adapters.gateways.edgar_facts_gateway.HttpEdgarFactsGateway`
    maps SEC JSON payloads into the domain entities below.

Layer:
    domain/interfaces/gateways
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from finfiles.domain.entities.company_ticker import CompanyTickerEntry
from finfiles.domain.entities.fact_document import FactDocument
from finfiles.domain.entities.filing_index import FilingIndex


class EdgarFactsGateway(Protocol):
    """Protocol for EDGAR company-facts providers.

    Implementations raise only Finfiles domain errors (``NetworkFailure``,
    ``ParseFailure``); transport and validation exception types stay behind
    the adapter boundary.
    """

    async def fetch_ticker_directory(self) -> Sequence[CompanyTickerEntry]:
        """Fetch every ticker → CIK entry of the bulk directory."""

    async def fetch_filing_index(self, cik: str) -> FilingIndex:
        """Fetch the recent-filings index for a CIK."""

    async def fetch_company_facts(self, cik: str) -> FactDocument:
        """Fetch the company facts document for a CIK."""
