# src/finfiles/application/use_cases/pipeline/fetch_company_facts.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
"""
Use Case: Fetch Company Facts

Purpose:
    Confirm that a filer has at least one periodic report (10-K or 10-Q) in
    its recent filings, then fetch its XBRL company facts document.

Layer: application/use_cases
"""

from __future__ import annotations

import logging

from finfiles.domain.entities.fact_document import FactDocument
from finfiles.domain.exceptions.edgar import NoQualifyingFiling
from finfiles.domain.interfaces.gateways.edgar_facts_gateway import EdgarFactsGateway

logger = logging.getLogger(__name__)


class FetchCompanyFactsUseCase:
    """Fetch the company facts of a CIK that files periodic reports.

    Args:
        gateway: EDGAR facts gateway.
    """

    def __init__(self, gateway: EdgarFactsGateway) -> None:
        self._gateway = gateway

    async def execute(self, cik: str) -> FactDocument:
        """Return the company facts document for ``cik``.

        Raises:
            NoQualifyingFiling: If no 10-K or 10-Q is listed. The facts
                document is not fetched in that case.
            NetworkFailure: On transport failures or HTTP error statuses.
            ParseFailure: On malformed payloads.
        """
        index = await self._gateway.fetch_filing_index(cik)
        latest = index.latest_qualifying()
        if latest is None:
            raise NoQualifyingFiling(
                "No 10-K or 10-Q filings found for this company.",
                details={"cik": cik, "filings": len(index.entries)},
            )
        logger.debug(
            "edgar.filing_index.qualified",
            extra={
                "extra": {
                    "cik": cik,
                    "accession_number": latest.accession_number,
                    "form_type": latest.form_type,
                }
            },
        )
        return await self._gateway.fetch_company_facts(cik)
