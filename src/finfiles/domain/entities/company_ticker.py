# src/finfiles/domain/entities/company_ticker.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
"""Company ticker directory entry.

Purpose:
    Represent one row of the SEC bulk ticker directory: the mapping between
    an exchange ticker and the filer's Central Index Key (CIK).

Layer:
    domain
"""

from __future__ import annotations

from dataclasses import dataclass

from finfiles.domain.exceptions.edgar import ParseFailure


@dataclass(frozen=True)
class CompanyTickerEntry:
    """Domain entity for a single ticker → CIK mapping.

    Args:
        cik: Central Index Key as a digit string, without zero padding.
        ticker: Exchange trading symbol as published by the SEC.
        title: Company display name.

    Raises:
        ParseFailure: If the CIK is not a non-empty digit string or the
            ticker is blank.
    """

    cik: str
    ticker: str
    title: str

    def __post_init__(self) -> None:
        """Validate entry invariants."""
        cik = self.cik.strip()
        if not cik.isdigit():
            raise ParseFailure(
                "Ticker directory entry has a non-numeric CIK.",
                details={"cik": self.cik, "ticker": self.ticker},
            )
        if not self.ticker.strip():
            raise ParseFailure(
                "Ticker directory entry has an empty ticker.",
                details={"cik": self.cik},
            )
        object.__setattr__(self, "cik", cik)

    def matches(self, ticker: str) -> bool:
        """Return True if ``ticker`` equals this entry's ticker, ignoring case."""
        return self.ticker.casefold() == ticker.casefold()
