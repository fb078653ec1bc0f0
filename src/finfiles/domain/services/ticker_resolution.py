# src/finfiles/domain/services/ticker_resolution.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
"""Ticker → CIK resolution over a loaded ticker directory."""

from __future__ import annotations

from collections.abc import Iterable

from finfiles.domain.entities.company_ticker import CompanyTickerEntry
from finfiles.domain.exceptions.edgar import TickerNotFound


def find_company(entries: Iterable[CompanyTickerEntry], ticker: str) -> CompanyTickerEntry:
    """Return the directory entry whose ticker equals ``ticker`` (case-insensitive).

    Raises:
        TickerNotFound: If no entry matches.
    """
    wanted = ticker.strip()
    for entry in entries:
        if entry.matches(wanted):
            return entry
    raise TickerNotFound(f"Ticker not found: {wanted}", details={"ticker": wanted})
