# src/finfiles/infrastructure/external_apis/edgar/types.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
"""
EDGAR Types.

Purpose:
    Typed response fragments for the three EDGAR endpoints the pipeline
    consumes (ticker directory, company submissions, company facts).

Layer:
    infrastructure

Notes:
    These are intentionally partial; only fields read by the facts gateway
    are typed. Shape validation happens in the adapters layer.
"""

from __future__ import annotations

from typing import TypedDict


class EdgarTickerRow(TypedDict):
    """One value of the ``company_tickers.json`` mapping."""

    cik_str: int | str
    ticker: str
    title: str


#: ``company_tickers.json`` is keyed by arbitrary row indices ("0", "1", ...).
EdgarTickerDirectory = dict[str, EdgarTickerRow]


class EdgarSubmissionsRecentSection(TypedDict, total=False):
    """Subset of the 'recent' section from submissions JSON."""

    accessionNumber: list[str]
    form: list[str]


class EdgarSubmissionsRoot(TypedDict, total=False):
    """Subset of the SEC submissions JSON used by the gateway."""

    cik: str
    name: str
    filings: dict[str, EdgarSubmissionsRecentSection]


class EdgarFactRow(TypedDict, total=False):
    """One observation inside ``facts.<taxonomy>.<metric>.units.<unit>``."""

    fp: str | None
    val: float | None


class EdgarCompanyFactsRoot(TypedDict, total=False):
    """Subset of EDGAR company facts JSON."""

    cik: int
    entityName: str
    facts: dict[str, dict[str, dict[str, dict[str, list[EdgarFactRow]]]]]
