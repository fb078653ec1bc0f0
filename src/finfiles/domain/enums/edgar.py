# src/finfiles/domain/enums/edgar.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
"""
EDGAR-specific enumerations.

Purpose:
    Provide the small set of SEC form codes and taxonomy names the ingestion
    pipeline reasons about.

Layer:
    domain
"""

from __future__ import annotations

from enum import Enum
from typing import Final


class FilingType(str, Enum):
    """Periodic report form types that qualify a company for fact ingestion."""

    FORM_10K = "10-K"
    FORM_10Q = "10-Q"


#: Raw form codes accepted as proof that a company files periodic reports.
QUALIFYING_FORM_TYPES: Final[frozenset[str]] = frozenset(ft.value for ft in FilingType)


class Taxonomy(str, Enum):
    """XBRL taxonomies present in company facts documents."""

    US_GAAP = "us-gaap"
    DEI = "dei"
    IFRS_FULL = "ifrs-full"
    SRT = "srt"
