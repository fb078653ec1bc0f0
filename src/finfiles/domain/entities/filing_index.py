# src/finfiles/domain/entities/filing_index.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
"""EDGAR filing index.

Purpose:
    Hold the recent-filings metadata for one company. The pipeline only uses
    it to confirm that at least one periodic report (10-K/10-Q) exists before
    fetching company facts.

Layer:
    domain
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from finfiles.domain.enums.edgar import QUALIFYING_FORM_TYPES


@dataclass(frozen=True)
class FilingIndexEntry:
    """Accession number and form type of one filing."""

    accession_number: str
    form_type: str


@dataclass(frozen=True)
class FilingIndex:
    """Recent filings of a single filer.

    Args:
        cik: Central Index Key the index belongs to.
        entries: Filings in the order the submissions document lists them
            (most recent first).
    """

    cik: str
    entries: tuple[FilingIndexEntry, ...]

    @classmethod
    def from_columns(
        cls,
        *,
        cik: str,
        accession_numbers: Sequence[str],
        forms: Sequence[str],
    ) -> FilingIndex:
        """Build an index from the columnar ``filings.recent`` layout."""
        entries = tuple(
            FilingIndexEntry(accession_number=acc, form_type=form)
            for acc, form in zip(accession_numbers, forms, strict=True)
        )
        return cls(cik=cik, entries=entries)

    def latest_qualifying(self) -> FilingIndexEntry | None:
        """Return the first 10-K or 10-Q entry, or ``None`` if there is none."""
        for entry in self.entries:
            if entry.form_type in QUALIFYING_FORM_TYPES:
                return entry
        return None

    def has_qualifying_filing(self) -> bool:
        """Return True if the index lists at least one 10-K or 10-Q."""
        return self.latest_qualifying() is not None
