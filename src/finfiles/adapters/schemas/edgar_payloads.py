# src/finfiles/adapters/schemas/edgar_payloads.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
"""EDGAR payload schemas (Adapters Layer).

Purpose:
    Pydantic models that validate the raw SEC JSON documents before they are
    mapped into domain entities. Validation is strict about the fields the
    pipeline reads and ignores everything else the SEC publishes.

Layer: adapters/schemas

Notes:
    - A single malformed record fails the whole document; records are never
      skipped one by one.
    - Company facts observations accept the SEC's ``fp``/``val`` keys as well
      as the long-form ``fiscalPeriod``/``value`` names.
"""

from __future__ import annotations

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    RootModel,
    field_validator,
    model_validator,
)


class BaseEdgarPayload(BaseModel):
    """Base class for SEC payload fragments."""

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        str_strip_whitespace=True,
        frozen=True,
    )


# --------------------------------------------------------------------------- #
# company_tickers.json
# --------------------------------------------------------------------------- #


class TickerRowPayload(BaseEdgarPayload):
    """One ``{"cik_str", "ticker", "title"}`` row."""

    cik_str: str
    ticker: str
    title: str

    @field_validator("cik_str", mode="before")
    @classmethod
    def _cik_as_digits(cls, value: object) -> str:
        """Accept integer or digit-string CIKs and return them as strings."""
        if isinstance(value, bool):
            raise ValueError("cik_str must be an integer or digit string")
        if isinstance(value, int):
            if value < 0:
                raise ValueError("cik_str must not be negative")
            return str(value)
        if isinstance(value, str) and value.strip().isdigit():
            return value.strip()
        raise ValueError("cik_str must be an integer or digit string")


class TickerDirectoryPayload(RootModel[dict[str, TickerRowPayload]]):
    """Whole ticker directory: arbitrary keys mapped to rows."""


# --------------------------------------------------------------------------- #
# submissions/CIK##########.json
# --------------------------------------------------------------------------- #


class RecentFilingsPayload(BaseEdgarPayload):
    """Columnar ``filings.recent`` section (parallel arrays)."""

    accession_number: list[str] = Field(alias="accessionNumber")
    form: list[str]

    @model_validator(mode="after")
    def _columns_aligned(self) -> RecentFilingsPayload:
        if len(self.accession_number) != len(self.form):
            raise ValueError("accessionNumber and form must have the same length")
        return self


class FilingsPayload(BaseEdgarPayload):
    recent: RecentFilingsPayload


class SubmissionsPayload(BaseEdgarPayload):
    """Subset of the submissions document used to confirm periodic filings."""

    cik: str | None = None
    name: str | None = None
    filings: FilingsPayload


# --------------------------------------------------------------------------- #
# api/xbrl/companyfacts/CIK##########.json
# --------------------------------------------------------------------------- #


class FactRowPayload(BaseEdgarPayload):
    """A single observation; both fields are optional on the wire."""

    fiscal_period: str | None = Field(
        default=None,
        validation_alias=AliasChoices("fp", "fiscalPeriod"),
    )
    value: float | None = Field(
        default=None,
        validation_alias=AliasChoices("val", "value"),
    )


class MetricFactsPayload(BaseEdgarPayload):
    """Observations of one concept grouped by unit."""

    units: dict[str, list[FactRowPayload]]


class CompanyFactsPayload(BaseEdgarPayload):
    """Company facts document: ``facts.<taxonomy>.<concept>.units.<unit>``."""

    cik: int | str | None = None
    entity_name: str | None = Field(default=None, alias="entityName")
    facts: dict[str, dict[str, MetricFactsPayload]]
