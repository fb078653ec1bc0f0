# src/finfiles/domain/entities/fact_document.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
"""Company facts document.

Purpose:
    Provider-agnostic representation of the EDGAR XBRL "company facts"
    payload: ``taxonomy -> metric -> unit -> [observation]``.

Layer:
    domain

Notes:
    - Mappings preserve document order; normalization depends on it for
      last-write-wins semantics and for stable column ordering.
    - Observations keep optional fields as-is. Dropping incomplete
      observations is the normalizer's job, not the mapper's.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True)
class FactObservation:
    """Single reported value for a metric in a given unit.

    Attributes:
        fiscal_period: Period label (e.g., ``"Q3"``, ``"FY"``), if reported.
        value: Raw reported value in full units, if reported.
    """

    fiscal_period: str | None
    value: float | None


@dataclass(frozen=True)
class FactDocument:
    """Nested company facts for one filer.

    Attributes:
        cik: Central Index Key of the filer.
        entity_name: Filer name as reported by EDGAR, if present.
        facts: ``taxonomy -> metric -> unit -> observations``.
    """

    cik: str
    entity_name: str | None = None
    facts: Mapping[str, Mapping[str, Mapping[str, Sequence[FactObservation]]]] = field(
        default_factory=dict
    )

    def taxonomy(self, name: str) -> Mapping[str, Mapping[str, Sequence[FactObservation]]]:
        """Return the metrics of one taxonomy, or an empty mapping."""
        return self.facts.get(name, {})

    def iter_observations(
        self, taxonomy: str
    ) -> Iterator[tuple[str, str, FactObservation]]:
        """Yield ``(metric, unit, observation)`` triples in document order."""
        for metric, units in self.taxonomy(taxonomy).items():
            for unit, observations in units.items():
                for observation in observations:
                    yield metric, unit, observation
