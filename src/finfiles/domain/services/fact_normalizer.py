# src/finfiles/domain/services/fact_normalizer.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
"""Company facts normalization engine.

Purpose:
    Flatten a nested company facts document into a quarterly fact table:
    one row per reporting period (newest first), one column per
    ``"{metric}_{unit}"`` key.

Layer:
    domain

Design:
    - Pure domain: no HTTP, no I/O.
    - Only the ``us-gaap`` taxonomy is read.
    - Observations lacking a period label or a value are skipped.
    - Values are divided by 1e9 (billions) regardless of unit. Per-share and
      share-count units are scaled as well; this matches the figures users
      already see and is kept until a product decision says otherwise.
    - Later observations for the same key and period overwrite earlier ones.
    - Missing (metric, period) cells are zero-filled, not left empty; the
      analysis statistics depend on this.
    - Column order is first-encounter order in the document, so identical
      input always produces an identical table.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final

from finfiles.domain.entities.fact_document import FactDocument
from finfiles.domain.entities.fact_table import FactTable
from finfiles.domain.enums.edgar import Taxonomy
from finfiles.domain.exceptions.edgar import NoData

logger = logging.getLogger(__name__)

#: Divisor applied to every raw fact value (report in billions).
BILLIONS_DIVISOR: Final[float] = 1_000_000_000.0

#: Number of most recent distinct periods kept in the table.
DEFAULT_MAX_PERIODS: Final[int] = 4

#: Value used for periods in which a metric was not reported.
MISSING_VALUE_FILL: Final[float] = 0.0


def metric_key(metric: str, unit: str) -> str:
    """Return the column key for a metric reported in a given unit."""
    return f"{metric}_{unit}"


@dataclass(frozen=True)
class FactNormalizer:
    """Deterministic company facts → fact table normalizer.

    Attributes:
        taxonomy: Taxonomy to read; every other taxonomy is ignored.
        max_periods: Number of most recent distinct period labels to keep.
        divisor: Scale divisor applied to every value.
    """

    taxonomy: str = Taxonomy.US_GAAP.value
    max_periods: int = DEFAULT_MAX_PERIODS
    divisor: float = BILLIONS_DIVISOR

    def normalize(self, document: FactDocument) -> FactTable:
        """Normalize ``document`` into a :class:`FactTable`.

        Args:
            document: Company facts for a single filer.

        Returns:
            A table whose ``quarter`` column holds at most ``max_periods``
            labels in descending order and whose metric columns all have the
            same length.

        Raises:
            NoData: If no complete observation exists in the taxonomy.
        """
        periods: set[str] = set()
        # metric key -> period -> scaled value
        values_by_key: dict[str, dict[str, float]] = {}

        for metric, unit, observation in document.iter_observations(self.taxonomy):
            if observation.fiscal_period is None or observation.value is None:
                continue
            period = observation.fiscal_period
            periods.add(period)
            key = metric_key(metric, unit)
            values_by_key.setdefault(key, {})[period] = observation.value / self.divisor

        quarters = sorted(periods, reverse=True)[: self.max_periods]
        if not quarters:
            raise NoData(
                "No SEC fact data available for this company.",
                details={"cik": document.cik, "taxonomy": self.taxonomy},
            )

        columns = {
            key: [by_period.get(q, MISSING_VALUE_FILL) for q in quarters]
            for key, by_period in values_by_key.items()
        }

        logger.debug(
            "normalize.done",
            extra={
                "extra": {
                    "cik": document.cik,
                    "periods": quarters,
                    "metrics": len(columns),
                }
            },
        )
        return FactTable.from_columns(quarters, columns)
