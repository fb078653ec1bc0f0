# src/finfiles/domain/services/query_analyzer.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
"""Free-text query analysis over a fact table.

Purpose:
    Classify a free-text question and compute the matching statistic over a
    :class:`FactTable`: raw dump, per-column summary, naive forecast,
    z-score anomaly flags, period listing or a single-metric lookup.

Layer:
    domain

Design:
    - Intent rules are substring matches on the lowercased query, evaluated
      in a fixed order; the first match wins ("summary" beats "forecast").
    - Metric lookup tries every non-``quarter`` column name verbatim, then a
      small synonym table. A synonym's canonical name matches a column whose
      lowercase name equals it, with or without a trailing ``_<unit>``.
    - "Most recent" is the last value in table order.
    - Anomalies use the population mean and standard deviation; values two
      or more standard deviations from the mean are flagged. Values sitting
      on the bound are compared with a float tolerance so that rounding in
      the variance does not decide the outcome.
    - Returns structured reports; rendering to text is a presenter concern.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Final

import pandas as pd
from pandas.api import types as ptypes

from finfiles.domain.entities.analysis_report import (
    AnalysisReport,
    AnomalyFlag,
    AnomalyReport,
    ForecastReport,
    MetricForecast,
    MetricLookupReport,
    MetricSummary,
    MetricValuesReport,
    PeriodListReport,
    RawDumpReport,
    SummaryReport,
    UnrecognizedQueryReport,
)
from finfiles.domain.entities.fact_table import QUARTER_COLUMN, FactTable
from finfiles.domain.enums.analysis_intent import AnalysisIntent
from finfiles.domain.exceptions.analysis import AnalysisUnsupported

logger = logging.getLogger(__name__)

#: Ordered keyword rules; evaluation stops at the first rule that matches.
INTENT_KEYWORDS: Final[tuple[tuple[AnalysisIntent, tuple[str, ...]], ...]] = (
    (AnalysisIntent.RAW_DUMP, ("raw", "table")),
    (AnalysisIntent.SUMMARY, ("summarize", "summary")),
    (AnalysisIntent.FORECAST, ("forecast", "predict")),
    (AnalysisIntent.ANOMALY, ("anomaly", "outlier")),
    (AnalysisIntent.PERIOD_LIST, ("quarter", "period")),
)

#: Ordered (phrase, canonical lowercase metric name) pairs.
METRIC_SYNONYMS: Final[tuple[tuple[str, str], ...]] = (
    ("revenue", "revenues"),
    ("net income", "netincomeloss"),
    ("eps", "earningspersharediluted"),
    ("assets", "assets"),
    ("liabilities", "liabilities"),
    ("cash", "cashandcashequivalentsatcarryingvalue"),
    ("operating cash flow", "operatingcashflow"),
)

ANOMALY_STD_MULTIPLIER: Final[float] = 2.0
_MIN_ANOMALY_SAMPLES: Final[int] = 2


def classify_intent(query: str) -> AnalysisIntent:
    """Return the keyword intent of ``query``, or ``METRIC_LOOKUP`` if none applies."""
    normalized = query.lower()
    for intent, keywords in INTENT_KEYWORDS:
        if any(word in normalized for word in keywords):
            return intent
    return AnalysisIntent.METRIC_LOOKUP


def is_numeric_column(series: pd.Series) -> bool:
    """Return True for int/float columns (booleans excluded)."""
    return ptypes.is_numeric_dtype(series) and not ptypes.is_bool_dtype(series)


def is_text_column(series: pd.Series) -> bool:
    """Return True for columns holding strings."""
    return ptypes.is_string_dtype(series)


def summarize_series(column: str, series: pd.Series) -> MetricSummary:
    """Compute total, average and most recent value of a numeric column.

    The average divides by the full column length, empty cells included.
    """
    values = series.dropna().astype("float64")
    count = len(series)
    total = float(values.sum())
    average = total / count if count else 0.0
    most_recent = float(values.iloc[-1]) if len(values) else 0.0
    return MetricSummary(
        column=column,
        count=count,
        total=total,
        average=average,
        most_recent=most_recent,
    )


def find_anomalies(column: str, series: pd.Series) -> list[AnomalyFlag]:
    """Flag values at least two population standard deviations from the mean."""
    values = [float(v) for v in series.dropna()]
    if len(values) < _MIN_ANOMALY_SAMPLES:
        return []
    mean = sum(values) / len(values)
    std = math.sqrt(sum((v - mean) ** 2 for v in values) / len(values))
    if std == 0.0:
        return []

    threshold = ANOMALY_STD_MULTIPLIER * std
    flags: list[AnomalyFlag] = []
    for index, value in enumerate(values, start=1):
        deviation = abs(value - mean)
        if deviation > threshold or math.isclose(deviation, threshold, rel_tol=1e-9):
            flags.append(
                AnomalyFlag(
                    column=column,
                    period_index=index,
                    value=value,
                    mean=mean,
                    std=std,
                )
            )
    return flags


@dataclass(frozen=True)
class QueryAnalyzer:
    """Answer free-text questions about a :class:`FactTable`.

    Attributes:
        synonyms: Ordered synonym table used when no column name appears in
            the query verbatim.
    """

    synonyms: tuple[tuple[str, str], ...] = METRIC_SYNONYMS

    def analyze(self, table: FactTable, query: str) -> AnalysisReport:
        """Classify ``query`` and compute the corresponding report.

        Raises:
            MissingColumn: If a period listing is requested but the table has
                no ``quarter`` column.
            AnalysisUnsupported: If the query names a column whose dtype is
                neither numeric nor textual.
        """
        normalized = query.lower()
        intent = classify_intent(normalized)
        logger.debug("analysis.intent", extra={"extra": {"intent": intent.value}})

        if intent is AnalysisIntent.RAW_DUMP:
            return RawDumpReport(table_text=table.render())
        if intent is AnalysisIntent.SUMMARY:
            return self._summary(table)
        if intent is AnalysisIntent.FORECAST:
            return self._forecast(table)
        if intent is AnalysisIntent.ANOMALY:
            return self._anomalies(table)
        if intent is AnalysisIntent.PERIOD_LIST:
            return PeriodListReport(periods=table.quarters)
        return self._lookup(table, normalized)

    # ------------------------------------------------------------------ #
    # Intent handlers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _numeric_columns(table: FactTable) -> list[tuple[str, pd.Series]]:
        numeric: list[tuple[str, pd.Series]] = []
        for name in table.columns:
            series = table.column(name)
            if is_numeric_column(series):
                numeric.append((name, series))
        return numeric

    def _summary(self, table: FactTable) -> SummaryReport:
        quarter_count = (
            len(table.column(QUARTER_COLUMN)) if table.has_column(QUARTER_COLUMN) else 0
        )
        metrics = tuple(
            summarize_series(name, series) for name, series in self._numeric_columns(table)
        )
        return SummaryReport(quarter_count=quarter_count, metrics=metrics)

    def _forecast(self, table: FactTable) -> ForecastReport:
        forecasts = tuple(
            MetricForecast(column=name, next_value=summarize_series(name, series).most_recent)
            for name, series in self._numeric_columns(table)
        )
        return ForecastReport(forecasts=forecasts)

    def _anomalies(self, table: FactTable) -> AnomalyReport:
        flags: list[AnomalyFlag] = []
        for name, series in self._numeric_columns(table):
            flags.extend(find_anomalies(name, series))
        return AnomalyReport(flags=tuple(flags))

    def _lookup(self, table: FactTable, normalized_query: str) -> AnalysisReport:
        column = self.match_metric(table, normalized_query)
        if column is None:
            return UnrecognizedQueryReport(
                available_metrics=tuple(name.lower() for name in table.metric_names)
            )

        series = table.column(column)
        if is_numeric_column(series):
            return MetricLookupReport(summary=summarize_series(column, series))
        if is_text_column(series):
            return MetricValuesReport(
                column=column,
                values=tuple(str(v) for v in series.dropna()),
            )
        raise AnalysisUnsupported(
            f"SEC EDGAR: Column '{column}' found, but data type is not supported for analysis.",
            details={"column": column, "dtype": str(series.dtype)},
        )

    def match_metric(self, table: FactTable, normalized_query: str) -> str | None:
        """Return the table column named by the query, or ``None``.

        Args:
            table: Table whose non-``quarter`` columns are candidates.
            normalized_query: Lowercased query text.
        """
        candidates = [(name.lower(), name) for name in table.metric_names]

        for lowered, original in candidates:
            if lowered in normalized_query:
                return original

        for phrase, canonical in self.synonyms:
            if phrase not in normalized_query:
                continue
            for lowered, original in candidates:
                if lowered == canonical or lowered.startswith(f"{canonical}_"):
                    return original
        return None
