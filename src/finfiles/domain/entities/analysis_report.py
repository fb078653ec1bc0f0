# src/finfiles/domain/entities/analysis_report.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
"""Structured query-analysis results.

Purpose:
    Tagged result variants produced by the query analyzer. Formatting into
    user-facing text happens at the boundary (see the analysis presenter),
    which keeps the statistics testable without string parsing.

Layer:
    domain
"""

from __future__ import annotations

from dataclasses import dataclass

from finfiles.domain.enums.analysis_intent import AnalysisIntent


@dataclass(frozen=True)
class MetricSummary:
    """Total, average and most recent value of one numeric column.

    Attributes:
        column: Column name as it appears in the table.
        count: Number of rows in the column (including empty cells).
        total: Sum of the non-empty values.
        average: ``total / count`` (0.0 for an empty column).
        most_recent: Last non-empty value in table order (0.0 if none).
    """

    column: str
    count: int
    total: float
    average: float
    most_recent: float


@dataclass(frozen=True)
class MetricForecast:
    """Naive next-period forecast of one numeric column."""

    column: str
    next_value: float


@dataclass(frozen=True)
class AnomalyFlag:
    """A value more than two population standard deviations from its column mean.

    Attributes:
        column: Column name.
        period_index: 1-based position of the value among the column's
            non-empty values.
        value: Flagged value.
        mean: Population mean of the column.
        std: Population standard deviation of the column.
    """

    column: str
    period_index: int
    value: float
    mean: float
    std: float


@dataclass(frozen=True)
class RawDumpReport:
    """Full textual dump of the table."""

    table_text: str
    intent: AnalysisIntent = AnalysisIntent.RAW_DUMP


@dataclass(frozen=True)
class SummaryReport:
    """Per-column summaries plus the number of loaded quarters."""

    quarter_count: int
    metrics: tuple[MetricSummary, ...]
    intent: AnalysisIntent = AnalysisIntent.SUMMARY


@dataclass(frozen=True)
class ForecastReport:
    """Per-column naive forecasts."""

    forecasts: tuple[MetricForecast, ...]
    intent: AnalysisIntent = AnalysisIntent.FORECAST


@dataclass(frozen=True)
class AnomalyReport:
    """All anomaly flags across numeric columns (possibly none)."""

    flags: tuple[AnomalyFlag, ...]
    intent: AnalysisIntent = AnalysisIntent.ANOMALY

    @property
    def has_anomalies(self) -> bool:
        return bool(self.flags)


@dataclass(frozen=True)
class PeriodListReport:
    """Loaded period labels in table order."""

    periods: tuple[str, ...]
    intent: AnalysisIntent = AnalysisIntent.PERIOD_LIST


@dataclass(frozen=True)
class MetricLookupReport:
    """Summary of one numeric column named in the query."""

    summary: MetricSummary
    intent: AnalysisIntent = AnalysisIntent.METRIC_LOOKUP


@dataclass(frozen=True)
class MetricValuesReport:
    """Values of one textual column named in the query."""

    column: str
    values: tuple[str, ...]
    intent: AnalysisIntent = AnalysisIntent.METRIC_LOOKUP


@dataclass(frozen=True)
class UnrecognizedQueryReport:
    """No command word and no metric matched.

    Attributes:
        available_metrics: Lowercased names of every non-``quarter`` column.
    """

    available_metrics: tuple[str, ...]
    intent: AnalysisIntent = AnalysisIntent.METRIC_LOOKUP


AnalysisReport = (
    RawDumpReport
    | SummaryReport
    | ForecastReport
    | AnomalyReport
    | PeriodListReport
    | MetricLookupReport
    | MetricValuesReport
    | UnrecognizedQueryReport
)
