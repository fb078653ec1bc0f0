# src/finfiles/adapters/presenters/analysis_presenter.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
"""Presenter: AnalysisReport → answer text.

Synopsis:
    Renders the structured reports produced by the query analyzer into the
    plain-text answers shown to the user. Monetary figures are printed with
    two decimals and a ``B`` (billions) suffix.

Layer:
    adapters/presenters

Design:
    * No statistics are computed here; every number comes from the report.
    * Output wording is stable; downstream consumers match on it.
"""

from __future__ import annotations

from typing import Final

from finfiles.domain.entities.analysis_report import (
    AnalysisReport,
    AnomalyFlag,
    AnomalyReport,
    ForecastReport,
    MetricLookupReport,
    MetricSummary,
    MetricValuesReport,
    PeriodListReport,
    RawDumpReport,
    SummaryReport,
    UnrecognizedQueryReport,
)

NO_ANOMALIES_TEXT: Final[str] = "No significant anomalies detected in the available metrics."
NO_METRICS_TEXT: Final[str] = "No financial metrics available."
COMMAND_HINT_TEXT: Final[str] = (
    "Try asking about one of these metrics, or type 'summarize', 'forecast', "
    "'anomaly', or 'show table'."
)
_BULLET: Final[str] = "  • "


def _billions(value: float) -> str:
    return f"{value:.2f}B"


def _summary_line(summary: MetricSummary) -> str:
    return (
        f"{_BULLET}{summary.column}: Total = {_billions(summary.total)}, "
        f"Avg = {_billions(summary.average)}, "
        f"Most Recent = {_billions(summary.most_recent)}"
    )


def _anomaly_line(flag: AnomalyFlag) -> str:
    return (
        f"{_BULLET}{flag.column}: Anomaly detected at period {flag.period_index} "
        f"(value = {_billions(flag.value)}, mean = {_billions(flag.mean)}, "
        f"std = {_billions(flag.std)})"
    )


class AnalysisPresenter:
    """Presenter for query-analysis answers."""

    def present(self, report: AnalysisReport) -> str:
        """Render ``report`` as answer text.

        Args:
            report: Report returned by :class:`QueryAnalyzer`.

        Returns:
            str: Human-readable answer.

        Raises:
            TypeError: If ``report`` is not a known report type.
        """
        if isinstance(report, RawDumpReport):
            return f"SEC Data Table:\n{report.table_text}"

        if isinstance(report, SummaryReport):
            lines = "\n".join(_summary_line(m) for m in report.metrics)
            return f"Summary: {report.quarter_count} quarters of SEC data loaded.\n{lines}"

        if isinstance(report, ForecastReport):
            lines = "\n".join(
                f"{_BULLET}{f.column}: Next period forecast (naive) = {_billions(f.next_value)}"
                for f in report.forecasts
            )
            return f"Time-Series Forecast (naive, last value):\n{lines}"

        if isinstance(report, AnomalyReport):
            if not report.has_anomalies:
                return NO_ANOMALIES_TEXT
            lines = "\n".join(_anomaly_line(flag) for flag in report.flags)
            return f"Anomaly Detection Results:\n{lines}"

        if isinstance(report, PeriodListReport):
            return f"Loaded quarters from SEC: {', '.join(report.periods)}"

        if isinstance(report, MetricLookupReport):
            s = report.summary
            return (
                f"SEC EDGAR {s.column} Analysis:\n"
                f"{_BULLET}Total {s.column} (last {s.count} periods): {_billions(s.total)}\n"
                f"{_BULLET}Average per period: {_billions(s.average)}\n"
                f"{_BULLET}Most recent period: {_billions(s.most_recent)}"
            )

        if isinstance(report, MetricValuesReport):
            return f"SEC EDGAR {report.column} values: {', '.join(report.values)}"

        if isinstance(report, UnrecognizedQueryReport):
            available = (
                f"Available metrics: {', '.join(report.available_metrics)}"
                if report.available_metrics
                else NO_METRICS_TEXT
            )
            return (
                "FINFILES AI: Could not detect a specific financial metric in your query.\n"
                f"{available}\n"
                f"{COMMAND_HINT_TEXT}"
            )

        raise TypeError(f"Unsupported report type: {type(report).__name__}")
