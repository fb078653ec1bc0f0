# tests/unit/adapters/test_analysis_presenter.py
from __future__ import annotations

import pytest

from finfiles.adapters.presenters.analysis_presenter import AnalysisPresenter
from finfiles.domain.entities.analysis_report import (
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

REVENUES = MetricSummary(
    column="revenues_USD", count=4, total=10.0, average=2.5, most_recent=4.0
)


@pytest.fixture
def presenter() -> AnalysisPresenter:
    return AnalysisPresenter()


def test_raw_dump(presenter: AnalysisPresenter) -> None:
    assert presenter.present(RawDumpReport(table_text="quarter\n Q1")) == (
        "SEC Data Table:\nquarter\n Q1"
    )


def test_summary(presenter: AnalysisPresenter) -> None:
    netincome = MetricSummary(
        column="NetIncomeLoss_USD", count=4, total=2.0, average=0.5, most_recent=0.5
    )

    text = presenter.present(SummaryReport(quarter_count=4, metrics=(REVENUES, netincome)))

    assert text == (
        "Summary: 4 quarters of SEC data loaded.\n"
        "  • revenues_USD: Total = 10.00B, Avg = 2.50B, Most Recent = 4.00B\n"
        "  • NetIncomeLoss_USD: Total = 2.00B, Avg = 0.50B, Most Recent = 0.50B"
    )


def test_forecast(presenter: AnalysisPresenter) -> None:
    report = ForecastReport(forecasts=(MetricForecast(column="Assets_USD", next_value=352.583),))

    assert presenter.present(report) == (
        "Time-Series Forecast (naive, last value):\n"
        "  • Assets_USD: Next period forecast (naive) = 352.58B"
    )


def test_anomalies(presenter: AnalysisPresenter) -> None:
    flag = AnomalyFlag(column="Revenues_USD", period_index=5, value=100.0, mean=20.8, std=39.6)

    assert presenter.present(AnomalyReport(flags=(flag,))) == (
        "Anomaly Detection Results:\n"
        "  • Revenues_USD: Anomaly detected at period 5 "
        "(value = 100.00B, mean = 20.80B, std = 39.60B)"
    )


def test_no_anomalies(presenter: AnalysisPresenter) -> None:
    assert presenter.present(AnomalyReport(flags=())) == (
        "No significant anomalies detected in the available metrics."
    )


def test_period_list(presenter: AnalysisPresenter) -> None:
    report = PeriodListReport(periods=("Q3", "Q2", "Q1"))

    assert presenter.present(report) == "Loaded quarters from SEC: Q3, Q2, Q1"


def test_metric_lookup(presenter: AnalysisPresenter) -> None:
    assert presenter.present(MetricLookupReport(summary=REVENUES)) == (
        "SEC EDGAR revenues_USD Analysis:\n"
        "  • Total revenues_USD (last 4 periods): 10.00B\n"
        "  • Average per period: 2.50B\n"
        "  • Most recent period: 4.00B"
    )


def test_metric_values(presenter: AnalysisPresenter) -> None:
    report = MetricValuesReport(column="Auditor", values=("KPMG", "EY"))

    assert presenter.present(report) == "SEC EDGAR Auditor values: KPMG, EY"


def test_unrecognized_query_lists_metrics(presenter: AnalysisPresenter) -> None:
    report = UnrecognizedQueryReport(available_metrics=("revenues_usd", "assets_usd"))

    assert presenter.present(report) == (
        "FINFILES AI: Could not detect a specific financial metric in your query.\n"
        "Available metrics: revenues_usd, assets_usd\n"
        "Try asking about one of these metrics, or type 'summarize', 'forecast', "
        "'anomaly', or 'show table'."
    )


def test_unrecognized_query_without_metrics(presenter: AnalysisPresenter) -> None:
    text = presenter.present(UnrecognizedQueryReport(available_metrics=()))

    assert text.splitlines()[1] == "No financial metrics available."


def test_unknown_report_type_is_rejected(presenter: AnalysisPresenter) -> None:
    with pytest.raises(TypeError):
        presenter.present(object())  # type: ignore[arg-type]
