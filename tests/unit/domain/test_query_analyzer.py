# tests/unit/domain/test_query_analyzer.py
from __future__ import annotations

import math

import pandas as pd
import pytest

from finfiles.domain.entities.analysis_report import (
    AnomalyReport,
    ForecastReport,
    MetricLookupReport,
    MetricValuesReport,
    PeriodListReport,
    RawDumpReport,
    SummaryReport,
    UnrecognizedQueryReport,
)
from finfiles.domain.entities.fact_table import FactTable
from finfiles.domain.enums.analysis_intent import AnalysisIntent
from finfiles.domain.exceptions.analysis import AnalysisUnsupported, MissingColumn
from finfiles.domain.services.query_analyzer import (
    QueryAnalyzer,
    classify_intent,
    find_anomalies,
    summarize_series,
)


@pytest.mark.parametrize(
    ("query", "intent"),
    [
        ("Show me the RAW data", AnalysisIntent.RAW_DUMP),
        ("show table", AnalysisIntent.RAW_DUMP),
        ("summarize and forecast", AnalysisIntent.SUMMARY),
        ("give me a summary", AnalysisIntent.SUMMARY),
        ("predict next revenue", AnalysisIntent.FORECAST),
        ("any outliers?", AnalysisIntent.ANOMALY),
        ("anomaly check", AnalysisIntent.ANOMALY),
        ("which quarters are loaded", AnalysisIntent.PERIOD_LIST),
        ("revenue please", AnalysisIntent.METRIC_LOOKUP),
    ],
)
def test_classify_intent_first_matching_rule_wins(query: str, intent: AnalysisIntent) -> None:
    assert classify_intent(query) is intent


def test_raw_dump_contains_rendered_table(sample_table: FactTable) -> None:
    report = QueryAnalyzer().analyze(sample_table, "raw")

    assert isinstance(report, RawDumpReport)
    assert report.table_text == sample_table.render()


def test_summary_covers_every_numeric_column(sample_table: FactTable) -> None:
    report = QueryAnalyzer().analyze(sample_table, "Summarize")

    assert isinstance(report, SummaryReport)
    assert report.quarter_count == 4
    assert [m.column for m in report.metrics] == ["Revenues_USD", "NetIncomeLoss_USD"]
    revenues = report.metrics[0]
    assert revenues.total == pytest.approx(10.0)
    assert revenues.average == pytest.approx(2.5)
    assert revenues.most_recent == pytest.approx(4.0)


def test_forecast_is_the_last_value_in_table_order(sample_table: FactTable) -> None:
    report = QueryAnalyzer().analyze(sample_table, "forecast next period")

    assert isinstance(report, ForecastReport)
    assert [(f.column, f.next_value) for f in report.forecasts] == [
        ("Revenues_USD", 4.0),
        ("NetIncomeLoss_USD", 0.5),
    ]


def test_anomaly_flags_only_the_outlier() -> None:
    table = FactTable.from_columns(
        ["Q5", "Q4", "Q3", "Q2", "Q1"],
        {"Revenues_USD": [1.0, 1.0, 1.0, 1.0, 100.0]},
    )

    report = QueryAnalyzer().analyze(table, "find anomaly")

    assert isinstance(report, AnomalyReport)
    assert report.has_anomalies
    assert len(report.flags) == 1
    flag = report.flags[0]
    assert flag.column == "Revenues_USD"
    assert flag.period_index == 5
    assert flag.value == 100.0
    assert flag.mean == pytest.approx(20.8)
    assert flag.std == pytest.approx(39.6)


def test_constant_columns_have_no_anomalies() -> None:
    table = FactTable.from_columns(["Q2", "Q1"], {"Assets_USD": [3.0, 3.0]})

    report = QueryAnalyzer().analyze(table, "outlier")

    assert isinstance(report, AnomalyReport)
    assert not report.has_anomalies


def test_find_anomalies_needs_two_values() -> None:
    assert find_anomalies("Assets_USD", pd.Series([5.0])) == []
    assert find_anomalies("Assets_USD", pd.Series([5.0, float("nan")])) == []


def test_period_listing_keeps_table_order(sample_table: FactTable) -> None:
    report = QueryAnalyzer().analyze(sample_table, "list the periods")

    assert isinstance(report, PeriodListReport)
    assert report.periods == ("Q4", "Q3", "Q2", "Q1")


def test_period_listing_without_quarter_column_raises_missing_column() -> None:
    table = FactTable(pd.DataFrame({"Assets_USD": [1.0]}))

    with pytest.raises(MissingColumn):
        QueryAnalyzer().analyze(table, "quarters?")


def test_synonym_selects_column_with_unit_suffix() -> None:
    table = FactTable.from_columns(
        ["Q4", "Q3", "Q2", "Q1"], {"revenues_USD": [1.0, 2.0, 3.0, 4.0]}
    )

    report = QueryAnalyzer().analyze(table, "What was the revenue?")

    assert isinstance(report, MetricLookupReport)
    assert report.summary.column == "revenues_USD"
    assert report.summary.count == 4
    assert report.summary.total == pytest.approx(10.0)
    assert report.summary.average == pytest.approx(2.5)
    assert report.summary.most_recent == pytest.approx(4.0)


def test_verbatim_column_name_beats_synonyms() -> None:
    table = FactTable.from_columns(
        ["Q1"], {"Assets_USD": [1.0], "Revenues_USD": [2.0]}
    )

    report = QueryAnalyzer().analyze(table, "compare assets with revenues_usd")

    assert isinstance(report, MetricLookupReport)
    assert report.summary.column == "Revenues_USD"


def test_textual_column_lists_values() -> None:
    table = FactTable(pd.DataFrame({"quarter": ["Q2", "Q1"], "Auditor": ["KPMG", "EY"]}))

    report = QueryAnalyzer().analyze(table, "who is the auditor")

    assert isinstance(report, MetricValuesReport)
    assert report.column == "Auditor"
    assert report.values == ("KPMG", "EY")


def test_unsupported_dtype_raises_with_column_name() -> None:
    table = FactTable(pd.DataFrame({"quarter": ["Q2", "Q1"], "Restated": [True, False]}))

    with pytest.raises(AnalysisUnsupported) as exc:
        QueryAnalyzer().analyze(table, "was it restated")

    assert str(exc.value) == (
        "SEC EDGAR: Column 'Restated' found, but data type is not supported for analysis."
    )


def test_unmatched_query_lists_every_metric_lowercased(sample_table: FactTable) -> None:
    report = QueryAnalyzer().analyze(sample_table, "tell me a joke")

    assert isinstance(report, UnrecognizedQueryReport)
    assert report.available_metrics == ("revenues_usd", "netincomeloss_usd")


def test_unmatched_query_on_table_without_metrics() -> None:
    table = FactTable.from_columns(["Q1"], {})

    report = QueryAnalyzer().analyze(table, "hello")

    assert isinstance(report, UnrecognizedQueryReport)
    assert report.available_metrics == ()


def test_summarize_series_average_counts_empty_cells() -> None:
    summary = summarize_series("Assets_USD", pd.Series([1.0, float("nan"), 3.0]))

    assert summary.count == 3
    assert summary.total == pytest.approx(4.0)
    assert summary.average == pytest.approx(4.0 / 3.0)
    assert summary.most_recent == pytest.approx(3.0)


def test_summarize_series_of_empty_column() -> None:
    summary = summarize_series("Assets_USD", pd.Series([], dtype="float64"))

    assert (summary.count, summary.total, summary.average, summary.most_recent) == (0, 0.0, 0.0, 0.0)
    assert not math.isnan(summary.average)
