# tests/unit/application/test_pipeline_use_cases.py
from __future__ import annotations

from pathlib import Path

import pytest
from fixtures.edgar_testkit import (
    APPLE,
    FakeEdgarFactsGateway,
    RecordingAuditSink,
    make_document,
    make_index,
)

from finfiles.application.use_cases.pipeline.fetch_company_facts import (
    FetchCompanyFactsUseCase,
)
from finfiles.application.use_cases.pipeline.load_fact_table import (
    LoadFactTableRequest,
    LoadFactTableUseCase,
)
from finfiles.application.use_cases.pipeline.resolve_ticker import ResolveTickerUseCase
from finfiles.domain.exceptions.edgar import (
    NetworkFailure,
    NoData,
    NoQualifyingFiling,
    TickerNotFound,
)
from finfiles.infrastructure.audit.jsonl_audit_sink import JsonlAuditSink


@pytest.mark.asyncio
async def test_resolve_ticker_returns_matching_entry() -> None:
    gateway = FakeEdgarFactsGateway()

    entry = await ResolveTickerUseCase(gateway).execute(" aapl ")

    assert entry is APPLE
    assert gateway.call_names == ["fetch_ticker_directory"]


@pytest.mark.asyncio
@pytest.mark.parametrize("ticker", ["", "   "])
async def test_blank_ticker_fails_without_network(ticker: str) -> None:
    gateway = FakeEdgarFactsGateway()

    with pytest.raises(TickerNotFound):
        await ResolveTickerUseCase(gateway).execute(ticker)

    assert gateway.calls == []


@pytest.mark.asyncio
async def test_fetch_company_facts_requires_periodic_report() -> None:
    gateway = FakeEdgarFactsGateway(index=make_index("320193", ["8-K", "S-1"]))

    with pytest.raises(NoQualifyingFiling):
        await FetchCompanyFactsUseCase(gateway).execute("320193")

    assert gateway.call_names == ["fetch_filing_index"]


@pytest.mark.asyncio
async def test_fetch_company_facts_after_qualifying_filing() -> None:
    document = make_document({"Revenues": {"USD": [("Q1", 1e9)]}})
    gateway = FakeEdgarFactsGateway(index=make_index("320193", ["10-K"]), document=document)

    result = await FetchCompanyFactsUseCase(gateway).execute("320193")

    assert result is document
    assert gateway.calls == [
        ("fetch_filing_index", "320193"),
        ("fetch_company_facts", "320193"),
    ]


@pytest.mark.asyncio
async def test_load_fact_table_runs_the_whole_pipeline() -> None:
    document = make_document(
        {
            "Revenues": {"USD": [("Q1", 90e9), ("Q2", 85e9)]},
            "NetIncomeLoss": {"USD": [("Q2", 21e9)]},
        }
    )
    gateway = FakeEdgarFactsGateway(index=make_index("320193", ["10-Q"]), document=document)
    audit = RecordingAuditSink()

    loaded = await LoadFactTableUseCase(gateway, audit).execute(
        LoadFactTableRequest(ticker="aapl", user="alice")
    )

    assert loaded.company is APPLE
    assert loaded.table.quarters == ("Q2", "Q1")
    assert loaded.table.column("NetIncomeLoss_USD").tolist() == pytest.approx([21.0, 0.0])
    assert [(e.user, e.action, e.tickers) for e in audit.entries] == [
        ("alice", "fetch_filings", ("aapl",))
    ]


@pytest.mark.asyncio
async def test_unknown_ticker_stops_before_any_company_call() -> None:
    gateway = FakeEdgarFactsGateway()
    audit = RecordingAuditSink()

    with pytest.raises(TickerNotFound):
        await LoadFactTableUseCase(gateway, audit).execute(
            LoadFactTableRequest(ticker="ZZZZ", user="alice")
        )

    assert gateway.call_names == ["fetch_ticker_directory"]
    assert len(audit.entries) == 1


@pytest.mark.asyncio
async def test_audit_entry_is_recorded_even_when_the_network_fails() -> None:
    gateway = FakeEdgarFactsGateway(error=NetworkFailure("EDGAR request timed out."))
    audit = RecordingAuditSink()

    with pytest.raises(NetworkFailure):
        await LoadFactTableUseCase(gateway, audit).execute(
            LoadFactTableRequest(ticker="AAPL", user="bob")
        )

    assert len(audit.entries) == 1


@pytest.mark.asyncio
async def test_documents_without_usable_facts_yield_no_data() -> None:
    document = make_document(
        {}, extra_taxonomies={"dei": {"EntityPublicFloat": {"USD": [("Q4", 1e9)]}}}
    )
    gateway = FakeEdgarFactsGateway(index=make_index("320193", ["10-K"]), document=document)

    with pytest.raises(NoData):
        await LoadFactTableUseCase(gateway, RecordingAuditSink()).execute(
            LoadFactTableRequest(ticker="AAPL", user="alice")
        )


@pytest.mark.asyncio
async def test_load_succeeds_when_the_audit_file_cannot_be_written(tmp_path: Path) -> None:
    document = make_document({"Revenues": {"USD": [("Q1", 90e9)]}})
    gateway = FakeEdgarFactsGateway(index=make_index("320193", ["10-K"]), document=document)

    loaded = await LoadFactTableUseCase(gateway, JsonlAuditSink(tmp_path)).execute(
        LoadFactTableRequest(ticker="AAPL", user="alice")
    )

    assert loaded.company is APPLE
    assert loaded.table.quarters == ("Q1",)
    assert gateway.call_names == [
        "fetch_ticker_directory",
        "fetch_filing_index",
        "fetch_company_facts",
    ]
