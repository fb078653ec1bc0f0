# src/finfiles/tasks/cli.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
"""Finfiles CLI: load SEC EDGAR facts for a ticker and ask questions about them.

Commands:
    facts TICKER           Print the normalized fact table.
    ask TICKER QUERY       Print one analysis answer.
    chat TICKER            Interactive question loop ("exit" or "quit" ends it).
    backends               List the analysis backends.

Environment:
    FINFILES_USER              User written to the audit log.
    FINFILES_AUDIT_LOG_PATH    Audit log file (JSON Lines).
    FINFILES_DEFAULT_BACKEND   Backend used when --backend is omitted.
    EDGAR_USER_AGENT           User agent sent to the SEC.
"""

from __future__ import annotations

import asyncio
from typing import Final

import typer

from finfiles.adapters.backends.analysis_backends import default_backends
from finfiles.application.use_cases.pipeline.load_fact_table import LoadedFactTable
from finfiles.config.settings import get_settings
from finfiles.dependencies.pipeline import build_backend, load_company_table
from finfiles.domain.exceptions.base import FinfilesError
from finfiles.domain.interfaces.analysis_backend import AnalysisBackend
from finfiles.infrastructure.logging.logger import configure_root_logging, get_json_logger

log = get_json_logger(__name__)

_EXIT_WORDS: Final[frozenset[str]] = frozenset({"exit", "quit"})

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.callback()
def main(
    log_level: str | None = typer.Option(
        None, "--log-level", help="Override LOG_LEVEL for this run."
    ),  # noqa: B008
) -> None:
    """Query SEC EDGAR company facts from the command line."""
    configure_root_logging(log_level or get_settings().log_level)


def _fail(exc: FinfilesError) -> typer.Exit:
    log.error(
        "cli.command.failed",
        extra={"extra": {"code": exc.code, **exc.details}},
    )
    typer.echo(f"Error: {exc}", err=True)
    return typer.Exit(code=1)


def _load(ticker: str) -> LoadedFactTable:
    return asyncio.run(load_company_table(ticker))


def _header(loaded: LoadedFactTable) -> str:
    company = loaded.company
    return f"{company.title} ({company.ticker.upper()}, CIK {company.cik})"


@app.command("facts")
def facts(ticker: str = typer.Argument(..., help="Ticker symbol (e.g., AAPL).")) -> None:  # noqa: B008
    """Load the newest four periods of us-gaap facts and print them."""
    try:
        loaded = _load(ticker)
    except FinfilesError as exc:
        raise _fail(exc) from exc

    typer.echo(_header(loaded))
    typer.echo(loaded.table.render())


@app.command("ask")
def ask(
    ticker: str = typer.Argument(..., help="Ticker symbol (e.g., AAPL)."),  # noqa: B008
    query: str = typer.Argument(..., help='Question, e.g. "summarize" or "revenue".'),  # noqa: B008
    backend: str | None = typer.Option(None, "--backend", "-b", help="Backend name."),  # noqa: B008
) -> None:
    """Load the facts for TICKER and answer one question."""
    try:
        engine = build_backend(backend)
        loaded = _load(ticker)
        answer = asyncio.run(engine.analyze(loaded.table, query))
    except FinfilesError as exc:
        raise _fail(exc) from exc

    typer.echo(answer)


@app.command("chat")
def chat(
    ticker: str = typer.Argument(..., help="Ticker symbol (e.g., AAPL)."),  # noqa: B008
    backend: str | None = typer.Option(None, "--backend", "-b", help="Backend name."),  # noqa: B008
) -> None:
    """Load the facts for TICKER and answer questions until "exit"."""
    try:
        engine = build_backend(backend)
        loaded = _load(ticker)
    except FinfilesError as exc:
        raise _fail(exc) from exc

    typer.echo(f"Loaded {_header(loaded)} with {loaded.table.period_count} periods.")
    _chat_loop(engine, loaded)


def _chat_loop(engine: AnalysisBackend, loaded: LoadedFactTable) -> None:
    while True:
        try:
            question = typer.prompt(f"You ({engine.name})")
        except typer.Abort:
            break
        if question.strip().lower() in _EXIT_WORDS:
            break
        if not question.strip():
            continue
        answer = asyncio.run(engine.analyze(loaded.table, question))
        typer.echo(f"FINFILES AI: {answer}")


@app.command("backends")
def backends() -> None:
    """List the available analysis backends."""
    for engine in default_backends():
        typer.echo(engine.name)


if __name__ == "__main__":
    app()
