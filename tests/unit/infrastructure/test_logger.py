# tests/unit/infrastructure/test_logger.py
from __future__ import annotations

import json
import logging
import sys
from typing import Any

import pytest

from finfiles.infrastructure.logging.logger import (
    _JsonFormatter,  # internal but importable
    configure_root_logging,
    get_json_logger,
    get_request_id,
    set_request_context,
)


def _format(msg: str, level: int = logging.INFO, **attrs: Any) -> dict[str, Any]:
    """Format a synthetic record and return the parsed JSON payload."""
    logger = logging.getLogger("test.logger")
    record = logger.makeRecord(
        name=logger.name,
        level=level,
        fn="test_logger",
        lno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in attrs.items():
        setattr(record, key, value)
    return json.loads(_JsonFormatter().format(record))


def test_configure_root_logging_installs_json_handler(monkeypatch: pytest.MonkeyPatch) -> None:
    """Root logger gets one JSON handler and honors LOG_LEVEL."""
    monkeypatch.setenv("LOG_LEVEL", "debug")
    root = logging.getLogger()
    root.handlers.clear()

    configure_root_logging()
    configure_root_logging()

    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, _JsonFormatter)


def test_explicit_level_overrides_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    root = logging.getLogger()
    root.handlers.clear()

    configure_root_logging("warning")

    assert root.level == logging.WARNING


def test_json_formatter_basic_fields() -> None:
    payload = _format("pipeline.load.start")

    assert payload["message"] == "pipeline.load.start"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.logger"
    assert "ts" in payload
    assert "request_id" not in payload


def test_json_formatter_merges_extra_payload() -> None:
    payload = _format("edgar.http.failed", extra={"endpoint": "company_facts", "status": 503})

    assert payload["endpoint"] == "company_facts"
    assert payload["status"] == 503


def test_request_id_comes_from_record_then_context_then_env(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    assert _format("a", request_id="rec-1")["request_id"] == "rec-1"

    set_request_context(request_id="ctx-1")
    try:
        assert get_request_id() == "ctx-1"
        assert _format("b")["request_id"] == "ctx-1"
    finally:
        set_request_context(request_id=None)

    monkeypatch.setenv("REQUEST_ID", "env-1")
    assert _format("c")["request_id"] == "env-1"


def test_json_formatter_includes_exception_info() -> None:
    try:
        raise ValueError("boom")
    except ValueError:
        exc_info = sys.exc_info()

    logger = logging.getLogger("test.logger.exc")
    record = logger.makeRecord(
        logger.name, logging.ERROR, "test_logger", 1, "failure", (), exc_info
    )
    payload = json.loads(_JsonFormatter().format(record))

    assert payload["level"] == "ERROR"
    assert payload["exc_type"] == "ValueError"
    assert payload["exc_message"] == "boom"


def test_get_json_logger_propagates_to_root() -> None:
    logger = get_json_logger("finfiles.test")

    assert logger.name == "finfiles.test"
    assert logger.propagate is True
