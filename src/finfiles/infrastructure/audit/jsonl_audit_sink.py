# src/finfiles/infrastructure/audit/jsonl_audit_sink.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
"""Append-only JSON Lines audit sink.

Each entry becomes one line:
``{"ts": "...", "user": "...", "action": "fetch_filings", "tickers": [...]}``.

The append runs in a worker thread. A failed write is logged as
``audit.write_failed`` and never interrupts the pipeline.
"""

from __future__ import annotations

import asyncio
import json
import logging
import threading
from pathlib import Path

from finfiles.domain.interfaces.audit_sink import AuditEntry

logger = logging.getLogger(__name__)


class JsonlAuditSink:
    """Write audit entries to a local ``.jsonl`` file.

    Args:
        path: Target file. Parent directories are created on first write.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    async def record(self, entry: AuditEntry) -> None:
        """Append ``entry`` as a single JSON line."""
        line = json.dumps(
            {
                "ts": entry.ts.isoformat(),
                "user": entry.user,
                "action": entry.action,
                "tickers": list(entry.tickers),
            },
            separators=(",", ":"),
            ensure_ascii=False,
        )
        try:
            await asyncio.to_thread(self._append, line)
        except OSError as exc:
            logger.warning(
                "audit.write_failed",
                extra={
                    "extra": {
                        "path": str(self._path),
                        "action": entry.action,
                        "error": type(exc).__name__,
                    }
                },
            )
            return

        logger.debug(
            "audit.recorded",
            extra={"extra": {"action": entry.action, "tickers": list(entry.tickers)}},
        )

    def _append(self, line: str) -> None:
        with self._lock:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("a", encoding="utf-8") as fh:
                fh.write(line + "\n")
