# src/finfiles/domain/interfaces/audit_sink.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
"""Audit sink protocol and entry type.

Layer:
    domain/interfaces

Notes:
    The pipeline only emits entries; storage belongs to the sink.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Final, Protocol

#: Action recorded whenever company filings/facts are fetched.
FETCH_FILINGS_ACTION: Final[str] = "fetch_filings"


@dataclass(frozen=True)
class AuditEntry:
    """One audit record.

    Attributes:
        user: Name of the user on whose behalf the action ran.
        action: Action identifier (e.g., ``"fetch_filings"``).
        tickers: Tickers the action touched.
        ts: UTC timestamp of the action.
    """

    user: str
    action: str
    tickers: tuple[str, ...]
    ts: datetime = field(default_factory=lambda: datetime.now(tz=UTC))

    @classmethod
    def fetch_filings(cls, user: str, tickers: Sequence[str]) -> AuditEntry:
        return cls(user=user, action=FETCH_FILINGS_ACTION, tickers=tuple(tickers))


class AuditSink(Protocol):
    """Destination for audit entries."""

    async def record(self, entry: AuditEntry) -> None:
        """Persist or forward one audit entry. Must not raise on storage failure."""
