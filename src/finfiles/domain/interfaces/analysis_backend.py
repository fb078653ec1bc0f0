# src/finfiles/domain/interfaces/analysis_backend.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
"""Pluggable analysis backend protocol.

The presentation layer picks one backend by name and forwards the user's
question together with the loaded fact table.
"""

from __future__ import annotations

from typing import Protocol

from finfiles.domain.entities.fact_table import FactTable


class AnalysisBackend(Protocol):
    """Something that can answer a free-text question about a fact table."""

    @property
    def name(self) -> str:
        """Display name used for backend selection."""

    async def analyze(self, table: FactTable, query: str) -> str:
        """Return the answer to ``query`` as display text."""
