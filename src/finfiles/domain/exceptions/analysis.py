# src/finfiles/domain/exceptions/analysis.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
"""Analysis domain exceptions.

Layer:
    domain

Notes:
    Analysis errors are recoverable: analysis backends return their message
    as the answer text instead of failing the conversation.
"""

from __future__ import annotations

from finfiles.domain.exceptions.base import FinfilesError


class AnalysisError(FinfilesError):
    """Base class for query-analysis errors."""

    code = "ANALYSIS_ERROR"


class AnalysisUnsupported(AnalysisError):
    """Raised when a matched column has a dtype the analyzer cannot summarize."""

    code = "ANALYSIS_UNSUPPORTED"


class MissingColumn(AnalysisError):
    """Raised when a query needs a column the table does not have."""

    code = "MISSING_COLUMN"


class UnknownBackend(AnalysisError):
    """Raised when an analysis backend name is not registered."""

    code = "UNKNOWN_BACKEND"


class InvalidTable(AnalysisError):
    """Raised when a fact table violates its shape invariants."""

    code = "INVALID_TABLE"
