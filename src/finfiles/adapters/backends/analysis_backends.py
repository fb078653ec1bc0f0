# src/finfiles/adapters/backends/analysis_backends.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
"""Pluggable analysis backends.

Purpose:
    Concrete :class:`AnalysisBackend` implementations plus the registry used
    by the presentation layer to select one by display name.

Layer:
    adapters/backends

Notes:
    - ``FINFILES AI`` runs the rule-based :class:`QueryAnalyzer` and renders
      its report with :class:`AnalysisPresenter`.
    - ``ONNX``, ``RemoteLLM`` and ``CustomModel`` are placeholders for model
      backed engines; they currently answer through ``FINFILES AI``.
    - Recoverable analysis errors (missing column, unsupported dtype) are
      returned as the answer text instead of being raised.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Final

from finfiles.adapters.presenters.analysis_presenter import AnalysisPresenter
from finfiles.domain.entities.fact_table import FactTable
from finfiles.domain.exceptions.analysis import AnalysisError, UnknownBackend
from finfiles.domain.interfaces.analysis_backend import AnalysisBackend
from finfiles.domain.services.query_analyzer import QueryAnalyzer

logger = logging.getLogger(__name__)

FINFILES_BACKEND_NAME: Final[str] = "FINFILES AI"
ONNX_BACKEND_NAME: Final[str] = "ONNX"
REMOTE_LLM_BACKEND_NAME: Final[str] = "RemoteLLM"
CUSTOM_MODEL_BACKEND_NAME: Final[str] = "CustomModel"


class FinfilesAnalysisBackend:
    """Rule-based backend over the query analyzer.

    Args:
        analyzer: Analyzer computing structured reports.
        presenter: Presenter turning reports into text.
    """

    def __init__(
        self,
        analyzer: QueryAnalyzer | None = None,
        presenter: AnalysisPresenter | None = None,
    ) -> None:
        self._analyzer = analyzer or QueryAnalyzer()
        self._presenter = presenter or AnalysisPresenter()

    @property
    def name(self) -> str:
        return FINFILES_BACKEND_NAME

    async def analyze(self, table: FactTable, query: str) -> str:
        """Answer ``query`` against ``table``."""
        try:
            report = self._analyzer.analyze(table, query)
        except AnalysisError as exc:
            logger.info(
                "analysis.query.recoverable_error",
                extra={"extra": {"backend": self.name, "code": exc.code, **exc.details}},
            )
            return str(exc)

        logger.info(
            "analysis.query",
            extra={"extra": {"backend": self.name, "intent": report.intent.value}},
        )
        return self._presenter.present(report)


class _DelegatingAnalysisBackend:
    """Backend that answers through another backend under its own name."""

    _name: str = ""

    def __init__(self, delegate: AnalysisBackend | None = None) -> None:
        self._delegate: AnalysisBackend = delegate or FinfilesAnalysisBackend()

    @property
    def name(self) -> str:
        return self._name

    async def analyze(self, table: FactTable, query: str) -> str:
        logger.debug(
            "analysis.backend.delegate",
            extra={"extra": {"backend": self.name, "delegate": self._delegate.name}},
        )
        return await self._delegate.analyze(table, query)


class OnnxAnalysisBackend(_DelegatingAnalysisBackend):
    """Local ONNX model backend."""

    _name = ONNX_BACKEND_NAME


class RemoteLLMAnalysisBackend(_DelegatingAnalysisBackend):
    """Remote LLM backend."""

    _name = REMOTE_LLM_BACKEND_NAME


class CustomModelAnalysisBackend(_DelegatingAnalysisBackend):
    """User-supplied model backend.

    Args:
        model_name: Name of the uploaded model, kept for diagnostics.
        delegate: Backend producing the answers.
    """

    _name = CUSTOM_MODEL_BACKEND_NAME

    def __init__(self, model_name: str, delegate: AnalysisBackend | None = None) -> None:
        super().__init__(delegate)
        self.model_name = model_name


def default_backends(custom_model: str | None = None) -> tuple[AnalysisBackend, ...]:
    """Return the registered backends in display order.

    Args:
        custom_model: When given, a :class:`CustomModelAnalysisBackend` for
            that model is appended.
    """
    core = FinfilesAnalysisBackend()
    backends: list[AnalysisBackend] = [
        core,
        OnnxAnalysisBackend(core),
        RemoteLLMAnalysisBackend(core),
    ]
    if custom_model is not None:
        backends.append(CustomModelAnalysisBackend(custom_model, core))
    return tuple(backends)


def select_backend(name: str, backends: Sequence[AnalysisBackend]) -> AnalysisBackend:
    """Return the backend whose display name matches ``name`` (case-insensitive).

    Raises:
        UnknownBackend: If no backend has that name.
    """
    wanted = name.strip().casefold()
    for backend in backends:
        if backend.name.casefold() == wanted:
            return backend
    raise UnknownBackend(
        f"Unknown analysis backend: {name}",
        details={"available": [b.name for b in backends]},
    )
