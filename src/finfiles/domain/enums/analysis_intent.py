# src/finfiles/domain/enums/analysis_intent.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
"""Analysis intent enumeration."""

from __future__ import annotations

from enum import Enum


class AnalysisIntent(str, Enum):
    """What a free-text query is asking for.

    Keyword intents are matched in declaration order; ``METRIC_LOOKUP`` is
    the fallback when no command word is present.
    """

    RAW_DUMP = "RAW_DUMP"
    SUMMARY = "SUMMARY"
    FORECAST = "FORECAST"
    ANOMALY = "ANOMALY"
    PERIOD_LIST = "PERIOD_LIST"
    METRIC_LOOKUP = "METRIC_LOOKUP"
