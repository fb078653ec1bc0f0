# src/finfiles/infrastructure/observability/metrics_edgar.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
"""EDGAR metrics.

Purpose:
    Provide Prometheus-style metrics for EDGAR external API calls:
      * Latency histograms.
      * Error counters by reason.
      * HTTP status distribution.
      * Retry counters.

Design:
    - Functions return lazily-created singleton metric instances so repeated
      client construction never registers a collector twice.
"""

from __future__ import annotations

from prometheus_client import Counter, Histogram

_edgar_latency_seconds: Histogram | None = None
_edgar_errors_total: Counter | None = None
_edgar_http_status_total: Counter | None = None
_edgar_retries_total: Counter | None = None


def get_edgar_latency_seconds() -> Histogram:
    """Return (and lazily create) the EDGAR call latency histogram."""
    global _edgar_latency_seconds
    if _edgar_latency_seconds is None:
        _edgar_latency_seconds = Histogram(
            "finfiles_edgar_latency_seconds",
            "Latency of EDGAR calls in seconds (retries included).",
            ["endpoint", "outcome"],
        )
    return _edgar_latency_seconds


def get_edgar_errors_total() -> Counter:
    """Return (and lazily create) the EDGAR error counter."""
    global _edgar_errors_total
    if _edgar_errors_total is None:
        _edgar_errors_total = Counter(
            "finfiles_edgar_errors_total",
            "Total number of failed EDGAR calls.",
            ["endpoint", "reason"],
        )
    return _edgar_errors_total


def get_edgar_http_status_total() -> Counter:
    """Return (and lazily create) the EDGAR HTTP status counter."""
    global _edgar_http_status_total
    if _edgar_http_status_total is None:
        _edgar_http_status_total = Counter(
            "finfiles_edgar_http_status_total",
            "EDGAR responses by HTTP status code.",
            ["endpoint", "status"],
        )
    return _edgar_http_status_total


def get_edgar_retries_total() -> Counter:
    """Return (and lazily create) the EDGAR retry counter."""
    global _edgar_retries_total
    if _edgar_retries_total is None:
        _edgar_retries_total = Counter(
            "finfiles_edgar_retries_total",
            "Retries of EDGAR calls after connection-level failures.",
            ["endpoint", "reason"],
        )
    return _edgar_retries_total
