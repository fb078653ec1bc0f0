# src/finfiles/__init__.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
"""Finfiles: SEC EDGAR company-facts ingestion and query analysis."""

from __future__ import annotations

__version__ = "0.1.0"
