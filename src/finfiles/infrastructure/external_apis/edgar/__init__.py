# src/finfiles/infrastructure/external_apis/edgar/__init__.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
"""EDGAR external API package.

Purpose:
    Group EDGAR-related infrastructure modules:

    * settings: Pydantic settings for the EDGAR client.
    * client: Async HTTP client for SEC EDGAR with bounded retries.
    * types: Typed response fragments for EDGAR endpoints.
"""

from __future__ import annotations
