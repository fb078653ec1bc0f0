# src/finfiles/config/__init__.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
"""
Config package export.

Keeps import sites clean and stable:
    from finfiles.config import get_settings, Settings
"""

from __future__ import annotations

from .settings import Environment, Settings, get_settings

__all__ = ["Environment", "Settings", "get_settings"]
