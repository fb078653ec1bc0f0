# src/finfiles/application/use_cases/pipeline/__init__.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
"""Ticker → fact table pipeline use cases."""
