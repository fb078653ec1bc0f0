# src/finfiles/infrastructure/resilience/__init__.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
