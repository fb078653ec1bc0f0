# src/finfiles/infrastructure/observability/__init__.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
