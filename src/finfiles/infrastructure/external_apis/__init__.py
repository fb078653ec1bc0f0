# src/finfiles/infrastructure/external_apis/__init__.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
