# src/finfiles/infrastructure/audit/__init__.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
