# src/finfiles/adapters/backends/__init__.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
