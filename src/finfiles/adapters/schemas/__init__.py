# src/finfiles/adapters/schemas/__init__.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
