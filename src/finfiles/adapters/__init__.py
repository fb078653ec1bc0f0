# src/finfiles/adapters/__init__.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
