# src/finfiles/dependencies/__init__.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
