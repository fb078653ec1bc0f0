# src/finfiles/infrastructure/logging/__init__.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
