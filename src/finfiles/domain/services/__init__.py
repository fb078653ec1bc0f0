# src/finfiles/domain/services/__init__.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
