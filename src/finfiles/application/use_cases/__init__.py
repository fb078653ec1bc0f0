# src/finfiles/application/use_cases/__init__.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
