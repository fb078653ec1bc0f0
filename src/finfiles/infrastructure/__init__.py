# src/finfiles/infrastructure/__init__.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
