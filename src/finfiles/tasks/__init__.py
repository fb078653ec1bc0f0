# src/finfiles/tasks/__init__.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
