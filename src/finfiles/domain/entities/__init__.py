# src/finfiles/domain/entities/__init__.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
