# src/finfiles/domain/interfaces/__init__.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
