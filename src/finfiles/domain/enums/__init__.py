# src/finfiles/domain/enums/__init__.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
