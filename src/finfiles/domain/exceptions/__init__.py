# src/finfiles/domain/exceptions/__init__.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
