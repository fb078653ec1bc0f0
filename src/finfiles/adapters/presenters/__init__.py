# src/finfiles/adapters/presenters/__init__.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
