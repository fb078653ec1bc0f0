# src/finfiles/application/__init__.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
