# src/finfiles/adapters/gateways/__init__.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
