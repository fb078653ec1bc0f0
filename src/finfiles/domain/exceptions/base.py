# src/finfiles/domain/exceptions/base.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
"""Base Domain Exceptions.

Summary:
    Canonical base class for domain/application exceptions so that every
    failure surfaced by the pipeline carries a stable code and a
    machine-readable payload.

Layer:
    domain/exceptions
"""

from __future__ import annotations

from typing import Any


class FinfilesError(Exception):
    """Base class for all Finfiles domain/application exceptions.

    Attributes:
        code:
            Stable error code suitable for metrics and boundary mapping.
        message:
            Human-readable error message, safe to show to end users.
        details:
            Optional machine-readable diagnostic payload used by adapters and
            logging code.
    """

    code: str = "FINFILES_ERROR"

    def __init__(self, message: str = "", *, details: dict[str, Any] | None = None) -> None:
        """Initialize a FinfilesError instance.

        Args:
            message:
                Human-readable error message.
            details:
                Optional structured diagnostic payload for logs or adapters.
        """
        super().__init__(message)
        self.message = message
        self.details: dict[str, Any] = details or {}

    def __str__(self) -> str:
        """Return the human-readable message for this error."""
        # Details are never interpolated into the message.
        return self.message
