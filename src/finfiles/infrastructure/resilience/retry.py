# src/finfiles/infrastructure/resilience/retry.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
"""Retry utilities (async) with bounded backoff."""

from __future__ import annotations

import asyncio
import logging
import random
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RetryPolicy:
    """Configuration for retry attempts.

    With ``jitter=False`` and ``base == cap`` every wait is exactly ``base``
    seconds (fixed backoff).
    """

    total: int  # number of retries (not counting the first attempt)
    base: float  # base backoff seconds
    cap: float  # max backoff seconds
    jitter: bool = True  # add full jitter if True

    @classmethod
    def fixed(cls, *, retries: int, delay_s: float) -> RetryPolicy:
        """Build a policy that waits ``delay_s`` between each of ``retries`` retries."""
        return cls(total=retries, base=delay_s, cap=delay_s, jitter=False)

    def backoff(self, attempt: int) -> float:
        """Return the wait in seconds before retry number ``attempt + 1``."""
        delay = min(self.cap, self.base * (2**attempt))
        if self.jitter:
            delay = random.uniform(0, delay)  # noqa: S311
        return delay


async def retry_async(
    fn: Callable[[], Awaitable[T]],
    *,
    policy: RetryPolicy,
    retry_on: Callable[[Exception], bool],
    label: str = "call",
) -> T:
    """Retry an async function until success or the retry budget is exhausted.

    Args:
        fn: Zero-arg async function to execute.
        policy: RetryPolicy defining count/backoff.
        retry_on: Predicate that returns True when an exception is retryable.
        label: Name used in retry log events.

    Returns:
        The return value of ``fn`` if successful.

    Raises:
        The last exception if it is not retryable or retries are exhausted.
    """
    attempt = 0
    while True:
        try:
            return await fn()
        except Exception as exc:
            if attempt >= policy.total or not retry_on(exc):
                raise
            delay = policy.backoff(attempt)
            logger.warning(
                "retry.scheduled",
                extra={
                    "extra": {
                        "label": label,
                        "attempt": attempt + 1,
                        "max_retries": policy.total,
                        "delay_s": delay,
                        "error": type(exc).__name__,
                    }
                },
            )
        await asyncio.sleep(delay)
        attempt += 1
