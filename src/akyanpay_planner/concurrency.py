"""Concurrency controls for asynchronous operations."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Dict, Mapping, Optional, TypeVar

from .exceptions import BatchGenerationError

T = TypeVar("T")

logger = logging.getLogger(__name__)


class ConcurrencyManager:
    """Manage concurrency limits using an asyncio.Semaphore."""

    def __init__(self, config: Any | None = None, max_concurrent: Optional[int] = None) -> None:
        self._limit = (
            int(max_concurrent)
            if max_concurrent is not None
            else int(getattr(config, "max_concurrent_requests", 9) or 9)
        )
        self._semaphore = asyncio.Semaphore(self._limit)

    @property
    def limit(self) -> int:
        return self._limit

    async def run_with_limit(self, coro: Awaitable[T]) -> T:
        async with self._semaphore:
            return await coro

    async def gather_settled(self, coros: Mapping[str, Awaitable[T]]) -> Dict[str, T | BaseException]:
        """Run every named coroutine and wait until all of them have settled.

        Failures are returned in place of results; nothing is cancelled.
        """
        names = list(coros)
        outcomes = await asyncio.gather(
            *(self.run_with_limit(coros[name]) for name in names),
            return_exceptions=True,
        )
        return dict(zip(names, outcomes))

    async def gather_all_or_fail(self, coros: Mapping[str, Awaitable[T]], message: str = "Batch failed") -> Dict[str, T]:
        """Fail-fast aggregate join.

        Waits for all coroutines to settle. If any raised, all successes are
        discarded and one :class:`BatchGenerationError` carrying every failure
        is raised. Otherwise the results are returned keyed by name, in input
        order.
        """
        outcomes = await self.gather_settled(coros)

        failures: Dict[str, BaseException] = {}
        for name, outcome in outcomes.items():
            if isinstance(outcome, asyncio.CancelledError):
                raise outcome
            if isinstance(outcome, BaseException):
                failures[name] = outcome

        if failures:
            for name, error in failures.items():
                logger.error("Batch member %s failed: %s", name, error)
            raise BatchGenerationError(message, failures)

        return outcomes  # type: ignore[return-value]

