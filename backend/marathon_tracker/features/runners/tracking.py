"""Tracking several runners at once, optionally on a fixed polling cycle."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from .errors import TrackerError
from .models import Runner
from .service import RunnerService

logger = logging.getLogger(__name__)


@dataclass
class LookupResult:
    """Outcome of one lookup: a runner or the error it failed with."""

    query: str
    runner: Runner | None = None
    error: TrackerError | None = None

    @property
    def ok(self) -> bool:
        return self.runner is not None


def unique_queries(queries: Sequence[str]) -> list[str]:
    """Stripped, non-empty, first occurrence wins."""
    seen: dict[str, None] = {}
    for q in queries:
        q = q.strip()
        if q:
            seen.setdefault(q, None)
    return list(seen)


async def lookup_one(service: RunnerService, query: str) -> LookupResult:
    try:
        return LookupResult(query=query, runner=await service.lookup(query))
    except TrackerError as e:
        return LookupResult(query=query, error=e)


async def lookup_all(service: RunnerService, queries: Sequence[str]) -> list[LookupResult]:
    """Look up all queries concurrently; one failure does not affect the others."""
    return list(await asyncio.gather(*(lookup_one(service, q) for q in queries)))


async def watch(
    service: RunnerService,
    queries: Sequence[str],
    interval_s: float,
    on_results: Callable[[list[LookupResult]], None],
    rounds: Optional[int] = None,
) -> None:
    """
    Poll all queries every interval_s seconds.

    Args:
        rounds: Stop after this many polls (None = until cancelled)
    """
    done = 0
    while True:
        results = await lookup_all(service, queries)
        on_results(results)
        done += 1
        if rounds is not None and done >= rounds:
            return
        logger.debug(f"Next poll in {interval_s:.0f}s")
        await asyncio.sleep(interval_s)
