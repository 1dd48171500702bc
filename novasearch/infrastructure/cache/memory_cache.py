"""In-process TTL cache keyed by structured CacheKey objects."""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from novasearch.domain.models.cache import CacheKey

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(slots=True)
class CacheEntry(Generic[T]):
    value: T
    written_at: float
    ttl_seconds: float

    def is_expired(self, now: float) -> bool:
        return now - self.written_at >= self.ttl_seconds


class MemoryCache(Generic[T]):
    """TTL cache living in the event loop's process.

    Expiry is checked on every read, so no caller ever observes an expired
    value; ``sweep`` (or the background sweeper) only reclaims memory.
    Same-key writes are last-write-wins.
    """

    def __init__(
        self,
        name: str = "memory",
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._name = name
        self._clock = clock
        self._entries: dict[CacheKey, CacheEntry[T]] = {}
        self._sweeper: asyncio.Task | None = None

    async def get(self, key: CacheKey) -> T | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.is_expired(self._clock()):
            # only drop the entry we looked at; a concurrent set may have replaced it
            if self._entries.get(key) is entry:
                del self._entries[key]
            return None
        return entry.value

    async def set(self, key: CacheKey, value: T, ttl_seconds: float) -> None:
        self._entries[key] = CacheEntry(
            value=value, written_at=self._clock(), ttl_seconds=ttl_seconds
        )

    async def delete(self, key: CacheKey) -> None:
        self._entries.pop(key, None)

    def sweep(self) -> int:
        now = self._clock()
        expired = [key for key, entry in self._entries.items() if entry.is_expired(now)]
        for key in expired:
            del self._entries[key]
        if expired:
            logger.debug(f"{self._name} cache swept {len(expired)} expired entries")
        return len(expired)

    def __len__(self) -> int:
        return len(self._entries)

    def start_sweeper(self, interval_seconds: float) -> None:
        if self._sweeper is not None and not self._sweeper.done():
            return
        self._sweeper = asyncio.create_task(self._sweep_forever(interval_seconds))

    async def stop_sweeper(self) -> None:
        if self._sweeper is None:
            return
        self._sweeper.cancel()
        try:
            await self._sweeper
        except asyncio.CancelledError:
            pass
        self._sweeper = None

    async def _sweep_forever(self, interval_seconds: float) -> None:
        while True:
            await asyncio.sleep(interval_seconds)
            self.sweep()
