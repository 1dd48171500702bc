import asyncio

import pytest

from novasearch.domain.models.cache import CacheKey
from novasearch.infrastructure.cache import MemoryCache

pytestmark = pytest.mark.anyio


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


async def test_get_after_ttl_is_a_miss() -> None:
    cache: MemoryCache[str] = MemoryCache()
    key = CacheKey(query="ai")

    await cache.set(key, "value", ttl_seconds=0.1)
    assert await cache.get(key) == "value"

    await asyncio.sleep(0.15)

    assert await cache.get(key) is None
    assert len(cache) == 0


async def test_overwrite_resets_ttl_clock() -> None:
    clock = FakeClock()
    cache: MemoryCache[str] = MemoryCache(clock=clock)
    key = CacheKey(query="ai")

    await cache.set(key, "old", ttl_seconds=10)
    clock.now += 8
    await cache.set(key, "new", ttl_seconds=10)
    clock.now += 8

    assert await cache.get(key) == "new"


async def test_distinct_keys_never_share_values() -> None:
    cache: MemoryCache[str] = MemoryCache()
    page_one = CacheKey(query="ai", page=1)
    page_two = CacheKey(query="ai", page=2)

    await cache.set(page_one, "first page", ttl_seconds=60)

    assert await cache.get(page_two) is None
    await cache.set(page_two, "second page", ttl_seconds=60)
    assert await cache.get(page_one) == "first page"
    assert await cache.get(page_two) == "second page"


async def test_delete_and_sweep() -> None:
    clock = FakeClock()
    cache: MemoryCache[int] = MemoryCache(clock=clock)

    await cache.set(CacheKey(query="a"), 1, ttl_seconds=5)
    await cache.set(CacheKey(query="b"), 2, ttl_seconds=50)
    await cache.set(CacheKey(query="c"), 3, ttl_seconds=50)
    await cache.delete(CacheKey(query="c"))
    clock.now += 10

    assert cache.sweep() == 1
    assert len(cache) == 1
    assert await cache.get(CacheKey(query="b")) == 2


async def test_background_sweeper_reclaims_expired_entries() -> None:
    cache: MemoryCache[int] = MemoryCache()
    await cache.set(CacheKey(query="a"), 1, ttl_seconds=0.01)

    cache.start_sweeper(0.02)
    await asyncio.sleep(0.08)
    await cache.stop_sweeper()

    assert len(cache) == 0
