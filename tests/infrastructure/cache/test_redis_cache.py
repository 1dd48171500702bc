import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from novasearch.domain.models.cache import CacheKey
from novasearch.domain.models.search import (
    Intent,
    Pagination,
    SearchResponse,
    VideoResult,
    WebResult,
)
from novasearch.infrastructure.cache import RedisCache

pytestmark = pytest.mark.anyio


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


class FakeRedis:
    def __init__(self) -> None:
        self.store: dict[str, str] = {}
        self.ttls: dict[str, int] = {}

    async def get(self, key: str):
        return self.store.get(key)

    async def set(self, key: str, value, px: int | None = None) -> None:
        self.store[key] = value.decode() if isinstance(value, bytes) else value
        self.ttls[key] = px

    async def delete(self, key: str) -> None:
        self.store.pop(key, None)


class FakeRedisClient:
    def __init__(self) -> None:
        self.client = FakeRedis()


async def test_round_trips_search_response_with_result_variants() -> None:
    redis_client = FakeRedisClient()
    cache: RedisCache[SearchResponse] = RedisCache(redis_client, SearchResponse)
    key = CacheKey(query="ai")
    response = SearchResponse(
        query="ai",
        intent=Intent.TECH,
        results=[
            WebResult(title="web", link="https://a.com", position=1),
            VideoResult(title="video", link="https://v.com", views="1.2M"),
        ],
        pagination=Pagination(
            current_page=1, total_pages=100, total_results=1000, has_next=True, has_previous=False
        ),
    )

    await cache.set(key, response, ttl_seconds=300)
    loaded = await cache.get(key)

    assert redis_client.client.ttls[key.storage_key()] == 300_000
    assert loaded == response
    assert isinstance(loaded.results[1], VideoResult)


async def test_unreadable_entry_is_discarded() -> None:
    redis_client = FakeRedisClient()
    cache: RedisCache[Intent] = RedisCache(redis_client, Intent)
    key = CacheKey(namespace="intent", query="x")
    redis_client.client.store[key.storage_key()] = '"not-an-intent"'

    assert await cache.get(key) is None
    assert key.storage_key() not in redis_client.client.store


async def test_miss_and_delete() -> None:
    redis_client = FakeRedisClient()
    cache: RedisCache[Intent] = RedisCache(redis_client, Intent)
    key = CacheKey(namespace="intent", query="news today")

    assert await cache.get(key) is None
    await cache.set(key, Intent.NEWS, ttl_seconds=0.0001)
    assert redis_client.client.ttls[key.storage_key()] == 1
    assert await cache.get(key) == Intent.NEWS
    await cache.delete(key)
    assert await cache.get(key) is None


class UnreachableRedis:
    def __init__(self, error: Exception) -> None:
        self._error = error

    async def get(self, key: str):
        raise self._error

    async def set(self, key: str, value, px: int | None = None) -> None:
        raise self._error

    async def delete(self, key: str) -> None:
        raise self._error


class UnreachableRedisClient:
    def __init__(self, error: Exception) -> None:
        self.client = UnreachableRedis(error)


@pytest.mark.parametrize(
    "error",
    [RedisConnectionError("connection refused"), ConnectionError("redis down"), TimeoutError()],
)
async def test_unreachable_redis_reads_as_miss_and_drops_writes(error) -> None:
    cache: RedisCache[Intent] = RedisCache(UnreachableRedisClient(error), Intent)
    key = CacheKey(namespace="intent", query="weather")

    assert await cache.get(key) is None
    await cache.set(key, Intent.NEWS, ttl_seconds=60)
    await cache.delete(key)
