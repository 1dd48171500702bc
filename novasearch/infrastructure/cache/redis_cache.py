"""Redis-backed TTL cache; values are stored as pydantic JSON."""

from __future__ import annotations

import logging
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError
from redis.exceptions import RedisError

from novasearch.domain.models.cache import CacheKey
from novasearch.infrastructure.storage.redis import RedisClient

logger = logging.getLogger(__name__)

T = TypeVar("T")

# connection-level failures raised by redis-py or the socket layer underneath it
_REDIS_FAILURES = (RedisError, ConnectionError, TimeoutError)


class RedisCache(Generic[T]):
    """TTL cache over redis ``SET ... PX``; expiry is enforced by redis itself.

    Keys are the SHA-256 ``storage_key`` of the structured CacheKey, so no
    hand-built delimiter can make two keys collide. Caching is best effort:
    while redis is unreachable a read is a miss and a write is dropped.
    """

    def __init__(self, redis_client: RedisClient, value_type: Any) -> None:
        self._redis_client = redis_client
        self._adapter: TypeAdapter[T] = TypeAdapter(value_type)

    async def get(self, key: CacheKey) -> T | None:
        try:
            raw = await self._redis_client.client.get(key.storage_key())
        except _REDIS_FAILURES as e:
            logger.warning(f"Redis read failed, treating as cache miss: {e}")
            return None
        if raw is None:
            return None
        try:
            return self._adapter.validate_json(raw)
        except ValidationError as e:
            logger.warning(f"Discarding unreadable cache entry {key.storage_key()}: {e}")
            await self.delete(key)
            return None

    async def set(self, key: CacheKey, value: T, ttl_seconds: float) -> None:
        ttl_ms = max(1, int(ttl_seconds * 1000))
        try:
            await self._redis_client.client.set(
                key.storage_key(),
                self._adapter.dump_json(value),
                px=ttl_ms,
            )
        except _REDIS_FAILURES as e:
            logger.warning(f"Redis write failed, entry not cached: {e}")

    async def delete(self, key: CacheKey) -> None:
        try:
            await self._redis_client.client.delete(key.storage_key())
        except _REDIS_FAILURES as e:
            logger.warning(f"Redis delete failed: {e}")
