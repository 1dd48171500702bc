from typing import Optional, Protocol, TypeVar

from novasearch.domain.models.cache import CacheKey

T = TypeVar("T")


class Cache(Protocol[T]):
    """TTL key/value cache protocol.

    A ``get`` after ``ttl_seconds`` have elapsed since the matching ``set``
    behaves as a miss, whether or not physical cleanup has run.
    """

    async def get(self, key: CacheKey) -> Optional[T]:
        ...

    async def set(self, key: CacheKey, value: T, ttl_seconds: float) -> None:
        ...

    async def delete(self, key: CacheKey) -> None:
        ...
