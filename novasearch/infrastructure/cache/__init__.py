from .memory_cache import CacheEntry, MemoryCache
from .redis_cache import RedisCache

__all__ = ["CacheEntry", "MemoryCache", "RedisCache"]
