import logging
from functools import lru_cache

from redis.asyncio import Redis

from novasearch.core.config import Settings, get_settings

logger = logging.getLogger(__name__)


class RedisClient:
    """Owns the shared async redis connection used by the redis cache backend"""

    def __init__(self, settings: Settings | None = None):
        self._client: Redis | None = None
        self._settings: Settings = settings or get_settings()

    async def init(self) -> None:
        """Connect and ping; a second call is a no-op"""
        if self._client:
            logger.warning("Redis client already initialized, skipping.")
            return

        try:
            self._client = Redis(
                host=self._settings.redis_host,
                port=self._settings.redis_port,
                db=self._settings.redis_db,
                password=self._settings.redis_password,
                decode_responses=True,
            )
            await self._client.ping()
            logger.info("Redis client initialized.")
        except Exception as e:
            logger.error(f"Redis client initialization failed: {e}")
            self._client = None
            raise

    async def shutdown(self) -> None:
        if self._client:
            await self._client.aclose()
            logger.info("Redis client connection closed.")
        else:
            logger.warning("Redis client was never initialized, nothing to close.")
        self._client = None

        get_redis.cache_clear()

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    @property
    def client(self) -> Redis:
        """Return the connected client.

        Raises:
            RuntimeError: if ``init`` has not been awaited.
        """
        if not self._client:
            raise RuntimeError("Redis client is not initialized, call init() first.")
        return self._client


@lru_cache()
def get_redis() -> RedisClient:
    return RedisClient()
