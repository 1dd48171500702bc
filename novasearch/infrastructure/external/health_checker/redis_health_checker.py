import logging

from novasearch.domain.models.health_status import HealthStatus
from novasearch.infrastructure.storage.redis import RedisClient

logger = logging.getLogger(__name__)


class RedisHealthChecker:
    """Pings the redis cache backend"""

    service_name = "redis"

    def __init__(self, redis_client: RedisClient) -> None:
        self._redis_client = redis_client

    async def check(self) -> HealthStatus:
        try:
            await self._redis_client.client.ping()
            return HealthStatus(service=self.service_name, status="ok")
        except Exception as e:
            logger.error(f"Redis health check failed: {e}")
            return HealthStatus(service=self.service_name, status="error", details=str(e))
