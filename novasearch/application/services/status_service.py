import asyncio
import logging
from typing import List

from novasearch.domain.external.health_checker import HealthChecker
from novasearch.domain.models.health_status import HealthStatus

logger = logging.getLogger(__name__)


class StatusService:
    """Aggregates health checks for the service and its cache backend."""

    def __init__(self, checkers: List[HealthChecker], cache_backend: str = "memory") -> None:
        self._checkers = checkers
        self._cache_backend = cache_backend

    @property
    def cache_backend(self) -> str:
        return self._cache_backend

    async def check_all(self) -> List[HealthStatus]:
        results = await asyncio.gather(
            *(checker.check() for checker in self._checkers),
            return_exceptions=True,
        )

        statuses: List[HealthStatus] = []
        for checker, result in zip(self._checkers, results):
            if isinstance(result, Exception):
                service = getattr(checker, "service_name", checker.__class__.__name__)
                logger.error(f"{service} health check failed: {result}")
                statuses.append(
                    HealthStatus(service=str(service), status="error", details=str(result))
                )
            else:
                statuses.append(result)

        statuses.append(HealthStatus(service="cache", status="ok", details=self._cache_backend))
        statuses.append(HealthStatus(service="fastapi", status="ok"))
        return statuses
