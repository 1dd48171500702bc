from typing import Protocol

from novasearch.domain.models.health_status import HealthStatus


class HealthChecker(Protocol):
    """Checks one backing service"""

    async def check(self) -> HealthStatus:
        ...
