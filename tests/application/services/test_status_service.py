import pytest

from novasearch.application.services.status_service import StatusService
from novasearch.domain.models.health_status import HealthStatus
from novasearch.infrastructure.external.health_checker import RedisHealthChecker

pytestmark = pytest.mark.anyio


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


class _OkChecker:
    async def check(self) -> HealthStatus:
        return HealthStatus(service="upstream", status="ok")


class _CrashingChecker:
    service_name = "flaky"

    async def check(self) -> HealthStatus:
        raise RuntimeError("boom")


class _PingFailsRedis:
    async def ping(self) -> None:
        raise ConnectionError("refused")


class _FakeRedisClient:
    client = _PingFailsRedis()


async def test_check_all_collects_results_and_crashes() -> None:
    service = StatusService(checkers=[_OkChecker(), _CrashingChecker()], cache_backend="memory")

    statuses = await service.check_all()

    by_service = {status.service: status for status in statuses}
    assert by_service["upstream"].status == "ok"
    assert by_service["flaky"].status == "error"
    assert by_service["flaky"].details == "boom"
    assert by_service["cache"].details == "memory"
    assert by_service["fastapi"].status == "ok"


async def test_redis_checker_reports_ping_failure() -> None:
    status = await RedisHealthChecker(_FakeRedisClient()).check()

    assert status.service == "redis"
    assert status.status == "error"
    assert "refused" in (status.details or "")
