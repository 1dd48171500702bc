import httpx
import pytest

from novasearch.domain.models.location import PartialLocation
from novasearch.infrastructure.cache import MemoryCache
from novasearch.infrastructure.external.geolocation import HttpGeoLocator
from novasearch.infrastructure.external.geolocation.http_geolocator import is_public_ip

pytestmark = pytest.mark.anyio


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


def test_is_public_ip() -> None:
    assert is_public_ip("8.8.8.8") is True
    assert is_public_ip("127.0.0.1") is False
    assert is_public_ip("192.168.1.10") is False
    assert is_public_ip("not-an-ip") is False


async def test_detect_by_ip_parses_and_caches() -> None:
    calls: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(str(request.url))
        return httpx.Response(
            200,
            json={
                "status": "success",
                "country": "Egypt",
                "countryCode": "EG",
                "regionName": "Cairo Governorate",
                "city": "Cairo",
            },
        )

    locator = HttpGeoLocator(
        cache=MemoryCache(name="location"),
        client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )

    first = await locator.detect_by_ip("41.33.0.1")
    second = await locator.detect_by_ip("41.33.0.1")

    assert first == PartialLocation(
        country="Egypt", country_code="eg", state="Cairo Governorate", city="Cairo"
    )
    assert second == first
    assert len(calls) == 1


async def test_detect_by_ip_skips_private_addresses_and_failures() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"status": "fail"})

    locator = HttpGeoLocator(client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))

    assert await locator.detect_by_ip("10.0.0.1") is None
    assert await locator.detect_by_ip("8.8.8.8") is None


async def test_reverse_geocode_falls_back_to_secondary_provider() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "nominatim.openstreetmap.org":
            return httpx.Response(503)
        return httpx.Response(
            200,
            json={
                "countryName": "Saudi Arabia",
                "countryCode": "SA",
                "principalSubdivision": "Riyadh Province",
                "city": "Riyadh",
            },
        )

    locator = HttpGeoLocator(client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))

    location = await locator.reverse_geocode(24.7, 46.7)

    assert location is not None
    assert location.country_code == "sa"
    assert location.city == "Riyadh"


async def test_reverse_geocode_prefers_primary_provider() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.host == "nominatim.openstreetmap.org"
        return httpx.Response(
            200,
            json={"address": {"country": "France", "country_code": "fr", "city": "Paris"}},
        )

    locator = HttpGeoLocator(client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))

    location = await locator.reverse_geocode(48.85, 2.35)

    assert location == PartialLocation(country="France", country_code="fr", city="Paris")


async def test_reverse_geocode_returns_none_when_all_providers_fail() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timeout", request=request)

    locator = HttpGeoLocator(client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))

    assert await locator.reverse_geocode(0.0, 0.0) is None
