import json

import httpx
import pytest

from novasearch.application.errors.exceptions import ConfigurationError, UpstreamError
from novasearch.domain.models.search import (
    NewsResult,
    PlaceResult,
    ResultKind,
    TimeRange,
    UpstreamQuery,
    VideoResult,
    WebResult,
)
from novasearch.infrastructure.external.search import SerperSearchProvider

pytestmark = pytest.mark.anyio


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


def _provider(handler, api_key: str = "test-key") -> SerperSearchProvider:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return SerperSearchProvider(api_key=api_key, base_url="https://serper.test", client=client)


async def test_web_search_wire_format_and_mapping() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json={
                "searchParameters": {"q": "iphnoe", "correctedQuery": "iphone"},
                "organic": [
                    {
                        "title": "iPhone",
                        "link": "https://apple.com/iphone",
                        "snippet": "The new iPhone",
                        "position": 1,
                        "rating": 4.5,
                        "ratingCount": 120,
                        "sitelinks": [{"title": "Buy", "link": "https://apple.com/buy"}],
                    },
                    {"title": "Review", "link": "https://example.com/r"},
                ],
                "relatedSearches": [{"query": "iphone 15"}, {"query": "iphone price"}],
            },
        )

    provider = _provider(handler)
    page = await provider.search(
        UpstreamQuery(
            text="site:apple.com iphnoe",
            page=2,
            page_size=250,
            country_code="us",
            location="Dallas,Texas,United States",
            language="en",
            time_range=TimeRange.WEEK,
        )
    )

    request = seen[0]
    assert request.method == "POST"
    assert request.url == "https://serper.test/search"
    assert request.headers["X-API-KEY"] == "test-key"
    assert json.loads(request.content) == {
        "q": "site:apple.com iphnoe",
        "num": 100,
        "page": 2,
        "hl": "en",
        "autocorrect": True,
        "safe": "active",
        "gl": "us",
        "location": "Dallas,Texas,United States",
        "tbs": "qdr:w",
    }

    assert page.corrected_query == "iphone"
    assert page.related_searches == ["iphone 15", "iphone price"]
    first, second = page.items
    assert isinstance(first, WebResult)
    assert first.rating == 4.5
    assert first.sitelinks[0].link == "https://apple.com/buy"
    assert second.position == 2


async def test_kind_selects_endpoint_and_mapper() -> None:
    payloads = {
        "/videos": {"videos": [{"title": "Clip", "link": "https://v.com/1", "views": "1.2M"}]},
        "/places": {"places": [{"title": "Cafe", "address": "1 Main St", "rating": 4.2}]},
        "/news": {"news": [{"title": "Headline", "link": "https://n.com/1", "source": "N"}]},
    }

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=payloads[request.url.path])

    provider = _provider(handler)

    videos = await provider.search(UpstreamQuery(text="q", kind=ResultKind.VIDEO))
    places = await provider.search(UpstreamQuery(text="q", kind=ResultKind.PLACE))
    news = await provider.search(UpstreamQuery(text="q", kind=ResultKind.NEWS))

    assert isinstance(videos.items[0], VideoResult)
    assert videos.items[0].views == "1.2M"
    assert isinstance(places.items[0], PlaceResult)
    assert places.items[0].address == "1 Main St"
    assert isinstance(news.items[0], NewsResult)
    assert news.items[0].publisher == "N"


async def test_body_omits_optional_geo_and_time() -> None:
    seen: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(json.loads(request.content))
        return httpx.Response(200, json={})

    page = await _provider(handler).search(UpstreamQuery(text="q"))

    assert page.items == []
    assert "gl" not in seen[0]
    assert "location" not in seen[0]
    assert "tbs" not in seen[0]


async def test_missing_api_key_is_a_configuration_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    with pytest.raises(ConfigurationError):
        await _provider(handler, api_key="").search(UpstreamQuery(text="q"))


async def test_http_error_status_is_an_upstream_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(403, json={"message": "Unauthorized"})

    with pytest.raises(UpstreamError) as exc_info:
        await _provider(handler).search(UpstreamQuery(text="q"))

    assert exc_info.value.data == {"status": 403}


async def test_network_error_is_an_upstream_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(UpstreamError):
        await _provider(handler).search(UpstreamQuery(text="q"))


async def test_suggest_reads_autocomplete_and_swallows_errors() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/autocomplete"
        body = json.loads(request.content)
        if body["q"] == "broken":
            return httpx.Response(500)
        return httpx.Response(
            200, json={"suggestions": [{"value": "python tutorial"}, {"value": "python list"}]}
        )

    provider = _provider(handler)

    assert await provider.suggest("python") == ["python tutorial", "python list"]
    assert await provider.suggest("broken") == []
