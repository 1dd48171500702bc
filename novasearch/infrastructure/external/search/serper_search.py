import logging
from typing import Any, Callable, Dict, List, Optional

import httpx

from novasearch.application.errors.exceptions import ConfigurationError, UpstreamError
from novasearch.domain.external.search import SearchProvider
from novasearch.domain.models.search import (
    ImageResult,
    NewsResult,
    PlaceResult,
    ResultItem,
    ResultKind,
    Sitelink,
    TimeRange,
    UpstreamPage,
    UpstreamQuery,
    VideoResult,
    WebResult,
)

logger = logging.getLogger(__name__)

MAX_RESULTS_PER_CALL = 100

_ENDPOINTS = {
    ResultKind.WEB: "search",
    ResultKind.IMAGE: "images",
    ResultKind.VIDEO: "videos",
    ResultKind.PLACE: "places",
    ResultKind.NEWS: "news",
}
_TIME_RANGES = {
    TimeRange.DAY: "qdr:d",
    TimeRange.WEEK: "qdr:w",
    TimeRange.MONTH: "qdr:m",
    TimeRange.YEAR: "qdr:y",
}


def _optional_int(value: Any) -> Optional[int]:
    try:
        return int(value) if value is not None else None
    except (TypeError, ValueError):
        return None


def _optional_float(value: Any) -> Optional[float]:
    try:
        return float(value) if value is not None else None
    except (TypeError, ValueError):
        return None


def _optional_str(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


def map_web_result(raw: Dict[str, Any], index: int) -> WebResult:
    return WebResult(
        title=raw.get("title") or "",
        link=raw.get("link") or "",
        snippet=raw.get("snippet") or "",
        position=_optional_int(raw.get("position")) or index + 1,
        thumbnail=_optional_str(raw.get("thumbnail") or raw.get("imageUrl")),
        date=_optional_str(raw.get("date")),
        rating=_optional_float(raw.get("rating")),
        rating_count=_optional_int(raw.get("ratingCount")),
        price=_optional_str(raw.get("price")),
        sitelinks=[
            Sitelink(title=link.get("title") or "", link=link.get("link") or "")
            for link in raw.get("sitelinks") or []
            if isinstance(link, dict)
        ],
    )


def map_image_result(raw: Dict[str, Any], index: int) -> ImageResult:
    return ImageResult(
        title=raw.get("title") or f"Image {index + 1}",
        link=raw.get("link") or "",
        position=_optional_int(raw.get("position")) or index + 1,
        image_url=raw.get("imageUrl") or "",
        thumbnail=_optional_str(raw.get("thumbnailUrl")),
        publisher=_optional_str(raw.get("source")),
        width=_optional_int(raw.get("imageWidth")),
        height=_optional_int(raw.get("imageHeight")),
    )


def map_video_result(raw: Dict[str, Any], index: int) -> VideoResult:
    return VideoResult(
        title=raw.get("title") or f"Video {index + 1}",
        link=raw.get("link") or "",
        snippet=raw.get("snippet") or "",
        position=_optional_int(raw.get("position")) or index + 1,
        thumbnail=_optional_str(raw.get("imageUrl") or raw.get("thumbnail")),
        date=_optional_str(raw.get("date")),
        duration=_optional_str(raw.get("duration")),
        channel=_optional_str(raw.get("channel") or raw.get("source")),
        views=raw.get("views"),
    )


def map_place_result(raw: Dict[str, Any], index: int) -> PlaceResult:
    return PlaceResult(
        title=raw.get("title") or f"Place {index + 1}",
        link=raw.get("link") or raw.get("website") or "",
        snippet=raw.get("snippet") or raw.get("category") or "",
        position=_optional_int(raw.get("position")) or index + 1,
        thumbnail=_optional_str(raw.get("thumbnailUrl") or raw.get("thumbnail")),
        address=_optional_str(raw.get("address")),
        rating=_optional_float(raw.get("rating")),
        rating_count=_optional_int(raw.get("ratingCount")),
        price=_optional_str(raw.get("priceLevel") or raw.get("price")),
        hours=_optional_str(raw.get("hours")),
        phone=_optional_str(raw.get("phoneNumber") or raw.get("phone")),
        website=_optional_str(raw.get("website")),
    )


def map_news_result(raw: Dict[str, Any], index: int) -> NewsResult:
    return NewsResult(
        title=raw.get("title") or f"News {index + 1}",
        link=raw.get("link") or "",
        snippet=raw.get("snippet") or "",
        position=_optional_int(raw.get("position")) or index + 1,
        thumbnail=_optional_str(raw.get("imageUrl") or raw.get("thumbnail")),
        date=_optional_str(raw.get("date")),
        publisher=_optional_str(raw.get("source")),
    )


# kind -> (response field, mapping function)
_MAPPERS: Dict[ResultKind, tuple[str, Callable[[Dict[str, Any], int], ResultItem]]] = {
    ResultKind.WEB: ("organic", map_web_result),
    ResultKind.IMAGE: ("images", map_image_result),
    ResultKind.VIDEO: ("videos", map_video_result),
    ResultKind.PLACE: ("places", map_place_result),
    ResultKind.NEWS: ("news", map_news_result),
}


def build_request_body(query: UpstreamQuery) -> Dict[str, Any]:
    body: Dict[str, Any] = {
        "q": query.text,
        "num": min(query.page_size, MAX_RESULTS_PER_CALL),
        "page": query.page,
        "hl": query.language,
        "autocorrect": True,
        # safe search is forced on regardless of the caller
        "safe": "active",
    }
    if query.country_code:
        body["gl"] = query.country_code
    if query.location:
        body["location"] = query.location
    if query.time_range in _TIME_RANGES:
        body["tbs"] = _TIME_RANGES[query.time_range]
    return body


def parse_page(kind: ResultKind, payload: Dict[str, Any]) -> UpstreamPage:
    field, mapper = _MAPPERS[kind]
    items = [
        mapper(raw, index)
        for index, raw in enumerate(payload.get(field) or [])
        if isinstance(raw, dict)
    ]
    search_parameters = payload.get("searchParameters") or {}
    related = [
        entry["query"]
        for entry in payload.get("relatedSearches") or []
        if isinstance(entry, dict) and entry.get("query")
    ]
    return UpstreamPage(
        items=items,
        corrected_query=search_parameters.get("correctedQuery") or None,
        related_searches=related,
    )


class SerperSearchProvider(SearchProvider):
    """serper.dev Google search API client"""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://google.serper.dev",
        timeout_seconds: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout_seconds
        self._client = client

    async def _post(self, endpoint: str, body: Dict[str, Any]) -> Dict[str, Any]:
        if not self._api_key:
            raise ConfigurationError("SERPER_API_KEY is not configured")

        url = f"{self._base_url}/{endpoint}"
        headers = {"X-API-KEY": self._api_key, "Content-Type": "application/json"}
        try:
            if self._client is not None:
                response = await self._client.post(
                    url, json=body, headers=headers, timeout=self._timeout
                )
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await client.post(url, json=body, headers=headers)
        except httpx.HTTPError as e:
            logger.error(f"Serper {endpoint} request failed: {type(e).__name__}: {e}")
            raise UpstreamError(f"Search provider request failed: {e}")

        if response.status_code >= 400:
            logger.error(
                f"Serper {endpoint} returned {response.status_code}: {response.text[:200]}"
            )
            raise UpstreamError(
                f"Search provider error: {response.status_code}",
                data={"status": response.status_code},
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise UpstreamError(f"Search provider returned invalid JSON: {e}")
        if not isinstance(payload, dict):
            raise UpstreamError("Search provider returned an unexpected payload")
        return payload

    async def search(self, query: UpstreamQuery) -> UpstreamPage:
        endpoint = _ENDPOINTS[query.kind]
        body = build_request_body(query)
        logger.info(
            f"Serper {endpoint}: q={body['q']!r} page={body['page']} "
            f"gl={body.get('gl')} location={body.get('location')} hl={body['hl']}"
        )
        payload = await self._post(endpoint, body)
        page = parse_page(query.kind, payload)
        logger.info(f"Serper {endpoint} returned {len(page.items)} results")
        return page

    async def suggest(
        self,
        query: str,
        country_code: Optional[str] = None,
        location: Optional[str] = None,
        language: str = "en",
    ) -> List[str]:
        body: Dict[str, Any] = {"q": query, "hl": language, "safe": "active"}
        if country_code:
            body["gl"] = country_code
        if location:
            body["location"] = location

        try:
            payload = await self._post("autocomplete", body)
        except (ConfigurationError, UpstreamError) as e:
            logger.warning(f"Suggestions unavailable: {e.msg}")
            return []

        suggestions: List[str] = []
        for entry in payload.get("suggestions") or []:
            if isinstance(entry, dict):
                value = entry.get("value") or entry.get("suggestion")
            else:
                value = entry
            if isinstance(value, str) and value:
                suggestions.append(value)
        return suggestions
