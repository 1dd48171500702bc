import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from novasearch.application.errors.exceptions import BadRequestError
from novasearch.application.services.intent_classifier import IntentClassifier
from novasearch.application.services.search_service import SUMMARY_RESULT_COUNT, SearchService
from novasearch.application.services.summarizer import Summarizer
from novasearch.core.config import get_settings
from novasearch.domain.models.location import LocationMode, PartialLocation
from novasearch.domain.models.search import (
    FileType,
    Intent,
    SearchFilters,
    SearchRequest,
    SearchResponse,
    SortOption,
    Summary,
    TimeRange,
)
from novasearch.domain.services.language import detect_script_language
from novasearch.domain.services.location_resolver import LocationResolver
from novasearch.infrastructure.external.geolocation import HttpGeoLocator
from novasearch.infrastructure.external.search import SerperSearchProvider
from novasearch.interfaces.schemas import Response
from novasearch.interfaces.schemas.search import (
    IntentRequest,
    IntentResponse,
    ReverseGeocodeResponse,
    SuggestionsResponse,
    SummarizeRequest,
    looks_explanatory,
)
from novasearch.interfaces.service_dependencies import (
    get_geolocator,
    get_intent_classifier,
    get_location_resolver,
    get_search_provider,
    get_search_service,
    get_summarizer,
)

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Search"])


def client_ip(request: Request) -> str:
    """First hop of X-Forwarded-For, else the socket peer"""
    forwarded = request.headers.get("x-forwarded-for", "")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else ""


@router.get(
    "/search",
    response_model=Response[SearchResponse],
    summary="Aggregated search",
    description="Fan a query out to the selected sources and return ranked, filtered, paginated results.",
)
async def search(
    request: Request,
    query: str = "",
    source: str = "all",
    page: int = Query(1, ge=1),
    limit: Optional[int] = Query(None, ge=1, le=100),
    sort: SortOption = SortOption.RELEVANCE,
    intent: Optional[Intent] = None,
    auto_intent: bool = True,
    location_mode: LocationMode = LocationMode.NORMAL,
    country: str = "",
    country_code: str = "",
    state: str = "",
    city: str = "",
    location: str = "",
    time_range: TimeRange = TimeRange.ANY,
    language: str = "any",
    file_type: FileType = FileType.ANY,
    site: Optional[str] = None,
    explanatory: Optional[bool] = None,
    search_service: SearchService = Depends(get_search_service),
    geolocator: HttpGeoLocator = Depends(get_geolocator),
) -> Response[SearchResponse]:
    location_input = PartialLocation(
        country=country.strip(),
        country_code=country_code.strip(),
        state=state.strip(),
        city=city.strip(),
        location=location.strip(),
    )

    # in normal mode the location params carry a client-side detection
    detected = None
    if location_mode == LocationMode.NORMAL:
        if location_input.is_empty():
            detected = await geolocator.detect_by_ip(client_ip(request))
        else:
            detected = location_input

    search_request = SearchRequest(
        query=query,
        source=source,
        page=page,
        limit=limit or get_settings().default_page_size,
        sort=sort,
        intent=intent,
        auto_detect_intent=auto_intent,
        location_mode=location_mode,
        manual_location=location_input if location_mode == LocationMode.MANUAL else PartialLocation(),
        detected_location=detected,
        filters=SearchFilters(time_range=time_range, language=language, file_type=file_type),
        site=site,
        explanatory=looks_explanatory(query) if explanatory is None else explanatory,
    )
    result = await search_service.search(search_request)
    return Response.success(data=result)


@router.post(
    "/intent",
    response_model=Response[IntentResponse],
    summary="Detect query intent",
)
async def detect_intent(
    body: IntentRequest,
    classifier: IntentClassifier = Depends(get_intent_classifier),
) -> Response[IntentResponse]:
    query = body.query.strip()
    if not query:
        raise BadRequestError("Query must not be empty")

    intent, cached = await classifier.classify_with_meta(query)
    return Response.success(data=IntentResponse(intent=intent, cached=cached))


@router.post(
    "/summarize",
    response_model=Response[Summary],
    summary="Summarize results",
    description="Summarize a result list the caller already holds; falls back to a locally built summary.",
)
async def summarize(
    body: SummarizeRequest,
    summarizer: Summarizer = Depends(get_summarizer),
) -> Response[Summary]:
    query = body.query.strip()
    if not query or body.results is None or body.intent is None:
        raise BadRequestError("Query, results and intent are required")

    top_results = body.results[:SUMMARY_RESULT_COUNT]
    summary = await summarizer.summarize(query, top_results, body.intent)
    return Response.success(data=summary)


@router.get(
    "/suggestions",
    response_model=Response[SuggestionsResponse],
    summary="Query autocomplete",
)
async def suggestions(
    query: str = "",
    country_code: str = "",
    location: str = "",
    language: str = "",
    provider: SerperSearchProvider = Depends(get_search_provider),
) -> Response[SuggestionsResponse]:
    query = query.strip()
    if not query:
        return Response.success(data=SuggestionsResponse(query=query))

    items = await provider.suggest(
        query,
        country_code=country_code.strip().lower() or None,
        location=location.strip() or None,
        language=language.strip() or detect_script_language(query),
    )
    return Response.success(data=SuggestionsResponse(query=query, suggestions=items))


@router.get(
    "/location/reverse",
    response_model=Response[ReverseGeocodeResponse],
    summary="Reverse geocode coordinates",
)
async def reverse_geocode(
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180),
    geolocator: HttpGeoLocator = Depends(get_geolocator),
    location_resolver: LocationResolver = Depends(get_location_resolver),
) -> Response:
    found = await geolocator.reverse_geocode(lat, lon)
    if found is None:
        return Response.fail(404, "Location not found")

    signature = location_resolver.resolve(found, None, LocationMode.MANUAL)
    return Response.success(
        data=ReverseGeocodeResponse(
            country=found.country,
            country_code=signature.country_code or found.country_code,
            state=found.state,
            city=found.city,
            display_name=signature.display_name(),
        )
    )
