"""Search orchestration: one request in, one ranked, filtered, paginated response out."""

from __future__ import annotations

import logging

from novasearch.application.errors.exceptions import BadRequestError
from novasearch.domain.external.cache import Cache
from novasearch.domain.external.classifier import IntentDetector, ResultSummarizer
from novasearch.domain.models.cache import CacheKey
from novasearch.domain.models.location import LocationSignature
from novasearch.domain.models.search import (
    Intent,
    Pagination,
    ResultItem,
    SearchRequest,
    SearchResponse,
    Summary,
)
from novasearch.domain.services.basic_summary import build_basic_summary
from novasearch.domain.services.content_filter import BLOCKED_MESSAGE, ContentSafetyFilter
from novasearch.domain.services.dispatcher import SourceDispatcher
from novasearch.domain.services.domains import normalize_host
from novasearch.domain.services.location_resolver import LocationResolver
from novasearch.domain.services.ranking import paginate, sort_results
from novasearch.domain.services.source_catalog import SourceCatalog
from novasearch.domain.services.tab_extractor import TabExtractor

logger = logging.getLogger(__name__)

SUMMARY_RESULT_COUNT = 10


class SearchService:
    """Composes location resolution, content policy, fan-out, ranking and caching.

    Steps, in order: validate and policy-check the query, resolve intent and
    location, consult the response cache, dispatch to every selected source,
    sort, drop disallowed items, extract domain tiles, summarize, cache and
    paginate. A blocked query short-circuits before any upstream call and is
    never cached; neither is a response that a failed source left incomplete.
    A ``site`` restriction collapses the selection into one site-scoped source.
    """

    def __init__(
        self,
        dispatcher: SourceDispatcher,
        content_filter: ContentSafetyFilter,
        location_resolver: LocationResolver,
        catalog: SourceCatalog,
        tab_extractor: TabExtractor,
        intent_detector: IntentDetector | None = None,
        summarizer: ResultSummarizer | None = None,
        response_cache: Cache[SearchResponse] | None = None,
        cache_ttl_seconds: float = 300,
        synthetic_page_count: int = 100,
    ) -> None:
        self._dispatcher = dispatcher
        self._content_filter = content_filter
        self._location_resolver = location_resolver
        self._catalog = catalog
        self._tab_extractor = tab_extractor
        self._intent_detector = intent_detector
        self._summarizer = summarizer
        self._response_cache = response_cache
        self._cache_ttl_seconds = cache_ttl_seconds
        self._synthetic_page_count = synthetic_page_count

    async def search(self, request: SearchRequest) -> SearchResponse:
        query = (request.query or "").strip()
        if not query:
            raise BadRequestError("Query must not be empty")

        verdict = self._content_filter.filter_query(query)
        if not verdict.allowed:
            return self._blocked_response(query, request.page)

        intent = await self._resolve_intent(query, request)
        location = self._location_resolver.resolve(
            request.manual_location, request.detected_location, request.location_mode
        )
        site_override = normalize_host(request.site or "") or None

        key = self.cache_key(query, request, intent, location, site_override)
        if self._response_cache is not None:
            cached = await self._response_cache.get(key)
            if cached is not None:
                logger.debug(f"Search cache hit for {query!r} page {request.page}")
                return cached.model_copy(update={"cached": True})
            logger.debug(f"Search cache miss for {query!r} page {request.page}")

        sources = self._catalog.select(request.source, intent, location.country_code)
        if site_override:
            sources = self._catalog.restrict_to_site(sources, site_override)
        intent_sources = self._catalog.intent_sources(intent, location.country_code)

        dispatched = await self._dispatcher.dispatch(
            query,
            sources,
            location,
            request.filters,
            request.page,
            request.limit,
        )

        results = sort_results(dispatched.items, request.sort)
        results = self._content_filter.filter_results(results)

        is_native = self._catalog.is_native(request.source)
        domain_tiles = self._tab_extractor.extract(results, intent) if is_native else []

        summary = None
        if request.page == 1 and is_native and request.explanatory and results:
            summary = await self._summarize(query, results, intent)

        response = SearchResponse(
            query=query,
            results=results,
            intent=intent,
            summary=summary,
            sources=sources,
            intent_sources=intent_sources,
            domain_tiles=domain_tiles,
            pagination=paginate(request.page, request.limit, self._synthetic_page_count),
            location=None if location.is_global else location,
            corrected_query=dispatched.corrected_query,
            related_searches=dispatched.related_searches,
            fallbacks=dispatched.fallbacks,
        )

        if dispatched.degraded:
            logger.warning(
                f"Not caching {query!r}: sources failed {dispatched.failed_sources}"
            )
        elif self._response_cache is not None:
            await self._response_cache.set(key, response, self._cache_ttl_seconds)
        return response

    @staticmethod
    def cache_key(
        query: str,
        request: SearchRequest,
        intent: Intent,
        location: LocationSignature,
        site_override: str | None,
    ) -> CacheKey:
        return CacheKey(
            namespace="search",
            query=query,
            source_selector=request.source,
            page=request.page,
            limit=request.limit,
            sort=request.sort,
            location=location,
            filters=request.filters,
            site_override=site_override,
            intent=intent,
            explanatory=request.explanatory,
        )

    async def _resolve_intent(self, query: str, request: SearchRequest) -> Intent:
        if request.intent is not None:
            return request.intent
        if not request.auto_detect_intent or self._intent_detector is None:
            return Intent.GENERAL
        try:
            return await self._intent_detector.classify(query)
        except Exception as exc:
            logger.warning(f"Intent detection failed, defaulting to general: {exc}")
            return Intent.GENERAL

    async def _summarize(
        self, query: str, results: list[ResultItem], intent: Intent
    ) -> Summary:
        top_results = results[:SUMMARY_RESULT_COUNT]
        if self._summarizer is None:
            return build_basic_summary(query, top_results, intent)
        try:
            return await self._summarizer.summarize(query, top_results, intent)
        except Exception as exc:
            logger.warning(f"Summarizer failed, using basic summary: {exc}")
            return build_basic_summary(query, top_results, intent)

    @staticmethod
    def _blocked_response(query: str, page: int) -> SearchResponse:
        return SearchResponse(
            query=query,
            results=[],
            pagination=Pagination(
                current_page=max(1, page),
                total_pages=0,
                total_results=0,
                has_next=False,
                has_previous=False,
            ),
            blocked=True,
            message=BLOCKED_MESSAGE,
        )
