"""Source dispatcher: fan one logical query out to N sources and join the results.

Every source runs concurrently. A site-scoped source that comes back empty is
retried once against its brand's global domain with the geographic bias
dropped. One source failing never fails the batch; only a configuration error
on every source escalates.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Mapping, Sequence

from novasearch.application.errors.exceptions import ConfigurationError
from novasearch.domain.data.geography import COUNTRY_DEFAULT_LANGUAGE
from novasearch.domain.data.sources import BRAND_GLOBAL_DOMAINS
from novasearch.domain.external.cache import Cache
from novasearch.domain.external.search import SearchProvider
from novasearch.domain.models.cache import CacheKey
from novasearch.domain.models.location import LocationSignature
from novasearch.domain.models.search import (
    FileType,
    ResultItem,
    SearchFilters,
    Source,
    UpstreamPage,
    UpstreamQuery,
)
from novasearch.domain.services.domains import (
    favicon_url,
    global_counterpart,
    host_of,
    normalize_host,
)
from novasearch.domain.services.language import DEFAULT_LANGUAGE, detect_script_language
from novasearch.domain.services.location_resolver import LocationResolver

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DispatchResult:
    items: list[ResultItem] = field(default_factory=list)
    corrected_query: str | None = None
    related_searches: list[str] = field(default_factory=list)
    fallbacks: dict[str, str] = field(default_factory=dict)  # source id -> substituted domain
    failed_sources: list[str] = field(default_factory=list)

    @property
    def degraded(self) -> bool:
        """True when at least one source failed and contributed nothing"""
        return bool(self.failed_sources)


@dataclass(slots=True)
class _SourceOutcome:
    items: list[ResultItem]
    pages: list[UpstreamPage]
    fallback_domain: str | None = None


def build_search_text(query: str, site: str | None, file_type: FileType) -> str:
    text = query.strip()
    if file_type != FileType.ANY:
        text = f"{text} filetype:{file_type.value}"
    if site:
        text = f"site:{site} {text}"
    return text


def source_cache_key(upstream: UpstreamQuery) -> CacheKey:
    """Cache key covering every field of one upstream call."""
    return CacheKey(
        namespace="source",
        query=upstream.text,
        source_selector=upstream.kind.value,
        page=upstream.page,
        limit=upstream.page_size,
        location=LocationSignature(
            country_code=upstream.country_code or "",
            canonical=upstream.location or "",
        ),
        filters=SearchFilters(time_range=upstream.time_range, language=upstream.language),
    )


class SourceDispatcher:
    def __init__(
        self,
        provider: SearchProvider,
        location_resolver: LocationResolver | None = None,
        cache: Cache[UpstreamPage] | None = None,
        cache_ttl_seconds: float = 300,
        brand_map: Mapping[str, str] = BRAND_GLOBAL_DOMAINS,
        country_languages: Mapping[str, str] = COUNTRY_DEFAULT_LANGUAGE,
    ) -> None:
        self._provider = provider
        self._location_resolver = location_resolver or LocationResolver()
        self._cache = cache
        self._cache_ttl_seconds = cache_ttl_seconds
        self._brand_map = brand_map
        self._country_languages = country_languages

    async def dispatch(
        self,
        query: str,
        sources: Sequence[Source],
        location: LocationSignature,
        filters: SearchFilters,
        page: int,
        limit: int,
    ) -> DispatchResult:
        if not sources:
            return DispatchResult()

        outcomes = await asyncio.gather(
            *(
                self._run_source(query, source, location, filters, page, limit)
                for source in sources
            ),
            return_exceptions=True,
        )

        result = DispatchResult()
        config_errors: list[ConfigurationError] = []
        for source, outcome in zip(sources, outcomes):
            if isinstance(outcome, ConfigurationError):
                logger.error(f"Source {source.id} is not configured: {outcome.msg}")
                config_errors.append(outcome)
                result.failed_sources.append(source.id)
                continue
            if isinstance(outcome, Exception):
                logger.error(f"Source {source.id} failed, contributing no results: {outcome}")
                result.failed_sources.append(source.id)
                continue
            if isinstance(outcome, BaseException):
                raise outcome

            result.items.extend(outcome.items)
            if outcome.fallback_domain:
                result.fallbacks[source.id] = outcome.fallback_domain
            for upstream_page in outcome.pages:
                if result.corrected_query is None and upstream_page.corrected_query:
                    result.corrected_query = upstream_page.corrected_query
                if not result.related_searches and upstream_page.related_searches:
                    result.related_searches = list(upstream_page.related_searches)

        if len(config_errors) == len(sources):
            raise config_errors[0]

        return result

    async def _run_source(
        self,
        query: str,
        source: Source,
        location: LocationSignature,
        filters: SearchFilters,
        page: int,
        limit: int,
    ) -> _SourceOutcome:
        site = normalize_host(source.site or "") or None
        primary = UpstreamQuery(
            text=build_search_text(query, site, filters.file_type),
            kind=source.kind,
            page=page,
            page_size=limit,
            country_code=location.country_code or None,
            location=self._location_resolver.upstream_location(location),
            language=self._query_language(query, filters),
            time_range=filters.time_range,
            safe_search=True,
        )
        upstream_page = await self._fetch(primary)
        items = [self._tag(item, source, site) for item in upstream_page.items]
        if items or not site:
            return _SourceOutcome(items=items, pages=[upstream_page])

        counterpart = global_counterpart(site, self._brand_map)
        if not counterpart:
            return _SourceOutcome(items=[], pages=[upstream_page])

        fallback = primary.model_copy(
            update={
                "text": build_search_text(query, counterpart, filters.file_type),
                "country_code": None,
                "location": None,
                "language": self._fallback_language(query, filters, location),
            }
        )
        logger.info(f"Source {source.id}: no results on {site}, retrying on {counterpart}")
        try:
            fallback_page = await self._fetch(fallback)
        except ConfigurationError:
            raise
        except Exception as exc:
            logger.warning(f"Fallback {site} -> {counterpart} failed: {exc}")
            return _SourceOutcome(items=[], pages=[upstream_page])

        if not fallback_page.items:
            logger.info(f"Fallback {site} -> {counterpart} returned no results")
            return _SourceOutcome(items=[], pages=[upstream_page, fallback_page])

        logger.info(
            f"Fallback {site} -> {counterpart} returned {len(fallback_page.items)} results"
        )
        fallback_items = [
            self._tag(item, source, counterpart, fallback_from=site)
            for item in fallback_page.items
        ]
        return _SourceOutcome(
            items=fallback_items,
            pages=[upstream_page, fallback_page],
            fallback_domain=counterpart,
        )

    async def _fetch(self, upstream: UpstreamQuery) -> UpstreamPage:
        if self._cache is None:
            return await self._provider.search(upstream)

        key = source_cache_key(upstream)
        cached = await self._cache.get(key)
        if cached is not None:
            logger.debug(f"Source cache hit: {upstream.text!r} page {upstream.page}")
            return cached

        upstream_page = await self._provider.search(upstream)
        await self._cache.set(key, upstream_page, self._cache_ttl_seconds)
        return upstream_page

    @staticmethod
    def _query_language(query: str, filters: SearchFilters) -> str:
        if filters.language and filters.language != "any":
            return filters.language
        return detect_script_language(query)

    def _fallback_language(
        self, query: str, filters: SearchFilters, location: LocationSignature
    ) -> str:
        if filters.language and filters.language != "any":
            return filters.language
        if location.country_code in self._country_languages:
            return self._country_languages[location.country_code]
        return detect_script_language(query) or DEFAULT_LANGUAGE

    @staticmethod
    def _tag(
        item: ResultItem,
        source: Source,
        site: str | None,
        fallback_from: str | None = None,
    ) -> ResultItem:
        domain = site or host_of(item.link)
        update = {
            "source_id": source.id,
            "source_name": source.name,
            "site": domain or item.site,
            "favicon": favicon_url(domain) if domain else item.favicon,
        }
        if fallback_from:
            update["fallback_from"] = fallback_from
        return item.model_copy(update=update)
