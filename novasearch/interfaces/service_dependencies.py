import logging
from functools import lru_cache
from typing import Any, List, Optional

from novasearch.application.services.intent_classifier import IntentClassifier
from novasearch.application.services.search_service import SearchService
from novasearch.application.services.status_service import StatusService
from novasearch.application.services.summarizer import Summarizer
from novasearch.core.config import get_settings
from novasearch.domain.external.cache import Cache
from novasearch.domain.models.app_config import LLMConfig
from novasearch.domain.models.location import PartialLocation
from novasearch.domain.models.search import Intent, SearchResponse, UpstreamPage
from novasearch.domain.services.content_filter import ContentSafetyFilter
from novasearch.domain.services.dispatcher import SourceDispatcher
from novasearch.domain.services.location_resolver import LocationResolver
from novasearch.domain.services.source_catalog import SourceCatalog
from novasearch.domain.services.tab_extractor import TabExtractor
from novasearch.infrastructure.cache import MemoryCache, RedisCache
from novasearch.infrastructure.external.geolocation import HttpGeoLocator
from novasearch.infrastructure.external.health_checker import RedisHealthChecker
from novasearch.infrastructure.external.json_parser import RepairJSONParser
from novasearch.infrastructure.external.llm import OpenAILLM
from novasearch.infrastructure.external.search import SerperSearchProvider
from novasearch.infrastructure.storage.redis import get_redis

logger = logging.getLogger(__name__)


def _build_cache(name: str, value_type: Any) -> Cache:
    settings = get_settings()
    if settings.cache_backend == "redis":
        logger.info(f"Using redis for the {name} cache")
        return RedisCache(get_redis(), value_type)
    logger.info(f"Using in-memory {name} cache")
    return MemoryCache(name=name)


@lru_cache()
def get_search_cache() -> Cache[SearchResponse]:
    return _build_cache("search", SearchResponse)


@lru_cache()
def get_source_cache() -> Cache[UpstreamPage]:
    return _build_cache("source", UpstreamPage)


@lru_cache()
def get_intent_cache() -> Cache[Intent]:
    return _build_cache("intent", Intent)


@lru_cache()
def get_location_cache() -> Cache[PartialLocation]:
    return _build_cache("location", PartialLocation)


def get_memory_caches() -> List[MemoryCache]:
    """In-process caches that need a background sweeper"""
    caches = [
        get_search_cache(),
        get_source_cache(),
        get_intent_cache(),
        get_location_cache(),
    ]
    return [cache for cache in caches if isinstance(cache, MemoryCache)]


@lru_cache()
def get_llm() -> Optional[OpenAILLM]:
    """Shared LLM client, None when no API key is configured"""
    settings = get_settings()
    llm_config = LLMConfig(
        base_url=settings.openrouter_base_url,
        api_key=settings.openrouter_api_key,
        model_name=settings.openrouter_model,
        temperature=settings.llm_temperature,
        max_tokens=settings.llm_max_tokens,
        timeout_seconds=settings.llm_timeout_seconds,
    )
    if not llm_config.enabled:
        logger.warning("No LLM API key configured, using keyword intent and basic summaries")
        return None
    return OpenAILLM(llm_config)


@lru_cache()
def get_search_provider() -> SerperSearchProvider:
    settings = get_settings()
    if not settings.serper_api_key:
        logger.warning("SERPER_API_KEY is not set, searches will fail with a configuration error")
    return SerperSearchProvider(
        api_key=settings.serper_api_key,
        base_url=settings.serper_base_url,
        timeout_seconds=settings.serper_timeout_seconds,
    )


@lru_cache()
def get_location_resolver() -> LocationResolver:
    return LocationResolver(state_city_hint=get_settings().state_city_hint_enabled)


@lru_cache()
def get_geolocator() -> HttpGeoLocator:
    settings = get_settings()
    return HttpGeoLocator(
        timeout_seconds=settings.geolocation_timeout_seconds,
        cache=get_location_cache(),
        cache_ttl_seconds=settings.location_cache_ttl_seconds,
    )


@lru_cache()
def get_intent_classifier() -> IntentClassifier:
    settings = get_settings()
    return IntentClassifier(
        llm=get_llm(),
        json_parser=RepairJSONParser(),
        cache=get_intent_cache(),
        cache_ttl_seconds=settings.intent_cache_ttl_seconds,
        timeout_seconds=settings.llm_timeout_seconds,
    )


@lru_cache()
def get_summarizer() -> Summarizer:
    return Summarizer(
        llm=get_llm(),
        json_parser=RepairJSONParser(),
        timeout_seconds=get_settings().llm_timeout_seconds,
    )


@lru_cache()
def get_search_service() -> SearchService:
    settings = get_settings()
    location_resolver = get_location_resolver()
    dispatcher = SourceDispatcher(
        provider=get_search_provider(),
        location_resolver=location_resolver,
        cache=get_source_cache(),
        cache_ttl_seconds=settings.source_cache_ttl_seconds,
    )

    logger.info("Building SearchService")
    return SearchService(
        dispatcher=dispatcher,
        content_filter=ContentSafetyFilter(),
        location_resolver=location_resolver,
        catalog=SourceCatalog(),
        tab_extractor=TabExtractor(),
        intent_detector=get_intent_classifier(),
        summarizer=get_summarizer(),
        response_cache=get_search_cache(),
        cache_ttl_seconds=settings.search_cache_ttl_seconds,
        synthetic_page_count=settings.synthetic_page_count,
    )


def get_status_service() -> StatusService:
    settings = get_settings()
    checkers = []
    if settings.cache_backend == "redis":
        checkers.append(RedisHealthChecker(get_redis()))
    return StatusService(checkers=checkers, cache_backend=settings.cache_backend)
