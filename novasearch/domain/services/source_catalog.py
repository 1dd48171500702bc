"""Resolve a source selector into the concrete list of sources to query."""

from __future__ import annotations

from typing import Mapping

from novasearch.application.errors.exceptions import BadRequestError
from novasearch.domain.data.sources import COUNTRY_SOURCES, GLOBAL_SOURCES
from novasearch.domain.models.search import Intent, ResultKind, Source
from novasearch.domain.services.domains import favicon_url, normalize_host

ALL_SELECTOR = "all"
SITE_PREFIX = "site:"

WEB_SOURCE = Source(id="web", name="Web", kind=ResultKind.WEB)
NATIVE_SOURCES: Mapping[str, Source] = {
    "web": WEB_SOURCE,
    "images": Source(id="images", name="Images", kind=ResultKind.IMAGE),
    "videos": Source(id="videos", name="Videos", kind=ResultKind.VIDEO),
    "places": Source(id="places", name="Places", kind=ResultKind.PLACE),
    "news": Source(id="news", name="News", kind=ResultKind.NEWS),
}


class SourceCatalog:
    """Static per-intent sources, overridden per market, plus the native tabs."""

    def __init__(
        self,
        global_sources: Mapping[Intent, tuple[Source, ...]] = GLOBAL_SOURCES,
        country_sources: Mapping[str, Mapping[Intent, tuple[Source, ...]]] = COUNTRY_SOURCES,
    ) -> None:
        self._global_sources = global_sources
        self._country_sources = country_sources

    def native_sources(self) -> list[Source]:
        return list(NATIVE_SOURCES.values())

    def intent_sources(self, intent: Intent, country_code: str = "") -> list[Source]:
        overrides = self._country_sources.get((country_code or "").lower(), {})
        sources = overrides.get(intent) or self._global_sources.get(intent)
        if sources is None:
            sources = self._global_sources.get(Intent.GENERAL, ())
        return [
            source.model_copy(update={"icon": favicon_url(source.site)})
            if source.site and not source.icon
            else source
            for source in sources
        ]

    @staticmethod
    def is_native(selector: str) -> bool:
        return selector in (ALL_SELECTOR, WEB_SOURCE.id)

    def select(self, selector: str, intent: Intent, country_code: str = "") -> list[Source]:
        """Sources for ``selector``.

        ``all`` is the native web source plus every intent source; ``web`` and
        the other native tabs are unscoped; ``site:<domain>`` is a dynamic
        source; anything else must be an intent source id.
        """
        selector = (selector or ALL_SELECTOR).strip()
        intent_sources = self.intent_sources(intent, country_code)

        if selector == ALL_SELECTOR:
            return [WEB_SOURCE, *intent_sources]
        if selector in NATIVE_SOURCES:
            return [NATIVE_SOURCES[selector]]
        if selector.startswith(SITE_PREFIX):
            return [self.site_source(selector[len(SITE_PREFIX):])]
        for source in intent_sources:
            if source.id == selector:
                return [source]
        raise BadRequestError(f"Unknown source: {selector}")

    @staticmethod
    def site_source(domain: str, kind: ResultKind = ResultKind.WEB) -> Source:
        """Dynamic source scoped to ``domain``."""
        domain = normalize_host(domain)
        if not domain:
            raise BadRequestError("Empty site selector")
        return Source(
            id=f"{SITE_PREFIX}{domain}",
            name=domain,
            site=domain,
            kind=kind,
            icon=favicon_url(domain),
            dynamic=True,
        )

    def restrict_to_site(self, sources: list[Source], domain: str) -> list[Source]:
        """Collapse a selection into one source scoped to ``domain``.

        A single selected source keeps its result kind; a multi-source
        selection such as ``all`` becomes one web search on the site.
        """
        kind = sources[0].kind if len(sources) == 1 else ResultKind.WEB
        return [self.site_source(domain, kind)]
