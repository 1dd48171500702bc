"""Derive domain tiles (dynamic sub-tabs) from aggregated results."""

from __future__ import annotations

import re
from typing import AbstractSet, Mapping, Sequence

from novasearch.domain.data.sources import PLATFORM_EXCLUSIONS
from novasearch.domain.models.search import DomainTile, Intent, ResultItem
from novasearch.domain.services.domains import (
    brand_label,
    favicon_url,
    host_of,
    registrable_domain,
)

MAX_TILES = 10


def _re(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern, re.IGNORECASE)


_ENCYCLOPEDIA_VIDEO_SOCIAL = r"wikipedia|wikihow|britannica|youtube|vimeo|dailymotion|facebook|twitter|instagram|tiktok|quora|reddit"

# intent -> (include pattern, exclude pattern)
INTENT_PATTERNS: Mapping[Intent, tuple[re.Pattern[str], re.Pattern[str] | None]] = {
    Intent.SHOPPING: (
        _re(r"shop|store|buy|price|deal|sale|cart|market|mall|outlet|amazon|ebay|noon|walmart|\$|€|£"),
        _re(_ENCYCLOPEDIA_VIDEO_SOCIAL + r"|news|blog"),
    ),
    Intent.NEWS: (
        _re(r"news|times|post|herald|tribune|journal|gazette|daily|breaking|report|press|bbc|cnn|reuters"),
        _re(r"wikipedia|shop|store|amazon|ebay|youtube"),
    ),
    Intent.LEARNING: (
        _re(r"learn|course|tutorial|edu|academy|university|school|class|guide|lesson|wiki|study"),
        _re(r"shop|store|buy|deal|casino|bet"),
    ),
    Intent.VIDEOS: (
        _re(r"video|watch|tube|vimeo|stream|tv|clip|movie|episode"),
        _re(r"wikipedia|shop|store"),
    ),
    Intent.TRAVEL: (
        _re(r"travel|hotel|flight|booking|trip|tour|airline|vacation|resort|destination|visit"),
        _re(_ENCYCLOPEDIA_VIDEO_SOCIAL),
    ),
    Intent.HEALTH: (
        _re(r"health|medical|clinic|hospital|doctor|medicine|symptom|disease|care|nih|who\.int|pharma"),
        _re(r"shop|store|casino|bet|youtube|tiktok"),
    ),
    Intent.TECH: (
        _re(r"tech|software|code|developer|dev|github|program|computer|digital|app|ai|cloud|gadget"),
        _re(r"wikipedia|shop|casino"),
    ),
    Intent.FINANCE: (
        _re(r"financ|money|bank|invest|stock|market|trading|crypto|fund|loan|credit|economic"),
        _re(r"wikipedia|casino|youtube|tiktok"),
    ),
    Intent.ENTERTAINMENT: (
        _re(r"movie|film|music|game|celebrity|tv|show|entertainment|imdb|netflix|spotify|series"),
        _re(r"shop|store|bank"),
    ),
    Intent.FOOD: (
        _re(r"recipe|food|cook|kitchen|restaurant|meal|eat|dish|chef|bake|cuisine"),
        _re(r"wikipedia|shop|store|youtube"),
    ),
}


class TabExtractor:
    """Ranks result domains into at most ``max_tiles`` tiles, most frequent first."""

    def __init__(
        self,
        exclusions: AbstractSet[str] = PLATFORM_EXCLUSIONS,
        patterns: Mapping[Intent, tuple[re.Pattern[str], re.Pattern[str] | None]] = INTENT_PATTERNS,
        max_tiles: int = MAX_TILES,
    ) -> None:
        self._exclusions = exclusions
        self._patterns = patterns
        self._max_tiles = max_tiles

    def extract(self, results: Sequence[ResultItem], intent: Intent) -> list[DomainTile]:
        counts: dict[str, int] = {}
        for item in results:
            host = host_of(item.link)
            if not host or brand_label(host) in self._exclusions:
                continue
            if not self._matches_intent(host, item, intent):
                continue
            domain = registrable_domain(host)
            counts[domain] = counts.get(domain, 0) + 1

        # dict preserves first-seen order; sorted() is stable
        ranked = sorted(counts.items(), key=lambda pair: pair[1], reverse=True)
        return [
            DomainTile(
                domain=domain,
                name=self._display_name(domain),
                count=count,
                favicon=favicon_url(domain),
            )
            for domain, count in ranked[: self._max_tiles]
        ]

    def _matches_intent(self, host: str, item: ResultItem, intent: Intent) -> bool:
        if intent == Intent.GENERAL or intent not in self._patterns:
            return True
        include, exclude = self._patterns[intent]
        if exclude is not None and exclude.search(host):
            return False
        return bool(include.search(f"{host} {item.title} {item.snippet}"))

    @staticmethod
    def _display_name(host: str) -> str:
        label = brand_label(host)
        return label[:1].upper() + label[1:] if label else host
