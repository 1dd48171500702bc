"""Multilingual content safety filter for queries and result items."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Mapping, Sequence

from novasearch.domain.data.safety_keywords import (
    ADULT_DOMAINS,
    BLOCKED_KEYWORDS,
    SAFE_CONTEXTS,
)
from novasearch.domain.models.search import ResultItem
from novasearch.domain.services.domains import host_of, normalize_host

logger = logging.getLogger(__name__)

BLOCKED_MESSAGE = "No results found"
ADULT_CONTENT_REASON = "adult_content"

# Latin letters (including accented), whitespace and hyphens only
_LATIN_KEYWORD_RE = re.compile(r"[a-zÀ-ɏ\s\-]+")


@dataclass(frozen=True, slots=True)
class QueryVerdict:
    allowed: bool
    reason: str | None = None


@dataclass(frozen=True, slots=True)
class SafetyPolicy:
    """Compiled, read-only keyword and domain sets.

    Every language's lists are merged: a match in any language counts.
    """

    safe_contexts: tuple[str, ...]
    blocked_pattern: re.Pattern[str] | None
    blocked_substrings: tuple[str, ...]
    adult_domains: frozenset[str]

    @classmethod
    def build(
        cls,
        safe_contexts: Mapping[str, Sequence[str]],
        blocked_keywords: Mapping[str, Sequence[str]],
        adult_domains: Iterable[str],
    ) -> "SafetyPolicy":
        safe = _unique(
            phrase.lower() for phrases in safe_contexts.values() for phrase in phrases
        )

        latin: list[str] = []
        other: list[str] = []
        for keyword in _unique(
            keyword.lower()
            for keywords in blocked_keywords.values()
            for keyword in keywords
        ):
            (latin if _LATIN_KEYWORD_RE.fullmatch(keyword) else other).append(keyword)

        pattern = None
        if latin:
            alternation = "|".join(re.escape(keyword) for keyword in latin)
            pattern = re.compile(rf"\b(?:{alternation})\b")

        return cls(
            safe_contexts=tuple(safe),
            blocked_pattern=pattern,
            blocked_substrings=tuple(other),
            adult_domains=frozenset(normalize_host(domain) for domain in adult_domains),
        )


def _unique(values: Iterable[str]) -> list[str]:
    seen: dict[str, None] = {}
    for value in values:
        if value:
            seen.setdefault(value, None)
    return list(seen)


@lru_cache()
def default_policy() -> SafetyPolicy:
    return SafetyPolicy.build(SAFE_CONTEXTS, BLOCKED_KEYWORDS, ADULT_DOMAINS)


class ContentSafetyFilter:
    """Allow/block decisions over query text and result items.

    Safe contexts are checked first and always win over blocked keywords found
    in the same text.
    """

    def __init__(self, policy: SafetyPolicy | None = None) -> None:
        self._policy = policy or default_policy()

    def has_safe_context(self, text: str) -> bool:
        lowered = (text or "").lower()
        return any(phrase in lowered for phrase in self._policy.safe_contexts)

    def has_blocked_keyword(self, text: str) -> bool:
        lowered = (text or "").lower()
        if self._policy.blocked_pattern and self._policy.blocked_pattern.search(lowered):
            return True
        return any(keyword in lowered for keyword in self._policy.blocked_substrings)

    def is_text_allowed(self, text: str) -> bool:
        if self.has_safe_context(text):
            return True
        return not self.has_blocked_keyword(text)

    def is_blocked_domain(self, link: str) -> bool:
        host = host_of(link)
        if not host:
            return False
        labels = host.split(".")
        # exact host or any parent domain
        return any(
            ".".join(labels[index:]) in self._policy.adult_domains
            for index in range(len(labels) - 1)
        )

    def filter_query(self, query: str) -> QueryVerdict:
        if not query or not query.strip():
            return QueryVerdict(allowed=True)
        if self.has_safe_context(query):
            return QueryVerdict(allowed=True)
        if self.has_blocked_keyword(query):
            logger.info(f"Blocked query by content policy: {query!r}")
            return QueryVerdict(allowed=False, reason=ADULT_CONTENT_REASON)
        return QueryVerdict(allowed=True)

    def is_item_allowed(self, item: ResultItem) -> bool:
        if self.is_blocked_domain(item.link):
            return False
        return self.is_text_allowed(f"{item.title} {item.snippet}")

    def filter_results(self, items: Iterable[ResultItem]) -> list[ResultItem]:
        kept: list[ResultItem] = []
        dropped = 0
        for item in items:
            if self.is_item_allowed(item):
                kept.append(item)
            else:
                dropped += 1
        if dropped:
            logger.info(f"Content policy dropped {dropped} result(s)")
        return kept
