from __future__ import annotations

import asyncio
import logging

from novasearch.domain.external.cache import Cache
from novasearch.domain.external.json_parser import JSONParser
from novasearch.domain.external.llm import LLM
from novasearch.domain.models.cache import CacheKey
from novasearch.domain.models.search import Intent
from novasearch.domain.services.keyword_intent import KeywordIntentDetector
from novasearch.domain.services.prompts.intent_classifier import (
    INTENT_CLASSIFIER_SYSTEM_PROMPT,
    INTENT_CLASSIFIER_USER_PROMPT,
)

logger = logging.getLogger(__name__)


class IntentClassifier:
    """LLM intent classifier that falls back to keyword scoring.

    ``classify`` never raises: LLM timeouts, errors and unknown labels all fall
    back to the keyword detector, which itself defaults to ``general``.
    """

    def __init__(
        self,
        llm: LLM | None,
        json_parser: JSONParser,
        keyword_detector: KeywordIntentDetector | None = None,
        cache: Cache[Intent] | None = None,
        cache_ttl_seconds: float = 600,
        timeout_seconds: float = 8.0,
    ) -> None:
        self._llm = llm
        self._json_parser = json_parser
        self._keyword_detector = keyword_detector or KeywordIntentDetector()
        self._cache = cache
        self._cache_ttl_seconds = cache_ttl_seconds
        self._timeout_seconds = max(0.1, float(timeout_seconds))

    async def classify(self, query: str) -> Intent:
        intent, _ = await self.classify_with_meta(query)
        return intent

    async def classify_with_meta(self, query: str) -> tuple[Intent, bool]:
        """Return ``(intent, served_from_cache)``"""
        query = (query or "").strip()
        if not query:
            return Intent.GENERAL, False

        key = CacheKey(namespace="intent", query=query.lower())
        if self._cache is not None:
            cached = await self._cache.get(key)
            if cached is not None:
                return cached, True

        intent = await self._classify_uncached(query)
        if self._cache is not None:
            await self._cache.set(key, intent, self._cache_ttl_seconds)
        return intent, False

    async def _classify_uncached(self, query: str) -> Intent:
        if self._llm is None:
            return self._keyword_detector.detect(query)

        try:
            async with asyncio.timeout(self._timeout_seconds):
                message = await self._llm.invoke(
                    messages=[
                        {"role": "system", "content": INTENT_CLASSIFIER_SYSTEM_PROMPT},
                        {
                            "role": "user",
                            "content": INTENT_CLASSIFIER_USER_PROMPT.format(query=query),
                        },
                    ],
                    response_format={"type": "json_object"},
                )
        except Exception as exc:
            logger.warning(f"LLM intent classification failed, using keywords: {exc}")
            return self._keyword_detector.detect(query)

        content = ""
        if isinstance(message, dict):
            content = str(message.get("content") or "")

        try:
            parsed = await self._json_parser.invoke(content, default_value={})
        except Exception as exc:
            logger.warning(f"LLM intent JSON unreadable, using keywords: {exc}")
            return self._keyword_detector.detect(query)

        label = parsed.get("intent") if isinstance(parsed, dict) else parsed
        try:
            return Intent(str(label).strip().lower())
        except ValueError:
            logger.warning(f"LLM returned unknown intent {label!r}, using keywords")
            return self._keyword_detector.detect(query)
