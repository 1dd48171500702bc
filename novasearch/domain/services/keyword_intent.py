"""Weighted keyword patterns for offline intent detection."""

from __future__ import annotations

import logging
import re
from typing import Mapping, Sequence

from novasearch.domain.models.search import Intent

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 2.0

WeightedPatterns = Sequence[tuple[re.Pattern[str], float]]


def _p(pattern: str, weight: float) -> tuple[re.Pattern[str], float]:
    return re.compile(pattern, re.IGNORECASE), weight


# Declaration order breaks score ties.
INTENT_PATTERNS: Mapping[Intent, WeightedPatterns] = {
    Intent.SHOPPING: (
        _p(r"\b(online shopping|e-commerce|place order|order online|checkout|add to cart)\b", 5),
        _p(r"\b(buy|purchase|shop for|shopping|buying)\b", 5),
        _p(r"(شراء|اشتري|تسوق|بشتري)", 5),
        _p(r"\b(acheter|comprar|kaufen|satın al|acquistare)\b", 5),
        _p(r"\b(price|cost|cheap|expensive|affordable|budget|pricing)\b", 3.5),
        _p(r"(سعر|اسعار|تكلفة|رخيص|غالي|كم سعر)", 3.5),
        _p(r"\b(prix|precio|preis|fiyat|preço|prezzo)\b", 3.5),
        _p(r"\b(deal|deals|sale|sales|discount|offer|coupon|promo)\b", 3.5),
        _p(r"(عرض|عروض|خصم|تخفيض|تخفيضات)", 3.5),
        _p(r"\b(online store|shop online|marketplace|amazon|ebay)\b", 3),
        _p(r"\b(shoes|clothing|clothes|shirt|dress|phone|laptop)\b", 3.5),
        _p(r"(حذاء|احذية|ملابس|فستان|جوال|موبايل|لابتوب)", 3.5),
    ),
    Intent.NEWS: (
        _p(r"\b(news|latest|breaking|headline|headlines|press)\b", 5),
        _p(r"\b(today|yesterday|this week|current events)\b", 3),
        _p(r"\b(update|updates|report|announcement)\b", 3.5),
        _p(r"(أخبار|اخبار|خبر|عاجل|آخر الأخبار)", 5),
        _p(r"\b(nouvelles|actualités|noticias|nachrichten|haberler|notícias|notizie)\b", 5),
    ),
    Intent.LEARNING: (
        _p(r"\b(how to|tutorial|guide|step by step)\b", 5),
        _p(r"\b(learn|learning|study|course|education)\b", 4),
        _p(r"\b(what is|what are|explain|definition|meaning)\b", 4),
        _p(r"\b(teach|lesson|class|documentation|docs|manual)\b", 3),
        _p(r"(كيف|كيفية|طريقة|تعلم|تعليم|دورة|شرح|ما هو|ما هي)", 4),
        _p(r"\b(comment|cómo|wie|nasıl|como|apprendre|aprender|lernen|imparare)\b", 4),
    ),
    Intent.VIDEOS: (
        _p(r"\b(video|videos|clip|clips|vlog)\b", 5),
        _p(r"\b(watch|stream|streaming|youtube|trailer)\b", 3),
        _p(r"(فيديو|فيديوهات|مقطع|مشاهدة|شاهد)", 5),
        _p(r"\b(vidéo|vídeo|vídeos)\b", 5),
    ),
    Intent.TRAVEL: (
        _p(r"\b(flight|flights|hotel|hotels|airbnb|booking|resort)\b", 5),
        _p(r"\b(travel|trip|vacation|holiday|tour|itinerary|visa)\b", 4),
        _p(r"\b(things to do|places to visit|tourist|attractions)\b", 4),
        _p(r"(سفر|رحلة|رحلات|فندق|فنادق|طيران|حجز|سياحة)", 4.5),
        _p(r"\b(voyage|viaje|reise|seyahat|viaggio|viagem)\b", 4),
    ),
    Intent.HEALTH: (
        _p(r"\b(symptom|symptoms|disease|treatment|diagnosis|cure)\b", 5),
        _p(r"\b(health|medical|medicine|doctor|hospital|clinic)\b", 4),
        _p(r"\b(pain|fever|diet|vitamin|pregnancy|cancer|diabetes)\b", 3.5),
        _p(r"(صحة|مرض|أعراض|اعراض|علاج|دواء|طبيب|مستشفى)", 4.5),
        _p(r"\b(santé|salud|gesundheit|sağlık|salute|saúde)\b", 4),
    ),
    Intent.TECH: (
        _p(r"\b(software|programming|code|coding|developer|api|framework)\b", 4.5),
        _p(r"\b(python|javascript|java|linux|windows|android|ios)\b", 3.5),
        _p(r"\b(ai|artificial intelligence|machine learning|gpu|cpu|smartphone)\b", 3.5),
        _p(r"\b(tech|technology|gadget|gadgets|app|apps)\b", 3),
        _p(r"(برمجة|تقنية|تكنولوجيا|ذكاء اصطناعي|تطبيق)", 4),
    ),
    Intent.FINANCE: (
        _p(r"\b(stock|stocks|shares|invest|investing|investment|portfolio)\b", 5),
        _p(r"\b(bitcoin|crypto|cryptocurrency|forex|exchange rate|dividend)\b", 4.5),
        _p(r"\b(bank|loan|mortgage|credit card|interest rate|tax|taxes)\b", 3.5),
        _p(r"\b(finance|financial|economy|market cap|inflation)\b", 3.5),
        _p(r"(سهم|اسهم|أسهم|استثمار|بنك|قرض|عملة|بيتكوين|اقتصاد)", 4.5),
    ),
    Intent.ENTERTAINMENT: (
        _p(r"\b(movie|movies|film|cinema|series|episode|season|tv show)\b", 4),
        _p(r"\b(music|song|songs|album|artist|singer|concert)\b", 4),
        _p(r"\b(game|games|gaming|gameplay|celebrity|funny|meme|viral)\b", 3.5),
        _p(r"(فلم|فيلم|افلام|أفلام|مسلسل|حلقة|موسيقى|اغنية|أغنية|لعبة|العاب)", 4),
        _p(r"\b(película|musique|música|musik|müzik|musica)\b", 4),
    ),
    Intent.FOOD: (
        _p(r"\b(recipe|recipes|cook|cooking|bake|baking|ingredients)\b", 5),
        _p(r"\b(restaurant|restaurants|food|meal|dinner|lunch|breakfast)\b", 3.5),
        _p(r"\b(near me|delivery|menu|cuisine|vegan|dessert)\b", 2.5),
        _p(r"(وصفة|وصفات|طبخ|طريقة عمل|مطعم|مطاعم|اكل|أكل)", 4.5),
        _p(r"\b(recette|receta|rezept|tarif|ricetta|receita)\b", 5),
    ),
}


class KeywordIntentDetector:
    """Scores a query against every intent's weighted patterns.

    The best-scoring intent wins when it reaches ``threshold``; anything else
    is ``general``. Never raises.
    """

    def __init__(
        self,
        patterns: Mapping[Intent, WeightedPatterns] = INTENT_PATTERNS,
        threshold: float = DEFAULT_THRESHOLD,
    ) -> None:
        self._patterns = patterns
        self._threshold = threshold

    def scores(self, query: str) -> dict[Intent, float]:
        lowered = (query or "").lower()
        return {
            intent: sum(weight for pattern, weight in patterns if pattern.search(lowered))
            for intent, patterns in self._patterns.items()
        }

    def detect(self, query: str) -> Intent:
        scores = self.scores(query)
        if not scores:
            return Intent.GENERAL

        best_intent = Intent.GENERAL
        best_score = 0.0
        for intent, score in scores.items():
            if score > best_score:
                best_intent, best_score = intent, score

        if best_score < self._threshold:
            return Intent.GENERAL
        logger.debug(f"Keyword intent for {query!r}: {best_intent.value} ({best_score})")
        return best_intent
