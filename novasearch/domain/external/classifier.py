from typing import List, Protocol

from novasearch.domain.models.search import Intent, ResultItem, Summary


class IntentDetector(Protocol):
    """Query intent classifier; must not raise"""

    async def classify(self, query: str) -> Intent:
        ...


class ResultSummarizer(Protocol):
    """Summarizer over the top results; must not raise"""

    async def summarize(
        self, query: str, results: List[ResultItem], intent: Intent
    ) -> Summary:
        ...
