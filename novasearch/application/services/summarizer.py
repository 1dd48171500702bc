from __future__ import annotations

import asyncio
import logging
from typing import Any, List

from novasearch.domain.external.json_parser import JSONParser
from novasearch.domain.external.llm import LLM
from novasearch.domain.models.search import Intent, Recommendation, ResultItem, Summary
from novasearch.domain.services.basic_summary import build_basic_summary
from novasearch.domain.services.prompts.summarizer import (
    SUMMARIZER_SYSTEM_PROMPT,
    SUMMARIZER_USER_PROMPT,
)

logger = logging.getLogger(__name__)

MAX_PROMPT_RESULTS = 10


class Summarizer:
    """LLM answer over the top results, with a locally built summary as fallback"""

    def __init__(
        self,
        llm: LLM | None,
        json_parser: JSONParser,
        timeout_seconds: float = 8.0,
    ) -> None:
        self._llm = llm
        self._json_parser = json_parser
        self._timeout_seconds = max(0.1, float(timeout_seconds))

    async def summarize(
        self, query: str, results: List[ResultItem], intent: Intent
    ) -> Summary:
        if self._llm is None or not results:
            return build_basic_summary(query, results, intent)

        try:
            async with asyncio.timeout(self._timeout_seconds):
                message = await self._llm.invoke(
                    messages=[
                        {"role": "system", "content": SUMMARIZER_SYSTEM_PROMPT},
                        {
                            "role": "user",
                            "content": SUMMARIZER_USER_PROMPT.format(
                                query=query,
                                intent=intent.value,
                                results=self._format_results(results),
                            ),
                        },
                    ],
                    response_format={"type": "json_object"},
                )
            content = str(message.get("content") or "") if isinstance(message, dict) else ""
            parsed = await self._json_parser.invoke(content, default_value={})
            summary = self._to_summary(parsed)
        except Exception as exc:
            logger.warning(f"LLM summary failed, using basic summary: {exc}")
            return build_basic_summary(query, results, intent)

        if summary is None:
            logger.warning("LLM summary was empty, using basic summary")
            return build_basic_summary(query, results, intent)
        return summary

    @staticmethod
    def _format_results(results: List[ResultItem]) -> str:
        lines = []
        for index, item in enumerate(results[:MAX_PROMPT_RESULTS], start=1):
            source = item.source_name or item.site or ""
            lines.append(f"{index}. {item.title} ({source})\n   {item.link}\n   {item.snippet}")
        return "\n".join(lines)

    @staticmethod
    def _to_summary(parsed: Any) -> Summary | None:
        if not isinstance(parsed, dict) or not str(parsed.get("summary") or "").strip():
            return None

        recommendations = []
        for raw in parsed.get("recommendations") or []:
            if isinstance(raw, dict) and raw.get("title"):
                recommendations.append(
                    Recommendation(
                        title=str(raw["title"]),
                        reason=str(raw.get("reason") or ""),
                        link=str(raw["link"]) if raw.get("link") else None,
                    )
                )

        suggested = parsed.get("suggestedQueries") or parsed.get("suggested_queries") or []
        return Summary(
            summary=str(parsed["summary"]).strip(),
            recommendations=recommendations[:3],
            suggested_queries=[str(q) for q in suggested if q][:4],
        )
