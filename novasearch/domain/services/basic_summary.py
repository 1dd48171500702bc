"""Locally computed summary used when the LLM summarizer is unavailable."""

from __future__ import annotations

from typing import Sequence

from novasearch.domain.models.search import Intent, Recommendation, ResultItem, Summary

_TOP_N = 3

# intent -> (summary template, recommendation reason template, follow-up query templates)
_TEMPLATES: dict[Intent, tuple[str, str, tuple[str, ...]]] = {
    Intent.SHOPPING: (
        'Found {total} shopping options for "{query}" from {sources}. '
        "Compare product details, prices and ratings before you buy.",
        "Top {rank} result, a popular option from {source}",
        ("best {query}", "{query} reviews", "{query} price comparison"),
    ),
    Intent.NEWS: (
        'Latest news about "{query}" from {sources}: {total} recent articles.',
        "Recent coverage{date} from {source}",
        ("{query} latest news", "{query} today", "{query} update"),
    ),
    Intent.LEARNING: (
        'Learning resources about "{query}" from {sources}: '
        "{total} guides, tutorials and explanations.",
        "Guide from {source}, good for learning",
        ("how to {query}", "{query} tutorial", "{query} guide"),
    ),
    Intent.VIDEOS: (
        'Found {total} videos about "{query}" from {sources}.',
        "Video from {source}",
        ("{query} video", "{query} full video", "{query} highlights"),
    ),
    Intent.TRAVEL: (
        'Travel information for "{query}" from {sources}: {total} results '
        "covering stays, transport and things to do.",
        "Travel resource from {source}",
        ("{query} hotels", "{query} things to do", "{query} travel guide"),
    ),
    Intent.HEALTH: (
        'Health information about "{query}" from {sources}. '
        "Always confirm medical decisions with a qualified professional.",
        "Health reference from {source}",
        ("{query} symptoms", "{query} treatment", "{query} causes"),
    ),
    Intent.TECH: (
        'Found {total} technology results for "{query}" from {sources}.',
        "Technical resource from {source}",
        ("{query} documentation", "{query} tutorial", "{query} vs alternatives"),
    ),
    Intent.FINANCE: (
        'Financial information about "{query}" from {sources}: {total} results. '
        "Check figures against an up-to-date source before acting.",
        "Finance coverage from {source}",
        ("{query} price today", "{query} forecast", "{query} analysis"),
    ),
    Intent.ENTERTAINMENT: (
        'Entertainment content about "{query}" from {sources}: '
        "{total} videos, shows and media.",
        "Popular content on {source}",
        ("{query} trailer", "{query} watch online", "{query} trending"),
    ),
    Intent.FOOD: (
        'Found {total} food results for "{query}" from {sources}, '
        "including recipes and places to eat.",
        "Food resource from {source}",
        ("{query} recipe", "easy {query}", "{query} near me"),
    ),
    Intent.GENERAL: (
        'Found {total} results for "{query}" from {sources}.',
        "Highly relevant result from {source}",
        ("what is {query}", "{query} information", "{query} details"),
    ),
}


def _source_name(item: ResultItem) -> str:
    return item.source_name or item.site or "the web"


def _sources_text(results: Sequence[ResultItem]) -> str:
    names = list(dict.fromkeys(item.source_name for item in results if item.source_name))
    if len(names) > 1:
        return f"{len(names)} sources"
    return names[0] if names else "multiple sources"


def build_basic_summary(
    query: str,
    results: Sequence[ResultItem],
    intent: Intent,
) -> Summary:
    if not results:
        return Summary(
            summary=f'No results found for "{query}". Try different keywords or check your spelling.',
            suggested_queries=[],
        )

    summary_template, reason_template, query_templates = _TEMPLATES.get(
        intent, _TEMPLATES[Intent.GENERAL]
    )
    recommendations = [
        Recommendation(
            title=item.title or item.link,
            reason=reason_template.format(
                rank=rank,
                source=_source_name(item),
                date=f" ({item.date})" if item.date else "",
            ),
            link=item.link or None,
        )
        for rank, item in enumerate(results[:_TOP_N], start=1)
    ]
    return Summary(
        summary=summary_template.format(
            total=len(results), query=query, sources=_sources_text(results)
        ),
        recommendations=recommendations,
        suggested_queries=[template.format(query=query) for template in query_templates],
    )
