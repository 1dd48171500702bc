"""Deterministic result ordering and synthetic page windows."""

from __future__ import annotations

from datetime import datetime
from typing import Sequence

from novasearch.domain.models.search import Pagination, ResultItem, SortOption
from novasearch.domain.services.parsing import parse_date, parse_magnitude


def sort_results(
    items: Sequence[ResultItem],
    sort: SortOption,
    now: datetime | None = None,
) -> list[ResultItem]:
    """Stable sort; items missing the sort key keep their relative order at the end."""
    if sort == SortOption.RELEVANCE:
        return sorted(
            items,
            key=lambda item: (item.position is None, item.position or 0),
        )

    if sort == SortOption.RECENT:
        dated: list[tuple[datetime, ResultItem]] = []
        undated: list[ResultItem] = []
        for item in items:
            parsed = parse_date(item.date, now=now)
            if parsed is None:
                undated.append(item)
            else:
                dated.append((parsed, item))
        # sorted() is stable under reverse=True
        dated.sort(key=lambda pair: pair[0], reverse=True)
        return [item for _, item in dated] + undated

    if sort == SortOption.MOST_VIEWED:
        return sorted(items, key=lambda item: parse_magnitude(item.views), reverse=True)

    if sort == SortOption.MOST_ENGAGED:
        return sorted(items, key=lambda item: item.engagement, reverse=True)

    return list(items)


def paginate(page: int, limit: int, page_count: int) -> Pagination:
    """Page window over a synthetic bound.

    The upstream exposes no reliable total, so ``total_pages`` is the fixed
    ``page_count`` and ``total_results`` is ``page_count * limit``. Both are UI
    affordances, not counts.
    """
    page = max(1, page)
    total_pages = max(1, page_count)
    return Pagination(
        current_page=page,
        total_pages=total_pages,
        total_results=total_pages * limit,
        has_next=page < total_pages,
        has_previous=page > 1,
    )
