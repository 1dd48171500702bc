from datetime import datetime, timezone

from novasearch.domain.models.search import SortOption, VideoResult, WebResult
from novasearch.domain.services.ranking import paginate, sort_results

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


def _titles(items) -> list[str]:
    return [item.title for item in items]


def test_sort_recent_puts_newest_first_and_undated_last() -> None:
    items = [
        WebResult(title="two-days", date="2 days ago"),
        WebResult(title="one-hour", date="1 hour ago"),
        WebResult(title="undated", date=None),
    ]

    result = sort_results(items, SortOption.RECENT, now=NOW)

    assert _titles(result) == ["one-hour", "two-days", "undated"]


def test_sort_recent_keeps_undated_in_original_order() -> None:
    items = [
        WebResult(title="u1"),
        WebResult(title="dated", date="Jan 1, 2020"),
        WebResult(title="u2", date="not a date"),
    ]

    assert _titles(sort_results(items, SortOption.RECENT, now=NOW)) == ["dated", "u1", "u2"]


def test_sort_relevance_orders_by_position_missing_last() -> None:
    items = [
        WebResult(title="third", position=3),
        WebResult(title="none-a"),
        WebResult(title="first", position=1),
        WebResult(title="none-b"),
    ]

    assert _titles(sort_results(items, SortOption.RELEVANCE)) == [
        "first",
        "third",
        "none-a",
        "none-b",
    ]


def test_sort_most_viewed_parses_magnitudes_and_is_stable() -> None:
    items = [
        VideoResult(title="small", views="500"),
        VideoResult(title="tie-a", views="2K"),
        VideoResult(title="big", views="1.2M"),
        VideoResult(title="tie-b", views="2,000"),
        VideoResult(title="none"),
    ]

    assert _titles(sort_results(items, SortOption.MOST_VIEWED)) == [
        "big",
        "tie-a",
        "tie-b",
        "small",
        "none",
    ]


def test_sort_most_engaged_uses_likes_comments_and_shares() -> None:
    items = [
        VideoResult(title="likes-only", likes="1K"),
        VideoResult(title="mixed", likes="800", comments="300", shares="10"),
        VideoResult(title="quiet"),
    ]

    assert _titles(sort_results(items, SortOption.MOST_ENGAGED)) == [
        "mixed",
        "likes-only",
        "quiet",
    ]


def test_paginate_uses_synthetic_bound() -> None:
    middle = paginate(page=3, limit=10, page_count=100)
    assert middle.current_page == 3
    assert middle.total_pages == 100
    assert middle.total_results == 1000
    assert middle.has_next is True
    assert middle.has_previous is True

    first = paginate(page=1, limit=20, page_count=100)
    assert first.has_previous is False
    assert first.total_results == 2000

    last = paginate(page=100, limit=10, page_count=100)
    assert last.has_next is False
