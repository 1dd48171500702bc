from novasearch.domain.models.search import WebResult
from novasearch.domain.services.content_filter import (
    ADULT_CONTENT_REASON,
    ContentSafetyFilter,
    SafetyPolicy,
)


def _filter() -> ContentSafetyFilter:
    return ContentSafetyFilter()


def test_plain_query_is_allowed() -> None:
    verdict = _filter().filter_query("best running shoes")
    assert verdict.allowed is True
    assert verdict.reason is None


def test_explicit_query_is_blocked_with_reason() -> None:
    verdict = _filter().filter_query("free porn videos")
    assert verdict.allowed is False
    assert verdict.reason == ADULT_CONTENT_REASON


def test_medical_query_is_allowed() -> None:
    assert _filter().filter_query("breast cancer screening").allowed is True


def test_safe_context_wins_over_blocked_term() -> None:
    assert _filter().filter_query("sex education porn statistics").allowed is True


def test_latin_keywords_match_on_word_boundaries() -> None:
    policy = SafetyPolicy.build({"en": ()}, {"en": ("anal",)}, ())
    content_filter = ContentSafetyFilter(policy)

    assert content_filter.filter_query("financial analysis").allowed is True
    assert content_filter.filter_query("anal video").allowed is False


def test_non_latin_keywords_match_as_substrings() -> None:
    policy = SafetyPolicy.build({"en": ()}, {"zh": ("色情",)}, ())
    content_filter = ContentSafetyFilter(policy)

    assert content_filter.filter_query("免费色情视频").allowed is False
    assert content_filter.filter_query("天气预报").allowed is True


def test_blocked_domain_matches_subdomains() -> None:
    content_filter = _filter()

    assert content_filter.is_blocked_domain("https://www.pornhub.com/view") is True
    assert content_filter.is_blocked_domain("https://de.pornhub.com/") is True
    assert content_filter.is_blocked_domain("https://notpornhub.com/") is False
    assert content_filter.is_blocked_domain("https://example.com/") is False


def test_filter_results_drops_blocked_items_and_keeps_order() -> None:
    items = [
        WebResult(title="Weather today", link="https://weather.com/"),
        WebResult(title="Watch now", link="https://xvideos.com/v/1"),
        WebResult(title="Hot porn clips", snippet="", link="https://example.org/"),
        WebResult(title="Breast cancer screening guide", link="https://nih.gov/"),
    ]

    kept = _filter().filter_results(items)

    assert [item.link for item in kept] == ["https://weather.com/", "https://nih.gov/"]


def test_filter_results_is_idempotent() -> None:
    content_filter = _filter()
    items = [
        WebResult(title="News", link="https://bbc.com/"),
        WebResult(title="nsfw gallery", link="https://example.net/"),
        WebResult(title="Recipes", link="https://allrecipes.com/"),
    ]

    once = content_filter.filter_results(items)
    twice = content_filter.filter_results(once)

    assert twice == once
