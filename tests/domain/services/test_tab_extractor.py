from novasearch.domain.models.search import Intent, WebResult
from novasearch.domain.services.tab_extractor import TabExtractor


def _results_for(counts: dict[str, int]) -> list[WebResult]:
    items = []
    for domain, count in counts.items():
        items.extend(
            WebResult(title=f"{domain} page {i}", link=f"https://www.{domain}/{i}")
            for i in range(count)
        )
    return items


def test_caps_at_ten_most_frequent_domains_excluding_platforms() -> None:
    counts = {f"site{n}.com": n for n in range(1, 16)}
    counts["youtube.com"] = 50
    counts["google.com"] = 40
    results = _results_for(counts)

    tiles = TabExtractor().extract(results, Intent.GENERAL)

    assert len(tiles) == 10
    assert [tile.domain for tile in tiles] == [f"site{n}.com" for n in range(15, 5, -1)]
    assert [tile.count for tile in tiles] == list(range(15, 5, -1))
    assert all("favicons" in (tile.favicon or "") for tile in tiles)


def test_ties_keep_first_seen_order() -> None:
    results = _results_for({"b.com": 2, "a.com": 2, "c.com": 3})

    tiles = TabExtractor().extract(results, Intent.GENERAL)

    assert [tile.domain for tile in tiles] == ["c.com", "b.com", "a.com"]
    assert tiles[0].name == "C"


def test_platform_subdomains_are_excluded() -> None:
    results = [WebResult(title="clip", link="https://m.youtube.com/watch?v=1")]

    assert TabExtractor().extract(results, Intent.GENERAL) == []


def test_shopping_intent_keeps_only_shopping_hosts() -> None:
    results = [
        WebResult(title="Buy phones", link="https://phonestore.com/x"),
        WebResult(title="Phone price history", link="https://en.wikipedia.org/wiki/Phone"),
        WebResult(title="Phone review", snippet="our thoughts", link="https://techblog.io/r"),
        WebResult(title="Great deal on phones", link="https://gadgets.net/deal"),
    ]

    tiles = TabExtractor().extract(results, Intent.SHOPPING)

    assert [tile.domain for tile in tiles] == ["phonestore.com", "gadgets.net"]


def test_tile_converts_to_dynamic_source() -> None:
    tile = TabExtractor().extract(_results_for({"example.com": 1}), Intent.GENERAL)[0]

    source = tile.to_source()

    assert source.id == "site:example.com"
    assert source.site == "example.com"
    assert source.dynamic is True


def test_subdomains_are_counted_under_their_registrable_domain() -> None:
    results = [
        WebResult(title="English", link="https://en.example.com/a"),
        WebResult(title="French", link="https://fr.example.com/b"),
        WebResult(title="Shop", link="https://shop.example.co.uk/c"),
        WebResult(title="Other", link="https://other.org/d"),
    ]

    tiles = TabExtractor().extract(results, Intent.GENERAL)

    assert [(tile.domain, tile.count) for tile in tiles] == [
        ("example.com", 2),
        ("example.co.uk", 1),
        ("other.org", 1),
    ]
