from novasearch.domain.services.domains import (
    brand_label,
    global_counterpart,
    host_of,
    registrable_domain,
)


def test_host_of_strips_www_and_handles_bad_links() -> None:
    assert host_of("https://www.Amazon.sa/dp/1") == "amazon.sa"
    assert host_of("shop.example.com/path") == "shop.example.com"
    assert host_of("") == ""


def test_brand_label_and_registrable_domain() -> None:
    assert brand_label("m.youtube.com") == "youtube"
    assert brand_label("www.amazon.co.uk") == "amazon"
    assert registrable_domain("news.bbc.co.uk") == "bbc.co.uk"


def test_global_counterpart_uses_brand_map_first() -> None:
    assert global_counterpart("amazon.sa") == "amazon.com"
    assert global_counterpart("www.ebay.co.uk") == "ebay.com"


def test_global_counterpart_heuristic() -> None:
    assert global_counterpart("shop.sa", brand_map={}) == "shop.com"
    assert global_counterpart("argos.co.uk", brand_map={}) == "argos.com"


def test_global_counterpart_none_when_unchanged_or_generic() -> None:
    assert global_counterpart("bbc.com") is None
    assert global_counterpart("github.io") is None
    assert global_counterpart("") is None
