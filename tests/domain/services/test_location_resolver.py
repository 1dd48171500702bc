import logging

from novasearch.domain.models.location import LocationMode, LocationSignature, PartialLocation
from novasearch.domain.services.location_resolver import LocationResolver


def test_global_mode_overrides_detected_location() -> None:
    resolver = LocationResolver()
    detected = PartialLocation(country="Egypt", country_code="eg", city="Cairo")

    signature = resolver.resolve(PartialLocation(city="Paris"), detected, LocationMode.GLOBAL)

    assert signature.is_global
    assert resolver.upstream_location(signature) is None


def test_manual_mode_resolves_country_name() -> None:
    resolver = LocationResolver()
    manual = PartialLocation(country="Saudi Arabia", city="Riyadh")

    signature = resolver.resolve(manual, None, LocationMode.MANUAL)

    assert signature.country_code == "sa"
    assert signature.city == "Riyadh"
    assert signature.canonical == "Riyadh,Saudi Arabia"


def test_manual_mode_unknown_country_has_no_code() -> None:
    signature = LocationResolver().resolve(
        PartialLocation(country="Atlantis"), None, LocationMode.MANUAL
    )

    assert signature.country_code == ""
    assert signature.canonical == "Atlantis"


def test_normal_mode_without_detection_is_global() -> None:
    resolver = LocationResolver()

    assert resolver.resolve(PartialLocation(), None, LocationMode.NORMAL).is_global
    assert resolver.resolve(PartialLocation(), PartialLocation(), LocationMode.NORMAL).is_global


def test_normal_mode_uses_detection() -> None:
    detected = PartialLocation(
        country="United States", country_code="US", state="Texas", city="Dallas"
    )

    signature = LocationResolver().resolve(PartialLocation(), detected, LocationMode.NORMAL)

    assert signature.country_code == "us"
    assert signature.canonical == "Dallas,Texas,United States"


def test_canonical_prefers_free_text_with_normalized_commas() -> None:
    assert (
        LocationResolver.build_canonical("Dallas ,  Texas, United States", "", "", "")
        == "Dallas,Texas,United States"
    )


def test_canonical_deduplicates_country() -> None:
    assert LocationResolver.build_canonical("", "Singapore", "", "Singapore") == "Singapore"


def test_state_only_location_is_not_narrowed_by_default() -> None:
    signature = LocationSignature(
        country="United States", country_code="us", state="Texas", canonical="Texas,United States"
    )

    assert LocationResolver().upstream_location(signature) == "Texas,United States"


def test_state_city_hint_narrows_upstream_location_and_logs(caplog) -> None:
    resolver = LocationResolver(state_city_hint=True)
    signature = LocationSignature(
        country="United States", country_code="us", state="Texas", canonical="Texas,United States"
    )

    with caplog.at_level(logging.WARNING):
        upstream = resolver.upstream_location(signature)

    assert upstream == "Houston,Texas,United States"
    assert signature.canonical == "Texas,United States"
    assert "Narrowing state-level location" in caplog.text
