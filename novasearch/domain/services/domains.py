"""Host name helpers shared by the content filter, dispatcher and tab extractor"""

from __future__ import annotations

from typing import Mapping
from urllib.parse import urlsplit

from novasearch.domain.data.sources import (
    BRAND_GLOBAL_DOMAINS,
    COMPOUND_CCTLDS,
    GENERIC_TWO_LETTER_TLDS,
)

FAVICON_URL = "https://www.google.com/s2/favicons?domain={domain}&sz=32"


def normalize_host(host: str) -> str:
    host = (host or "").strip().lower().rstrip(".")
    if host.startswith("www."):
        host = host[4:]
    return host


def host_of(link: str) -> str:
    """Lowercase host of ``link`` without a leading ``www.``; empty if unparsable."""
    if not link:
        return ""
    try:
        hostname = urlsplit(link if "://" in link else f"//{link}").hostname
    except ValueError:
        return ""
    return normalize_host(hostname or "")


def split_suffix(host: str) -> tuple[str, str]:
    """Split ``host`` into (name part, public suffix), honouring compound ccTLDs."""
    labels = host.split(".")
    if len(labels) >= 3 and ".".join(labels[-2:]) in COMPOUND_CCTLDS:
        return ".".join(labels[:-2]), ".".join(labels[-2:])
    if len(labels) >= 2:
        return ".".join(labels[:-1]), labels[-1]
    return host, ""


def brand_label(host: str) -> str:
    """Second-level label of ``host``: ``m.youtube.com`` -> ``youtube``."""
    name, _ = split_suffix(normalize_host(host))
    return name.rsplit(".", 1)[-1]


def registrable_domain(host: str) -> str:
    host = normalize_host(host)
    name, suffix = split_suffix(host)
    if not suffix:
        return host
    return f"{name.rsplit('.', 1)[-1]}.{suffix}"


def global_counterpart(
    domain: str, brand_map: Mapping[str, str] = BRAND_GLOBAL_DOMAINS
) -> str | None:
    """Global domain for a country-specific one, or None when there is none.

    The explicit brand map wins; otherwise a compound or two-letter country
    suffix is replaced with ``.com``.
    """
    domain = normalize_host(domain)
    if not domain:
        return None
    if domain in brand_map:
        mapped = brand_map[domain]
        return mapped if mapped != domain else None

    name, suffix = split_suffix(domain)
    if not name or not suffix:
        return None
    if suffix in COMPOUND_CCTLDS or (
        len(suffix) == 2 and suffix not in GENERIC_TWO_LETTER_TLDS
    ):
        candidate = f"{name}.com"
        return candidate if candidate != domain else None
    return None


def favicon_url(domain: str) -> str:
    return FAVICON_URL.format(domain=domain)
