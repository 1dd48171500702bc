"""Parsers for the human-readable numbers and dates returned by upstream providers.

Upstream items carry counts such as ``"1.2M"`` and dates such as
``"3 days ago"``. Every sort key is derived through these two functions; a value
that cannot be parsed is treated as missing (``0`` / ``None``) and never raises.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from typing import Optional, Union

_MAGNITUDE_RE = re.compile(
    r"(?<![\d.])(\d+(?:\.\d+)?)(?![\d.])\s*"
    r"(?:(thousand|million|billion|k|m|b)(?:views|likes|comments|shares|followers|subscribers)?)?"
    r"(?![a-z])"
)
_MULTIPLIERS = {
    None: 1,
    "k": 1_000,
    "thousand": 1_000,
    "m": 1_000_000,
    "million": 1_000_000,
    "b": 1_000_000_000,
    "billion": 1_000_000_000,
}

_RELATIVE_RE = re.compile(
    r"\b(\d+|an?|one)\s+(second|sec|minute|min|hour|hr|day|week|month|year)s?\s+ago\b"
)
_UNIT_DELTAS = {
    "second": timedelta(seconds=1),
    "sec": timedelta(seconds=1),
    "minute": timedelta(minutes=1),
    "min": timedelta(minutes=1),
    "hour": timedelta(hours=1),
    "hr": timedelta(hours=1),
    "day": timedelta(days=1),
    "week": timedelta(weeks=1),
    "month": timedelta(days=30),
    "year": timedelta(days=365),
}
_ABSOLUTE_FORMATS = (
    "%b %d, %Y",
    "%B %d, %Y",
    "%b %d %Y",
    "%d %b %Y",
    "%d %B %Y",
    "%Y-%m-%d",
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%d.%m.%Y",
)


def parse_magnitude(value: Union[str, int, float, None]) -> int:
    """Parse ``"1.2M"``/``"3k"``/``"1,234 views"`` into an integer, ``0`` if unparsable."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return max(0, int(value))

    text = str(value).strip().lower().replace(",", "")
    if not text:
        return 0

    match = _MAGNITUDE_RE.search(text)
    if not match:
        return 0

    number = float(match.group(1))
    return int(round(number * _MULTIPLIERS[match.group(2)]))


def parse_date(
    value: Optional[str], now: Optional[datetime] = None
) -> Optional[datetime]:
    """Parse a relative (``"2 hours ago"``) or absolute date into an aware datetime."""
    if not value or not str(value).strip():
        return None

    now = now or datetime.now(timezone.utc)
    text = str(value).strip()
    lowered = text.lower()

    if lowered in ("just now", "now", "today"):
        return now
    if lowered == "yesterday":
        return now - timedelta(days=1)

    match = _RELATIVE_RE.search(lowered)
    if match:
        amount_text, unit = match.groups()
        amount = 1 if amount_text in ("a", "an", "one") else int(amount_text)
        return now - amount * _UNIT_DELTAS[unit]

    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        parsed = None

    if parsed is None:
        for fmt in _ABSOLUTE_FORMATS:
            try:
                parsed = datetime.strptime(text, fmt)
                break
            except ValueError:
                continue

    if parsed is None:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
