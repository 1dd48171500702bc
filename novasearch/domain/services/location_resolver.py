"""Location resolution: raw location inputs -> one canonical LocationSignature."""

from __future__ import annotations

import logging
import re
from typing import Mapping

from novasearch.domain.data.geography import COUNTRY_CODES, STATE_MAJOR_CITY
from novasearch.domain.models.location import (
    COUNTRY_CODE_RE,
    LocationMode,
    LocationSignature,
    PartialLocation,
)

logger = logging.getLogger(__name__)

_COMMA_RE = re.compile(r"\s*,\s*")
GLOBAL_MARKERS = frozenset({"global", "worldwide", "all"})


class LocationResolver:
    """Turns manual, detected or global location inputs into a signature.

    Never raises: any combination of inputs degrades to a valid, possibly
    empty, signature. ``state_city_hint`` enables the optional state -> major
    city narrowing of the upstream location parameter; the canonical
    signature itself is never altered by it.
    """

    def __init__(
        self,
        country_codes: Mapping[str, str] = COUNTRY_CODES,
        state_major_city: Mapping[str, str] = STATE_MAJOR_CITY,
        state_city_hint: bool = False,
    ) -> None:
        self._country_codes = country_codes
        self._state_major_city = state_major_city
        self._state_city_hint = state_city_hint

    def resolve(
        self,
        manual: PartialLocation | None,
        detected: PartialLocation | None,
        mode: LocationMode,
    ) -> LocationSignature:
        if mode == LocationMode.GLOBAL:
            return LocationSignature()

        if mode == LocationMode.MANUAL:
            source = manual or PartialLocation()
        else:
            if detected is None or detected.is_empty():
                return LocationSignature()
            source = detected

        country = source.country.strip()
        state = source.state.strip()
        city = source.city.strip()

        return LocationSignature(
            country=country,
            country_code=self.resolve_country_code(source.country_code, country),
            state=state,
            city=city,
            canonical=self.build_canonical(source.location, country, state, city),
        )

    def resolve_country_code(self, country_code: str, country: str) -> str:
        code = (country_code or "").strip().lower()
        if code in GLOBAL_MARKERS:
            code = ""
        if COUNTRY_CODE_RE.match(code):
            return code

        name = (country or "").strip().lower()
        mapped = self._country_codes.get(name, "")
        if name and not mapped:
            logger.debug(f"Unknown country name, searching without geo bias: {country!r}")
        return mapped

    @staticmethod
    def build_canonical(location: str, country: str, state: str, city: str) -> str:
        if location and location.strip():
            return _COMMA_RE.sub(",", location.strip())

        parts = [part for part in (city, state) if part]
        if country and country not in parts:
            parts.append(country)
        return ",".join(parts)

    def upstream_location(self, signature: LocationSignature) -> str | None:
        """Location string sent to the upstream provider.

        With the state hint enabled, a state-only signature is narrowed to the
        state's largest city; that changes the search scope and is logged.
        """
        if signature.is_global:
            return None

        if self._state_city_hint and signature.state and not signature.city:
            major_city = self._state_major_city.get(signature.state.lower())
            if major_city:
                narrowed = self.build_canonical(
                    "", signature.country, signature.state, major_city
                )
                logger.warning(
                    f"Narrowing state-level location {signature.canonical!r} "
                    f"to major city {narrowed!r}"
                )
                return narrowed

        return signature.canonical or None
