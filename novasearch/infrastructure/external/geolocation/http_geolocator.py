import ipaddress
import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional

import httpx

from novasearch.domain.external.cache import Cache
from novasearch.domain.external.geolocation import GeoLocator
from novasearch.domain.models.cache import CacheKey
from novasearch.domain.models.location import PartialLocation

logger = logging.getLogger(__name__)

IP_API_URL = "http://ip-api.com/json/{ip}"
NOMINATIM_URL = "https://nominatim.openstreetmap.org/reverse"
BIGDATACLOUD_URL = "https://api.bigdatacloud.net/data/reverse-geocode-client"
USER_AGENT = "novasearch/0.1 (+https://github.com/novasearch)"


def is_public_ip(ip: str) -> bool:
    try:
        address = ipaddress.ip_address(ip)
    except ValueError:
        return False
    return not (
        address.is_private
        or address.is_loopback
        or address.is_link_local
        or address.is_reserved
        or address.is_multicast
        or address.is_unspecified
    )


def parse_ip_api(payload: Dict[str, Any]) -> Optional[PartialLocation]:
    if payload.get("status") != "success":
        return None
    return PartialLocation(
        country=payload.get("country") or "",
        country_code=(payload.get("countryCode") or "").lower(),
        state=payload.get("regionName") or "",
        city=payload.get("city") or "",
    )


def parse_nominatim(payload: Dict[str, Any]) -> Optional[PartialLocation]:
    address = payload.get("address")
    if not isinstance(address, dict) or not address.get("country"):
        return None
    return PartialLocation(
        country=address.get("country") or "",
        country_code=(address.get("country_code") or "").lower(),
        state=address.get("state") or address.get("region") or "",
        city=(
            address.get("city")
            or address.get("town")
            or address.get("village")
            or address.get("municipality")
            or ""
        ),
    )


def parse_bigdatacloud(payload: Dict[str, Any]) -> Optional[PartialLocation]:
    if not payload.get("countryName"):
        return None
    return PartialLocation(
        country=payload.get("countryName") or "",
        country_code=(payload.get("countryCode") or "").lower(),
        state=payload.get("principalSubdivision") or "",
        city=payload.get("city") or payload.get("locality") or "",
    )


class HttpGeoLocator(GeoLocator):
    """IP lookup through ip-api and reverse geocoding through Nominatim, then BigDataCloud.

    Every method returns None instead of raising.
    """

    def __init__(
        self,
        timeout_seconds: float = 5.0,
        cache: Optional[Cache[PartialLocation]] = None,
        cache_ttl_seconds: float = 3600,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._timeout = timeout_seconds
        self._cache = cache
        self._cache_ttl_seconds = cache_ttl_seconds
        self._client = client

    async def _get_json(
        self, url: str, params: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        headers = {"User-Agent": USER_AGENT, "Accept": "application/json"}
        if self._client is not None:
            response = await self._client.get(
                url, params=params, headers=headers, timeout=self._timeout
            )
        else:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(url, params=params, headers=headers)
        response.raise_for_status()
        payload = response.json()
        return payload if isinstance(payload, dict) else {}

    async def detect_by_ip(self, ip: str) -> Optional[PartialLocation]:
        if not ip or not is_public_ip(ip):
            return None

        key = CacheKey(namespace="location", query=ip)
        if self._cache is not None:
            cached = await self._cache.get(key)
            if cached is not None:
                return cached

        try:
            payload = await self._get_json(
                IP_API_URL.format(ip=ip),
                params={"fields": "status,country,countryCode,regionName,city"},
            )
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"IP geolocation failed for {ip}: {e}")
            return None

        location = parse_ip_api(payload)
        if location is not None and self._cache is not None:
            await self._cache.set(key, location, self._cache_ttl_seconds)
        return location

    async def reverse_geocode(self, lat: float, lon: float) -> Optional[PartialLocation]:
        providers: List[tuple[str, Callable[[], Awaitable[Optional[PartialLocation]]]]] = [
            ("nominatim", lambda: self._nominatim(lat, lon)),
            ("bigdatacloud", lambda: self._bigdatacloud(lat, lon)),
        ]
        for name, lookup in providers:
            try:
                location = await lookup()
            except (httpx.HTTPError, ValueError) as e:
                logger.warning(f"Reverse geocoding via {name} failed: {e}")
                continue
            if location is not None:
                return location
        return None

    async def _nominatim(self, lat: float, lon: float) -> Optional[PartialLocation]:
        payload = await self._get_json(
            NOMINATIM_URL,
            params={
                "format": "json",
                "lat": lat,
                "lon": lon,
                "zoom": 10,
                "addressdetails": 1,
                "accept-language": "en",
            },
        )
        return parse_nominatim(payload)

    async def _bigdatacloud(self, lat: float, lon: float) -> Optional[PartialLocation]:
        payload = await self._get_json(
            BIGDATACLOUD_URL,
            params={"latitude": lat, "longitude": lon, "localityLanguage": "en"},
        )
        return parse_bigdatacloud(payload)
