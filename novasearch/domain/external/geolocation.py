from typing import Optional, Protocol

from novasearch.domain.models.location import PartialLocation


class GeoLocator(Protocol):
    """Geolocation provider protocol; implementations never raise"""

    async def detect_by_ip(self, ip: str) -> Optional[PartialLocation]:
        ...

    async def reverse_geocode(self, lat: float, lon: float) -> Optional[PartialLocation]:
        ...
