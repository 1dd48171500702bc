from typing import List, Optional, Protocol

from novasearch.domain.models.search import UpstreamPage, UpstreamQuery


class SearchProvider(Protocol):
    """Upstream web-search provider protocol"""

    async def search(self, query: UpstreamQuery) -> UpstreamPage:
        """Run one upstream search for ``query.kind``.

        Raises ConfigurationError when credentials are missing and
        UpstreamError on network/HTTP failures.
        """
        ...

    async def suggest(
        self,
        query: str,
        country_code: Optional[str] = None,
        location: Optional[str] = None,
        language: str = "en",
    ) -> List[str]:
        """Return autocomplete suggestions, empty on failure"""
        ...
