"""Cache key domain model"""

import hashlib
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from novasearch.domain.models.location import LocationSignature
from novasearch.domain.models.search import Intent, SearchFilters, SortOption


class CacheKey(BaseModel):
    """Structured signature of every input that shapes a cached payload.

    Frozen, so equality and hashing cover all fields; two keys are equal only
    when every field is equal. ``storage_key`` gives a delimiter-free string for
    backends that need one.
    """

    model_config = ConfigDict(frozen=True)

    namespace: str = "search"
    query: str
    source_selector: str = "all"
    page: int = 1
    limit: int = 10
    sort: SortOption = SortOption.RELEVANCE
    location: LocationSignature = Field(default_factory=LocationSignature)
    filters: SearchFilters = Field(default_factory=SearchFilters)
    site_override: Optional[str] = None
    intent: Optional[Intent] = None
    explanatory: bool = False

    def storage_key(self) -> str:
        digest = hashlib.sha256(self.model_dump_json().encode("utf-8")).hexdigest()
        return f"novasearch:{self.namespace}:{digest}"
