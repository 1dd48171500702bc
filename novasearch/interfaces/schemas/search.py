import re
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator

from novasearch.domain.models.health_status import HealthStatus
from novasearch.domain.models.search import Intent, ResultItem

# leading words that mark a query as a question worth an explanatory summary
_QUESTION_RE = re.compile(
    r"^(?:what|why|how|who|whom|whose|when|where|which|is|are|was|were|can|could|"
    r"should|would|does|do|did|explain|define|describe|compare)\b",
    re.IGNORECASE,
)


def looks_explanatory(query: str) -> bool:
    query = (query or "").strip()
    return bool(query) and (query.endswith(("?", "؟")) or bool(_QUESTION_RE.match(query)))


class IntentRequest(BaseModel):
    """Intent detection request body"""

    query: str = ""


class IntentResponse(BaseModel):
    intent: Intent = Intent.GENERAL
    cached: bool = False


class SuggestionsResponse(BaseModel):
    query: str = ""
    suggestions: List[str] = Field(default_factory=list)


class StatusResponse(BaseModel):
    """Liveness of the API plus the cache backend in use"""

    cache_backend: str = "memory"
    services: List[HealthStatus] = Field(default_factory=list)


class ReverseGeocodeResponse(BaseModel):
    country: str = ""
    country_code: str = ""
    state: str = ""
    city: str = ""
    display_name: Optional[str] = None


class SummarizeRequest(BaseModel):
    """Summarize an already fetched result list"""

    query: str = ""
    results: Optional[List[ResultItem]] = None
    intent: Optional[Intent] = None

    @field_validator("results", mode="before")
    @classmethod
    def default_result_kind(cls, value: Any) -> Any:
        # items posted back without a kind are plain web results
        if isinstance(value, list):
            return [
                {**item, "kind": item.get("kind") or "web"} if isinstance(item, dict) else item
                for item in value
            ]
        return value
