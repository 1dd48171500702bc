"""Search domain models.

Result items form a tagged union on ``kind``; each upstream result shape is
mapped into exactly one variant. Items are frozen once built, re-tagging (e.g.
after a domain fallback) goes through ``model_copy``.
"""

from enum import Enum
from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field

from novasearch.domain.models.location import (
    LocationMode,
    LocationSignature,
    PartialLocation,
)
from novasearch.domain.services.parsing import parse_magnitude


class Intent(str, Enum):
    """Search intent"""

    SHOPPING = "shopping"
    NEWS = "news"
    LEARNING = "learning"
    VIDEOS = "videos"
    TRAVEL = "travel"
    HEALTH = "health"
    TECH = "tech"
    FINANCE = "finance"
    ENTERTAINMENT = "entertainment"
    FOOD = "food"
    GENERAL = "general"


class SortOption(str, Enum):
    RELEVANCE = "relevance"
    RECENT = "recent"
    MOST_VIEWED = "mostViewed"
    MOST_ENGAGED = "mostEngaged"


class TimeRange(str, Enum):
    ANY = "any"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class FileType(str, Enum):
    ANY = "any"
    PDF = "pdf"
    DOC = "doc"
    PPT = "ppt"
    XLS = "xls"


class ResultKind(str, Enum):
    WEB = "web"
    IMAGE = "image"
    VIDEO = "video"
    PLACE = "place"
    NEWS = "news"


class SearchFilters(BaseModel):
    """Independent, orthogonal search filters; ``any`` means unfiltered"""

    model_config = ConfigDict(frozen=True)

    time_range: TimeRange = TimeRange.ANY
    language: str = "any"  # "any" or an ISO-639-1 code
    file_type: FileType = FileType.ANY


class Source(BaseModel):
    """One upstream query target"""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    site: Optional[str] = None  # empty: native, unscoped search
    kind: ResultKind = ResultKind.WEB
    icon: Optional[str] = None
    dynamic: bool = False  # derived at runtime from an observed domain


class Sitelink(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    link: str


class _ResultBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = ""
    link: str = ""
    snippet: str = ""
    position: Optional[int] = None
    thumbnail: Optional[str] = None
    date: Optional[str] = None
    source_id: str = ""
    source_name: Optional[str] = None
    site: Optional[str] = None  # domain the item was actually served for
    favicon: Optional[str] = None
    fallback_from: Optional[str] = None  # originally requested domain when a fallback answered
    views: Union[int, str, None] = None
    likes: Union[int, str, None] = None
    comments: Union[int, str, None] = None
    shares: Union[int, str, None] = None

    @computed_field
    @property
    def engagement(self) -> int:
        return (
            parse_magnitude(self.likes)
            + parse_magnitude(self.comments)
            + parse_magnitude(self.shares)
        )


class WebResult(_ResultBase):
    kind: Literal["web"] = "web"
    rating: Optional[float] = None
    rating_count: Optional[int] = None
    price: Optional[str] = None
    sitelinks: List[Sitelink] = Field(default_factory=list)


class ImageResult(_ResultBase):
    kind: Literal["image"] = "image"
    image_url: str = ""
    publisher: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None


class VideoResult(_ResultBase):
    kind: Literal["video"] = "video"
    duration: Optional[str] = None
    channel: Optional[str] = None


class PlaceResult(_ResultBase):
    kind: Literal["place"] = "place"
    address: Optional[str] = None
    rating: Optional[float] = None
    rating_count: Optional[int] = None
    price: Optional[str] = None
    hours: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None


class NewsResult(_ResultBase):
    kind: Literal["news"] = "news"
    publisher: Optional[str] = None


ResultItem = Annotated[
    Union[WebResult, ImageResult, VideoResult, PlaceResult, NewsResult],
    Field(discriminator="kind"),
]


class UpstreamQuery(BaseModel):
    """Parameters of one upstream provider call"""

    model_config = ConfigDict(frozen=True)

    text: str
    kind: ResultKind = ResultKind.WEB
    page: int = 1
    page_size: int = 10
    country_code: Optional[str] = None
    location: Optional[str] = None
    language: str = "en"
    time_range: TimeRange = TimeRange.ANY
    safe_search: bool = True


class UpstreamPage(BaseModel):
    """One upstream call's payload after mapping"""

    items: List[ResultItem] = Field(default_factory=list)
    corrected_query: Optional[str] = None
    related_searches: List[str] = Field(default_factory=list)


class DomainTile(BaseModel):
    """A frequently occurring result domain, offered as a dynamic tab"""

    domain: str
    name: str
    count: int
    favicon: Optional[str] = None

    def to_source(self) -> Source:
        return Source(
            id=f"site:{self.domain}",
            name=self.name,
            site=self.domain,
            kind=ResultKind.WEB,
            dynamic=True,
        )


class Recommendation(BaseModel):
    title: str
    reason: str
    link: Optional[str] = None


class Summary(BaseModel):
    summary: str
    recommendations: List[Recommendation] = Field(default_factory=list)
    suggested_queries: List[str] = Field(default_factory=list)


class Pagination(BaseModel):
    """Page window; ``total_*`` are synthetic bounds, not a real result count"""

    current_page: int
    total_pages: int
    total_results: int
    has_next: bool
    has_previous: bool


class SearchRequest(BaseModel):
    """Parameters of one search operation"""

    query: str
    source: str = "all"
    page: int = Field(1, ge=1)
    limit: int = Field(10, ge=1, le=100)
    sort: SortOption = SortOption.RELEVANCE
    intent: Optional[Intent] = None
    auto_detect_intent: bool = True
    location_mode: LocationMode = LocationMode.NORMAL
    manual_location: PartialLocation = Field(default_factory=PartialLocation)
    detected_location: Optional[PartialLocation] = None
    filters: SearchFilters = Field(default_factory=SearchFilters)
    site: Optional[str] = None  # explicit site override
    explanatory: bool = False


class SearchResponse(BaseModel):
    query: str
    results: List[ResultItem] = Field(default_factory=list)
    intent: Intent = Intent.GENERAL
    summary: Optional[Summary] = None
    sources: List[Source] = Field(default_factory=list)
    intent_sources: List[Source] = Field(default_factory=list)
    domain_tiles: List[DomainTile] = Field(default_factory=list)
    pagination: Pagination
    location: Optional[LocationSignature] = None
    corrected_query: Optional[str] = None
    related_searches: List[str] = Field(default_factory=list)
    fallbacks: Dict[str, str] = Field(default_factory=dict)
    blocked: bool = False
    message: Optional[str] = None
    cached: bool = False
