from .cache import CacheKey
from .location import LocationMode, LocationSignature, PartialLocation
from .search import (
    DomainTile,
    FileType,
    ImageResult,
    Intent,
    NewsResult,
    Pagination,
    PlaceResult,
    Recommendation,
    ResultItem,
    ResultKind,
    SearchFilters,
    SearchRequest,
    SearchResponse,
    SortOption,
    Source,
    Summary,
    TimeRange,
    UpstreamPage,
    UpstreamQuery,
    VideoResult,
    WebResult,
)

__all__ = [
    "CacheKey",
    "DomainTile",
    "FileType",
    "ImageResult",
    "Intent",
    "LocationMode",
    "LocationSignature",
    "NewsResult",
    "Pagination",
    "PartialLocation",
    "PlaceResult",
    "Recommendation",
    "ResultItem",
    "ResultKind",
    "SearchFilters",
    "SearchRequest",
    "SearchResponse",
    "SortOption",
    "Source",
    "Summary",
    "TimeRange",
    "UpstreamPage",
    "UpstreamQuery",
    "VideoResult",
    "WebResult",
]
