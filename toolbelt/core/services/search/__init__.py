from toolbelt.core.services.search.schemas import (
    ImageResult,
    SearchError,
    SerpSearchRequest,
    WebSearchRequest,
    WebSearchResult,
)
from toolbelt.core.services.search.service import ScaleSerpSearchService, get_search

__all__ = [
    'ImageResult',
    'ScaleSerpSearchService',
    'SearchError',
    'SerpSearchRequest',
    'WebSearchRequest',
    'WebSearchResult',
    'get_search',
]
