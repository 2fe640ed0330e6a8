"""Application search – query model and the search service port."""
from locator_state.application.search.query import (
    LOCATION_FIELD_ID,
    Facet,
    FacetOption,
    Matcher,
    StaticFilter,
    VerticalQuery,
    option_identity,
)
from locator_state.application.search.result import LocationResult, VerticalResults
from locator_state.application.search.service import InMemorySearchService, SearchService

__all__ = [
    "LOCATION_FIELD_ID",
    "Facet",
    "FacetOption",
    "InMemorySearchService",
    "LocationResult",
    "Matcher",
    "SearchService",
    "StaticFilter",
    "VerticalQuery",
    "VerticalResults",
    "option_identity",
]
