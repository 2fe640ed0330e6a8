"""Application navigation – address-bar query persistence."""
from locator_state.application.navigation.query_sync import QUERY_PARAM, TYPE_PARAM, QuerySync
from locator_state.application.navigation.state import (
    NavigationState,
    QueryParams,
    UrlNavigationState,
    delete_param,
    replace_param,
)

__all__ = [
    "QUERY_PARAM",
    "TYPE_PARAM",
    "NavigationState",
    "QueryParams",
    "QuerySync",
    "UrlNavigationState",
    "delete_param",
    "replace_param",
]
