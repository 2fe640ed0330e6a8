"""Application navigation – QuerySync."""
from __future__ import annotations

from locator_state.application.navigation.state import (
    NavigationState,
    QueryParams,
    delete_param,
    replace_param,
)
from locator_state.observability.logging import get_logger

__all__ = ["QUERY_PARAM", "TYPE_PARAM", "QuerySync"]

logger = get_logger(__name__)

QUERY_PARAM = "query"
TYPE_PARAM = "type"


class QuerySync:
    """Keeps the ``query`` URL parameter and the search query in step."""

    def __init__(self, navigation: NavigationState) -> None:
        self._navigation = navigation

    def initial_query(self) -> str | None:
        """The persisted query, or ``None`` when absent or empty."""
        return self._navigation.get_param(QUERY_PARAM) or None

    def record_search(self, query: str | None) -> QueryParams:
        """Write a submitted query back to the address bar.

        Drops the stale ``type`` parameter, sets ``query`` (or removes it for
        an empty query) and pushes the result as a new entry.  Every other
        parameter keeps its order and repetitions.
        """
        params = delete_param(self._navigation.params(), TYPE_PARAM)
        if query:
            params = replace_param(params, QUERY_PARAM, query)
        else:
            params = delete_param(params, QUERY_PARAM)
        self._navigation.push(params)
        logger.debug("query_param_synced", query=query or None)
        return params
