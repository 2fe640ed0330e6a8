"""Application filters – FilterSet with the exclusive location slot."""
from __future__ import annotations

from typing import Iterable

from locator_state.application.search.query import StaticFilter
from locator_state.kernel.errors import InvariantViolationError
from locator_state.observability.logging import get_logger

__all__ = ["FilterSet"]

logger = get_logger(__name__)


class FilterSet:
    """Ordered set of active static filters.

    At most one filter with ``field_id == "builtin.location"`` is ever held.
    Every mutation rebuilds the tuple instead of patching it, so a snapshot
    returned by :meth:`current` is never changed under a reader.
    """

    def __init__(self, filters: Iterable[StaticFilter] = ()) -> None:
        self._filters: tuple[StaticFilter, ...] = ()
        self.replace_all(filters)

    def current(self) -> tuple[StaticFilter, ...]:
        """Filters to execute the next query with."""
        return self._filters

    def location_filter(self) -> StaticFilter | None:
        for f in self._filters:
            if f.is_location:
                return f
        return None

    def replace_location_filter(self, new_filter: StaticFilter) -> tuple[StaticFilter, ...]:
        """Drop any location filter and append *new_filter* last."""
        if not new_filter.is_location:
            raise InvariantViolationError(
                f"Expected a location filter, got field '{new_filter.field_id}'",
                detail={"field_id": new_filter.field_id},
            )
        others = tuple(f for f in self._filters if not f.is_location)
        self._filters = (*others, new_filter)
        logger.debug("location_filter_replaced", filter_count=len(self._filters), value=new_filter.value)
        return self._filters

    def replace_all(self, filters: Iterable[StaticFilter]) -> tuple[StaticFilter, ...]:
        """Adopt *filters* wholesale, e.g. after the search service changed them."""
        snapshot = tuple(filters)
        locations = sum(1 for f in snapshot if f.is_location)
        if locations > 1:
            raise InvariantViolationError(
                "At most one location filter may be active",
                detail={"location_filters": locations},
            )
        self._filters = snapshot
        return self._filters

    def __len__(self) -> int:
        return len(self._filters)

    def __iter__(self):
        return iter(self._filters)
