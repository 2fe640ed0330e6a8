"""Application search – SearchService port and InMemorySearchService."""
from __future__ import annotations

import time
from typing import Any, Callable, Protocol, Sequence, runtime_checkable

from locator_state.application.search.query import (
    Facet,
    FacetOption,
    Matcher,
    StaticFilter,
    VerticalQuery,
)
from locator_state.application.search.result import LocationResult, VerticalResults
from locator_state.kernel.errors import SearchExecutionError
from locator_state.kernel.geo import GeoPoint, great_circle_distance
from locator_state.observability.logging import get_logger

__all__ = ["InMemorySearchService", "SearchService"]

logger = get_logger(__name__)


@runtime_checkable
class SearchService(Protocol):
    """Port: the stateful headless search client driven by the coordinator."""

    @property
    def static_filters(self) -> tuple[StaticFilter, ...]: ...
    @property
    def facets(self) -> tuple[Facet, ...]: ...
    def set_vertical(self, vertical: str) -> None: ...
    def set_query(self, query: str) -> None: ...
    def set_static_filters(self, filters: Sequence[StaticFilter]) -> None: ...
    def set_facet_option(self, field_id: str, option: FacetOption, selected: bool) -> None: ...
    async def execute_vertical_query(self) -> VerticalResults: ...


def _default_coordinate(item: dict[str, Any]) -> GeoPoint | None:
    raw = item.get("coordinate")
    if raw is None:
        return None
    if isinstance(raw, GeoPoint):
        return raw
    return GeoPoint.from_dict(raw)


def _as_values(raw: Any) -> list[Any]:
    if raw is None:
        return []
    if isinstance(raw, (list, tuple, set, frozenset)):
        return list(raw)
    return [raw]


class InMemorySearchService:
    """Search service over in-memory location records, keyed by vertical.

    Records are plain dicts carrying at least ``id`` and ``name``; the
    coordinate is read through *coordinate_fn* (``item["coordinate"]`` by
    default).  ``facet_fields`` maps field ids to facet display names.
    """

    def __init__(
        self,
        verticals: dict[str, list[dict[str, Any]]],
        *,
        facet_fields: dict[str, str] | None = None,
        coordinate_fn: Callable[[dict[str, Any]], GeoPoint | None] | None = None,
        limit: int = 20,
    ) -> None:
        self._verticals = verticals
        self._facet_fields = dict(facet_fields or {})
        self._coordinate_fn = coordinate_fn or _default_coordinate
        self._vertical: str | None = None
        self._query = ""
        self._filters: tuple[StaticFilter, ...] = ()
        self._selections: dict[str, tuple[Any, ...]] = {}
        self._facets: tuple[Facet, ...] = ()
        self._offset = 0
        self._limit = limit
        self.executions = 0

    # ------------------------------------------------------------------
    # State setters
    # ------------------------------------------------------------------

    @property
    def static_filters(self) -> tuple[StaticFilter, ...]:
        return self._filters

    @property
    def facets(self) -> tuple[Facet, ...]:
        return self._facets

    @property
    def query(self) -> str:
        return self._query

    def set_vertical(self, vertical: str) -> None:
        self._vertical = vertical

    def set_query(self, query: str) -> None:
        self._query = query

    def set_static_filters(self, filters: Sequence[StaticFilter]) -> None:
        self._filters = tuple(filters)

    def set_offset(self, offset: int) -> None:
        self._offset = max(0, offset)

    def set_facet_option(self, field_id: str, option: FacetOption, selected: bool) -> None:
        current = [v for v in self._selections.get(field_id, ()) if v != option.value]
        if selected:
            current.append(option.value)
        if current:
            self._selections[field_id] = tuple(current)
        else:
            self._selections.pop(field_id, None)

    def snapshot(self) -> VerticalQuery:
        if self._vertical is None:
            raise SearchExecutionError("No vertical set")
        return VerticalQuery(
            vertical=self._vertical,
            query=self._query,
            filters=self._filters,
            facet_selections=tuple(
                (field_id, value)
                for field_id, values in self._selections.items()
                for value in values
            ),
            offset=self._offset,
            limit=self._limit,
        )

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    async def execute_vertical_query(self) -> VerticalResults:
        return await self.run(self.snapshot())

    async def run(self, query: VerticalQuery) -> VerticalResults:
        """Execute an explicit query snapshot."""
        t0 = time.monotonic()
        self.executions += 1
        try:
            items = self._verticals[query.vertical]
        except KeyError:
            raise SearchExecutionError(
                f"Unknown vertical '{query.vertical}'", vertical=query.vertical
            ) from None

        matched: list[tuple[dict[str, Any], float | None]] = []
        for item in items:
            if query.query and not self._matches_text(item, query.query):
                continue
            ok = True
            distance: float | None = None
            for f in query.filters:
                if not f.selected:
                    continue
                hit, d = self._matches_filter(item, f)
                if not hit:
                    ok = False
                    break
                if d is not None:
                    distance = d
            if ok:
                matched.append((item, distance))

        facets = self._build_facets(matched, query.facet_selections)
        refined = [m for m in matched if self._matches_selections(m[0], query.facet_selections)]
        if any(d is not None for _, d in refined):
            refined.sort(key=lambda m: m[1] if m[1] is not None else float("inf"))

        page = refined[query.offset: query.offset + query.limit]
        results = tuple(
            LocationResult(
                id=str(item["id"]),
                name=str(item.get("name", "")),
                data=item,
                distance_m=distance,
            )
            for item, distance in page
        )
        self._facets = facets
        took_ms = int((time.monotonic() - t0) * 1000)
        logger.debug(
            "in_memory_search_executed",
            vertical=query.vertical,
            result_count=len(refined),
            took_ms=took_ms,
        )
        return VerticalResults(
            vertical=query.vertical,
            results=results,
            result_count=len(refined),
            facets=facets,
            offset=query.offset,
            limit=query.limit,
            took_ms=took_ms,
        )

    # ------------------------------------------------------------------
    # Matching helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _matches_text(item: dict[str, Any], text: str) -> bool:
        needle = text.lower()
        return any(
            needle in str(v).lower()
            for k, v in item.items()
            if k != "coordinate"
        )

    def _matches_filter(self, item: dict[str, Any], f: StaticFilter) -> tuple[bool, float | None]:
        match f.matcher:
            case Matcher.NEAR:
                point = self._coordinate_fn(item)
                if point is None:
                    return False, None
                center = GeoPoint(lat=float(f.value["lat"]), lng=float(f.value["lng"]))
                distance = great_circle_distance(center, point)
                return distance <= float(f.value["radius"]), distance
            case Matcher.EQUALS:
                return f.value in _as_values(item.get(f.field_id)), None
            case _:
                return True, None

    @staticmethod
    def _matches_selections(item: dict[str, Any], selections: tuple[tuple[str, Any], ...]) -> bool:
        by_field: dict[str, list[Any]] = {}
        for field_id, value in selections:
            by_field.setdefault(field_id, []).append(value)
        for field_id, wanted in by_field.items():
            values = _as_values(item.get(field_id))
            if not any(w in values for w in wanted):
                return False
        return True

    def _build_facets(
        self,
        matched: list[tuple[dict[str, Any], float | None]],
        selections: tuple[tuple[str, Any], ...],
    ) -> tuple[Facet, ...]:
        selected = set(selections)
        facets: list[Facet] = []
        for field_id, display_name in self._facet_fields.items():
            counts: dict[Any, int] = {}
            for item, _ in matched:
                for value in _as_values(item.get(field_id)):
                    counts[value] = counts.get(value, 0) + 1
            options = tuple(
                FacetOption(
                    value=value,
                    display_name=str(value),
                    selected=(field_id, value) in selected,
                    count=count,
                )
                for value, count in counts.items()
            )
            facets.append(Facet(field_id=field_id, display_name=display_name, options=options))
        return tuple(facets)
