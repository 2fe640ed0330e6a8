"""Application search – VerticalResults container."""
from __future__ import annotations

import dataclasses
from typing import Any

from locator_state.application.search.query import Facet

__all__ = ["LocationResult", "VerticalResults"]


@dataclasses.dataclass(frozen=True)
class LocationResult:
    id: str
    name: str
    data: dict[str, Any] = dataclasses.field(default_factory=dict)
    distance_m: float | None = None


@dataclasses.dataclass(frozen=True)
class VerticalResults:
    vertical: str
    results: tuple[LocationResult, ...]
    result_count: int
    facets: tuple[Facet, ...] = ()
    offset: int = 0
    limit: int = 20
    took_ms: int = 0

    @property
    def location_ids(self) -> list[str]:
        return [r.id for r in self.results]

    @property
    def total_pages(self) -> int:
        if self.limit == 0:
            return 0
        return (self.result_count + self.limit - 1) // self.limit
