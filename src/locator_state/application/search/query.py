"""Application search – filter, facet and query value objects."""
from __future__ import annotations

import dataclasses
import enum
from typing import Any

__all__ = [
    "LOCATION_FIELD_ID",
    "Facet",
    "FacetOption",
    "Matcher",
    "StaticFilter",
    "VerticalQuery",
    "option_identity",
]

#: Reserved field id of the single-slot radius filter.
LOCATION_FIELD_ID = "builtin.location"


class Matcher(str, enum.Enum):
    EQUALS = "$eq"
    NEAR = "$near"


@dataclasses.dataclass(frozen=True)
class StaticFilter:
    """A filter clause set by the application rather than the facet UI."""
    field_id: str
    matcher: Matcher
    value: Any
    selected: bool = True
    display_name: str | None = None

    @property
    def is_location(self) -> bool:
        return self.field_id == LOCATION_FIELD_ID


@dataclasses.dataclass(frozen=True)
class FacetOption:
    value: Any
    display_name: str | None = None
    selected: bool = False
    count: int = 0


@dataclasses.dataclass(frozen=True)
class Facet:
    """A refinable field read from search results."""
    field_id: str
    display_name: str
    options: tuple[FacetOption, ...] = ()


def option_identity(option: FacetOption) -> str:
    """Identity used for color mapping: the display name, else the raw value."""
    if option.display_name is not None:
        return option.display_name
    return str(option.value)


@dataclasses.dataclass(frozen=True)
class VerticalQuery:
    """Snapshot of everything one vertical query is executed with."""
    vertical: str
    query: str = ""
    filters: tuple[StaticFilter, ...] = ()
    facet_selections: tuple[tuple[str, Any], ...] = ()
    offset: int = 0
    limit: int = 20
