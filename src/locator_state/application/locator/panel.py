"""Application locator – facet panel tiles."""
from __future__ import annotations

import dataclasses
import re

from locator_state.application.search.query import Facet

__all__ = ["FacetTile", "icon_path"]

_WHITESPACE = re.compile(r"\s")


def icon_path(display_name: str) -> str:
    """``"Wheelchair Accessible"`` -> ``"/icons/wheelchair-accessible.svg"``."""
    return f"/icons/{_WHITESPACE.sub('-', display_name.lower())}.svg"


@dataclasses.dataclass(frozen=True)
class FacetTile:
    facet: Facet
    icon: str
    color: str | None
    selected: bool

    @property
    def display_name(self) -> str:
        return self.facet.display_name
