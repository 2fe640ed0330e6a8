"""Application filters – RadiusFilterDeriver."""
from __future__ import annotations

from locator_state.application.search.query import LOCATION_FIELD_ID, Matcher, StaticFilter
from locator_state.kernel.geo import ViewportDrag, great_circle_distance

__all__ = ["NEAR_CURRENT_AREA", "RadiusFilterDeriver"]

NEAR_CURRENT_AREA = "Near Current Area"


class RadiusFilterDeriver:
    """Turn a map drag-end gesture into a ``Near`` location filter.

    The radius reaches from the viewport centre to its north-east corner, so
    the circle covers the whole visible rectangle.  Degenerate bounds are not
    rejected: a zero radius is passed through unchanged.
    """

    def __init__(self, display_name: str = NEAR_CURRENT_AREA) -> None:
        self._display_name = display_name

    @staticmethod
    def radius_for(drag: ViewportDrag) -> float:
        return great_circle_distance(drag.center, drag.bounds.north_east)

    def derive(self, drag: ViewportDrag) -> StaticFilter:
        radius = self.radius_for(drag)
        return StaticFilter(
            field_id=LOCATION_FIELD_ID,
            matcher=Matcher.NEAR,
            value={**drag.center.to_dict(), "radius": radius},
            selected=True,
            display_name=self._display_name,
        )
