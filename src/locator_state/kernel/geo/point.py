"""Kernel geo – GeoPoint, GeoBounds and ViewportDrag value objects."""
from __future__ import annotations

import dataclasses
from typing import Any


@dataclasses.dataclass(frozen=True)
class GeoPoint:
    """A WGS-84 coordinate in decimal degrees."""
    lat: float
    lng: float

    def to_dict(self) -> dict[str, float]:
        return {"lat": self.lat, "lng": self.lng}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GeoPoint":
        return cls(lat=float(data["lat"]), lng=float(data["lng"]))


@dataclasses.dataclass(frozen=True)
class GeoBounds:
    """Axis-aligned bounding box of a map viewport.

    No ordering between the corners is enforced; a degenerate box where both
    corners coincide is accepted.
    """
    south_west: GeoPoint
    north_east: GeoPoint


@dataclasses.dataclass(frozen=True)
class ViewportDrag:
    """One drag-end gesture reported by the map view."""
    center: GeoPoint
    bounds: GeoBounds


__all__ = ["GeoBounds", "GeoPoint", "ViewportDrag"]
