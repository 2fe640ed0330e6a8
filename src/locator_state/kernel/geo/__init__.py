"""Kernel geo – coordinates, viewport geometry and distances."""
from locator_state.kernel.geo.distance import EARTH_RADIUS_M, great_circle_distance
from locator_state.kernel.geo.point import GeoBounds, GeoPoint, ViewportDrag

__all__ = [
    "EARTH_RADIUS_M",
    "GeoBounds",
    "GeoPoint",
    "ViewportDrag",
    "great_circle_distance",
]
