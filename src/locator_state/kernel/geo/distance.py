"""Kernel geo – great-circle distance."""
from __future__ import annotations

import math

from locator_state.kernel.geo.point import GeoPoint

#: Mean Earth radius in metres, the same sphere the map view measures on.
EARTH_RADIUS_M = 6371008.8


def great_circle_distance(a: GeoPoint, b: GeoPoint) -> float:
    """Return the haversine distance in metres between *a* and *b*.

    The haversine term is clamped to ``[0, 1]`` so rounding never produces
    ``NaN``; identical points yield exactly ``0.0``.
    """
    lat1 = math.radians(a.lat)
    lat2 = math.radians(b.lat)
    dlat = lat2 - lat1
    dlng = math.radians(b.lng - a.lng)
    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlng / 2) ** 2
    return 2 * EARTH_RADIUS_M * math.asin(math.sqrt(max(0.0, min(h, 1.0))))


__all__ = ["EARTH_RADIUS_M", "great_circle_distance"]
