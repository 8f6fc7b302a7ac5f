from __future__ import annotations

import math
from typing import NamedTuple

EARTH_RADIUS_M = 6_371_008.8


class GeoPoint(NamedTuple):
    lon: float
    lat: float


def central_angle(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle central angle in radians between two (lon, lat) points.

    Uses the spherical law of cosines. The inputs here are small separations
    around a plot center, so cancellation near antipodes does not matter.
    """
    phi1 = math.radians(a.lat)
    phi2 = math.radians(b.lat)
    dlmb = math.radians(b.lon - a.lon)
    # sin(phi1)*sin(phi2) + cos(phi1)*cos(phi2)*cos(dlmb), rearranged so that
    # identical points give exactly 1
    cos_theta = math.cos(phi1 - phi2) - math.cos(phi1) * math.cos(phi2) * (1.0 - math.cos(dlmb))
    # rounding can still push nearly identical or antipodal points outside [-1, 1]
    cos_theta = max(-1.0, min(1.0, cos_theta))
    return math.acos(cos_theta)


def distance_m(a: GeoPoint, b: GeoPoint, radius: float = EARTH_RADIUS_M) -> float:
    return radius * central_angle(a, b)
