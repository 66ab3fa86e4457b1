"""Great-circle distance between WGS84 points (haversine)."""

import math

from coverage_api.lib.geo.point import Coordinate

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Calculate great-circle distance between two points in kilometers.

    The haversine term is clamped to [0, 1] so floating-point overshoot on
    identical or antipodal points cannot push ``sqrt(1 - a)`` negative.
    """
    lat1_r = math.radians(lat1)
    lat2_r = math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlng = math.radians(lng2 - lng1)

    a = math.sin(dlat / 2) ** 2 + math.cos(lat1_r) * math.cos(lat2_r) * math.sin(dlng / 2) ** 2
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def distance(a: Coordinate, b: Coordinate) -> float:
    """Distance in kilometers between two coordinates."""
    return haversine_km(a.latitude, a.longitude, b.latitude, b.longitude)
