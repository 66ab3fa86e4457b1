"""Geographic primitives — coordinates and great-circle distance.

Public API:
    - Coordinate: Validated (latitude, longitude) value type
    - is_valid_coordinates: Range check without constructing a Coordinate
    - distance: Kilometers between two Coordinates
    - haversine_km: Kilometers between two raw lat/lng pairs
"""

from coverage_api.lib.geo.distance import EARTH_RADIUS_KM, distance, haversine_km
from coverage_api.lib.geo.point import Coordinate, is_valid_coordinates

__all__ = [
    "EARTH_RADIUS_KM",
    "Coordinate",
    "distance",
    "haversine_km",
    "is_valid_coordinates",
]
