"""Geocoding API endpoints — reverse geocoding for display."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from coverage_api.core.config import Settings, get_settings
from coverage_api.lib.geo.point import Coordinate
from coverage_api.schemas.geocoding import ReverseGeocodeResponse
from coverage_api.services.geocoding_service import reverse_geocode

geocoding_router = APIRouter(prefix="/geocoding", tags=["geocoding"])


@geocoding_router.get(
    "/reverse",
    response_model=ReverseGeocodeResponse,
)
async def reverse_geocode_point(
    settings: Annotated[Settings, Depends(get_settings)],
    lat: float = Query(..., ge=-90, le=90, description="WGS84 latitude"),  # noqa: B008
    lng: float = Query(..., ge=-180, le=180, description="WGS84 longitude"),  # noqa: B008
) -> ReverseGeocodeResponse:
    """Resolve a GPS point to a human-readable place name.

    Always answers: when every remote provider fails the nearest known
    reference point is returned with low confidence.
    """
    result = await reverse_geocode(Coordinate(lat, lng), settings)
    return ReverseGeocodeResponse.from_result(lat, lng, result)
