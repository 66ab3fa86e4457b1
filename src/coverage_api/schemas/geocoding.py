"""Pydantic v2 schemas for reverse geocoding."""

from typing import Literal

from pydantic import BaseModel, Field

from coverage_api.lib.geocoder import LocationResult


class ReverseGeocodeResponse(BaseModel):
    """Response for GET /geocoding/reverse."""

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    formatted_address: str
    city: str | None = None
    province: str | None = None
    country: str | None = None
    confidence: Literal["high", "medium", "low"]
    provider: str | None = None

    @classmethod
    def from_result(cls, latitude: float, longitude: float, result: LocationResult) -> "ReverseGeocodeResponse":
        return cls(latitude=latitude, longitude=longitude, **result.to_dict())
