"""Pydantic v2 schemas for coverage checks and service providers."""

from pydantic import BaseModel, Field, model_validator

from coverage_api.lib.coverage import CoverageArea, CoverageMatch


class CoverageCheckRequest(BaseModel):
    """Request body for POST /coverage/check.

    Supply GPS coordinates, a typed location, or both.
    """

    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    location: str | None = Field(default=None, max_length=200, description="Free-text location")

    @model_validator(mode="after")
    def check_inputs(self) -> "CoverageCheckRequest":
        if (self.latitude is None) != (self.longitude is None):
            msg = "latitude and longitude must be provided together"
            raise ValueError(msg)
        if self.latitude is None and not (self.location and self.location.strip()):
            msg = "Provide latitude/longitude or a location"
            raise ValueError(msg)
        return self


class CoverageAreaResponse(BaseModel):
    """A coverage area as returned to the widget."""

    id: str
    name: str
    area_type: str | None = None
    center_lat: float | None = None
    center_lng: float | None = None
    radius_km: float | None = None
    coverage_quality: str | None = None

    @classmethod
    def from_area(cls, area: CoverageArea) -> "CoverageAreaResponse":
        return cls(
            id=area.id,
            name=area.name,
            area_type=area.area_type,
            center_lat=area.center.latitude if area.center else None,
            center_lng=area.center.longitude if area.center else None,
            radius_km=area.radius_km,
            coverage_quality=area.quality,
        )


class CoverageCheckResponse(BaseModel):
    """Response for POST /coverage/check."""

    found: bool
    area: CoverageAreaResponse | None = None
    distance_km: float | None = None

    @classmethod
    def from_match(cls, match: CoverageMatch) -> "CoverageCheckResponse":
        return cls(
            found=match.found,
            area=CoverageAreaResponse.from_area(match.area) if match.area else None,
            distance_km=round(match.distance_km, 3) if match.distance_km is not None else None,
        )


class ServiceProviderResponse(BaseModel):
    """A service provider available in a coverage area."""

    model_config = {"from_attributes": True}

    id: str
    name: str
    description: str = ""
