"""Pydantic v2 schemas for packages, customers, and onboarding analytics."""

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from coverage_api.lib.geo.point import Coordinate

Language = Literal["en", "af", "zu"]
CustomerStatus = Literal["active", "inactive", "pending", "cancelled", "suspended", "churned"]
JourneyStage = Literal["awareness", "consideration", "decision", "retention", "advocacy", "churned"]
InteractionType = Literal[
    "message",
    "quick_reply",
    "location_share",
    "package_selection",
    "consent",
    "coverage_check",
]


class PackageResponse(BaseModel):
    """An active package offered during onboarding."""

    model_config = {"from_attributes": True}

    id: str
    package_code: str
    name: str
    speed: str
    price: float
    price_display: str
    description: str
    features: list[str]
    is_popular: bool
    sort_order: int


class CustomerCreateRequest(BaseModel):
    """Request body for POST /customers."""

    name: str = Field(..., min_length=1, max_length=200)
    phone_number: str = Field(..., min_length=5, max_length=32)
    preferred_language: Language = "en"
    coverage_available: bool = False
    gps_coordinates: str | None = Field(default=None, description="'lat,lng' as shared by the visitor")
    gps_location: str | None = Field(default=None, description="Resolved display name for the GPS point")
    manual_location: str | None = Field(default=None, max_length=200)
    coverage_area_id: str | None = None
    status: CustomerStatus = "pending"
    current_journey_stage: JourneyStage = "decision"
    selected_package_id: str | None = None
    selected_package_code: str | None = None
    selected_service_provider_id: str | None = None

    @field_validator("gps_coordinates")
    @classmethod
    def validate_gps_coordinates(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return str(Coordinate.parse(v))


class CustomerCreatedResponse(BaseModel):
    """Response for POST /customers."""

    id: str
    name: str
    status: str


class InteractionCreateRequest(BaseModel):
    """Request body for POST /interactions."""

    customer_id: str
    session_id: str
    interaction_type: InteractionType
    language_used: Language = "en"
    message_text: str | None = None
    bot_response: str | None = None
    quick_reply_selected: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)


class InteractionAcceptedResponse(BaseModel):
    """Response for the best-effort analytics writes."""

    recorded: bool


class JourneyEventCreateRequest(BaseModel):
    """Request body for POST /journey-events."""

    customer_id: str
    from_stage: JourneyStage | None = None
    to_stage: JourneyStage
    trigger: str = Field(..., min_length=1, max_length=100)
    event_data: dict[str, Any] = Field(default_factory=dict)


class PackageSelectionCreateRequest(BaseModel):
    """Request body for POST /package-selections."""

    customer_id: str
    package_id: str
    package_code: str = Field(..., min_length=1)
    is_final: bool = False
    context: str = Field(default="initial", max_length=50)
