"""Abstract reverse geocoder interface for pluggable provider support."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import StrEnum

from coverage_api.lib.geo.point import Coordinate


class Confidence(StrEnum):
    """How precise a resolved location string is, by the strategy that produced it."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class LocationResult:
    """Human-readable place resolved from a coordinate."""

    formatted_address: str
    confidence: Confidence
    city: str | None = None
    province: str | None = None
    country: str | None = None
    provider: str | None = None

    def __post_init__(self) -> None:
        if not self.formatted_address:
            msg = "formatted_address must not be empty"
            raise ValueError(msg)

    def to_dict(self) -> dict:
        """Convert to a plain dictionary (useful for JSON serialisation)."""
        return {
            "formatted_address": self.formatted_address,
            "city": self.city,
            "province": self.province,
            "country": self.country,
            "confidence": self.confidence.value,
            "provider": self.provider,
        }


def clean_text(value: object) -> str | None:
    """Return *value* stripped if it is a non-blank string, else None.

    Provider JSON is untrusted; numbers, lists and blank strings in
    address fields are treated as missing.
    """
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


class ReverseGeocodingProviderError(Exception):
    """Raised when a reverse geocoding provider experiences a transport or service error.

    Distinguishes provider failures (timeout, HTTP error, connection error,
    unparseable body) from a successful response with no usable place
    (which returns None).

    Args:
        provider_name: Name of the failing provider.
        message: Human-readable error description.
        status_code: Optional HTTP status code from the provider.
    """

    def __init__(self, provider_name: str, message: str, status_code: int | None = None) -> None:
        self.provider_name = provider_name
        self.message = message
        self.status_code = status_code
        super().__init__(f"{provider_name}: {message}")


class BaseReverseGeocoder(ABC):
    """Abstract reverse geocoder interface. All remote providers must implement this."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Unique name identifying this geocoder provider."""

    @property
    def confidence(self) -> Confidence:
        """Confidence attached to results from this provider."""
        return Confidence.MEDIUM

    @property
    def is_configured(self) -> bool:
        """Whether this provider has all required configuration."""
        return True

    @abstractmethod
    async def reverse(self, coord: Coordinate) -> LocationResult | None:
        """Resolve a coordinate to a place.

        Args:
            coord: Point to resolve.

        Returns:
            LocationResult, or None if the response held no usable place.

        Raises:
            ReverseGeocodingProviderError: On transport or service errors.
        """
