"""OpenStreetMap Nominatim reverse geocoder provider.

Uses the Nominatim reverse API (https://nominatim.org/release-docs/develop/api/Reverse/)
for coordinate-to-place resolution. Free but rate-limited to 1 req/sec and
requires an identifying User-Agent.
"""

import httpx
from loguru import logger

from coverage_api.lib.geo.point import Coordinate
from coverage_api.lib.geocoder.base import (
    BaseReverseGeocoder,
    Confidence,
    LocationResult,
    ReverseGeocodingProviderError,
    clean_text,
)

DEFAULT_BASE_URL = "https://nominatim.openstreetmap.org"
DEFAULT_TIMEOUT = 5.0
DEFAULT_USER_AGENT = "coverage-api/1.0"

# zoom=10 resolves to city level, which is all the widget displays
_ZOOM = 10


class NominatimGeocoder(BaseReverseGeocoder):
    """OpenStreetMap Nominatim reverse geocoder provider."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self._timeout = timeout
        self._base_url = base_url.rstrip("/")
        self._user_agent = user_agent

    @property
    def provider_name(self) -> str:
        return "nominatim"

    @property
    def confidence(self) -> Confidence:
        return Confidence.HIGH

    async def reverse(self, coord: Coordinate) -> LocationResult | None:
        """Reverse geocode a coordinate using the Nominatim API.

        Args:
            coord: Point to resolve.

        Returns:
            LocationResult or None if the response has no display name.

        Raises:
            ReverseGeocodingProviderError: On transport or service errors.
        """
        params: dict[str, str | float | int] = {
            "format": "json",
            "lat": coord.latitude,
            "lon": coord.longitude,
            "zoom": _ZOOM,
            "addressdetails": 1,
        }
        headers = {"User-Agent": self._user_agent}

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(f"{self._base_url}/reverse", params=params, headers=headers)
                response.raise_for_status()

            data = response.json()
            return self._parse_response(data)

        except httpx.TimeoutException as e:
            logger.warning("Nominatim reverse geocoder timeout")
            raise ReverseGeocodingProviderError("nominatim", "Reverse geocoding request timed out") from e
        except httpx.HTTPStatusError as e:
            logger.warning(f"Nominatim reverse geocoder HTTP error {e.response.status_code}")
            raise ReverseGeocodingProviderError(
                "nominatim",
                f"Provider returned HTTP {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.RequestError as e:
            logger.warning("Nominatim reverse geocoder connection error")
            raise ReverseGeocodingProviderError("nominatim", "Connection to geocoding provider failed") from e
        except ReverseGeocodingProviderError:
            raise
        except Exception as e:
            logger.exception("Nominatim reverse geocoder unexpected error")
            raise ReverseGeocodingProviderError("nominatim", f"Unexpected error: {e}") from e

    def _parse_response(self, data: object) -> LocationResult | None:
        """Parse a Nominatim reverse response into a LocationResult.

        Nominatim answers unknown points with ``{"error": "Unable to geocode"}``,
        which carries no display name and is treated as no result.

        Args:
            data: Decoded JSON body from Nominatim.

        Returns:
            LocationResult or None if no usable display name is present.
        """
        if not isinstance(data, dict):
            return None

        display_name = clean_text(data.get("display_name"))
        if not display_name:
            return None

        address = data.get("address")
        if not isinstance(address, dict):
            address = {}

        return LocationResult(
            formatted_address=display_name,
            city=_first_text(address, "city", "town", "village"),
            province=_first_text(address, "state", "province"),
            country=clean_text(address.get("country")),
            confidence=self.confidence,
            provider=self.provider_name,
        )


def _first_text(address: dict, *keys: str) -> str | None:
    """Return the first usable string among *keys* in a Nominatim address block."""
    for key in keys:
        value = clean_text(address.get(key))
        if value:
            return value
    return None
