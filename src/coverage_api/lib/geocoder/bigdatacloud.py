"""BigDataCloud reverse geocoder provider.

Uses the free client-side reverse geocoding endpoint
(https://www.bigdatacloud.com/free-api/free-reverse-geocode-to-city-api).
No API key required. Resolves to locality level only.
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

DEFAULT_BASE_URL = "https://api.bigdatacloud.net"
DEFAULT_TIMEOUT = 5.0


class BigDataCloudGeocoder(BaseReverseGeocoder):
    """BigDataCloud client-side reverse geocoder provider."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        base_url: str = DEFAULT_BASE_URL,
    ) -> None:
        self._timeout = timeout
        self._base_url = base_url.rstrip("/")

    @property
    def provider_name(self) -> str:
        return "bigdatacloud"

    @property
    def confidence(self) -> Confidence:
        return Confidence.MEDIUM

    async def reverse(self, coord: Coordinate) -> LocationResult | None:
        """Reverse geocode a coordinate using the BigDataCloud API.

        Args:
            coord: Point to resolve.

        Returns:
            LocationResult or None if the response has no locality.

        Raises:
            ReverseGeocodingProviderError: On transport or service errors.
        """
        url = f"{self._base_url}/data/reverse-geocode-client"
        params: dict[str, str | float] = {
            "latitude": coord.latitude,
            "longitude": coord.longitude,
            "localityLanguage": "en",
        }

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(url, params=params)
                response.raise_for_status()

            data = response.json()
            return self._parse_response(data)

        except httpx.TimeoutException as e:
            logger.warning("BigDataCloud reverse geocoder timeout")
            raise ReverseGeocodingProviderError("bigdatacloud", "Reverse geocoding request timed out") from e
        except httpx.HTTPStatusError as e:
            logger.warning(f"BigDataCloud reverse geocoder HTTP error {e.response.status_code}")
            raise ReverseGeocodingProviderError(
                "bigdatacloud",
                f"Provider returned HTTP {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.RequestError as e:
            logger.warning("BigDataCloud reverse geocoder connection error")
            raise ReverseGeocodingProviderError("bigdatacloud", "Connection to geocoding provider failed") from e
        except ReverseGeocodingProviderError:
            raise
        except Exception as e:
            logger.exception("BigDataCloud reverse geocoder unexpected error")
            raise ReverseGeocodingProviderError("bigdatacloud", f"Unexpected error: {e}") from e

    def _parse_response(self, data: object) -> LocationResult | None:
        """Parse a BigDataCloud response into a LocationResult.

        Args:
            data: Decoded JSON body from BigDataCloud.

        Returns:
            LocationResult or None if no usable locality is present.
        """
        if not isinstance(data, dict):
            return None

        locality = clean_text(data.get("locality"))
        if not locality:
            return None

        subdivision = clean_text(data.get("principalSubdivision"))
        country = clean_text(data.get("countryName"))

        return LocationResult(
            formatted_address=", ".join(p for p in (locality, subdivision, country) if p),
            city=locality,
            province=subdivision,
            country=country,
            confidence=self.confidence,
            provider=self.provider_name,
        )
