"""Geocoding service: resolves coordinates to display names via a provider fallback chain."""

from collections.abc import Sequence

from loguru import logger

from coverage_api.core.config import Settings, get_settings
from coverage_api.core.logging import decision_logger
from coverage_api.lib.geo.point import Coordinate
from coverage_api.lib.geocoder import (
    DEFAULT_GAZETTEER,
    BaseReverseGeocoder,
    Gazetteer,
    LocationResult,
    ReverseGeocodingProviderError,
    get_configured_providers,
)


async def reverse_geocode_with_fallback(
    coord: Coordinate,
    providers: Sequence[BaseReverseGeocoder],
    gazetteer: Gazetteer = DEFAULT_GAZETTEER,
) -> LocationResult:
    """Resolve *coord* by trying each provider in order, then the gazetteer.

    Providers are called one at a time; the first usable result wins and
    later providers are never contacted. A provider error or an empty
    response moves on to the next provider. The gazetteer always answers,
    so this never raises for a valid coordinate.

    Args:
        coord: Point to resolve.
        providers: Remote providers in fallback order.
        gazetteer: Local reference table used when every provider misses.

    Returns:
        The first usable LocationResult.
    """
    for provider in providers:
        try:
            result = await provider.reverse(coord)
        except ReverseGeocodingProviderError as e:
            logger.warning(f"Reverse geocoder {provider.provider_name} failed, trying next: {e}")
            continue

        if result is not None:
            logger.debug(f"Resolved {coord} via {provider.provider_name}")
            decision_logger(
                "reverse_geocode",
                provider=provider.provider_name,
                confidence=str(result.confidence),
            ).info(f"Reverse geocoded via {provider.provider_name}")
            return result
        logger.debug(f"Reverse geocoder {provider.provider_name} returned no usable place for {coord}")

    result = gazetteer.resolve(coord)
    decision_logger(
        "reverse_geocode",
        provider="gazetteer",
        confidence=str(result.confidence),
        gazetteer_version=gazetteer.version,
    ).info(f"All remote reverse geocoders missed, using gazetteer {gazetteer.version}")
    return result


async def reverse_geocode(
    coord: Coordinate,
    settings: Settings | None = None,
    gazetteer: Gazetteer = DEFAULT_GAZETTEER,
) -> LocationResult:
    """Resolve *coord* with the providers enabled in *settings*.

    Args:
        coord: Point to resolve.
        settings: Application settings; loaded from the environment when omitted.
        gazetteer: Local reference table used as the final fallback.

    Returns:
        LocationResult; confidence reflects which strategy answered.
    """
    settings = settings or get_settings()
    providers = get_configured_providers(settings)
    return await reverse_geocode_with_fallback(coord, providers, gazetteer)
