"""Reverse geocoder library — pluggable coordinate-to-place resolution.

Public API:
    - BaseReverseGeocoder: Abstract remote provider interface
    - LocationResult: Result dataclass
    - Confidence: Confidence level enum
    - ReverseGeocodingProviderError: Provider transport/service error
    - NominatimGeocoder: OpenStreetMap Nominatim provider (high confidence)
    - BigDataCloudGeocoder: BigDataCloud provider (medium confidence)
    - Gazetteer / ReferencePoint: Local last-resort lookup table (low confidence)
    - get_reverse_geocoder: Provider factory/registry
    - get_configured_providers: Providers that are enabled, in fallback order
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from coverage_api.lib.geocoder.base import (
    BaseReverseGeocoder,
    Confidence,
    LocationResult,
    ReverseGeocodingProviderError,
)
from coverage_api.lib.geocoder.bigdatacloud import BigDataCloudGeocoder
from coverage_api.lib.geocoder.gazetteer import DEFAULT_GAZETTEER, Gazetteer, ReferencePoint
from coverage_api.lib.geocoder.nominatim import NominatimGeocoder

if TYPE_CHECKING:
    from coverage_api.core.config import Settings

# Provider registry: all known remote providers
_PROVIDERS: dict[str, type[BaseReverseGeocoder]] = {
    "nominatim": NominatimGeocoder,
    "bigdatacloud": BigDataCloudGeocoder,
}


def get_available_providers() -> list[str]:
    """Return the names of all registered remote providers.

    Returns:
        Sorted list of provider name strings.
    """
    return sorted(_PROVIDERS.keys())


def get_reverse_geocoder(provider: str, **kwargs: Any) -> BaseReverseGeocoder:
    """Get a reverse geocoder instance by provider name.

    Args:
        provider: Provider name (e.g., "nominatim").
        **kwargs: Additional arguments forwarded to the provider constructor
            (e.g., ``timeout=2.0``).

    Returns:
        An instance of the requested geocoder provider.

    Raises:
        ValueError: If the provider is not registered.
    """
    cls = _PROVIDERS.get(provider)
    if cls is None:
        msg = f"Unknown reverse geocoder provider: {provider!r}. Available: {list(_PROVIDERS.keys())}"
        raise ValueError(msg)
    return cls(**kwargs)


def get_configured_providers(settings: Settings) -> list[BaseReverseGeocoder]:
    """Get remote providers that are enabled, in fallback order.

    Unknown names in the fallback order are skipped, as are duplicates.
    The gazetteer is not part of this list; it always runs last.

    Args:
        settings: Application settings.

    Returns:
        List of configured BaseReverseGeocoder instances, in fallback order.
    """
    provider_configs: dict[str, dict[str, Any]] = {
        "nominatim": {
            "enabled": settings.geocoder_nominatim_enabled,
            "kwargs": {
                "timeout": settings.geocoder_nominatim_timeout,
                "base_url": settings.geocoder_nominatim_base_url,
                "user_agent": settings.geocoder_nominatim_user_agent,
            },
        },
        "bigdatacloud": {
            "enabled": settings.geocoder_bigdatacloud_enabled,
            "kwargs": {
                "timeout": settings.geocoder_bigdatacloud_timeout,
                "base_url": settings.geocoder_bigdatacloud_base_url,
            },
        },
    }

    providers: list[BaseReverseGeocoder] = []
    seen: set[str] = set()

    for name in settings.geocoder_fallback_order_list:
        if name in seen:
            continue
        seen.add(name)
        config = provider_configs.get(name)
        if config is None or not config.get("enabled", False):
            continue

        geocoder = get_reverse_geocoder(name, **config.get("kwargs", {}))
        if geocoder.is_configured:
            providers.append(geocoder)

    return providers


__all__ = [
    "DEFAULT_GAZETTEER",
    "BaseReverseGeocoder",
    "BigDataCloudGeocoder",
    "Confidence",
    "Gazetteer",
    "LocationResult",
    "NominatimGeocoder",
    "ReferencePoint",
    "ReverseGeocodingProviderError",
    "get_available_providers",
    "get_configured_providers",
    "get_reverse_geocoder",
]
