"""Health and info endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from coverage_api import __version__
from coverage_api.core.config import Settings, get_settings
from coverage_api.lib.geocoder import DEFAULT_GAZETTEER

health_router = APIRouter(tags=["health"])


@health_router.get("/health", status_code=200)
async def health_check() -> dict:
    """Health check endpoint."""
    return {"status": "healthy"}


@health_router.get("/info", status_code=200)
async def info(
    settings: Annotated[Settings, Depends(get_settings)],
) -> dict:
    """Return application version and the reverse geocoding chain in use."""
    return {
        "version": __version__,
        "geocoder_fallback_order": settings.geocoder_fallback_order_list,
        "gazetteer_version": DEFAULT_GAZETTEER.version,
    }
