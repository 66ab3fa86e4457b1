"""Root API router with /api/v1 prefix and middleware registration."""

from fastapi import APIRouter, FastAPI

from coverage_api.api.middleware import SecurityHeadersMiddleware, setup_cors
from coverage_api.core.config import Settings


def create_router(settings: Settings) -> APIRouter:
    """Create the root API router with all sub-routers included.

    Args:
        settings: Application settings.

    Returns:
        Configured API router.
    """
    from coverage_api.api.v1.coverage import coverage_router
    from coverage_api.api.v1.geocoding import geocoding_router
    from coverage_api.api.v1.health import health_router
    from coverage_api.api.v1.onboarding import onboarding_router

    root_router = APIRouter(prefix=settings.api_v1_prefix)
    root_router.include_router(health_router)
    root_router.include_router(geocoding_router)
    root_router.include_router(coverage_router)
    root_router.include_router(onboarding_router)

    return root_router


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Register all middleware on the FastAPI app.

    Args:
        app: The FastAPI application.
        settings: Application settings.
    """
    setup_cors(app, settings)
    app.add_middleware(SecurityHeadersMiddleware)
