"""Coverage API endpoints — coverage check and providers per area."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from coverage_api.core.dependencies import get_backend_store
from coverage_api.lib.backend import BackendStore, BackendStoreError
from coverage_api.lib.geo.point import Coordinate
from coverage_api.schemas.coverage import (
    CoverageCheckRequest,
    CoverageCheckResponse,
    ServiceProviderResponse,
)
from coverage_api.services.coverage_service import check_coverage, get_service_providers

coverage_router = APIRouter(prefix="/coverage", tags=["coverage"])

_BACKEND_UNAVAILABLE = "Coverage data is temporarily unavailable. Please try again."


@coverage_router.post(
    "/check",
    response_model=CoverageCheckResponse,
)
async def check_coverage_endpoint(
    request: CoverageCheckRequest,
    store: Annotated[BackendStore, Depends(get_backend_store)],
) -> CoverageCheckResponse:
    """Check whether a GPS point or typed location is inside an active coverage area."""
    coord = None
    if request.latitude is not None and request.longitude is not None:
        coord = Coordinate(request.latitude, request.longitude)

    try:
        match = await check_coverage(store, coord=coord, location=request.location)
    except BackendStoreError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=_BACKEND_UNAVAILABLE,
        ) from e

    return CoverageCheckResponse.from_match(match)


@coverage_router.get(
    "/areas/{area_id}/providers",
    response_model=list[ServiceProviderResponse],
)
async def list_area_providers(
    area_id: str,
    store: Annotated[BackendStore, Depends(get_backend_store)],
) -> list[ServiceProviderResponse]:
    """List the service providers serving a coverage area."""
    try:
        providers = await get_service_providers(store, area_id)
    except BackendStoreError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=_BACKEND_UNAVAILABLE,
        ) from e

    return [ServiceProviderResponse.model_validate(p) for p in providers]
