"""Onboarding API endpoints: packages, customer capture, and analytics logging."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from coverage_api.core.dependencies import get_backend_store
from coverage_api.lib.backend import BackendStore, BackendStoreError, CustomerRecord, InteractionRecord
from coverage_api.schemas.onboarding import (
    CustomerCreatedResponse,
    CustomerCreateRequest,
    InteractionAcceptedResponse,
    InteractionCreateRequest,
    JourneyEventCreateRequest,
    PackageResponse,
    PackageSelectionCreateRequest,
)

onboarding_router = APIRouter(tags=["onboarding"])


@onboarding_router.get(
    "/packages",
    response_model=list[PackageResponse],
)
async def list_packages(
    store: Annotated[BackendStore, Depends(get_backend_store)],
) -> list[PackageResponse]:
    """List active packages in display order."""
    try:
        packages = await store.fetch_active_packages()
    except BackendStoreError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Packages are temporarily unavailable. Please try again.",
        ) from e

    return [PackageResponse.model_validate(p) for p in packages]


@onboarding_router.post(
    "/customers",
    response_model=CustomerCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_customer(
    request: CustomerCreateRequest,
    store: Annotated[BackendStore, Depends(get_backend_store)],
) -> CustomerCreatedResponse:
    """Persist the customer captured at the end of onboarding."""
    try:
        row = await store.create_customer(CustomerRecord(**request.model_dump()))
    except BackendStoreError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Your details could not be saved. Please try again.",
        ) from e

    return CustomerCreatedResponse(
        id=str(row.get("id", "")),
        name=row.get("name") or request.name,
        status=row.get("status") or request.status,
    )


@onboarding_router.post(
    "/interactions",
    response_model=InteractionAcceptedResponse,
    status_code=status.HTTP_202_ACCEPTED,
)
async def log_interaction(
    request: InteractionCreateRequest,
    store: Annotated[BackendStore, Depends(get_backend_store)],
) -> InteractionAcceptedResponse:
    """Record a conversation step. Never fails the widget on backend errors."""
    recorded = await store.log_interaction(InteractionRecord(**request.model_dump()))
    return InteractionAcceptedResponse(recorded=recorded)


@onboarding_router.post(
    "/journey-events",
    response_model=InteractionAcceptedResponse,
    status_code=status.HTTP_202_ACCEPTED,
)
async def track_journey_event(
    request: JourneyEventCreateRequest,
    store: Annotated[BackendStore, Depends(get_backend_store)],
) -> InteractionAcceptedResponse:
    """Record a customer journey stage transition (best-effort)."""
    recorded = await store.track_journey_stage(
        request.customer_id,
        request.from_stage,
        request.to_stage,
        request.trigger,
        event_data=request.event_data,
    )
    return InteractionAcceptedResponse(recorded=recorded)


@onboarding_router.post(
    "/package-selections",
    response_model=InteractionAcceptedResponse,
    status_code=status.HTTP_202_ACCEPTED,
)
async def track_package_selection(
    request: PackageSelectionCreateRequest,
    store: Annotated[BackendStore, Depends(get_backend_store)],
) -> InteractionAcceptedResponse:
    """Record a package the visitor picked (best-effort)."""
    recorded = await store.track_package_selection(
        request.customer_id,
        request.package_id,
        request.package_code,
        is_final=request.is_final,
        context=request.context,
    )
    return InteractionAcceptedResponse(recorded=recorded)
