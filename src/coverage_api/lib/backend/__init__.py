"""Backend store library — client for the hosted onboarding data store.

Public API:
    - BackendStore: PostgREST client for coverage areas, providers, packages, customers
    - BackendStoreError: Transport/service error
    - ServiceProvider, Package, CustomerRecord, InteractionRecord: Record types
    - create_backend_store: Build a store from application settings
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from coverage_api.lib.backend.records import (
    BackendStoreError,
    CustomerRecord,
    InteractionRecord,
    Package,
    ServiceProvider,
)
from coverage_api.lib.backend.store import BackendStore

if TYPE_CHECKING:
    from coverage_api.core.config import Settings


def create_backend_store(settings: Settings) -> BackendStore:
    """Build a BackendStore configured from *settings*."""
    return BackendStore(
        base_url=settings.backend_url,
        api_key=settings.backend_api_key,
        timeout=settings.backend_timeout,
        system_input_process=settings.system_input_process,
        acquisition_source=settings.acquisition_source,
    )


__all__ = [
    "BackendStore",
    "BackendStoreError",
    "CustomerRecord",
    "InteractionRecord",
    "Package",
    "ServiceProvider",
    "create_backend_store",
]
