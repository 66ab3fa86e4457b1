"""FastAPI dependency injection for settings and the backend store client."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends

from coverage_api.core.config import Settings, get_settings
from coverage_api.lib.backend import BackendStore, create_backend_store


async def get_backend_store(
    settings: Annotated[Settings, Depends(get_settings)],
) -> AsyncGenerator[BackendStore]:
    """Yield a backend store client with per-request lifecycle."""
    async with create_backend_store(settings) as store:
        yield store
