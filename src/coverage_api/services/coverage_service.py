"""Coverage service: fetches candidate areas from the backend and runs the matcher."""

from loguru import logger

from coverage_api.core.logging import decision_logger
from coverage_api.lib.backend import BackendStore, ServiceProvider
from coverage_api.lib.coverage import CoverageMatch, check_coverage as match_coverage
from coverage_api.lib.geo.point import Coordinate


async def check_coverage(
    store: BackendStore,
    coord: Coordinate | None = None,
    location: str | None = None,
) -> CoverageMatch:
    """Check whether a visitor's location falls inside an active coverage area.

    Candidates are read fresh from the backend on every call. GPS
    coordinates are tried first; the typed location is used when no area
    covers the point or no point was shared.

    Args:
        store: Backend store client.
        coord: GPS point shared by the visitor.
        location: Free-text location typed by the visitor.

    Returns:
        CoverageMatch; ``found=False`` when nothing matches.

    Raises:
        ValueError: If neither a coordinate nor a location is given.
        BackendStoreError: If the coverage areas cannot be fetched.
    """
    location = location.strip() if location else None
    if coord is None and not location:
        msg = "A coordinate or a location is required to check coverage."
        raise ValueError(msg)

    areas = await store.fetch_active_coverage_areas()
    if not areas:
        logger.warning("No active coverage areas returned by the backend")

    match = match_coverage(areas, coord=coord, text=location)
    if match.found and match.area is not None:
        method = "coordinate" if match.distance_km is not None else "text"
        decision_logger(
            "coverage",
            found=True,
            area_id=match.area.id,
            method=method,
            distance_km=match.distance_km,
        ).info(f"Coverage found in area {match.area.id} ({match.area.name}) by {method}")
    else:
        decision_logger("coverage", found=False, candidates=len(areas)).info(
            f"No coverage among {len(areas)} active areas"
        )
    return match


async def get_service_providers(store: BackendStore, coverage_area_id: str) -> list[ServiceProvider]:
    """List the providers serving a coverage area.

    Raises:
        BackendStoreError: If the providers cannot be fetched.
    """
    providers = await store.fetch_service_providers(coverage_area_id)
    logger.debug(f"{len(providers)} service providers for area {coverage_area_id}")
    return providers
