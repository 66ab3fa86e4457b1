"""Coverage CLI commands for checking coverage and listing providers against the live backend."""

import asyncio

import typer

from coverage_api.lib.geo.point import Coordinate

coverage_app = typer.Typer()


@coverage_app.command("check")
def check(
    lat: float | None = typer.Option(None, "--lat", min=-90, max=90, help="Latitude (-90 to 90)"),  # noqa: B008
    lng: float | None = typer.Option(None, "--lng", min=-180, max=180, help="Longitude (-180 to 180)"),  # noqa: B008
    location: str | None = typer.Option(None, "--location", help="Free-text location, e.g. a suburb name"),
) -> None:
    """Check coverage for a GPS point and/or a typed location."""
    if (lat is None) != (lng is None):
        typer.echo("Error: --lat and --lng must be given together", err=True)
        raise typer.Exit(code=2)
    coord = Coordinate(lat, lng) if lat is not None and lng is not None else None
    if coord is None and not location:
        typer.echo("Error: provide --lat/--lng or --location", err=True)
        raise typer.Exit(code=2)

    asyncio.run(_check(coord, location))


@coverage_app.command("providers")
def providers(
    area_id: str = typer.Argument(..., help="Coverage area id"),  # noqa: B008
) -> None:
    """List the service providers serving a coverage area."""
    asyncio.run(_providers(area_id))


async def _check(coord: Coordinate | None, location: str | None) -> None:
    """Async implementation of the coverage check."""
    from coverage_api.core.config import get_settings
    from coverage_api.lib.backend import BackendStoreError, create_backend_store
    from coverage_api.services.coverage_service import check_coverage

    async with create_backend_store(get_settings()) as store:
        try:
            match = await check_coverage(store, coord=coord, location=location)
        except BackendStoreError as e:
            typer.echo(f"Error: could not load coverage areas ({e})", err=True)
            raise typer.Exit(code=1) from e

    if not match.found or match.area is None:
        typer.echo("No coverage found.")
        return

    typer.echo("Coverage found:")
    typer.echo(f"  Area:      {match.area.name} ({match.area.id})")
    typer.echo(f"  Quality:   {match.area.quality or '-'}")
    if match.distance_km is not None:
        typer.echo(f"  Distance:  {match.distance_km:.2f} km from center")


async def _providers(area_id: str) -> None:
    """Async implementation of the provider listing."""
    from coverage_api.core.config import get_settings
    from coverage_api.lib.backend import BackendStoreError, create_backend_store
    from coverage_api.services.coverage_service import get_service_providers

    async with create_backend_store(get_settings()) as store:
        try:
            found = await get_service_providers(store, area_id)
        except BackendStoreError as e:
            typer.echo(f"Error: could not load service providers ({e})", err=True)
            raise typer.Exit(code=1) from e

    if not found:
        typer.echo(f"No service providers for area {area_id}.")
        return
    for provider in found:
        typer.echo(f"  {provider.id:<16} {provider.name}")
