"""Reverse geocoding CLI commands."""

import asyncio

import typer

from coverage_api.lib.geo.point import Coordinate

geocode_app = typer.Typer()


@geocode_app.command("reverse")
def reverse(
    lat: float = typer.Option(..., "--lat", min=-90, max=90, help="Latitude (-90 to 90)"),  # noqa: B008
    lng: float = typer.Option(..., "--lng", min=-180, max=180, help="Longitude (-180 to 180)"),  # noqa: B008
    offline: bool = typer.Option(False, "--offline", help="Skip remote providers, use the gazetteer only"),  # noqa: FBT001
) -> None:
    """Resolve a coordinate to a place name."""
    asyncio.run(_reverse(Coordinate(lat, lng), offline))


@geocode_app.command("sample")
def sample(
    seed: int | None = typer.Option(None, "--seed", help="Random seed for a reproducible point"),
    offline: bool = typer.Option(False, "--offline", help="Skip remote providers, use the gazetteer only"),  # noqa: FBT001
) -> None:
    """Resolve a random point near a gazetteer reference location."""
    import random

    from coverage_api.lib.geocoder import DEFAULT_GAZETTEER

    coord, point = DEFAULT_GAZETTEER.sample_point(random.Random(seed))
    typer.echo(f"Sampled {coord} near {point.name}")
    asyncio.run(_reverse(coord, offline))


async def _reverse(coord: Coordinate, offline: bool) -> None:
    """Async implementation of reverse geocoding."""
    from coverage_api.core.config import get_settings
    from coverage_api.lib.geocoder import get_configured_providers
    from coverage_api.services.geocoding_service import reverse_geocode_with_fallback

    providers = [] if offline else get_configured_providers(get_settings())
    result = await reverse_geocode_with_fallback(coord, providers)

    typer.echo(f"Address:    {result.formatted_address}")
    typer.echo(f"City:       {result.city or '-'}")
    typer.echo(f"Province:   {result.province or '-'}")
    typer.echo(f"Country:    {result.country or '-'}")
    typer.echo(f"Confidence: {result.confidence.value} ({result.provider})")
