"""Typer CLI root application with serve command."""

import typer

from coverage_api.core.config import get_settings
from coverage_api.core.logging import setup_logging

app = typer.Typer(name="coverage-api", help="ISP onboarding coverage resolution CLI")


@app.callback()
def _main_callback() -> None:
    """Initialize logging for all CLI commands."""
    settings = get_settings()
    setup_logging(settings.log_level, log_dir=settings.log_dir)


@app.command()
def serve(
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload for development"),
    host: str = typer.Option("0.0.0.0", "--host", help="Bind host"),  # noqa: S104
    port: int = typer.Option(8000, "--port", help="Bind port"),
) -> None:
    """Start the API server."""
    import uvicorn

    uvicorn.run(
        "coverage_api.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )


def _register_subcommands() -> None:
    """Register all CLI subcommand groups."""
    from coverage_api.cli.coverage_cmd import coverage_app
    from coverage_api.cli.geocode_cmd import geocode_app

    app.add_typer(geocode_app, name="geocode", help="Reverse geocoding commands")
    app.add_typer(coverage_app, name="coverage", help="Coverage lookup commands")


_register_subcommands()
