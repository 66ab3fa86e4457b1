"""Shared test fixtures for settings, coordinates, coverage areas, and decision logs."""

from collections.abc import Iterator

import pytest
from loguru import logger

from coverage_api.core.config import Settings
from coverage_api.lib.coverage import CoverageArea
from coverage_api.lib.geo import Coordinate

JOHANNESBURG = Coordinate(-26.2041, 28.0473)
CAPE_TOWN = Coordinate(-33.9249, 18.4241)
DURBAN = Coordinate(-29.8587, 31.0218)


@pytest.fixture
def settings() -> Settings:
    """Test application settings."""
    return Settings(
        _env_file=None,
        backend_url="http://backend.test",
        backend_api_key="test-anon-key",
    )


@pytest.fixture
def coverage_areas() -> list[CoverageArea]:
    """A small set of South African coverage areas."""
    return [
        CoverageArea(
            id="area-jhb",
            name="Greater Johannesburg Metro",
            center=JOHANNESBURG,
            radius_km=50.0,
            quality="excellent",
            area_type="metro",
        ),
        CoverageArea(
            id="area-cpt",
            name="Cape Town City Bowl",
            center=CAPE_TOWN,
            radius_km=15.0,
            quality="good",
            area_type="suburb",
        ),
        CoverageArea(
            id="area-dbn",
            name="Durban North",
            center=DURBAN,
            radius_km=20.0,
            quality="fair",
            area_type="suburb",
            is_active=False,
        ),
        CoverageArea(id="area-text-only", name="Polokwane Central"),
    ]


@pytest.fixture
def decision_records() -> Iterator[list[dict]]:
    """Capture loguru records bound as decision logs."""
    records: list[dict] = []
    handler_id = logger.add(
        lambda message: records.append(message.record),
        level="DEBUG",
        filter=lambda record: record["extra"].get("json_output", False),
    )
    yield records
    logger.remove(handler_id)
