"""Tests for the coverage-api CLI commands."""

from unittest.mock import AsyncMock, patch

from typer.testing import CliRunner

from coverage_api.cli.app import app
from coverage_api.lib.backend import BackendStoreError, ServiceProvider
from coverage_api.lib.coverage import CoverageArea, CoverageMatch
from coverage_api.lib.geo import Coordinate
from coverage_api.lib.geocoder import Confidence, LocationResult

runner = CliRunner()


class TestGeocodeReverseCommand:
    """Tests for `coverage-api geocode reverse`."""

    def test_offline_uses_gazetteer(self) -> None:
        result = runner.invoke(app, ["geocode", "reverse", "--lat=-26.2041", "--lng=28.0473", "--offline"])
        assert result.exit_code == 0
        assert "Near Johannesburg, Gauteng, South Africa" in result.output
        assert "low (gazetteer)" in result.output

    def test_online_uses_providers(self) -> None:
        resolved = LocationResult(
            formatted_address="Durban, KwaZulu-Natal, South Africa",
            confidence=Confidence.HIGH,
            city="Durban",
            provider="nominatim",
        )
        with patch(
            "coverage_api.services.geocoding_service.reverse_geocode_with_fallback",
            new_callable=AsyncMock,
            return_value=resolved,
        ) as mock_fallback:
            result = runner.invoke(app, ["geocode", "reverse", "--lat=-29.8587", "--lng=31.0218"])

        assert result.exit_code == 0
        assert "City:       Durban" in result.output
        assert "high (nominatim)" in result.output
        providers = mock_fallback.call_args.args[1]
        assert len(providers) > 0

    def test_out_of_range_latitude_rejected(self) -> None:
        result = runner.invoke(app, ["geocode", "reverse", "--lat=95", "--lng=28", "--offline"])
        assert result.exit_code == 2


class TestGeocodeSampleCommand:
    """Tests for `coverage-api geocode sample`."""

    def test_seeded_sample(self) -> None:
        result = runner.invoke(app, ["geocode", "sample", "--seed", "3", "--offline"])
        assert result.exit_code == 0
        assert "Sampled " in result.output
        assert "Address:    Near " in result.output


class TestCoverageCheckCommand:
    """Tests for `coverage-api coverage check`."""

    def test_coverage_found(self) -> None:
        area = CoverageArea(id="area-jhb", name="Greater Johannesburg Metro", quality="excellent")
        match = CoverageMatch(found=True, area=area, distance_km=3.21)
        with patch(
            "coverage_api.services.coverage_service.check_coverage", new_callable=AsyncMock, return_value=match
        ) as mock_check:
            result = runner.invoke(app, ["coverage", "check", "--lat=-26.2", "--lng=28.05"])

        assert result.exit_code == 0
        assert "Coverage found:" in result.output
        assert "Greater Johannesburg Metro (area-jhb)" in result.output
        assert "3.21 km" in result.output
        assert mock_check.call_args.kwargs["coord"] == Coordinate(-26.2, 28.05)

    def test_no_coverage(self) -> None:
        with patch(
            "coverage_api.services.coverage_service.check_coverage",
            new_callable=AsyncMock,
            return_value=CoverageMatch.not_found(),
        ) as mock_check:
            result = runner.invoke(app, ["coverage", "check", "--location", "Atlantis"])

        assert result.exit_code == 0
        assert "No coverage found." in result.output
        assert mock_check.call_args.kwargs["location"] == "Atlantis"
        assert mock_check.call_args.kwargs["coord"] is None

    def test_backend_error_exits_1(self) -> None:
        with patch(
            "coverage_api.services.coverage_service.check_coverage",
            new_callable=AsyncMock,
            side_effect=BackendStoreError("coverage_areas", "HTTP 503", 503),
        ):
            result = runner.invoke(app, ["coverage", "check", "--location", "Sandton"])

        assert result.exit_code == 1

    def test_lat_without_lng_rejected(self) -> None:
        result = runner.invoke(app, ["coverage", "check", "--lat=-26.2"])
        assert result.exit_code == 2

    def test_nothing_given_rejected(self) -> None:
        result = runner.invoke(app, ["coverage", "check"])
        assert result.exit_code == 2


class TestCoverageProvidersCommand:
    """Tests for `coverage-api coverage providers`."""

    def test_lists_providers(self) -> None:
        with patch(
            "coverage_api.services.coverage_service.get_service_providers",
            new_callable=AsyncMock,
            return_value=[ServiceProvider(id="sp-1", name="Vumatel")],
        ):
            result = runner.invoke(app, ["coverage", "providers", "area-jhb"])

        assert result.exit_code == 0
        assert "Vumatel" in result.output

    def test_no_providers(self) -> None:
        with patch(
            "coverage_api.services.coverage_service.get_service_providers",
            new_callable=AsyncMock,
            return_value=[],
        ):
            result = runner.invoke(app, ["coverage", "providers", "area-x"])

        assert result.exit_code == 0
        assert "No service providers for area area-x." in result.output
