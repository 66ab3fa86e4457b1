"""Integration tests for onboarding endpoints."""

from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from coverage_api.api.v1.onboarding import onboarding_router
from coverage_api.core.dependencies import get_backend_store
from coverage_api.lib.backend import BackendStore, BackendStoreError, CustomerRecord, InteractionRecord, Package


@pytest.fixture
def mock_store() -> AsyncMock:
    return AsyncMock(spec=BackendStore)


@pytest.fixture
def app(mock_store: AsyncMock) -> FastAPI:
    """Create a minimal FastAPI app with the onboarding router."""
    app = FastAPI()
    app.include_router(onboarding_router, prefix="/api/v1")
    app.dependency_overrides[get_backend_store] = lambda: mock_store
    return app


@pytest.fixture
def client(app: FastAPI) -> AsyncClient:
    """Create an async test client."""
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test", follow_redirects=False)


class TestPackagesEndpoint:
    """Tests for GET /api/v1/packages."""

    @pytest.mark.asyncio
    async def test_lists_packages(self, client, mock_store: AsyncMock) -> None:
        mock_store.fetch_active_packages.return_value = [
            Package(
                id="p-1",
                package_code="FIBRE_50",
                name="Fibre 50",
                speed="50 Mbps",
                price=599.0,
                price_display="R599/month",
                features=("Uncapped",),
                is_popular=True,
            )
        ]

        resp = await client.get("/api/v1/packages")

        assert resp.status_code == 200
        (package,) = resp.json()
        assert package["package_code"] == "FIBRE_50"
        assert package["features"] == ["Uncapped"]
        assert package["is_popular"] is True

    @pytest.mark.asyncio
    async def test_backend_down_returns_502(self, client, mock_store: AsyncMock) -> None:
        mock_store.fetch_active_packages.side_effect = BackendStoreError("packages", "HTTP 500", 500)
        resp = await client.get("/api/v1/packages")
        assert resp.status_code == 502


class TestCustomersEndpoint:
    """Tests for POST /api/v1/customers."""

    @pytest.mark.asyncio
    async def test_creates_customer(self, client, mock_store: AsyncMock) -> None:
        mock_store.create_customer.return_value = {"id": "c-1", "name": "Thandi", "status": "pending"}

        resp = await client.post(
            "/api/v1/customers",
            json={
                "name": "Thandi",
                "phone_number": "+27821234567",
                "coverage_available": True,
                "gps_coordinates": " -26.1076 , 28.0567 ",
                "coverage_area_id": "area-jhb",
                "selected_package_code": "FIBRE_50",
            },
        )

        assert resp.status_code == 201
        assert resp.json() == {"id": "c-1", "name": "Thandi", "status": "pending"}
        record = mock_store.create_customer.call_args.args[0]
        assert isinstance(record, CustomerRecord)
        assert record.gps_coordinates == "-26.1076,28.0567"
        assert record.coverage_area_id == "area-jhb"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [
            {"name": "", "phone_number": "+27821234567"},
            {"name": "Thandi", "phone_number": "1"},
            {"name": "Thandi", "phone_number": "+27821234567", "gps_coordinates": "somewhere"},
            {"name": "Thandi", "phone_number": "+27821234567", "preferred_language": "fr"},
        ],
    )
    async def test_invalid_body_returns_422(self, client, mock_store: AsyncMock, body: dict) -> None:
        resp = await client.post("/api/v1/customers", json=body)
        assert resp.status_code == 422
        mock_store.create_customer.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_backend_down_returns_502(self, client, mock_store: AsyncMock) -> None:
        mock_store.create_customer.side_effect = BackendStoreError("customers", "HTTP 409", 409)
        resp = await client.post("/api/v1/customers", json={"name": "Thandi", "phone_number": "+27821234567"})
        assert resp.status_code == 502


class TestInteractionsEndpoint:
    """Tests for POST /api/v1/interactions."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("recorded", [True, False])
    async def test_always_accepted(self, client, mock_store: AsyncMock, recorded: bool) -> None:
        mock_store.log_interaction.return_value = recorded

        resp = await client.post(
            "/api/v1/interactions",
            json={"customer_id": "c-1", "session_id": "s-1", "interaction_type": "location_share"},
        )

        assert resp.status_code == 202
        assert resp.json() == {"recorded": recorded}
        record = mock_store.log_interaction.call_args.args[0]
        assert isinstance(record, InteractionRecord)
        assert record.interaction_type == "location_share"

    @pytest.mark.asyncio
    async def test_unknown_interaction_type_returns_422(self, client) -> None:
        resp = await client.post(
            "/api/v1/interactions",
            json={"customer_id": "c-1", "session_id": "s-1", "interaction_type": "teleport"},
        )
        assert resp.status_code == 422


class TestJourneyEventsEndpoint:
    """Tests for POST /api/v1/journey-events."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("recorded", [True, False])
    async def test_always_accepted(self, client, mock_store: AsyncMock, recorded: bool) -> None:
        mock_store.track_journey_stage.return_value = recorded

        resp = await client.post(
            "/api/v1/journey-events",
            json={
                "customer_id": "c-1",
                "from_stage": "consideration",
                "to_stage": "decision",
                "trigger": "package_selected",
                "event_data": {"package_code": "FIBRE_50"},
            },
        )

        assert resp.status_code == 202
        assert resp.json() == {"recorded": recorded}
        mock_store.track_journey_stage.assert_awaited_once_with(
            "c-1",
            "consideration",
            "decision",
            "package_selected",
            event_data={"package_code": "FIBRE_50"},
        )

    @pytest.mark.asyncio
    async def test_first_stage_has_no_from_stage(self, client, mock_store: AsyncMock) -> None:
        mock_store.track_journey_stage.return_value = True

        resp = await client.post(
            "/api/v1/journey-events",
            json={"customer_id": "c-1", "to_stage": "awareness", "trigger": "widget_opened"},
        )

        assert resp.status_code == 202
        assert mock_store.track_journey_stage.call_args.args[1] is None
        assert mock_store.track_journey_stage.call_args.kwargs["event_data"] == {}

    @pytest.mark.asyncio
    async def test_unknown_stage_returns_422(self, client, mock_store: AsyncMock) -> None:
        resp = await client.post(
            "/api/v1/journey-events",
            json={"customer_id": "c-1", "to_stage": "limbo", "trigger": "x"},
        )
        assert resp.status_code == 422
        mock_store.track_journey_stage.assert_not_awaited()


class TestPackageSelectionsEndpoint:
    """Tests for POST /api/v1/package-selections."""

    @pytest.mark.asyncio
    async def test_final_selection_forwarded(self, client, mock_store: AsyncMock) -> None:
        mock_store.track_package_selection.return_value = True

        resp = await client.post(
            "/api/v1/package-selections",
            json={
                "customer_id": "c-1",
                "package_id": "p-1",
                "package_code": "FIBRE_50",
                "is_final": True,
                "context": "confirmation",
            },
        )

        assert resp.status_code == 202
        assert resp.json() == {"recorded": True}
        mock_store.track_package_selection.assert_awaited_once_with(
            "c-1", "p-1", "FIBRE_50", is_final=True, context="confirmation"
        )

    @pytest.mark.asyncio
    async def test_backend_failure_still_accepted(self, client, mock_store: AsyncMock) -> None:
        mock_store.track_package_selection.return_value = False

        resp = await client.post(
            "/api/v1/package-selections",
            json={"customer_id": "c-1", "package_id": "p-1", "package_code": "FIBRE_50"},
        )

        assert resp.status_code == 202
        assert resp.json() == {"recorded": False}
        assert mock_store.track_package_selection.call_args.kwargs == {"is_final": False, "context": "initial"}

    @pytest.mark.asyncio
    async def test_missing_package_code_returns_422(self, client, mock_store: AsyncMock) -> None:
        resp = await client.post(
            "/api/v1/package-selections",
            json={"customer_id": "c-1", "package_id": "p-1"},
        )
        assert resp.status_code == 422
        mock_store.track_package_selection.assert_not_awaited()
