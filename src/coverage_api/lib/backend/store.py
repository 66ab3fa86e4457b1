"""PostgREST client for the hosted onboarding backend.

The backend exposes each table under ``/rest/v1/{table}`` and filters with
PostgREST operators (``is_active=eq.true``). Reads raise BackendStoreError
on failure so callers can prompt the visitor to retry; analytics writes
(interactions, journey events, package selections) are best-effort and
only log.
"""

from __future__ import annotations

import json
from typing import Any

import httpx
from loguru import logger

from coverage_api.lib.backend.records import (
    BackendStoreError,
    CustomerRecord,
    InteractionRecord,
    Package,
    ServiceProvider,
)
from coverage_api.lib.coverage.models import CoverageArea
from coverage_api.lib.geo.point import Coordinate, is_valid_coordinates

DEFAULT_TIMEOUT = 10.0


class BackendStore:
    """Reads coverage/package data from, and writes onboarding records to, the backend.

    Args:
        base_url: Backend root URL; the REST API is expected at ``/rest/v1``.
        api_key: Key sent both as ``apikey`` and as a bearer token.
        timeout: Per-request timeout in seconds.
        system_input_process: Tag stamped on every written record.
        acquisition_source: Acquisition source for newly created customers.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = DEFAULT_TIMEOUT,
        system_input_process: str = "coverage-api",
        acquisition_source: str = "whatsapp_onboarding",
    ) -> None:
        self._system_input_process = system_input_process
        self._acquisition_source = acquisition_source
        self._client = httpx.AsyncClient(
            base_url=f"{base_url.rstrip('/')}/rest/v1",
            headers={
                "apikey": api_key,
                "Authorization": f"Bearer {api_key}",
                "Accept": "application/json",
            },
            timeout=timeout,
        )

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> BackendStore:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def fetch_active_coverage_areas(self) -> list[CoverageArea]:
        """Return every active coverage area, ordered by id for stable matching."""
        rows = await self._get(
            "coverage_areas",
            {"select": "*", "is_active": "eq.true", "order": "id.asc"},
        )
        return [area for row in rows if (area := self._map_area(row)) is not None]

    async def fetch_service_providers(self, coverage_area_id: str) -> list[ServiceProvider]:
        """Return the active service providers linked to a coverage area."""
        rows = await self._get(
            "coverage_area_service_providers",
            {
                "select": "service_providers(id,name,description)",
                "coverage_area_id": f"eq.{coverage_area_id}",
                "is_active": "eq.true",
            },
        )
        providers: list[ServiceProvider] = []
        for row in rows:
            nested = row.get("service_providers")
            if not isinstance(nested, dict) or not nested.get("id"):
                continue
            providers.append(
                ServiceProvider(
                    id=str(nested["id"]),
                    name=_text(nested.get("name")),
                    description=_text(nested.get("description")),
                )
            )
        return providers

    async def fetch_active_packages(self) -> list[Package]:
        """Return active packages in display order."""
        rows = await self._get(
            "packages",
            {"select": "*", "is_active": "eq.true", "order": "sort_order.asc"},
        )
        return [pkg for row in rows if (pkg := self._map_package(row)) is not None]

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    async def create_customer(self, customer: CustomerRecord) -> dict[str, Any]:
        """Insert a customer and return the stored row.

        Raises:
            BackendStoreError: If the insert fails.
        """
        payload = customer.to_row(self._system_input_process, self._acquisition_source)
        rows = await self._post("customers", payload, return_representation=True)
        if not rows:
            raise BackendStoreError("customers", "Insert returned no row")
        logger.info(f"Customer created: {rows[0].get('id')}")
        return rows[0]

    async def log_interaction(self, interaction: InteractionRecord) -> bool:
        """Record a conversation step. Failures are logged, not raised.

        Returns:
            True if the backend accepted the record.
        """
        return await self._post_best_effort(
            "customer_interactions",
            interaction.to_row(self._system_input_process),
        )

    async def track_journey_stage(
        self,
        customer_id: str,
        from_stage: str | None,
        to_stage: str,
        trigger: str,
        event_data: dict[str, Any] | None = None,
    ) -> bool:
        """Record a journey stage transition. Failures are logged, not raised."""
        return await self._post_best_effort(
            "customer_journey_events",
            {
                "customer_id": customer_id,
                "from_stage": from_stage,
                "to_stage": to_stage,
                "event_trigger": trigger,
                "event_data": event_data or {},
                "system_input_process": self._system_input_process,
            },
        )

    async def track_package_selection(
        self,
        customer_id: str,
        package_id: str,
        package_code: str,
        is_final: bool = False,
        context: str = "initial",
    ) -> bool:
        """Record a package selection. Failures are logged, not raised."""
        return await self._post_best_effort(
            "customer_package_selections",
            {
                "customer_id": customer_id,
                "package_id": package_id,
                "package_code": package_code,
                "is_final_selection": is_final,
                "selection_context": context,
                "system_input_process": self._system_input_process,
            },
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _get(self, table: str, params: dict[str, str]) -> list[dict[str, Any]]:
        """GET a table and return its rows."""
        try:
            response = await self._client.get(f"/{table}", params=params)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as exc:
            logger.error(f"Backend error: {exc.response.status_code} reading {table}")
            raise BackendStoreError(
                table,
                f"HTTP {exc.response.status_code}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.RequestError as exc:
            logger.error(f"Backend request failed reading {table}: {exc}")
            raise BackendStoreError(table, f"Request failed: {exc}") from exc
        except json.JSONDecodeError as exc:
            logger.error(f"Backend returned non-JSON response for {table}")
            raise BackendStoreError(table, "Invalid JSON response") from exc

        if not isinstance(data, list):
            raise BackendStoreError(table, "Expected a list of rows")
        return [row for row in data if isinstance(row, dict)]

    async def _post(
        self,
        table: str,
        payload: dict[str, Any],
        return_representation: bool = False,
    ) -> list[dict[str, Any]]:
        """POST a row; return inserted rows when *return_representation* is set."""
        headers = {"Prefer": "return=representation" if return_representation else "return=minimal"}
        try:
            response = await self._client.post(f"/{table}", json=payload, headers=headers)
            response.raise_for_status()
            if not return_representation:
                return []
            data = response.json()
        except httpx.HTTPStatusError as exc:
            logger.error(f"Backend error: {exc.response.status_code} writing {table}")
            raise BackendStoreError(
                table,
                f"HTTP {exc.response.status_code}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.RequestError as exc:
            logger.error(f"Backend request failed writing {table}: {exc}")
            raise BackendStoreError(table, f"Request failed: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise BackendStoreError(table, "Invalid JSON response") from exc

        if isinstance(data, dict):
            return [data]
        if not isinstance(data, list):
            raise BackendStoreError(table, "Expected a list of rows")
        return [row for row in data if isinstance(row, dict)]

    async def _post_best_effort(self, table: str, payload: dict[str, Any]) -> bool:
        try:
            await self._post(table, payload)
        except BackendStoreError as exc:
            logger.warning(f"Dropping {table} record: {exc}")
            return False
        return True

    @staticmethod
    def _map_area(row: dict[str, Any]) -> CoverageArea | None:
        """Map a coverage_areas row to a CoverageArea.

        Rows without an id or name are skipped. A center that is missing or
        out of range leaves the area without geometry rather than dropping it.
        """
        area_id = row.get("id")
        name = row.get("area_name")
        if area_id is None or not name:
            logger.warning(f"Skipping coverage area row with missing id={area_id!r} or area_name={name!r}")
            return None

        center: Coordinate | None = None
        lat, lng = _as_float(row.get("center_lat")), _as_float(row.get("center_lng"))
        if lat is not None and lng is not None:
            if is_valid_coordinates(lat, lng):
                center = Coordinate(lat, lng)
            else:
                logger.warning(f"Coverage area {area_id} has out-of-range center ({lat}, {lng})")

        return CoverageArea(
            id=str(area_id),
            name=str(name),
            center=center,
            radius_km=_as_float(row.get("radius_km")),
            quality=_text(row.get("coverage_quality")) or None,
            area_type=_text(row.get("area_type")) or None,
            is_active=bool(row.get("is_active", True)),
        )

    @staticmethod
    def _map_package(row: dict[str, Any]) -> Package | None:
        """Map a packages row to a Package.

        Rows without id or code, with a non-integer ``sort_order``, or with
        ``features`` that is not a list of strings are skipped.
        """
        package_code = _text(row.get("package_code"))
        if row.get("id") is None or not package_code:
            logger.warning(f"Skipping package row with missing id or package_code: {row.get('id')!r}")
            return None

        sort_order = _as_int(row.get("sort_order"))
        if sort_order is None:
            logger.warning(f"Skipping package {row['id']}: sort_order {row.get('sort_order')!r} is not an integer")
            return None

        features = row.get("features") or []
        if not isinstance(features, list) or not all(isinstance(f, str) for f in features):
            logger.warning(f"Skipping package {row['id']}: features must be a list of strings")
            return None

        return Package(
            id=str(row["id"]),
            package_code=package_code,
            name=_text(row.get("name")) or package_code,
            speed=_text(row.get("speed")),
            price=_as_float(row.get("price")) or 0.0,
            price_display=_text(row.get("price_display")),
            description=_text(row.get("description")),
            features=tuple(features),
            is_popular=bool(row.get("is_popular", False)),
            is_active=bool(row.get("is_active", True)),
            sort_order=sort_order,
        )


def _text(value: object) -> str:
    return value.strip() if isinstance(value, str) else ""


def _as_float(value: object) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None


def _as_int(value: object) -> int | None:
    """Coerce a sort key; missing means 0, anything non-integral is None."""
    if value is None:
        return 0
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None
