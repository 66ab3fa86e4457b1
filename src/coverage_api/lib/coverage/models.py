"""Coverage area and match result types."""

from __future__ import annotations

from dataclasses import dataclass

from coverage_api.lib.geo.point import Coordinate


@dataclass(frozen=True)
class CoverageArea:
    """A region, center plus radius, in which a provider can serve the selected package.

    Center and radius are optional because backend rows may leave them
    null; such areas are only reachable through text matching.
    """

    id: str
    name: str
    center: Coordinate | None = None
    radius_km: float | None = None
    quality: str | None = None
    area_type: str | None = None
    is_active: bool = True


@dataclass(frozen=True)
class CoverageMatch:
    """Outcome of a coverage lookup.

    ``distance_km`` is only set for coordinate matches.
    """

    found: bool
    area: CoverageArea | None = None
    distance_km: float | None = None

    @classmethod
    def not_found(cls) -> CoverageMatch:
        return cls(found=False)
