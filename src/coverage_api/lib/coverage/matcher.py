"""Match a coordinate or free-text location against coverage areas.

Both entry points are read-only over the candidates they are handed and
report "no coverage" as ``found=False`` rather than raising. Empty
candidate lists and lists with no qualifying area look the same here;
callers that care about the difference know what they passed in.
"""

from collections.abc import Iterable

from coverage_api.lib.coverage.models import CoverageArea, CoverageMatch
from coverage_api.lib.geo.distance import distance
from coverage_api.lib.geo.point import Coordinate


def find_by_coordinate(coord: Coordinate, candidates: Iterable[CoverageArea]) -> CoverageMatch:
    """Find the nearest active area whose radius covers *coord*.

    Areas without a center or radius are skipped. When two qualifying
    areas are the same distance away, the one encountered first wins.

    Args:
        coord: Query point.
        candidates: Areas to consider, in a stable order.

    Returns:
        CoverageMatch with the winning area and its distance, or not found.
    """
    best: CoverageArea | None = None
    best_distance = float("inf")

    for area in candidates:
        center, radius = area.center, area.radius_km
        if not area.is_active or center is None or not radius:
            continue
        d = distance(coord, center)
        # strict < keeps the first of equidistant areas
        if d <= radius and d < best_distance:
            best, best_distance = area, d

    if best is None:
        return CoverageMatch.not_found()
    return CoverageMatch(found=True, area=best, distance_km=best_distance)


def find_by_text(query: str, candidates: Iterable[CoverageArea]) -> CoverageMatch:
    """Find the first active area whose name contains *query*, ignoring case.

    Args:
        query: Free-text location typed by the visitor.
        candidates: Areas to consider, in a stable order.

    Returns:
        CoverageMatch with the first matching area, or not found.
    """
    needle = query.strip().casefold()
    if not needle:
        return CoverageMatch.not_found()

    for area in candidates:
        if area.is_active and needle in area.name.casefold():
            return CoverageMatch(found=True, area=area)
    return CoverageMatch.not_found()


def check_coverage(
    candidates: Iterable[CoverageArea],
    coord: Coordinate | None = None,
    text: str | None = None,
) -> CoverageMatch:
    """Try a coordinate match first, then a text match.

    Args:
        candidates: Areas to consider.
        coord: Optional GPS point shared by the visitor.
        text: Optional typed location.

    Returns:
        The first successful match, or not found.
    """
    areas = list(candidates)
    if coord is not None:
        match = find_by_coordinate(coord, areas)
        if match.found:
            return match
    if text:
        return find_by_text(text, areas)
    return CoverageMatch.not_found()
