"""Coverage library — radius/distance and name matching of service areas.

Public API:
    - CoverageArea: Service area dataclass
    - CoverageMatch: Lookup result dataclass
    - find_by_coordinate: Nearest covering area for a point
    - find_by_text: First area whose name contains a query
    - check_coverage: Coordinate match with text fallback
"""

from coverage_api.lib.coverage.matcher import check_coverage, find_by_coordinate, find_by_text
from coverage_api.lib.coverage.models import CoverageArea, CoverageMatch

__all__ = [
    "CoverageArea",
    "CoverageMatch",
    "check_coverage",
    "find_by_coordinate",
    "find_by_text",
]
