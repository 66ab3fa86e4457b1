"""WGS84 coordinate value type and range validation."""

from __future__ import annotations

from dataclasses import dataclass


def is_valid_coordinates(lat: float, lng: float) -> bool:
    """Return True if *lat*/*lng* fall within WGS84 degree ranges."""
    return -90 <= lat <= 90 and -180 <= lng <= 180


@dataclass(frozen=True)
class Coordinate:
    """A (latitude, longitude) pair in signed decimal degrees."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not (-90 <= self.latitude <= 90):
            msg = f"latitude must be between -90 and 90, got {self.latitude}"
            raise ValueError(msg)
        if not (-180 <= self.longitude <= 180):
            msg = f"longitude must be between -180 and 180, got {self.longitude}"
            raise ValueError(msg)

    @classmethod
    def parse(cls, raw: str) -> Coordinate:
        """Parse the ``"lat,lng"`` form stored by the onboarding widget.

        Raises:
            ValueError: If the string is not two comma-separated numbers
                or the values are out of range.
        """
        parts = [p.strip() for p in raw.split(",")]
        if len(parts) != 2:
            msg = f"Expected 'lat,lng', got {raw!r}"
            raise ValueError(msg)
        try:
            lat, lng = float(parts[0]), float(parts[1])
        except ValueError as e:
            msg = f"Coordinates must be numeric, got {raw!r}"
            raise ValueError(msg) from e
        return cls(lat, lng)

    def __str__(self) -> str:
        return f"{self.latitude},{self.longitude}"
