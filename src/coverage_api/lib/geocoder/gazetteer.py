"""Static gazetteer of reference points — the last-resort reverse geocoder.

Unlike the remote providers this strategy is total: a non-empty gazetteer
always has a nearest entry, so resolution cannot fail.
"""

from __future__ import annotations

import random
from dataclasses import dataclass

from coverage_api.lib.geo.distance import distance
from coverage_api.lib.geo.point import Coordinate
from coverage_api.lib.geocoder.base import Confidence, LocationResult

# Offset applied by sample_point(), roughly +/-5 km at these latitudes
_SAMPLE_JITTER_DEGREES = 0.05


@dataclass(frozen=True)
class ReferencePoint:
    """A named location with known coordinates."""

    key: str
    name: str
    coordinate: Coordinate


@dataclass(frozen=True)
class Gazetteer:
    """Versioned, immutable table of reference points."""

    version: str
    entries: tuple[ReferencePoint, ...]

    def __post_init__(self) -> None:
        if not self.entries:
            msg = "Gazetteer must contain at least one reference point"
            raise ValueError(msg)
        keys = [e.key for e in self.entries]
        if len(set(keys)) != len(keys):
            msg = f"Gazetteer {self.version} has duplicate keys"
            raise ValueError(msg)

    @property
    def provider_name(self) -> str:
        return "gazetteer"

    def get(self, key: str) -> ReferencePoint | None:
        """Look up a reference point by key."""
        return next((e for e in self.entries if e.key == key), None)

    def nearest(self, coord: Coordinate) -> tuple[ReferencePoint, float]:
        """Return the closest reference point and its distance in km.

        Ties go to the entry listed first.
        """
        best = self.entries[0]
        best_distance = distance(coord, best.coordinate)
        for entry in self.entries[1:]:
            d = distance(coord, entry.coordinate)
            if d < best_distance:
                best, best_distance = entry, d
        return best, best_distance

    def resolve(self, coord: Coordinate) -> LocationResult:
        """Describe *coord* relative to the nearest reference point."""
        point, _ = self.nearest(coord)
        return LocationResult(
            formatted_address=f"Near {point.name}",
            confidence=Confidence.LOW,
            provider=self.provider_name,
        )

    def with_entries(self, version: str, *extra: ReferencePoint) -> Gazetteer:
        """Return a new gazetteer extended with *extra* points."""
        return Gazetteer(version=version, entries=self.entries + extra)

    def sample_point(self, rng: random.Random | None = None) -> tuple[Coordinate, ReferencePoint]:
        """Pick a random reference point and jitter it slightly.

        Used to exercise the resolver chain with realistic inputs.

        Returns:
            (jittered coordinate, the reference point it was derived from).
        """
        rng = rng or random.Random()
        point = rng.choice(self.entries)
        lat = point.coordinate.latitude + (rng.random() - 0.5) * 2 * _SAMPLE_JITTER_DEGREES
        lng = point.coordinate.longitude + (rng.random() - 0.5) * 2 * _SAMPLE_JITTER_DEGREES
        lat = min(90.0, max(-90.0, lat))
        lng = min(180.0, max(-180.0, lng))
        return Coordinate(lat, lng), point


SOUTH_AFRICA_V1 = Gazetteer(
    version="za-2024.1",
    entries=(
        ReferencePoint("johannesburg", "Johannesburg, Gauteng, South Africa", Coordinate(-26.2041, 28.0473)),
        ReferencePoint("cape_town", "Cape Town, Western Cape, South Africa", Coordinate(-33.9249, 18.4241)),
        ReferencePoint("durban", "Durban, KwaZulu-Natal, South Africa", Coordinate(-29.8587, 31.0218)),
        ReferencePoint("pretoria", "Pretoria, Gauteng, South Africa", Coordinate(-25.7479, 28.2293)),
        ReferencePoint("bloemfontein", "Bloemfontein, Free State, South Africa", Coordinate(-29.0852, 26.1596)),
        ReferencePoint("polokwane", "Polokwane, Limpopo, South Africa", Coordinate(-23.9045, 29.4689)),
    ),
)

DEFAULT_GAZETTEER = SOUTH_AFRICA_V1
