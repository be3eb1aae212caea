"""Coordinate value object — immutable (lat, lng) pair in decimal degrees."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinate:
    lat: float
    lng: float

    def __post_init__(self):
        if not (math.isfinite(self.lat) and math.isfinite(self.lng)):
            raise ValueError(f"Coordinate must be finite, got ({self.lat}, {self.lng})")
        if not -90.0 <= self.lat <= 90.0:
            raise ValueError(f"Latitude out of range: {self.lat}")
        if not -180.0 <= self.lng <= 180.0:
            raise ValueError(f"Longitude out of range: {self.lng}")

    @classmethod
    def from_optional(cls, lat: float | None, lng: float | None) -> "Coordinate | None":
        """Build a Coordinate only when both parts are present."""
        if lat is None or lng is None:
            return None
        return cls(lat=float(lat), lng=float(lng))
