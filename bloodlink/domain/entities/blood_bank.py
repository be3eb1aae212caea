"""BloodBank entity — a facility that can partner on campaigns."""

from dataclasses import dataclass

from bloodlink.domain.value_objects.coordinate import Coordinate


@dataclass
class BloodBank:
    id: int | None
    name: str
    email: str | None
    address: str | None = None
    location: Coordinate | None = None
