"""Ngo entity — an organisation that runs blood donation campaigns."""

from dataclasses import dataclass

from bloodlink.domain.value_objects.coordinate import Coordinate


@dataclass
class Ngo:
    id: int | None
    name: str
    email: str
    owner_name: str | None = None
    age: int | None = None
    gender: str | None = None
    address: str | None = None
    volunteer_count: int = 0
    location: Coordinate | None = None
    campaigns_count: int = 0
    blood_requests_accepted: int = 0
    password_hash: str | None = None
