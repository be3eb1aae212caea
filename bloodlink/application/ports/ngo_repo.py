"""Port interface for NGO persistence."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from bloodlink.domain.entities.ngo import Ngo


@dataclass
class NgoStats:
    active_campaigns: int
    total_campaigns: int
    volunteer_count: int
    campaigns_count: int
    blood_requests_accepted: int


class NgoRepository(ABC):
    @abstractmethod
    async def get_by_id(self, ngo_id: int) -> Ngo | None:
        ...

    @abstractmethod
    async def update(self, ngo: Ngo) -> Ngo:
        ...

    @abstractmethod
    async def update_password(self, ngo_id: int, password_hash: str) -> None:
        ...

    @abstractmethod
    async def increment_campaigns_count(self, ngo_id: int) -> None:
        ...

    @abstractmethod
    async def get_stats(self, ngo_id: int) -> NgoStats | None:
        ...
