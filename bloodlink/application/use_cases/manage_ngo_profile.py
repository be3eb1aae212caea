"""NgoProfileUseCase — profile read/update, password change and dashboard stats."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from bloodlink.application.ports.ngo_repo import NgoRepository, NgoStats
from bloodlink.application.ports.password_hasher import PasswordHasher
from bloodlink.application.use_cases.resolve_address import AddressResolver
from bloodlink.domain.entities.ngo import Ngo
from bloodlink.domain.exceptions import InvalidRequest, NotFound
from bloodlink.domain.value_objects.coordinate import Coordinate

logger = logging.getLogger(__name__)


@dataclass
class ProfileChanges:
    """Fields left as None keep their stored value."""

    name: str | None = None
    owner_name: str | None = None
    age: int | None = None
    gender: str | None = None
    address: str | None = None
    volunteer_count: int | None = None
    latitude: float | None = None
    longitude: float | None = None


def coordinate_pair(latitude: float | None, longitude: float | None) -> Coordinate | None:
    """Explicit coordinates from a request body; both or neither."""
    if (latitude is None) != (longitude is None):
        raise InvalidRequest("Latitude and longitude must be provided together")
    return Coordinate.from_optional(latitude, longitude)


class NgoProfileUseCase:
    def __init__(
        self,
        ngo_repo: NgoRepository,
        resolver: AddressResolver,
        hasher: PasswordHasher,
    ):
        self._ngos = ngo_repo
        self._resolver = resolver
        self._hasher = hasher

    async def get_profile(self, ngo_id: int) -> Ngo:
        ngo = await self._ngos.get_by_id(ngo_id)
        if ngo is None:
            raise NotFound("NGO not found")
        return ngo

    async def update_profile(self, ngo_id: int, changes: ProfileChanges) -> Ngo:
        """Apply a partial update.

        A new address without explicit coordinates is geocoded on a best-effort
        basis; if it cannot be located the stored coordinates are kept.
        """
        ngo = await self.get_profile(ngo_id)
        explicit = coordinate_pair(changes.latitude, changes.longitude)

        for field in ("name", "owner_name", "age", "gender", "volunteer_count"):
            value = getattr(changes, field)
            if value is not None:
                setattr(ngo, field, value)

        if changes.address is not None and changes.address.strip():
            address_changed = changes.address.strip() != (ngo.address or "").strip()
            ngo.address = changes.address.strip()
            if explicit is None and address_changed:
                point = await self._resolver.resolve(ngo.address)
                if point:
                    ngo.location = point
                else:
                    logger.info("NGO %d: new address not located, keeping previous coordinates", ngo_id)

        if explicit is not None:
            ngo.location = explicit

        return await self._ngos.update(ngo)

    async def change_password(self, ngo_id: int, current_password: str, new_password: str) -> None:
        ngo = await self.get_profile(ngo_id)
        if not ngo.password_hash or not self._hasher.verify(current_password, ngo.password_hash):
            raise InvalidRequest("Current password is incorrect")
        await self._ngos.update_password(ngo_id, self._hasher.hash(new_password))
        logger.info("NGO %d changed password", ngo_id)

    async def get_stats(self, ngo_id: int) -> NgoStats:
        stats = await self._ngos.get_stats(ngo_id)
        if stats is None:
            raise NotFound("NGO not found")
        return stats
