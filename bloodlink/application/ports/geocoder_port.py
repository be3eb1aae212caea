"""Port interface for geocoding addresses to coordinates."""

from abc import ABC, abstractmethod

from bloodlink.domain.value_objects.coordinate import Coordinate


class GeocoderPort(ABC):
    name: str = "geocoder"

    @abstractmethod
    async def geocode(self, address: str, timeout: float | None = None) -> Coordinate:
        """Convert address string to lat/lng coordinates.

        Raises ProviderUnavailable when the provider cannot be used at all,
        and ProviderQueryFailed when it was queried without a usable result.
        """
        ...
