"""AddressResolver — free-text address → Coordinate via an ordered provider chain."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from bloodlink.application.ports.geocoder_port import GeocoderPort
from bloodlink.domain.exceptions import (
    AllProvidersFailed,
    NoAddressSupplied,
    NoProvidersConfigured,
    ProviderQueryFailed,
    ProviderUnavailable,
)
from bloodlink.domain.value_objects.coordinate import Coordinate

logger = logging.getLogger(__name__)


class AddressResolver:
    """Tries each provider in order until one returns a coordinate.

    Providers are queried one at a time, each at most once per call. Nothing
    is cached between calls, so one resolver can be shared by concurrent
    requests.
    """

    def __init__(self, providers: Sequence[GeocoderPort], default_timeout: float | None = None):
        self._providers = tuple(providers)
        self._default_timeout = default_timeout

    @property
    def providers(self) -> tuple[GeocoderPort, ...]:
        return self._providers

    async def resolve(self, address: str | None, timeout: float | None = None) -> Coordinate | None:
        """Resolve an address, returning None when it is empty or cannot be located."""
        if not address or not address.strip():
            return None
        try:
            return await self._run_chain(address.strip(), timeout)
        except AllProvidersFailed:
            return None

    async def resolve_required(self, address: str | None, timeout: float | None = None) -> Coordinate:
        """Resolve an address or raise.

        Raises:
            NoAddressSupplied: the address is empty or whitespace.
            AllProvidersFailed: no provider could locate the address.
        """
        if not address or not address.strip():
            raise NoAddressSupplied()
        return await self._run_chain(address.strip(), timeout)

    async def _run_chain(self, address: str, timeout: float | None) -> Coordinate:
        if timeout is None:
            timeout = self._default_timeout
        attempted = 0
        for provider in self._providers:
            try:
                point = await provider.geocode(address, timeout=timeout)
            except ProviderUnavailable as exc:
                logger.debug("Skipping %s: %s", provider.name, exc.reason)
                continue
            except ProviderQueryFailed as exc:
                attempted += 1
                logger.warning("%s geocoding failed for '%s': %s", provider.name, address, exc.reason)
                continue
            except Exception:
                attempted += 1
                logger.exception("%s geocoding raised unexpectedly for '%s'", provider.name, address)
                continue

            logger.info("Geocoded with %s: '%s'", provider.name, address)
            return point

        if attempted == 0:
            logger.error("No geocoding provider could run for '%s'", address)
            raise NoProvidersConfigured(address)

        logger.warning("All geocoding services failed for address: '%s'", address)
        raise AllProvidersFailed(address)
