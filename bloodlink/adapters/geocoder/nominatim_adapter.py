"""Nominatim (OpenStreetMap) geocoder adapter — implements GeocoderPort."""

from __future__ import annotations

import logging

import httpx

from bloodlink.application.ports.geocoder_port import GeocoderPort
from bloodlink.domain.exceptions import ProviderQueryFailed
from bloodlink.domain.value_objects.coordinate import Coordinate

logger = logging.getLogger(__name__)

NOMINATIM_URL = "https://nominatim.openstreetmap.org/search"

DEFAULT_USER_AGENT = "BloodLink/1.0"


class NominatimAdapter(GeocoderPort):
    """Nominatim geocoding. Needs no credential, only a descriptive User-Agent."""

    name = "openstreetmap"

    def __init__(
        self,
        user_agent: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._user_agent = user_agent or DEFAULT_USER_AGENT
        self._transport = transport

    async def geocode(self, address: str, timeout: float | None = None) -> Coordinate:
        """Query the Nominatim search endpoint for the single best match."""
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.get(
                    NOMINATIM_URL,
                    params={"format": "json", "q": address, "limit": 1},
                    headers={"User-Agent": self._user_agent},
                    timeout=httpx.USE_CLIENT_DEFAULT if timeout is None else timeout,
                )
                response.raise_for_status()
                results = response.json()
        except httpx.HTTPError as exc:
            raise ProviderQueryFailed(self.name, f"transport error: {exc}") from exc
        except ValueError as exc:
            raise ProviderQueryFailed(self.name, "response is not valid JSON") from exc

        if not isinstance(results, list) or not results:
            raise ProviderQueryFailed(self.name, "address not found in OpenStreetMap")

        return self._to_coordinate(address, results[0])

    def _to_coordinate(self, address: str, entry: dict) -> Coordinate:
        # Nominatim names the longitude "lon" and serialises both as strings.
        try:
            point = Coordinate(lat=float(entry["lat"]), lng=float(entry["lon"]))
        except (KeyError, TypeError, ValueError) as exc:
            raise ProviderQueryFailed(self.name, "malformed result") from exc

        logger.info("Nominatim resolved '%s' → (%f, %f)", address, point.lat, point.lng)
        return point
