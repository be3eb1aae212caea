"""Google Maps geocoder adapter — implements GeocoderPort."""

from __future__ import annotations

import logging

import httpx

from bloodlink.application.ports.geocoder_port import GeocoderPort
from bloodlink.domain.exceptions import ProviderQueryFailed, ProviderUnavailable
from bloodlink.domain.value_objects.coordinate import Coordinate

logger = logging.getLogger(__name__)

GOOGLE_GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"


class GoogleMapsAdapter(GeocoderPort):
    """Google Maps implementation of GeocoderPort."""

    name = "google"

    def __init__(
        self,
        api_key: str | None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._api_key = api_key
        self._transport = transport

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    async def geocode(self, address: str, timeout: float | None = None) -> Coordinate:
        """Geocode address using Google Maps Geocoding API."""
        if not self._api_key:
            raise ProviderUnavailable(self.name, "API key not configured")

        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.get(
                    GOOGLE_GEOCODE_URL,
                    params={"address": address, "key": self._api_key},
                    timeout=httpx.USE_CLIENT_DEFAULT if timeout is None else timeout,
                )
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPError as exc:
            raise ProviderQueryFailed(self.name, f"transport error: {exc}") from exc
        except ValueError as exc:
            raise ProviderQueryFailed(self.name, "response is not valid JSON") from exc

        status = data.get("status") if isinstance(data, dict) else None
        results = data.get("results") if isinstance(data, dict) else None
        if status != "OK" or not results:
            raise ProviderQueryFailed(self.name, f"address not found: {status}")

        try:
            loc = results[0]["geometry"]["location"]
            point = Coordinate(lat=float(loc["lat"]), lng=float(loc["lng"]))
        except (KeyError, IndexError, TypeError, ValueError) as exc:
            raise ProviderQueryFailed(self.name, "malformed result") from exc

        logger.info("Google Maps resolved '%s' → (%f, %f)", address, point.lat, point.lng)
        return point
