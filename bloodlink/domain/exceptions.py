"""Domain and geocoding errors.

Geocoding failures form their own hierarchy: only ``NoAddressSupplied`` and
``AllProvidersFailed`` ever leave the address resolver. ``ProviderUnavailable``
and ``ProviderQueryFailed`` are raised by provider adapters and absorbed by
the resolver's fallback loop.
"""


class DomainError(Exception):
    """Base class for errors the API turns into a client-facing response."""


class NotFound(DomainError):
    pass


class InvalidRequest(DomainError):
    pass


class GeocodingError(Exception):
    """Base class for everything raised while resolving an address."""


class NoAddressSupplied(GeocodingError):
    def __init__(self) -> None:
        super().__init__("Address is required for geocoding")


class ProviderUnavailable(GeocodingError):
    """A provider's precondition (e.g. its API key) is not met."""

    def __init__(self, provider: str, reason: str) -> None:
        self.provider = provider
        self.reason = reason
        super().__init__(f"{provider} unavailable: {reason}")


class ProviderQueryFailed(GeocodingError):
    """A provider was queried but produced no usable coordinate."""

    def __init__(self, provider: str, reason: str) -> None:
        self.provider = provider
        self.reason = reason
        super().__init__(f"{provider} query failed: {reason}")


class AllProvidersFailed(GeocodingError):
    def __init__(self, address: str, message: str | None = None) -> None:
        self.address = address
        super().__init__(
            message
            or "Unable to geocode the provided address. "
            "Please check the address or provide manual coordinates."
        )


class NoProvidersConfigured(AllProvidersFailed):
    """No provider in the chain was able to run at all."""

    def __init__(self, address: str) -> None:
        super().__init__(address, "No geocoding provider is configured")
