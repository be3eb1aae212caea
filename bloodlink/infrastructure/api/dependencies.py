"""FastAPI dependency injection — wires adapters into use cases."""

from __future__ import annotations

import logging

import httpx
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bloodlink.adapters.email.sendgrid_adapter import SendGridAdapter
from bloodlink.adapters.geocoder.google_maps_adapter import GoogleMapsAdapter
from bloodlink.adapters.geocoder.nominatim_adapter import NominatimAdapter
from bloodlink.adapters.persistence.database import get_session
from bloodlink.adapters.persistence.repositories import (
    SqlBloodBankRepository,
    SqlCampaignRepository,
    SqlNgoRepository,
)
from bloodlink.adapters.security.bcrypt_hasher import BcryptPasswordHasher
from bloodlink.application.ports.geocoder_port import GeocoderPort
from bloodlink.application.use_cases.manage_campaigns import CampaignUseCase
from bloodlink.application.use_cases.manage_ngo_profile import NgoProfileUseCase
from bloodlink.application.use_cases.resolve_address import AddressResolver
from bloodlink.application.use_cases.send_notifications import NotificationService
from bloodlink.config import settings

logger = logging.getLogger(__name__)


def build_address_resolver(
    google_api_key: str | None,
    user_agent: str | None = None,
    default_timeout: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AddressResolver:
    """Assemble the provider chain from explicit configuration.

    Google goes first when, and only when, an API key is given. OpenStreetMap
    is always the last resort.
    """
    providers: list[GeocoderPort] = []
    if google_api_key:
        providers.append(GoogleMapsAdapter(api_key=google_api_key, transport=transport))
    providers.append(NominatimAdapter(user_agent=user_agent, transport=transport))
    return AddressResolver(providers, default_timeout=default_timeout)


# Singleton adapters (stateless)
_resolver = build_address_resolver(
    settings.google_maps_api_key,
    user_agent=settings.geocoder_user_agent,
    default_timeout=settings.geocoder_timeout,
)
if settings.google_maps_api_key:
    logger.info("Using Google Maps for geocoding, OpenStreetMap as fallback")
else:
    logger.info("Google Maps API key not set, geocoding with OpenStreetMap only")

_email_adapter = SendGridAdapter(api_key=settings.sendgrid_api_key, sender=settings.email_from)
_hasher = BcryptPasswordHasher()


def get_address_resolver() -> AddressResolver:
    return _resolver


def get_notification_service() -> NotificationService:
    return NotificationService(email=_email_adapter, frontend_url=settings.frontend_url)


def get_ngo_profile_uc(
    session: AsyncSession = Depends(get_session),
    resolver: AddressResolver = Depends(get_address_resolver),
) -> NgoProfileUseCase:
    return NgoProfileUseCase(
        ngo_repo=SqlNgoRepository(session),
        resolver=resolver,
        hasher=_hasher,
    )


def get_campaign_uc(
    session: AsyncSession = Depends(get_session),
    resolver: AddressResolver = Depends(get_address_resolver),
    notifications: NotificationService = Depends(get_notification_service),
) -> CampaignUseCase:
    return CampaignUseCase(
        campaign_repo=SqlCampaignRepository(session),
        ngo_repo=SqlNgoRepository(session),
        bank_repo=SqlBloodBankRepository(session),
        resolver=resolver,
        notifications=notifications,
    )
