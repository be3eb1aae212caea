"""CampaignUseCase — create, list, update, end and delete an NGO's campaigns."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone

from bloodlink.application.ports.blood_bank_repo import BloodBankRepository
from bloodlink.application.ports.campaign_repo import CampaignRepository
from bloodlink.application.ports.ngo_repo import NgoRepository
from bloodlink.application.use_cases.manage_ngo_profile import coordinate_pair
from bloodlink.application.use_cases.resolve_address import AddressResolver
from bloodlink.application.use_cases.send_notifications import NotificationService
from bloodlink.domain.entities.campaign import Campaign
from bloodlink.domain.exceptions import GeocodingError, InvalidRequest, NotFound
from bloodlink.domain.value_objects.coordinate import Coordinate
from bloodlink.domain.value_objects.enums import CampaignStatus

logger = logging.getLogger(__name__)

ADDRESS_NOT_LOCATED = (
    "Address could not be located. Please check the address or provide coordinates manually."
)


@dataclass
class CampaignDraft:
    title: str
    address: str | None
    latitude: float | None = None
    longitude: float | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    health_checkup_available: bool = False
    partner_bank_ids: list[int] = field(default_factory=list)


@dataclass
class CampaignChanges:
    """Fields left as None keep their stored value."""

    title: str | None = None
    address: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    status: CampaignStatus | None = None


@dataclass
class CampaignCreated:
    campaign: Campaign
    emails_sent: int


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CampaignUseCase:
    def __init__(
        self,
        campaign_repo: CampaignRepository,
        ngo_repo: NgoRepository,
        bank_repo: BloodBankRepository,
        resolver: AddressResolver,
        notifications: NotificationService,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._campaigns = campaign_repo
        self._ngos = ngo_repo
        self._banks = bank_repo
        self._resolver = resolver
        self._notifications = notifications
        self._clock = clock

    async def create(self, ngo_id: int, draft: CampaignDraft) -> CampaignCreated:
        """Create an active campaign and invite the partner blood banks.

        Each step commits on its own: a failed invitation does not undo the
        campaign, it only lowers ``emails_sent``.
        """
        if not draft.address or not draft.address.strip():
            raise InvalidRequest("Address is required")
        address = draft.address.strip()

        location = coordinate_pair(draft.latitude, draft.longitude)
        if location is None:
            location = await self._locate(address)

        campaign = await self._campaigns.save(
            Campaign(
                id=None,
                ngo_id=ngo_id,
                title=draft.title,
                address=address,
                location=location,
                start_date=draft.start_date,
                end_date=draft.end_date,
                status=CampaignStatus.ACTIVE,
                health_checkup_available=draft.health_checkup_available,
            )
        )
        await self._ngos.increment_campaigns_count(ngo_id)
        logger.info("NGO %d created campaign %s at (%f, %f)", ngo_id, campaign.id, location.lat, location.lng)

        emails_sent = await self._invite_partners(ngo_id, campaign, draft.partner_bank_ids)
        return CampaignCreated(campaign=campaign, emails_sent=emails_sent)

    async def list_for_ngo(self, ngo_id: int) -> list[Campaign]:
        return await self._campaigns.list_for_ngo(ngo_id)

    async def update(self, ngo_id: int, campaign_id: int, changes: CampaignChanges) -> Campaign:
        campaign = await self._get_owned(ngo_id, campaign_id)
        explicit = coordinate_pair(changes.latitude, changes.longitude)

        if changes.title is not None:
            campaign.title = changes.title
        if changes.start_date is not None:
            campaign.start_date = changes.start_date
        if changes.end_date is not None:
            campaign.end_date = changes.end_date
        if changes.status is not None:
            campaign.status = changes.status

        if changes.address is not None and changes.address.strip():
            new_address = changes.address.strip()
            if explicit is None and new_address != campaign.address:
                campaign.location = await self._locate(new_address)
            campaign.address = new_address

        if explicit is not None:
            campaign.location = explicit

        return await self._campaigns.update(campaign)

    async def end(self, ngo_id: int, campaign_id: int, blood_units_collected: int | None) -> Campaign:
        if blood_units_collected is None:
            raise InvalidRequest("Blood units collected is required")
        if blood_units_collected < 0:
            raise InvalidRequest("Blood units collected must be a positive number")

        campaign = await self._get_owned(ngo_id, campaign_id)
        if campaign.is_ended():
            raise InvalidRequest("Campaign has already ended")

        campaign.end(blood_units_collected, self._clock())
        logger.info("Campaign %d ended with %d units", campaign_id, blood_units_collected)
        return await self._campaigns.update(campaign)

    async def delete(self, ngo_id: int, campaign_id: int) -> None:
        if not await self._campaigns.delete_for_ngo(campaign_id, ngo_id):
            raise NotFound("Campaign not found")

    async def _get_owned(self, ngo_id: int, campaign_id: int) -> Campaign:
        campaign = await self._campaigns.get_for_ngo(campaign_id, ngo_id)
        if campaign is None:
            raise NotFound("Campaign not found")
        return campaign

    async def _locate(self, address: str) -> Coordinate:
        try:
            return await self._resolver.resolve_required(address)
        except GeocodingError as exc:
            raise InvalidRequest(ADDRESS_NOT_LOCATED) from exc

    async def _invite_partners(self, ngo_id: int, campaign: Campaign, bank_ids: list[int]) -> int:
        if not bank_ids:
            return 0

        ngo = await self._ngos.get_by_id(ngo_id)
        if ngo is None:
            return 0

        sent = 0
        for bank in await self._banks.get_many(bank_ids):
            if not bank.email:
                continue
            result = await self._notifications.send_campaign_invitation(bank, campaign, ngo)
            if result.success:
                sent += 1
        logger.info("Campaign %s: %d/%d partner invitations sent", campaign.id, sent, len(bank_ids))
        return sent
