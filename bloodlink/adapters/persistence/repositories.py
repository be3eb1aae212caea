"""SQLAlchemy repository implementations."""

from __future__ import annotations

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from bloodlink.adapters.persistence.models import BloodBankModel, CampaignModel, NgoModel
from bloodlink.application.ports.blood_bank_repo import BloodBankRepository
from bloodlink.application.ports.campaign_repo import CampaignRepository
from bloodlink.application.ports.ngo_repo import NgoRepository, NgoStats
from bloodlink.domain.entities.blood_bank import BloodBank
from bloodlink.domain.entities.campaign import Campaign
from bloodlink.domain.entities.ngo import Ngo
from bloodlink.domain.value_objects.coordinate import Coordinate
from bloodlink.domain.value_objects.enums import CampaignStatus

# ─── Mappers ─────────────────────────────────────────────────────────


def _ngo_to_domain(m: NgoModel) -> Ngo:
    return Ngo(
        id=m.id,
        name=m.name,
        email=m.email,
        owner_name=m.owner_name,
        age=m.age,
        gender=m.gender,
        address=m.address,
        volunteer_count=m.volunteer_count,
        location=Coordinate.from_optional(m.latitude, m.longitude),
        campaigns_count=m.campaigns_count,
        blood_requests_accepted=m.blood_requests_accepted,
        password_hash=m.password,
    )


def _bank_to_domain(m: BloodBankModel) -> BloodBank:
    return BloodBank(
        id=m.id,
        name=m.name,
        email=m.email,
        address=m.address,
        location=Coordinate.from_optional(m.latitude, m.longitude),
    )


def _campaign_to_domain(m: CampaignModel) -> Campaign:
    return Campaign(
        id=m.id,
        ngo_id=m.ngo_id,
        title=m.title,
        address=m.address,
        location=Coordinate(lat=m.latitude, lng=m.longitude),
        start_date=m.start_date,
        end_date=m.end_date,
        status=CampaignStatus(m.status),
        health_checkup_available=m.health_checkup_available,
        blood_units_collected=m.blood_units_collected,
        created_at=m.created_at,
        ended_at=m.ended_at,
    )


# ─── Repositories ────────────────────────────────────────────────────


class SqlNgoRepository(NgoRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def get_by_id(self, ngo_id: int) -> Ngo | None:
        m = await self._s.get(NgoModel, ngo_id)
        return _ngo_to_domain(m) if m else None

    async def update(self, ngo: Ngo) -> Ngo:
        m = await self._s.get(NgoModel, ngo.id)
        if m is None:
            raise ValueError(f"NGO {ngo.id} not found")
        m.name = ngo.name
        m.owner_name = ngo.owner_name
        m.age = ngo.age
        m.gender = ngo.gender
        m.address = ngo.address
        m.volunteer_count = ngo.volunteer_count
        m.latitude = ngo.location.lat if ngo.location else None
        m.longitude = ngo.location.lng if ngo.location else None
        await self._s.flush()
        return _ngo_to_domain(m)

    async def update_password(self, ngo_id: int, password_hash: str) -> None:
        await self._s.execute(
            update(NgoModel).where(NgoModel.id == ngo_id).values(password=password_hash)
        )

    async def increment_campaigns_count(self, ngo_id: int) -> None:
        await self._s.execute(
            update(NgoModel)
            .where(NgoModel.id == ngo_id)
            .values(campaigns_count=NgoModel.campaigns_count + 1)
        )

    async def get_stats(self, ngo_id: int) -> NgoStats | None:
        m = await self._s.get(NgoModel, ngo_id)
        if m is None:
            return None
        total = await self._s.scalar(
            select(func.count()).select_from(CampaignModel).where(CampaignModel.ngo_id == ngo_id)
        )
        active = await self._s.scalar(
            select(func.count())
            .select_from(CampaignModel)
            .where(
                CampaignModel.ngo_id == ngo_id,
                CampaignModel.status == CampaignStatus.ACTIVE.value,
            )
        )
        return NgoStats(
            active_campaigns=active or 0,
            total_campaigns=total or 0,
            volunteer_count=m.volunteer_count,
            campaigns_count=m.campaigns_count or 0,
            blood_requests_accepted=m.blood_requests_accepted or 0,
        )


class SqlBloodBankRepository(BloodBankRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def get_many(self, bank_ids: list[int]) -> list[BloodBank]:
        if not bank_ids:
            return []
        result = await self._s.execute(
            select(BloodBankModel).where(BloodBankModel.id.in_(bank_ids)).order_by(BloodBankModel.id)
        )
        return [_bank_to_domain(m) for m in result.scalars().all()]


class SqlCampaignRepository(CampaignRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def save(self, campaign: Campaign) -> Campaign:
        m = CampaignModel(
            ngo_id=campaign.ngo_id,
            title=campaign.title,
            address=campaign.address,
            latitude=campaign.location.lat,
            longitude=campaign.location.lng,
            start_date=campaign.start_date,
            end_date=campaign.end_date,
            status=campaign.status.value,
            health_checkup_available=campaign.health_checkup_available,
        )
        self._s.add(m)
        await self._s.flush()
        await self._s.refresh(m)
        return _campaign_to_domain(m)

    async def get_for_ngo(self, campaign_id: int, ngo_id: int) -> Campaign | None:
        result = await self._s.execute(
            select(CampaignModel).where(
                CampaignModel.id == campaign_id, CampaignModel.ngo_id == ngo_id
            )
        )
        m = result.scalar_one_or_none()
        return _campaign_to_domain(m) if m else None

    async def list_for_ngo(self, ngo_id: int) -> list[Campaign]:
        result = await self._s.execute(
            select(CampaignModel)
            .where(CampaignModel.ngo_id == ngo_id)
            .order_by(CampaignModel.created_at.desc(), CampaignModel.id.desc())
        )
        return [_campaign_to_domain(m) for m in result.scalars().all()]

    async def update(self, campaign: Campaign) -> Campaign:
        m = await self._s.get(CampaignModel, campaign.id)
        if m is None:
            raise ValueError(f"Campaign {campaign.id} not found")
        m.title = campaign.title
        m.address = campaign.address
        m.latitude = campaign.location.lat
        m.longitude = campaign.location.lng
        m.start_date = campaign.start_date
        m.end_date = campaign.end_date
        m.status = campaign.status.value
        m.health_checkup_available = campaign.health_checkup_available
        m.blood_units_collected = campaign.blood_units_collected
        m.ended_at = campaign.ended_at
        await self._s.flush()
        return _campaign_to_domain(m)

    async def delete_for_ngo(self, campaign_id: int, ngo_id: int) -> bool:
        result = await self._s.execute(
            delete(CampaignModel)
            .where(CampaignModel.id == campaign_id, CampaignModel.ngo_id == ngo_id)
            .returning(CampaignModel.id)
        )
        return result.scalar_one_or_none() is not None
