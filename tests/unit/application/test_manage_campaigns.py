"""Tests for CampaignUseCase with in-memory fakes."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone

import pytest

from bloodlink.application.ports.blood_bank_repo import BloodBankRepository
from bloodlink.application.ports.campaign_repo import CampaignRepository
from bloodlink.application.ports.email_port import EmailMessage, EmailPort, EmailResult
from bloodlink.application.ports.geocoder_port import GeocoderPort
from bloodlink.application.ports.ngo_repo import NgoRepository
from bloodlink.application.use_cases.manage_campaigns import (
    ADDRESS_NOT_LOCATED,
    CampaignChanges,
    CampaignDraft,
    CampaignUseCase,
)
from bloodlink.application.use_cases.resolve_address import AddressResolver
from bloodlink.application.use_cases.send_notifications import NotificationService
from bloodlink.domain.entities.blood_bank import BloodBank
from bloodlink.domain.entities.campaign import Campaign
from bloodlink.domain.entities.ngo import Ngo
from bloodlink.domain.exceptions import InvalidRequest, NotFound, ProviderQueryFailed
from bloodlink.domain.value_objects.coordinate import Coordinate
from bloodlink.domain.value_objects.enums import CampaignStatus

# ─── In-memory fakes ────────────────────────────────────────────────


class FakeGeocoder(GeocoderPort):
    name = "fake"

    def __init__(self, result: Coordinate | None = None):
        self._result = result
        self.calls: list[str] = []

    async def geocode(self, address, timeout=None):
        self.calls.append(address)
        if self._result is None:
            raise ProviderQueryFailed(self.name, "no results")
        return self._result


class FakeEmail(EmailPort):
    def __init__(self, fail_for: set[str] | None = None):
        self._fail_for = fail_for or set()
        self.sent: list[EmailMessage] = []

    async def send(self, message):
        if message.to in self._fail_for:
            return EmailResult(success=False, error="rejected")
        self.sent.append(message)
        return EmailResult(success=True)


class FakeNgoRepo(NgoRepository):
    def __init__(self, ngos: list[Ngo]):
        self.ngos = {n.id: n for n in ngos}

    async def get_by_id(self, ngo_id):
        ngo = self.ngos.get(ngo_id)
        return replace(ngo) if ngo else None

    async def update(self, ngo):
        self.ngos[ngo.id] = replace(ngo)
        return ngo

    async def update_password(self, ngo_id, password_hash):
        self.ngos[ngo_id].password_hash = password_hash

    async def increment_campaigns_count(self, ngo_id):
        if ngo_id in self.ngos:
            self.ngos[ngo_id].campaigns_count += 1

    async def get_stats(self, ngo_id):
        return None


class FakeCampaignRepo(CampaignRepository):
    def __init__(self):
        self.campaigns: dict[int, Campaign] = {}
        self.update_calls = 0

    async def save(self, campaign):
        campaign.id = len(self.campaigns) + 1
        self.campaigns[campaign.id] = replace(campaign)
        return campaign

    async def get_for_ngo(self, campaign_id, ngo_id):
        c = self.campaigns.get(campaign_id)
        return replace(c) if c and c.ngo_id == ngo_id else None

    async def list_for_ngo(self, ngo_id):
        return sorted(
            (c for c in self.campaigns.values() if c.ngo_id == ngo_id),
            key=lambda c: c.id,
            reverse=True,
        )

    async def update(self, campaign):
        self.update_calls += 1
        self.campaigns[campaign.id] = replace(campaign)
        return campaign

    async def delete_for_ngo(self, campaign_id, ngo_id):
        c = self.campaigns.get(campaign_id)
        if c is None or c.ngo_id != ngo_id:
            return False
        del self.campaigns[campaign_id]
        return True


class FakeBankRepo(BloodBankRepository):
    def __init__(self, banks: list[BloodBank]):
        self._banks = {b.id: b for b in banks}

    async def get_many(self, bank_ids):
        return [self._banks[i] for i in bank_ids if i in self._banks]


PUNE = Coordinate(lat=18.5204, lng=73.8567)
FIXED_NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)

NGO_ID = 7


@pytest.fixture
def geocoder():
    return FakeGeocoder(PUNE)


@pytest.fixture
def email():
    return FakeEmail(fail_for={"down@bank.org"})


@pytest.fixture
def ngo_repo():
    return FakeNgoRepo([Ngo(id=NGO_ID, name="Red Drop", email="team@reddrop.org", owner_name="Asha")])


@pytest.fixture
def campaign_repo():
    return FakeCampaignRepo()


@pytest.fixture
def uc(geocoder, email, ngo_repo, campaign_repo):
    banks = FakeBankRepo([
        BloodBank(id=1, name="City Bank", email="city@bank.org"),
        BloodBank(id=2, name="No Mail Bank", email=None),
        BloodBank(id=3, name="Down Bank", email="down@bank.org"),
    ])
    return CampaignUseCase(
        campaign_repo=campaign_repo,
        ngo_repo=ngo_repo,
        bank_repo=banks,
        resolver=AddressResolver([geocoder]),
        notifications=NotificationService(email=email, frontend_url="https://bloodlink.test"),
        clock=lambda: FIXED_NOW,
    )


def _draft(**kwargs) -> CampaignDraft:
    defaults = dict(title="Winter Drive", address="FC Road, Pune")
    defaults.update(kwargs)
    return CampaignDraft(**defaults)


# ─── Create ──────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_create_geocodes_when_no_coordinates(uc, geocoder, ngo_repo):
    created = await uc.create(NGO_ID, _draft())

    assert created.campaign.location == PUNE
    assert created.campaign.status == CampaignStatus.ACTIVE
    assert geocoder.calls == ["FC Road, Pune"]
    assert ngo_repo.ngos[NGO_ID].campaigns_count == 1
    assert created.emails_sent == 0


@pytest.mark.asyncio
async def test_create_uses_explicit_coordinates_without_geocoding(uc, geocoder):
    created = await uc.create(NGO_ID, _draft(latitude=19.0, longitude=72.8))

    assert created.campaign.location == Coordinate(lat=19.0, lng=72.8)
    assert geocoder.calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize("address", [None, "", "   "])
async def test_create_requires_address(uc, geocoder, address):
    with pytest.raises(InvalidRequest, match="Address is required"):
        await uc.create(NGO_ID, _draft(address=address))
    assert geocoder.calls == []


@pytest.mark.asyncio
async def test_create_rejects_half_coordinates(uc):
    with pytest.raises(InvalidRequest, match="together"):
        await uc.create(NGO_ID, _draft(latitude=19.0))


@pytest.mark.asyncio
async def test_create_unlocatable_address_is_rejected(ngo_repo, campaign_repo, email):
    uc = CampaignUseCase(
        campaign_repo=campaign_repo,
        ngo_repo=ngo_repo,
        bank_repo=FakeBankRepo([]),
        resolver=AddressResolver([FakeGeocoder(None)]),
        notifications=NotificationService(email=email, frontend_url="https://bloodlink.test"),
    )
    with pytest.raises(InvalidRequest) as exc_info:
        await uc.create(NGO_ID, _draft())

    assert str(exc_info.value) == ADDRESS_NOT_LOCATED
    assert campaign_repo.campaigns == {}
    assert ngo_repo.ngos[NGO_ID].campaigns_count == 0


@pytest.mark.asyncio
async def test_create_invites_partner_banks_with_email(uc, email):
    created = await uc.create(NGO_ID, _draft(partner_bank_ids=[1, 2, 3, 99]))

    # bank 2 has no email, bank 3 rejects, bank 99 does not exist
    assert created.emails_sent == 1
    assert [m.to for m in email.sent] == ["city@bank.org"]
    assert email.sent[0].subject == "Collaboration Invitation: Winter Drive - Blood Donation Campaign"


# ─── List / update ───────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_list_returns_only_own_campaigns_newest_first(uc):
    first = (await uc.create(NGO_ID, _draft(title="First"))).campaign
    second = (await uc.create(NGO_ID, _draft(title="Second"))).campaign
    await uc.create(99, _draft(title="Someone else"))

    listed = await uc.list_for_ngo(NGO_ID)
    assert [c.id for c in listed] == [second.id, first.id]


@pytest.mark.asyncio
async def test_update_changes_only_supplied_fields(uc):
    campaign = (await uc.create(NGO_ID, _draft())).campaign

    updated = await uc.update(NGO_ID, campaign.id, CampaignChanges(title="Spring Drive"))

    assert updated.title == "Spring Drive"
    assert updated.address == "FC Road, Pune"
    assert updated.location == PUNE


@pytest.mark.asyncio
async def test_update_new_address_is_geocoded(uc, geocoder):
    campaign = (await uc.create(NGO_ID, _draft())).campaign
    geocoder.calls.clear()

    await uc.update(NGO_ID, campaign.id, CampaignChanges(address="Koregaon Park, Pune"))
    assert geocoder.calls == ["Koregaon Park, Pune"]


@pytest.mark.asyncio
async def test_update_unchanged_address_is_not_geocoded(uc, geocoder):
    campaign = (await uc.create(NGO_ID, _draft())).campaign
    geocoder.calls.clear()

    await uc.update(NGO_ID, campaign.id, CampaignChanges(address="FC Road, Pune"))
    assert geocoder.calls == []


@pytest.mark.asyncio
async def test_update_unlocatable_address_leaves_campaign_untouched(uc, geocoder, campaign_repo):
    campaign = (await uc.create(NGO_ID, _draft())).campaign
    geocoder._result = None

    with pytest.raises(InvalidRequest) as exc_info:
        await uc.update(NGO_ID, campaign.id, CampaignChanges(title="Moved", address="Atlantis"))

    assert str(exc_info.value) == ADDRESS_NOT_LOCATED
    assert campaign_repo.update_calls == 0
    stored = campaign_repo.campaigns[campaign.id]
    assert stored.title == "Winter Drive"
    assert stored.address == "FC Road, Pune"
    assert stored.location == PUNE


@pytest.mark.asyncio
async def test_update_other_ngos_campaign_not_found(uc):
    campaign = (await uc.create(NGO_ID, _draft())).campaign
    with pytest.raises(NotFound):
        await uc.update(99, campaign.id, CampaignChanges(title="Hijack"))


# ─── End / delete ────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_end_campaign(uc):
    campaign = (await uc.create(NGO_ID, _draft())).campaign

    ended = await uc.end(NGO_ID, campaign.id, 35)

    assert ended.status == CampaignStatus.ENDED
    assert ended.blood_units_collected == 35
    assert ended.ended_at == FIXED_NOW


@pytest.mark.asyncio
async def test_end_twice_rejected(uc):
    campaign = (await uc.create(NGO_ID, _draft())).campaign
    await uc.end(NGO_ID, campaign.id, 10)
    with pytest.raises(InvalidRequest, match="already ended"):
        await uc.end(NGO_ID, campaign.id, 5)


@pytest.mark.asyncio
@pytest.mark.parametrize("units,message", [(None, "is required"), (-1, "positive number")])
async def test_end_validates_units(uc, units, message):
    campaign = (await uc.create(NGO_ID, _draft())).campaign
    with pytest.raises(InvalidRequest, match=message):
        await uc.end(NGO_ID, campaign.id, units)


@pytest.mark.asyncio
async def test_end_zero_units_allowed(uc):
    campaign = (await uc.create(NGO_ID, _draft())).campaign
    ended = await uc.end(NGO_ID, campaign.id, 0)
    assert ended.blood_units_collected == 0


@pytest.mark.asyncio
async def test_delete(uc, campaign_repo):
    campaign = (await uc.create(NGO_ID, _draft())).campaign
    await uc.delete(NGO_ID, campaign.id)
    assert campaign_repo.campaigns == {}


@pytest.mark.asyncio
async def test_delete_missing_not_found(uc):
    with pytest.raises(NotFound):
        await uc.delete(NGO_ID, 404)
