"""Tests for NotificationService email rendering."""

from datetime import datetime, timezone

import pytest

from bloodlink.application.ports.email_port import EmailPort, EmailResult
from bloodlink.application.use_cases.send_notifications import NotificationService
from bloodlink.domain.entities.blood_bank import BloodBank
from bloodlink.domain.entities.campaign import Campaign
from bloodlink.domain.entities.ngo import Ngo
from bloodlink.domain.value_objects.coordinate import Coordinate
from bloodlink.domain.value_objects.enums import InviteType


class CapturingEmail(EmailPort):
    def __init__(self, result: EmailResult = EmailResult(success=True)):
        self._result = result
        self.sent = []

    async def send(self, message):
        self.sent.append(message)
        return self._result


@pytest.fixture
def email():
    return CapturingEmail()


@pytest.fixture
def service(email):
    return NotificationService(email=email, frontend_url="https://bloodlink.test/")


@pytest.mark.asyncio
async def test_verification_email(service, email):
    result = await service.send_verification_email("donor@example.org", "tok123")

    assert result.success
    msg = email.sent[0]
    assert msg.to == "donor@example.org"
    assert msg.subject == "Verify your BloodLink account"
    assert "https://bloodlink.test/verify-email/tok123" in msg.html
    assert "24 hours" in msg.html


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "invite_type,label,path",
    [(InviteType.NGO, "NGO", "/register/ngo/tok"), (InviteType.BLOOD_BANK, "Blood Bank", "/register/blood_bank/tok")],
)
async def test_signup_token_email(service, email, invite_type, label, path):
    await service.send_signup_token_email("new@example.org", "tok", invite_type)

    msg = email.sent[0]
    assert msg.subject == f"BloodLink - {label} Registration Invitation"
    assert f"https://bloodlink.test{path}" in msg.html


@pytest.mark.asyncio
async def test_blood_request_alert_escapes_user_text(service, email):
    await service.send_blood_request_alert("donor@example.org", "O-", 2, "<script>x</script> Ward 5")

    msg = email.sent[0]
    assert msg.subject == "Urgent: Blood Request for O-"
    assert "&lt;script&gt;" in msg.html
    assert "<script>" not in msg.html
    assert "35km" in msg.html


@pytest.mark.asyncio
async def test_campaign_invitation(service, email):
    campaign = Campaign(
        id=1, ngo_id=7, title="Winter Drive", address="FC Road, Pune",
        location=Coordinate(lat=18.52, lng=73.85),
        start_date=datetime(2026, 1, 5, 9, 30, tzinfo=timezone.utc),
        health_checkup_available=True,
    )
    ngo = Ngo(id=7, name="Red Drop", email="team@reddrop.org", owner_name="Asha")
    bank = BloodBank(id=1, name="City Bank", email="city@bank.org")

    result = await service.send_campaign_invitation(bank, campaign, ngo)

    assert result.success
    msg = email.sent[0]
    assert msg.to == "city@bank.org"
    assert "Dear <strong>City Bank</strong> Team" in msg.html
    assert "Monday, 05 January 2026, 09:30 AM" in msg.html
    assert "To be announced" in msg.html
    assert "Free health checkups" in msg.html
    assert "Asha" in msg.html


@pytest.mark.asyncio
async def test_campaign_invitation_skips_bank_without_email(service, email):
    campaign = Campaign(id=1, ngo_id=7, title="T", address="A", location=Coordinate(lat=0.0, lng=0.0))
    ngo = Ngo(id=7, name="Red Drop", email="team@reddrop.org")

    result = await service.send_campaign_invitation(BloodBank(id=2, name="B", email=None), campaign, ngo)

    assert not result.success
    assert email.sent == []


@pytest.mark.asyncio
async def test_failed_delivery_is_returned():
    email = CapturingEmail(EmailResult(success=False, error="rejected"))
    service = NotificationService(email=email, frontend_url="https://bloodlink.test")

    result = await service.send_verification_email("donor@example.org", "tok")

    assert result == EmailResult(success=False, error="rejected")
