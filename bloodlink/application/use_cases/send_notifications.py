"""NotificationService — renders BloodLink emails and hands them to the EmailPort."""

from __future__ import annotations

import logging
from datetime import datetime
from html import escape

from bloodlink.application.ports.email_port import EmailMessage, EmailPort, EmailResult
from bloodlink.domain.entities.blood_bank import BloodBank
from bloodlink.domain.entities.campaign import Campaign
from bloodlink.domain.entities.ngo import Ngo
from bloodlink.domain.value_objects.enums import InviteType

logger = logging.getLogger(__name__)

BRAND_RED = "#dc2626"
ALERT_RADIUS_KM = 35

_BUTTON_STYLE = (
    f"display: inline-block; background-color: {BRAND_RED}; color: white; "
    "padding: 12px 24px; text-decoration: none; border-radius: 5px; margin: 20px 0;"
)


def _wrap(body: str) -> str:
    return (
        '<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">'
        f"{body}</div>"
    )


def _format_when(value: datetime | None) -> str:
    if value is None:
        return "To be announced"
    return value.strftime("%A, %d %B %Y, %I:%M %p")


class NotificationService:
    """Builds the HTML for each kind of email and sends it.

    Campaign invitations are sent by CampaignUseCase. Verification, signup
    invitation and blood request alerts belong to the registration and
    blood request flows, which live outside this service and call these
    methods directly.
    """

    def __init__(self, email: EmailPort, frontend_url: str):
        self._email = email
        self._frontend_url = frontend_url.rstrip("/")

    async def send_verification_email(self, to: str, token: str) -> EmailResult:
        url = escape(f"{self._frontend_url}/verify-email/{token}")
        html = _wrap(
            f'<h2 style="color: {BRAND_RED};">Welcome to BloodLink!</h2>'
            "<p>Thank you for registering. Please verify your email address by clicking the button below:</p>"
            f'<a href="{url}" style="{_BUTTON_STYLE}">Verify Email</a>'
            "<p>Or copy and paste this link in your browser:</p>"
            f'<p style="color: #666;">{url}</p>'
            "<p>This link will expire in 24 hours.</p>"
            '<hr style="margin: 30px 0;">'
            '<p style="color: #999; font-size: 12px;">'
            "If you didn't create an account, please ignore this email.</p>"
        )
        return await self._send(to, "Verify your BloodLink account", html)

    async def send_signup_token_email(self, to: str, token: str, invite_type: InviteType) -> EmailResult:
        url = escape(f"{self._frontend_url}/register/{invite_type.value}/{token}")
        label = invite_type.label
        html = _wrap(
            f'<h2 style="color: {BRAND_RED};">BloodLink {label} Registration</h2>'
            f"<p>You have been invited to register your {label} on BloodLink.</p>"
            "<p>Click the button below to complete your registration:</p>"
            f'<a href="{url}" style="{_BUTTON_STYLE}">Register Now</a>'
            "<p>Or copy and paste this link in your browser:</p>"
            f'<p style="color: #666;">{url}</p>'
            "<p><strong>Important:</strong> This link can only be used once and will expire in 7 days.</p>"
            '<hr style="margin: 30px 0;">'
            '<p style="color: #999; font-size: 12px;">'
            "This invitation was sent by a BloodLink administrator.</p>"
        )
        return await self._send(to, f"BloodLink - {label} Registration Invitation", html)

    async def send_blood_request_alert(
        self, to: str, blood_group: str, units_needed: int, address: str
    ) -> EmailResult:
        html = _wrap(
            f'<h2 style="color: {BRAND_RED};">Urgent Blood Request</h2>'
            "<p>Someone nearby needs blood urgently!</p>"
            '<div style="background-color: #fef2f2; padding: 20px; border-radius: 8px; margin: 20px 0;">'
            f"<p><strong>Blood Group:</strong> {escape(blood_group)}</p>"
            f"<p><strong>Units Needed:</strong> {units_needed}</p>"
            f"<p><strong>Location:</strong> {escape(address)}</p>"
            "</div>"
            f'<a href="{escape(self._frontend_url)}/dashboard" style="{_BUTTON_STYLE}">View Request</a>'
            '<hr style="margin: 30px 0;">'
            '<p style="color: #999; font-size: 12px;">'
            f"You received this alert because you are within {ALERT_RADIUS_KM}km of the request location.</p>"
        )
        return await self._send(to, f"Urgent: Blood Request for {blood_group}", html)

    async def send_campaign_invitation(self, bank: BloodBank, campaign: Campaign, ngo: Ngo) -> EmailResult:
        if not bank.email:
            return EmailResult(success=False, error="Blood bank has no email address")

        checkup = (
            '<p style="margin: 5px 0;"><strong>Health checkups:</strong> '
            "Free health checkups will be offered to donors</p>"
            if campaign.health_checkup_available
            else ""
        )
        contact = f'<p style="color: #6b7280; margin: 5px 0;">Email: {escape(ngo.email)}</p>' if ngo.email else ""
        html = _wrap(
            f'<h1 style="color: {BRAND_RED};">Blood Donation Campaign Invitation</h1>'
            f"<p>Dear <strong>{escape(bank.name)}</strong> Team,</p>"
            "<p>We are pleased to invite you to collaborate with us on an upcoming blood donation campaign. "
            "Your expertise and support would be invaluable in making this event a success.</p>"
            f'<div style="background: #fef2f2; border-left: 4px solid {BRAND_RED}; padding: 15px; margin: 20px 0;">'
            f'<h3 style="margin: 0 0 10px 0;">{escape(campaign.title)}</h3>'
            f'<p style="margin: 5px 0;"><strong>Location:</strong> {escape(campaign.address)}</p>'
            f'<p style="margin: 5px 0;"><strong>Start:</strong> {_format_when(campaign.start_date)}</p>'
            f'<p style="margin: 5px 0;"><strong>End:</strong> {_format_when(campaign.end_date)}</p>'
            f"{checkup}"
            "</div>"
            "<p>If you are interested in partnering with us, please reach out at your earliest convenience.</p>"
            '<p style="color: #6b7280; margin: 5px 0;">With regards,</p>'
            f'<p style="font-weight: bold; margin: 5px 0;">{escape(ngo.owner_name or ngo.name)}</p>'
            f'<p style="color: #6b7280; margin: 5px 0;">{escape(ngo.name)}</p>'
            f"{contact}"
        )
        subject = f"Collaboration Invitation: {campaign.title} - Blood Donation Campaign"
        return await self._send(bank.email, subject, html)

    async def _send(self, to: str, subject: str, html: str) -> EmailResult:
        result = await self._email.send(EmailMessage(to=to, subject=subject, html=html))
        if not result.success:
            logger.warning("Email '%s' to %s not delivered: %s", subject, to, result.error)
        return result
