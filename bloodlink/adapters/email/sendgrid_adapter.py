"""SendGrid email adapter — implements EmailPort over the v3 Web API."""

from __future__ import annotations

import logging

import httpx

from bloodlink.application.ports.email_port import EmailMessage, EmailPort, EmailResult

logger = logging.getLogger(__name__)

SENDGRID_SEND_URL = "https://api.sendgrid.com/v3/mail/send"


class SendGridAdapter(EmailPort):
    """Sends HTML mail through SendGrid. Delivery errors are reported, not raised."""

    def __init__(
        self,
        api_key: str | None,
        sender: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._api_key = api_key
        self._sender = sender
        self._timeout = timeout
        self._transport = transport
        if not api_key:
            logger.warning("SendGrid API key not found; emails will not be delivered")

    async def send(self, message: EmailMessage) -> EmailResult:
        if not self._api_key:
            logger.error("Cannot send '%s' to %s: SendGrid is not configured", message.subject, message.to)
            return EmailResult(success=False, error="SendGrid API key not configured")

        payload = {
            "personalizations": [{"to": [{"email": message.to}]}],
            "from": {"email": self._sender},
            "subject": message.subject,
            "content": [{"type": "text/html", "value": message.html}],
        }
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.post(
                    SENDGRID_SEND_URL,
                    json=payload,
                    headers={"Authorization": f"Bearer {self._api_key}"},
                    timeout=self._timeout,
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.error(
                "Failed to send '%s' to %s: %s %s",
                message.subject, message.to, exc.response.status_code, exc.response.text,
            )
            return EmailResult(success=False, error=f"SendGrid returned {exc.response.status_code}")
        except httpx.HTTPError as exc:
            logger.exception("Failed to send '%s' to %s", message.subject, message.to)
            return EmailResult(success=False, error=str(exc))

        logger.info("Email '%s' sent to %s", message.subject, message.to)
        return EmailResult(success=True)
