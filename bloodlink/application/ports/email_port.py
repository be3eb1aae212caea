"""Port interface for transactional email delivery."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class EmailMessage:
    to: str
    subject: str
    html: str


@dataclass(frozen=True)
class EmailResult:
    success: bool
    error: str | None = None


class EmailPort(ABC):
    @abstractmethod
    async def send(self, message: EmailMessage) -> EmailResult:
        """Deliver a message. Never raises; failures come back as EmailResult."""
        ...
