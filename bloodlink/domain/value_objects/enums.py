"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class Role(str, Enum):
    DONOR = "donor"
    NGO = "ngo"
    BLOOD_BANK = "blood_bank"
    ADMIN = "admin"


class CampaignStatus(str, Enum):
    ACTIVE = "active"
    ENDED = "ended"


class InviteType(str, Enum):
    NGO = "ngo"
    BLOOD_BANK = "blood_bank"

    @property
    def label(self) -> str:
        return "NGO" if self is InviteType.NGO else "Blood Bank"
