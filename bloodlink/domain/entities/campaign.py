"""Campaign entity — a blood donation drive organised by an NGO."""

from dataclasses import dataclass
from datetime import datetime

from bloodlink.domain.value_objects.coordinate import Coordinate
from bloodlink.domain.value_objects.enums import CampaignStatus


@dataclass
class Campaign:
    id: int | None
    ngo_id: int
    title: str
    address: str
    location: Coordinate
    start_date: datetime | None = None
    end_date: datetime | None = None
    status: CampaignStatus = CampaignStatus.ACTIVE
    health_checkup_available: bool = False
    blood_units_collected: int | None = None
    created_at: datetime | None = None
    ended_at: datetime | None = None

    def is_ended(self) -> bool:
        return self.status == CampaignStatus.ENDED

    def end(self, blood_units_collected: int, ended_at: datetime) -> None:
        self.status = CampaignStatus.ENDED
        self.blood_units_collected = blood_units_collected
        self.ended_at = ended_at
