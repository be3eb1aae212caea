"""Request/response bodies for the NGO and geocoding endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from bloodlink.domain.entities.campaign import Campaign
from bloodlink.domain.entities.ngo import Ngo
from bloodlink.domain.value_objects.enums import CampaignStatus


class ProfileUpdateRequest(BaseModel):
    name: str | None = None
    owner_name: str | None = None
    age: int | None = Field(default=None, ge=0)
    gender: str | None = None
    address: str | None = None
    volunteer_count: int | None = Field(default=None, ge=0)
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)


class ChangePasswordRequest(BaseModel):
    currentPassword: str
    newPassword: str = Field(min_length=6)


class CampaignCreateRequest(BaseModel):
    title: str = Field(min_length=1)
    address: str | None = None
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    start_date: datetime | None = None
    end_date: datetime | None = None
    health_checkup_available: bool = False
    partner_bank_ids: list[int] = Field(default_factory=list)


class CampaignUpdateRequest(BaseModel):
    title: str | None = None
    address: str | None = None
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    start_date: datetime | None = None
    end_date: datetime | None = None
    status: CampaignStatus | None = None


class CampaignEndRequest(BaseModel):
    blood_units_collected: int | None = None


def serialize_ngo(ngo: Ngo) -> dict:
    return {
        "id": ngo.id,
        "name": ngo.name,
        "owner_name": ngo.owner_name,
        "email": ngo.email,
        "age": ngo.age,
        "gender": ngo.gender,
        "address": ngo.address,
        "volunteer_count": ngo.volunteer_count,
        "lat": ngo.location.lat if ngo.location else None,
        "lng": ngo.location.lng if ngo.location else None,
    }


def serialize_campaign(c: Campaign) -> dict:
    return {
        "id": c.id,
        "ngo_id": c.ngo_id,
        "title": c.title,
        "address": c.address,
        "latitude": c.location.lat,
        "longitude": c.location.lng,
        "start_date": c.start_date.isoformat() if c.start_date else None,
        "end_date": c.end_date.isoformat() if c.end_date else None,
        "status": c.status.value,
        "health_checkup_available": c.health_checkup_available,
        "blood_units_collected": c.blood_units_collected,
        "created_at": c.created_at.isoformat() if c.created_at else None,
        "ended_at": c.ended_at.isoformat() if c.ended_at else None,
    }
