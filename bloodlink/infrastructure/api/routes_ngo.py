"""NGO endpoints — profile, password, dashboard stats and campaigns."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from bloodlink.application.use_cases.manage_campaigns import (
    CampaignChanges,
    CampaignDraft,
    CampaignUseCase,
)
from bloodlink.application.use_cases.manage_ngo_profile import NgoProfileUseCase, ProfileChanges
from bloodlink.domain.exceptions import DomainError, NotFound
from bloodlink.domain.value_objects.enums import Role
from bloodlink.infrastructure.api.auth import Identity, require_role
from bloodlink.infrastructure.api.dependencies import get_campaign_uc, get_ngo_profile_uc
from bloodlink.infrastructure.api.schemas import (
    CampaignCreateRequest,
    CampaignEndRequest,
    CampaignUpdateRequest,
    ChangePasswordRequest,
    ProfileUpdateRequest,
    serialize_campaign,
    serialize_ngo,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ngo", tags=["ngo"])

ngo_only = require_role(Role.NGO)


def _http_error(exc: DomainError) -> HTTPException:
    status = 404 if isinstance(exc, NotFound) else 400
    return HTTPException(status_code=status, detail=str(exc))


# ─── Profile ─────────────────────────────────────────────────────────


@router.get("/profile")
async def get_profile(
    identity: Identity = Depends(ngo_only),
    uc: NgoProfileUseCase = Depends(get_ngo_profile_uc),
):
    try:
        ngo = await uc.get_profile(identity.user_id)
    except DomainError as e:
        raise _http_error(e)
    except Exception:
        logger.exception("Get NGO profile error")
        raise HTTPException(status_code=500, detail="Failed to get profile")
    return serialize_ngo(ngo)


@router.put("/profile")
async def update_profile(
    body: ProfileUpdateRequest,
    identity: Identity = Depends(ngo_only),
    uc: NgoProfileUseCase = Depends(get_ngo_profile_uc),
):
    try:
        ngo = await uc.update_profile(identity.user_id, ProfileChanges(**body.model_dump()))
    except DomainError as e:
        raise _http_error(e)
    except Exception:
        logger.exception("Update NGO profile error")
        raise HTTPException(status_code=500, detail="Failed to update profile")
    return {"message": "Profile updated", "ngo": serialize_ngo(ngo)}


@router.put("/change-password")
async def change_password(
    body: ChangePasswordRequest,
    identity: Identity = Depends(ngo_only),
    uc: NgoProfileUseCase = Depends(get_ngo_profile_uc),
):
    try:
        await uc.change_password(identity.user_id, body.currentPassword, body.newPassword)
    except DomainError as e:
        raise _http_error(e)
    except Exception:
        logger.exception("Change password error")
        raise HTTPException(status_code=500, detail="Failed to change password")
    return {"message": "Password changed successfully"}


@router.get("/stats")
async def get_stats(
    identity: Identity = Depends(ngo_only),
    uc: NgoProfileUseCase = Depends(get_ngo_profile_uc),
):
    try:
        stats = await uc.get_stats(identity.user_id)
    except DomainError as e:
        raise _http_error(e)
    except Exception:
        logger.exception("Get NGO stats error")
        raise HTTPException(status_code=500, detail="Failed to get stats")
    return {
        "activeCampaigns": stats.active_campaigns,
        "totalCampaigns": stats.total_campaigns,
        "volunteerCount": stats.volunteer_count,
        "campaignsCount": stats.campaigns_count,
        "bloodRequestsAccepted": stats.blood_requests_accepted,
    }


# ─── Campaigns ───────────────────────────────────────────────────────


@router.post("/campaigns", status_code=201)
async def create_campaign(
    body: CampaignCreateRequest,
    identity: Identity = Depends(ngo_only),
    uc: CampaignUseCase = Depends(get_campaign_uc),
):
    try:
        created = await uc.create(identity.user_id, CampaignDraft(**body.model_dump()))
    except DomainError as e:
        raise _http_error(e)
    except Exception:
        logger.exception("Create campaign error")
        raise HTTPException(status_code=500, detail="Failed to create campaign")
    return {
        "message": "Campaign created",
        "campaign": serialize_campaign(created.campaign),
        "emailsSent": created.emails_sent,
    }


@router.get("/campaigns")
async def list_campaigns(
    identity: Identity = Depends(ngo_only),
    uc: CampaignUseCase = Depends(get_campaign_uc),
):
    try:
        campaigns = await uc.list_for_ngo(identity.user_id)
    except Exception:
        logger.exception("Get campaigns error")
        raise HTTPException(status_code=500, detail="Failed to get campaigns")
    return [serialize_campaign(c) for c in campaigns]


@router.put("/campaigns/{campaign_id}")
async def update_campaign(
    campaign_id: int,
    body: CampaignUpdateRequest,
    identity: Identity = Depends(ngo_only),
    uc: CampaignUseCase = Depends(get_campaign_uc),
):
    try:
        campaign = await uc.update(identity.user_id, campaign_id, CampaignChanges(**body.model_dump()))
    except DomainError as e:
        raise _http_error(e)
    except Exception:
        logger.exception("Update campaign error")
        raise HTTPException(status_code=500, detail="Failed to update campaign")
    return {"message": "Campaign updated", "campaign": serialize_campaign(campaign)}


@router.put("/campaigns/{campaign_id}/end")
async def end_campaign(
    campaign_id: int,
    body: CampaignEndRequest,
    identity: Identity = Depends(ngo_only),
    uc: CampaignUseCase = Depends(get_campaign_uc),
):
    try:
        campaign = await uc.end(identity.user_id, campaign_id, body.blood_units_collected)
    except DomainError as e:
        raise _http_error(e)
    except Exception:
        logger.exception("End campaign error")
        raise HTTPException(status_code=500, detail="Failed to end campaign")
    return {
        "message": f"Campaign ended successfully. {campaign.blood_units_collected} units collected.",
        "campaign": serialize_campaign(campaign),
    }


@router.delete("/campaigns/{campaign_id}")
async def delete_campaign(
    campaign_id: int,
    identity: Identity = Depends(ngo_only),
    uc: CampaignUseCase = Depends(get_campaign_uc),
):
    try:
        await uc.delete(identity.user_id, campaign_id)
    except DomainError as e:
        raise _http_error(e)
    except Exception:
        logger.exception("Delete campaign error")
        raise HTTPException(status_code=500, detail="Failed to delete campaign")
    return {"message": "Campaign deleted"}
