"""Geocode lookup — lets the frontend locate an address before submitting it."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from bloodlink.application.use_cases.manage_campaigns import ADDRESS_NOT_LOCATED
from bloodlink.application.use_cases.resolve_address import AddressResolver
from bloodlink.domain.exceptions import GeocodingError, NoAddressSupplied
from bloodlink.infrastructure.api.auth import Identity, get_current_identity
from bloodlink.infrastructure.api.dependencies import get_address_resolver

router = APIRouter(prefix="/geocode", tags=["geocode"])


@router.get("")
async def geocode(
    address: str = Query(default=""),
    _identity: Identity = Depends(get_current_identity),
    resolver: AddressResolver = Depends(get_address_resolver),
):
    """Resolve a free-text address to ``{lat, lng}``."""
    try:
        point = await resolver.resolve_required(address)
    except NoAddressSupplied:
        raise HTTPException(status_code=400, detail="Address is required")
    except GeocodingError:
        raise HTTPException(status_code=400, detail=ADDRESS_NOT_LOCATED)
    return {"lat": point.lat, "lng": point.lng}
