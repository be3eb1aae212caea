"""Health check endpoint."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from bloodlink.adapters.persistence.database import get_session
from bloodlink.application.use_cases.resolve_address import AddressResolver
from bloodlink.infrastructure.api.dependencies import get_address_resolver

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(
    session: AsyncSession = Depends(get_session),
    resolver: AddressResolver = Depends(get_address_resolver),
):
    """Report database connectivity and the geocoding providers in use.

    Answers 503 when the database is unreachable so load balancers can
    take the instance out of rotation.
    """
    try:
        await session.execute(text("SELECT 1"))
        database = "connected"
    except Exception:
        logger.exception("Health check could not reach the database")
        database = "unreachable"

    healthy = database == "connected"
    return JSONResponse(
        status_code=200 if healthy else 503,
        content={
            "status": "ok" if healthy else "degraded",
            "database": database,
            "geocoders": [provider.name for provider in resolver.providers],
            "service": "BloodLink API",
        },
    )
