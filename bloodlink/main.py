"""BloodLink — FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bloodlink.adapters.persistence.database import engine
from bloodlink.config import settings
from bloodlink.infrastructure.api.routes_geocode import router as geocode_router
from bloodlink.infrastructure.api.routes_health import router as health_router
from bloodlink.infrastructure.api.routes_ngo import router as ngo_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    try:
        async with engine.begin():
            pass  # Connection pool warmed up
        logger.info("Connected to PostgreSQL database")
    except Exception as e:
        logger.warning("Database not available on startup: %s", e)
    yield
    await engine.dispose()


def create_app() -> FastAPI:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app = FastAPI(
        title="BloodLink",
        description="Blood donation coordination for donors, NGOs and blood banks",
        version="0.1.0",
        lifespan=lifespan,
    )

    # CORS for the React frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routers
    app.include_router(health_router, prefix="/api")
    app.include_router(ngo_router, prefix="/api")
    app.include_router(geocode_router, prefix="/api")

    return app


app = create_app()
