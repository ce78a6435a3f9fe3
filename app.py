"""
app.py — FastAPI application factory.

This is the ASGI application object imported by uvicorn.
It wires the recommendation service and registers routers.

Usage (via launcher):
    python main.py

Usage (direct uvicorn):
    uvicorn app:app --reload
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from frontdesk.controllers.inventory_controller import router as inventory_router
from frontdesk.controllers.room_change_controller import router as room_change_router
from frontdesk.services.recommendation_service import RoomRecommendationService
from frontdesk.utils.config import Settings, get_settings
from frontdesk.utils.logger import get_logger


logger = get_logger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build and wire the FastAPI application.

    Services live on app.state so controllers resolve them through
    dependencies and tests can swap them.
    """
    settings = settings or get_settings()
    recommendation_service = RoomRecommendationService(settings=settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "Startup complete | app=%s | version=%s | top_n=%s",
            settings.app_name,
            settings.app_version,
            settings.recommendation_top_n,
        )
        yield

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # --- Routers ---
    app.include_router(room_change_router)
    app.include_router(inventory_router)

    @app.get("/health", tags=["health"])
    async def health() -> dict[str, str]:
        return {"status": "ok", "app": settings.app_name, "version": settings.app_version}

    app.state.settings = settings
    app.state.recommendation_service = recommendation_service

    return app


# Module-level app object for uvicorn
app = create_app()
