"""Shared FastAPI dependency providers for controller layer."""

from __future__ import annotations

from fastapi import Request

from frontdesk.services.recommendation_service import RoomRecommendationService
from frontdesk.utils.config import get_settings


def get_recommendation_service(request: Request) -> RoomRecommendationService:
    service = getattr(request.app.state, "recommendation_service", None)
    if service is None:
        service = RoomRecommendationService(settings=get_settings())
        request.app.state.recommendation_service = service
    return service
