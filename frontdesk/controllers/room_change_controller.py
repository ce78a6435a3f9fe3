"""HTTP controller layer for room-change recommendations."""

from __future__ import annotations

from datetime import date
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field, field_validator

from frontdesk.adapters.reservation_adapter import extract_context
from frontdesk.adapters.room_adapter import adapt_rooms
from frontdesk.controllers.dependencies import get_recommendation_service
from frontdesk.domain.models import ROOM_CHANGE_REASONS, PartyComposition
from frontdesk.services.recommendation_service import (
    RecommendationValidationError,
    RoomRecommendationService,
)
from frontdesk.services.room_change_service import (
    RoomChangeValidationError,
    build_room_change_command,
)
from frontdesk.utils.logger import get_logger


logger = get_logger(__name__)

router = APIRouter(prefix="/room_change", tags=["room_change"])


class PartyRequest(BaseModel):
    adults: int = Field(default=0, ge=0)
    children: int = Field(default=0, ge=0)
    infants: int = Field(default=0, ge=0)

    def to_domain(self) -> PartyComposition:
        return PartyComposition(
            adults=self.adults,
            children=self.children,
            infants=self.infants,
        )


class RecommendationRequest(BaseModel):
    """Raw inventory and reservation snapshots, normalized by the adapters."""

    rooms: list[dict[str, Any]] = Field(default_factory=list)
    reservation: dict[str, Any] | None = None
    party: PartyRequest | None = None
    top_n: int | None = Field(default=None, ge=0)


class ReasonResponse(BaseModel):
    kind: str
    description: str
    points: int


class IssueResponse(BaseModel):
    kind: str
    severity: str
    description: str


class RecommendationResponse(BaseModel):
    room_id: str | int
    score: int = Field(ge=0)
    reasons: list[ReasonResponse]
    suitability_tier: str
    issues: list[IssueResponse]


class RecommendationsResponse(BaseModel):
    total_guests: int = Field(ge=0)
    recommendations: list[RecommendationResponse]
    excluded_room_ids: list[str | int]


class RoomChangeCommandRequest(BaseModel):
    reservation_id: str | None = None
    new_room_id: str | int
    effective_date: date
    party: PartyRequest
    reason: str = "other"
    notes: str | None = Field(default=None, max_length=500)

    @field_validator("reason")
    @classmethod
    def validate_reason(cls, value: str) -> str:
        if value not in ROOM_CHANGE_REASONS:
            raise ValueError(f"reason must be one of {sorted(ROOM_CHANGE_REASONS)}")
        return value


class RoomChangePayloadResponse(BaseModel):
    id_hab_nueva: str | int
    desde: str
    adultos: int = Field(ge=1)
    ninos: int = Field(ge=0)
    bebes: int = Field(ge=0)


@router.post(
    "/recommendations",
    response_model=RecommendationsResponse,
    status_code=status.HTTP_200_OK,
)
async def recommend_rooms(
    payload: RecommendationRequest,
    service: RoomRecommendationService = Depends(get_recommendation_service),
) -> RecommendationsResponse:
    """Rank the posted inventory for the reservation being moved."""
    try:
        context = extract_context(
            payload.reservation,
            payload.party.to_domain() if payload.party is not None else None,
        )
        outcome = service.recommend(
            candidates=adapt_rooms(payload.rooms),
            context=context,
            top_n=payload.top_n,
        )
        return RecommendationsResponse(
            total_guests=context.total_guests,
            recommendations=[
                RecommendationResponse(
                    room_id=item.room_id,
                    score=item.score,
                    reasons=[
                        ReasonResponse(
                            kind=reason.kind,
                            description=reason.description,
                            points=reason.points,
                        )
                        for reason in item.reasons
                    ],
                    suitability_tier=item.suitability_tier,
                    issues=[
                        IssueResponse(
                            kind=issue.kind,
                            severity=issue.severity,
                            description=issue.description,
                        )
                        for issue in item.issues
                    ],
                )
                for item in outcome.recommendations
            ],
            excluded_room_ids=outcome.excluded_room_ids,
        )
    except RecommendationValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc
    except Exception as exc:  # pragma: no cover - defensive fallback
        logger.exception("Unexpected recommendation failure")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to compute room recommendations",
        ) from exc


@router.post(
    "/command",
    response_model=RoomChangePayloadResponse,
    status_code=status.HTTP_200_OK,
)
async def prepare_room_change(payload: RoomChangeCommandRequest) -> RoomChangePayloadResponse:
    """Validate the operator's choice and return the change-room body."""
    try:
        command = build_room_change_command(
            new_room_id=payload.new_room_id,
            effective_date=payload.effective_date,
            party=payload.party.to_domain(),
            reason=payload.reason,
            reservation_id=payload.reservation_id,
            notes=payload.notes,
        )
        return RoomChangePayloadResponse(**command.to_payload())
    except RoomChangeValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc
