"""Validation and payload construction for the change-room command."""

from __future__ import annotations

from datetime import date
from typing import Optional

from frontdesk.domain.models import (
    ROOM_CHANGE_REASONS,
    SEVERITY_ERROR,
    PartyComposition,
    RecommendationResult,
    RoomChangeCommand,
    RoomId,
)
from frontdesk.utils.logger import get_logger


logger = get_logger(__name__)


class RoomChangeValidationError(Exception):
    """Raised when a room-change command cannot be submitted."""


def build_room_change_command(
    *,
    new_room_id: Optional[RoomId],
    effective_date: Optional[date],
    party: PartyComposition,
    reason: str = "other",
    reservation_id: Optional[str] = None,
    notes: Optional[str] = None,
    today: Optional[date] = None,
    recommendation: Optional[RecommendationResult] = None,
    strict: bool = False,
) -> RoomChangeCommand:
    """Validate operator input and return the command to submit.

    With ``strict`` set, a target whose recommendation carries an error issue
    is rejected.
    """
    if new_room_id is None or str(new_room_id).strip() == "":
        raise RoomChangeValidationError("new room is required")
    if effective_date is None:
        raise RoomChangeValidationError("effective date is required")
    reference_day = today or date.today()
    if effective_date < reference_day:
        raise RoomChangeValidationError("effective date cannot be before today")
    if min(party.adults, party.children, party.infants) < 0:
        raise RoomChangeValidationError("guest counts must be >= 0")
    if party.adults < 1:
        raise RoomChangeValidationError("at least one adult is required")
    if party.total_guests < 1:
        raise RoomChangeValidationError("at least one guest is required")
    if reason not in ROOM_CHANGE_REASONS:
        raise RoomChangeValidationError(f"unknown room change reason: {reason}")

    if recommendation is not None:
        if str(recommendation.room_id) != str(new_room_id):
            raise RoomChangeValidationError(
                "recommendation does not belong to the selected room"
            )
        if strict and recommendation.has_errors:
            blocking = "; ".join(
                issue.description
                for issue in recommendation.issues
                if issue.severity == SEVERITY_ERROR
            )
            raise RoomChangeValidationError(f"selected room is not assignable: {blocking}")

    command = RoomChangeCommand(
        reservation_id=reservation_id,
        new_room_id=new_room_id,
        effective_date=effective_date,
        adults=party.adults,
        children=party.children,
        infants=party.infants,
        reason=reason,
        notes=notes,
    )
    logger.info(
        "Room change command prepared | reservation_id=%s | new_room_id=%s | desde=%s | reason=%s",
        reservation_id,
        new_room_id,
        effective_date.isoformat(),
        reason,
    )
    return command
