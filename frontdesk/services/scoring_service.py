"""Additive point model scoring a candidate room against a reservation."""

from __future__ import annotations

from typing import Optional

from frontdesk.domain.constraints import DEFAULT_WEIGHTS, ScoringWeights
from frontdesk.domain.models import (
    REASON_AVAILABLE,
    REASON_IDEAL_CAPACITY,
    REASON_SAME_FLOOR,
    REASON_SAME_TYPE,
    REASON_SPACIOUS,
    STATUS_AVAILABLE,
    STATUS_OCCUPIED,
    Reason,
    ReservationContext,
    RoomCandidate,
)


def parse_current_floor(context: ReservationContext) -> Optional[int]:
    """Return the floor implied by the first current room number.

    Only the leading character is read, so "1203" yields floor 1 and a
    non-numeric prefix yields no floor at all.
    """
    if not context.current_room_numbers:
        return None
    first_room = str(context.current_room_numbers[0]).strip()
    if not first_room or not first_room[0].isdigit():
        return None
    return int(first_room[0])


def amenity_bonus(candidate: RoomCandidate, weights: ScoringWeights = DEFAULT_WEIGHTS) -> int:
    return min(weights.amenity_points * len(candidate.amenities), weights.amenity_cap)


def score_candidate(
    candidate: RoomCandidate,
    context: ReservationContext,
    total_guests: int,
    *,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> tuple[int, tuple[Reason, ...]]:
    """Score one candidate and explain the positive contributions.

    Penalties (occupied room, insufficient capacity) lower the total without
    emitting a reason; the issue detector reports those conditions. The
    returned score is floored at zero.
    """
    score = 0
    reasons: list[Reason] = []

    if candidate.status == STATUS_AVAILABLE:
        score += weights.available_bonus
        reasons.append(Reason(REASON_AVAILABLE, "available", weights.available_bonus))
    elif candidate.status == STATUS_OCCUPIED:
        score -= weights.occupied_penalty

    capacity = candidate.capacity_total or 0
    diff = capacity - total_guests
    if 0 <= diff <= weights.ideal_capacity_slack:
        score += weights.ideal_capacity_bonus
        reasons.append(
            Reason(
                REASON_IDEAL_CAPACITY,
                f"ideal capacity ({capacity} people)",
                weights.ideal_capacity_bonus,
            )
        )
    elif diff > weights.ideal_capacity_slack:
        score += weights.spacious_bonus
        reasons.append(
            Reason(
                REASON_SPACIOUS,
                f"more spacious room ({capacity} people)",
                weights.spacious_bonus,
            )
        )
    else:
        score -= weights.insufficient_capacity_penalty

    if candidate.room_type in context.room_types:
        score += weights.same_type_bonus
        reasons.append(Reason(REASON_SAME_TYPE, "same room type", weights.same_type_bonus))

    current_floor = parse_current_floor(context)
    if current_floor is not None and candidate.floor == current_floor:
        score += weights.same_floor_bonus
        reasons.append(
            Reason(
                REASON_SAME_FLOOR,
                f"same floor (Floor {candidate.floor})",
                weights.same_floor_bonus,
            )
        )

    score += amenity_bonus(candidate, weights)

    return max(0, score), tuple(reasons)
