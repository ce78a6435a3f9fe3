"""Suitability tiers for scored candidates."""

from __future__ import annotations

from frontdesk.domain.constraints import DEFAULT_THRESHOLDS, SuitabilityThresholds
from frontdesk.domain.models import (
    STATUS_AVAILABLE,
    TIER_ACCEPTABLE,
    TIER_GOOD,
    TIER_PERFECT,
    TIER_PROBLEMATIC,
    RoomCandidate,
)


def classify_suitability(
    candidate: RoomCandidate,
    score: int,
    total_guests: int,
    *,
    thresholds: SuitabilityThresholds = DEFAULT_THRESHOLDS,
) -> str:
    """Map a scored candidate onto a tier.

    Unavailable rooms and rooms too small for the party are problematic
    whatever their score.
    """
    if candidate.status != STATUS_AVAILABLE:
        return TIER_PROBLEMATIC
    if (candidate.capacity_total or 0) < total_guests:
        return TIER_PROBLEMATIC

    if score >= thresholds.perfect:
        return TIER_PERFECT
    if score >= thresholds.good:
        return TIER_GOOD
    if score >= thresholds.acceptable:
        return TIER_ACCEPTABLE
    return TIER_PROBLEMATIC
