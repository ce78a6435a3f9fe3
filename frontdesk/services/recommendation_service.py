"""Rank candidate rooms for a room-change operation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from frontdesk.domain.constraints import (
    DEFAULT_THRESHOLDS,
    DEFAULT_WEIGHTS,
    ScoringWeights,
    SuitabilityThresholds,
    validate_scoring_weights,
    validate_suitability_thresholds,
)
from frontdesk.domain.models import (
    ROOM_STATUSES,
    RecommendationResult,
    ReservationContext,
    RoomCandidate,
    RoomId,
)
from frontdesk.services.classification_service import classify_suitability
from frontdesk.services.issue_service import detect_issues
from frontdesk.services.scoring_service import score_candidate
from frontdesk.utils.config import Settings, get_settings
from frontdesk.utils.logger import get_logger


logger = get_logger(__name__)


class RecommendationValidationError(Exception):
    """Raised when recommendation request inputs are invalid."""


@dataclass(frozen=True)
class RecommendationOutcome:
    recommendations: list[RecommendationResult]
    excluded_room_ids: list[RoomId]


def is_well_formed(candidate: RoomCandidate) -> bool:
    return candidate.capacity_total is not None and candidate.status in ROOM_STATUSES


def room_sort_key(room_id: RoomId) -> tuple[int, int, str]:
    """Order numeric room ids numerically, ahead of non-numeric ones."""
    text = str(room_id).strip()
    if isinstance(room_id, int) or text.isdecimal():
        return (0, int(text), text)
    return (1, 0, text)


def evaluate_candidate(
    candidate: RoomCandidate,
    context: ReservationContext,
    total_guests: int,
    *,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
    thresholds: SuitabilityThresholds = DEFAULT_THRESHOLDS,
) -> RecommendationResult:
    score, reasons = score_candidate(candidate, context, total_guests, weights=weights)
    return RecommendationResult(
        room_id=candidate.room_id,
        score=score,
        reasons=reasons,
        suitability_tier=classify_suitability(
            candidate, score, total_guests, thresholds=thresholds
        ),
        issues=detect_issues(candidate, total_guests, thresholds=thresholds),
    )


def rank_candidates(
    candidates: Iterable[RoomCandidate],
    context: ReservationContext,
    total_guests: int,
    *,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
    thresholds: SuitabilityThresholds = DEFAULT_THRESHOLDS,
) -> list[RecommendationResult]:
    """Score, classify and order every well-formed candidate.

    Results are sorted by descending score, then ascending room id.
    """
    results = [
        evaluate_candidate(
            candidate,
            context,
            total_guests,
            weights=weights,
            thresholds=thresholds,
        )
        for candidate in candidates
        if is_well_formed(candidate)
    ]
    results.sort(key=lambda result: (-result.score, room_sort_key(result.room_id)))
    return results


class RoomRecommendationService:
    """Runs the ranking for callers and reports excluded inventory."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        weights: ScoringWeights = DEFAULT_WEIGHTS,
        thresholds: SuitabilityThresholds = DEFAULT_THRESHOLDS,
    ) -> None:
        validate_scoring_weights(weights)
        validate_suitability_thresholds(thresholds)
        self._settings = settings or get_settings()
        self._weights = weights
        self._thresholds = thresholds

    def recommend(
        self,
        *,
        candidates: list[RoomCandidate],
        context: ReservationContext,
        total_guests: Optional[int] = None,
        top_n: Optional[int] = None,
    ) -> RecommendationOutcome:
        guests = context.total_guests if total_guests is None else total_guests
        if guests < 0:
            raise RecommendationValidationError("total_guests must be >= 0")
        limit = self._settings.recommendation_top_n if top_n is None else top_n
        if limit < 0:
            raise RecommendationValidationError("top_n must be >= 0")

        excluded = [
            candidate.room_id for candidate in candidates if not is_well_formed(candidate)
        ]
        if excluded:
            logger.warning(
                "Excluded malformed room candidates | count=%s | room_ids=%s",
                len(excluded),
                excluded,
            )

        ranked = rank_candidates(
            candidates,
            context,
            guests,
            weights=self._weights,
            thresholds=self._thresholds,
        )
        if limit:
            ranked = ranked[:limit]

        logger.info(
            "Room recommendations computed | candidates=%s | ranked=%s | total_guests=%s | top=%s",
            len(candidates),
            len(ranked),
            guests,
            ranked[0].room_id if ranked else None,
        )
        return RecommendationOutcome(recommendations=ranked, excluded_room_ids=excluded)
