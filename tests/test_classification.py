from __future__ import annotations

import pytest

from frontdesk.domain.models import RoomCandidate
from frontdesk.services.classification_service import classify_suitability


def room(**overrides) -> RoomCandidate:
    defaults = {
        "room_id": "101",
        "room_type": "Standard",
        "capacity_total": 2,
        "floor": 1,
        "status": "available",
    }
    defaults.update(overrides)
    return RoomCandidate(**defaults)


@pytest.mark.parametrize(
    ("score", "tier"),
    [
        (110, "perfect"),
        (80, "perfect"),
        (79, "good"),
        (60, "good"),
        (59, "acceptable"),
        (40, "acceptable"),
        (39, "problematic"),
        (0, "problematic"),
    ],
)
def test_score_thresholds(score: int, tier: str) -> None:
    assert classify_suitability(room(), score, 2) == tier


@pytest.mark.parametrize("status", ["occupied", "maintenance", "reserved"])
def test_unavailable_room_is_problematic_regardless_of_score(status: str) -> None:
    assert classify_suitability(room(status=status), 200, 2) == "problematic"


def test_room_too_small_is_problematic_regardless_of_score() -> None:
    assert classify_suitability(room(capacity_total=2), 200, 3) == "problematic"


def test_exact_capacity_is_not_overridden() -> None:
    assert classify_suitability(room(capacity_total=3), 85, 3) == "perfect"
