from __future__ import annotations

from frontdesk.domain.models import InventorySummary, RoomCandidate
from frontdesk.services.inventory_service import filter_candidates, summarize_inventory


def room(room_id: str, status: str = "available", room_type: str = "Standard", capacity=2):
    return RoomCandidate(
        room_id=room_id,
        room_type=room_type,
        capacity_total=capacity,
        floor=1,
        status=status,
    )


def test_summary_counts_statuses() -> None:
    summary = summarize_inventory(
        [
            room("101"),
            room("102", status="occupied"),
            room("103", status="maintenance"),
        ]
    )
    assert summary == InventorySummary(
        total=3,
        available=1,
        occupied=1,
        maintenance=1,
        reserved=0,
        occupancy_rate=33.3,
    )


def test_summary_of_empty_inventory() -> None:
    assert summarize_inventory([]).occupancy_rate == 0.0


def test_filter_keeps_available_rooms_that_fit() -> None:
    rooms = [
        room("101", capacity=2),
        room("102", capacity=4),
        room("103", status="occupied", capacity=4),
    ]
    assert [item.room_id for item in filter_candidates(rooms, guests=3)] == ["102"]


def test_filter_matches_room_type_substring() -> None:
    rooms = [room("101"), room("401", room_type="Junior Suite")]
    assert [item.room_id for item in filter_candidates(rooms, room_type="suite")] == ["401"]


def test_filter_without_criteria_returns_available_rooms() -> None:
    rooms = [room("101"), room("102", status="reserved")]
    assert [item.room_id for item in filter_candidates(rooms)] == ["101"]
