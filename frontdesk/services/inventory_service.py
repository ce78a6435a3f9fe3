"""Inventory summaries and search filters for the room-selection screen."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Optional

from frontdesk.domain.models import (
    STATUS_AVAILABLE,
    STATUS_MAINTENANCE,
    STATUS_OCCUPIED,
    STATUS_RESERVED,
    InventorySummary,
    RoomCandidate,
)


def summarize_inventory(candidates: Iterable[RoomCandidate]) -> InventorySummary:
    rooms = list(candidates)
    counts = Counter(room.status for room in rooms)
    total = len(rooms)
    occupied = counts.get(STATUS_OCCUPIED, 0)
    occupancy_rate = round(occupied / total * 100, 1) if total else 0.0
    return InventorySummary(
        total=total,
        available=counts.get(STATUS_AVAILABLE, 0),
        occupied=occupied,
        maintenance=counts.get(STATUS_MAINTENANCE, 0),
        reserved=counts.get(STATUS_RESERVED, 0),
        occupancy_rate=occupancy_rate,
    )


def filter_candidates(
    candidates: Iterable[RoomCandidate],
    *,
    guests: Optional[int] = None,
    room_type: Optional[str] = None,
) -> list[RoomCandidate]:
    """Keep available rooms that seat ``guests`` and match ``room_type``.

    The room-type filter is a case-insensitive substring match.
    """
    filtered = [room for room in candidates if room.status == STATUS_AVAILABLE]
    if guests:
        filtered = [room for room in filtered if (room.capacity_total or 0) >= guests]
    if room_type:
        needle = room_type.lower()
        filtered = [room for room in filtered if needle in room.room_type.lower()]
    return filtered
