"""Domain models for room-change recommendations."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Union


RoomId = Union[str, int]

STATUS_AVAILABLE = "available"
STATUS_OCCUPIED = "occupied"
STATUS_MAINTENANCE = "maintenance"
STATUS_RESERVED = "reserved"
ROOM_STATUSES = frozenset(
    {STATUS_AVAILABLE, STATUS_OCCUPIED, STATUS_MAINTENANCE, STATUS_RESERVED}
)

TIER_PERFECT = "perfect"
TIER_GOOD = "good"
TIER_ACCEPTABLE = "acceptable"
TIER_PROBLEMATIC = "problematic"

SEVERITY_ERROR = "error"
SEVERITY_WARNING = "warning"

ISSUE_OCCUPIED = "occupied"
ISSUE_MAINTENANCE = "maintenance"
ISSUE_OVER_CAPACITY = "over_capacity"
ISSUE_UNDER_CAPACITY = "under_capacity"

REASON_AVAILABLE = "available"
REASON_IDEAL_CAPACITY = "ideal_capacity"
REASON_SPACIOUS = "spacious"
REASON_SAME_TYPE = "same_room_type"
REASON_SAME_FLOOR = "same_floor"

ROOM_CHANGE_REASONS = frozenset(
    {
        "guest_request",
        "maintenance",
        "upgrade",
        "downgrade",
        "noise_complaint",
        "room_issue",
        "preference",
        "other",
    }
)


@dataclass(frozen=True)
class RoomCandidate:
    """One hotel room evaluated as a replacement.

    ``capacity_total`` is ``None`` when the inventory record carried no usable
    capacity; such candidates are dropped by the ranker.
    """

    room_id: RoomId
    room_type: str
    capacity_total: Optional[int]
    floor: int
    status: str
    amenities: frozenset[str] = field(default_factory=frozenset)
    occupant_name: Optional[str] = None


@dataclass(frozen=True)
class PartyComposition:
    adults: int = 0
    children: int = 0
    infants: int = 0

    @property
    def total_guests(self) -> int:
        return self.adults + self.children + self.infants


@dataclass(frozen=True)
class ReservationContext:
    current_room_numbers: tuple[str, ...] = ()
    room_types: frozenset[str] = field(default_factory=frozenset)
    total_guests: int = 0


@dataclass(frozen=True)
class Reason:
    kind: str
    description: str
    points: int


@dataclass(frozen=True)
class Issue:
    kind: str
    severity: str
    description: str


@dataclass(frozen=True)
class RecommendationResult:
    room_id: RoomId
    score: int
    reasons: tuple[Reason, ...]
    suitability_tier: str
    issues: tuple[Issue, ...]

    @property
    def has_errors(self) -> bool:
        return any(issue.severity == SEVERITY_ERROR for issue in self.issues)


@dataclass(frozen=True)
class RoomChangeCommand:
    reservation_id: Optional[str]
    new_room_id: RoomId
    effective_date: date
    adults: int
    children: int
    infants: int
    reason: str
    notes: Optional[str] = None

    def to_payload(self) -> dict[str, object]:
        """Render the body expected by the backend change-room endpoint."""
        return {
            "id_hab_nueva": self.new_room_id,
            "desde": self.effective_date.isoformat(),
            "adultos": self.adults,
            "ninos": self.children,
            "bebes": self.infants,
        }


@dataclass(frozen=True)
class InventorySummary:
    total: int
    available: int
    occupied: int
    maintenance: int
    reserved: int
    occupancy_rate: float
