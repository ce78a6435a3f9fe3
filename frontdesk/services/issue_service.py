"""Blocking and cautionary findings about candidate rooms."""

from __future__ import annotations

from frontdesk.domain.constraints import DEFAULT_THRESHOLDS, SuitabilityThresholds
from frontdesk.domain.models import (
    ISSUE_MAINTENANCE,
    ISSUE_OCCUPIED,
    ISSUE_OVER_CAPACITY,
    ISSUE_UNDER_CAPACITY,
    SEVERITY_ERROR,
    SEVERITY_WARNING,
    STATUS_MAINTENANCE,
    STATUS_OCCUPIED,
    Issue,
    RoomCandidate,
)


def detect_issues(
    candidate: RoomCandidate,
    total_guests: int,
    *,
    thresholds: SuitabilityThresholds = DEFAULT_THRESHOLDS,
) -> tuple[Issue, ...]:
    """Collect every issue for a candidate, independent of its score.

    Reserved rooms raise nothing here; callers read ``status`` directly.
    """
    issues: list[Issue] = []

    if candidate.status == STATUS_OCCUPIED:
        occupant = candidate.occupant_name or "another guest"
        issues.append(Issue(ISSUE_OCCUPIED, SEVERITY_ERROR, f"occupied by {occupant}"))
    elif candidate.status == STATUS_MAINTENANCE:
        issues.append(Issue(ISSUE_MAINTENANCE, SEVERITY_ERROR, "room under maintenance"))

    capacity = candidate.capacity_total or 0
    if capacity < total_guests:
        issues.append(
            Issue(
                ISSUE_OVER_CAPACITY,
                SEVERITY_ERROR,
                f"insufficient for {total_guests} guests (capacity: {capacity})",
            )
        )
    elif capacity > total_guests + thresholds.oversize_margin:
        issues.append(
            Issue(ISSUE_UNDER_CAPACITY, SEVERITY_WARNING, "room much larger than needed")
        )

    return tuple(issues)
