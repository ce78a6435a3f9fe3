"""Map raw inventory records onto ``RoomCandidate``."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional

from frontdesk.domain.models import (
    STATUS_AVAILABLE,
    STATUS_MAINTENANCE,
    STATUS_OCCUPIED,
    STATUS_RESERVED,
    RoomCandidate,
)


STATUS_LABELS = {
    "available": STATUS_AVAILABLE,
    "disponible": STATUS_AVAILABLE,
    "occupied": STATUS_OCCUPIED,
    "ocupada": STATUS_OCCUPIED,
    "checked-in": STATUS_OCCUPIED,
    "maintenance": STATUS_MAINTENANCE,
    "mantenimiento": STATUS_MAINTENANCE,
    "reserved": STATUS_RESERVED,
    "reservada": STATUS_RESERVED,
    "cleaning": STATUS_RESERVED,
    "limpieza": STATUS_RESERVED,
    "checked-out": STATUS_RESERVED,
    "check-out": STATUS_RESERVED,
}

DEFAULT_FLOOR = 1


def _label(value: Any) -> Optional[str]:
    """Unwrap ``{"nombre": ...}`` objects the backend uses for lookups."""
    if isinstance(value, Mapping):
        value = value.get("nombre") or value.get("name")
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _first_present(record: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = record.get(key)
        if value is not None and value != "":
            return value
    return None


def map_room_status(raw_status: Any) -> str:
    """Translate a backend status label; unknown labels pass through lower-cased."""
    label = _label(raw_status)
    if label is None:
        return ""
    return STATUS_LABELS.get(label.lower(), label.lower())


def _parse_capacity(value: Any) -> Optional[int]:
    if isinstance(value, Mapping):
        value = value.get("total")
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _parse_floor(value: Any) -> int:
    try:
        floor = int(value)
    except (TypeError, ValueError):
        return DEFAULT_FLOOR
    return floor or DEFAULT_FLOOR


def _parse_amenities(value: Any) -> frozenset[str]:
    if not value:
        return frozenset()
    if isinstance(value, str):
        value = value.split(",")
    labels = (_label(item) for item in value)
    return frozenset(label for label in labels if label)


def adapt_room(record: Mapping[str, Any]) -> RoomCandidate:
    """Normalize one inventory record.

    Records keep flowing even when capacity or status are unusable; the
    ranker drops them later.
    """
    room_id = _first_present(record, "number", "numero", "roomNumber", "id", "id_habitacion")
    status = map_room_status(_first_present(record, "status", "estado"))
    occupant = _first_present(record, "guestName", "occupantName", "huesped")
    return RoomCandidate(
        room_id=room_id if room_id is not None else "",
        room_type=_label(_first_present(record, "type", "roomType", "tipo")) or "",
        capacity_total=_parse_capacity(
            _first_present(record, "capacity", "capacityTotal", "capacidad")
        ),
        floor=_parse_floor(_first_present(record, "floor", "piso")),
        status=status,
        amenities=_parse_amenities(_first_present(record, "amenities", "amenidades")),
        occupant_name=_label(occupant) if status == STATUS_OCCUPIED else None,
    )


def adapt_rooms(records: Optional[Iterable[Mapping[str, Any]]]) -> list[RoomCandidate]:
    if not records:
        return []
    return [adapt_room(record) for record in records]
