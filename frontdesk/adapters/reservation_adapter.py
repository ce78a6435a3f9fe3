"""Derive a ``ReservationContext`` from a fetched reservation record."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from frontdesk.domain.models import PartyComposition, ReservationContext


def _count(value: Any) -> int:
    try:
        return max(0, int(value))
    except (TypeError, ValueError):
        return 0


def _type_label(value: Any) -> Optional[str]:
    if isinstance(value, Mapping):
        value = value.get("nombre") or value.get("name")
    if value is None or str(value).strip() == "":
        return None
    return str(value).strip()


PARTY_KEYS = (("adultos", "adults"), ("ninos", "children"), ("bebes", "infants"))


def _room_entries(reservation: Mapping[str, Any]) -> list[Mapping[str, Any]]:
    entries: list[Mapping[str, Any]] = []
    for key in ("habitaciones", "rooms"):
        value = reservation.get(key)
        if isinstance(value, list):
            entries.extend(item for item in value if isinstance(item, Mapping))
    for key in ("habitacion", "room"):
        value = reservation.get(key)
        if isinstance(value, Mapping):
            entries.append(value)
    return entries


def _entry_value(entry: Mapping[str, Any], *keys: str) -> Any:
    """Read a field from a room entry or its nested ``habitacion`` record."""
    nested = entry.get("habitacion") or entry.get("room")
    for source in (entry, nested if isinstance(nested, Mapping) else {}):
        for key in keys:
            value = source.get(key)
            if value is not None and str(value).strip():
                return value
    return None


def _has_counts(record: Mapping[str, Any]) -> bool:
    return any(
        record.get(spanish) is not None or record.get(english) is not None
        for spanish, english in PARTY_KEYS
    )


def _party_counts(record: Mapping[str, Any]) -> PartyComposition:
    adults, children, infants = (
        _count(record.get(spanish, record.get(english))) for spanish, english in PARTY_KEYS
    )
    return PartyComposition(adults=adults, children=children, infants=infants)


def party_from_reservation(reservation: Mapping[str, Any]) -> PartyComposition:
    """Party counts from the reservation, else summed over its room entries."""
    if _has_counts(reservation):
        return _party_counts(reservation)
    parties = [_party_counts(entry) for entry in _room_entries(reservation) if _has_counts(entry)]
    return PartyComposition(
        adults=sum(item.adults for item in parties),
        children=sum(item.children for item in parties),
        infants=sum(item.infants for item in parties),
    )


def extract_context(
    reservation: Optional[Mapping[str, Any]],
    party: Optional[PartyComposition] = None,
) -> ReservationContext:
    """Summarize the rooms and party currently held by a reservation.

    An explicit ``party`` wins over the counts stored on the reservation,
    since the operator may edit the composition during the change.
    """
    reservation = reservation or {}
    room_numbers: list[str] = []
    room_types: set[str] = set()

    for entry in _room_entries(reservation):
        number = _entry_value(entry, "numero", "number", "roomNumber")
        if number is not None:
            room_numbers.append(str(number).strip())
        room_type = _type_label(_entry_value(entry, "tipo", "type", "roomType"))
        if room_type:
            room_types.add(room_type)

    flat_number = reservation.get("roomNumber") or reservation.get("numero_habitacion")
    if flat_number is not None and str(flat_number).strip():
        if str(flat_number).strip() not in room_numbers:
            room_numbers.append(str(flat_number).strip())
    flat_type = _type_label(reservation.get("roomType"))
    if flat_type:
        room_types.add(flat_type)

    effective_party = party or party_from_reservation(reservation)
    return ReservationContext(
        current_room_numbers=tuple(room_numbers),
        room_types=frozenset(room_types),
        total_guests=effective_party.total_guests,
    )
