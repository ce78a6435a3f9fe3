"""HTTP controller layer for inventory summaries and room search."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, status
from pydantic import BaseModel, Field

from frontdesk.adapters.room_adapter import adapt_rooms
from frontdesk.services.inventory_service import filter_candidates, summarize_inventory


router = APIRouter(prefix="/rooms", tags=["rooms"])


class InventoryRequest(BaseModel):
    rooms: list[dict[str, Any]] = Field(default_factory=list)


class RoomSearchRequest(InventoryRequest):
    guests: int | None = Field(default=None, ge=0)
    room_type: str | None = None


class InventorySummaryResponse(BaseModel):
    total: int = Field(ge=0)
    available: int = Field(ge=0)
    occupied: int = Field(ge=0)
    maintenance: int = Field(ge=0)
    reserved: int = Field(ge=0)
    occupancy_rate: float = Field(ge=0.0, le=100.0)


class RoomResponse(BaseModel):
    room_id: str | int
    room_type: str
    capacity_total: int | None
    floor: int
    status: str
    amenities: list[str]


class RoomSearchResponse(BaseModel):
    rooms: list[RoomResponse]


@router.post(
    "/summary",
    response_model=InventorySummaryResponse,
    status_code=status.HTTP_200_OK,
)
async def inventory_summary(payload: InventoryRequest) -> InventorySummaryResponse:
    summary = summarize_inventory(adapt_rooms(payload.rooms))
    return InventorySummaryResponse(
        total=summary.total,
        available=summary.available,
        occupied=summary.occupied,
        maintenance=summary.maintenance,
        reserved=summary.reserved,
        occupancy_rate=summary.occupancy_rate,
    )


@router.post(
    "/search",
    response_model=RoomSearchResponse,
    status_code=status.HTTP_200_OK,
)
async def search_rooms(payload: RoomSearchRequest) -> RoomSearchResponse:
    """Available rooms seating the party, optionally narrowed by type."""
    rooms = filter_candidates(
        adapt_rooms(payload.rooms),
        guests=payload.guests,
        room_type=payload.room_type,
    )
    return RoomSearchResponse(
        rooms=[
            RoomResponse(
                room_id=room.room_id,
                room_type=room.room_type,
                capacity_total=room.capacity_total,
                floor=room.floor,
                status=room.status,
                amenities=sorted(room.amenities),
            )
            for room in rooms
        ]
    )
