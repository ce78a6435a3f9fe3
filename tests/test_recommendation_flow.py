from __future__ import annotations

from dataclasses import replace

from fastapi.testclient import TestClient

from app import create_app
from frontdesk.utils.config import get_settings


ROOMS = [
    {"numero": "205", "tipo": "Standard", "capacidad": 2, "piso": 2, "estado": "Disponible"},
    {"numero": "104", "tipo": "Standard", "capacidad": 2, "piso": 1, "estado": "Disponible"},
    {
        "numero": "301",
        "tipo": "Suite",
        "capacidad": 4,
        "piso": 3,
        "estado": "Ocupada",
        "guestName": "Jane Doe",
    },
    {"numero": "402", "tipo": "Standard", "piso": 4, "estado": "Disponible"},
]

RESERVATION = {
    "id": "RES-001",
    "habitaciones": [{"numero": "101", "tipo": {"nombre": "Standard"}}],
    "adultos": 2,
    "ninos": 1,
}


def _build_client(**overrides) -> TestClient:
    get_settings.cache_clear()
    settings = replace(get_settings(), **overrides)
    return TestClient(create_app(settings))


def test_recommendations_endpoint_ranks_inventory() -> None:
    with _build_client(recommendation_top_n=0) as client:
        response = client.post(
            "/room_change/recommendations",
            json={"rooms": ROOMS, "reservation": RESERVATION, "party": {"adults": 2}},
        )

    assert response.status_code == 200
    body = response.json()
    assert body["total_guests"] == 2
    assert body["excluded_room_ids"] == ["402"]

    ranked = body["recommendations"]
    assert [item["room_id"] for item in ranked] == ["104", "205", "301"]
    assert [item["score"] for item in ranked] == [110, 100, 0]
    assert [item["suitability_tier"] for item in ranked] == ["perfect", "perfect", "problematic"]
    assert ranked[0]["reasons"][-1] == {
        "kind": "same_floor",
        "description": "same floor (Floor 1)",
        "points": 10,
    }
    assert ranked[2]["issues"] == [
        {"kind": "occupied", "severity": "error", "description": "occupied by Jane Doe"}
    ]


def test_recommendations_use_reservation_party_when_not_overridden() -> None:
    with _build_client(recommendation_top_n=0) as client:
        response = client.post(
            "/room_change/recommendations",
            json={"rooms": ROOMS, "reservation": RESERVATION},
        )

    body = response.json()
    assert body["total_guests"] == 3
    tiers = {item["room_id"]: item["suitability_tier"] for item in body["recommendations"]}
    assert tiers["104"] == "problematic"


def test_recommendations_respect_top_n() -> None:
    with _build_client(recommendation_top_n=0) as client:
        response = client.post(
            "/room_change/recommendations",
            json={"rooms": ROOMS, "reservation": RESERVATION, "top_n": 1},
        )

    assert response.status_code == 200
    assert len(response.json()["recommendations"]) == 1


def test_recommendations_with_empty_inventory() -> None:
    with _build_client() as client:
        response = client.post("/room_change/recommendations", json={})

    assert response.status_code == 200
    assert response.json() == {"total_guests": 0, "recommendations": [], "excluded_room_ids": []}


def test_recommendations_reject_negative_party() -> None:
    with _build_client() as client:
        response = client.post(
            "/room_change/recommendations",
            json={"rooms": ROOMS, "party": {"adults": -1}},
        )

    assert response.status_code == 422


def test_command_endpoint_returns_backend_payload() -> None:
    with _build_client() as client:
        response = client.post(
            "/room_change/command",
            json={
                "reservation_id": "RES-001",
                "new_room_id": 104,
                "effective_date": "2999-01-01",
                "party": {"adults": 2, "children": 1},
                "reason": "noise_complaint",
            },
        )

    assert response.status_code == 200
    assert response.json() == {
        "id_hab_nueva": 104,
        "desde": "2999-01-01",
        "adultos": 2,
        "ninos": 1,
        "bebes": 0,
    }


def test_command_endpoint_rejects_past_dates() -> None:
    with _build_client() as client:
        response = client.post(
            "/room_change/command",
            json={
                "new_room_id": "104",
                "effective_date": "2000-01-01",
                "party": {"adults": 2},
            },
        )

    assert response.status_code == 400
    assert "before today" in response.json()["detail"]


def test_command_endpoint_rejects_unknown_reason() -> None:
    with _build_client() as client:
        response = client.post(
            "/room_change/command",
            json={
                "new_room_id": "104",
                "effective_date": "2999-01-01",
                "party": {"adults": 2},
                "reason": "bored",
            },
        )

    assert response.status_code == 422


def test_inventory_endpoints() -> None:
    with _build_client() as client:
        summary = client.post("/rooms/summary", json={"rooms": ROOMS})
        search = client.post(
            "/rooms/search",
            json={"rooms": ROOMS, "guests": 2, "room_type": "standard"},
        )
        health = client.get("/health")

    assert summary.status_code == 200
    assert summary.json() == {
        "total": 4,
        "available": 3,
        "occupied": 1,
        "maintenance": 0,
        "reserved": 0,
        "occupancy_rate": 25.0,
    }
    assert [item["room_id"] for item in search.json()["rooms"]] == ["205", "104"]
    assert health.json()["status"] == "ok"
