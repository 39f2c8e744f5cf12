"""Tests for the room endpoints"""
from decimal import Decimal

import pytest


def test_create_room_starts_vacant(client, room_payload):
    response = client.post("/api/rooms", json=room_payload)

    assert response.status_code == 200
    room = response.json()
    assert room["status"] == "VACANT"
    assert room["number"] == "101"
    assert room["direction"] == "SOUTH"
    assert room["facilities"] == {"aircon": True, "internet": True}
    assert Decimal(room["price"]) == Decimal("2000")
    assert "createdAt" in room


def test_create_room_accepts_facility_mapping(client, room_payload):
    payload = {**room_payload, "facilities": {"aircon": True, "tv": False}}

    response = client.post("/api/rooms", json=payload)

    assert response.json()["facilities"] == {"aircon": True, "tv": False}


def test_create_room_ignores_client_status(client, room_payload):
    response = client.post("/api/rooms", json={**room_payload, "status": "OCCUPIED"})

    assert response.json()["status"] == "VACANT"


@pytest.mark.parametrize(
    "overrides",
    [
        {"number": ""},
        {"floor": 0},
        {"area": 0.5},
        {"price": -1},
        {"type": "PENTHOUSE"},
        {"direction": "UP"},
    ],
)
def test_create_room_validation(client, room_payload, overrides):
    response = client.post("/api/rooms", json={**room_payload, **overrides})

    assert response.status_code == 400
    assert response.json()["error"] == "数据验证失败"
    assert client.get("/api/rooms").json() == []


def test_list_rooms_newest_first_and_by_status(client, room_payload):
    first = client.post("/api/rooms", json=room_payload).json()
    second = client.post("/api/rooms", json={**room_payload, "number": "102"}).json()
    tenant = client.post(
        "/api/tenants",
        json={"name": "Li Wei", "phone": "13800000000", "idCard": "110101199001010011"},
    ).json()
    client.post(
        "/api/contracts",
        json={
            "tenantId": tenant["id"],
            "roomId": first["id"],
            "startDate": "2024-01-01",
            "endDate": "2024-12-31",
            "rentAmount": 2000,
            "deposit": 2000,
        },
    )

    rooms = client.get("/api/rooms").json()
    vacant = client.get("/api/rooms", params={"status": "VACANT"}).json()

    assert [r["id"] for r in rooms] == [second["id"], first["id"]]
    assert [r["id"] for r in vacant] == [second["id"]]


def test_get_room_not_found(client):
    response = client.get("/api/rooms/999")

    assert response.status_code == 404
    assert response.json() == {"error": "房间不存在"}


@pytest.mark.parametrize("room_id", ["abc", "0", "99999999999999999999999"])
def test_get_room_invalid_id(client, room_id):
    response = client.get(f"/api/rooms/{room_id}")

    assert response.status_code == 400
    assert response.json()["error"] == "无效的房间ID"
