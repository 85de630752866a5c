"""Coordinate Routes - HTTP contract for /api/coordinates."""

from uuid import uuid4

import pytest


@pytest.fixture
async def created_coordinate(client):
    res = await client.post("/api/coordinates", json={
        "name": "Lake A", "lat": "44.5", "lng": "-73.2",
    })
    assert res.status_code == 201
    return res.json()["coordinate"]


async def test_create_coordinate_defaults(client):
    res = await client.post("/api/coordinates", json={
        "name": "Lake A", "lat": "44.5", "lng": "-73.2",
    })

    assert res.status_code == 201
    body = res.json()
    assert body["message"] == "Coordinate submitted successfully"
    coordinate = body["coordinate"]
    assert coordinate["lat"] == 44.5
    assert coordinate["lng"] == -73.2
    assert coordinate["transparency"] is None
    assert coordinate["waterlevel"] is None
    assert coordinate["pathogens"] == "Unknown"
    assert coordinate["description"] == ""
    assert coordinate["status"] == "pending"
    assert coordinate["createdAt"] == coordinate["updatedAt"]


async def test_create_coordinate_with_measurements(client):
    res = await client.post("/api/coordinates", json={
        "name": "Creek B", "lat": 45.0, "lng": -72.9,
        "transparency": "1.2", "temperature": 17, "conductivity": "n/a",
        "pathogens": "E. coli", "description": "after storm",
    })

    coordinate = res.json()["coordinate"]
    assert coordinate["transparency"] == 1.2
    assert coordinate["temperature"] == 17.0
    assert coordinate["conductivity"] is None
    assert coordinate["pathogens"] == "E. coli"
    assert coordinate["description"] == "after storm"


async def test_create_coordinate_missing_fields(client):
    res = await client.post("/api/coordinates", json={"name": "Lake A"})

    assert res.status_code == 400
    assert res.json()["error"]["code"] == "MISSING_REQUIRED_FIELDS"
    assert (await client.get("/api/coordinates")).json() == []


async def test_create_coordinate_non_numeric_position(client):
    res = await client.post("/api/coordinates", json={
        "name": "Lake A", "lat": "north", "lng": "-73.2",
    })
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_FIELD_VALUE"


async def test_coordinates_and_reports_are_separate(client, created_coordinate):
    assert (await client.get("/api/reports")).json() == []
    assert len((await client.get("/api/coordinates")).json()) == 1


async def test_update_coordinate_status(client, created_coordinate):
    res = await client.put(
        f"/api/coordinates/{created_coordinate['id']}", json={"status": "resolved"},
    )

    assert res.status_code == 200
    coordinate = res.json()["coordinate"]
    assert coordinate["status"] == "resolved"
    assert coordinate["lat"] == created_coordinate["lat"]


async def test_update_coordinate_invalid_status(client, created_coordinate):
    res = await client.put(
        f"/api/coordinates/{created_coordinate['id']}", json={"status": "done"},
    )
    assert res.status_code == 400
    listed = (await client.get("/api/coordinates")).json()
    assert listed[0]["status"] == "pending"


async def test_get_and_delete_coordinate(client, created_coordinate):
    coordinate_id = created_coordinate["id"]
    assert (await client.get(f"/api/coordinates/{coordinate_id}")).json() == created_coordinate

    assert (await client.delete(f"/api/coordinates/{coordinate_id}")).status_code == 200
    assert (await client.delete(f"/api/coordinates/{coordinate_id}")).status_code == 404
    assert (await client.get(f"/api/coordinates/{coordinate_id}")).status_code == 404


async def test_update_unknown_coordinate(client):
    res = await client.put(f"/api/coordinates/{uuid4()}", json={"status": "reviewed"})
    assert res.status_code == 404


async def test_boolean_position_is_rejected(client):
    res = await client.post("/api/coordinates", json={
        "name": "Lake A", "lat": True, "lng": "-73.2",
    })

    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_FIELD_VALUE"
    assert (await client.get("/api/coordinates")).json() == []


async def test_boolean_measurement_is_stored_as_null(client):
    res = await client.post("/api/coordinates", json={
        "name": "Lake A", "lat": "44.5", "lng": -73.2,
        "transparency": True, "temperature": False,
    })

    assert res.status_code == 201
    coordinate = res.json()["coordinate"]
    assert coordinate["transparency"] is None
    assert coordinate["temperature"] is None
    assert coordinate["lng"] == -73.2
