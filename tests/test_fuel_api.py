import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from fuel import router as fuel_router

HEADERS = {"X-User-Id": "user-1"}


def _build_app() -> FastAPI:
    app = FastAPI()
    app.include_router(fuel_router)
    return app


def _create_vehicle(client: TestClient, **overrides) -> dict:
    payload = {"name": "Onix", "plate": "XYZ9A87", "initial_odometer": 10000}
    payload.update(overrides)
    resp = client.post("/api/vehicles", json=payload, headers=HEADERS)
    assert resp.status_code == 201
    return resp.json()


def _add_refuel(client: TestClient, vehicle_id: str, **payload):
    return client.post(
        f"/api/vehicles/{vehicle_id}/refuels",
        json=payload,
        headers=HEADERS,
    )


@pytest.mark.asyncio
async def test_refuel_flow_produces_history_and_statistics(beanie_db) -> None:
    client = TestClient(_build_app())
    vehicle = _create_vehicle(client)

    first = _add_refuel(
        client,
        vehicle["id"],
        date="2024-04-01",
        current_odometer=10400,
        liters=40,
        total_value=232.0,
        station_name="Posto A",
    )
    assert first.status_code == 201
    second = _add_refuel(
        client,
        vehicle["id"],
        date="2024-04-08",
        current_odometer=10800,
        liters=32,
        total_value=185.6,
        station_name="Posto A",
    )
    assert second.status_code == 201

    history = client.get(f"/api/vehicles/{vehicle['id']}/refuels", headers=HEADERS)
    assert history.status_code == 200
    body = history.json()
    assert [r["distance_since_last"] for r in body] == [400, 400]
    assert [r["economy"] for r in body] == [0.0, 12.5]

    stats = client.get(f"/api/vehicles/{vehicle['id']}/statistics", headers=HEADERS)
    assert stats.status_code == 200
    data = stats.json()
    assert data["total_refuels"] == 2
    assert data["total_distance"] == 800
    assert data["overall_economy"] == 11.11
    assert data["station_averages"][0]["station_name"] == "Posto A"
    assert data["station_averages"][0]["average"] == 12.5
    assert data["most_recent_refuel"]["current_odometer"] == 10800


@pytest.mark.asyncio
async def test_statistics_for_vehicle_without_refuels(beanie_db) -> None:
    client = TestClient(_build_app())
    vehicle = _create_vehicle(client)

    resp = client.get(f"/api/vehicles/{vehicle['id']}/statistics", headers=HEADERS)

    assert resp.status_code == 200
    assert resp.json() == {
        "total_refuels": 0,
        "total_distance": 0,
        "total_fuel": 0.0,
        "overall_economy": 0.0,
        "station_averages": [],
        "most_recent_refuel": None,
    }


@pytest.mark.asyncio
async def test_refuel_with_non_increasing_odometer_is_rejected(beanie_db) -> None:
    client = TestClient(_build_app())
    vehicle = _create_vehicle(client)

    resp = _add_refuel(
        client,
        vehicle["id"],
        date="2024-04-01",
        current_odometer=9000,
        liters=40,
        total_value=232.0,
        station_name="Posto A",
    )

    assert resp.status_code == 400
    assert "10000" in resp.json()["detail"]


@pytest.mark.asyncio
async def test_refuel_payload_is_validated(beanie_db) -> None:
    client = TestClient(_build_app())
    vehicle = _create_vehicle(client)

    resp = _add_refuel(
        client,
        vehicle["id"],
        date="2024-04-01",
        current_odometer=10400,
        liters=-1,
        total_value=232.0,
        station_name="Posto A",
    )

    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_vehicles_are_scoped_to_the_request_owner(beanie_db) -> None:
    client = TestClient(_build_app())
    vehicle = _create_vehicle(client)

    other = client.get(
        f"/api/vehicles/{vehicle['id']}", headers={"X-User-Id": "user-2"}
    )
    assert other.status_code == 404

    listing = client.get("/api/vehicles", headers={"X-User-Id": "user-2"})
    assert listing.status_code == 200
    assert listing.json() == []


@pytest.mark.asyncio
async def test_malformed_vehicle_id_is_a_bad_request(beanie_db) -> None:
    client = TestClient(_build_app())

    resp = client.get("/api/vehicles/not-an-id/statistics", headers=HEADERS)

    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_station_rename_shows_up_in_history(beanie_db) -> None:
    client = TestClient(_build_app())
    vehicle = _create_vehicle(client)
    _add_refuel(
        client,
        vehicle["id"],
        date="2024-04-01",
        current_odometer=10400,
        liters=40,
        total_value=232.0,
        station_name="Posto A",
    )

    stations = client.get("/api/stations", headers=HEADERS).json()
    assert [s["name"] for s in stations] == ["Posto A"]

    resp = client.put(
        f"/api/stations/{stations[0]['id']}",
        json={"name": "Posto Alfa"},
        headers=HEADERS,
    )
    assert resp.status_code == 200
    assert resp.json()["updated_refuels"] == 1

    history = client.get(f"/api/vehicles/{vehicle['id']}/refuels", headers=HEADERS)
    assert history.json()[0]["station_name"] == "Posto Alfa"


@pytest.mark.asyncio
async def test_delete_vehicle_removes_its_refuels(beanie_db) -> None:
    client = TestClient(_build_app())
    vehicle = _create_vehicle(client)
    _add_refuel(
        client,
        vehicle["id"],
        date="2024-04-01",
        current_odometer=10400,
        liters=40,
        total_value=232.0,
        station_name="Posto A",
    )

    resp = client.delete(f"/api/vehicles/{vehicle['id']}", headers=HEADERS)
    assert resp.status_code == 200
    assert resp.json()["deleted_refuels"] == 1

    gone = client.get(f"/api/vehicles/{vehicle['id']}/refuels", headers=HEADERS)
    assert gone.status_code == 404


@pytest.mark.asyncio
async def test_update_vehicle_with_partial_payload(beanie_db) -> None:
    client = TestClient(_build_app())
    vehicle = _create_vehicle(client)

    resp = client.put(
        f"/api/vehicles/{vehicle['id']}",
        json={"plate": "NEW1234"},
        headers=HEADERS,
    )

    assert resp.status_code == 200
    assert resp.json()["plate"] == "NEW1234"
    assert resp.json()["name"] == "Onix"
