from datetime import UTC, datetime

import pytest

from core.exceptions import ResourceNotFoundException, ValidationException
from db.models import Refuel, Vehicle
from fuel.services.vehicle_service import VehicleService


async def _add_refuel(vehicle_id: str, km: int, user_id: str = "user-1") -> None:
    await Refuel(
        vehicle_id=vehicle_id,
        date=datetime(2024, 1, 1, tzinfo=UTC),
        current_odometer=km,
        liters=35.0,
        total_value=200.0,
        station_id="station-1",
        station_name="Posto",
        user_id=user_id,
    ).insert()


@pytest.mark.asyncio
async def test_create_vehicle_assigns_owner(beanie_db) -> None:
    vehicle = await VehicleService.create_vehicle(
        "user-1",
        {"name": "Gol", "plate": "ABC1D23", "initial_odometer": 52000},
    )

    stored = await Vehicle.get(vehicle.id)
    assert stored is not None
    assert stored.user_id == "user-1"
    assert stored.initial_odometer == 52000
    assert stored.created_at is not None


@pytest.mark.asyncio
async def test_get_vehicles_returns_only_owned(beanie_db) -> None:
    await VehicleService.create_vehicle("user-1", {"name": "Gol"})
    await VehicleService.create_vehicle("user-2", {"name": "Uno"})

    vehicles = await VehicleService.get_vehicles("user-1")

    assert [v.name for v in vehicles] == ["Gol"]


@pytest.mark.asyncio
async def test_get_vehicle_rejects_malformed_id(beanie_db) -> None:
    with pytest.raises(ValidationException):
        await VehicleService.get_vehicle("not-an-id", "user-1")


@pytest.mark.asyncio
async def test_get_vehicle_of_another_owner_is_not_found(beanie_db) -> None:
    vehicle = await VehicleService.create_vehicle("user-1", {"name": "Gol"})

    with pytest.raises(ResourceNotFoundException):
        await VehicleService.get_vehicle(str(vehicle.id), "user-2")


@pytest.mark.asyncio
async def test_delete_vehicle_cascades_to_its_refuels_only(beanie_db) -> None:
    doomed = await VehicleService.create_vehicle("user-1", {"name": "Gol"})
    kept = await VehicleService.create_vehicle("user-1", {"name": "Uno"})
    await _add_refuel(str(doomed.id), 100)
    await _add_refuel(str(doomed.id), 500)
    await _add_refuel(str(kept.id), 300)

    result = await VehicleService.delete_vehicle(str(doomed.id), "user-1")

    assert result["status"] == "success"
    assert result["deleted_refuels"] == 2
    assert await Vehicle.get(doomed.id) is None
    assert await Refuel.find(Refuel.vehicle_id == str(doomed.id)).count() == 0
    assert await Refuel.find(Refuel.vehicle_id == str(kept.id)).count() == 1


@pytest.mark.asyncio
async def test_update_vehicle_changes_sent_fields(beanie_db) -> None:
    vehicle = await VehicleService.create_vehicle(
        "user-1", {"name": "Gol", "plate": "AAA0000"}
    )

    updated = await VehicleService.update_vehicle(
        str(vehicle.id), "user-1", {"name": "Gol G5"}
    )

    assert updated.name == "Gol G5"
    assert updated.plate == "AAA0000"


@pytest.mark.asyncio
async def test_update_initial_odometer_must_stay_below_first_refuel(beanie_db) -> None:
    vehicle = await VehicleService.create_vehicle(
        "user-1", {"name": "Gol", "initial_odometer": 1000}
    )
    await _add_refuel(str(vehicle.id), 1400)

    with pytest.raises(ValidationException):
        await VehicleService.update_vehicle(
            str(vehicle.id), "user-1", {"initial_odometer": 1400}
        )

    updated = await VehicleService.update_vehicle(
        str(vehicle.id), "user-1", {"initial_odometer": 1200}
    )
    assert updated.initial_odometer == 1200
