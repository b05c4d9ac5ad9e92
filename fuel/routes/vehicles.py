"""API routes for vehicle management."""

import logging
from typing import Any

from fastapi import APIRouter

from core.api import api_route
from db.schemas import VehicleCreateModel, VehicleUpdateModel
from fuel.dependencies import UserId
from fuel.serializers import serialize
from fuel.services import VehicleService

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/api/vehicles")
@api_route(logger)
async def get_vehicles(user_id: UserId) -> list[dict[str, Any]]:
    """List the owner's vehicles, newest first."""
    vehicles = await VehicleService.get_vehicles(user_id)
    return [serialize(v) for v in vehicles]


@router.post("/api/vehicles", status_code=201)
@api_route(logger)
async def create_vehicle(
    vehicle_data: VehicleCreateModel,
    user_id: UserId,
) -> dict[str, Any]:
    """Register a new vehicle."""
    vehicle = await VehicleService.create_vehicle(user_id, vehicle_data.model_dump())
    return serialize(vehicle)


@router.get("/api/vehicles/{vehicle_id}")
@api_route(logger)
async def get_vehicle(vehicle_id: str, user_id: UserId) -> dict[str, Any]:
    """Get a single vehicle."""
    vehicle = await VehicleService.get_vehicle(vehicle_id, user_id)
    return serialize(vehicle)


@router.put("/api/vehicles/{vehicle_id}")
@api_route(logger)
async def update_vehicle(
    vehicle_id: str,
    vehicle_data: VehicleUpdateModel,
    user_id: UserId,
) -> dict[str, Any]:
    """Update a vehicle's name, plate or initial odometer."""
    update_data = vehicle_data.model_dump(exclude_unset=True, exclude_none=True)
    vehicle = await VehicleService.update_vehicle(vehicle_id, user_id, update_data)
    return serialize(vehicle)


@router.delete("/api/vehicles/{vehicle_id}")
@api_route(logger)
async def delete_vehicle(vehicle_id: str, user_id: UserId) -> dict[str, Any]:
    """Delete a vehicle and all of its refuels."""
    return await VehicleService.delete_vehicle(vehicle_id, user_id)
