"""API routes for recording refuels and reading the enriched history."""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Query

from core.api import api_route
from db.schemas import RefuelCreateModel
from fuel.dependencies import UserId
from fuel.serializers import serialize
from fuel.services import RefuelService, StatisticsService
from fuel.services.statistics_service import HistoryOrder

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/api/vehicles/{vehicle_id}/refuels")
@api_route(logger)
async def get_refuels(
    vehicle_id: str,
    user_id: UserId,
    order: Annotated[
        HistoryOrder,
        Query(description="'odometer' (ascending) or 'date' (newest first)"),
    ] = "odometer",
) -> list[dict[str, Any]]:
    """Refuels of a vehicle with distance and economy per interval."""
    refuels = await StatisticsService.get_refuel_history(vehicle_id, user_id, order)
    return [serialize(r) for r in refuels]


@router.post("/api/vehicles/{vehicle_id}/refuels", status_code=201)
@api_route(logger)
async def create_refuel(
    vehicle_id: str,
    refuel_data: RefuelCreateModel,
    user_id: UserId,
) -> dict[str, Any]:
    """Record a refuel, creating its station on first use."""
    refuel = await RefuelService.create_refuel(
        vehicle_id, user_id, refuel_data.model_dump()
    )
    return serialize(refuel)


@router.delete("/api/refuels/{refuel_id}")
@api_route(logger)
async def delete_refuel(refuel_id: str, user_id: UserId) -> dict[str, str]:
    """Delete a refuel."""
    return await RefuelService.delete_refuel(refuel_id, user_id)
