"""API routes for fuel stations."""

import logging
from typing import Any

from fastapi import APIRouter

from core.api import api_route
from db.schemas import StationRenameModel
from fuel.dependencies import UserId
from fuel.serializers import serialize
from fuel.services import StationService

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/api/stations")
@api_route(logger)
async def get_stations(user_id: UserId) -> list[dict[str, Any]]:
    """List the owner's stations by name."""
    stations = await StationService.get_stations(user_id)
    return [serialize(s) for s in stations]


@router.put("/api/stations/{station_id}")
@api_route(logger)
async def rename_station(
    station_id: str,
    payload: StationRenameModel,
    user_id: UserId,
) -> dict[str, Any]:
    """Rename a station; refuels at that station pick up the new name."""
    station, updated_refuels = await StationService.rename_station(
        station_id, user_id, payload.name
    )
    return {**serialize(station), "updated_refuels": updated_refuels}
