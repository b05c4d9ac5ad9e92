"""API routes for consumption statistics."""

import logging
from typing import Any

from fastapi import APIRouter

from core.api import api_route
from fuel.dependencies import UserId
from fuel.serializers import serialize
from fuel.services import StatisticsService

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/api/vehicles/{vehicle_id}/statistics")
@api_route(logger)
async def get_vehicle_statistics(vehicle_id: str, user_id: UserId) -> dict[str, Any]:
    """Totals, overall economy and station ranking for a vehicle."""
    stats = await StatisticsService.get_vehicle_stats(vehicle_id, user_id)
    return serialize(stats)
