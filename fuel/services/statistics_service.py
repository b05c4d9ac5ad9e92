"""Service feeding stored refuels through the consumption engine."""

import logging
from typing import Literal

from economy import ConsumptionReport, EnrichedRefuelEvent, VehicleStats, recompute
from fuel.serializers import to_refuel_event
from fuel.services.refuel_service import RefuelService
from fuel.services.vehicle_service import VehicleService

logger = logging.getLogger(__name__)

HistoryOrder = Literal["odometer", "date"]


class StatisticsService:
    """Service class for consumption history and statistics."""

    @staticmethod
    async def get_consumption_report(
        vehicle_id: str,
        user_id: str,
    ) -> ConsumptionReport:
        """
        Recompute a vehicle's enriched history and statistics from scratch.

        Every call reads the full current refuel set, so the result always
        reflects the latest writes.

        Raises:
            ResourceNotFoundException: If vehicle not found
        """
        vehicle = await VehicleService.get_vehicle(vehicle_id, user_id)
        refuels = await RefuelService.get_refuels(vehicle_id, user_id)

        report = recompute(
            [to_refuel_event(refuel) for refuel in refuels],
            vehicle.initial_odometer,
        )

        logger.debug(
            "Recomputed consumption for vehicle %s: %d refuels",
            vehicle_id,
            report.stats.total_refuels,
        )
        return report

    @staticmethod
    async def get_refuel_history(
        vehicle_id: str,
        user_id: str,
        order: HistoryOrder = "odometer",
    ) -> list[EnrichedRefuelEvent]:
        """
        Enriched refuels of a vehicle.

        Args:
            vehicle_id: Vehicle to report on
            user_id: Owner of the vehicle
            order: "odometer" for ascending odometer, "date" for newest first
        """
        report = await StatisticsService.get_consumption_report(vehicle_id, user_id)
        if order == "date":
            return sorted(report.refuels, key=lambda r: r.date, reverse=True)
        return report.refuels

    @staticmethod
    async def get_vehicle_stats(vehicle_id: str, user_id: str) -> VehicleStats:
        """Summary statistics of a vehicle's refuels."""
        report = await StatisticsService.get_consumption_report(vehicle_id, user_id)
        return report.stats
