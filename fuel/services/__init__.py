"""Fuel tracking services."""

from fuel.services.refuel_service import RefuelService
from fuel.services.station_service import StationService
from fuel.services.statistics_service import StatisticsService
from fuel.services.vehicle_service import VehicleService

__all__ = [
    "RefuelService",
    "StationService",
    "StatisticsService",
    "VehicleService",
]
