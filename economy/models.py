"""Plain record types consumed and produced by the consumption engine.

These models carry no storage concerns: the storage layer converts its
documents into :class:`RefuelEvent` before handing them to the engine.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator

from date_utils import normalize_to_utc_datetime


class RefuelEvent(BaseModel):
    """A refuel as recorded by the user."""

    id: str | None = None
    vehicle_id: str | None = None
    date: datetime
    current_odometer: int
    liters: float
    price_per_liter: float | None = None
    total_value: float | None = None
    station_id: str | None = None
    station_name: str | None = None
    user_id: str | None = None

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v: Any) -> datetime | None:
        """Normalize dates to timezone-aware UTC so they always compare."""
        return normalize_to_utc_datetime(v)


class EnrichedRefuelEvent(RefuelEvent):
    """A refuel with the distance and economy of the interval it closes."""

    distance_since_last: int = 0
    economy: float = 0.0


class StationAverage(BaseModel):
    """Average economy over the qualifying intervals of one fuel station."""

    station_id: str | None = None
    station_name: str | None = None
    average: float = 0.0
    refuel_count: int = 0
    total_distance: int = 0
    total_fuel: float = 0.0


class VehicleStats(BaseModel):
    """Summary of a vehicle's refuel history."""

    total_refuels: int = 0
    total_distance: int = 0
    total_fuel: float = 0.0
    overall_economy: float = 0.0
    station_averages: list[StationAverage] = Field(default_factory=list)
    most_recent_refuel: EnrichedRefuelEvent | None = None


class ConsumptionReport(BaseModel):
    """Enriched history plus statistics computed from one record set."""

    refuels: list[EnrichedRefuelEvent] = Field(default_factory=list)
    stats: VehicleStats = Field(default_factory=VehicleStats)
