"""Beanie ODM document models for MongoDB collections.

Usage:
    from db.models import Refuel, Vehicle

    vehicle = await Vehicle.get(vehicle_id)
    refuels = await Refuel.find(Refuel.vehicle_id == str(vehicle.id)).to_list()
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from beanie import Document, Indexed
from pydantic import Field, field_validator
from pymongo import ASCENDING, DESCENDING, IndexModel

from date_utils import get_current_utc_time, normalize_to_utc_datetime


class Vehicle(Document):
    """Vehicle whose refuels are tracked."""

    name: str
    plate: str | None = None
    initial_odometer: int = Field(default=0, ge=0)
    user_id: Indexed(str)
    created_at: datetime = Field(default_factory=get_current_utc_time)

    @field_validator("created_at", mode="before")
    @classmethod
    def parse_created_at(cls, v: Any) -> datetime | None:
        return normalize_to_utc_datetime(v)

    class Settings:
        name = "vehicles"
        indexes = [
            IndexModel(
                [("user_id", ASCENDING), ("created_at", DESCENDING)],
                name="vehicles_user_created_idx",
            ),
        ]


class FuelStation(Document):
    """Fuel station, unique per owner by trimmed name."""

    name: str
    user_id: Indexed(str)
    created_at: datetime = Field(default_factory=get_current_utc_time)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v: Any) -> Any:
        return v.strip() if isinstance(v, str) else v

    @field_validator("created_at", mode="before")
    @classmethod
    def parse_created_at(cls, v: Any) -> datetime | None:
        return normalize_to_utc_datetime(v)

    class Settings:
        name = "stations"
        indexes = [
            IndexModel(
                [("user_id", ASCENDING), ("name", ASCENDING)],
                name="stations_user_name_idx",
                unique=True,
            ),
        ]


class Refuel(Document):
    """A single refuel of a vehicle."""

    vehicle_id: Indexed(str)
    date: datetime
    current_odometer: int
    liters: float
    price_per_liter: float | None = None
    total_value: float | None = None
    station_id: Indexed(str)
    station_name: str
    user_id: Indexed(str)
    created_at: datetime = Field(default_factory=get_current_utc_time)

    @field_validator("date", "created_at", mode="before")
    @classmethod
    def parse_datetime_fields(cls, v: Any) -> datetime | None:
        """Parse datetime fields using the centralized date_utils."""
        return normalize_to_utc_datetime(v)

    class Settings:
        name = "refuels"
        indexes = [
            IndexModel(
                [("vehicle_id", ASCENDING), ("current_odometer", ASCENDING)],
                name="refuels_vehicle_odometer_idx",
            ),
            IndexModel(
                [("user_id", ASCENDING), ("station_id", ASCENDING)],
                name="refuels_user_station_idx",
            ),
        ]


# List of all document models for Beanie initialization
ALL_DOCUMENT_MODELS = [
    Vehicle,
    FuelStation,
    Refuel,
]
