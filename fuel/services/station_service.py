"""Business logic for fuel stations.

Stations are never created directly: recording a refuel resolves its
station by name. Renaming a station rewrites the name stored on every refuel
that references it.
"""

import logging

from beanie.operators import Set

from core.exceptions import (
    DuplicateResourceException,
    ResourceNotFoundException,
    ValidationException,
)
from db.models import FuelStation, Refuel
from fuel.serializers import parse_object_id

logger = logging.getLogger(__name__)


class StationService:
    """Service class for fuel station operations."""

    @staticmethod
    async def get_stations(user_id: str) -> list[FuelStation]:
        """Get the owner's stations ordered by name."""
        return (
            await FuelStation.find(FuelStation.user_id == user_id)
            .sort(+FuelStation.name)
            .to_list()
        )

    @staticmethod
    async def get_station(station_id: str, user_id: str) -> FuelStation:
        """
        Get one of the owner's stations.

        Raises:
            ResourceNotFoundException: If no such station belongs to the owner
        """
        station = await FuelStation.get(parse_object_id(station_id, "station ID"))
        if not station or station.user_id != user_id:
            msg = f"Station {station_id} not found"
            raise ResourceNotFoundException(msg)
        return station

    @staticmethod
    async def resolve_station(user_id: str, name: str) -> FuelStation:
        """
        Return the owner's station with this name, creating it if needed.

        Names are compared exactly after trimming surrounding whitespace.

        Raises:
            ValidationException: If the name is blank
        """
        name = (name or "").strip()
        if not name:
            msg = "Station name is required"
            raise ValidationException(msg)

        existing = await FuelStation.find_one(
            FuelStation.user_id == user_id,
            FuelStation.name == name,
        )
        if existing:
            return existing

        station = FuelStation(name=name, user_id=user_id)
        await station.insert()

        logger.info("Created station %s (%s)", station.id, name)
        return station

    @staticmethod
    async def rename_station(
        station_id: str,
        user_id: str,
        new_name: str,
    ) -> tuple[FuelStation, int]:
        """
        Rename a station and propagate the name to its refuels.

        Returns:
            The updated station and the number of refuels rewritten

        Raises:
            ValidationException: If the name is blank
            ResourceNotFoundException: If station not found
            DuplicateResourceException: If another station has that name
        """
        new_name = (new_name or "").strip()
        if not new_name:
            msg = "Station name is required"
            raise ValidationException(msg)

        station = await StationService.get_station(station_id, user_id)

        clash = await FuelStation.find_one(
            FuelStation.user_id == user_id,
            FuelStation.name == new_name,
        )
        if clash and clash.id != station.id:
            msg = f"A station named '{new_name}' already exists"
            raise DuplicateResourceException(msg)

        station.name = new_name
        await station.save()

        result = await Refuel.find(
            Refuel.station_id == station_id,
            Refuel.user_id == user_id,
        ).update_many(Set({Refuel.station_name: new_name}))
        updated_refuels = result.modified_count if result else 0

        logger.info(
            "Renamed station %s to '%s' (%d refuels updated)",
            station_id,
            new_name,
            updated_refuels,
        )
        return station, updated_refuels
