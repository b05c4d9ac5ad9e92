"""Business logic for vehicle management."""

import logging
from typing import Any

from core.exceptions import ResourceNotFoundException, ValidationException
from db.models import Refuel, Vehicle
from fuel.serializers import parse_object_id

logger = logging.getLogger(__name__)


class VehicleService:
    """Service class for vehicle operations."""

    @staticmethod
    async def get_vehicles(user_id: str) -> list[Vehicle]:
        """
        Get the owner's vehicles, newest first.

        Args:
            user_id: Owner of the vehicles

        Returns:
            List of Vehicle models
        """
        vehicles = (
            await Vehicle.find(Vehicle.user_id == user_id)
            .sort(-Vehicle.created_at)
            .to_list()
        )
        logger.debug("Fetched %d vehicles for %s", len(vehicles), user_id)
        return vehicles

    @staticmethod
    async def get_vehicle(vehicle_id: str, user_id: str) -> Vehicle:
        """
        Get one of the owner's vehicles.

        Raises:
            ValidationException: If the ID is malformed
            ResourceNotFoundException: If no such vehicle belongs to the owner
        """
        vehicle = await Vehicle.get(parse_object_id(vehicle_id, "vehicle ID"))
        if not vehicle or vehicle.user_id != user_id:
            msg = f"Vehicle {vehicle_id} not found"
            raise ResourceNotFoundException(msg)
        return vehicle

    @staticmethod
    async def create_vehicle(user_id: str, vehicle_data: dict[str, Any]) -> Vehicle:
        """
        Register a new vehicle.

        Args:
            user_id: Owner of the vehicle
            vehicle_data: Validated vehicle fields

        Returns:
            Created Vehicle model
        """
        vehicle = Vehicle(**vehicle_data, user_id=user_id)
        await vehicle.insert()

        logger.info("Created vehicle %s (%s)", vehicle.id, vehicle.name)
        return vehicle

    @staticmethod
    async def update_vehicle(
        vehicle_id: str,
        user_id: str,
        update_data: dict[str, Any],
    ) -> Vehicle:
        """
        Update a vehicle's information.

        The initial odometer may only move while it stays below every
        recorded refuel.

        Raises:
            ResourceNotFoundException: If vehicle not found
            ValidationException: If the new initial odometer passes a refuel
        """
        vehicle = await VehicleService.get_vehicle(vehicle_id, user_id)

        new_initial = update_data.get("initial_odometer")
        if new_initial is not None and new_initial != vehicle.initial_odometer:
            first = (
                await Refuel.find(Refuel.vehicle_id == vehicle_id)
                .sort(+Refuel.current_odometer)
                .first_or_none()
            )
            if first and new_initial >= first.current_odometer:
                msg = (
                    "Initial odometer must be lower than the first refuel "
                    f"({first.current_odometer})"
                )
                raise ValidationException(msg)

        for key, value in update_data.items():
            if hasattr(vehicle, key):
                setattr(vehicle, key, value)

        await vehicle.save()

        logger.info("Updated vehicle %s: %s", vehicle_id, sorted(update_data))
        return vehicle

    @staticmethod
    async def delete_vehicle(vehicle_id: str, user_id: str) -> dict[str, Any]:
        """
        Delete a vehicle together with all of its refuels.

        Raises:
            ResourceNotFoundException: If vehicle not found
        """
        vehicle = await VehicleService.get_vehicle(vehicle_id, user_id)

        result = await Refuel.find(
            Refuel.vehicle_id == vehicle_id,
            Refuel.user_id == user_id,
        ).delete()
        deleted_refuels = result.deleted_count if result else 0

        await vehicle.delete()

        logger.info(
            "Deleted vehicle %s and %d refuels", vehicle_id, deleted_refuels
        )
        return {
            "status": "success",
            "message": "Vehicle deleted",
            "deleted_refuels": deleted_refuels,
        }
