"""Business logic for recording and removing refuels."""

import logging
from typing import Any

from core.exceptions import ResourceNotFoundException, ValidationException
from date_utils import normalize_to_utc_datetime
from db.models import Refuel
from fuel.serializers import parse_object_id
from fuel.services.station_service import StationService
from fuel.services.vehicle_service import VehicleService

logger = logging.getLogger(__name__)


class RefuelService:
    """Service class for refuel operations."""

    @staticmethod
    async def get_refuels(vehicle_id: str, user_id: str) -> list[Refuel]:
        """
        Get all of the owner's refuels for a vehicle, by ascending odometer.

        The vehicle itself is not looked up; callers resolve it first.
        """
        return (
            await Refuel.find(
                Refuel.vehicle_id == vehicle_id,
                Refuel.user_id == user_id,
            )
            .sort(+Refuel.current_odometer)
            .to_list()
        )

    @staticmethod
    def resolve_liters(
        liters: float | None,
        price_per_liter: float | None,
        total_value: float | None,
    ) -> float:
        """
        Quantity of fuel for a refuel.

        An explicit quantity wins; otherwise it is what the amount paid buys
        at the given price.

        Raises:
            ValidationException: If no positive quantity can be determined
        """
        if liters is None and price_per_liter and total_value:
            liters = total_value / price_per_liter

        if liters is None or liters <= 0:
            msg = "Fuel quantity must be a positive number"
            raise ValidationException(msg)
        return liters

    @staticmethod
    async def get_minimum_odometer(vehicle_id: str, initial_odometer: int) -> int:
        """Reading the next refuel's odometer has to exceed."""
        highest = (
            await Refuel.find(Refuel.vehicle_id == vehicle_id)
            .sort(-Refuel.current_odometer)
            .first_or_none()
        )
        return highest.current_odometer if highest else initial_odometer

    @staticmethod
    async def create_refuel(
        vehicle_id: str,
        user_id: str,
        refuel_data: dict[str, Any],
    ) -> Refuel:
        """
        Record a refuel for one of the owner's vehicles.

        The station is resolved by name, creating it on first use.

        Args:
            vehicle_id: Vehicle being refueled
            user_id: Owner of the vehicle
            refuel_data: Validated refuel fields

        Returns:
            Created Refuel model

        Raises:
            ResourceNotFoundException: If vehicle not found
            ValidationException: If the odometer does not advance, or the
                date or quantities are invalid
        """
        vehicle = await VehicleService.get_vehicle(vehicle_id, user_id)

        refuel_date = normalize_to_utc_datetime(refuel_data["date"])
        if refuel_date is None:
            msg = f"Invalid date value: {refuel_data['date']}"
            raise ValidationException(msg)

        current_odometer = refuel_data["current_odometer"]
        minimum = await RefuelService.get_minimum_odometer(
            vehicle_id, vehicle.initial_odometer
        )
        if current_odometer <= minimum:
            msg = f"Odometer must be greater than {minimum} km"
            raise ValidationException(msg)

        total_value = refuel_data.get("total_value")
        if total_value is None or total_value <= 0:
            msg = "Total value must be a positive number"
            raise ValidationException(msg)

        price_per_liter = refuel_data.get("price_per_liter")
        liters = RefuelService.resolve_liters(
            refuel_data.get("liters"), price_per_liter, total_value
        )

        station = await StationService.resolve_station(
            user_id, refuel_data.get("station_name", "")
        )

        refuel = Refuel(
            vehicle_id=vehicle_id,
            date=refuel_date,
            current_odometer=current_odometer,
            liters=liters,
            price_per_liter=price_per_liter,
            total_value=total_value,
            station_id=str(station.id),
            station_name=station.name,
            user_id=user_id,
        )
        await refuel.insert()

        logger.info(
            "Recorded refuel %s for vehicle %s at %s km",
            refuel.id,
            vehicle_id,
            current_odometer,
        )
        return refuel

    @staticmethod
    async def delete_refuel(refuel_id: str, user_id: str) -> dict[str, str]:
        """
        Delete a refuel.

        Raises:
            ResourceNotFoundException: If refuel not found
        """
        refuel = await Refuel.get(parse_object_id(refuel_id, "refuel ID"))
        if not refuel or refuel.user_id != user_id:
            msg = f"Refuel {refuel_id} not found"
            raise ResourceNotFoundException(msg)

        await refuel.delete()

        logger.info("Deleted refuel %s", refuel_id)
        return {"status": "success", "message": "Refuel deleted"}
