"""Conversion between stored documents, API payloads and engine records."""

from typing import Any

from beanie import Document
from bson import ObjectId
from pydantic import BaseModel

from core.exceptions import ValidationException
from db.models import Refuel
from economy import RefuelEvent


def parse_object_id(value: str, label: str = "ID") -> ObjectId:
    """Parse a document id, rejecting malformed values.

    Raises:
        ValidationException: If the value is not a valid ObjectId
    """
    if not ObjectId.is_valid(value):
        msg = f"Invalid {label}"
        raise ValidationException(msg)
    return ObjectId(value)


def serialize(model: Document | BaseModel) -> dict[str, Any]:
    """JSON-compatible dict for a document or engine model."""
    return model.model_dump(mode="json", exclude={"revision_id"})


def to_refuel_event(refuel: Refuel) -> RefuelEvent:
    """Strip a stored refuel down to the fields the engine works with."""
    return RefuelEvent(
        id=str(refuel.id) if refuel.id else None,
        vehicle_id=refuel.vehicle_id,
        date=refuel.date,
        current_odometer=refuel.current_odometer,
        liters=refuel.liters,
        price_per_liter=refuel.price_per_liter,
        total_value=refuel.total_value,
        station_id=refuel.station_id,
        station_name=refuel.station_name,
        user_id=refuel.user_id,
    )
