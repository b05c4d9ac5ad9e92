"""
Pydantic schemas for request validation and API responses.

This module contains Pydantic models used for data validation across the application,
separating API-specific schemas from Beanie database documents.
"""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator, model_validator


def _strip(value: str | None) -> str | None:
    return value.strip() if isinstance(value, str) else value


class VehicleCreateModel(BaseModel):
    """Model for registering a vehicle."""

    name: str = Field(..., min_length=1)
    plate: str | None = None
    initial_odometer: int = Field(0, ge=0)

    @field_validator("name", "plate", mode="before")
    @classmethod
    def strip_text(cls, v: str | None) -> str | None:
        return _strip(v)


class VehicleUpdateModel(BaseModel):
    """Partial vehicle update; only the fields sent are changed."""

    name: str | None = Field(None, min_length=1)
    plate: str | None = None
    initial_odometer: int | None = Field(None, ge=0)

    @field_validator("name", "plate", mode="before")
    @classmethod
    def strip_text(cls, v: str | None) -> str | None:
        return _strip(v)


class StationRenameModel(BaseModel):
    """Model for renaming a fuel station."""

    name: str = Field(..., min_length=1)

    @field_validator("name", mode="before")
    @classmethod
    def strip_text(cls, v: str | None) -> str | None:
        return _strip(v)


class RefuelCreateModel(BaseModel):
    """Model for recording a refuel.

    ``liters`` may be omitted when ``price_per_liter`` is given; it is then
    derived from the amount paid.
    """

    date: datetime | str
    current_odometer: int = Field(..., ge=0)
    liters: float | None = Field(None, gt=0)
    price_per_liter: float | None = Field(None, gt=0)
    total_value: float = Field(..., gt=0)
    station_name: str = Field(..., min_length=1)

    @field_validator("station_name", mode="before")
    @classmethod
    def strip_text(cls, v: str | None) -> str | None:
        return _strip(v)

    @model_validator(mode="after")
    def require_quantity(self) -> "RefuelCreateModel":
        if self.liters is None and self.price_per_liter is None:
            msg = "Either liters or price_per_liter is required"
            raise ValueError(msg)
        return self
