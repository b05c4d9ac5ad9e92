"""Database package for MongoDB operations using Beanie ODM.

Modules:
    manager: DatabaseManager singleton for connection handling
    models: Beanie Document models for all collections
    schemas: Pydantic request models for the API

Usage:
    from db.models import FuelStation, Refuel, Vehicle

    vehicles = await Vehicle.find(Vehicle.user_id == user_id).to_list()
"""

from db.manager import DatabaseManager, db_manager
from db.models import ALL_DOCUMENT_MODELS, FuelStation, Refuel, Vehicle

__all__ = [
    "ALL_DOCUMENT_MODELS",
    "DatabaseManager",
    "FuelStation",
    "Refuel",
    "Vehicle",
    "db_manager",
]
