"""Fuel tracking package.

This package provides:
- Vehicle management (CRUD, deleting a vehicle removes its refuels)
- Fuel stations, resolved by name when a refuel is recorded
- Refuel recording with odometer validation
- Consumption history and statistics computed by the ``economy`` engine

The package is organized into:
- routes/: API endpoint handlers organized by domain
- services/: Business logic and data access
- serializers.py: Data transformation utilities
"""

from fastapi import APIRouter

from fuel.routes import refuels, stations, statistics, vehicles

# Create main router that aggregates all fuel-related routes
router = APIRouter()

router.include_router(vehicles.router, tags=["vehicles"])
router.include_router(stations.router, tags=["stations"])
router.include_router(refuels.router, tags=["refuels"])
router.include_router(statistics.router, tags=["statistics"])

__all__ = ["router"]
