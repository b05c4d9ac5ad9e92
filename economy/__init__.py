"""Fuel consumption engine.

Pure, synchronous functions that turn a vehicle's raw refuel records into an
enriched history and summary statistics:

- deriver.py: per-refuel distance and economy, in odometer order
- aggregator.py: totals, overall economy and per-station averages
- models.py: the plain record types exchanged with callers

Callers re-run :func:`recompute` with the full record set whenever the
stored refuels change; every call is independent of the previous one.
"""

from __future__ import annotations

from collections.abc import Iterable

from economy.aggregator import aggregate, compute_station_averages, find_most_recent
from economy.deriver import derive_consumption, interval_economy, sort_by_odometer
from economy.models import (
    ConsumptionReport,
    EnrichedRefuelEvent,
    RefuelEvent,
    StationAverage,
    VehicleStats,
)


def recompute(
    records: Iterable[RefuelEvent],
    initial_odometer: int,
) -> ConsumptionReport:
    """Derive the enriched history and its statistics in one pass."""
    refuels = derive_consumption(records, initial_odometer)
    return ConsumptionReport(
        refuels=refuels,
        stats=aggregate(refuels, initial_odometer),
    )


__all__ = [
    "ConsumptionReport",
    "EnrichedRefuelEvent",
    "RefuelEvent",
    "StationAverage",
    "VehicleStats",
    "aggregate",
    "compute_station_averages",
    "derive_consumption",
    "find_most_recent",
    "interval_economy",
    "recompute",
    "sort_by_odometer",
]
