"""Vehicle-level statistics over enriched refuels."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from core.math_utils import safe_ratio
from economy.models import EnrichedRefuelEvent, StationAverage, VehicleStats

logger = logging.getLogger(__name__)


def find_most_recent(
    refuels: Sequence[EnrichedRefuelEvent],
) -> EnrichedRefuelEvent | None:
    """Refuel with the latest date; on a tie the last one in input order wins."""
    latest: EnrichedRefuelEvent | None = None
    for refuel in refuels:
        if latest is None or refuel.date >= latest.date:
            latest = refuel
    return latest


def compute_station_averages(
    refuels: Sequence[EnrichedRefuelEvent],
) -> list[StationAverage]:
    """
    Average economy per station, best first.

    Only qualifying intervals (``economy > 0``) count, so the first refuel of
    a vehicle never contributes. The station name comes from the refuel
    records themselves.
    """
    groups: dict[str | None, StationAverage] = {}

    for refuel in refuels:
        if refuel.economy <= 0:
            continue

        group = groups.get(refuel.station_id)
        if group is None:
            group = StationAverage(
                station_id=refuel.station_id,
                station_name=refuel.station_name,
            )
            groups[refuel.station_id] = group

        group.total_distance += refuel.distance_since_last
        group.total_fuel += refuel.liters
        group.refuel_count += 1

    for group in groups.values():
        group.average = safe_ratio(group.total_distance, group.total_fuel)

    # sorted() is stable, so equal averages keep first-appearance order
    return sorted(groups.values(), key=lambda group: group.average, reverse=True)


def aggregate(
    refuels: Sequence[EnrichedRefuelEvent],
    initial_odometer: int,
) -> VehicleStats:
    """
    Summarize a vehicle's enriched refuel history.

    ``total_distance`` is measured from ``initial_odometer`` to the odometer
    of the most recent refuel by date, not summed over intervals. When dates
    and odometer order disagree the two can differ.

    Args:
        refuels: Output of :func:`economy.deriver.derive_consumption`.
        initial_odometer: The vehicle's odometer when tracking began.

    Returns:
        VehicleStats; all zero for an empty history.
    """
    if not refuels:
        return VehicleStats()

    most_recent = find_most_recent(refuels)
    total_distance = most_recent.current_odometer - initial_odometer
    total_fuel = sum(refuel.liters for refuel in refuels)

    # Without a single measured interval there is no economy to report yet.
    has_interval = any(refuel.economy > 0 for refuel in refuels)
    overall_economy = safe_ratio(total_distance, total_fuel) if has_interval else 0.0

    stats = VehicleStats(
        total_refuels=len(refuels),
        total_distance=total_distance,
        total_fuel=total_fuel,
        overall_economy=overall_economy,
        station_averages=compute_station_averages(refuels),
        most_recent_refuel=most_recent,
    )

    logger.debug(
        "Aggregated %d refuels: %s km, %.2f L, %.2f km/L",
        stats.total_refuels,
        stats.total_distance,
        stats.total_fuel,
        stats.overall_economy,
    )
    return stats
