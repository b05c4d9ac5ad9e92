"""Per-refuel distance and economy derivation.

Refuels are always processed in ascending odometer order. Odometer readings
are monotonic by construction, dates are typed in by hand, so the odometer is
what decides which fill came before which.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

from core.math_utils import round_half_away
from economy.models import EnrichedRefuelEvent, RefuelEvent

logger = logging.getLogger(__name__)


def interval_economy(distance: float, liters: float) -> float:
    """Economy of one interval, or 0 when the interval does not qualify."""
    if not math.isfinite(distance) or not math.isfinite(liters):
        return 0.0
    if distance <= 0 or liters <= 0:
        return 0.0
    return round_half_away(distance / liters)


def sort_by_odometer(records: Iterable[RefuelEvent]) -> list[RefuelEvent]:
    """Return refuels in ascending odometer order, ties in input order."""
    return sorted(records, key=lambda record: record.current_odometer)


def derive_consumption(
    records: Iterable[RefuelEvent],
    initial_odometer: int,
) -> list[EnrichedRefuelEvent]:
    """
    Tag each refuel with the distance driven since the previous fill and the
    economy over that distance.

    The earliest refuel measures from ``initial_odometer`` but always reports
    an economy of 0: the tank level before tracking started is unknown.

    Args:
        records: Refuels of a single vehicle, in any order.
        initial_odometer: The vehicle's odometer when tracking began.

    Returns:
        The same refuels re-ordered by ascending odometer, enriched.
    """
    ordered = sort_by_odometer(records)
    enriched: list[EnrichedRefuelEvent] = []

    previous: RefuelEvent | None = None
    for record in ordered:
        if previous is None:
            distance = record.current_odometer - initial_odometer
            economy = 0.0
        else:
            distance = record.current_odometer - previous.current_odometer
            economy = interval_economy(distance, record.liters)

        enriched.append(
            EnrichedRefuelEvent(
                **record.model_dump(include=set(RefuelEvent.model_fields)),
                distance_since_last=distance,
                economy=economy,
            ),
        )
        previous = record

    logger.debug(
        "Derived consumption for %d refuels (initial odometer %s)",
        len(enriched),
        initial_odometer,
    )
    return enriched
