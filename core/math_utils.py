"""
Numeric helpers for fuel economy ratios.

This module provides the rounding policy shared by every derived ratio
(per-refuel economy, station averages, overall economy).
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation


def round_half_away(value: float, places: int = 2) -> float:
    """
    Round a value half-away-from-zero to a fixed number of decimal places.

    Python's built-in ``round`` uses banker's rounding on the binary value,
    so ``round(2.675, 2)`` gives 2.67. Ratios are instead rounded on their
    shortest decimal representation, the way they are displayed.

    Args:
        value: The number to round.
        places: Number of decimal places to keep (default 2).

    Returns:
        The rounded value as a float, or 0.0 for NaN/infinite input.

    Example:
        >>> round_half_away(2.675)
        2.68
        >>> round_half_away(-1.005)
        -1.01
    """
    if value is None or not math.isfinite(value):
        return 0.0

    quantum = Decimal(1).scaleb(-places)
    try:
        rounded = Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return 0.0
    return float(rounded)


def safe_ratio(numerator: float, denominator: float, places: int = 2) -> float:
    """Return ``numerator / denominator`` rounded, or 0.0 when undefined."""
    if not denominator or denominator <= 0:
        return 0.0
    if not math.isfinite(numerator) or not math.isfinite(denominator):
        return 0.0
    return round_half_away(numerator / denominator, places)
