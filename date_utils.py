"""
Centralized date and time utilities for the application.

Refuel dates arrive as ISO strings, plain calendar dates or datetimes that
may or may not carry a timezone. Everything is normalized to timezone-aware
UTC here so refuels can always be compared and sorted by date.
"""

import logging
from datetime import UTC, date, datetime

from dateutil import parser

logger = logging.getLogger(__name__)


def get_current_utc_time() -> datetime:
    """Return the current time as a timezone-aware datetime object in UTC."""
    return datetime.now(UTC)


def parse_timestamp(ts: str | datetime) -> datetime | None:
    """
    Parse a timestamp string (or datetime object) and ensure it is
    timezone-aware, defaulting to UTC.

    Args:
        ts: The timestamp to parse, either as an ISO 8601 string or a
            datetime object.

    Returns:
        A timezone-aware datetime object, or None if parsing fails.
    """
    if not ts:
        logger.debug("Received empty timestamp; returning None.")
        return None

    if isinstance(ts, datetime):
        # If the datetime object is naive, assume UTC.
        if ts.tzinfo is None:
            return ts.replace(tzinfo=UTC)
        return ts

    try:
        parsed_time = parser.isoparse(ts)
        if parsed_time.tzinfo is None:
            return parsed_time.replace(tzinfo=UTC)
        return parsed_time
    except (ValueError, TypeError) as e:
        logger.warning("Failed to parse timestamp '%s': %s", ts, e)
        return None


def ensure_utc(dt: datetime | None) -> datetime | None:
    """Return the datetime as an explicit UTC-aware value."""

    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)

    return dt.astimezone(UTC)


def normalize_to_utc_datetime(value: str | datetime | date | None) -> datetime | None:
    """Normalize arbitrary date/datetime inputs to a UTC-aware datetime."""

    if value is None:
        return None

    if isinstance(value, datetime):
        return ensure_utc(value)

    if isinstance(value, date):
        return datetime.combine(value, datetime.min.time(), tzinfo=UTC)

    if isinstance(value, str):
        parsed = parse_timestamp(value)
        if parsed:
            return ensure_utc(parsed)

        try:
            parsed_date = datetime.strptime(value, "%Y-%m-%d").date()
        except ValueError:
            logger.warning(
                "Unable to interpret value '%s' as datetime; returning None.", value
            )
            return None

        return datetime.combine(parsed_date, datetime.min.time(), tzinfo=UTC)

    logger.warning("Unsupported datetime input type '%s'", type(value))
    return None
