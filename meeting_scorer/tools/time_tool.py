"""
Time Tool

Date/time parsing helpers shared by the schemas and the scoring stages.
All inputs are assumed to already be in one reference timezone.

Functions:
- parse_clock_time(value): Parse "HH:MM" / "HH:MM:SS" into (hour, minute)
- time_to_minutes(value): Minutes since midnight for a clock time
- format_hour(hour): "HH:00" label for an hour bucket
- parse_iso_date(value): Parse a YYYY-MM-DD string
- day_of_week(value): English weekday name for an ISO date
- date_range(start, end): Inclusive list of ISO dates
"""

import logging
from datetime import date, datetime, timedelta
from typing import Any, List, Optional, Tuple

from meeting_scorer.constants.constants import DayOfWeek

logger = logging.getLogger(__name__)


def parse_clock_time(value: Any) -> Tuple[int, int]:
    """
    Parse a 24-hour clock time.

    Supports "14:00", "9:30" and the database form "14:00:00". Seconds are
    ignored. "24:00" is accepted as end-of-day.

    Raises:
        ValueError: If the value is not a valid clock time

    Example:
        >>> parse_clock_time("14:30")
        (14, 30)
        >>> parse_clock_time("09:00:00")
        (9, 0)
    """
    if not isinstance(value, str):
        raise ValueError(f"Time must be a string, got {type(value).__name__}")

    parts = value.strip().split(":")
    if len(parts) not in (2, 3) or not all(part.isdigit() for part in parts):
        raise ValueError(f"Time must follow HH:MM format: {value!r}")

    hour, minute = int(parts[0]), int(parts[1])
    second = int(parts[2]) if len(parts) == 3 else 0

    if hour == 24 and minute == 0 and second == 0:
        return hour, minute
    if not 0 <= hour <= 23 or not 0 <= minute <= 59 or not 0 <= second <= 59:
        raise ValueError(f"Time out of range: {value!r}")

    return hour, minute


def time_to_minutes(value: str) -> int:
    """
    Minutes since midnight.

    Example:
        >>> time_to_minutes("14:30")
        870
    """
    hour, minute = parse_clock_time(value)
    return hour * 60 + minute


def format_hour(hour: int) -> str:
    """
    Label for an hour bucket.

    Example:
        >>> format_hour(9)
        '09:00'
    """
    return f"{hour:02d}:00"


def parse_iso_date(value: Any) -> Optional[date]:
    """
    Parse a YYYY-MM-DD date string to a date object.

    Args:
        value: date or string

    Returns:
        date object or None if parsing fails
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        return value.date()

    if isinstance(value, date):
        return value

    value_str = str(value).strip()
    if not value_str:
        return None

    try:
        return date.fromisoformat(value_str.split("T")[0])
    except ValueError:
        logger.debug(f"Failed to parse date: {value}")
        return None


def day_of_week(value: Any) -> Optional[DayOfWeek]:
    """
    English weekday for an ISO date, independent of the process locale.

    Example:
        >>> day_of_week("2024-01-17")
        <DayOfWeek.WEDNESDAY: 'Wednesday'>
    """
    parsed = parse_iso_date(value)
    if parsed is None:
        return None
    return DayOfWeek.from_weekday(parsed.weekday())


def date_range(start: Any, end: Any) -> List[str]:
    """
    Inclusive list of ISO dates from start to end.

    Returns an empty list if either bound is unparseable or end < start.

    Example:
        >>> date_range("2024-01-30", "2024-02-01")
        ['2024-01-30', '2024-01-31', '2024-02-01']
    """
    start_date = parse_iso_date(start)
    end_date = parse_iso_date(end)

    if start_date is None or end_date is None:
        return []

    days = (end_date - start_date).days
    return [(start_date + timedelta(days=offset)).isoformat() for offset in range(days + 1)]
