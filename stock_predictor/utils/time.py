"""
Calendar-day utilities for daily series.

All helpers work on datetime.date values with day-granularity arithmetic.
"""

from datetime import date, datetime, timedelta, timezone
from typing import Optional

MONDAY = 0
FRIDAY = 4


def today_utc() -> date:
    """
    Get the current calendar day in UTC.

    Returns:
        Today's date
    """
    return datetime.now(timezone.utc).date()


def resolve_end_date(end_date: Optional[date] = None) -> date:
    """
    Use the supplied end date, falling back to today.

    Args:
        end_date: Optional explicit last day of a series

    Returns:
        The date a generated series should end on
    """
    if end_date is not None:
        return end_date
    return today_utc()


def trailing_dates(end_date: date, days: int) -> list[date]:
    """
    Build `days` consecutive calendar days ending on `end_date`.

    Args:
        end_date: Last day in the range (inclusive)
        days: Number of days

    Returns:
        Dates ordered oldest to newest
    """
    return [end_date - timedelta(days=days - 1 - i) for i in range(days)]


def following_dates(after: date, days: int) -> list[date]:
    """
    Build `days` consecutive calendar days starting the day after `after`.

    Args:
        after: Last known day
        days: Number of days

    Returns:
        Dates ordered oldest to newest
    """
    return [after + timedelta(days=i) for i in range(1, days + 1)]


def is_monday(day: date) -> bool:
    return day.weekday() == MONDAY


def is_friday(day: date) -> bool:
    return day.weekday() == FRIDAY


def format_date(day: date) -> str:
    """
    Format a calendar day for the presentation layer.

    Args:
        day: Date to format

    Returns:
        ISO8601 date string (YYYY-MM-DD)
    """
    return day.isoformat()
