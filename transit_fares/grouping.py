"""
Journey Grouping

Partitions journeys into calendar days, then days into continuous weeks.

CONTINUOUS WEEK NUMBERING
-------------------------
Weeks are counted from a fixed reference Monday (1969-12-29) rather than
per calendar year, so a week containing Dec 31 and Jan 1 stays one bucket
and the counter never resets at a year boundary.

Both groupings keep first-seen key order. If the input is not chronological
the week order is not either.
"""

from collections.abc import Iterable
from datetime import date, timedelta

from .models import DayBucket, Journey


EPOCH_MONDAY = date(1969, 12, 29)


def group_by_day(journeys: Iterable[Journey]) -> dict[date, list[Journey]]:
    """Group journeys by local calendar date, preserving input order."""
    grouped: dict[date, list[Journey]] = {}
    for journey in journeys:
        grouped.setdefault(journey.date_time.date(), []).append(journey)
    return grouped


def continuous_week_number(day: date) -> int:
    """
    Week number counted from EPOCH_MONDAY (which is week 1).

    Sunday is day 7 of the week, so it belongs with the Monday six days
    earlier.
    """
    monday = day - timedelta(days=day.isoweekday() - 1)
    return (monday - EPOCH_MONDAY).days // 7 + 1


def week_key(day: date) -> str:
    """Week bucket key, e.g. "Week2901" for the week of 2025-07-28."""
    return f"Week{continuous_week_number(day):02d}"


def group_by_week(day_buckets: Iterable[DayBucket]) -> dict[str, list[DayBucket]]:
    """Group day buckets by continuous week, preserving first-seen order."""
    grouped: dict[str, list[DayBucket]] = {}
    for bucket in day_buckets:
        grouped.setdefault(week_key(bucket.day), []).append(bucket)
    return grouped
