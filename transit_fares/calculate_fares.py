"""
Transit Fare Calculator

Journeys in, fare records out. Input can come from any source (JSON export,
CSV, manual creation) as long as each record has a timestamp and two
numeric zones.

PROCESSING ORDER
----------------
    1. Validate the whole batch (any bad record rejects everything)
    2. Group journeys by calendar day, then days by continuous week
    3. Per week: farthest zone pair -> weekly cap, fresh week cap state
    4. Per day:  farthest zone pair -> daily cap,  fresh day cap state
    5. Per journey: base fare (peak / off-peak), then the cap cascade

Output follows week order, then day order, then journey order. Weeks keep
the order they were first seen in the input, so output is only chronological
when the input is.

USAGE
-----
    from transit_fares.calculate_fares import calculate_fares
    fares = calculate_fares(journeys)
"""

import logging
from collections.abc import Iterable, Mapping
from datetime import datetime

import polars as pl

from .capping import CapState, apply_caps
from .data import RateTables, PeakWindow, load_rate_tables
from .data.loaders import JOURNEY_COLUMNS
from .grouping import group_by_day, group_by_week
from .models import DayBucket, FareRecord, Journey, ZonePair
from .validation import InvalidInput, validate_journeys
from .version import VERSION

logger = logging.getLogger(__name__)


HOME_ZONE = 1
DEFAULT_FARTHEST_ZONE_PAIR = ZonePair(2, 2)

DATE_FORMAT = "%a %b %d %Y %H:%M:%S"


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def calculate_fares(
    journeys: Iterable | Mapping,
    tables: RateTables | None = None
) -> list[FareRecord]:
    """
    Calculate the capped fare of every journey in a batch.

    Args:
        journeys: Raw journey records (see validation.validate_journeys)
        tables: Rate tables (loaded from reference data if not provided)

    Returns:
        One FareRecord per journey, in week, day, journey order

    Raises:
        InvalidInput: If any journey has a bad timestamp or zone
    """
    validated = validate_journeys(journeys)

    if tables is None:
        tables = load_rate_tables()

    day_buckets = [DayBucket(day, trips) for day, trips in group_by_day(validated).items()]
    weeks = group_by_week(day_buckets)

    fares: list[FareRecord] = []
    for week, week_days in weeks.items():
        fares.extend(_calculate_week(week, week_days, tables))

    logger.info("Calculated %d fares across %d week(s)", len(fares), len(weeks))
    return fares


def _calculate_week(week: str, week_days: list[DayBucket], tables: RateTables) -> list[FareRecord]:
    """Calculate fares for one week with a fresh weekly cap state."""
    week_journeys = [j for bucket in week_days for j in bucket.journeys]
    week_zone = find_farthest_zone_pair(week_journeys)
    week_state = CapState(cap=tables.weekly_caps[week_zone])

    logger.debug("%s: farthest zone %s, weekly cap %d", week, week_zone, week_state.cap)

    fares = []
    for bucket in week_days:
        fares.extend(_calculate_day(bucket, week, week_zone, week_state, tables))
    return fares


def _calculate_day(
    bucket: DayBucket,
    week: str,
    week_zone: ZonePair,
    week_state: CapState,
    tables: RateTables
) -> list[FareRecord]:
    """Calculate fares for one day, sharing the week's cap state."""
    day_zone = find_farthest_zone_pair(bucket.journeys)
    day_state = CapState(cap=tables.daily_caps[day_zone])

    logger.debug("%s: farthest zone %s, daily cap %d", bucket.day, day_zone, day_state.cap)

    fares = []
    for journey in bucket.journeys:
        base_fare = calculate_base_fare(journey, tables)
        fare = apply_caps(base_fare, week_state, day_state)
        fares.append(FareRecord(
            date=format_date(journey.date_time),
            fare=fare,
            max_zone=week_zone,
            journey=journey,
            base_fare=base_fare,
            week=week,
        ))
    return fares


# =============================================================================
# FARTHEST ZONE PAIR
# =============================================================================

def find_farthest_zone_pair(journeys: Iterable[Journey]) -> ZonePair:
    """
    Pick the zone pair used to look up a day's or week's cap.

    SCAN POLICY
    -----------
    1. The first journey crossing zones (from != to) wins immediately.
    2. Otherwise the last home-zone journey (1 -> 1) is used.
    3. Otherwise (2, 2).

    Only defined for zones 1 and 2.
    """
    farthest = DEFAULT_FARTHEST_ZONE_PAIR
    for journey in journeys:
        if journey.from_zone != journey.to_zone:
            return journey.zone_pair
        if journey.from_zone == HOME_ZONE:
            farthest = journey.zone_pair
    return farthest


# =============================================================================
# BASE FARE
# =============================================================================

def day_class(date_time: datetime) -> str:
    """'weekend' for Saturday and Sunday, else 'weekday'."""
    return "weekend" if date_time.weekday() >= 5 else "weekday"


def is_peak_hour(date_time: datetime, peak_hours: Mapping[str, tuple[PeakWindow, ...]]) -> bool:
    """True if the time of day falls inside any inclusive peak window."""
    moment = date_time.time().replace(microsecond=0)
    return any(window.contains(moment) for window in peak_hours[day_class(date_time)])


def calculate_base_fare(journey: Journey, tables: RateTables) -> int:
    """Uncapped fare from the peak or off-peak table."""
    if is_peak_hour(journey.date_time, tables.peak_hours):
        return tables.peak_fares[journey.zone_pair]
    return tables.off_peak_fares[journey.zone_pair]


def format_date(date_time: datetime) -> str:
    """Human readable timestamp, e.g. 'Tue Jul 29 2025 16:50:00'."""
    return date_time.strftime(DATE_FORMAT)


# =============================================================================
# DATAFRAME INTERFACE
# =============================================================================

def calculate_fares_df(
    df: pl.DataFrame,
    tables: RateTables | None = None
) -> pl.DataFrame:
    """
    Calculate fares for a journey DataFrame.

    Args:
        df: DataFrame with columns date_time, from_zone, to_zone
        tables: Rate tables (loaded from reference data if not provided)

    Returns:
        DataFrame in fare order with columns:
            - date_time, from_zone, to_zone (validated inputs)
            - week, date
            - base_fare, fare
            - max_zone_from, max_zone_to (week's farthest zone pair)
            - calculator_version
    """
    missing = [c for c in JOURNEY_COLUMNS if c not in df.columns]
    if missing:
        raise InvalidInput(f"Missing required journey column(s): {', '.join(missing)}")

    fares = calculate_fares(df.select(JOURNEY_COLUMNS).to_dicts(), tables)
    return fares_to_frame(fares)


def fares_to_frame(fares: list[FareRecord]) -> pl.DataFrame:
    """Flatten fare records into a DataFrame."""
    return pl.DataFrame(
        {
            "date_time": [f.journey.date_time for f in fares],
            "from_zone": [f.journey.from_zone for f in fares],
            "to_zone": [f.journey.to_zone for f in fares],
            "week": [f.week for f in fares],
            "date": [f.date for f in fares],
            "base_fare": [f.base_fare for f in fares],
            "fare": [f.fare for f in fares],
            "max_zone_from": [f.max_zone.from_zone for f in fares],
            "max_zone_to": [f.max_zone.to_zone for f in fares],
        },
        schema={
            "date_time": pl.Datetime,
            "from_zone": pl.Int64,
            "to_zone": pl.Int64,
            "week": pl.Utf8,
            "date": pl.Utf8,
            "base_fare": pl.Int64,
            "fare": pl.Int64,
            "max_zone_from": pl.Int64,
            "max_zone_to": pl.Int64,
        },
    ).with_columns(pl.lit(VERSION).alias("calculator_version"))


__all__ = [
    "calculate_fares",
    "calculate_fares_df",
    "fares_to_frame",
    "find_farthest_zone_pair",
    "is_peak_hour",
    "calculate_base_fare",
    "format_date",
]
