"""
Transit Fare Data

Reference tables for fares, caps and peak hours, and loaders for journey
batches.

Structure:
    - reference/: Static reference data (fare tables, caps, peak hours)
    - loaders/: Journey batch loaders (JSON, CSV)

The engine never reads these files itself. Callers pass a RateTables value
(or let calculate_fares load the defaults), so regional variants can be
swapped in by pointing load_rate_tables at another directory.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import time
from pathlib import Path
from types import MappingProxyType
from typing import NamedTuple

import polars as pl

from ..models import ZonePair
from .reference import PEAK_HOURS, DAY_CLASSES
from .loaders import load_journeys


REFERENCE_DIR = Path(__file__).parent / "reference"

FARE_TABLES = ["peak_fares", "off_peak_fares"]
CAP_TABLES = ["daily_caps", "weekly_caps"]


# =============================================================================
# TYPES
# =============================================================================

class PeakWindow(NamedTuple):
    """Inclusive [start, end] time-of-day interval."""
    start: time
    end: time

    def contains(self, moment: time) -> bool:
        return self.start <= moment <= self.end


@dataclass(frozen=True, slots=True)
class RateTables:
    """
    Read-only lookup tables supplied to the fare engine.

    Attributes:
        peak_fares      - Fare per zone pair inside a peak window
        off_peak_fares  - Fare per zone pair outside peak windows
        daily_caps      - Daily cap per farthest zone pair
        weekly_caps     - Weekly cap per farthest zone pair
        peak_hours      - Peak windows per day class ("weekday", "weekend")
    """
    peak_fares: Mapping[ZonePair, int]
    off_peak_fares: Mapping[ZonePair, int]
    daily_caps: Mapping[ZonePair, int]
    weekly_caps: Mapping[ZonePair, int]
    peak_hours: Mapping[str, tuple[PeakWindow, ...]]


# =============================================================================
# LOADERS
# =============================================================================

def load_fare_table(name: str, reference_dir: Path | None = None) -> dict[ZonePair, int]:
    """
    Load a zone-pair table from wide CSV format.

    The CSV has one row per from_zone and one zone_N column per destination
    zone. It is unpivoted to long format before building the lookup.

    Args:
        name: Table name without extension (e.g. "peak_fares")
        reference_dir: Directory holding the CSV (defaults to REFERENCE_DIR)

    Returns:
        Mapping of ZonePair -> amount
    """
    reference_dir = reference_dir or REFERENCE_DIR
    table = pl.read_csv(reference_dir / f"{name}.csv")
    zone_cols = [c for c in table.columns if c.startswith("zone_")]

    long = (
        table
        .unpivot(
            index=["from_zone"],
            on=zone_cols,
            variable_name="_zone_col",
            value_name="amount"
        )
        .with_columns(
            pl.col("_zone_col").str.replace("zone_", "").cast(pl.Int64).alias("to_zone")
        )
        .drop("_zone_col")
        .drop_nulls("amount")
    )

    return {
        ZonePair(row["from_zone"], row["to_zone"]): row["amount"]
        for row in long.iter_rows(named=True)
    }


def _parse_time(text: str) -> time:
    hours, minutes, seconds = (int(part) for part in text.split(":"))
    return time(hours, minutes, seconds)


def load_peak_hours(raw: Mapping = PEAK_HOURS) -> dict[str, tuple[PeakWindow, ...]]:
    """Parse peak hour strings into PeakWindow tuples per day class."""
    return {
        day_class: tuple(
            PeakWindow(_parse_time(start), _parse_time(end))
            for start, end in windows.values()
        )
        for day_class, windows in raw.items()
    }


def load_rate_tables(reference_dir: Path | None = None) -> RateTables:
    """
    Load and validate all reference tables.

    Args:
        reference_dir: Directory with the four CSV tables (defaults to the
            bundled reference data)

    Raises:
        ValueError: If the tables are inconsistent (see validate_rate_tables)
    """
    tables = RateTables(
        peak_fares=MappingProxyType(load_fare_table("peak_fares", reference_dir)),
        off_peak_fares=MappingProxyType(load_fare_table("off_peak_fares", reference_dir)),
        daily_caps=MappingProxyType(load_fare_table("daily_caps", reference_dir)),
        weekly_caps=MappingProxyType(load_fare_table("weekly_caps", reference_dir)),
        peak_hours=MappingProxyType(load_peak_hours()),
    )
    validate_rate_tables(tables)
    return tables


# =============================================================================
# VALIDATION
# =============================================================================

def validate_rate_tables(tables: RateTables) -> None:
    """
    Validate reference table integrity.

    Raises ValueError listing every issue found. Called from
    load_rate_tables to fail fast on configuration errors.
    """
    errors = []

    priced_pairs = set(tables.peak_fares)
    if set(tables.off_peak_fares) != priced_pairs:
        errors.append("peak_fares and off_peak_fares cover different zone pairs")

    for name in FARE_TABLES:
        for pair, amount in getattr(tables, name).items():
            if amount < 0:
                errors.append(f"{name}: negative fare {amount} for {pair}")

    for name in CAP_TABLES:
        caps = getattr(tables, name)
        for pair in sorted(priced_pairs - set(caps)):
            errors.append(f"{name}: no cap for priced zone pair {pair}")
        for pair, amount in caps.items():
            if amount <= 0:
                errors.append(f"{name}: cap must be positive, got {amount} for {pair}")

    for day_class in DAY_CLASSES:
        if day_class not in tables.peak_hours:
            errors.append(f"peak_hours: missing day class '{day_class}'")
            continue
        for window in tables.peak_hours[day_class]:
            if window.start > window.end:
                errors.append(f"peak_hours: {day_class} window {window.start}-{window.end} ends before it starts")

    if errors:
        raise ValueError("Rate table configuration errors:\n  " + "\n  ".join(errors))


__all__ = [
    # Types
    "PeakWindow",
    "RateTables",
    # Reference data loaders
    "load_fare_table",
    "load_peak_hours",
    "load_rate_tables",
    "validate_rate_tables",
    "REFERENCE_DIR",
    # Journey loaders
    "load_journeys",
    # Peak hours config
    "PEAK_HOURS",
    "DAY_CLASSES",
]
