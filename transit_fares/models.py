"""
Domain Models

Journeys in, fare records out. Everything here is a plain value object;
the engines in grouping.py and calculate_fares.py never mutate a Journey.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import NamedTuple


class ZonePair(NamedTuple):
    """Ordered (from_zone, to_zone) key into the fare and cap tables."""
    from_zone: int
    to_zone: int

    def __str__(self) -> str:
        return f"{self.from_zone}-{self.to_zone}"


@dataclass(frozen=True, slots=True)
class Journey:
    """A single validated trip: local timestamp plus origin/destination zones."""
    date_time: datetime
    from_zone: int
    to_zone: int

    @property
    def zone_pair(self) -> ZonePair:
        return ZonePair(self.from_zone, self.to_zone)


@dataclass(slots=True)
class DayBucket:
    """Journeys falling on one local calendar date, in input order."""
    day: date
    journeys: list[Journey] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class FareRecord:
    """
    Fare charged for one journey.

    max_zone is the farthest zone pair of the journey's week, not of the
    journey itself and not of its day.
    """
    date: str
    fare: int
    max_zone: ZonePair
    journey: Journey
    base_fare: int
    week: str
