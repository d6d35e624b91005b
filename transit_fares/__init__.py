"""
Transit Fares

Per-journey fare calculation with zone pricing, peak / off-peak rates and
rolling daily and weekly caps.

Structure:
    - calculate_fares: Fare engine (main entry point)
    - grouping: Day and continuous-week grouping
    - capping: Cap state and the weekly-then-daily cap cascade
    - validation: Batch validation (InvalidInput)
    - data/: Reference tables and journey loaders
"""

from .calculate_fares import calculate_fares, calculate_fares_df
from .models import FareRecord, Journey, ZonePair
from .validation import InvalidInput
from .version import VERSION

__all__ = [
    "calculate_fares",
    "calculate_fares_df",
    "FareRecord",
    "Journey",
    "ZonePair",
    "InvalidInput",
    "VERSION",
]
