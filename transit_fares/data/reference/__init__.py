"""
Reference Data

Static fare, cap and peak-hour configuration.

    peak_fares.csv      - Fare per zone pair inside peak windows
    off_peak_fares.csv  - Fare per zone pair outside peak windows
    daily_caps.csv      - Daily spending cap per farthest zone pair
    weekly_caps.csv     - Weekly spending cap per farthest zone pair
    peak_hours.py       - Peak windows per day class
"""

from .peak_hours import PEAK_HOURS, DAY_CLASSES

__all__ = [
    "PEAK_HOURS",
    "DAY_CLASSES",
]
