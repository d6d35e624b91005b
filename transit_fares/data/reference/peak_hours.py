"""
Peak Hours

Peak windows per day class. Both bounds are inclusive at second precision.
Weekend is Saturday and Sunday; every other day is a weekday.
Last updated: 2025-08-01
"""

PEAK_HOURS = {
    "weekday": {
        "morning": ("07:00:00", "10:30:00"),
        "evening": ("17:00:00", "20:00:00"),
    },
    "weekend": {
        "morning": ("09:00:00", "11:00:00"),
        "evening": ("18:00:00", "22:00:00"),
    },
}

DAY_CLASSES = ("weekday", "weekend")
