"""
Data Loaders

Journey batch loaders for files exported by the ticketing system.
"""

from .journeys import load_journeys, JOURNEY_COLUMNS

__all__ = [
    "load_journeys",
    "JOURNEY_COLUMNS",
]
