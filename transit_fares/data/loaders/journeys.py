"""
Load Journey Batches

Reads a batch of raw journey records from disk. Records are returned
as-is (apart from key normalisation); validation happens in the engine.
"""

import json
from pathlib import Path

import polars as pl

from ...validation import normalise_keys


JOURNEY_COLUMNS = ["date_time", "from_zone", "to_zone"]


def load_journeys(path: str | Path) -> list[dict]:
    """
    Load raw journey records from a JSON or CSV file.

    JSON files may hold a list of records or an object keyed by index.
    CSV files are read with every column as a string so that nothing is
    coerced before validation.

    Args:
        path: Path to a .json or .csv file

    Returns:
        List of records with canonical keys (date_time, from_zone, to_zone)
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        with open(path, "rt", encoding="utf-8") as f:
            loaded = json.load(f)
        records = list(loaded.values()) if isinstance(loaded, dict) else list(loaded)
    elif suffix == ".csv":
        records = pl.read_csv(path, infer_schema_length=0).to_dicts()
    else:
        raise ValueError(f"Unsupported journey file type '{suffix}' (expected .json or .csv)")

    # Non-mapping entries are passed through for validation to reject
    return [normalise_keys(r) if isinstance(r, dict) else r for r in records]
