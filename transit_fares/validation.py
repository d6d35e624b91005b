"""
Input Validation

Coerces raw journey records into Journey objects. Validation is
all-or-nothing: one bad record rejects the whole batch.

ACCEPTED RECORD KEYS
--------------------
    date_time   (alias: dateTime) - datetime, date, epoch ms or string
    from_zone   (alias: from)     - numeric origin zone
    to_zone     (alias: to)       - numeric destination zone
"""

import logging
from collections.abc import Iterable, Mapping
from datetime import date, datetime, time

from .models import Journey

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIGURATION
# =============================================================================

KEY_ALIASES = {
    "dateTime": "date_time",
    "from": "from_zone",
    "to": "to_zone",
}

REQUIRED_KEYS = ("date_time", "from_zone", "to_zone")

# Tried in order after ISO 8601
TIMESTAMP_FORMATS = [
    "%Y/%m/%d %H:%M:%S",
    "%d.%m.%Y %H:%M:%S",
    "%a %b %d %Y %H:%M:%S",
]


class InvalidInput(ValueError):
    """Raised when any journey in a batch has a bad timestamp or zone."""


# =============================================================================
# COERCION
# =============================================================================

def parse_timestamp(value) -> datetime | None:
    """
    Coerce a raw timestamp to a naive local datetime at second precision.

    Returns None when the value cannot be interpreted.
    """
    if isinstance(value, bool):
        return None

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time())
    elif isinstance(value, (int, float)):
        # Epoch milliseconds
        try:
            parsed = datetime.fromtimestamp(value / 1000)
        except (OverflowError, OSError, ValueError):
            return None
    elif isinstance(value, str):
        parsed = _parse_timestamp_string(value.strip())
        if parsed is None:
            return None
    else:
        return None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed.replace(microsecond=0)


def _parse_timestamp_string(text: str) -> datetime | None:
    if not text:
        return None
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    for timestamp_format in TIMESTAMP_FORMATS:
        try:
            return datetime.strptime(text, timestamp_format)
        except ValueError:
            continue
    return None


def parse_zone(value) -> int | None:
    """Coerce a raw zone identifier to int. Returns None if not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
        return int(number) if number.is_integer() else None
    return None


def normalise_keys(record: Mapping) -> dict:
    """Map camelCase input keys onto the canonical snake_case names."""
    return {KEY_ALIASES.get(key, key): value for key, value in record.items()}


# =============================================================================
# BATCH VALIDATION
# =============================================================================

def _to_journey(record) -> Journey | None:
    if isinstance(record, Journey):
        # Caller-built journeys get the same checks as raw records
        record = {
            "date_time": record.date_time,
            "from_zone": record.from_zone,
            "to_zone": record.to_zone,
        }
    if not isinstance(record, Mapping):
        return None

    record = normalise_keys(record)
    if any(key not in record for key in REQUIRED_KEYS):
        return None

    date_time = parse_timestamp(record["date_time"])
    from_zone = parse_zone(record["from_zone"])
    to_zone = parse_zone(record["to_zone"])
    if date_time is None or from_zone is None or to_zone is None:
        return None

    return Journey(date_time=date_time, from_zone=from_zone, to_zone=to_zone)


def validate_journeys(raw: Iterable | Mapping) -> list[Journey]:
    """
    Validate a batch of raw journey records.

    Args:
        raw: Iterable of records (mappings or Journey objects), or a mapping
            of index -> record as produced by JSON object exports

    Returns:
        Journeys in input order

    Raises:
        InvalidInput: If any record fails to parse (no partial results)
    """
    records = list(raw.values()) if isinstance(raw, Mapping) else list(raw)

    journeys = []
    invalid_count = 0
    for record in records:
        journey = _to_journey(record)
        if journey is None:
            invalid_count += 1
        else:
            journeys.append(journey)

    if invalid_count:
        logger.warning("Rejecting batch: %d of %d journeys invalid", invalid_count, len(records))
        raise InvalidInput(
            f"Invalid inputs, provide correct inputs ({invalid_count} of "
            f"{len(records)} journey(s) have a bad timestamp or zone)"
        )

    return journeys
