"""
Unit Tests for Journey Validation

Run with: pytest transit_fares/tests/test_validation.py -v
"""

import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import pytest
from datetime import date, datetime, timedelta, timezone

from transit_fares.models import Journey
from transit_fares.validation import (
    InvalidInput,
    parse_timestamp,
    parse_zone,
    validate_journeys,
)


class TestParseTimestamp:

    @pytest.mark.parametrize("value", [
        "2025-07-29 16:50:00",
        "2025-07-29T16:50:00",
        "2025/07/29 16:50:00",
        "29.07.2025 16:50:00",
        "Tue Jul 29 2025 16:50:00",
        datetime(2025, 7, 29, 16, 50, 0, 123456),
    ])
    def test_accepted_formats(self, value):
        assert parse_timestamp(value) == datetime(2025, 7, 29, 16, 50, 0)

    def test_date_is_midnight(self):
        assert parse_timestamp(date(2025, 7, 29)) == datetime(2025, 7, 29)

    def test_aware_converted_to_naive_local(self):
        aware = datetime(2025, 7, 29, 16, 50, tzinfo=timezone(timedelta(hours=2)))
        parsed = parse_timestamp(aware)
        assert parsed.tzinfo is None
        assert parsed == aware.astimezone().replace(tzinfo=None)

    @pytest.mark.parametrize("value", ["", "not a date", "2025-13-45 10:00:00", None, True, [2025]])
    def test_rejected(self, value):
        assert parse_timestamp(value) is None


class TestParseZone:

    @pytest.mark.parametrize("value, expected", [(1, 1), ("2", 2), (" 2 ", 2), (2.0, 2), ("1.0", 1)])
    def test_numeric(self, value, expected):
        assert parse_zone(value) == expected

    @pytest.mark.parametrize("value", ["two", "", None, True, 1.5, {"zone": 1}])
    def test_rejected(self, value):
        assert parse_zone(value) is None


class TestValidateJourneys:

    def test_valid_batch(self):
        journeys = validate_journeys([
            {"date_time": "2025-07-29 16:50:00", "from_zone": "1", "to_zone": 2},
            Journey(datetime(2025, 7, 30, 8, 0), 2, 2),
        ])
        assert journeys[0] == Journey(datetime(2025, 7, 29, 16, 50), 1, 2)
        assert journeys[1].zone_pair == (2, 2)

    def test_missing_key(self):
        with pytest.raises(InvalidInput):
            validate_journeys([{"date_time": "2025-07-29 16:50:00", "from_zone": 1}])

    def test_non_mapping_record(self):
        with pytest.raises(InvalidInput):
            validate_journeys(["2025-07-29 16:50:00,1,2"])

    def test_reports_failure_count(self):
        with pytest.raises(InvalidInput, match="2 of 3"):
            validate_journeys([
                {"date_time": "bad", "from_zone": 1, "to_zone": 1},
                {"date_time": "2025-07-29 16:50:00", "from_zone": 1, "to_zone": 1},
                {"date_time": "2025-07-29 16:50:00", "from_zone": None, "to_zone": 1},
            ])

    def test_journey_with_bad_timestamp(self):
        with pytest.raises(InvalidInput):
            validate_journeys([Journey("not a date", 1, 1)])

    def test_journey_with_bad_zone(self):
        with pytest.raises(InvalidInput):
            validate_journeys([Journey(datetime(2025, 7, 29, 8, 0), "two", 1)])

    def test_journey_normalised(self):
        """Caller-built journeys get sub-second parts dropped and zones coerced."""
        journeys = validate_journeys([Journey(datetime(2025, 7, 29, 8, 0, 0, 500000), "1", 2.0)])
        assert journeys == [Journey(datetime(2025, 7, 29, 8, 0, 0), 1, 2)]

    def test_bad_journey_rejects_whole_batch(self):
        with pytest.raises(InvalidInput, match="1 of 2"):
            validate_journeys([
                Journey(datetime(2025, 7, 29, 8, 0), 1, 1),
                Journey(datetime(2025, 7, 29, 9, 0), "two", 1),
            ])

    def test_invalid_input_is_value_error(self):
        assert issubclass(InvalidInput, ValueError)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
