"""Unit tests for time-zone resolution and date rendering."""

from datetime import datetime, timedelta, timezone
from unittest.mock import patch
from zoneinfo import ZoneInfoNotFoundError

import pytest

from covid_calendar.utils.date_parser import (
    TOKYO_FIXED_ZONE,
    format_date,
    local_midnight,
    resolve_timezone,
)


@pytest.mark.unit
class TestResolveTimezone:
    def test_unknown_zone_falls_back_to_fixed_offset(self):
        tz = resolve_timezone("Nowhere/Atlantis")

        assert tz is TOKYO_FIXED_ZONE
        assert tz.utcoffset(None) == timedelta(hours=9)

    def test_missing_zone_database_falls_back(self):
        with patch(
            "covid_calendar.utils.date_parser.ZoneInfo",
            side_effect=ZoneInfoNotFoundError("no tzdata"),
        ):
            assert resolve_timezone() is TOKYO_FIXED_ZONE

    def test_tokyo_zone_has_utc_plus_nine(self):
        tz = resolve_timezone()
        assert datetime(2020, 3, 15, tzinfo=tz).utcoffset() == timedelta(hours=9)


@pytest.mark.unit
class TestLocalMidnight:
    def test_builds_midnight_in_zone(self):
        value = local_midnight(2020, 3, 15, TOKYO_FIXED_ZONE)

        assert value == datetime(2020, 3, 15, 0, 0, 0, tzinfo=TOKYO_FIXED_ZONE)
        assert value.astimezone(timezone.utc) == datetime(
            2020, 3, 14, 15, 0, tzinfo=timezone.utc
        )

    @pytest.mark.parametrize(
        "year, month, day, expected",
        [
            (2020, 13, 1, (2021, 1, 1)),
            (2021, 2, 29, (2021, 3, 1)),
            (2020, 4, 0, (2020, 3, 31)),
            (2020, -11, 1, (2019, 1, 1)),
            (2020, 1, 366, (2020, 12, 31)),
        ],
    )
    def test_out_of_range_parts_normalize(self, year, month, day, expected):
        value = local_midnight(year, month, day, TOKYO_FIXED_ZONE)
        assert value == datetime(*expected, tzinfo=TOKYO_FIXED_ZONE)

    def test_named_zone_keeps_offset_after_rollover(self):
        value = local_midnight(2020, 2, 30, resolve_timezone("Asia/Tokyo"))
        assert format_date(value) == "2020-03-01 00:00:00 +0900 JST"

    @pytest.mark.parametrize("year, month, day", [(0, 1, 1), (10000, 1, 1), (9999, 12, 32)])
    def test_years_outside_range_raise(self, year, month, day):
        with pytest.raises((ValueError, OverflowError)):
            local_midnight(year, month, day, TOKYO_FIXED_ZONE)


@pytest.mark.unit
def test_format_date_fixed_zone():
    value = local_midnight(2020, 3, 15, TOKYO_FIXED_ZONE)
    assert format_date(value) == "2020-03-15 00:00:00 +0900 JST"


@pytest.mark.unit
def test_format_date_named_zone():
    value = local_midnight(2020, 12, 1, resolve_timezone("Asia/Tokyo"))
    assert format_date(value) == "2020-12-01 00:00:00 +0900 JST"
