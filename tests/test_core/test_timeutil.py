"""Tests for when.core.timeutil."""

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from when.core.timeutil import (
    add_calendar,
    add_duration,
    add_unit,
    last_day_of_month,
    make_datetime,
    normalize_unit,
    nth_last_weekday_of_month,
    nth_weekday_of_month,
    weekday_distance,
    weekday_index,
)

VANCOUVER = ZoneInfo("America/Vancouver")


class TestNormalizeUnit:
    """Tests for normalize_unit()."""

    @pytest.mark.parametrize(
        "literal,expected",
        [
            ("y", "year"),
            ("M", "month"),
            ("m", "minute"),
            ("s", "second"),
            ("Weeks", "week"),
            ("DAY", "day"),
            ("hours", "hour"),
        ],
    )
    def test_known_units(self, literal, expected):
        assert normalize_unit(literal) == expected

    def test_unknown_unit(self):
        with pytest.raises(ValueError, match="Unknown unit"):
            normalize_unit("fortnight")


class TestMakeDatetime:
    """Tests for make_datetime() normalisation."""

    def test_month_overflow(self):
        assert make_datetime(2006, 13, 1) == datetime(2007, 1, 1)

    def test_month_underflow(self):
        assert make_datetime(2006, 0, 1) == datetime(2005, 12, 1)

    def test_day_overflow(self):
        assert make_datetime(2006, 1, 32) == datetime(2006, 2, 1)

    def test_day_zero_is_last_of_previous_month(self):
        assert make_datetime(2006, 3, 0) == datetime(2006, 2, 28)

    def test_keeps_timezone(self):
        tz = timezone(timedelta(hours=-7))
        assert make_datetime(2006, 1, 2, 3, 4, 5, tz).tzinfo is tz

    def test_skipped_wall_time_moves_forward(self):
        result = make_datetime(2007, 3, 11, 2, 30, 0, VANCOUVER)
        assert (result.hour, result.minute) == (3, 30)
        assert result.utcoffset() == timedelta(hours=-7)
        assert result.tzinfo is VANCOUVER


class TestAddCalendar:
    """Tests for add_calendar()."""

    def test_end_of_month_is_not_clamped(self):
        assert add_calendar(datetime(2006, 1, 31), months=1) == datetime(2006, 3, 3)
        assert add_calendar(datetime(2008, 1, 31), months=1) == datetime(2008, 3, 2)

    def test_leap_day_plus_year(self):
        assert add_calendar(datetime(2008, 2, 29), years=1) == datetime(2009, 3, 1)

    def test_keeps_wall_clock_across_dst(self):
        start = datetime(2006, 1, 2, 15, 4, 5, tzinfo=VANCOUVER)
        result = add_calendar(start, months=6)
        assert (result.hour, result.minute, result.second) == (15, 4, 5)
        assert result.utcoffset() == timedelta(hours=-7)

    def test_keeps_microseconds(self):
        assert add_calendar(datetime(2006, 1, 2, microsecond=7), days=1).microsecond == 7


class TestAddDuration:
    """Tests for add_duration()."""

    def test_naive(self):
        assert add_duration(datetime(2006, 1, 2, 23), hours=2) == datetime(2006, 1, 3, 1)

    def test_elapsed_across_dst_start(self):
        # 2006-04-02 02:00 PST jumps to 03:00 PDT
        start = datetime(2006, 4, 2, 1, 30, tzinfo=VANCOUVER)
        result = add_duration(start, hours=1)
        assert (result.hour, result.minute) == (3, 30)
        assert result.astimezone(timezone.utc) - start.astimezone(timezone.utc) == timedelta(hours=1)


class TestAddUnit:
    """Tests for add_unit()."""

    @pytest.mark.parametrize(
        "quantity,unit,expected",
        [
            (1, "year", datetime(2007, 1, 2, 15, 4, 5)),
            (-2, "month", datetime(2005, 11, 2, 15, 4, 5)),
            (3, "week", datetime(2006, 1, 23, 15, 4, 5)),
            (-2, "day", datetime(2005, 12, 31, 15, 4, 5)),
            (9, "hour", datetime(2006, 1, 3, 0, 4, 5)),
            (-5, "minute", datetime(2006, 1, 2, 14, 59, 5)),
            (55, "second", datetime(2006, 1, 2, 15, 5, 0)),
        ],
    )
    def test_units(self, quantity, unit, expected):
        assert add_unit(datetime(2006, 1, 2, 15, 4, 5), quantity, unit) == expected

    def test_unknown_unit(self):
        with pytest.raises(ValueError):
            add_unit(datetime(2006, 1, 2), 1, "fortnight")


class TestWeekdays:
    """Tests for weekday helpers."""

    def test_weekday_index_starts_at_sunday(self):
        assert weekday_index(datetime(2006, 1, 1)) == 0  # Sunday
        assert weekday_index(datetime(2006, 1, 7)) == 6  # Saturday

    def test_distance(self):
        assert weekday_distance(1, 3) == 2
        assert weekday_distance(3, 1) == 5
        assert weekday_distance(2, 2) == 0

    def test_distance_strictly_future(self):
        assert weekday_distance(2, 2, strictly_future=True) == 7
        assert weekday_distance(1, 3, strictly_future=True) == 2


class TestMonthHelpers:
    """Tests for last_day_of_month() and the nth weekday helpers."""

    def test_last_day_of_month(self):
        assert last_day_of_month(datetime(2006, 2, 1)) == datetime(2006, 2, 28)
        assert last_day_of_month(datetime(2008, 2, 1)) == datetime(2008, 2, 29)
        assert last_day_of_month(datetime(2006, 3, 1), 2) == datetime(2006, 3, 30)

    def test_nth_weekday_of_month(self):
        # second Tuesday of March 2006
        assert nth_weekday_of_month(datetime(2006, 3, 1), 2, 2) == datetime(2006, 3, 14)
        # first Wednesday is the first itself
        assert nth_weekday_of_month(datetime(2006, 3, 1), 3) == datetime(2006, 3, 1)

    def test_nth_last_weekday_of_month(self):
        assert nth_last_weekday_of_month(datetime(2006, 3, 1), 2) == datetime(2006, 3, 28)
        assert nth_last_weekday_of_month(datetime(2006, 3, 1), 2, 2) == datetime(2006, 3, 21)
        # last day is itself the wanted weekday
        assert nth_last_weekday_of_month(datetime(2006, 1, 1), 2) == datetime(2006, 1, 31)
