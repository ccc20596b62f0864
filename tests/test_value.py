# tests/test_value.py

import dataclasses
from datetime import date, datetime, timedelta, timezone
from unittest.mock import patch

import pytest

from caljal.core.errors import CaljalError, ValidationError
from caljal.core.types import CivilDate, SolarDate
from caljal.engines.leap import MAX_YEAR, is_valid_solar_date
from caljal.names import AFGHAN, IRANIAN
from caljal.value import JalaliDateTime

TEHRAN = timezone(timedelta(hours=3, minutes=30))


def test_format_year_month_day():
    assert JalaliDateTime(1404, 1, 1).format("Y/m/d") == "1404/01/01"


@pytest.mark.parametrize(
    "pattern,expected",
    [
        ("Y-m-d H:i:s", "1403-12-30 09:05:07"),
        ("y n j", "03 12 30"),
        ("d/m/Y", "30/12/1403"),
        ("Date: Y", "Date: 1403"),
        ("", ""),
        ("[H]", "[09]"),
    ],
)
def test_format_tokens(pattern, expected):
    v = JalaliDateTime(1403, 12, 30, 9, 5, 7)
    assert v.format(pattern) == expected


def test_format_unpadded_fields():
    v = JalaliDateTime(1404, 2, 3, 4, 5, 6)
    assert v.format("n/j") == "2/3"
    assert v.format("m/d H:i:s") == "02/03 04:05:06"


def test_format_month_names_are_an_explicit_argument():
    v = JalaliDateTime(1403, 12, 1)
    assert v.format("j F Y") == "1 اسفند 1403"
    assert v.format("j F Y", AFGHAN) == "1 حوت 1403"
    # The Afghan call leaves no trace on later calls
    assert v.format("F") == IRANIAN.month_name(12)


def test_format_weekday_name():
    # 1404-01-01 is Friday, 21 March 2025
    assert JalaliDateTime(1404, 1, 1).format("l") == "جمعه"
    assert JalaliDateTime(1403, 1, 1).weekday_name() == "چهارشنبه"


def test_str_and_jalali_string():
    v = JalaliDateTime(1404, 1, 1, 8, 0, 0)
    assert str(v) == "1404-01-01 08:00:00"
    assert v.jalali_string() == "1404/01/01"


@pytest.mark.parametrize(
    "fields",
    [
        dict(year=1404, month=13, day=1),
        dict(year=1404, month=0, day=1),
        dict(year=1404, month=1, day=32),
        dict(year=1404, month=1, day=0),
        dict(year=1404, month=7, day=31),
        dict(year=1404, month=12, day=30),
        dict(year=999, month=1, day=1),
        dict(year=3001, month=1, day=1),
        dict(year=5000, month=1, day=1),
        dict(year=1404, month=1, day=1, hour=25),
        dict(year=1404, month=1, day=1, hour=-1),
        dict(year=1404, month=1, day=1, minute=60),
        dict(year=1404, month=1, day=1, second=60),
        dict(year="1404", month=1, day=1),
    ],
)
def test_construction_rejects_out_of_bound_fields(fields):
    with pytest.raises(ValidationError):
        JalaliDateTime(**fields)


def test_validation_error_taxonomy():
    with pytest.raises(CaljalError):
        JalaliDateTime(1404, 13, 1)
    with pytest.raises(ValueError):
        JalaliDateTime(1404, 13, 1)


def test_value_range_is_narrower_than_converter_domain():
    # Year 3100 is convertible but a JalaliDateTime refuses it
    assert is_valid_solar_date(3100, 1, 1)
    with pytest.raises(ValidationError):
        JalaliDateTime(3100, 1, 1)
    # Year 5000 is outside both
    assert 5000 > MAX_YEAR
    with pytest.raises(ValidationError):
        JalaliDateTime(5000, 1, 1)


def test_leap_esfand_is_accepted():
    v = JalaliDateTime(1403, 12, 30)
    assert v.is_leap_year()
    assert v.month_length() == 30
    assert not JalaliDateTime(1404, 12, 29).is_leap_year()


def test_hour_24_is_accepted_and_rolls_over():
    v = JalaliDateTime(1403, 12, 30, 24, 0, 0)
    assert v.hour == 24
    assert v.to_datetime() == datetime(2025, 3, 21, 0, 0, 0)


def test_value_is_immutable():
    v = JalaliDateTime(1404, 1, 1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        v.year = 1405


def test_from_datetime_keeps_time_and_tz():
    v = JalaliDateTime.from_datetime(datetime(2025, 3, 20, 23, 59, 58, tzinfo=TEHRAN))
    assert (v.year, v.month, v.day) == (1403, 12, 30)
    assert (v.hour, v.minute, v.second) == (23, 59, 58)
    assert v.tzinfo is TEHRAN


def test_to_datetime_roundtrip():
    dt = datetime(2025, 3, 21, 12, 30, 15, tzinfo=TEHRAN)
    v = JalaliDateTime.from_datetime(dt)
    assert v == JalaliDateTime(1404, 1, 1, 12, 30, 15, TEHRAN)
    assert v.to_datetime() == dt
    assert v.to_datetime().tzinfo is TEHRAN


def test_from_date_and_back():
    v = JalaliDateTime.from_date(date(1979, 3, 21))
    assert v.solar_date() == SolarDate(1358, 1, 1)
    assert v.to_date() == date(1979, 3, 21)
    assert v.to_civil_date() == CivilDate(1979, 3, 21)


def test_from_timestamp():
    v = JalaliDateTime.from_timestamp(0, timezone.utc)
    assert v == JalaliDateTime(1348, 10, 11, 0, 0, 0, timezone.utc)


def test_from_format():
    v = JalaliDateTime.from_format("%Y-%m-%d %H:%M", "2024-03-20 10:15", TEHRAN)
    assert v == JalaliDateTime(1403, 1, 1, 10, 15, 0, TEHRAN)


def test_from_format_rejects_malformed_text():
    with pytest.raises(ValueError):
        JalaliDateTime.from_format("%Y-%m-%d", "20-03-2024")


def test_now_reads_the_civil_clock():
    class _FrozenClock(datetime):
        @classmethod
        def now(cls, tz=None):
            return datetime(2025, 3, 21, 8, 0, 0, tzinfo=tz)

    with patch("caljal.value.datetime", _FrozenClock):
        v = JalaliDateTime.now(TEHRAN)
    assert v == JalaliDateTime(1404, 1, 1, 8, 0, 0, TEHRAN)


def test_now_outside_value_range_fails_validation():
    class _FarFuture(datetime):
        @classmethod
        def now(cls, tz=None):
            return datetime(3700, 1, 1, tzinfo=tz)

    with patch("caljal.value.datetime", _FarFuture):
        with pytest.raises(ValidationError):
            JalaliDateTime.now()


def test_add_days_crosses_year_boundary():
    v = JalaliDateTime(1403, 12, 30, 6, 7, 8)
    assert v.add_days(1) == JalaliDateTime(1404, 1, 1, 6, 7, 8)
    assert v.add_days(1).add_days(-1) == v
    assert JalaliDateTime(1404, 12, 29).add_days(1) == JalaliDateTime(1405, 1, 1)


def test_replace_revalidates():
    v = JalaliDateTime(1404, 1, 31)
    assert v.replace(month=2) == JalaliDateTime(1404, 2, 31)
    with pytest.raises(ValidationError):
        v.replace(month=7)


def test_ordering():
    a = JalaliDateTime(1403, 12, 30, 23, 59, 59)
    b = JalaliDateTime(1404, 1, 1)
    assert a < b
    assert b > a
    assert sorted([b, a]) == [a, b]


def test_calendar_queries():
    v = JalaliDateTime(1404, 7, 1)
    assert v.day_of_year() == 187
    assert v.month_length() == 30
    assert JalaliDateTime(1404, 1, 1).weekday() == 6
    assert v.month_name() == "مهر"


def test_comparisons_ignore_tzinfo():
    a = JalaliDateTime(1404, 1, 1, 8, 0, 0, timezone.utc)
    b = JalaliDateTime(1404, 1, 1, 8, 0, 0, TEHRAN)
    assert a == b
    assert hash(a) == hash(b)
    assert not a < b and not b < a
    assert not a > b and not b > a
    assert a <= b and a >= b
    assert len({a, b}) == 1
    assert a < b.add_days(1)
