"""
caljal.engines.converter
------------------------
Solar Hijri <-> absolute day conversion on top of the break-point anchors.

Within a year the first six months have 31 days and the next six 30, with
Esfand (month 12) cut to 29 days in common years. Only Esfand depends on
the leap table.
"""

from __future__ import annotations

from caljal.core.time import (
    _div,
    _mod,
    absolute_day_to_gregorian,
    gregorian_month_length,
    gregorian_to_absolute_day,
)
from caljal.core.types import AbsoluteDay, CivilDate, SolarDate
from caljal.engines.leap import (
    GREGORIAN_OFFSET,
    MAX_YEAR,
    _check_year,
    _march_day,
    anchor_day,
    is_solar_leap_year,
    is_valid_solar_date,
    year_anchor,
)

# Days in Farvardin..Shahrivar
FIRST_HALF_DAYS = 186
# Days in Mehr..Bahman plus the 29 common days of Esfand
SECOND_HALF_COMMON_DAYS = 179


def _month_offset(month: int) -> int:
    """Days from Farvardin 1 to the first day of `month`."""
    if month <= 6:
        return (month - 1) * 31
    return FIRST_HALF_DAYS + (month - 7) * 30


def solar_to_absolute_day(d: SolarDate) -> AbsoluteDay:
    """Absolute day of a Solar date. Raises OutOfRangeError for unsupported years."""
    return anchor_day(d.year) + _month_offset(d.month) + d.day - 1


def absolute_day_to_solar(jdn: AbsoluteDay) -> SolarDate:
    """Solar date of an absolute day. Raises OutOfRangeError outside [MIN_YEAR, MAX_YEAR]."""
    gy = absolute_day_to_gregorian(jdn).year
    jy = gy - GREGORIAN_OFFSET
    if jy == MAX_YEAR + 1:
        # January..March of that Gregorian year still belong to MAX_YEAR
        march = _march_day(jy)
    else:
        _, march = year_anchor(jy)
    k = jdn - gregorian_to_absolute_day(CivilDate(gy, 3, march))

    if k >= 0:
        _check_year(jy)
        if k < FIRST_HALF_DAYS:
            return SolarDate(jy, 1 + _div(k, 31), _mod(k, 31) + 1)
        k -= FIRST_HALF_DAYS
    else:
        # Before Farvardin 1: the tail of the previous year, counted from Mehr 1
        jy -= 1
        _check_year(jy)
        k += SECOND_HALF_COMMON_DAYS
        if is_solar_leap_year(jy):
            k += 1

    return SolarDate(jy, 7 + _div(k, 30), _mod(k, 30) + 1)


def gregorian_to_solar(d: CivilDate) -> SolarDate:
    return absolute_day_to_solar(gregorian_to_absolute_day(d))


def solar_to_gregorian(d: SolarDate) -> CivilDate:
    return absolute_day_to_gregorian(solar_to_absolute_day(d))


def solar_day_of_year(d: SolarDate) -> int:
    """1-based ordinal of the day within its Solar year."""
    return _month_offset(d.month) + d.day


def check_date(year: int, month: int, day: int, *, jalali: bool = True) -> bool:
    """Validate a Jalali date, or a Gregorian one when jalali=False."""
    if jalali:
        return is_valid_solar_date(year, month, day)
    return 1 <= month <= 12 and 1 <= day <= gregorian_month_length(year, month)
