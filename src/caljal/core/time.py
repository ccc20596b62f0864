from __future__ import annotations
from datetime import date

from .types import AbsoluteDay, CivilDate


def _div(a: int, b: int) -> int:
    """Integer division truncated toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q

def _mod(a: int, b: int) -> int:
    """Remainder matching _div (sign follows the dividend)."""
    return a - _div(a, b) * b


def gregorian_to_absolute_day(d: CivilDate) -> AbsoluteDay:
    """
    Proleptic Gregorian date -> Julian Day Number.

    Months are counted from March so that the leap day closes the
    computational year; January and February belong to the previous one.
    """
    shift = _div(d.month - 8, 6)
    jdn = (
        _div((d.year + shift + 100100) * 1461, 4)
        + _div(153 * _mod(d.month + 9, 12) + 2, 5)
        + d.day
        - 34840408
    )
    return jdn - _div(_div(d.year + 100100 + shift, 100) * 3, 4) + 752

def absolute_day_to_gregorian(jdn: AbsoluteDay) -> CivilDate:
    """Inverse of gregorian_to_absolute_day."""
    j = 4 * jdn + 139361631
    j = j + _div(_div(4 * jdn + 183187720, 146097) * 3, 4) * 4 - 3908
    i = _div(_mod(j, 1461), 4) * 5 + 308
    day = _div(_mod(i, 153), 5) + 1
    month = _mod(_div(i, 153), 12) + 1
    year = _div(j, 1461) - 100100 + _div(8 - month, 6)
    return CivilDate(year, month, day)

def date_to_absolute_day(d: date) -> AbsoluteDay:
    return gregorian_to_absolute_day(CivilDate(d.year, d.month, d.day))

def absolute_day_to_date(jdn: AbsoluteDay) -> date:
    c = absolute_day_to_gregorian(jdn)
    return date(c.year, c.month, c.day)

def weekday(jdn: AbsoluteDay) -> int:
    """Day of the week with Saturday = 0 ... Friday = 6."""
    # JDN 0 mod 7 is a Monday
    return (jdn + 2) % 7

def is_gregorian_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)

def gregorian_month_length(year: int, month: int) -> int:
    if month == 2:
        return 29 if is_gregorian_leap(year) else 28
    return 30 if month in (4, 6, 9, 11) else 31
