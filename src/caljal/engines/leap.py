"""
caljal.engines.leap
-------------------
Break-point rule of the Solar Hijri calendar.

The calendar follows a 33-year arithmetic cycle (8 leap years per cycle),
but the true equinox-based pattern drifts, so the cycle is re-phased at a
ranked list of break-point years. Within [-61, 3178) the break points
locate Farvardin 1 of every year in March of the matching Gregorian year.

Leap status is read from LEAP_YEARS only. The set is derived once, at
import, from the spacing of consecutive year anchors, so the anchor
arithmetic and the leap table describe the same calendar by construction.
"""

from __future__ import annotations

from typing import FrozenSet, Tuple

from caljal.core.errors import OutOfRangeError
from caljal.core.time import _div, _mod, gregorian_to_absolute_day
from caljal.core.types import AbsoluteDay, BreakPoint, CivilDate

BREAKS: Tuple[int, ...] = (
    -61, 9, 38, 199, 426, 686, 756, 818, 1111, 1181, 1210,
    1635, 2060, 2097, 2192, 2262, 2324, 2394, 2456, 3178,
)

LEAP_RULE: Tuple[BreakPoint, ...] = tuple(
    BreakPoint(year, nxt - year) for year, nxt in zip(BREAKS, BREAKS[1:])
)

MIN_YEAR = BREAKS[0]
MAX_YEAR = BREAKS[-1] - 1

# Gregorian year of Farvardin 1 is always solar year + 621
GREGORIAN_OFFSET = 621


def _check_year(year: int) -> None:
    if year < MIN_YEAR or year > MAX_YEAR:
        raise OutOfRangeError(f"Invalid Jalali year {year}: supported range is [{MIN_YEAR}, {MAX_YEAR}]")


def _locate(year: int) -> Tuple[int, int, int]:
    """
    Walk the break points up to `year`.

    Returns (leap_j, jump, n): Jalali leap days accumulated before the
    segment containing `year`, that segment's length, and the offset of
    `year` inside it. Unchecked.
    """
    leap_j = -14
    jp = LEAP_RULE[0].year
    jump = 0
    for bp in LEAP_RULE:
        jump = bp.jump
        if year < bp.year + bp.jump:
            break
        leap_j += _div(jump, 33) * 8 + _div(_mod(jump, 33), 4)
        jp = bp.year + bp.jump
    return leap_j, jump, year - jp


def _march_day(year: int) -> int:
    leap_j, jump, n = _locate(year)
    leap_j += _div(n, 33) * 8 + _div(_mod(n, 33) + 3, 4)
    if _mod(jump, 33) == 4 and jump - n == 4:
        leap_j += 1

    gy = year + GREGORIAN_OFFSET
    leap_g = _div(gy, 4) - _div((_div(gy, 100) + 1) * 3, 4) - 150
    return 20 + leap_j - leap_g


def year_anchor(year: int) -> Tuple[int, int]:
    """(Gregorian year, day in March) of Farvardin 1 of `year`."""
    _check_year(year)
    return year + GREGORIAN_OFFSET, _march_day(year)


def anchor_day(year: int) -> AbsoluteDay:
    """Absolute day of Farvardin 1 of `year`."""
    gy, march = year_anchor(year)
    return gregorian_to_absolute_day(CivilDate(gy, 3, march))


def _anchor_unchecked(year: int) -> AbsoluteDay:
    return gregorian_to_absolute_day(CivilDate(year + GREGORIAN_OFFSET, 3, _march_day(year)))


def cycle_leap(year: int) -> bool:
    """
    Leap flag read off the year's position in its 33-year cycle.

    Informational: compare against is_solar_leap_year in diagnostics.
    """
    _check_year(year)
    _, jump, n = _locate(year)
    if jump - n < 6:
        n = n - jump + _div(jump + 4, 33) * 33
    r = _mod(_mod(n + 1, 33) - 1, 4)
    return r == 0


def _build_leap_years() -> FrozenSet[int]:
    anchors = [_anchor_unchecked(y) for y in range(MIN_YEAR, MAX_YEAR + 2)]
    return frozenset(
        MIN_YEAR + i
        for i, (a, b) in enumerate(zip(anchors, anchors[1:]))
        if b - a == 366
    )


LEAP_YEARS: FrozenSet[int] = _build_leap_years()


def is_solar_leap_year(year: int) -> bool:
    return year in LEAP_YEARS


def solar_month_length(year: int, month: int) -> int:
    if month <= 6:
        return 31
    if month <= 11:
        return 30
    return 30 if is_solar_leap_year(year) else 29


def is_valid_solar_date(year: int, month: int, day: int) -> bool:
    return (
        MIN_YEAR <= year <= MAX_YEAR
        and 1 <= month <= 12
        and 1 <= day <= solar_month_length(year, month)
    )
