from __future__ import annotations

import logging
from datetime import date, datetime
from datetime import tzinfo as TZInfo
from typing import Iterable, Optional, Tuple, Union

from .core.time import absolute_day_to_date
from .core.types import CivilDate, SolarDate
from .digits import to_latin_digits, to_persian_digits
from .engines.converter import check_date, gregorian_to_solar, solar_to_absolute_day
from .engines.leap import _check_year, is_solar_leap_year, solar_month_length
from .names import IRANIAN, NameSet
from .value import JalaliDateTime

logger = logging.getLogger(__name__)

GregorianLike = Union[str, date, datetime, CivilDate, Iterable[int]]
SolarLike = Union[str, SolarDate, JalaliDateTime, Iterable[int]]


def _split_date_string(value: str, kind: str) -> Tuple[int, int, int]:
    text = to_latin_digits(value.strip())
    tokens = text.replace("/", "-").split("-")
    if len(tokens) != 3 or not all(t.strip().isdigit() for t in tokens):
        raise ValueError(f"Unsupported {kind} date string: {value!r}")
    logger.debug("parsed %s string %r", kind, value)
    y, m, d = (int(t) for t in tokens)
    return y, m, d


def _unpack_three(value: object, expected: str) -> Tuple[int, int, int]:
    try:
        year, month, day = value  # type: ignore[misc]
    except (TypeError, ValueError) as exc:
        raise TypeError(f"Expected {expected}, or an iterable of three integers") from exc
    return int(year), int(month), int(day)


def coerce_gregorian(value: GregorianLike) -> CivilDate:
    if isinstance(value, datetime):
        value = value.date()
    if isinstance(value, date):
        return CivilDate(value.year, value.month, value.day)
    if isinstance(value, CivilDate):
        return value
    if isinstance(value, str):
        y, m, d = _split_date_string(value, "Gregorian")
    else:
        y, m, d = _unpack_three(value, "a date, CivilDate, string")
    if not check_date(y, m, d, jalali=False):
        raise ValueError(f"Not a valid Gregorian date: {value!r}")
    return CivilDate(y, m, d)


def coerce_solar(value: SolarLike) -> SolarDate:
    if isinstance(value, JalaliDateTime):
        return value.solar_date()
    if isinstance(value, SolarDate):
        return value
    if isinstance(value, str):
        return SolarDate(*_split_date_string(value, "Jalali"))
    return SolarDate(*_unpack_three(value, "a SolarDate, JalaliDateTime, string"))


def to_jalali(value: GregorianLike) -> SolarDate:
    return gregorian_to_solar(coerce_gregorian(value))


def to_gregorian(value: SolarLike) -> date:
    return absolute_day_to_date(solar_to_absolute_day(coerce_solar(value)))


def is_leap_year(year: int) -> bool:
    return is_solar_leap_year(year)


def days_in_month(year: int, month: int) -> int:
    if not (1 <= month <= 12):
        raise ValueError(f"month must be in 1..12, got {month}")
    _check_year(year)
    return solar_month_length(year, month)


def format_jalali(
    value: Union[GregorianLike, float],
    pattern: str = "Y/m/d",
    *,
    names: NameSet = IRANIAN,
    persian_digits: bool = False,
    tz: Optional[TZInfo] = None,
) -> str:
    """
    Render a civil date, datetime or POSIX timestamp as a Jalali string.
    """
    if isinstance(value, datetime):
        jdt = JalaliDateTime.from_datetime(value)
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        jdt = JalaliDateTime.from_timestamp(value, tz)
    else:
        jdt = JalaliDateTime.from_solar(to_jalali(value), tz=tz)
    out = jdt.format(pattern, names)
    return to_persian_digits(out) if persian_digits else out


def now_jalali(
    pattern: str = "Y/m/d H:i:s",
    *,
    tz: Optional[TZInfo] = None,
    names: NameSet = IRANIAN,
    persian_digits: bool = False,
) -> str:
    out = JalaliDateTime.now(tz).format(pattern, names)
    return to_persian_digits(out) if persian_digits else out
