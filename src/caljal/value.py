"""
caljal.value
------------
JalaliDateTime: an immutable, validated Solar Hijri date-time.

The value only ever holds Solar fields. Civil (Gregorian) timestamps enter
and leave through the converter; hour, minute, second and tzinfo pass
through untouched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date, datetime, timedelta
from datetime import tzinfo as TZInfo
from functools import total_ordering
from typing import Any, Optional, Tuple

from caljal.core.errors import ValidationError
from caljal.core.time import absolute_day_to_date, date_to_absolute_day
from caljal.core.time import weekday as _weekday
from caljal.core.types import AbsoluteDay, CivilDate, SolarDate
from caljal.engines.converter import (
    absolute_day_to_solar,
    solar_day_of_year,
    solar_to_absolute_day,
    solar_to_gregorian,
)
from caljal.engines.leap import is_solar_leap_year, solar_month_length
from caljal.names import IRANIAN, NameSet

logger = logging.getLogger(__name__)

MIN_VALUE_YEAR = 1000
MAX_VALUE_YEAR = 3000

DEFAULT_FORMAT = "Y-m-d H:i:s"


def _between(name: str, value: int, lo: int, hi: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be an int, got {type(value).__name__}")
    if not (lo <= value <= hi):
        raise ValidationError(f"{name}={value} is not between {lo} and {hi}")


@total_ordering
@dataclass(frozen=True, eq=False)
class JalaliDateTime:
    """Solar date plus wall-clock time and an optional tzinfo."""

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    tzinfo: Optional[TZInfo] = None

    def __post_init__(self) -> None:
        try:
            _between("year", self.year, MIN_VALUE_YEAR, MAX_VALUE_YEAR)
            _between("month", self.month, 1, 12)
            _between("day", self.day, 1, solar_month_length(self.year, self.month))
            # 24 is accepted; to_datetime() rolls it over to the next day
            _between("hour", self.hour, 0, 24)
            _between("minute", self.minute, 0, 59)
            _between("second", self.second, 0, 59)
        except ValidationError as e:
            logger.debug("rejected Jalali fields %s: %s", self._fields(), e)
            raise

    # ---------------------------------------------------------
    # Construction from civil time
    # ---------------------------------------------------------

    @classmethod
    def now(cls, tz: Optional[TZInfo] = None) -> "JalaliDateTime":
        return cls.from_datetime(datetime.now(tz))

    @classmethod
    def from_datetime(cls, dt: datetime) -> "JalaliDateTime":
        s = absolute_day_to_solar(date_to_absolute_day(dt.date()))
        return cls(s.year, s.month, s.day, dt.hour, dt.minute, dt.second, dt.tzinfo)

    @classmethod
    def from_date(cls, d: date, tz: Optional[TZInfo] = None) -> "JalaliDateTime":
        s = absolute_day_to_solar(date_to_absolute_day(d))
        return cls(s.year, s.month, s.day, tzinfo=tz)

    @classmethod
    def from_timestamp(cls, ts: float, tz: Optional[TZInfo] = None) -> "JalaliDateTime":
        """From a POSIX timestamp; local time when tz is None."""
        return cls.from_datetime(datetime.fromtimestamp(ts, tz))

    @classmethod
    def from_format(cls, fmt: str, text: str, tz: Optional[TZInfo] = None) -> "JalaliDateTime":
        """Parse a civil (Gregorian) string with a strptime format."""
        dt = datetime.strptime(text, fmt)
        if tz is not None and dt.tzinfo is None:
            dt = dt.replace(tzinfo=tz)
        return cls.from_datetime(dt)

    @classmethod
    def from_solar(cls, d: SolarDate, hour: int = 0, minute: int = 0, second: int = 0,
                   tz: Optional[TZInfo] = None) -> "JalaliDateTime":
        return cls(d.year, d.month, d.day, hour, minute, second, tz)

    # ---------------------------------------------------------
    # Back to civil time
    # ---------------------------------------------------------

    def solar_date(self) -> SolarDate:
        return SolarDate(self.year, self.month, self.day)

    def absolute_day(self) -> AbsoluteDay:
        return solar_to_absolute_day(self.solar_date())

    def to_civil_date(self) -> CivilDate:
        return solar_to_gregorian(self.solar_date())

    def to_date(self) -> date:
        return absolute_day_to_date(self.absolute_day())

    def to_datetime(self) -> datetime:
        c = self.to_civil_date()
        midnight = datetime(c.year, c.month, c.day, tzinfo=self.tzinfo)
        return midnight + timedelta(hours=self.hour, minutes=self.minute, seconds=self.second)

    # ---------------------------------------------------------
    # Calendar queries
    # ---------------------------------------------------------

    def is_leap_year(self) -> bool:
        return is_solar_leap_year(self.year)

    def month_length(self) -> int:
        return solar_month_length(self.year, self.month)

    def weekday(self) -> int:
        """Saturday = 0 ... Friday = 6."""
        return _weekday(self.absolute_day())

    def day_of_year(self) -> int:
        return solar_day_of_year(self.solar_date())

    def month_name(self, names: NameSet = IRANIAN) -> str:
        return names.month_name(self.month)

    def weekday_name(self, names: NameSet = IRANIAN) -> str:
        return names.weekday_name(self.weekday())

    # ---------------------------------------------------------
    # Derived values
    # ---------------------------------------------------------

    def replace(self, **changes: Any) -> "JalaliDateTime":
        return replace(self, **changes)

    def add_days(self, days: int) -> "JalaliDateTime":
        s = absolute_day_to_solar(self.absolute_day() + days)
        return replace(self, year=s.year, month=s.month, day=s.day)

    # ---------------------------------------------------------
    # Formatting
    # ---------------------------------------------------------

    def format(self, pattern: str, names: NameSet = IRANIAN) -> str:
        """
        Substitute token characters in `pattern`, left to right.

          Y  full year          y  last two digits of the year
          m  month, 2 digits    n  month
          d  day, 2 digits      j  day
          H  hour, 2 digits     i  minute, 2 digits    s  second, 2 digits
          F  month name         l  weekday name

        Other characters are copied as-is. There is no escape character.
        """
        out = []
        for ch in pattern:
            if ch == "Y":
                out.append(str(self.year))
            elif ch == "y":
                out.append(str(self.year)[-2:])
            elif ch == "m":
                out.append(f"{self.month:02d}")
            elif ch == "n":
                out.append(str(self.month))
            elif ch == "d":
                out.append(f"{self.day:02d}")
            elif ch == "j":
                out.append(str(self.day))
            elif ch == "H":
                out.append(f"{self.hour:02d}")
            elif ch == "i":
                out.append(f"{self.minute:02d}")
            elif ch == "s":
                out.append(f"{self.second:02d}")
            elif ch == "F":
                out.append(names.month_name(self.month))
            elif ch == "l":
                out.append(names.weekday_name(self.weekday()))
            else:
                out.append(ch)
        return "".join(out)

    def jalali_string(self) -> str:
        return self.format("Y/m/d")

    def __str__(self) -> str:
        return self.format(DEFAULT_FORMAT)

    # ---------------------------------------------------------
    # Ordering
    # ---------------------------------------------------------

    # Equality, hashing and ordering all use the wall-clock fields; tzinfo is ignored.
    def _fields(self) -> Tuple[int, ...]:
        return (self.year, self.month, self.day, self.hour, self.minute, self.second)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JalaliDateTime):
            return NotImplemented
        return self._fields() == other._fields()

    def __hash__(self) -> int:
        return hash(self._fields())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, JalaliDateTime):
            return NotImplemented
        return self._fields() < other._fields()
