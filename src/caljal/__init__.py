"""caljal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .api import (
    coerce_gregorian,
    coerce_solar,
    days_in_month,
    format_jalali,
    is_leap_year,
    now_jalali,
    to_gregorian,
    to_jalali,
)
from .core.errors import CaljalError, OutOfRangeError, ValidationError
from .core.time import absolute_day_to_gregorian, gregorian_to_absolute_day
from .core.types import CivilDate, SolarDate
from .digits import to_latin_digits, to_persian_digits
from .engines.converter import (
    absolute_day_to_solar,
    check_date,
    gregorian_to_solar,
    solar_to_absolute_day,
    solar_to_gregorian,
)
from .engines.leap import (
    LEAP_YEARS,
    MAX_YEAR,
    MIN_YEAR,
    is_solar_leap_year,
    is_valid_solar_date,
    solar_month_length,
)
from .names import AFGHAN, IRANIAN, NameSet, get_name_set
from .value import JalaliDateTime

__all__ = [
    "coerce_gregorian",
    "coerce_solar",
    "days_in_month",
    "format_jalali",
    "is_leap_year",
    "now_jalali",
    "to_gregorian",
    "to_jalali",
    "CaljalError",
    "OutOfRangeError",
    "ValidationError",
    "absolute_day_to_gregorian",
    "gregorian_to_absolute_day",
    "CivilDate",
    "SolarDate",
    "to_latin_digits",
    "to_persian_digits",
    "absolute_day_to_solar",
    "check_date",
    "gregorian_to_solar",
    "solar_to_absolute_day",
    "solar_to_gregorian",
    "LEAP_YEARS",
    "MAX_YEAR",
    "MIN_YEAR",
    "is_solar_leap_year",
    "is_valid_solar_date",
    "solar_month_length",
    "AFGHAN",
    "IRANIAN",
    "NameSet",
    "get_name_set",
    "JalaliDateTime",
]
