"""Month and weekday name sets used by JalaliDateTime.format."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

# Saturday first, matching caljal.core.time.weekday
WEEKDAY_NAMES: Tuple[str, ...] = (
    "شنبه", "یکشنبه", "دوشنبه", "سه‌شنبه", "چهارشنبه", "پنج‌شنبه", "جمعه",
)


@dataclass(frozen=True)
class NameSet:
    """A national set of Solar month names plus weekday names."""

    key: str
    months: Tuple[str, ...]
    weekdays: Tuple[str, ...] = WEEKDAY_NAMES

    def __post_init__(self) -> None:
        if len(self.months) != 12:
            raise ValueError("months must hold exactly 12 names")
        if len(self.weekdays) != 7:
            raise ValueError("weekdays must hold exactly 7 names")

    def month_name(self, month: int) -> str:
        return self.months[month - 1]

    def weekday_name(self, index: int) -> str:
        return self.weekdays[index]


IRANIAN = NameSet(
    "iranian",
    ("فروردین", "اردیبهشت", "خرداد", "تیر", "مرداد", "شهریور",
     "مهر", "آبان", "آذر", "دی", "بهمن", "اسفند"),
)

AFGHAN = NameSet(
    "afghan",
    ("حمل", "ثور", "جوزا", "سرطان", "اسد", "سنبله",
     "میزان", "عقرب", "قوس", "جدی", "دلو", "حوت"),
)

NAME_SETS: Dict[str, NameSet] = {ns.key: ns for ns in (IRANIAN, AFGHAN)}


def get_name_set(key: str) -> NameSet:
    if key not in NAME_SETS:
        raise KeyError(f"Unknown name set '{key}'. Available: {sorted(NAME_SETS)}")
    return NAME_SETS[key]


def list_name_sets() -> List[str]:
    return sorted(NAME_SETS)
