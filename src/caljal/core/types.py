from __future__ import annotations
from dataclasses import dataclass
from typing import NamedTuple, Tuple

AbsoluteDay = int

@dataclass(frozen=True)
class CivilDate:
    """Proleptic Gregorian date. Callers pass valid fields."""
    year: int
    month: int
    day: int

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.year, self.month, self.day)

@dataclass(frozen=True)
class SolarDate:
    """Jalali (Solar Hijri) date."""
    year: int
    month: int
    day: int

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def isoformat(self, sep: str = "-") -> str:
        return f"{self.year:04d}{sep}{self.month:02d}{sep}{self.day:02d}"

class BreakPoint(NamedTuple):
    year: int
    jump: int  # years until the next break point
