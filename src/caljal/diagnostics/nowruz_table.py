from __future__ import annotations

import argparse
from typing import List, Tuple

from caljal.core.time import absolute_day_to_gregorian, weekday
from caljal.engines.leap import MAX_YEAR, MIN_YEAR, anchor_day, cycle_leap, is_solar_leap_year
from caljal.names import WEEKDAY_NAMES

_WEEKDAY_SHORT = ("Sat", "Sun", "Mon", "Tue", "Wed", "Thu", "Fri")


def nowruz_rows(from_year: int, to_year: int) -> List[Tuple[int, str, str, bool, bool]]:
    """(year, Gregorian date of Farvardin 1, weekday, leap, cycle_leap) per Solar year."""
    rows = []
    for jy in range(from_year, to_year + 1):
        jdn = anchor_day(jy)
        g = absolute_day_to_gregorian(jdn)
        rows.append((
            jy,
            f"{g.year:04d}-{g.month:02d}-{g.day:02d}",
            _WEEKDAY_SHORT[weekday(jdn)],
            is_solar_leap_year(jy),
            cycle_leap(jy),
        ))
    return rows


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the Gregorian date of Nowruz (Farvardin 1) and leap flags per Solar year."
    )
    p.add_argument("--from-year", type=int, default=1395)
    p.add_argument("--to-year", type=int, default=1415)
    p.add_argument("--persian-weekdays", action="store_true",
                   help="Print weekday names in Persian.")
    args = p.parse_args(argv)

    if args.to_year < args.from_year:
        raise SystemExit("--to-year must be >= --from-year")
    if args.from_year < MIN_YEAR or args.to_year > MAX_YEAR:
        raise SystemExit(f"years must lie in [{MIN_YEAR}, {MAX_YEAR}]")

    print(f"{'Year':>6}  {'Nowruz':<10}  {'Day':<9}  {'Leap':<4}  Cycle")
    print("-" * 42)
    for jy, nowruz, dow, leap, cyc in nowruz_rows(args.from_year, args.to_year):
        if args.persian_weekdays:
            dow = WEEKDAY_NAMES[_WEEKDAY_SHORT.index(dow)]
        mark = "" if leap == cyc else "  *"
        print(f"{jy:>6}  {nowruz:<10}  {dow:<9}  {'yes' if leap else 'no':<4}  {'yes' if cyc else 'no'}{mark}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
