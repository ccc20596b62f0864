from __future__ import annotations

from datetime import date, timedelta
import calendar as pycal
import argparse

from caljal.core.time import absolute_day_to_date, date_to_absolute_day, weekday
from caljal.core.types import SolarDate
from caljal.engines.converter import absolute_day_to_solar, solar_to_absolute_day
from caljal.engines.leap import solar_month_length
from caljal.names import NAME_SETS, get_name_set


def dow_header() -> str:
    return "Sa     Su     Mo     Tu     We     Th     Fr"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def build_weeks(first_jdn: int, days: list[tuple[str, str]]) -> list[list[tuple[str, str]]]:
    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    for _ in range(weekday(first_jdn)):  # Saturday=0
        wk.append(cell("", ""))
    for top, bot in days:
        wk.append(cell(top, bot))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def render_grid(title: str, weeks: list[list[tuple[str, str]]]) -> str:
    lines = [title, dow_header(), "-" * len(dow_header())]
    for wk in weeks:
        lines.append(" ".join(c[0] for c in wk).rstrip())
        lines.append(" ".join(c[1] for c in wk).rstrip())
    return "\n".join(lines) + "\n"


def jalali_month_calendar(jy: int, jm: int, names: str = "iranian") -> str:
    first = solar_to_absolute_day(SolarDate(jy, jm, 1))
    length = solar_month_length(jy, jm)

    days = []
    for i in range(length):
        g = absolute_day_to_date(first + i)
        days.append((f"{i + 1:2d}", f"{g.month:02d}-{g.day:02d}"))

    d0 = absolute_day_to_date(first)
    d1 = absolute_day_to_date(first + length - 1)
    month_name = get_name_set(names).month_name(jm)
    title = f"Jalali month  {jy}-{jm:02d} {month_name}   ({d0} .. {d1})"
    return render_grid(title, build_weeks(first, days))


def gregorian_month_calendar(gy: int, gm: int) -> str:
    first = date(gy, gm, 1)
    last_day = pycal.monthrange(gy, gm)[1]

    days = []
    d = first
    while d.month == gm:
        s = absolute_day_to_solar(date_to_absolute_day(d))
        days.append((f"{d.day:2d}", f"{s.month:02d}-{s.day:02d}"))
        d += timedelta(days=1)

    title = f"Gregorian month  {gy}-{gm:02d}  ({last_day} days)"
    return render_grid(title, build_weeks(date_to_absolute_day(first), days))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a Jalali-month calendar and/or a Gregorian-month calendar with paired labels."
    )
    p.add_argument("--jalali", nargs=2, type=int, metavar=("Y", "M"),
                   help="Jalali month to print: Y M (e.g. 1403 12)")
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2025 3)")
    p.add_argument("--names", choices=sorted(NAME_SETS), default="iranian")
    args = p.parse_args(argv)

    if not args.jalali and not args.greg:
        print(jalali_month_calendar(1403, 12, args.names))
        print(gregorian_month_calendar(2025, 3))
        return 0

    if args.jalali:
        jy, jm = args.jalali
        print(jalali_month_calendar(jy, jm, args.names))

    if args.greg:
        gy, gm = args.greg
        print(gregorian_month_calendar(gy, gm))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
