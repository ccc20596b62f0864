#!/usr/bin/env python3
"""
Leap-year barcode: the authoritative leap table against the position-in-cycle
flag of the break-point formula. Disagreements cluster at break points.
"""
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

from caljal.engines.leap import MAX_YEAR, MIN_YEAR, cycle_leap, is_solar_leap_year


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "caljal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "caljal[diagnostics]"') from e


def build_flags(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray", "np.ndarray"]:
    years = np.arange(start_year, end_year + 1, dtype=int)
    table = np.array([is_solar_leap_year(int(y)) for y in years], dtype=bool)
    cycle = np.array([cycle_leap(int(y)) for y in years], dtype=bool)
    return years, table, cycle


def disagreements(start_year: int, end_year: int) -> List[int]:
    np = _need_numpy()
    years, table, cycle = build_flags(np, start_year, end_year)
    return [int(y) for y in years[table != cycle]]


def summary(np, years, table, cycle) -> List[str]:
    lines = [
        f"years           : {int(years[0])} .. {int(years[-1])} ({years.size})",
        f"leap (table)    : {int(table.sum())}",
        f"leap (cycle)    : {int(cycle.sum())}",
        f"mean year length: {365 + float(table.mean()):.6f} days",
    ]
    leap_years = years[table]
    if leap_years.size > 1:
        gaps = np.diff(leap_years)
        values, counts = np.unique(gaps, return_counts=True)
        lines.append("leap gaps       : " + ", ".join(f"{int(v)}y x{int(c)}" for v, c in zip(values, counts)))
    diff = years[table != cycle]
    lines.append(f"disagreements   : {diff.size}" + (f" ({', '.join(str(int(y)) for y in diff[:20])})" if diff.size else ""))
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Leap-year barcode: leap table vs. 33-year cycle position.")
    p.add_argument("--start-year", type=int, default=1300)
    p.add_argument("--end-year", type=int, default=1500)
    p.add_argument("--out", default="leapyear_barcode.png")
    p.add_argument("--title", default="Solar Hijri leap years")
    p.add_argument("--no-plot", action="store_true", help="Print the summary only.")
    args = p.parse_args(argv)

    start_year, end_year = args.start_year, args.end_year
    if end_year < start_year:
        raise SystemExit("--end-year must be >= --start-year")
    if start_year < MIN_YEAR or end_year > MAX_YEAR:
        raise SystemExit(f"years must lie in [{MIN_YEAR}, {MAX_YEAR}]")

    np = _need_numpy()
    years, table, cycle = build_flags(np, start_year, end_year)
    for line in summary(np, years, table, cycle):
        print(line)

    if args.no_plot:
        return 0

    plt = _need_matplotlib()
    fig, ax = plt.subplots(figsize=(16, 2.4))
    ax.vlines(years[table], 0.55, 0.95, color="0.15", lw=1.2, label="leap table")
    ax.vlines(years[cycle], 0.05, 0.45, color="0.55", lw=1.2, label="cycle position")
    diff = years[table != cycle]
    if diff.size:
        ax.scatter(diff, np.full(diff.size, 0.5), marker="x", c="red", zorder=5, label="disagreement")

    ax.set_xlim(start_year - 0.5, end_year + 0.5)
    ax.set_ylim(0, 1)
    ax.set_yticks([])
    ax.tick_params(axis="x", length=0)
    ax.set_xlabel("Solar Hijri year")
    ax.set_title(args.title)
    ax.legend(loc="center left", bbox_to_anchor=(1.01, 0.5), frameon=False)
    fig.tight_layout()
    fig.savefig(args.out, dpi=250)
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
