from __future__ import annotations

import argparse
import logging
import random
from datetime import date, timedelta

from caljal.core.time import date_to_absolute_day
from caljal.engines.converter import absolute_day_to_solar, solar_to_absolute_day

logger = logging.getLogger(__name__)


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def random_date(rng: random.Random, start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=rng.randint(0, span))


def roundtrip_test(N: int, start: date, end: date, seed: int, *, max_failures: int) -> int:
    """Gregorian -> Solar -> Gregorian on N random days; returns the failure count."""
    rng = random.Random(seed)
    failures = 0

    for _ in range(N):
        d0 = random_date(rng, start, end)
        jdn = date_to_absolute_day(d0)
        s = absolute_day_to_solar(jdn)
        back = solar_to_absolute_day(s)
        if back != jdn:
            failures += 1
            print("\nFAIL")
            print("d0:", d0)
            print("solar:", s)
            print("jdn:", jdn, "back:", back)
            if failures >= max_failures:
                return failures

    logger.debug("round trip: %d trials, %d failures", N, failures)
    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: gregorian -> jalali -> gregorian.")
    p.add_argument("--N", type=int, default=20000, help="Number of trials.")
    p.add_argument("--start", type=str, default="0622-01-01", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="3700-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    failures = roundtrip_test(
        args.N, parse_date(args.start), parse_date(args.end), args.seed,
        max_failures=args.max_failures,
    )
    print(f"{args.N} trials, {failures} failures")
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
