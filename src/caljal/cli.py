from __future__ import annotations

import argparse
import logging
import sys
import re
import importlib
import inspect
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from caljal.core.errors import CaljalError
from caljal.logging_setup import setup_logging

logger = logging.getLogger(__name__)

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _add_display_args(p: argparse.ArgumentParser, default_format: str) -> None:
    from caljal.names import NAME_SETS

    p.add_argument("--format", default=default_format, help=f"Output pattern (default: {default_format})")
    p.add_argument("--names", choices=sorted(NAME_SETS), default="iranian", help="Month-name set")
    p.add_argument("--persian-digits", action="store_true", help="Render digits in Persian")


def _tz(name: Optional[str]) -> Optional[ZoneInfo]:
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except ZoneInfoNotFoundError as e:
        raise ValueError(f"Unknown time zone: {name}") from e


def cmd_to_jalali(argv: list[str]) -> int:
    import caljal

    p = argparse.ArgumentParser(prog="caljal to-jalali", description="Gregorian -> Jalali date")
    p.add_argument("date", help="YYYY-MM-DD")
    _add_display_args(p, "Y/m/d")
    args = p.parse_args(argv)

    print(caljal.format_jalali(
        args.date,
        args.format,
        names=caljal.get_name_set(args.names),
        persian_digits=args.persian_digits,
    ))
    return 0


def cmd_to_gregorian(argv: list[str]) -> int:
    import caljal

    p = argparse.ArgumentParser(prog="caljal to-gregorian", description="Jalali -> Gregorian date")
    p.add_argument("date", help="YYYY-MM-DD or YYYY/MM/DD (Persian digits accepted)")
    args = p.parse_args(argv)

    s = caljal.coerce_solar(args.date)
    if not caljal.is_valid_solar_date(s.year, s.month, s.day):
        raise ValueError(f"Not a valid Jalali date: {args.date}")
    print(caljal.to_gregorian(s).isoformat())
    return 0


def cmd_now(argv: list[str]) -> int:
    import caljal

    p = argparse.ArgumentParser(prog="caljal now", description="Current date-time in the Jalali calendar")
    p.add_argument("--tz", default=None, help="IANA time zone, e.g. Asia/Tehran (default: local)")
    _add_display_args(p, "Y/m/d H:i:s")
    args = p.parse_args(argv)

    print(caljal.now_jalali(
        args.format,
        tz=_tz(args.tz),
        names=caljal.get_name_set(args.names),
        persian_digits=args.persian_digits,
    ))
    return 0


def _dispatch(argv: list[str]) -> int:
    # Backward compatibility: `caljal YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_to_jalali(argv)

    p = argparse.ArgumentParser(prog="caljal", description="Jalali (Solar Hijri) calendar toolkit CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("to-jalali", help="Gregorian -> Jalali date")
    sub.add_parser("to-gregorian", help="Jalali -> Gregorian date")
    sub.add_parser("now", help="Current date-time in the Jalali calendar")

    p_month = sub.add_parser("month", help="Print a Jalali month calendar")
    p_month.add_argument("year", type=int)
    p_month.add_argument("month", type=int)

    sub.add_parser("nowruz", help="Print the Nowruz table (diagnostics)")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["leap-years", "round-trip", "pretty-month"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.cmd == "to-jalali":
        return cmd_to_jalali(rest)

    if args.cmd == "to-gregorian":
        return cmd_to_gregorian(rest)

    if args.cmd == "now":
        return cmd_now(rest)

    if args.cmd == "month":
        return _run_module_main(
            "caljal.diagnostics.pretty_month",
            ["--jalali", str(args.year), str(args.month)] + rest,
        )

    if args.cmd == "nowruz":
        return _run_module_main("caljal.diagnostics.nowruz_table", rest)

    if args.cmd == "diag":
        tool_map = {
            "leap-years": "caljal.diagnostics.leap_years",
            "round-trip": "caljal.diagnostics.round_trip",
            "pretty-month": "caljal.diagnostics.pretty_month",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    pre = argparse.ArgumentParser(add_help=False, allow_abbrev=False)
    pre.add_argument("--log-level", default="WARNING",
                     choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    pre.add_argument("--log-file", default=None)
    opts, argv = pre.parse_known_args(argv)
    setup_logging(level=getattr(logging, opts.log_level), log_file=opts.log_file)

    try:
        return _dispatch(argv)
    except (CaljalError, ValueError) as e:
        logger.debug("command failed", exc_info=True)
        print(f"caljal: error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
