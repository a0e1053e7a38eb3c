from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import sys

from uccal.format import FORMATS

# properties printed by `uccal day`, in display order
DAY_FIELDS = (
    "date", "sortable", "full", "long", "medium", "short",
    "j_date", "g_date",
    "year", "doy", "triad", "day", "triad_name", "quarter",
    "leap_year", "leap_cycle", "leap_offset",
    "deek_number", "deek_day", "greek_day", "hind_day", "deek_symbol",
    "festival", "festival_number", "festival_symbol",
    "intercal", "intercals", "intercal_symbol",
    "moon", "moon_symbol", "yuga", "zodiac",
)


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


def cmd_day(argv: list[str]) -> int:
    import uccal

    p = argparse.ArgumentParser(prog="uccal day", description="Show a UCC date and its attributes")
    p.add_argument("value", nargs="?", help="ISO 8601 date-time or UCC date, year first (default: now)")
    p.add_argument("--unix", type=int, help="Unix time in milliseconds instead of VALUE")
    p.add_argument("--format", choices=sorted(FORMATS), help="print only this rendering")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)

    try:
        value = args.unix if args.unix is not None else args.value
        d = uccal.as_date(value)
        if args.format:
            print(getattr(d, args.format))
            return 0
        info = uccal.day_info(d, attributes=tuple(args.attr)) if args.attr else None
    except (uccal.UccalError, KeyError) as e:
        print(f"uccal: {e}", file=sys.stderr)
        return 2

    if info is not None:
        for k, v in info.attributes.items():
            print(f"{k:16s} {v}")
        return 0

    for name in DAY_FIELDS:
        try:
            value = getattr(d, name)
        except uccal.RangeError:
            # days on the float edge of a year have no triad
            value = "-"
        print(f"{name:16s} {value}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="uccal", description="UCC calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Show a UCC date and its attributes")
    sub.add_parser("triad", help="Print a triad as a decan-week calendar")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "year-drift"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.cmd == "day":
        return cmd_day(rest)

    if args.cmd == "triad":
        return _run_module_main("uccal.diagnostics.pretty_triad", rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "uccal.diagnostics.round_trip",
            "year-drift": "uccal.diagnostics.year_drift",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
