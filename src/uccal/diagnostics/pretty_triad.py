from __future__ import annotations

import argparse
from typing import List, Optional

import uccal
from uccal.tables import DSYMBOLS, NUMBERS

# reverse video, as in a terminal `cal`
HIGHLIGHT = "\033[30;107m{}\033[39;49m"


def decan_header() -> str:
    # decan weeks run Sol..Neptune; Neptune closes day 10, 20 and 30
    order = DSYMBOLS[1:] + DSYMBOLS[:1]
    return " " + "  ".join(order)


def triad_title(year: int, triad: int) -> str:
    if triad == 0:
        return f"ZERO {year}"
    d = uccal.UCCDate.from_components(year, triad, 1)
    return f"{NUMBERS[triad - 1]}-{d.triad_name}{d.triad_symbol} {year}"


def triad_rows(year: int, triad: int, *, today: Optional[uccal.UCCDate] = None, color: bool = True) -> List[str]:
    """Lay out one triad as rows of ten days, one column per decan day."""
    rows: List[str] = []
    row: List[str] = []
    for d in uccal.days_in_triad(year, triad):
        if d.day == 0 or d.triad == 0:
            # intercalary days stand on their own line
            rows.append(f"{d.intercal_symbol} {d.intercal}")
            continue
        cell = f"{d.day:2d}"
        if today is not None and color and d.doy == today.doy and d.year == today.year:
            cell = HIGHLIGHT.format(cell)
        row.append(cell)
        if d.day % 10 == 0:
            rows.append(" ".join(row))
            row = []
    if row:
        rows.append(" ".join(row))
    return rows


def print_triad(year: int, triad: int, *, today: Optional[uccal.UCCDate] = None, color: bool = True) -> None:
    print(f"        {triad_title(year, triad)}")
    if triad:
        print(decan_header())
    for line in triad_rows(year, triad, today=today, color=color):
        print(line)
    print()


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print a UCC triad as a decan-week calendar.")
    p.add_argument("--triad", nargs=2, type=int, metavar=("YEAR", "TRIAD"),
                   help="Triad to print (default: the current one)")
    p.add_argument("--year", type=int, help="Print every triad of YEAR")
    p.add_argument("--no-color", action="store_true", help="Do not highlight today")
    args = p.parse_args(argv)

    today = uccal.UCCDate.from_now()
    color = not args.no_color

    if args.year is not None:
        for t in range(13):
            print_triad(args.year, t, today=today, color=color)
        return 0

    if args.triad:
        year, triad = args.triad
    else:
        year, triad = today.year, today.triad
    print_triad(year, triad, today=today, color=color)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
