#!/usr/bin/env python3
"""
Drift of UCC New Year's day against the March equinox.

The UCC mean year (365.242424... days) is a touch longer than the modern
tropical year, so New Year's creeps later in the Gregorian calendar. This
tool prints, or plots, the Gregorian position of New Year's for a span of
UCC years together with the drift predicted by the mean tropical year.
"""

from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import uccal
from uccal.core.time import days_from_civil
from uccal.engines.specs import TROPICAL_YEAR

# UCC year containing J2000.0
UCC_YEAR_J2000 = 13500


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "uccal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "uccal[diagnostics]"') from e


def tropical_year_days(T: float) -> float:
    """Mean tropical year in days, Laskar-style; T in Julian centuries from J2000.0."""
    return 365.2421896698 - 6.15359e-6 * T - 7.29e-10 * T**2 + 2.64e-10 * T**3


def new_year_offset(year: int) -> Tuple[int, int]:
    """(Gregorian year, days after 20 March) of New Year's day of UCC ``year``."""
    gy, gm, gd = uccal.to_gregorian(uccal.UCCDate.from_components(year, 0, 1))
    return gy, days_from_civil(gy, gm, gd) - days_from_civil(gy, 3, 20)


def build_series(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray", "np.ndarray"]:
    years = np.arange(start_year, end_year + 1, dtype=int)
    greg = np.empty_like(years)
    offset = np.empty_like(years, dtype=float)
    for i, Y in enumerate(years):
        greg[i], offset[i] = new_year_offset(int(Y))

    # predicted drift: accumulated excess of the UCC year over the tropical year
    T = (years - UCC_YEAR_J2000) / 100.0
    excess = TROPICAL_YEAR - tropical_year_days(T)
    drift = np.cumsum(excess)
    k0 = int(np.clip(UCC_YEAR_J2000 - start_year, 0, len(years) - 1))
    drift = drift - drift[k0] + offset[k0]
    return greg, offset, drift


def print_table(start_year: int, end_year: int, step: int) -> None:
    print("UCC year  Gregorian  New Year's (days after 20 Mar)")
    for Y in range(start_year, end_year + 1, step):
        gy, off = new_year_offset(Y)
        print(f"{Y:8d}  {gy:9d}  {off:+4d}")


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Drift of UCC New Year's day against the March equinox.")
    p.add_argument("--from-year", type=int, default=13000)
    p.add_argument("--to-year", type=int, default=14000)
    p.add_argument("--step", type=int, default=33, help="Table row spacing in years (default: one leap cycle)")
    p.add_argument("--plot", action="store_true", help="Write a scatter plot instead of a table")
    p.add_argument("--outbase", default="ucc_year_drift", help="Output base name for --plot")
    args = p.parse_args(argv)

    if not args.plot:
        print_table(args.from_year, args.to_year, args.step)
        return 0

    np = _need_numpy()
    plt = _need_matplotlib()

    greg, offset, drift = build_series(np, args.from_year, args.to_year)

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)
    ax.scatter(greg, offset, s=10, c="tab:blue", alpha=0.35, label="New Year's")
    ax.plot(greg, drift, color="0.30", linewidth=1.8, label="mean-year drift")
    ax.set_xlabel("Gregorian year")
    ax.set_ylabel("Days after 20 March")
    ax.set_title("UCC New Year's against the March equinox")
    ax.legend(loc="upper left", frameon=False)

    fig.savefig(args.outbase + ".png", dpi=300)
    print(f"Saved: {args.outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
