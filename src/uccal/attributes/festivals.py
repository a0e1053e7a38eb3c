"""
uccal.attributes.festivals
--------------------------
Intercalary days and the eight festivals.

The intercalary days sit outside the triads: Leap Year's (doy 0, leap
years only), New Year's (doy 1) and one day at the opening of each season.
Festivals are short windows of days around the triad boundaries; the first
wraps across the turn of the year.
"""

from __future__ import annotations

from typing import Dict, Tuple

from ..core.types import Festival
from ..tables import TRIADS, TSYMBOLS

# doy -> (name, symbol)
INTERCALARY: Dict[int, Tuple[str, str]] = {
    0: ("Leap Year's", "✶"),
    1: ("New Year's", "❂"),
    2: ("1st Season's", "◷"),
    93: ("2nd Season's", "◴"),
    184: ("3rd Season's", "◵"),
    275: ("4th Season's", "◶"),
}

# season boundaries after New Year's; each one passed adds an intercalary day
_SEASON_DOYS: Tuple[int, ...] = (2, 93, 184, 275)

# (first doy, last doy, triad number, glyph); festival number is the position.
# Festival 1 opens on doy 363; date.js 1.0.6 tests doy > 363 and starts it
# a day later.
FESTIVAL_WINDOWS: Tuple[Tuple[int, int, int, str], ...] = (
    (363, 2, 1, "⊕"),
    (47, 48, 2, "⊗"),
    (92, 94, 4, "⊕"),
    (138, 139, 5, "⊗"),
    (184, 187, 7, "⊕"),
    (229, 230, 8, "⊗"),
    (275, 277, 10, "⊕"),
    (320, 321, 11, "⊗"),
)

NO_FESTIVAL = Festival(number=0, name="", symbol="")


def intercal(doy: int) -> str:
    return INTERCALARY.get(doy, ("", ""))[0]


def intercal_symbol(doy: int) -> str:
    return INTERCALARY.get(doy, ("", ""))[1]


def is_intercalary(doy: int) -> bool:
    return doy in INTERCALARY


def intercals(doy: int, leap_year: bool) -> int:
    """Intercalary days so far this year, the current day included."""
    if doy < 2:
        return doy
    passed = sum(1 for s in _SEASON_DOYS if doy >= s)
    # New Year's, plus Leap Year's when there is one (date.js never adds it)
    return passed + (2 if leap_year else 1)


def _in_window(doy: int, first: int, last: int) -> bool:
    if first <= last:
        return first <= doy <= last
    return doy >= first or doy <= last


def festival_info(doy: int) -> Festival:
    for number, (first, last, triad, glyph) in enumerate(FESTIVAL_WINDOWS, start=1):
        if _in_window(doy, first, last):
            return Festival(number=number, name=TRIADS[triad - 1], symbol=glyph + TSYMBOLS[triad - 1])
    return NO_FESTIVAL


def festival(doy: int) -> str:
    return festival_info(doy).name


def festival_number(doy: int) -> int:
    return festival_info(doy).number


def festival_symbol(doy: int) -> str:
    return festival_info(doy).symbol
