"""
uccal.format
------------
String renderings of a mapped UCC date.

    date      8.10.13521
    sortable  13521.10.08
    full      8th TEN-Capricorn♑ 13521
    long      8th Capricorn♑ 13521
    medium    8♑13521
    short     8♑21

The first two intercalary days have no triad and render as
``0 ZERO <year>`` (Leap Year's) and ``1st ZERO <year>`` (New Year's) in the
full and long forms; medium and short show the intercalary symbol instead
of the day and triad.
"""

from __future__ import annotations

from .attributes.festivals import intercal_symbol
from .core.time import iso_string, split_unix_ms
from .core.types import MappedDate
from .engines.epoch import ucc_to_unix
from .tables import NUMBERS, TRIADS, TSYMBOLS


def ordinal(num: int) -> str:
    if 10 < num < 21:
        return f"{num}th"
    last = num % 10
    if last == 1:
        return f"{num}st"
    if last == 2:
        return f"{num}nd"
    if last == 3:
        return f"{num}rd"
    return f"{num}th"


def _zero_triad(m: MappedDate) -> str | None:
    if m.doy == 0:
        return f"0 ZERO {m.year}"
    if m.doy == 1:
        return f"1st ZERO {m.year}"
    return None


def _ord_day(day: int) -> str:
    return ordinal(day) if day > 0 else "0"


def format_full(m: MappedDate) -> str:
    zero = _zero_triad(m)
    if zero is not None:
        return zero
    i = m.triad - 1
    return f"{_ord_day(m.day)} {NUMBERS[i]}-{TRIADS[i]}{TSYMBOLS[i]} {m.year}"


def format_long(m: MappedDate) -> str:
    zero = _zero_triad(m)
    if zero is not None:
        return zero
    i = m.triad - 1
    return f"{_ord_day(m.day)} {TRIADS[i]}{TSYMBOLS[i]} {m.year}"


def format_medium(m: MappedDate) -> str:
    sym = intercal_symbol(m.doy)
    if sym:
        return f"{sym}{m.year}"
    return f"{m.day}{TSYMBOLS[m.triad - 1]}{m.year}"


def format_short(m: MappedDate) -> str:
    yy = str(m.year)[-2:]
    sym = intercal_symbol(m.doy)
    if sym:
        return f"{sym}{yy}"
    return f"{m.day}{TSYMBOLS[m.triad - 1]}{yy}"


def format_sortable(m: MappedDate) -> str:
    return f"{m.year}.{m.triad:02d}.{m.day:02d}"


def format_date(m: MappedDate) -> str:
    return f"{m.day}.{m.triad}.{m.year}"


def format_iso(instant: int) -> str:
    """ISO 8601 string of a UCC instant."""
    return iso_string(ucc_to_unix(instant))


def format_gregorian(instant: int) -> str:
    """``D/M/Y HH:MM:SS.mmm CE`` in UTC.

    The Gregorian calendar has no year zero: astronomical year 0 is 1 BCE,
    year -1 is 2 BCE, and so on.
    """
    year, month, day, hour, minute, second, milli = split_unix_ms(ucc_to_unix(instant))
    time = f"{hour:02d}:{minute:02d}:{second:02d}.{milli:03d}"
    if year < 1:
        return f"{day}/{month}/{abs(year) + 1} {time} BCE"
    return f"{day}/{month}/{year} {time} CE"


FORMATS = {
    "date": format_date,
    "sortable": format_sortable,
    "full": format_full,
    "long": format_long,
    "medium": format_medium,
    "short": format_short,
}


def render(m: MappedDate, style: str = "date") -> str:
    if style not in FORMATS:
        raise KeyError(f"Unknown format '{style}'. Available: {sorted(FORMATS)}")
    return FORMATS[style](m)
