from __future__ import annotations

from datetime import datetime
from typing import Any, List, Sequence, Tuple

from .core.date import UCCDate
from .core.errors import ParseError
from .core.time import civil_from_days
from .core.types import DayInfo
from .engines.epoch import ucc_to_unix
from .engines.specs import ONE_DAY
from .engines.triad import days_before_triad
from .engines.year_day import days_in_year as _days_in_year, year_start_days
from .attributes.festivals import INTERCALARY


def as_date(value: Any = None) -> UCCDate:
    """Coerce a user-facing value to a UCCDate.

    ``None`` is now; ints are Unix milliseconds; strings are parsed.
    """
    if value is None:
        return UCCDate.from_now()
    if isinstance(value, UCCDate):
        return value
    if isinstance(value, datetime):
        return UCCDate.from_datetime(value)
    if isinstance(value, str):
        return UCCDate.from_string(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return UCCDate.from_instant(value)
    raise ParseError(f"as_date: cannot make a UCC date from {type(value).__name__}")


def day_info(value: Any = None, *, attributes: Sequence[str] = ()) -> DayInfo:
    d = as_date(value)
    attrs = d.attributes(attributes) if attributes else None
    return DayInfo(date=d, mapped=d.mapped, attributes=attrs)


def to_gregorian(value: Any) -> Tuple[int, int, int]:
    """Proleptic Gregorian (year, month, day), astronomical year numbering."""
    d = as_date(value)
    return civil_from_days(ucc_to_unix(d.instant) // ONE_DAY)


# ============================================================
# Year / triad layout
# ============================================================

def year_start(year: int) -> UCCDate:
    return UCCDate(year_start_days(year) * ONE_DAY)


def days_in_year(year: int) -> int:
    return _days_in_year(year)


def year_days(year: int) -> List[UCCDate]:
    first = year_start_days(year)
    return [UCCDate(d * ONE_DAY) for d in range(first, first + _days_in_year(year))]


def days_in_triad(year: int, triad: int) -> List[UCCDate]:
    """Every day of ``triad`` in ``year``, in order.

    Triad 0 is the run of intercalary days opening the year (Leap Year's,
    New Year's).
    """
    days_before_triad(triad)  # range check
    return [d for d in year_days(year) if d.triad == triad]


def triad_bounds(year: int, triad: int) -> dict:
    days = days_in_triad(year, triad)
    return {
        "year": year,
        "triad": triad,
        "first": days[0],
        "last": days[-1],
        "length": len(days),
    }


def intercalary_days(year: int) -> List[UCCDate]:
    return [d for d in year_days(year) if d.doy in INTERCALARY]


def festivals_in_year(year: int) -> List[UCCDate]:
    """Festival days of ``year`` in calendar order.

    The first festival straddles the turn of the year, so its days appear at
    both ends of the list.
    """
    return [d for d in year_days(year) if d.festival_number]