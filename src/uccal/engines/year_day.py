"""
uccal.engines.year_day
----------------------
UCC milliseconds <-> (year, day-of-year).

Year Y covers the days d with ``d / TROPICAL_YEAR`` in [Y, Y+1). Counting
from ``floor(Y * TROPICAL_YEAR)`` makes the first day of an ordinary year
doy 1; a leap year is shifted back one so that it opens on doy 0, the
"Leap Year's" day.
"""

from __future__ import annotations

import math
from typing import Tuple, Union

from ..core.errors import RangeError
from ..core.types import MappedDate
from .leap import is_leap_year
from .specs import ONE_DAY, TROPICAL_YEAR
from .triad import days_before_triad, doy_to_day, doy_to_triad

MS_PER_HOUR = 3_600_000
MS_PER_MINUTE = 60_000
MS_PER_SECOND = 1000


def ms_to_days(ms: int) -> int:
    """Whole days since the UCC epoch."""
    return ms // ONE_DAY


def days_to_ms(days: int) -> int:
    return days * ONE_DAY


def year_to_days(year: int) -> int:
    return math.floor(year * TROPICAL_YEAR)


def days_to_year(days: int) -> int:
    return math.floor(days / TROPICAL_YEAR)


def ms_to_year(ms: int) -> int:
    return days_to_year(ms_to_days(ms))


def ms_to_doy(ms: int) -> int:
    return year_and_doy(ms)[1]


def ms_to_triad(ms: int) -> int:
    return doy_to_triad(ms_to_doy(ms))


def ms_to_day(ms: int) -> int:
    return doy_to_day(ms_to_doy(ms))


def year_and_doy(ms: int) -> Tuple[int, int]:
    """(year, doy) of a UCC instant.

    Defined for every instant. The float year can push doy one past either
    end (-1 on the epoch day, 366 on a few days before the epoch); such days
    have no triad.
    """
    days = ms_to_days(ms)
    year = days_to_year(days)
    doy = days - year_to_days(year)
    # the leap day is already inside the floor; do not count it twice
    if is_leap_year(year):
        doy -= 1
    return year, doy


def map_ms(ms: int) -> MappedDate:
    """Map a UCC instant to its (year, doy, triad, day) tuple in one pass."""
    year, doy = year_and_doy(ms)
    triad = doy_to_triad(doy)
    return MappedDate(year=year, doy=doy, triad=triad, day=doy - days_before_triad(triad))


def _integral(name: str, value: Union[int, float]) -> int:
    if isinstance(value, bool):
        raise RangeError(f"components_to_ms: {name} must be a number, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise RangeError(f"components_to_ms: {name} must be integral, got {value!r}")


def components_to_ms(
    year: int,
    triad: int,
    day: int = 0,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
) -> int:
    """UCC date and time fields -> UCC milliseconds.

    Fields past the day are not range-checked and simply add on, so
    ``hour=25`` lands on the following day.
    """
    year = _integral("year", year)
    triad = _integral("triad", triad)
    day = _integral("day", day)

    days = year_to_days(year) + days_before_triad(triad) + day
    # leap years number their days from 0, one lower than ordinary years
    if is_leap_year(year):
        days += 1

    ms = days_to_ms(days)
    ms += _integral("hour", hour) * MS_PER_HOUR
    ms += _integral("minute", minute) * MS_PER_MINUTE
    ms += _integral("second", second) * MS_PER_SECOND
    ms += _integral("millisecond", millisecond)
    return ms


def year_start_days(year: int) -> int:
    """Days since the epoch of the first day of ``year``."""
    return components_to_ms(year, 0, 0 if is_leap_year(year) else 1) // ONE_DAY


def days_in_year(year: int) -> int:
    return year_start_days(year + 1) - year_start_days(year)
