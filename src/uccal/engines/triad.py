"""
uccal.engines.triad
-------------------
Day-of-year <-> (triad, day-of-triad).

A year opens with the intercalary days (triad 0) and then runs twelve
30-day triads. Each quarter of the year is pushed back by one more
intercalary day, so the triad start offsets carry padding 2, 3, 4, 5 for
triads 1-3, 4-6, 7-9 and 10-12.
"""

from __future__ import annotations

from bisect import bisect_right
from typing import Tuple

from ..core.errors import RangeError
from ..tables import TRIADS, TSYMBOLS

TRIAD_DAYS = 30
MAX_DOY = 365


def _pad(triad: int) -> int:
    return 2 + (triad - 1) // 3


# Day-of-year on which each triad starts, triad 0 first.
TRIAD_STARTS: Tuple[int, ...] = (0,) + tuple(
    (t - 1) * TRIAD_DAYS + _pad(t) for t in range(1, 13)
)

# Lowest day-of-year belonging to each triad. Triads 1, 4, 7 and 10 open on
# their season's intercalary day (day 0); the others open on day 1.
_BUCKETS: Tuple[int, ...] = (2, 33, 63, 93, 124, 154, 184, 215, 245, 275, 306, 336)


def days_before_triad(triad: int) -> int:
    """Days from the start of the year to the start of ``triad``."""
    if not 0 <= triad <= 12:
        raise RangeError(f"days_before_triad: triad {triad} out of range 0..12")
    return TRIAD_STARTS[triad]


def doy_to_triad(doy: int) -> int:
    if not 0 <= doy <= MAX_DOY:
        raise RangeError(f"doy_to_triad: day-of-year {doy} out of range 0..{MAX_DOY}")
    return bisect_right(_BUCKETS, doy)


def doy_to_day(doy: int) -> int:
    if not 0 <= doy <= MAX_DOY:
        raise RangeError(f"doy_to_day: day-of-year {doy} out of range 0..{MAX_DOY}")
    return doy - days_before_triad(doy_to_triad(doy))


def triad_day_to_doy(triad: int, day: int) -> int:
    return days_before_triad(triad) + day


def triad_name(triad: int) -> str:
    return TRIADS[triad - 1] if triad else "Zero"


def triad_symbol(triad: int) -> str:
    return TSYMBOLS[triad - 1] if triad else "0"


def quarter(triad: int) -> int:
    return triad // 4 + 1 if triad > 0 else 0
