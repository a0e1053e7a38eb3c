"""
uccal.engines.leap
------------------
33-year leap cycle: 8 leap years per cycle, a mean year of 365.2424... days.

Python's floored modulo is used throughout, so years before the epoch keep
exactly 8 leap years in every 33-year window.
"""

from __future__ import annotations

import math

from .specs import DEFAULT_SPEC

CYCLE = DEFAULT_SPEC.leap_cycle
CUTOFF = DEFAULT_SPEC.leap_cutoff
STEP = DEFAULT_SPEC.leap_step
ANCHOR = DEFAULT_SPEC.leap_anchor


def is_leap_year(year: int) -> bool:
    # divisible by 33, or remainder < 29 and divisible by 4
    r = year % CYCLE
    return r == 0 or (r < CUTOFF and r % STEP == 0)


def leap_days(year: int) -> int:
    """Leap days between the UCC epoch and the start of ``year``."""
    return math.floor(year / CYCLE * 8)


def leap_cycle(year: int) -> int:
    """Number of the leap cycle containing ``year``."""
    return round((year - ANCHOR) / CYCLE)


def leap_offset(year: int) -> int:
    """Years since the start of the current leap cycle."""
    return (year - ANCHOR) % CYCLE
