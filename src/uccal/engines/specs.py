"""
uccal.engines.specs
-------------------
Fixed parameters of the UCC calendar.

All epoch arithmetic is done in integer milliseconds. The tropical year is
the float 365.242424242, not the exact 8/33 fraction; year boundaries are
found by flooring against this value.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..core.time import days_from_civil


@dataclass(frozen=True)
class UCCSpec:
    version: str

    one_day: int          # ms
    one_year: int         # ms, 365 days
    offset: int           # UCC epoch in Unix ms

    tropical_year: float  # days
    moon_period: float    # synodic month, days
    moon_reference: int   # Unix ms of the reference moon

    leap_cycle: int       # years per leap cycle
    leap_cutoff: int      # remainders >= this are never leap
    leap_step: int
    leap_anchor: int      # year the leap cycles are counted from

    age_cycle: int        # years in the precessional macro-cycle

    one_ad_days: int      # days from the UCC epoch to 1 Jan 0001

    @property
    def one_ad(self) -> int:
        return self.one_ad_days * self.one_day


ONE_DAY = 86_400_000

DEFAULT_SPEC = UCCSpec(
    version="1.0.6",
    one_day=ONE_DAY,
    one_year=365 * ONE_DAY,
    # -11502-03-21T00:00:00Z, proleptic Gregorian
    offset=days_from_civil(-11502, 3, 21) * ONE_DAY,
    tropical_year=365.242424242,
    moon_period=29.530588853,
    # 1999-08-11T00:00:00Z
    moon_reference=days_from_civil(1999, 8, 11) * ONE_DAY,
    leap_cycle=33,
    leap_cutoff=29,
    leap_step=4,
    leap_anchor=12,
    age_cycle=24000,
    one_ad_days=4_200_940,
)

VERSION = DEFAULT_SPEC.version
ONE_YEAR = DEFAULT_SPEC.one_year
OFFSET = DEFAULT_SPEC.offset
TROPICAL_YEAR = DEFAULT_SPEC.tropical_year
MOON_PERIOD = DEFAULT_SPEC.moon_period
ONE_AD = DEFAULT_SPEC.one_ad
