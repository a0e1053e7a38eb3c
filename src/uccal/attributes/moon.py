"""
uccal.attributes.moon
---------------------
Moon phase from the whole-day distance to a fixed reference moon
(11 August 1999). The phase is that distance folded into one synodic
month and bucketed into eight named phases.
"""

from __future__ import annotations

from typing import Tuple

from ..engines.epoch import unix_to_ucc
from ..engines.specs import DEFAULT_SPEC, MOON_PERIOD
from ..engines.year_day import ms_to_days
from ..tables import MOONS, MSYMBOLS

REFERENCE_DAYS = ms_to_days(unix_to_ucc(DEFAULT_SPEC.moon_reference))

# upper bounds (days into the cycle) of the first seven phases
_BOUNDS: Tuple[int, ...] = (1, 7, 8, 15, 16, 22, 23)


def moon_age(days: int) -> float:
    """Days into the synodic cycle for a day count since the UCC epoch."""
    # fmod of a whole day count is exact, so whole-day thresholds hold
    return abs(days - REFERENCE_DAYS) % MOON_PERIOD


def phase_index(age: float) -> int:
    for i, bound in enumerate(_BOUNDS):
        if age < bound:
            return i
    return len(_BOUNDS)


def moon_phase(days: int) -> str:
    return MOONS[phase_index(moon_age(days))]


def moon_symbol(days: int) -> str:
    return MSYMBOLS[phase_index(moon_age(days))]
