"""
uccal.attributes.ages
---------------------
Positions within the 24000-year precessional cycle: the Hindu yugas and
the zodiac ages. The first half of the cycle descends, the second ascends.
"""

from __future__ import annotations

from bisect import bisect_right
from typing import Tuple

from ..core.types import Age
from ..engines.specs import DEFAULT_SPEC

CYCLE = DEFAULT_SPEC.age_cycle

# (start year, name, season, direction)
YUGAS: Tuple[Tuple[int, str, str, str], ...] = (
    (0, "Satya Yuga", "Golden Age", "Descending"),
    (4800, "Treta Yuga", "Silver Age", "Descending"),
    (8400, "Dwapara Yuga", "Bronze Age", "Descending"),
    (10800, "Kali Yuga", "Iron Age", "Descending"),
    (12000, "Kali Yuga", "Iron Age", "Ascending"),
    (13200, "Dwapara Yuga", "Bronze Age", "Ascending"),
    (15600, "Treta Yuga", "Silver Age", "Ascending"),
    (19200, "Satya Yuga", "Golden Age", "Ascending"),
)

ZODIAC_AGES: Tuple[Tuple[int, str, str, str], ...] = (
    (0, "Virgo", "Great Summer", "Descending"),
    (1833, "Leo", "Great Summer", "Descending"),
    (3733, "Cancer", "Great Summer", "Descending"),
    (5699, "Gemini", "Great Autumn", "Descending"),
    (7732, "Taurus", "Great Autumn", "Descending"),
    (9832, "Aries", "Great Autumn", "Descending"),
    (12000, "Pisces", "Great Winter", "Ascending"),
    (14168, "Aquarius", "Great Winter", "Ascending"),
    (16268, "Capricorn", "Great Winter", "Ascending"),
    (18301, "Sagittarius", "Great Spring", "Ascending"),
    (20267, "Scorpio", "Great Spring", "Ascending"),
    (22167, "Libra", "Great Spring", "Ascending"),
)

_YUGA_STARTS = tuple(row[0] for row in YUGAS)
_ZODIAC_STARTS = tuple(row[0] for row in ZODIAC_AGES)


def _lookup(year: int, table, starts) -> Age:
    y = year % CYCLE
    start, name, season, direction = table[bisect_right(starts, y) - 1]
    return Age(offset=y - start, name=name, season=season, direction=direction)


def yuga_age(year: int) -> Age:
    return _lookup(year, YUGAS, _YUGA_STARTS)


def zodiac_age(year: int) -> Age:
    return _lookup(year, ZODIAC_AGES, _ZODIAC_STARTS)


def yuga(year: int) -> str:
    """e.g. ``'270 Dwapara Yuga (Bronze Age) Ascending'``"""
    a = yuga_age(year)
    return f"{a.offset} {a.name} ({a.season}) {a.direction}"


def zodiac(year: int) -> str:
    """e.g. ``'1470 Pisces, Great Winter Ascending'``"""
    a = zodiac_age(year)
    return f"{a.offset} {a.name}, {a.season} {a.direction}"
