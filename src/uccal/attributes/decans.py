"""
uccal.attributes.decans
-----------------------
Decans ("deeks"): three ten-day weeks per triad, 36 per year. Each day of
a decan carries a planetary name in three traditions plus a symbol.
Intercalary days belong to no decan.
"""

from __future__ import annotations

from typing import Sequence

from ..tables import DECANS, DSYMBOLS, GREECANS, HICANS


def _outside(triad: int, day: int) -> bool:
    return triad == 0 or day == 0


def deek_number(triad: int, day: int) -> int:
    if _outside(triad, day):
        return 0
    return (triad - 1) * 3 + (day - 1) // 10 + 1


def _pick(table: Sequence[str], triad: int, day: int) -> str:
    if _outside(triad, day):
        return ""
    return table[(day + 10) % 10]


def deek_day(triad: int, day: int) -> str:
    return _pick(DECANS, triad, day)


def greek_day(triad: int, day: int) -> str:
    return _pick(GREECANS, triad, day)


def hind_day(triad: int, day: int) -> str:
    return _pick(HICANS, triad, day)


def deek_symbol(triad: int, day: int) -> str:
    return _pick(DSYMBOLS, triad, day)
