from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional

@dataclass(frozen=True)
class MappedDate:
    """(year, day-of-year, triad, day-of-triad) for one UCC day."""
    year: int
    doy: int
    triad: int
    day: int

@dataclass(frozen=True)
class Age:
    offset: int       # years into the current age
    name: str
    season: str       # e.g. "Golden Age" or "Great Summer"
    direction: str    # "Ascending" | "Descending"

@dataclass(frozen=True)
class Festival:
    number: int       # 1..8, 0 when not a festival day
    name: str
    symbol: str

@dataclass(frozen=True)
class DayInfo:
    date: Any         # UCCDate
    mapped: MappedDate
    attributes: Optional[Dict[str, Any]] = None
