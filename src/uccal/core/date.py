"""
uccal.core.date
---------------
The UCC date value object.

A ``UCCDate`` is nothing but an instant: signed milliseconds since the UCC
epoch (-11502-03-21T00:00:00Z). Year, day-of-year, triad and day are mapped
once at construction; every other property is derived from them on access.

Year and day-of-year exist for every instant. The epoch day itself (doy -1)
and one day before the epoch in each 33 years (doy 366) have no triad, so
the triad, day, string formats and decans raise RangeError there.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional, Sequence

from ..attributes import ages, decans, festivals, moon
from ..attributes.registry import compute_attributes
from ..engines import leap
from ..engines.epoch import ucc_to_unix, unix_to_ucc
from ..engines.specs import OFFSET, VERSION
from ..engines.triad import MAX_DOY, days_before_triad, quarter, triad_name, triad_symbol
from ..engines.year_day import components_to_ms, map_ms, ms_to_days, year_and_doy
from .. import format as fmt
from ..parse import parse
from .. import tables
from .errors import RangeError
from .time import datetime_to_unix_ms, unix_ms_to_datetime
from .types import MappedDate

logger = logging.getLogger(__name__)

_MS = timedelta(milliseconds=1)


def _now_ms() -> int:
    return datetime_to_unix_ms(datetime.now(timezone.utc))


@dataclass(frozen=True, order=True)
class UCCDate:
    instant: int
    _year: int = field(init=False, repr=False, compare=False)
    _doy: int = field(init=False, repr=False, compare=False)
    _mapped: Optional[MappedDate] = field(init=False, repr=False, compare=False)

    # name/symbol tables
    TRIADS = tables.TRIADS
    TSYMBOLS = tables.TSYMBOLS
    DECANS = tables.DECANS
    GREECANS = tables.GREECANS
    HICANS = tables.HICANS
    DSYMBOLS = tables.DSYMBOLS
    MOONS = tables.MOONS
    MSYMBOLS = tables.MSYMBOLS

    def __post_init__(self):
        if isinstance(self.instant, bool) or not isinstance(self.instant, int):
            raise RangeError(f"UCCDate: instant must be an int, got {self.instant!r}")
        year, doy = year_and_doy(self.instant)
        object.__setattr__(self, "_year", year)
        object.__setattr__(self, "_doy", doy)
        # doy -1 and 366 have no triad; only triad-based fields fail there
        mapped = map_ms(self.instant) if 0 <= doy <= MAX_DOY else None
        object.__setattr__(self, "_mapped", mapped)

    # ---------------------------------------------------------
    # Construction
    # ---------------------------------------------------------

    @classmethod
    def from_now(cls) -> "UCCDate":
        return cls(unix_to_ucc(_now_ms()))

    @classmethod
    def from_instant(cls, unix_ms: int) -> "UCCDate":
        """From milliseconds since the Unix epoch."""
        return cls(unix_to_ucc(unix_ms))

    @classmethod
    def from_ucc(cls, ms: int) -> "UCCDate":
        """From milliseconds since the UCC epoch."""
        return cls(ms)

    @classmethod
    def from_datetime(cls, dt: datetime) -> "UCCDate":
        return cls(unix_to_ucc(datetime_to_unix_ms(dt)))

    @classmethod
    def from_components(
        cls,
        year: int,
        triad: int,
        day: int = 0,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
    ) -> "UCCDate":
        return cls(components_to_ms(year, triad, day, hour, minute, second, millisecond))

    @classmethod
    def from_string(cls, s: str) -> "UCCDate":
        d = cls(parse(s))
        logger.debug("from_string(%r) -> year %d doy %d", s, d.year, d.doy)
        return d

    @classmethod
    def copy(cls, other: "UCCDate") -> "UCCDate":
        return cls(other.instant)

    # ---------------------------------------------------------
    # Mapped fields
    # ---------------------------------------------------------

    @property
    def mapped(self) -> MappedDate:
        """(year, doy, triad, day); raises RangeError on days with no triad."""
        if self._mapped is None:
            return map_ms(self.instant)
        return self._mapped

    @property
    def offset(self) -> int:
        """Milliseconds between the Unix epoch and the UCC epoch."""
        return OFFSET

    @property
    def unix(self) -> int:
        return ucc_to_unix(self.instant)

    @property
    def year(self) -> int:
        return self._year

    @property
    def days(self) -> int:
        """Days since the UCC epoch."""
        return ms_to_days(self.instant)

    @property
    def doy(self) -> int:
        return self._doy

    @property
    def triad(self) -> int:
        return self.mapped.triad

    @property
    def day(self) -> int:
        return self.mapped.day

    @property
    def triad_days(self) -> int:
        return days_before_triad(self.triad)

    @property
    def triad_name(self) -> str:
        return triad_name(self.triad)

    @property
    def triad_symbol(self) -> str:
        return triad_symbol(self.triad)

    @property
    def quarter(self) -> int:
        return quarter(self.triad)

    # ---------------------------------------------------------
    # Formats
    # ---------------------------------------------------------

    @property
    def date(self) -> str:
        return fmt.format_date(self.mapped)

    @property
    def sortable(self) -> str:
        return fmt.format_sortable(self.mapped)

    @property
    def full(self) -> str:
        return fmt.format_full(self.mapped)

    @property
    def long(self) -> str:
        return fmt.format_long(self.mapped)

    @property
    def medium(self) -> str:
        return fmt.format_medium(self.mapped)

    @property
    def short(self) -> str:
        return fmt.format_short(self.mapped)

    @property
    def j_date(self) -> str:
        """ISO 8601 instant, e.g. ``1970-01-01T00:00:00.000Z``."""
        return fmt.format_iso(self.instant)

    @property
    def g_date(self) -> str:
        return fmt.format_gregorian(self.instant)

    def to_datetime(self) -> datetime:
        """Aware UTC datetime; only for Gregorian years 1..9999."""
        return unix_ms_to_datetime(self.unix)

    # ---------------------------------------------------------
    # Leap years
    # ---------------------------------------------------------

    @property
    def leap_days(self) -> int:
        return leap.leap_days(self.year)

    @property
    def leap_year(self) -> bool:
        return leap.is_leap_year(self.year)

    @property
    def leap_cycle(self) -> int:
        return leap.leap_cycle(self.year)

    @property
    def leap_offset(self) -> int:
        return leap.leap_offset(self.year)

    # ---------------------------------------------------------
    # Decans, festivals, intercalary days
    # ---------------------------------------------------------

    @property
    def deek_day(self) -> str:
        return decans.deek_day(self.triad, self.day)

    @property
    def greek_day(self) -> str:
        return decans.greek_day(self.triad, self.day)

    @property
    def hind_day(self) -> str:
        return decans.hind_day(self.triad, self.day)

    @property
    def deek_symbol(self) -> str:
        return decans.deek_symbol(self.triad, self.day)

    @property
    def deek_number(self) -> int:
        return decans.deek_number(self.triad, self.day)

    @property
    def festival(self) -> str:
        return festivals.festival(self.doy)

    @property
    def festival_number(self) -> int:
        return festivals.festival_number(self.doy)

    @property
    def festival_symbol(self) -> str:
        return festivals.festival_symbol(self.doy)

    @property
    def intercal(self) -> str:
        return festivals.intercal(self.doy)

    @property
    def intercals(self) -> int:
        return festivals.intercals(self.doy, self.leap_year)

    @property
    def intercal_symbol(self) -> str:
        return festivals.intercal_symbol(self.doy)

    # ---------------------------------------------------------
    # Moon and ages
    # ---------------------------------------------------------

    @property
    def moon(self) -> str:
        return moon.moon_phase(self.days)

    @property
    def moon_symbol(self) -> str:
        return moon.moon_symbol(self.days)

    @property
    def yuga(self) -> str:
        return ages.yuga(self.year)

    @property
    def zodiac(self) -> str:
        return ages.zodiac(self.year)

    @property
    def version(self) -> str:
        return VERSION

    def attributes(self, names: Sequence[str]) -> Dict[str, Any]:
        return compute_attributes(self.mapped, self.days, names)

    # ---------------------------------------------------------
    # Python protocol
    # ---------------------------------------------------------

    def __str__(self) -> str:
        return self.date

    def __int__(self) -> int:
        return self.instant

    def __add__(self, other: Any) -> "UCCDate":
        if isinstance(other, timedelta):
            return UCCDate(self.instant + other // _MS)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: Any):
        if isinstance(other, timedelta):
            return UCCDate(self.instant - other // _MS)
        if isinstance(other, UCCDate):
            return timedelta(milliseconds=self.instant - other.instant)
        return NotImplemented
