"""uccal public API.

Keep this surface small: users should mostly interact with UCCDate and the
functions re-exported here.
"""

from .api import (
    as_date,
    day_info,
    to_gregorian,
    year_start,
    days_in_year,
    year_days,
    days_in_triad,
    triad_bounds,
    intercalary_days,
    festivals_in_year,
)
from .attributes.registry import available_attributes, register_attribute
from .core.date import UCCDate
from .core.errors import ParseError, RangeError, UccalError
from .core.types import Age, DayInfo, Festival, MappedDate
from .engines.specs import VERSION as __version__
from .format import ordinal
from .parse import parse

__all__ = [
    "UCCDate",
    "as_date",
    "day_info",
    "to_gregorian",
    "year_start",
    "days_in_year",
    "year_days",
    "days_in_triad",
    "triad_bounds",
    "intercalary_days",
    "festivals_in_year",
    "available_attributes",
    "register_attribute",
    "ordinal",
    "parse",
    "Age",
    "DayInfo",
    "Festival",
    "MappedDate",
    "UccalError",
    "ParseError",
    "RangeError",
]
