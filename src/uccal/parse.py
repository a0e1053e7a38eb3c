"""
uccal.parse
-----------
Strings -> UCC instants.

Two forms are read:

* ISO 8601 date-times, recognised by the ``T`` before the time part, e.g.
  ``1970-01-01T00:00:00Z``. Zone-less strings are taken as UTC.
* UCC-native strings, year first, e.g. ``13521.10.08`` or
  ``13521/10/8 14:30``. Every run of non-digits is a separator; missing
  trailing fields default to 0. The default ``day.triad.year`` rendering
  (``8.10.13521``) is recognised too, so formatted dates read back.
"""

from __future__ import annotations

import logging
import re
from typing import Any, List

from .core.errors import ParseError
from .core.time import parse_iso_ms
from .engines.epoch import unix_to_ucc
from .engines.year_day import components_to_ms

logger = logging.getLogger(__name__)

FIELDS = 7
MAX_DAY = 30

_NON_DIGITS = re.compile(r"\D+")


def _is_iso(s: str) -> bool:
    return "T" in s


def ucc_fields(s: str) -> List[int]:
    """Split a UCC-native string into (year, triad, day, hour, minute, second, ms)."""
    tokens = _NON_DIGITS.sub(" ", s).split()
    if not tokens:
        raise ParseError(f"parse: no date fields in {s!r}")
    fields = [int(t) for t in tokens]

    # day.triad.year, as rendered by the default format
    if len(fields) == 3 and fields[0] <= MAX_DAY and fields[2] > MAX_DAY:
        fields.reverse()

    fields += [0] * (FIELDS - len(fields))
    return fields[:FIELDS]


def parse(s: Any) -> int:
    """Parse ``s`` to milliseconds since the UCC epoch."""
    if not isinstance(s, str):
        raise ParseError(f"parse: expected a string, got {type(s).__name__}")

    if _is_iso(s):
        try:
            unix_ms = parse_iso_ms(s)
        except ValueError as e:
            raise ParseError(f"parse: {e}") from e
        logger.debug("parsed %r as ISO 8601 (unix ms %d)", s, unix_ms)
        return unix_to_ucc(unix_ms)

    fields = ucc_fields(s)
    logger.debug("parsed %r as UCC fields %s", s, fields)
    return components_to_ms(*fields)
