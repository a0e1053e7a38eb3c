from __future__ import annotations
import re
from datetime import datetime, timezone
from typing import Tuple

# JDN of 1970-01-01
JDN_UNIX_EPOCH = 2440588
MS_PER_DAY = 86_400_000


def to_jdn(year: int, month: int, day: int) -> int:
    """Proleptic Gregorian date to Julian Day Number.

    Uses astronomical year numbering (1 BCE is year 0). Floor division keeps
    the formula valid for years before -4800.
    """
    a = (14 - month) // 12
    y2 = year + 4800 - a
    m2 = month + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def from_jdn(jdn: int) -> Tuple[int, int, int]:
    """Fliegel-Van Flandern inverse of to_jdn, returned as (year, month, day)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day


def days_from_civil(year: int, month: int, day: int) -> int:
    """Days since 1970-01-01 for a proleptic Gregorian date."""
    return to_jdn(year, month, day) - JDN_UNIX_EPOCH


def civil_from_days(days: int) -> Tuple[int, int, int]:
    return from_jdn(days + JDN_UNIX_EPOCH)


def split_unix_ms(ms: int) -> Tuple[int, int, int, int, int, int, int]:
    """Unix ms -> (year, month, day, hour, minute, second, millisecond) in UTC."""
    days, rem = divmod(ms, MS_PER_DAY)
    year, month, day = civil_from_days(days)
    hour, rem = divmod(rem, 3_600_000)
    minute, rem = divmod(rem, 60_000)
    second, milli = divmod(rem, 1000)
    return year, month, day, hour, minute, second, milli


def iso_string(ms: int) -> str:
    """Unix ms -> ISO 8601 UTC string with millisecond precision.

    Years outside 0..9999 use the expanded six-digit signed form, so every
    instant in the calendar's range has a representation.
    """
    year, month, day, hour, minute, second, milli = split_unix_ms(ms)
    if 0 <= year <= 9999:
        y = f"{year:04d}"
    else:
        y = f"{'-' if year < 0 else '+'}{abs(year):06d}"
    return f"{y}-{month:02d}-{day:02d}T{hour:02d}:{minute:02d}:{second:02d}.{milli:03d}Z"


_ISO_RE = re.compile(
    r"""^\s*
    (?P<year>[+-]\d{6}|\d{4})-(?P<month>\d{2})-(?P<day>\d{2})
    T(?P<hour>\d{2}):(?P<minute>\d{2})
    (?::(?P<second>\d{2})(?:[.,](?P<frac>\d+))?)?
    (?P<tz>Z|[+-]\d{2}:?\d{2})?
    \s*$""",
    re.VERBOSE,
)


def parse_iso_ms(s: str) -> int:
    """ISO 8601 date-time string -> Unix ms.

    Strings without a zone designator are read as UTC.
    Raises ValueError when the string is not an ISO date-time.
    """
    m = _ISO_RE.match(s)
    if m is None:
        raise ValueError(f"not an ISO 8601 date-time: {s!r}")
    year = int(m.group("year"))
    month, day = int(m.group("month")), int(m.group("day"))
    hour, minute = int(m.group("hour")), int(m.group("minute"))
    second = int(m.group("second") or 0)
    frac = (m.group("frac") or "0")[:3].ljust(3, "0")
    if not (1 <= month <= 12 and 1 <= day <= 31 and hour <= 24 and minute <= 59 and second <= 59):
        raise ValueError(f"date-time field out of range: {s!r}")

    ms = days_from_civil(year, month, day) * MS_PER_DAY
    ms += ((hour * 60 + minute) * 60 + second) * 1000 + int(frac)

    tz = m.group("tz")
    if tz and tz != "Z":
        sign = -1 if tz[0] == "-" else 1
        digits = tz[1:].replace(":", "")
        ms -= sign * (int(digits[:2]) * 60 + int(digits[2:])) * 60_000
    return ms


def datetime_to_unix_ms(dt: datetime) -> int:
    """datetime -> Unix ms. Naive datetimes are taken to be UTC."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    days = days_from_civil(dt.year, dt.month, dt.day)
    secs = (days * 24 + dt.hour) * 3600 + dt.minute * 60 + dt.second
    return secs * 1000 + dt.microsecond // 1000


def unix_ms_to_datetime(ms: int) -> datetime:
    """Unix ms -> aware UTC datetime (years 1..9999 only)."""
    year, month, day, hour, minute, second, milli = split_unix_ms(ms)
    if not 1 <= year <= 9999:
        raise ValueError(f"year {year} is outside the datetime range")
    return datetime(year, month, day, hour, minute, second, milli * 1000, tzinfo=timezone.utc)
