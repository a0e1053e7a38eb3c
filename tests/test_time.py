# tests/test_time.py

import random
from datetime import datetime, timedelta, timezone

import pytest

from uccal.core.time import (
    civil_from_days,
    datetime_to_unix_ms,
    days_from_civil,
    from_jdn,
    iso_string,
    parse_iso_ms,
    split_unix_ms,
    to_jdn,
    unix_ms_to_datetime,
)

MS_PER_DAY = 86_400_000


def test_jdn_reference_points():
    assert to_jdn(2000, 1, 1) == 2451545
    assert from_jdn(2451545) == (2000, 1, 1)
    assert to_jdn(1970, 1, 1) == 2440588


def test_days_from_civil():
    assert days_from_civil(1970, 1, 1) == 0
    assert days_from_civil(2000, 3, 1) == 11017
    assert days_from_civil(1969, 12, 31) == -1
    assert days_from_civil(-11502, 3, 21) == -4920467


def test_civil_roundtrip_deep_past():
    random.seed(42)
    for _ in range(2000):
        n = random.randint(-5_000_000, 3_000_000)
        y, m, d = civil_from_days(n)
        assert 1 <= m <= 12 and 1 <= d <= 31
        assert days_from_civil(y, m, d) == n


def test_split_unix_ms():
    assert split_unix_ms(0) == (1970, 1, 1, 0, 0, 0, 0)
    assert split_unix_ms(-1) == (1969, 12, 31, 23, 59, 59, 999)


def test_iso_string():
    assert iso_string(0) == "1970-01-01T00:00:00.000Z"
    assert iso_string(-1) == "1969-12-31T23:59:59.999Z"
    assert iso_string(days_from_civil(10000, 1, 1) * MS_PER_DAY) == "+010000-01-01T00:00:00.000Z"
    assert iso_string(days_from_civil(-1, 6, 1) * MS_PER_DAY) == "-000001-06-01T00:00:00.000Z"


def test_parse_iso_ms():
    assert parse_iso_ms("1970-01-01T00:00") == 0
    assert parse_iso_ms("1970-01-01T00:00:01.5Z") == 1500
    assert parse_iso_ms("1970-01-01T01:00:00+01:00") == 0
    assert parse_iso_ms("+010000-01-01T00:00:00Z") == days_from_civil(10000, 1, 1) * MS_PER_DAY
    for ms in (0, -1, 1_234_567_890_123, -425_000_000_000_000):
        assert parse_iso_ms(iso_string(ms)) == ms


@pytest.mark.parametrize("bad", ["1970-01-01", "70-01-01T00:00", "1970-02-30T00:00:61", "1970-01-01T00:00Q"])
def test_parse_iso_ms_rejects(bad):
    with pytest.raises(ValueError):
        parse_iso_ms(bad)


def test_datetime_conversions():
    plus_one = timezone(timedelta(hours=1))
    assert datetime_to_unix_ms(datetime(1970, 1, 1, 1, tzinfo=plus_one)) == 0
    assert datetime_to_unix_ms(datetime(1970, 1, 1, 0, 0, 1, 500_000)) == 1500
    assert unix_ms_to_datetime(1500) == datetime(1970, 1, 1, 0, 0, 1, 500_000, tzinfo=timezone.utc)
    with pytest.raises(ValueError):
        unix_ms_to_datetime(days_from_civil(0, 12, 31) * MS_PER_DAY)
