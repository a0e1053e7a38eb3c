# tests/test_date.py

import dataclasses
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import pytest

from uccal import UCCDate
from uccal.core.errors import ParseError, RangeError
from uccal.engines.specs import OFFSET, ONE_DAY


@pytest.fixture
def epoch():
    return UCCDate.from_instant(0)


def test_unix_epoch_reference(epoch):
    assert epoch.instant == 425_096_812_800_000
    assert epoch.unix == 0
    assert (epoch.year, epoch.doy, epoch.triad, epoch.day) == (13470, 287, 10, 12)
    assert epoch.days == 4_920_102
    assert epoch.offset == OFFSET
    assert epoch.triad_days == 275
    assert epoch.triad_name == "Capricorn"
    assert epoch.triad_symbol == "♑"
    assert epoch.quarter == 3


def test_unix_epoch_formats(epoch):
    assert epoch.date == "12.10.13470"
    assert str(epoch) == "12.10.13470"
    assert epoch.sortable == "13470.10.12"
    assert epoch.full == "12th TEN-Capricorn♑ 13470"
    assert epoch.long == "12th Capricorn♑ 13470"
    assert epoch.medium == "12♑13470"
    assert epoch.short == "12♑70"
    assert epoch.j_date == "1970-01-01T00:00:00.000Z"
    assert epoch.g_date == "1/1/1970 00:00:00.000 CE"


def test_unix_epoch_attributes(epoch):
    assert epoch.leap_year is False
    assert epoch.leap_days == 3265
    assert epoch.leap_cycle == 408
    assert epoch.leap_offset == 27
    assert epoch.deek_number == 29
    assert epoch.deek_day == "Mercury"
    assert epoch.greek_day == "Hermes"
    assert epoch.hind_day == "Budha"
    assert epoch.deek_symbol == "☿"
    assert epoch.festival == ""
    assert epoch.festival_number == 0
    assert epoch.festival_symbol == ""
    assert epoch.intercal == ""
    assert epoch.intercal_symbol == ""
    assert epoch.intercals == 5
    assert epoch.moon == "Waxing crescent"
    assert epoch.yuga == "270 Dwapara Yuga (Bronze Age) Ascending"
    assert epoch.zodiac == "1470 Pisces, Great Winter Ascending"
    assert epoch.version == "1.0.6"


def test_string_format_roundtrip():
    d = UCCDate.from_string("8.10.13521")
    assert d.date == "8.10.13521"
    assert d.sortable == "13521.10.08"
    assert d.full == "8th TEN-Capricorn♑ 13521"
    assert UCCDate.from_string(d.sortable) == d
    assert UCCDate.from_string(d.j_date) == d


def test_construction_paths_agree(epoch):
    assert UCCDate.from_components(13470, 10, 12) == epoch
    assert UCCDate.from_string("1970-01-01T00:00:00Z") == epoch
    assert UCCDate.from_datetime(datetime(1970, 1, 1, tzinfo=timezone.utc)) == epoch
    assert UCCDate.from_datetime(datetime(1970, 1, 1)) == epoch
    assert UCCDate.from_ucc(epoch.instant) == epoch
    assert UCCDate.copy(epoch) == epoch
    assert UCCDate.copy(epoch) is not epoch


def test_from_now():
    with patch("uccal.core.date._now_ms", return_value=0):
        d = UCCDate.from_now()
    assert d.sortable == "13470.10.12"


def test_components_default_to_zero():
    d = UCCDate.from_components(13470, 10)
    assert (d.triad, d.day) == (10, 0)
    assert d.intercal == "4th Season's"
    t = UCCDate.from_components(13470, 10, 12, 23, 59, 59, 999)
    assert t.day == 12
    assert t.j_date == "1970-01-01T23:59:59.999Z"


def test_leap_year_dates():
    d = UCCDate.from_components(13464, 0, 0)
    assert d.leap_year is True
    assert (d.doy, d.triad, d.day) == (0, 0, 0)
    assert d.intercal == "Leap Year's"
    assert d.intercal_symbol == "✶"
    assert d.full == "0 ZERO 13464"
    assert d.festival_number == 1
    assert d.deek_number == 0
    assert d.deek_day == ""
    assert d.triad_name == "Zero"
    assert d.quarter == 0

    n = d + timedelta(days=1)
    assert n.intercal == "New Year's"
    assert n.full == "1st ZERO 13464"
    assert n.intercals == 1


def test_value_semantics(epoch):
    later = epoch + timedelta(days=1, hours=2)
    assert later.day == 13
    assert later - epoch == timedelta(days=1, hours=2)
    assert later - timedelta(hours=2) == epoch + timedelta(days=1)
    assert epoch < later
    assert sorted([later, epoch]) == [epoch, later]
    assert len({epoch, UCCDate.from_instant(0)}) == 1
    assert int(epoch) == epoch.instant
    with pytest.raises(dataclasses.FrozenInstanceError):
        epoch.instant = 0


def test_to_datetime(epoch):
    assert epoch.to_datetime() == datetime(1970, 1, 1, tzinfo=timezone.utc)
    with pytest.raises(ValueError):
        UCCDate.from_ucc(ONE_DAY).to_datetime()


def test_bad_construction():
    with pytest.raises(RangeError):
        UCCDate(1.5)
    with pytest.raises(RangeError):
        UCCDate.from_components(13470, 13)
    with pytest.raises(ParseError):
        UCCDate.from_string(13470)


def test_attributes_method(epoch):
    out = epoch.attributes(["yuga", "leap"])
    assert out["yuga"] == epoch.yuga
    assert out["leap_cycle"] == 408


def test_static_tables():
    assert len(UCCDate.TRIADS) == 12
    assert len(UCCDate.TSYMBOLS) == 12
    assert len(UCCDate.DECANS) == len(UCCDate.GREECANS) == len(UCCDate.HICANS) == len(UCCDate.DSYMBOLS) == 10
    assert len(UCCDate.MOONS) == len(UCCDate.MSYMBOLS) == 8
    assert isinstance(UCCDate.TRIADS, tuple)


@pytest.mark.parametrize(
    "ms, year, doy",
    [
        (0, 0, -1),
        (ONE_DAY // 2, 0, -1),
        (-12053 * ONE_DAY, -34, 366),
    ],
)
def test_days_without_triad(ms, year, doy):
    # the float year leaves these days just outside 0..365
    d = UCCDate.from_ucc(ms)
    assert d.instant == ms
    assert (d.year, d.doy) == (year, doy)
    assert d.days == ms // ONE_DAY
    assert d.intercal == ""
    assert d.yuga
    assert d.moon
    for name in ("triad", "day", "mapped", "date", "sortable", "full", "short", "deek_day", "triad_name"):
        with pytest.raises(RangeError):
            getattr(d, name)
    with pytest.raises(RangeError):
        str(d)


def test_epoch_day_gregorian():
    d = UCCDate.from_ucc(0)
    assert d.g_date == "21/3/11502 00:00:00.000 BCE"
    assert d.j_date == "-011501-03-21T00:00:00.000Z"
    assert d.leap_year is True
    assert (d + timedelta(days=1)).full == "0 ZERO 0"
