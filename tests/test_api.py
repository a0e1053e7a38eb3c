# tests/test_api.py

import pytest

import uccal


def test_day_info():
    info = uccal.day_info(0, attributes=("festival", "intercal"))
    assert info.mapped == uccal.MappedDate(year=13470, doy=287, triad=10, day=12)
    assert info.date.sortable == "13470.10.12"
    assert info.attributes == {
        "festival": "",
        "festival_number": 0,
        "festival_symbol": "",
        "intercal": "",
        "intercal_symbol": "",
        "intercals": 5,
    }
    assert uccal.day_info("13470.10.12").attributes is None


def test_as_date():
    d = uccal.as_date(0)
    assert uccal.as_date(d) is d
    assert uccal.as_date("1970-01-01T00:00:00Z") == d
    with pytest.raises(uccal.ParseError):
        uccal.as_date(1.5)


def test_to_gregorian():
    assert uccal.to_gregorian(0) == (1970, 1, 1)
    assert uccal.to_gregorian("13500.00.01") == (1999, 3, 21)


def test_year_layout():
    assert uccal.days_in_year(13470) == 365
    assert uccal.days_in_year(13464) == 366
    assert uccal.year_start(13470).doy == 1
    assert uccal.year_start(13464).doy == 0
    days = uccal.year_days(13470)
    assert [d.doy for d in days] == list(range(1, 366))


def test_days_in_triad():
    assert len(uccal.days_in_triad(13470, 0)) == 1
    assert len(uccal.days_in_triad(13464, 0)) == 2
    assert len(uccal.days_in_triad(13470, 1)) == 31
    assert len(uccal.days_in_triad(13470, 2)) == 30
    assert len(uccal.days_in_triad(13470, 12)) == 30
    assert sum(len(uccal.days_in_triad(13470, t)) for t in range(13)) == 365
    days = uccal.days_in_triad(13470, 4)
    assert days[0].intercal == "2nd Season's"
    assert [d.day for d in days] == list(range(31))
    with pytest.raises(uccal.RangeError):
        uccal.days_in_triad(13470, 13)


def test_triad_bounds():
    b = uccal.triad_bounds(13470, 10)
    assert b["first"].doy == 275
    assert b["last"].doy == 305
    assert b["length"] == 31


def test_intercalary_days():
    assert [d.doy for d in uccal.intercalary_days(13470)] == [1, 2, 93, 184, 275]
    assert [d.doy for d in uccal.intercalary_days(13464)] == [0, 1, 2, 93, 184, 275]


def test_festivals_in_year():
    days = uccal.festivals_in_year(13470)
    assert len(days) == 23
    assert {d.festival_number for d in days} == set(range(1, 9))
    assert days[0].doy == 1
    assert days[-1].doy == 365
    assert len(uccal.festivals_in_year(13464)) == 24


def test_public_surface():
    assert uccal.__version__ == "1.0.6"
    assert uccal.ordinal(22) == "22nd"
    assert uccal.parse("13470.10.12") == uccal.UCCDate.from_instant(0).instant
