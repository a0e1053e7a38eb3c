# tests/test_cli.py

import pytest

from uccal import UCCDate
from uccal.cli import cmd_day, main
from uccal.diagnostics import pretty_triad, round_trip, year_drift


def _fields(out):
    fields = {}
    for line in out.splitlines():
        name, _, value = line.strip().partition(" ")
        if name:
            fields[name] = value.strip()
    return fields


def test_day_format(capsys):
    assert main(["day", "13521.10.08", "--format", "date"]) == 0
    assert capsys.readouterr().out.strip() == "8.10.13521"


def test_day_all_fields(capsys):
    assert cmd_day(["--unix", "0"]) == 0
    fields = _fields(capsys.readouterr().out)
    assert fields["date"] == "12.10.13470"
    assert fields["sortable"] == "13470.10.12"
    assert fields["deek_day"] == "Mercury"
    assert fields["zodiac"] == "1470 Pisces, Great Winter Ascending"


def test_day_attributes(capsys):
    assert cmd_day(["--unix", "0", "--attr", "leap"]) == 0
    fields = _fields(capsys.readouterr().out)
    assert fields == {"leap_year": "False", "leap_days": "3265", "leap_cycle": "408", "leap_offset": "27"}


def test_day_errors(capsys):
    assert cmd_day(["no date here"]) == 2
    assert cmd_day(["--unix", "0", "--attr", "horoscope"]) == 2
    err = capsys.readouterr().err
    assert err.count("uccal:") == 2


def test_triad_rows():
    rows = pretty_triad.triad_rows(13470, 10, color=False)
    assert rows[0] == "◶ 4th Season's"
    assert rows[1] == " 1  2  3  4  5  6  7  8  9 10"
    assert rows[3].split()[-1] == "30"
    assert len(rows) == 4
    assert pretty_triad.triad_rows(13470, 0) == ["❂ New Year's"]
    assert pretty_triad.triad_rows(13464, 0) == ["✶ Leap Year's", "❂ New Year's"]
    assert len(pretty_triad.triad_rows(13470, 2)) == 3


def test_triad_highlight():
    today = UCCDate.from_components(13470, 10, 12)
    rows = pretty_triad.triad_rows(13470, 10, today=today)
    assert pretty_triad.HIGHLIGHT.format("12") in rows[2]
    assert pretty_triad.HIGHLIGHT.format("12") not in "".join(
        pretty_triad.triad_rows(13470, 10, today=today, color=False)
    )


def test_triad_command(capsys):
    assert main(["triad", "--triad", "13470", "10", "--no-color"]) == 0
    out = capsys.readouterr().out
    assert pretty_triad.triad_title(13470, 10) == "TEN-Capricorn♑ 13470"
    assert "TEN-Capricorn♑ 13470" in out
    assert pretty_triad.decan_header() in out


def test_round_trip(capsys):
    assert round_trip.main(["--n", "500"]) == 0
    assert "failures=0" in capsys.readouterr().out


def test_year_drift_table(capsys):
    assert main(["diag", "year-drift", "--from-year", "13500", "--to-year", "13500"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[1].split() == ["13500", "1999", "+1"]


def test_new_year_offset():
    assert year_drift.new_year_offset(13500) == (1999, 1)
    assert year_drift.tropical_year_days(0.0) == pytest.approx(365.2421896698)


def test_year_drift_series():
    np = pytest.importorskip("numpy")
    greg, offset, drift = year_drift.build_series(np, 13490, 13510)
    assert len(greg) == 21
    assert greg[10] == 1999
    assert drift[10] == pytest.approx(offset[10])


def test_day_without_triad(capsys):
    from uccal.engines.epoch import ucc_to_unix

    assert cmd_day(["--unix", str(ucc_to_unix(0))]) == 0
    fields = _fields(capsys.readouterr().out)
    assert fields["year"] == "0"
    assert fields["doy"] == "-1"
    assert fields["triad"] == "-"
    assert fields["date"] == "-"
    assert fields["j_date"] == "-011501-03-21T00:00:00.000Z"
