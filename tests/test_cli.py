# tests/test_cli.py

import pytest

from orthocal.cli import main


def test_pascha(capsys):
    assert main(["pascha", "2024"]) == 0
    assert capsys.readouterr().out.strip() == "2024-04-22 (G 2024-05-05)"


def test_pascha_custom_format(capsys):
    assert main(["pascha", "2025", "--fmt", "%GY-%GQ-%GD"]) == 0
    assert capsys.readouterr().out.strip() == "2025-04-20"


def test_pascha_year_out_of_range(capsys):
    assert main(["pascha", "1"]) == 2
    err = capsys.readouterr().err
    assert err.startswith("orthocal: ")
    assert "minimum" in err


def test_find(capsys):
    assert main(["find", "PASCHA", "2024"]) == 0
    assert capsys.readouterr().out.strip() == "2024-04-22 (G 2024-05-05)"


def test_find_all(capsys):
    assert main(["find", "FastPeriod.DORMITION_FAST", "2024", "--all", "--fmt", "%JQ-%JD"]) == 0
    lines = capsys.readouterr().out.split()
    assert len(lines) == 14
    assert lines[0] == "08-01" and lines[-1] == "08-14"


def test_find_nothing(capsys):
    # Dec 25, 2028 (Julian) is a Sunday: no Sunday after the Nativity inside the year
    assert main(["find", "SUN_AFTER_NATIVITY", "2028"]) == 1
    assert "not in J year 2028" in capsys.readouterr().out


@pytest.mark.parametrize("marker", ["NOT_A_MARKER", "9999", "MovableDay.NOPE"])
def test_find_bad_marker(marker):
    with pytest.raises(SystemExit):
        main(["find", marker, "2024"])


def test_day_with_attributes(capsys):
    assert main(["day", "2024-04-22", "--attr", "weekday", "--attr", "tone"]) == 0
    out = capsys.readouterr().out
    assert "2024-04-22" in out
    assert "weekday: 0" in out
    assert "tone: None" in out


def test_date_shorthand(capsys):
    assert main(["2024-05-05", "--kind", "G"]) == 0
    out = capsys.readouterr().out
    assert "2024-04-22 (G 2024-05-05)" in out


def test_describe_range(capsys):
    assert main(["describe", "2024-04-22", "--to", "2024-04-24", "--fmt", "%JY-%JQ-%JD"]) == 0
    lines = capsys.readouterr().out.strip().split("\n")
    assert [s[:10] for s in lines] == ["2024-04-22", "2024-04-23", "2024-04-24"]


def test_indents(capsys):
    assert main(["indents", "2024"]) == 0
    out = capsys.readouterr().out
    assert "winter indent       : -5" in out
    assert "Apostles' fast days : 11" in out


def test_options(capsys):
    assert main(["options"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "33 32 33 31 32 33 30 31 32 33 30 31 17 32 33 10 11"
    assert out[1] == "spring indent applies to Apostol: False"


def test_diag_round_trip(capsys):
    assert main(["diag", "round-trip", "--N", "50"]) == 0
    assert "All round-trip tests passed." in capsys.readouterr().out


def test_diag_pascha_table(capsys):
    assert main(["diag", "pascha-table", "--from-year", "2024", "--to-year", "2025"]) == 0
    out = capsys.readouterr().out
    assert "04-22" in out and "05-05" in out
    assert out.rstrip().endswith("2024")
