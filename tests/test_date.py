# tests/test_date.py

import pytest
import random

from orthocal.core.bigyear import is_leap_year, pdiv, string_to_year
from orthocal.core.date import CalendarDate, MIN_CJDN_VALUE
from orthocal.core.errors import InvalidDate, NumericConversionError, OutOfRange
from orthocal.core.types import CalendarKind, GREGORIAN, JULIAN, MILANKOVIC

KINDS = (JULIAN, MILANKOVIC, GREGORIAN)


def test_known_epochs():
    # J2000.0 civil date is January 1, 2000 (a Saturday)
    d = CalendarDate(2000, 1, 1, GREGORIAN)
    assert d.cjdn == 2451545
    assert d.weekday == 6
    assert CalendarDate(2000, 1, 1, JULIAN) == CalendarDate(2000, 1, 14, GREGORIAN)
    assert CalendarDate(2024, 4, 22, JULIAN).ymd(GREGORIAN) == (2024, 5, 5)


def test_cjdn_roundtrip():
    random.seed(42)
    for _ in range(5000):
        n = random.randint(MIN_CJDN_VALUE + 400, 5373484)
        d = CalendarDate.from_cjdn(n)
        for kind in KINDS:
            y, m, dd = d.ymd(kind)
            assert CalendarDate(y, m, dd, kind).cjdn == n


def test_milankovic_matches_gregorian_1600_2800():
    random.seed(42)
    start = CalendarDate(1600, 3, 1, GREGORIAN).cjdn
    end = CalendarDate(2799, 12, 31, GREGORIAN).cjdn
    for _ in range(2000):
        d = CalendarDate.from_cjdn(random.randint(start, end))
        assert d.ymd(MILANKOVIC) == d.ymd(GREGORIAN)


def test_increment_advances_day_and_weekday():
    random.seed(42)
    for _ in range(1000):
        d = CalendarDate.from_cjdn(random.randint(1800000, 3000000))
        e = d.inc_by_days(1)
        assert e.cjdn == d.cjdn + 1
        assert e.weekday == (d.weekday + 1) % 7
        assert e.dec_by_days(1) == d


def test_increment_below_minimum_gives_empty_date():
    d = CalendarDate.from_cjdn(MIN_CJDN_VALUE)
    e = d.dec_by_days(1)
    assert not e
    assert e.weekday == -1
    assert not e.inc_by_days(5)


def test_big_years():
    y = "123456789012345678901234567890"
    d = CalendarDate(y, 2, 28, JULIAN)
    assert d.year(JULIAN) == int(y)
    assert d.inc_by_days(1).ymd(JULIAN)[1:] == (3, 1)


def test_leap_rules():
    assert is_leap_year("2000", GREGORIAN)
    assert not is_leap_year("1900", GREGORIAN)
    assert is_leap_year("1900", JULIAN)
    assert not is_leap_year(2100, MILANKOVIC)
    assert is_leap_year(2400, MILANKOVIC)
    assert not is_leap_year(2800, MILANKOVIC)
    assert is_leap_year(2800, GREGORIAN)
    assert is_leap_year(2900, MILANKOVIC)
    assert not is_leap_year(2900, GREGORIAN)
    assert not is_leap_year(2023, JULIAN)


@pytest.mark.parametrize("args", [
    (2023, 2, 29, JULIAN),
    (2024, 13, 1, GREGORIAN),
    (2024, 4, 31, MILANKOVIC),
    (2024, 1, 0, JULIAN),
    (1, 1, 1, JULIAN),
    ("20x4", 1, 1, JULIAN),
])
def test_invalid_dates(args):
    with pytest.raises(InvalidDate):
        CalendarDate(*args)
    assert not CalendarDate.check(*args)


def test_year_parsing():
    assert string_to_year(" 2024 ") == 2024
    with pytest.raises(NumericConversionError):
        string_to_year("MMXXIV")
    with pytest.raises(OutOfRange):
        string_to_year(1)
    # the error taxonomy also reads as ValueError
    with pytest.raises(ValueError):
        string_to_year("abc")


def test_pdiv_positive_remainder():
    assert pdiv(7, 3) == (2, 1)
    assert pdiv(-7, 3) == (-3, 2)
    assert pdiv(7, -3) == (-2, 1)
    assert pdiv(-7, -3) == (3, 2)


def test_kind_coercion():
    assert CalendarKind.coerce("g") is GREGORIAN
    assert CalendarKind.coerce("milankovic") is MILANKOVIC
    with pytest.raises(ValueError):
        CalendarKind.coerce("X")


def test_immutable_and_hashable():
    d = CalendarDate(2024, 4, 22)
    with pytest.raises(AttributeError):
        d._cjdn = 0
    assert len({d, CalendarDate(2024, 5, 5, GREGORIAN)}) == 1
    assert CalendarDate(2024, 4, 21) < d


def test_format_tokens():
    d = CalendarDate(2024, 4, 22, JULIAN)
    assert d.format("%JY-%JQ-%JD") == "2024-04-22"
    assert d.format("%GY-%GQ-%GD") == "2024-05-05"
    assert d.format("%Gd.%Gq.%Gy") == "5.5.24"
    assert d.format() == "22 Апреля 2024 г."
    assert d.format("%JF") == "Апрель"
    assert d.format("%Jm") == "апр"
    assert d.format("%WD / %Wd / %wd") == "Воскресенье / Вс / 0"
    # unknown tokens and a trailing % are left alone
    assert d.format("%Xq %JY") == "%Xq 2024"
    assert d.format("%JY%") == "2024%"
    assert d.format("ab") == "ab"


def test_format_empty_date():
    e = CalendarDate.empty()
    assert e.format("[%JY-%JQ]") == "[-]"
    assert e.format("%JM") == ""
