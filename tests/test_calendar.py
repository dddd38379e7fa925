# tests/test_calendar.py

import threading
import time
from unittest.mock import patch

import pytest

import orthocal.calendar as calendar_mod
from orthocal.calendar import OrthodoxCalendar
from orthocal.core.config import IndentConfiguration
from orthocal.core.date import CalendarDate
from orthocal.core.errors import InvalidConfiguration, InvalidDate, OutOfRange
from orthocal.core.types import GREGORIAN, MILANKOVIC
from orthocal.reference.markers import FastPeriod, MovableDay
from orthocal.reference.titles import marker_title

DEFAULT_OPTIONS = [33, 32, 33, 31, 32, 33, 30, 31, 32, 33, 30, 31, 17, 32, 33, 10, 11]


@pytest.fixture
def cal():
    return OrthodoxCalendar()


# ============================================================
# Year-level
# ============================================================

def test_pascha(cal):
    assert cal.julian_pascha(2024) == (4, 22)
    assert cal.pascha(2024) == CalendarDate(2024, 4, 22)
    assert cal.pascha("2024") == CalendarDate(2024, 4, 22)
    g = cal.pascha(2024, GREGORIAN)
    assert g.ymd(GREGORIAN) == (2024, 5, 5)
    assert cal.pascha(2025, "G").ymd(GREGORIAN) == (2025, 4, 20)
    assert cal.pascha(2024, MILANKOVIC).ymd(MILANKOVIC) == (2024, 5, 5)


def test_pascha_below_minimum_year(cal):
    with pytest.raises(OutOfRange):
        cal.pascha(1)


def test_apostol_post_length(cal):
    assert cal.apostol_post_length(2024) == 11
    assert cal.apostol_post_length(2025) == 26
    for y in range(2000, 2030):
        n = cal.apostol_post_length(y)
        assert n == len(cal.get_alldates_with(y, FastPeriod.APOSTLES_FAST))
        assert 8 <= n <= 42


def test_indents(cal):
    assert cal.winter_indent(2024) == -5
    assert cal.spring_indent(2024) == 17 - cal.date_n50(2024, 9, 16)


# ============================================================
# Per-date queries
# ============================================================

def test_day_queries(cal):
    d = CalendarDate(2024, 6, 18)
    assert cal.date_glas(d) == 8
    assert cal.date_glas(2024, 6, 18) == 8
    assert cal.date_n50(2024, 6, 10) == 0
    assert cal.date_evangelie(d)
    assert cal.date_apostol(d)
    assert not cal.resurrect_evangelie(d)
    rec = cal.date_record(d)
    assert rec.weekday == d.weekday == 1
    assert rec.glas == 8


def test_day_queries_accept_other_calendars(cal):
    # Gregorian 2024-05-05 is Julian 2024-04-22
    assert cal.is_date_of(2024, MovableDay.PASCHA, 5, 5, GREGORIAN)
    assert cal.is_date_of(CalendarDate(2024, 5, 5, GREGORIAN), MovableDay.PASCHA)
    assert not cal.is_date_of(CalendarDate(2024, 5, 6, GREGORIAN), MovableDay.PASCHA)


def test_empty_date(cal):
    empty = CalendarDate.empty()
    assert cal.date_properties(empty) == ()
    assert not cal.is_date_of(empty, MovableDay.PASCHA)
    assert cal.get_description_for_date(empty) == ""
    with pytest.raises(InvalidDate):
        cal.date_glas(empty)
    with pytest.raises(InvalidDate):
        cal.date_record(empty)


def test_year_without_month_and_day(cal):
    with pytest.raises(InvalidDate):
        cal.date_glas(2024)


def test_date_properties_sorted(cal):
    props = cal.date_properties(2024, 4, 22)
    assert MovableDay.PASCHA in props
    assert list(props) == sorted(props)
    assert all(m > 0 for m in props)


# ============================================================
# Searches
# ============================================================

def test_alldates_gregorian_year(cal):
    nat = cal.get_alldates_with(2024, FastPeriod.NATIVITY_FAST, GREGORIAN)
    assert len(nat) == 40
    assert nat[0].ymd(GREGORIAN) == (2024, 1, 1)
    assert nat[-1].ymd(GREGORIAN) == (2024, 12, 31)
    assert nat == sorted(nat)
    assert len(cal.get_alldates_with(2024, FastPeriod.DORMITION_FAST)) == 14


def test_searches_not_found(cal):
    assert cal.get_date_with(2024, 9999) is None
    assert cal.get_alldates_with(2024, 9999) == []
    assert cal.get_date_withanyof(2024, [9998, 9999]) is None
    assert cal.get_date_withallof(2024, [MovableDay.PASCHA, FastPeriod.GREAT_LENT]) is None
    assert cal.get_alldates_withanyof(2024, [9999]) == []


def test_marker_set_searches(cal):
    p = CalendarDate(2024, 4, 22)
    assert cal.get_date_withanyof(2024, [9999, MovableDay.PASCHA]) == p
    assert cal.get_date_withallof(2024, [MovableDay.PASCHA, FastPeriod.FAST_FREE_BRIGHT]) == p
    both = cal.get_alldates_withanyof(2024, [MovableDay.PASCHA, MovableDay.BRIGHT_MON])
    assert both == [p, CalendarDate(2024, 4, 23)]


def test_period_searches(cal):
    lo, hi = CalendarDate(2023, 1, 1), CalendarDate(2025, 12, 31)
    found = cal.get_alldates_inperiod_with(lo, hi, MovableDay.PASCHA)
    assert [d.ymd() for d in found] == [(2023, 4, 3), (2024, 4, 22), (2025, 4, 7)]
    # bounds may come in either order
    assert cal.get_alldates_inperiod_with(hi, lo, MovableDay.PASCHA) == found
    assert cal.get_date_inperiod_with(hi, lo, MovableDay.PASCHA) == found[0]
    assert cal.get_date_inperiod_with(CalendarDate(2024, 5, 1), CalendarDate(2024, 12, 31), MovableDay.PASCHA) is None
    assert cal.get_date_inperiod_withanyof(lo, hi, [9999, MovableDay.PASCHA]) == found[0]
    assert cal.get_date_inperiod_withallof(lo, hi, [MovableDay.PASCHA, FastPeriod.FAST_FREE_BRIGHT]) == found[0]
    anyof = cal.get_alldates_inperiod_withanyof(
        CalendarDate(2024, 1, 1), CalendarDate(2024, 12, 31), [MovableDay.BRIGHT_MON, MovableDay.PASCHA]
    )
    assert anyof == [found[1], CalendarDate(2024, 4, 23)]


def test_period_with_empty_bound(cal):
    with pytest.raises(InvalidDate):
        cal.get_date_inperiod_with(CalendarDate.empty(), CalendarDate(2024, 1, 1), MovableDay.PASCHA)
    with pytest.raises(InvalidDate):
        cal.get_alldates_inperiod_with(CalendarDate(2024, 1, 1), CalendarDate.empty(), MovableDay.PASCHA)


# ============================================================
# Descriptions
# ============================================================

def test_description_for_date(cal):
    s = cal.get_description_for_date(CalendarDate(2024, 4, 22), "%JY-%JQ-%JD")
    assert s.startswith("2024-04-22 ")
    assert marker_title(MovableDay.PASCHA) in s


def test_description_names_fast(cal):
    s = cal.get_description_for_date(CalendarDate(2024, 6, 20), "%JY-%JQ-%JD")
    assert marker_title(FastPeriod.APOSTLES_FAST) + "." in s


def test_description_for_dates(cal):
    a, b = CalendarDate(2024, 4, 22), CalendarDate(2024, 4, 23)
    fmt = "%JY-%JQ-%JD"
    joined = cal.get_description_for_dates([a, CalendarDate.empty(), b], fmt, "|")
    assert joined == cal.get_description_for_date(a, fmt) + "|" + cal.get_description_for_date(b, fmt)
    assert cal.get_description_for_dates([], fmt) == ""


# ============================================================
# Configuration and cache
# ============================================================

def test_default_options(cal):
    assert cal.get_options() == (DEFAULT_OPTIONS, False)


def test_setters_update_options(cal):
    cal.set_winter_indent_weeks_1(20)
    cal.set_winter_indent_weeks_3(1, 2, 3)
    cal.set_spring_indent_weeks(12, 13)
    cal.set_spring_indent_apostol(True)
    weeks, apostol = cal.get_options()
    assert weeks[0] == 20
    assert weeks[3:6] == [1, 2, 3]
    assert weeks[15:] == [12, 13]
    assert apostol is True


@pytest.mark.parametrize("call", [
    lambda c: c.set_winter_indent_weeks_1(0),
    lambda c: c.set_winter_indent_weeks_2(1, 34),
    lambda c: c.set_winter_indent_weeks_4(1, 2, 3, -1),
    lambda c: c.set_winter_indent_weeks_5(1, 2, 3, 4, 99),
    lambda c: c.set_spring_indent_weeks(40, 1),
])
def test_invalid_setters(cal, call):
    with pytest.raises(InvalidConfiguration):
        call(cal)
    # a rejected update leaves the configuration alone
    assert cal.get_options() == (DEFAULT_OPTIONS, False)


def test_configuration_property(cal):
    config = IndentConfiguration(spring=(5, 6))
    cal.configuration = config
    assert cal.configuration is config
    assert cal.get_options()[0][15:] == [5, 6]


def test_cache_reuses_built_year(cal):
    a = cal.year(2024)
    assert cal.year("2024") is a
    assert cal.cache_size() == 1
    cal.set_spring_indent_weeks(12, 13)
    b = cal.year(2024)
    assert b is not a
    assert b.config.spring == (12, 13)
    assert cal.cache_size() == 2
    cal.clear_cache()
    assert cal.cache_size() == 0


def test_cache_limit_clears(cal, monkeypatch):
    monkeypatch.setattr(calendar_mod, "CACHE_LIMIT", 2)
    cal.year(2020)
    cal.year(2021)
    assert cal.cache_size() == 2
    cal.year(2022)
    assert cal.cache_size() == 1


def test_single_flight_build(cal):
    """Concurrent requests for one year build it once."""
    built = object()

    def slow(*args, **kwargs):
        time.sleep(0.05)
        return built

    results = []
    with patch("orthocal.calendar.OrthYear", side_effect=slow) as m:
        threads = [threading.Thread(target=lambda: results.append(cal.year(2024))) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

    assert m.call_count == 1
    assert len(results) == 8
    assert all(r is built for r in results)


def test_failed_build_is_not_cached(cal):
    with patch("orthocal.calendar.OrthYear", side_effect=RuntimeError("boom")):
        with pytest.raises(RuntimeError):
            cal.year(2024)
    assert cal.cache_size() == 0
    assert cal.year(2024).pascha == (4, 22)


class _HookedLock:
    """Lock that runs a callback each time it is released."""

    def __init__(self, on_release):
        self._lock = threading.Lock()
        self._on_release = on_release

    def __enter__(self):
        self._lock.acquire()
        return self

    def __exit__(self, *exc):
        self._lock.release()
        self._on_release()
        return False


def test_no_rebuild_between_release_and_publish(cal):
    """A request arriving right after a build finishes reuses the built year."""
    calls = []
    nested = []
    fired = [False]

    def build(y, config):
        calls.append(y)
        return object()

    def on_release():
        # ask again at the first release after the build has run
        if calls and not fired[0]:
            fired[0] = True
            nested.append(cal.year(2024))

    cal._lock = _HookedLock(on_release)
    with patch("orthocal.calendar.OrthYear", side_effect=build):
        first = cal.year(2024)

    assert len(calls) == 1
    assert nested == [first]
    assert cal._building == {}
