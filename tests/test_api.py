# tests/test_api.py

import pytest

import orthocal
from orthocal.api import default_calendar, set_default_calendar
from orthocal.attributes.registry import available_attributes, compute_attributes, record
from orthocal.core.types import DayInfo
from orthocal.reference.markers import FastPeriod, MovableDay


@pytest.fixture
def fresh_default():
    old = default_calendar()
    cal = orthocal.OrthodoxCalendar()
    set_default_calendar(cal)
    try:
        yield cal
    finally:
        set_default_calendar(old)


def test_default_calendar_exists():
    assert isinstance(default_calendar(), orthocal.OrthodoxCalendar)


def test_module_functions_delegate():
    assert orthocal.julian_pascha(2024) == (4, 22)
    assert orthocal.pascha(2024) == orthocal.CalendarDate(2024, 4, 22)
    assert orthocal.winter_indent(2024) == -5
    assert orthocal.apostol_post_length(2025) == 26
    assert orthocal.is_date_of((2024, 4, 22), MovableDay.PASCHA)
    assert orthocal.is_date_of((2024, 5, 5), MovableDay.PASCHA, kind="G")
    assert orthocal.date_glas((2024, 6, 18)) == 8
    assert orthocal.date_n50((2024, 6, 10)) == 0
    assert MovableDay.PASCHA in orthocal.date_properties((2024, 4, 22))
    d = orthocal.get_date_with(2024, MovableDay.PENTECOST)
    assert d.ymd() == (2024, 6, 10)


def test_setters_through_default(fresh_default):
    fresh_default.set_spring_indent_weeks(12, 13)
    weeks, apostol = orthocal.get_options()
    assert weeks[15:] == [12, 13]
    assert apostol is False


def test_default_calendar_guard(monkeypatch):
    import orthocal.api as api

    monkeypatch.setattr(api, "_calendar", None)
    with pytest.raises(RuntimeError):
        default_calendar()


# ============================================================
# DayInfo and attributes
# ============================================================

def test_day_info_pascha():
    info = orthocal.day_info((2024, 4, 22))
    assert isinstance(info, DayInfo)
    assert MovableDay.PASCHA in info.markers
    assert orthocal.marker_title(MovableDay.PASCHA) in info.titles
    assert info.record is not None
    assert info.attributes is None


def test_standard_attributes_registered():
    names = available_attributes()
    for n in ("weekday", "tone", "n50", "readings", "resurrection_gospel", "fast"):
        assert n in names


def test_attributes_on_pascha():
    info = orthocal.day_info(
        (2024, 4, 22),
        attributes=("weekday", "tone", "n50", "readings", "resurrection_gospel", "fast"),
    )
    a = info.attributes
    assert a["weekday"] == 0
    assert a["weekday_name"]
    assert a["tone"] is None
    assert a["n50"] is None
    assert a["gospel"] == "Ин., 1 зач., I, 1–17."
    assert a["gospel_book"] == "JOHN"
    assert a["apostol"] == "Деян., 1 зач., I, 1–8."
    assert a["resurrection_gospel"] is None
    assert a["fast_season"] is None
    assert a["fast_free"] is True
    assert a["fast_day"] is False


def test_attributes_in_lent():
    # Wednesday of the first week of Great Lent
    info = orthocal.day_info((2024, 3, 7), attributes=("fast", "tone"))
    assert info.attributes["fast_season"] == orthocal.marker_title(FastPeriod.GREAT_LENT)
    assert info.attributes["fast_day"] is True
    assert info.attributes["tone"] in range(1, 9)


def test_weekly_fast_outside_seasons():
    # Julian 2024-10-03 is a Wednesday
    info = orthocal.day_info((2024, 10, 3), attributes=("fast", "weekday"))
    assert info.attributes["weekday"] == 3
    assert info.attributes["fast_season"] is None
    assert info.attributes["fast_day"] is True


def test_unknown_attribute():
    info = orthocal.day_info((2024, 4, 22))
    with pytest.raises(KeyError):
        compute_attributes(info, ["no_such_attribute"])


def test_record_helper_needs_record():
    info = DayInfo(date=orthocal.CalendarDate(2024, 4, 22))
    with pytest.raises(orthocal.InvalidDate):
        record(info)


def test_readings_attribute_without_reading():
    # Palm Sunday has no liturgy reading keyed to it
    a = orthocal.day_info((2024, 4, 15), attributes=("readings",)).attributes
    assert a == {"apostol": None, "gospel": None, "gospel_book": None}
