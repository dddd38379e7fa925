# tests/test_readings.py

import pytest

from orthocal.core.config import DEFAULT_CONFIGURATION
from orthocal.core.errors import InvariantViolation
from orthocal.core.types import EMPTY_READING, Book, Reading
from orthocal.engines.orth_year import OrthYear
from orthocal.engines.readings import (
    GOSPEL_BY_MARKER,
    LENT_KEY_SHIFT,
    ReadingsResolver,
    resurrection_gospel,
    triodion_by_marker,
    triodion_reading,
    week_reading,
)
from orthocal.reference.lectionary import (
    APOSTOL_WEEKS,
    FEAST_MATINS_GOSPELS,
    GOSPEL_TRIODION,
    GOSPEL_WEEKS,
    RESURRECTION_GOSPELS,
)
from orthocal.reference.markers import FastPeriod, FixedDay, MovableDay

R = [Reading(*e) for e in RESURRECTION_GOSPELS]


@pytest.fixture(scope="module")
def y2024():
    return OrthYear(2024)


# ============================================================
# Table lookups
# ============================================================

def test_week_reading_bounds():
    assert week_reading(GOSPEL_WEEKS, 1, 0)
    assert week_reading(GOSPEL_WEEKS, 0, 1) == EMPTY_READING
    with pytest.raises(InvariantViolation):
        week_reading(GOSPEL_WEEKS, len(GOSPEL_WEEKS), 0)
    with pytest.raises(InvariantViolation):
        week_reading(GOSPEL_WEEKS, -1, 0)
    with pytest.raises(InvariantViolation):
        week_reading(APOSTOL_WEEKS, 3, 7)


def test_triodion_reading_lowest_marker_wins():
    r = triodion_reading(GOSPEL_BY_MARKER, [9999, MovableDay.PASCHA])
    assert r.text == "Ин., 1 зач., I, 1–17."
    assert triodion_reading(GOSPEL_BY_MARKER, [9999]) == EMPTY_READING


def test_triodion_by_marker_shifts_lent_only():
    keyed = triodion_by_marker(GOSPEL_TRIODION)
    assert keyed[MovableDay.PASCHA] == GOSPEL_TRIODION[MovableDay.PASCHA]
    lent = GOSPEL_TRIODION[MovableDay.LENT_WEEK_1_SAT]
    assert keyed[MovableDay.LENT_WEEK_1_SAT + LENT_KEY_SHIFT] == lent
    assert MovableDay.LENT_WEEK_1_SAT not in keyed
    assert sorted(k for k in keyed if k > MovableDay.LENT_WEEK_7_SAT) == [131, 132, 134]


def test_reading_code_parts():
    r = Reading(0x532, "x")
    assert r.book is Book.MATTHEW
    assert Reading(0xA3, "y").book is Book.MARK
    assert EMPTY_READING.book is None
    assert r.pericope == 0x53
    assert str(r) == "x"
    assert not EMPTY_READING


# ============================================================
# Sunday matins Gospel
# ============================================================

def test_resurrection_gospel_cycle():
    assert resurrection_gospel([], 0, 1) == R[0]
    assert resurrection_gospel([], 0, 11) == R[10]
    assert resurrection_gospel([], 0, 12) == R[0]
    assert resurrection_gospel([], 0, 22) == R[10]
    assert resurrection_gospel([], 0, 23) == R[0]
    assert resurrection_gospel([], 0, 0) == EMPTY_READING
    assert resurrection_gospel([], 0, -1) == EMPTY_READING


def test_resurrection_gospel_weekday_is_empty():
    for wd in range(1, 7):
        assert resurrection_gospel([MovableDay.PASCHA], wd, 5) == EMPTY_READING


def test_resurrection_gospel_feasts_first():
    palm = Reading(*FEAST_MATINS_GOSPELS["palm_sunday"])
    assert resurrection_gospel([MovableDay.LENT_WEEK_7_SUN], 0, -1) == palm
    assert resurrection_gospel([MovableDay.SUNDAY_2_OF_PASCHA], 0, -1) == R[0]
    # a feast beats the cycle
    assert resurrection_gospel([FixedDay.AUG_06], 0, 9) == Reading(*FEAST_MATINS_GOSPELS["transfiguration"])
    assert resurrection_gospel([MovableDay.PASCHA], 0, -1) == EMPTY_READING


def test_resurrection_gospel_in_year(y2024):
    all_saints = y2024.date_with(MovableDay.SUNDAY_1_AFTER_PENTECOST)
    assert y2024.resurrect_evangelie(*all_saints) == R[0]
    assert y2024.resurrect_evangelie(*y2024.pascha) == EMPTY_READING
    palm = y2024.date_with(MovableDay.LENT_WEEK_7_SUN)
    assert y2024.resurrect_evangelie(*palm) == Reading(*FEAST_MATINS_GOSPELS["palm_sunday"])
    assert y2024.resurrect_evangelie(4, 23) == EMPTY_READING
    assert y2024.record(*all_saints).matins == R[0]


# ============================================================
# Liturgy readings through the year
# ============================================================

def test_every_sunday_outside_lent_has_a_gospel():
    for y in range(2015, 2031):
        oy = OrthYear(y)
        for d in oy.days():
            if oy.weekday(d) != 0 or FastPeriod.GREAT_LENT in oy.properties(*d):
                continue
            assert oy.evangelie(*d), (y, d)
            assert oy.apostol(*d), (y, d)


def test_winter_run_2024(y2024):
    """Late Pascha: five substitute weeks between Theophany and the Publican."""
    assert y2024.winter_indent == -5
    ev = y2024.evangelie
    assert ev(1, 9) == week_reading(GOSPEL_WEEKS, 30, 1)
    assert ev(1, 15) == week_reading(GOSPEL_WEEKS, 30, 0)
    assert ev(1, 16) == week_reading(GOSPEL_WEEKS, 31, 1)
    assert ev(1, 22) == week_reading(GOSPEL_WEEKS, 31, 0)
    assert ev(1, 29) == week_reading(GOSPEL_WEEKS, 17, 0)
    assert ev(2, 5) == week_reading(GOSPEL_WEEKS, 32, 0)
    assert ev(2, 6) == week_reading(GOSPEL_WEEKS, 33, 1)
    assert ev(2, 12) == week_reading(GOSPEL_WEEKS, 33, 0)
    assert y2024.apostol(1, 9) == week_reading(APOSTOL_WEEKS, 30, 1)


def test_winter_run_follows_configuration():
    config = DEFAULT_CONFIGURATION.with_winter(5, (1, 2, 3, 4, 5))
    oy = OrthYear(2024, config)
    assert oy.evangelie(1, 9) == week_reading(GOSPEL_WEEKS, 1, 1)
    assert oy.evangelie(2, 6) == week_reading(GOSPEL_WEEKS, 5, 1)
    # substitute Sundays are fixed
    assert oy.evangelie(1, 15) == week_reading(GOSPEL_WEEKS, 30, 0)
    assert oy.evangelie(1, 29) == week_reading(GOSPEL_WEEKS, 17, 0)


def test_plan_matches_year(y2024):
    plan = ReadingsResolver(DEFAULT_CONFIGURATION).plan(y2024)
    assert plan.winter == y2024.winter_indent
    assert plan.spring == y2024.spring_indent
    assert plan.run_start == (1, 9)
    assert plan.substitute_weeks == DEFAULT_CONFIGURATION.winter(5)
    assert plan.substitute_sundays == (30, 31, 17, 32)
    assert plan.publican == (2, 12)
    assert plan.exaltation_sunday == (9, 16)


def test_before_publican_without_winter_run():
    """Pascha on March 22 in a common year: the Publican is the Sunday after Theophany."""
    oy = OrthYear(2010)
    assert oy.pascha == (3, 22)
    assert oy.winter_indent == 0
    plan = ReadingsResolver(DEFAULT_CONFIGURATION).plan(oy)
    assert plan.run_start is None
    assert plan.publican == (1, 11)
    for d in oy.days():
        if d >= plan.publican:
            break
        expected = week_reading(GOSPEL_WEEKS, oy.n50(d) + plan.prev_spring, oy.weekday(d))
        assert oy.evangelie(*d) == expected, d
    assert oy.evangelie(1, 11) == week_reading(GOSPEL_WEEKS, 33, 0)


def test_after_exaltation_sunday_uses_spring_indent(y2024):
    ned = y2024.date_with(MovableDay.SUN_AFTER_EXALTATION)
    spring = y2024.spring_indent
    for d in y2024.days():
        if d <= ned:
            continue
        n, wd = y2024.n50(d), y2024.weekday(d)
        assert y2024.evangelie(*d) == week_reading(GOSPEL_WEEKS, n + spring, wd), d
        # the Apostol keeps the plain week by default
        assert y2024.apostol(*d) == week_reading(APOSTOL_WEEKS, n, wd), d


def test_spring_indent_for_apostol():
    oy = OrthYear(2024, DEFAULT_CONFIGURATION.with_spring_apostol(True))
    spring = oy.spring_indent
    d = (11, 4)
    assert oy.apostol(*d) == week_reading(APOSTOL_WEEKS, oy.n50(d) + spring, oy.weekday(d))


def test_triodion_season_2024(y2024):
    ev, ap = y2024.evangelie, y2024.apostol
    assert ev(4, 22).text == "Ин., 1 зач., I, 1–17."
    assert ap(4, 22).text == "Деян., 1 зач., I, 1–8."
    # Wednesday and Thursday of the second week of Lent
    assert ev(3, 14).text == "Мк., 10 зач., II, 23 – III, 5."
    assert ev(3, 14).book is Book.MARK
    assert ap(3, 14).text == "Евр., 303 зач., I, 1–12."
    assert ev(3, 15).text == "Ин., 5 зач., I, 43–51."
    assert ap(3, 15).text == "Евр., 329 зач., XI, 24-26, 32 - XII, 2."
    # Holy Thursday, Friday and Saturday
    assert ev(4, 19).text == "Ин., 41 зач., XII, 1–18."
    assert ap(4, 19).text == "Флп., 247 зач., IV, 4-9."
    assert ev(4, 20).text == "Мф., 98 зач., XXIV, 3–35."
    assert ap(4, 20) == EMPTY_READING
    assert ev(4, 21).text == "Мф., 102 зач., XXIV, 36 - XXVI, 2."
    assert ap(4, 21) == EMPTY_READING


def test_lent_days_without_triodion_entry(y2024):
    # first Saturday of Lent, second Sunday of Lent, Lazarus Saturday, Palm Sunday
    for d in [(3, 10), (3, 11), (4, 14), (4, 15)]:
        assert y2024.evangelie(*d) == EMPTY_READING, d
        assert y2024.apostol(*d) == EMPTY_READING, d
    assert y2024.date_with(MovableDay.LENT_WEEK_7_SUN) == (4, 15)
    assert y2024.date_with(MovableDay.LENT_WEEK_2_WED) == (3, 14)
