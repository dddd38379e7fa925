# tests/test_orth_year.py

import pytest

from orthocal.engines.orth_year import OrthYear
from orthocal.engines.paschalion import julian_pascha, step_forward
from orthocal.reference.markers import DerivedDay, FastPeriod, FeastRank, FixedDay, MovableDay

# placed only when Dec 31 / Dec 26..31 falls on the matching weekday
OPTIONAL_MOVABLE = {MovableDay.SAT_AFTER_NATIVITY, MovableDay.SUN_AFTER_NATIVITY}

ALWAYS_ONCE = [
    DerivedDay.MEETING_OF_THE_LORD,
    DerivedDay.THREE_HIERARCHS,
    DerivedDay.FIRST_SECOND_FINDING_OF_HEAD,
    DerivedDay.FORTY_MARTYRS,
    DerivedDay.GEORGE_THE_VICTORIOUS,
    DerivedDay.THIRD_FINDING_OF_HEAD,
    DerivedDay.SUN_AFTER_THEOPHANY,
    DerivedDay.SAT_AFTER_THEOPHANY,
    DerivedDay.NEW_MARTYRS_OF_RUSSIA,
    DerivedDay.FATHERS_OF_SIX_COUNCILS,
    DerivedDay.ALL_SAINTS_OF_RUSSIA,
    DerivedDay.GREGORY_PALAMAS,
    DerivedDay.THEODORE_TYRO,
    DerivedDay.JOHN_CLIMACUS,
    DerivedDay.MARY_OF_EGYPT,
    DerivedDay.RIGHTEOUS_GODFATHERS,
]


@pytest.fixture(scope="module")
def y2024():
    return OrthYear(2024)


@pytest.fixture(scope="module")
def years():
    return {y: OrthYear(y) for y in range(2010, 2041)}


def test_anchor_dates_2024(y2024):
    assert y2024.year == 2024
    assert y2024.leap
    assert y2024.pascha == (4, 22)
    assert y2024.date_with(MovableDay.PASCHA) == (4, 22)
    assert y2024.date_with(MovableDay.BRIGHT_MON) == (4, 23)
    assert y2024.date_with(MovableDay.PENTECOST) == (6, 10)
    assert y2024.date_with(MovableDay.SUNDAY_1_AFTER_PENTECOST) == (6, 17)
    assert y2024.date_with(MovableDay.SUNDAY_OF_PUBLICAN) == (2, 12)
    assert y2024.date_with(MovableDay.LENT_WEEK_1_MON) == (3, 5)
    assert y2024.date_with(DerivedDay.MEETING_OF_THE_LORD) == (2, 2)
    assert y2024.date_with(DerivedDay.SUN_AFTER_THEOPHANY) == (1, 8)
    assert y2024.date_with(FixedDay.JAN_06) == (1, 6)


def test_exaltation_sundays_2024(y2024):
    # Sep 15 (Julian) 2024 is a Saturday
    assert y2024.weekday((9, 15)) == 6
    assert y2024.date_with(MovableDay.SAT_AFTER_EXALTATION) == (9, 15)
    assert y2024.date_with(MovableDay.SUN_AFTER_EXALTATION) == (9, 16)


def test_days_and_weekdays(y2024):
    days = y2024.days()
    assert len(days) == 366
    assert days[0] == (1, 1) and days[-1] == (12, 31)
    assert days == sorted(days)
    assert y2024.weekday(y2024.pascha) == 0
    assert y2024.weekday((2, 30)) == -1
    assert y2024.dn(4, 22) == 0


def test_movable_markers_once_per_year(years):
    for y, oy in years.items():
        for m in MovableDay:
            if m in OPTIONAL_MOVABLE:
                continue
            dates = oy.alldates_with(m)
            assert dates is not None and len(dates) == 1, (y, m)


def test_nativity_sundays_or_their_readings(years):
    for y, oy in years.items():
        sat = oy.alldates_withanyof([MovableDay.SAT_AFTER_NATIVITY, DerivedDay.SAT_AFTER_NATIVITY_READINGS])
        sun = oy.alldates_withanyof([MovableDay.SUN_AFTER_NATIVITY, DerivedDay.SUN_AFTER_NATIVITY_READINGS])
        assert sat is not None and len(sat) == 1, y
        assert sun is not None and len(sun) == 1, y
        if oy.date_with(MovableDay.SAT_AFTER_NATIVITY) is not None:
            assert oy.weekday(sat[0]) == 6


@pytest.mark.parametrize("marker", ALWAYS_ONCE)
def test_derived_days_once_per_year(years, marker):
    for y, oy in years.items():
        dates = oy.alldates_with(marker)
        assert dates is not None and len(dates) == 1, (y, marker)


def test_index_consistent(years):
    for oy in years.values():
        oy.index.check()


def test_meeting_always_before_lent(years):
    for y, oy in years.items():
        assert oy.date_with(DerivedDay.MEETING_OF_THE_LORD) < oy.date_with(MovableDay.LENT_WEEK_1_MON), y


def test_meeting_moves_back_from_early_lent():
    early = [y for y in range(1700, 2300) if julian_pascha(y) in ((3, 22), (3, 23))]
    assert early
    for y in early[:4]:
        oy = OrthYear(y)
        lent = oy.date_with(MovableDay.LENT_WEEK_1_MON)
        assert oy.date_with(DerivedDay.MEETING_OF_THE_LORD) < lent
        assert len(oy.alldates_with(MovableDay.MEATFARE_SATURDAY)) == 1


def test_meatfare_saturday_yields_to_meeting():
    years = [y for y in range(1700, 2300) if julian_pascha(y) == (3, 31) and y % 4]
    assert years
    for y in years[:3]:
        oy = OrthYear(y)
        assert oy.date_with(DerivedDay.MEETING_OF_THE_LORD) == (2, 2)
        assert oy.date_with(MovableDay.MEATFARE_SATURDAY) == (1, 26)
        assert oy.date_with(DerivedDay.MEETING_FOREFEAST) == (2, 1)


def test_fast_periods_2024(y2024):
    assert len(y2024.alldates_with(FastPeriod.GREAT_LENT)) == 48
    assert len(y2024.alldates_with(FastPeriod.DORMITION_FAST)) == 14
    nativity = y2024.alldates_with(FastPeriod.NATIVITY_FAST)
    assert len(nativity) == 40
    assert nativity[0] == (11, 15) and nativity[-1] == (12, 24)
    apostles = y2024.alldates_with(FastPeriod.APOSTLES_FAST)
    assert apostles[0] == (6, 18) and apostles[-1] == (6, 28)
    assert len(y2024.alldates_with(FastPeriod.FAST_FREE_BRIGHT)) == 7


def test_feast_ranks(y2024):
    movable = y2024.alldates_with(FeastRank.TWELVE_GREAT_MOVABLE)
    assert movable == sorted([
        y2024.date_with(MovableDay.LENT_WEEK_7_SUN),
        y2024.date_with(MovableDay.PASCHA_WEEK_6_THU),
        y2024.date_with(MovableDay.PENTECOST),
    ])
    assert len(y2024.alldates_with(FeastRank.TWELVE_GREAT_FIXED)) == 9
    assert len(y2024.alldates_with(FeastRank.GREAT_FEAST)) == 5


# ============================================================
# Tone (glas)
# ============================================================

def test_tone_cycle_within_year(years):
    """Tone steps on Sundays only, outside the Lazarus..All Saints gap."""
    for y in (2023, 2024, 2025):
        oy = years[y]
        days = oy.days()
        for a, b in zip(days, days[1:]):
            ga, gb = oy.glas(*a), oy.glas(*b)
            assert -1 <= gb <= 8
            if ga < 1 or gb < 1:
                continue
            if oy.weekday(b) == 0:
                assert gb == ga % 8 + 1, (y, b)
            else:
                assert gb == ga, (y, b)


def test_tone_gap_and_restart(years):
    for y, oy in years.items():
        lazarus = oy.date_with(MovableDay.LENT_WEEK_6_SAT)
        all_saints = oy.date_with(MovableDay.SUNDAY_1_AFTER_PENTECOST)
        assert oy.glas(*lazarus) == -1
        assert oy.glas(*oy.pascha) == -1
        assert oy.glas(*all_saints) == -1
        assert oy.glas(*step_forward(all_saints, 1, oy.leap)) == 8
        assert oy.glas(*oy.date_with(MovableDay.SUNDAY_2_AFTER_PENTECOST)) == 1


def test_tone_continues_across_new_year(years):
    for y in range(2011, 2041):
        prev, cur = years[y - 1], years[y]
        g0, g1 = prev.glas(12, 31), cur.glas(1, 1)
        if cur.weekday((1, 1)) == 0:
            assert g1 == g0 % 8 + 1, y
        else:
            assert g1 == g0, y


# ============================================================
# Week after Pentecost (n50)
# ============================================================

def test_n50_around_pentecost(y2024):
    pentecost = y2024.date_with(MovableDay.PENTECOST)
    assert y2024.n50(pentecost) == 0
    assert y2024.n50(step_forward(pentecost, 1, True)) == 1
    assert y2024.n50(y2024.date_with(MovableDay.SUNDAY_1_AFTER_PENTECOST)) == 1
    assert y2024.n50(y2024.date_with(MovableDay.SUNDAY_2_AFTER_PENTECOST)) == 2
    assert y2024.n50(y2024.date_with(MovableDay.LENT_WEEK_1_MON)) == -1
    assert y2024.n50(y2024.pascha) == -1
    assert y2024.date_n50(9, 16) == 14


def test_n50_changes_on_mondays(years):
    oy = years[2025]
    days = oy.days()
    for a, b in zip(days, days[1:]):
        na, nb = oy.n50(a), oy.n50(b)
        if na < 0 or nb <= 0:
            continue
        if oy.weekday(b) == 1:
            assert nb == na + 1, b
        else:
            assert nb == na, b


def test_n50_continues_across_new_year(years):
    for y in range(2011, 2041):
        prev, cur = years[y - 1], years[y]
        step = 1 if cur.weekday((1, 1)) == 1 else 0
        assert cur.n50((1, 1)) == prev.n50((12, 31)) + step, y


def test_spring_indent_matches_exaltation_sunday(years):
    for oy in years.values():
        ned = oy.date_with(MovableDay.SUN_AFTER_EXALTATION)
        assert oy.spring_indent == 17 - oy.n50(ned)
        assert -5 <= oy.winter_indent <= 0


# ============================================================
# Queries
# ============================================================

def test_properties_and_record(y2024):
    props = y2024.properties(4, 22)
    assert MovableDay.PASCHA in props
    assert list(props) == sorted(props)
    assert y2024.properties(2, 30) is None
    rec = y2024.record(4, 22)
    assert rec.weekday == 0
    assert rec.glas == -1
    assert rec.markers == y2024.index.markers_for((4, 22))
    assert y2024.record(2, 30) is None


def test_marker_searches(y2024):
    p = y2024.pascha
    assert y2024.date_with(0) is None
    assert y2024.date_with(-3) is None
    assert y2024.alldates_with(9999) is None
    assert y2024.date_withanyof([9999, MovableDay.PASCHA]) == p
    assert y2024.date_withanyof([9999]) is None
    assert y2024.date_withallof([MovableDay.PASCHA, FastPeriod.FAST_FREE_BRIGHT]) == p
    assert y2024.date_withallof([MovableDay.PASCHA, FastPeriod.GREAT_LENT]) is None
    assert y2024.date_withallof([]) is None
    assert y2024.alldates_withanyof([MovableDay.PASCHA, MovableDay.BRIGHT_MON]) == [(4, 22), (4, 23)]
    assert y2024.alldates_withanyof([9998, 9999]) is None


def test_unknown_day_queries_are_empty(y2024):
    assert y2024.glas(2, 30) == -1
    assert not y2024.apostol(2, 30)
    assert not y2024.evangelie(2, 30)
    assert not y2024.resurrect_evangelie(2, 30)
