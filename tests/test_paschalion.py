# tests/test_paschalion.py

import pytest

from orthocal.core.date import CalendarDate
from orthocal.core.types import GREGORIAN
from orthocal.engines.paschalion import (
    is_julian_leap,
    julian_pascha,
    step_back,
    step_forward,
    weekday_map,
)

# Julian Pascha and its Gregorian date
KNOWN = [
    (2000, (4, 17), (2000, 4, 30)),
    (2023, (4, 3), (2023, 4, 16)),
    (2024, (4, 22), (2024, 5, 5)),
    (2025, (4, 7), (2025, 4, 20)),
]


@pytest.mark.parametrize("year,julian,gregorian", KNOWN)
def test_known_pascha(year, julian, gregorian):
    assert julian_pascha(year) == julian
    assert julian_pascha(str(year)) == julian
    m, d = julian
    assert CalendarDate(year, m, d).ymd(GREGORIAN) == gregorian


def test_pascha_is_sunday_and_in_range():
    for y in range(2, 3000):
        m, d = julian_pascha(y)
        assert (3, 22) <= (m, d) <= (4, 25)
        assert CalendarDate(y, m, d).weekday == 0


def test_step_within_year():
    assert step_forward((2, 28), 1, True) == (2, 29)
    assert step_forward((2, 28), 1, False) == (3, 1)
    assert step_back((3, 1), 1, True) == (2, 29)
    assert step_forward((4, 22), 49, True) == (6, 10)


def test_step_across_year_returns_start():
    assert step_forward((12, 31), 1, False) == (12, 31)
    assert step_back((1, 1), 1, False) == (1, 1)
    assert step_forward((12, 25), 10, True) == (12, 25)
    # invalid inputs are returned unchanged
    assert step_forward((2, 30), 1, False) == (2, 30)
    assert step_forward((5, 5), 0, False) == (5, 5)


def test_weekday_map_matches_cjdn():
    for y in (1900, 2023, 2024, 2100):
        wd = weekday_map(y)
        assert len(wd) == (366 if is_julian_leap(y) else 365)
        assert wd[julian_pascha(y)] == 0
        for (m, d), w in wd.items():
            assert CalendarDate(y, m, d).weekday == w
    assert weekday_map(0) == {}
