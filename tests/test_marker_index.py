# tests/test_marker_index.py

import pytest

from orthocal.core.errors import InvariantViolation
from orthocal.engines.marker_index import MAX_MARKERS_PER_DAY, MarkerIndex
from orthocal.engines.orth_year import OrthYear

DAYS = [(1, d) for d in range(1, 8)]


def test_add_and_lookup_both_ways():
    ix = MarkerIndex(DAYS)
    ix.add((1, 3), 7, 2)
    ix.add((1, 1), 7)
    assert ix.markers_for((1, 3)) == (2, 7)
    assert ix.dates_for(7) == [(1, 1), (1, 3)]
    assert ix.first_date(7) == (1, 1)
    assert ix.first_date(99) is None
    assert ix.has((1, 3), 2)
    assert not ix.has((1, 2), 2)
    ix.check()


def test_remove_keeps_directions_in_step():
    ix = MarkerIndex(DAYS)
    ix.add((1, 5), 3)
    ix.remove((1, 5), 3)
    assert ix.dates_for(3) == []
    assert ix.markers_for((1, 5)) == ()
    with pytest.raises(InvariantViolation):
        ix.remove((1, 5), 3)
    ix.check()


def test_rejects_bad_adds():
    ix = MarkerIndex(DAYS)
    with pytest.raises(InvariantViolation):
        ix.add((2, 1), 1)
    ix.add((1, 1), 1)
    with pytest.raises(InvariantViolation):
        ix.add((1, 1), 1)
    ix.add((1, 2), *range(MAX_MARKERS_PER_DAY))
    with pytest.raises(InvariantViolation):
        ix.add((1, 2), 100)


def test_built_years_are_consistent():
    for y in range(2015, 2035):
        oy = OrthYear(y)
        oy.index.check()
        for d in oy.days():
            ms = oy.index.markers_for(d)
            assert len(ms) <= MAX_MARKERS_PER_DAY
            assert len(ms) == len(set(ms))
