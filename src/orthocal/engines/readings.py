"""
orthocal.engines.readings
-------------------------
Liturgy readings (Apostol and Gospel) for every day of a built year.

The ordinary readings follow the week after Pentecost (n50).  Two
corrections keep the sequence aligned with the calendar:

- winter indent: when the Sunday of the Publican comes sooner than the
  week count allows, the gap after the Sunday after Theophany is filled with
  configured substitute weeks (and fixed substitute Sundays 30, 31, 17, 32);
- spring indent: after the Sunday after the Exaltation the Gospel jumps to
  the Luke series, shifting the week index by 17 - n50(that Sunday); the two
  weeks before that Sunday may use configured substitutes.

From the start of Great Lent to Trinity Saturday readings are keyed by the
movable-day marker instead of the week.  Lenten entries are listed under the
day they are titled for and matched against the marker LENT_KEY_SHIFT days
later.  Days with no matching entry, the Sundays of Lent among them, get no
liturgy reading.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Protocol, Sequence, Tuple

from ..core.config import IndentConfiguration
from ..core.errors import InvariantViolation
from ..core.types import EMPTY_READING, Reading
from ..reference.lectionary import (
    APOSTOL_TRIODION,
    APOSTOL_WEEKS,
    FEAST_MATINS_GOSPELS,
    GOSPEL_TRIODION,
    GOSPEL_WEEKS,
    RESURRECTION_GOSPELS,
    Entry,
)
from ..reference.markers import DerivedDay, FixedDay, MovableDay
from .marker_index import MarkerIndex
from .paschalion import ShortDate, step_back, step_forward

WeekTable = Sequence[Sequence[Optional[Entry]]]

# Lenten triodion entries are read this many markers after their listed day
LENT_KEY_SHIFT = 4

# fixed substitute Sundays, in the order they are consumed
_SUBSTITUTE_SUNDAYS: Dict[int, Tuple[int, ...]] = {
    1: (32,),
    2: (31, 32),
    3: (30, 31, 32),
    4: (30, 31, 17, 32),
}

# first match wins
_MATINS_PRIORITY: Tuple[Tuple[int, Reading], ...] = tuple(
    (m, Reading(*e))
    for m, e in (
        (MovableDay.SUNDAY_2_OF_PASCHA, RESURRECTION_GOSPELS[0]),
        (MovableDay.SUNDAY_3_OF_PASCHA, RESURRECTION_GOSPELS[2]),
        (MovableDay.SUNDAY_4_OF_PASCHA, RESURRECTION_GOSPELS[3]),
        (MovableDay.SUNDAY_5_OF_PASCHA, RESURRECTION_GOSPELS[6]),
        (MovableDay.SUNDAY_6_OF_PASCHA, RESURRECTION_GOSPELS[7]),
        (MovableDay.SUNDAY_7_OF_PASCHA, RESURRECTION_GOSPELS[9]),
        (MovableDay.PENTECOST, RESURRECTION_GOSPELS[8]),
        (MovableDay.LENT_WEEK_7_SUN, FEAST_MATINS_GOSPELS["palm_sunday"]),
        (FixedDay.JAN_06, FEAST_MATINS_GOSPELS["theophany"]),
        (DerivedDay.MEETING_OF_THE_LORD, FEAST_MATINS_GOSPELS["meeting"]),
        (FixedDay.MAR_25, FEAST_MATINS_GOSPELS["theotokos"]),
        (FixedDay.AUG_06, FEAST_MATINS_GOSPELS["transfiguration"]),
        (FixedDay.AUG_15, FEAST_MATINS_GOSPELS["theotokos"]),
        (FixedDay.SEP_08, FEAST_MATINS_GOSPELS["theotokos"]),
        (FixedDay.SEP_14, FEAST_MATINS_GOSPELS["exaltation"]),
        (FixedDay.NOV_21, FEAST_MATINS_GOSPELS["theotokos"]),
        (FixedDay.DEC_25, FEAST_MATINS_GOSPELS["nativity"]),
    )
)


class YearView(Protocol):
    """What the resolver reads from a year under construction."""
    leap: bool
    prev_leap: bool
    prev_pascha: ShortDate
    prev_weekdays: Mapping[ShortDate, int]
    index: MarkerIndex

    def days(self) -> List[ShortDate]: ...
    def weekday(self, d: ShortDate) -> int: ...
    def n50(self, d: ShortDate) -> int: ...


# ============================================================
# Table lookups
# ============================================================

def week_reading(table: WeekTable, week: int, weekday: int) -> Reading:
    if not (0 <= week < len(table)) or not (0 <= weekday < 7):
        raise InvariantViolation(f"no reading row for week {week}, weekday {weekday}")
    e = table[week][weekday]
    return Reading(*e) if e else EMPTY_READING


def triodion_by_marker(table: Mapping[MovableDay, Entry]) -> Dict[int, Entry]:
    """Triodion table keyed by the day marker each entry is read on."""
    out: Dict[int, Entry] = {}
    for m, e in table.items():
        key = int(m)
        if m >= MovableDay.LENT_WEEK_1_MON:
            key += LENT_KEY_SHIFT
        out[key] = e
    return out


def triodion_reading(table: Mapping[int, Entry], markers: Iterable[int]) -> Reading:
    for m in sorted(markers):
        e = table.get(m)
        if e is not None:
            return Reading(*e)
    return EMPTY_READING


GOSPEL_BY_MARKER = triodion_by_marker(GOSPEL_TRIODION)
APOSTOL_BY_MARKER = triodion_by_marker(APOSTOL_TRIODION)


def resurrection_gospel(markers: Iterable[int], weekday: int, n50: int) -> Reading:
    """Sunday matins Gospel: feast-specific when a listed feast falls on the day, else the eothinon cycle."""
    if weekday != 0:
        return EMPTY_READING
    present = set(markers)
    for m, r in _MATINS_PRIORITY:
        if m in present:
            return r
    if 0 < n50 < 12:
        return Reading(*RESURRECTION_GOSPELS[n50 - 1])
    if n50 > 11:
        x = n50 % 11
        x = 10 if x == 0 else x - 1
        return Reading(*RESURRECTION_GOSPELS[x])
    return EMPTY_READING


# ============================================================
# Indent plan
# ============================================================

@dataclass(frozen=True)
class IndentPlan:
    winter: int                          # 0 .. -5
    spring: int                          # 17 - n50(Sunday after Exaltation)
    prev_spring: int                     # the previous year's spring value
    run_start: Optional[ShortDate]       # first day of the substitute run
    substitute_weeks: Tuple[int, ...]    # consumed one per week
    substitute_sundays: Tuple[int, ...]  # consumed one per Sunday
    publican: ShortDate
    exaltation_sunday: ShortDate


class ReadingsResolver:
    def __init__(self, config: IndentConfiguration):
        self.config = config

    def plan(self, year: YearView) -> IndentPlan:
        ix = year.index
        leap = year.leap
        publican = ix.first_date(MovableDay.SUNDAY_OF_PUBLICAN)
        theophany_sunday = ix.first_date(DerivedDay.SUN_AFTER_THEOPHANY)
        exaltation_sunday = ix.first_date(MovableDay.SUN_AFTER_EXALTATION)
        if publican is None or theophany_sunday is None or exaltation_sunday is None:
            raise InvariantViolation("year is missing an anchor Sunday")
        kdn = year.weekday((1, 6))

        # previous year: weeks from its Pentecost to its Sunday after Sep 15
        t3: ShortDate = (9, 15)
        while year.prev_weekdays.get(t3, -1) != 0:
            nxt = step_forward(t3, 1, year.prev_leap)
            if nxt == t3:
                raise InvariantViolation("no Sunday after Sep 15 in the previous year")
            t3 = nxt
        d = step_forward(year.prev_pascha, 49, year.prev_leap)
        weeks = 0
        while True:
            d = step_forward(d, 7, year.prev_leap)
            weeks += 1
            if d == t3:
                break
            if weeks > 53:
                raise InvariantViolation("previous Pentecost not aligned with Sep Sunday")
        prev_spring = 17 - weeks
        spring = 17 - year.n50(exaltation_sunday)

        winter = 0
        early_theophany = kdn in (0, 1)
        if publican == theophany_sunday:
            if early_theophany:
                winter -= 1
        else:
            if early_theophany:
                winter -= 1
            d3 = theophany_sunday
            while d3 != publican:
                d3 = step_forward(d3, 7, leap)
                winter -= 1

        if winter != 0:
            run_start: Optional[ShortDate] = (1, 7) if early_theophany else step_forward(theophany_sunday, 1, leap)
            substitute_weeks = tuple(self.config.winter(-winter))
        else:
            run_start = None
            substitute_weeks = ()
        substitute_sundays = _SUBSTITUTE_SUNDAYS.get(abs(winter) - 1, ())

        return IndentPlan(
            winter=winter,
            spring=spring,
            prev_spring=prev_spring,
            run_start=run_start,
            substitute_weeks=substitute_weeks,
            substitute_sundays=substitute_sundays,
            publican=publican,
            exaltation_sunday=exaltation_sunday,
        )

    # ------------------------------------------------------------

    def resolve(self, year: YearView, plan: IndentPlan) -> Tuple[Dict[ShortDate, Reading], Dict[ShortDate, Reading]]:
        """Gospel and Apostol readings for every day that has one."""
        gospel = self._run(year, plan, GOSPEL_WEEKS, GOSPEL_BY_MARKER, winter_shift=True, autumn=True)
        apostol = self._run(
            year, plan, APOSTOL_WEEKS, APOSTOL_BY_MARKER,
            winter_shift=False, autumn=self.config.spring_apostol,
        )
        return gospel, apostol

    def _run(
        self,
        year: YearView,
        plan: IndentPlan,
        weeks: WeekTable,
        triodion: Mapping[int, Entry],
        *,
        winter_shift: bool,
        autumn: bool,
    ) -> Dict[ShortDate, Reading]:
        ix = year.index
        leap = year.leap
        dd = plan.publican
        mf7 = step_forward(dd, 7, leap)
        mf14 = step_forward(dd, 14, leap)
        mf21 = step_forward(dd, 21, leap)
        pentecost = ix.first_date(MovableDay.PENTECOST)
        ned = plan.exaltation_sunday
        dd1 = step_back(ned, 14, leap)
        dd2 = step_back(ned, 7, leap)
        spring = plan.spring
        early_shift = plan.prev_spring if winter_shift else 0

        subs_weeks = list(reversed(plan.substitute_weeks))
        subs_sundays = list(reversed(plan.substitute_sundays))
        in_run = plan.winter != 0
        ddd = plan.run_start

        out: Dict[ShortDate, Reading] = {}
        for t1 in year.days():
            j = year.weekday(t1)
            n50 = year.n50(t1)

            if (in_run and t1 < ddd) or (not in_run and t1 < dd):
                out[t1] = week_reading(weeks, n50 + early_shift, j)
            if in_run and ddd <= t1 < dd:
                if j == 0:
                    if subs_sundays:
                        out[t1] = week_reading(weeks, subs_sundays.pop(), j)
                    if subs_weeks:
                        subs_weeks.pop()
                elif subs_weeks:
                    out[t1] = week_reading(weeks, subs_weeks[-1], j)

            if t1 == dd:
                out[t1] = week_reading(weeks, 33, j)
            elif dd < t1 <= mf7:
                out[t1] = week_reading(weeks, 34, j)
            elif mf7 < t1 <= mf14:
                out[t1] = week_reading(weeks, 35, j)
            elif mf14 < t1 <= mf21:
                out[t1] = week_reading(weeks, 36, j)
            elif mf21 < t1 < pentecost:
                out[t1] = triodion_reading(triodion, ix.markers_for(t1))

            if t1 >= pentecost:
                if not autumn:
                    out[t1] = week_reading(weeks, n50, j)
                elif t1 <= dd1 or (t1 <= ned and spring >= 0):
                    out[t1] = week_reading(weeks, n50, j)
                elif t1 <= dd2:
                    week = self.config.spring[0] if spring == -2 else n50
                    out[t1] = week_reading(weeks, week, j)
                elif t1 <= ned:
                    out[t1] = week_reading(weeks, self.config.spring[1], j)
                else:
                    out[t1] = week_reading(weeks, n50 + spring, j)
        return out
