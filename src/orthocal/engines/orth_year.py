"""
orthocal.engines.orth_year
--------------------------
Liturgical year builder.

OrthYear(year, config) lays out one Julian civil year: weekdays derived
from Pascha, the fixed and movable markers, the derived commemorations
(weekday-seeking and collision rules), the tone (glas) cycle, the week
after Pentecost (n50) and the liturgy readings.  The result is read-only.

All positions are Julian (month, day) pairs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from ..core.bigyear import YearLike, string_to_year
from ..core.config import DEFAULT_CONFIGURATION, IndentConfiguration
from ..core.errors import InvariantViolation
from ..core.types import EMPTY_READING, DayRecord, Reading
from ..reference.fixed_dates import CHRISTMASTIDE, FIXED_DATES
from ..reference.markers import (
    DerivedDay,
    FastPeriod,
    FeastRank,
    FixedDay,
    MovableDay,
    SaintDay,
    TheotokosIcon,
)
from .marker_index import MarkerIndex
from .paschalion import (
    NO_DATE,
    ShortDate,
    is_julian_leap,
    julian_pascha,
    step_back,
    step_forward,
    weekday_map,
)
from .readings import ReadingsResolver, resurrection_gospel

logger = logging.getLogger(__name__)

FORWARD = "forward"
BACKWARD = "backward"
NEAREST = "nearest"

SUNDAY = 0
MONDAY = 1
SATURDAY = 6


# ============================================================
# Rule tables
# ============================================================

# Offsets 0..56 from Pascha carry MovableDay(offset + 1); extras ride along.
_PASCHAL_EXTRAS: Dict[int, Tuple[int, ...]] = {
    2: (TheotokosIcon.ICON_09, TheotokosIcon.ICON_17,
        SaintDay.DAVID_GAREJA_MARTYRS, SaintDay.CHRISTODULUS_AND_ANASTASIA),
    3: (TheotokosIcon.ICON_24, SaintDay.SINAI_FATHERS),
    5: (TheotokosIcon.ICON_06,),
    14: (SaintDay.JOSEPH_OF_ARIMATHEA, SaintDay.TAMAR_OF_GEORGIA),
    21: (SaintDay.TABITHA, SaintDay.ABRAHAM_OF_BULGARIA_RELICS),
    24: (TheotokosIcon.ICON_04, TheotokosIcon.ICON_14),
    27: (SaintDay.BUTOVO_MARTYRS,),
    37: (TheotokosIcon.ICON_07,),
    39: (SaintDay.FEREYDAN_MARTYRS,),
    42: (TheotokosIcon.ICON_23, TheotokosIcon.ICON_25),
    45: (SaintDay.DODO_OF_GAREJA,),
    46: (SaintDay.DAVID_OF_GAREJA,),
    50: (TheotokosIcon.ICON_12, TheotokosIcon.ICON_20),
    53: (TheotokosIcon.ICON_19,),
    56: (TheotokosIcon.ICON_22, TheotokosIcon.ICON_10, TheotokosIcon.ICON_05, TheotokosIcon.ICON_16),
}

_AFTER_ALL_SAINTS: Tuple[Tuple[int, Tuple[int, ...]], ...] = (
    (60, (TheotokosIcon.ICON_15,)),
    (61, (SaintDay.VARLAAM_OF_KHUTYN, TheotokosIcon.ICON_08, TheotokosIcon.ICON_21)),
    (63, (MovableDay.SUNDAY_2_AFTER_PENTECOST, DerivedDay.ALL_SAINTS_OF_RUSSIA, SaintDay.ATHONITE_FATHERS)),
    (70, (MovableDay.SUNDAY_3_AFTER_PENTECOST, SaintDay.BELARUSIAN_SAINTS, SaintDay.VOLOGDA_SAINTS,
          SaintDay.NOVGOROD_SAINTS, SaintDay.PSKOV_SAINTS, SaintDay.PETERSBURG_SAINTS,
          SaintDay.UDMURT_SAINTS, SaintDay.VOLGOGRAD_SAINTS)),
    (77, (MovableDay.SUNDAY_4_AFTER_PENTECOST, SaintDay.PSKOV_CAVES_FATHERS)),
)

# (markers, start, weekday, direction)
_SEEK_RULES: Tuple[Tuple[Tuple[int, ...], ShortDate, int, str], ...] = (
    ((SaintDay.VALAAM_FATHERS,), (8, 7), SUNDAY, FORWARD),
    ((TheotokosIcon.ICON_13,), (6, 18), SUNDAY, FORWARD),
    ((TheotokosIcon.ICON_18,), (8, 16), SUNDAY, FORWARD),
    ((SaintDay.KAZAKHSTAN_MARTYRS,), (9, 3), SUNDAY, FORWARD),
    ((SaintDay.KARELIAN_MARTYRS,), (10, 18), SUNDAY, FORWARD),
    ((SaintDay.PERM_SAINTS,), (1, 29), SUNDAY, FORWARD),
    ((SaintDay.NIZHNY_NOVGOROD_SAINTS,), (8, 26), SUNDAY, FORWARD),
    ((SaintDay.KHOLM_MARTYRS,), (5, 19), SUNDAY, FORWARD),
    ((SaintDay.MOSCOW_SAINTS,), (8, 25), SUNDAY, BACKWARD),
    ((SaintDay.SMOLENSK_SAINTS,), (7, 27), SUNDAY, BACKWARD),
    ((SaintDay.SARATOV_SAINTS,), (8, 31), SUNDAY, NEAREST),
    ((SaintDay.ALANIAN_SAINTS,), (11, 10), SUNDAY, NEAREST),
    ((SaintDay.GERMAN_LANDS_SAINTS,), (9, 20), SUNDAY, NEAREST),
    ((SaintDay.PETER_AND_FEVRONIA_RELICS,), (9, 6), SUNDAY, BACKWARD),
    ((SaintDay.KUBAN_SAINTS, SaintDay.IBERIAN_SAINTS), (9, 28), SUNDAY, BACKWARD),
    ((MovableDay.SAT_BEFORE_EXALTATION,), (9, 13), SATURDAY, BACKWARD),
    ((MovableDay.SUN_BEFORE_EXALTATION,), (9, 13), SUNDAY, BACKWARD),
    ((MovableDay.SAT_AFTER_EXALTATION,), (9, 15), SATURDAY, FORWARD),
    ((MovableDay.SUN_AFTER_EXALTATION,), (9, 15), SUNDAY, FORWARD),
    ((MovableDay.FATHERS_OF_SEVENTH_COUNCIL,), (10, 11), SUNDAY, NEAREST),
    ((SaintDay.UNMERCENARIES,), (11, 1), SUNDAY, NEAREST),
    ((MovableDay.SAT_BEFORE_NATIVITY,), (12, 24), SATURDAY, BACKWARD),
    ((DerivedDay.SAT_AFTER_THEOPHANY, SaintDay.PACHOMIUS_OF_KENSK), (1, 7), SATURDAY, FORWARD),
    ((DerivedDay.SUN_AFTER_THEOPHANY,), (1, 7), SUNDAY, FORWARD),
    ((DerivedDay.NEW_MARTYRS_OF_RUSSIA,), (1, 25), SUNDAY, NEAREST),
    ((SaintDay.LIPSI_MARTYRS,), (6, 27), SUNDAY, FORWARD),
    ((SaintDay.ALTAI_SAINTS,), (9, 7), SUNDAY, FORWARD),
    ((SaintDay.TVER_SAINTS, SaintDay.SOKOLOVSK_FATHERS, SaintDay.ARSENIUS_OF_TVER), (6, 30), SUNDAY, FORWARD),
    ((DerivedDay.FATHERS_OF_SIX_COUNCILS,), (7, 16), SUNDAY, NEAREST),
    ((SaintDay.KUZBASS_SAINTS,), (8, 31), SUNDAY, BACKWARD),
)

_CHEESEFARE_EXTRAS: Dict[int, Tuple[int, ...]] = {
    MovableDay.CHEESEFARE_THU: (SaintDay.SHIO_OF_MGVIME,),
    MovableDay.CHEESEFARE_SAT: (SaintDay.ALL_VENERABLE_FATHERS,),
}

_LENT_EXTRAS: Dict[int, Tuple[int, ...]] = {
    MovableDay.LENT_WEEK_1_SAT: (DerivedDay.THEODORE_TYRO,),
    MovableDay.LENT_WEEK_2_SUN: (TheotokosIcon.ICON_11,),
    MovableDay.LENT_WEEK_3_SUN: (DerivedDay.GREGORY_PALAMAS, SaintDay.KIEV_CAVES_FATHERS),
    MovableDay.LENT_WEEK_5_SUN: (DerivedDay.JOHN_CLIMACUS,),
    MovableDay.LENT_WEEK_5_SAT: (TheotokosIcon.ICON_01, TheotokosIcon.ICON_02),
    MovableDay.LENT_WEEK_6_SUN: (DerivedDay.MARY_OF_EGYPT,),
}

_MEETING_AFTERFEASTS = (
    DerivedDay.MEETING_AFTERFEAST_1,
    DerivedDay.MEETING_AFTERFEAST_2,
    DerivedDay.MEETING_AFTERFEAST_3,
    DerivedDay.MEETING_AFTERFEAST_4,
    DerivedDay.MEETING_AFTERFEAST_5,
    DerivedDay.MEETING_AFTERFEAST_6,
)

_TWELVE_GREAT_MOVABLE = (MovableDay.LENT_WEEK_7_SUN, MovableDay.PASCHA_WEEK_6_THU, MovableDay.PENTECOST)
_TWELVE_GREAT_FIXED = (
    FixedDay.JAN_06, DerivedDay.MEETING_OF_THE_LORD, FixedDay.MAR_25, FixedDay.AUG_06,
    FixedDay.AUG_15, FixedDay.SEP_08, FixedDay.SEP_14, FixedDay.NOV_21, FixedDay.DEC_25,
)
_GREAT_FEASTS = (FixedDay.JAN_01, FixedDay.JUN_24, FixedDay.JUN_29, FixedDay.AUG_29, FixedDay.OCT_01)

# weekday of Dec 25 -> day of the Saturday / Sunday after Nativity (December)
_SAT_AFTER_NATIVITY = {1: 30, 2: 29, 3: 28, 4: 27, 5: 26}
_SUN_AFTER_NATIVITY = {1: 31, 2: 30, 3: 29, 4: 28, 5: 27}
# weekday of the previous Dec 25 -> day of the Saturday / Sunday before Theophany (January)
_SAT_BEFORE_THEOPHANY = {2: 5, 3: 4, 4: 3, 5: 2}
_SUN_BEFORE_THEOPHANY = {3: 5, 4: 4, 5: 3, 6: 2}


@dataclass
class _DaySlot:
    weekday: int
    glas: int = -1
    n50: int = -1
    apostol: Reading = EMPTY_READING
    evangelie: Reading = EMPTY_READING


# ============================================================
# Builder
# ============================================================

class OrthYear:
    def __init__(self, year: YearLike, config: IndentConfiguration = DEFAULT_CONFIGURATION):
        self.year = string_to_year(year)
        self.config = config
        self.leap = is_julian_leap(self.year)
        self.prev_leap = is_julian_leap(self.year - 1)
        self.pascha = julian_pascha(self.year)
        self.prev_pascha = julian_pascha(self.year - 1)
        weekdays = weekday_map(self.year)
        self.prev_weekdays: Mapping[ShortDate, int] = weekday_map(self.year - 1)
        self._slots: Dict[ShortDate, _DaySlot] = {d: _DaySlot(w) for d, w in weekdays.items()}
        self._days: List[ShortDate] = list(self._slots)
        self.index = MarkerIndex(self._days)

        self._place_fixed()
        self._place_paschal_cycle()
        self._place_seek_rules()
        self._place_special_sundays()
        self._place_triodion()
        self._place_nativity_theophany()
        self._place_meeting()
        self._place_corrections()
        self._place_ranks()
        self._assign_tones()
        self._assign_n50()

        resolver = ReadingsResolver(config)
        plan = resolver.plan(self)
        gospel, apostol = resolver.resolve(self, plan)
        for d, r in gospel.items():
            self._slots[d].evangelie = r
        for d, r in apostol.items():
            self._slots[d].apostol = r
        self.winter_indent = plan.winter
        self.spring_indent = plan.spring
        logger.debug(
            "built year %s: pascha=%s winter_indent=%d spring_indent=%d",
            self.year, self.pascha, self.winter_indent, self.spring_indent,
        )

    # ----- primitives -----

    def days(self) -> List[ShortDate]:
        return list(self._days)

    def weekday(self, d: ShortDate) -> int:
        slot = self._slots.get(d)
        return slot.weekday if slot is not None else -1

    def n50(self, d: ShortDate) -> int:
        slot = self._slots.get(d)
        return slot.n50 if slot is not None else -1

    def _fwd(self, d: ShortDate, n: int) -> ShortDate:
        return step_forward(d, n, self.leap)

    def _back(self, d: ShortDate, n: int) -> ShortDate:
        return step_back(d, n, self.leap)

    def _at(self, marker: int) -> ShortDate:
        d = self.index.first_date(marker)
        return d if d is not None else NO_DATE

    def _has(self, d: ShortDate, marker: int) -> bool:
        return self.index.has(d, marker)

    def _add(self, d: ShortDate, *markers: int) -> None:
        self.index.add(d, *markers)

    def _seek(self, start: ShortDate, weekday: int, direction: str) -> ShortDate:
        """First day with `weekday` from `start` (inclusive) in `direction`."""
        if direction == NEAREST:
            delta = (self.weekday(start) - weekday) % 7
            if delta == 0:
                return start
            direction = BACKWARD if delta <= 3 else FORWARD
        step = self._fwd if direction == FORWARD else self._back
        d = start
        while self.weekday(d) != weekday:
            nxt = step(d, 1)
            if nxt == d:
                raise InvariantViolation(f"no weekday {weekday} {direction} of {start}")
            d = nxt
        return d

    # ----- markers -----

    def _place_fixed(self) -> None:
        for marker, m, d in FIXED_DATES:
            self._add((m, d), marker)
        for d in CHRISTMASTIDE:
            self._add(d, FastPeriod.FAST_FREE_CHRISTMASTIDE)
        x = (11, 15)
        while x < (12, 25):
            self._add(x, FastPeriod.NATIVITY_FAST)
            x = self._fwd(x, 1)
        x = (8, 1)
        while x < (8, 15):
            self._add(x, FastPeriod.DORMITION_FAST)
            x = self._fwd(x, 1)

    def _place_paschal_cycle(self) -> None:
        for offset in range(57):
            d = self._fwd(self.pascha, offset)
            markers: Tuple[int, ...] = (MovableDay(offset + 1),)
            if offset < 7:
                markers += (FastPeriod.FAST_FREE_BRIGHT,)
            elif 49 <= offset < 56:
                markers += (FastPeriod.FAST_FREE_TRINITY,)
            self._add(d, *(markers + _PASCHAL_EXTRAS.get(offset, ())))
        all_saints = self._fwd(self.pascha, 56)
        x = self._fwd(all_saints, 1)
        while x < (6, 29):
            self._add(x, FastPeriod.APOSTLES_FAST)
            x = self._fwd(x, 1)
        for offset, markers in _AFTER_ALL_SAINTS:
            self._add(self._fwd(self.pascha, offset), *markers)

    def _place_seek_rules(self) -> None:
        for markers, start, weekday, direction in _SEEK_RULES:
            self._add(self._seek(start, weekday, direction), *markers)

    def _place_special_sundays(self) -> None:
        self._add((2, 29) if self.leap else (2, 28), TheotokosIcon.ICON_03)

        # Sunday after Sep 27, or the Sunday before it when that is the Protection (Oct 1)
        d = self._seek((9, 27), SUNDAY, FORWARD)
        if d == (10, 1):
            d = self._seek((9, 26), SUNDAY, BACKWARD)
        self._add(d, SaintDay.CHELYABINSK_SAINTS)

        d = (10, 25)
        while not (self.weekday(d) == SATURDAY and d[1] != 22):
            d = self._back(d, 1)
        self._add(d, MovableDay.DEMETRIUS_SATURDAY)

        d = self._seek((12, 24), SUNDAY, BACKWARD)
        self._add(d, MovableDay.SUN_BEFORE_NATIVITY)
        self._add(self._seek(self._back(d, 1), SUNDAY, BACKWARD), MovableDay.SUNDAY_OF_FOREFATHERS)

    def _place_triodion(self) -> None:
        publican = self._back(self.pascha, 70)
        self._add(publican, MovableDay.SUNDAY_OF_PUBLICAN, FastPeriod.FAST_FREE_PUBLICAN)
        for k in range(1, 7):
            self._add(self._fwd(publican, k), FastPeriod.FAST_FREE_PUBLICAN)
        prodigal = self._fwd(publican, 7)
        self._add(prodigal, MovableDay.SUNDAY_OF_PRODIGAL_SON)
        d = self._fwd(prodigal, 6)
        self._add(d, MovableDay.MEATFARE_SATURDAY)
        d = self._fwd(d, 1)
        self._add(d, MovableDay.MEATFARE_SUNDAY)
        for value in range(MovableDay.CHEESEFARE_MON, MovableDay.CHEESEFARE_SUNDAY + 1):
            d = self._fwd(d, 1)
            self._add(d, MovableDay(value), FastPeriod.FAST_FREE_CHEESEFARE, *_CHEESEFARE_EXTRAS.get(value, ()))
        for value in range(MovableDay.LENT_WEEK_1_MON, MovableDay.LENT_WEEK_7_SAT + 1):
            d = self._fwd(d, 1)
            self._add(d, MovableDay(value), FastPeriod.GREAT_LENT, *_LENT_EXTRAS.get(value, ()))

    def _place_nativity_theophany(self) -> None:
        i = self.weekday((12, 25))
        d = (12, _SAT_AFTER_NATIVITY.get(i, 31))
        if self.weekday(d) == SATURDAY:
            self._add(d, MovableDay.SAT_AFTER_NATIVITY)
        else:
            self._add(d, DerivedDay.SAT_AFTER_NATIVITY_READINGS)
        d = (12, _SUN_AFTER_NATIVITY.get(i, 26))
        if self.weekday(d) == SUNDAY:
            self._add(d, MovableDay.SUN_AFTER_NATIVITY, DerivedDay.RIGHTEOUS_GODFATHERS)
        else:
            self._add(d, DerivedDay.SUN_AFTER_NATIVITY_READINGS, DerivedDay.RIGHTEOUS_GODFATHERS)
        if i in (0, 1):
            self._add_sat_before_theophany((12, 30) if i == 1 else (12, 31))

        i = self.prev_weekdays.get((12, 25), -1)
        if i not in (0, 1):
            self._add_sat_before_theophany((1, _SAT_BEFORE_THEOPHANY.get(i, 1)))
        d = (1, _SUN_BEFORE_THEOPHANY.get(i, 1))
        if self.weekday(d) == SUNDAY:
            self._add(d, DerivedDay.SUN_BEFORE_THEOPHANY)
        else:
            self._add(d, DerivedDay.SUN_BEFORE_THEOPHANY_READINGS)

    def _add_sat_before_theophany(self, d: ShortDate) -> None:
        if self.weekday(d) == SATURDAY:
            self._add(d, DerivedDay.SAT_BEFORE_THEOPHANY)
        else:
            self._add(d, DerivedDay.SAT_BEFORE_THEOPHANY_READINGS)

    def _place_meeting(self) -> None:
        meatfare_sat = self._at(MovableDay.MEATFARE_SATURDAY)

        d = (1, 30)
        if d in (meatfare_sat, self._at(MovableDay.CHEESEFARE_WED), self._at(MovableDay.CHEESEFARE_FRI)):
            d = (1, 29)
        self._add(d, DerivedDay.THREE_HIERARCHS)

        lent_start = self._at(MovableDay.LENT_WEEK_1_MON)
        meeting = (2, 2)
        if meeting >= lent_start:
            meeting = self._back(lent_start, 1)
        self._add(meeting, DerivedDay.MEETING_OF_THE_LORD)
        if meeting == meatfare_sat:
            # the Saturday of the Dead moves back a week
            self.index.remove(meatfare_sat, MovableDay.MEATFARE_SATURDAY)
            meatfare_sat = self._seek(self._back(meatfare_sat, 1), SATURDAY, BACKWARD)
            self._add(meatfare_sat, MovableDay.MEATFARE_SATURDAY)
        if meeting != (2, 1):
            d = (2, 1)
            if d == meatfare_sat:
                d = self._back(d, 1)
            self._add(d, DerivedDay.MEETING_FOREFEAST)

        leavetaking = (2, 9)
        prodigal = self._at(MovableDay.SUNDAY_OF_PRODIGAL_SON)
        if prodigal <= meeting <= self._fwd(prodigal, 2):
            leavetaking = self._fwd(prodigal, 5)
        a = self._fwd(prodigal, 3)
        if a <= meeting <= self._fwd(a, 3):
            leavetaking = self._at(MovableDay.CHEESEFARE_TUE)
        if self._at(MovableDay.MEATFARE_SUNDAY) <= meeting <= self._at(MovableDay.CHEESEFARE_MON):
            leavetaking = self._at(MovableDay.CHEESEFARE_THU)
        if self._at(MovableDay.CHEESEFARE_TUE) <= meeting <= self._at(MovableDay.CHEESEFARE_WED):
            leavetaking = self._at(MovableDay.CHEESEFARE_SAT)
        if self._at(MovableDay.CHEESEFARE_THU) <= meeting <= self._at(MovableDay.CHEESEFARE_SAT):
            leavetaking = self._at(MovableDay.CHEESEFARE_SUNDAY)
        if not self._has(meeting, MovableDay.CHEESEFARE_SUNDAY):
            if self._has(leavetaking, MovableDay.MEATFARE_SATURDAY):
                leavetaking = self._back(leavetaking, 1)
            self._add(leavetaking, DerivedDay.MEETING_LEAVETAKING)

        end = self.index.first_date(DerivedDay.MEETING_LEAVETAKING)
        d = self._fwd(meeting, 1)
        if end is None or end == d:
            return
        i = 0
        while True:
            if self._has(d, MovableDay.MEATFARE_SATURDAY):
                d = self._fwd(d, 1)
                if d >= end:
                    break
            if i < len(_MEETING_AFTERFEASTS):
                self._add(d, _MEETING_AFTERFEASTS[i])
            d = self._fwd(d, 1)
            i += 1
            if d >= end:
                break

    def _place_corrections(self) -> None:
        at = self._at

        d = (2, 24)
        if any(self._has(d, m) for m in (MovableDay.MEATFARE_SATURDAY, MovableDay.CHEESEFARE_WED,
                                          MovableDay.CHEESEFARE_FRI, MovableDay.LENT_WEEK_1_MON)):
            d = (2, 23)
        if at(MovableDay.LENT_WEEK_1_TUE) <= d <= at(MovableDay.LENT_WEEK_1_FRI):
            d = at(MovableDay.LENT_WEEK_1_SAT)
        self._add(d, DerivedDay.FIRST_SECOND_FINDING_OF_HEAD)

        d = (3, 9)
        if self._has(d, MovableDay.LENT_WEEK_4_WED):
            d = (3, 8)
        if self._has(d, MovableDay.LENT_WEEK_5_THU):
            d = (3, 7)
        if self._has(d, MovableDay.LENT_WEEK_5_SAT):
            d = (3, 10)
        if at(MovableDay.LENT_WEEK_1_MON) <= d <= at(MovableDay.LENT_WEEK_1_FRI):
            d = at(MovableDay.LENT_WEEK_1_SAT)
        self._add(d, DerivedDay.FORTY_MARTYRS)

        if (3, 25) < at(MovableDay.LENT_WEEK_7_MON):
            d = (3, 24)
            if self._has(d, MovableDay.LENT_WEEK_6_SAT):
                d = (3, 22)
            if self._has(d, MovableDay.LENT_WEEK_5_THU):
                d = (3, 23)
            if self._has(d, MovableDay.LENT_WEEK_5_TUE):
                d = (3, 23)
            self._add(d, DerivedDay.ANNUNCIATION_FOREFEAST)
        if (3, 26) < at(MovableDay.LENT_WEEK_6_SAT):
            self._add((3, 26), DerivedDay.ANNUNCIATION_LEAVETAKING)

        d = (4, 23)
        if at(MovableDay.LENT_WEEK_7_MON) <= d <= at(MovableDay.PASCHA):
            d = at(MovableDay.BRIGHT_MON)
        self._add(d, DerivedDay.GEORGE_THE_VICTORIOUS)

        d = (5, 25)
        if d in (at(MovableDay.PASCHA_WEEK_7_SAT), at(MovableDay.SUNDAY_1_AFTER_PENTECOST)):
            d = (5, 23)
        if self._has(d, MovableDay.PENTECOST_WEEK_MON):
            d = (5, 26)
        if self._has(d, MovableDay.PENTECOST):
            d = (5, 22)
        self._add(d, DerivedDay.THIRD_FINDING_OF_HEAD)

    def _place_ranks(self) -> None:
        for m in _TWELVE_GREAT_MOVABLE:
            self._add(self._at(m), FeastRank.TWELVE_GREAT_MOVABLE)
        for m in _TWELVE_GREAT_FIXED:
            self._add(self._at(m), FeastRank.TWELVE_GREAT_FIXED)
        for m in _GREAT_FEASTS:
            self._add(self._at(m), FeastRank.GREAT_FEAST)

    # ----- tone and week index -----

    def _assign_tones(self) -> None:
        lazarus = self._at(MovableDay.LENT_WEEK_6_SAT)
        all_saints = self._at(MovableDay.SUNDAY_1_AFTER_PENTECOST)
        d = lazarus
        while d <= all_saints:
            self._slots[d].glas = -1
            nxt = self._fwd(d, 1)
            if nxt == d:
                break
            d = nxt

        glas = 8
        d = self._fwd(all_saints, 1)
        while True:
            self._slots[d].glas = glas
            nxt = self._fwd(d, 1)
            if nxt == d:
                break
            d = nxt
            if self.weekday(d) == SUNDAY:
                glas = glas % 8 + 1

        # phase on Jan 1: continue the previous year's cycle from its All Saints
        glas = 8
        d = step_forward(self.prev_pascha, 57, self.prev_leap)
        while True:
            nxt = step_forward(d, 1, self.prev_leap)
            if nxt == d:
                break
            d = nxt
            if self.prev_weekdays.get(d, -1) == SUNDAY:
                glas = glas % 8 + 1
        d = (1, 1)
        if self.weekday(d) == SUNDAY:
            glas = glas % 8 + 1
        while True:
            self._slots[d].glas = glas
            d = self._fwd(d, 1)
            if d == lazarus:
                break
            if self.weekday(d) == SUNDAY:
                glas = glas % 8 + 1

    def _assign_n50(self) -> None:
        d = step_forward(self.prev_pascha, 49, self.prev_leap)
        i = 0
        while True:
            nxt = step_forward(d, 1, self.prev_leap)
            if nxt == d:
                break
            d = nxt
            if self.prev_weekdays.get(d, -1) == MONDAY:
                i += 1

        d = (1, 1)
        if self.weekday(d) == MONDAY:
            i += 1
        lent_start = self._at(MovableDay.LENT_WEEK_1_MON)
        pentecost = self._at(MovableDay.PENTECOST)
        while True:
            slot = self._slots[d]
            if d < lent_start:
                slot.n50 = i
            elif d < pentecost:
                slot.n50 = -1
            elif d == pentecost:
                slot.n50 = 0
                i = 0
            else:
                slot.n50 = i
            nxt = self._fwd(d, 1)
            if nxt == d:
                break
            d = nxt
            if self.weekday(d) == MONDAY:
                i += 1

    # ============================================================
    # Queries
    # ============================================================

    def glas(self, m: int, d: int) -> int:
        slot = self._slots.get((m, d))
        return slot.glas if slot is not None else -1

    def date_n50(self, m: int, d: int) -> int:
        return self.n50((m, d))

    def dn(self, m: int, d: int) -> int:
        return self.weekday((m, d))

    def apostol(self, m: int, d: int) -> Reading:
        slot = self._slots.get((m, d))
        return slot.apostol if slot is not None else EMPTY_READING

    def evangelie(self, m: int, d: int) -> Reading:
        slot = self._slots.get((m, d))
        return slot.evangelie if slot is not None else EMPTY_READING

    def resurrect_evangelie(self, m: int, d: int) -> Reading:
        key = (m, d)
        if key not in self._slots:
            return EMPTY_READING
        return resurrection_gospel(self.index.markers_for(key), self.weekday(key), self.n50(key))

    def properties(self, m: int, d: int) -> Optional[Tuple[int, ...]]:
        """Markers of the day, or None for an unknown day or a day without markers."""
        if (m, d) not in self._slots:
            return None
        markers = tuple(x for x in self.index.markers_for((m, d)) if x > 0)
        return markers or None

    def record(self, m: int, d: int) -> Optional[DayRecord]:
        slot = self._slots.get((m, d))
        if slot is None:
            return None
        return DayRecord(
            weekday=slot.weekday,
            glas=slot.glas,
            n50=slot.n50,
            apostol=slot.apostol,
            evangelie=slot.evangelie,
            matins=self.resurrect_evangelie(m, d),
            markers=self.index.markers_for((m, d)),
        )

    def date_with(self, marker: int) -> Optional[ShortDate]:
        if marker < 1:
            return None
        return self.index.first_date(marker)

    def alldates_with(self, marker: int) -> Optional[List[ShortDate]]:
        if marker < 1:
            return None
        return self.index.dates_for(marker) or None

    def date_withanyof(self, markers: Sequence[int]) -> Optional[ShortDate]:
        for m in markers:
            d = self.date_with(m)
            if d is not None:
                return d
        return None

    def date_withallof(self, markers: Sequence[int]) -> Optional[ShortDate]:
        if not markers:
            return None
        for d in self.alldates_with(markers[0]) or ():
            if all(self.index.has(d, m) for m in markers):
                return d
        return None

    def alldates_withanyof(self, markers: Iterable[int]) -> Optional[List[ShortDate]]:
        out: List[ShortDate] = []
        for m in markers:
            out.extend(self.alldates_with(m) or ())
        return out or None
