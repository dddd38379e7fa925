"""
orthocal.calendar
-----------------
OrthodoxCalendar: the query facade over built liturgical years.

Built years are cached per (year, indent configuration).  The cache is
cleared wholesale once it holds CACHE_LIMIT entries; concurrent requests for
the same key build it only once.

Dates returned by searches are Julian-constructed CalendarDate objects; a
search that finds nothing returns None (single result) or [] (list result).
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from .core.bigyear import YearLike, string_to_year
from .core.config import DEFAULT_CONFIGURATION, IndentConfiguration
from .core.date import DEFAULT_FORMAT, CalendarDate
from .core.errors import InvalidDate
from .core.types import JULIAN, CalendarKind, DayRecord, Reading
from .engines.orth_year import OrthYear
from .engines.paschalion import ShortDate
from .reference.markers import FastPeriod, FixedDay, MovableDay
from .reference.titles import marker_title

logger = logging.getLogger(__name__)

CACHE_LIMIT = 10_000

# markers from this value up are ranks/fasts/icons/saints, not titled in descriptions
_DESCRIPTION_CUTOFF = 3001
_DESCRIBED_FASTS = (FastPeriod.APOSTLES_FAST, FastPeriod.DORMITION_FAST, FastPeriod.NATIVITY_FAST)

DateLike = Any  # CalendarDate, or a year followed by month/day arguments


class OrthodoxCalendar:
    def __init__(self, config: IndentConfiguration = DEFAULT_CONFIGURATION):
        self._config = config
        self._cache: Dict[Tuple[str, Tuple[int, ...]], OrthYear] = {}
        self._building: Dict[Tuple[str, Tuple[int, ...]], threading.Lock] = {}
        self._lock = threading.Lock()

    # ============================================================
    # Configuration
    # ============================================================

    @property
    def configuration(self) -> IndentConfiguration:
        return self._config

    @configuration.setter
    def configuration(self, config: IndentConfiguration) -> None:
        if not isinstance(config, IndentConfiguration):
            raise TypeError("configuration must be an IndentConfiguration")
        with self._lock:
            self._config = config
        logger.debug("indent configuration set to %s", config.cache_key())

    def _update(self, fn: Callable[[IndentConfiguration], IndentConfiguration]) -> None:
        with self._lock:
            self._config = fn(self._config)
            key = self._config.cache_key()
        logger.debug("indent configuration set to %s", key)

    def set_winter_indent_weeks_1(self, w1: int) -> None:
        self._update(lambda c: c.with_winter(1, (w1,)))

    def set_winter_indent_weeks_2(self, w1: int, w2: int) -> None:
        self._update(lambda c: c.with_winter(2, (w1, w2)))

    def set_winter_indent_weeks_3(self, w1: int, w2: int, w3: int) -> None:
        self._update(lambda c: c.with_winter(3, (w1, w2, w3)))

    def set_winter_indent_weeks_4(self, w1: int, w2: int, w3: int, w4: int) -> None:
        self._update(lambda c: c.with_winter(4, (w1, w2, w3, w4)))

    def set_winter_indent_weeks_5(self, w1: int, w2: int, w3: int, w4: int, w5: int) -> None:
        self._update(lambda c: c.with_winter(5, (w1, w2, w3, w4, w5)))

    def set_spring_indent_weeks(self, w1: int, w2: int) -> None:
        self._update(lambda c: c.with_spring((w1, w2)))

    def set_spring_indent_apostol(self, value: bool) -> None:
        self._update(lambda c: c.with_spring_apostol(value))

    def get_options(self) -> Tuple[List[int], bool]:
        return self._config.to_options()

    # ============================================================
    # Year cache
    # ============================================================

    def year(self, year: YearLike) -> OrthYear:
        """Built liturgical year for Julian `year` under the current configuration."""
        y = string_to_year(year)
        with self._lock:
            config = self._config
            key = (str(y), config.cache_key())
            hit = self._cache.get(key)
            if hit is not None:
                return hit
            build_lock = self._building.setdefault(key, threading.Lock())

        with build_lock:
            with self._lock:
                hit = self._cache.get(key)
                if hit is not None:
                    return hit
            try:
                built = OrthYear(y, config)
            except Exception:
                with self._lock:
                    self._building.pop(key, None)
                raise
            # publish and release the build slot together
            with self._lock:
                if len(self._cache) >= CACHE_LIMIT:
                    logger.debug("year cache reached %d entries, clearing", len(self._cache))
                    self._cache.clear()
                self._cache[key] = built
                self._building.pop(key, None)
        return built

    def cache_size(self) -> int:
        with self._lock:
            return len(self._cache)

    def clear_cache(self) -> None:
        with self._lock:
            self._cache.clear()

    # ============================================================
    # Year-level queries
    # ============================================================

    def julian_pascha(self, year: YearLike) -> ShortDate:
        return self.year(year).pascha

    def pascha(self, year: YearLike, kind: Any = JULIAN) -> Optional[CalendarDate]:
        """Pascha as a date.  For G/M kinds, the Pascha inside 1/1..12/31 of that kind, or None."""
        return self.get_date_with(year, MovableDay.PASCHA, kind)

    def winter_indent(self, year: YearLike) -> int:
        return self.year(year).winter_indent

    def spring_indent(self, year: YearLike) -> int:
        return self.year(year).spring_indent

    def apostol_post_length(self, year: YearLike) -> int:
        """Days of the Apostles' fast: from the Monday after All Saints to Jun 28."""
        oy = self.year(year)
        a = oy.date_with(MovableDay.SUNDAY_1_AFTER_PENTECOST)
        b = oy.date_with(FixedDay.JUN_29)
        if a is None or b is None:
            return 0
        d1 = CalendarDate(oy.year, a[0], a[1])
        d2 = CalendarDate(oy.year, b[0], b[1])
        return d2.cjdn - d1.cjdn - 1

    # ============================================================
    # Per-date queries
    # ============================================================

    def _resolve(self, date: DateLike, month: Optional[int], day: Optional[int], kind: Any) -> CalendarDate:
        if isinstance(date, CalendarDate):
            d = date
        else:
            if month is None or day is None:
                raise InvalidDate("year given without month and day")
            d = CalendarDate(date, month, day, kind)
        if not d:
            raise InvalidDate("invalid date")
        return d

    def _day(self, date: DateLike, month: Optional[int], day: Optional[int], kind: Any) -> Tuple[OrthYear, int, int]:
        d = self._resolve(date, month, day, kind)
        y, m, dd = d.ymd(CalendarKind.JULIAN)
        return self.year(y), m, dd

    def date_glas(self, date: DateLike, month: Optional[int] = None, day: Optional[int] = None, kind: Any = JULIAN) -> int:
        oy, m, d = self._day(date, month, day, kind)
        return oy.glas(m, d)

    def date_n50(self, date: DateLike, month: Optional[int] = None, day: Optional[int] = None, kind: Any = JULIAN) -> int:
        oy, m, d = self._day(date, month, day, kind)
        return oy.n50((m, d))

    def date_apostol(self, date: DateLike, month: Optional[int] = None, day: Optional[int] = None, kind: Any = JULIAN) -> Reading:
        oy, m, d = self._day(date, month, day, kind)
        return oy.apostol(m, d)

    def date_evangelie(self, date: DateLike, month: Optional[int] = None, day: Optional[int] = None, kind: Any = JULIAN) -> Reading:
        oy, m, d = self._day(date, month, day, kind)
        return oy.evangelie(m, d)

    def resurrect_evangelie(self, date: DateLike, month: Optional[int] = None, day: Optional[int] = None, kind: Any = JULIAN) -> Reading:
        oy, m, d = self._day(date, month, day, kind)
        return oy.resurrect_evangelie(m, d)

    def date_record(self, date: DateLike, month: Optional[int] = None, day: Optional[int] = None, kind: Any = JULIAN) -> Optional[DayRecord]:
        oy, m, d = self._day(date, month, day, kind)
        return oy.record(m, d)

    def date_properties(self, date: DateLike, month: Optional[int] = None, day: Optional[int] = None, kind: Any = JULIAN) -> Tuple[int, ...]:
        """Sorted markers of the day; () for the empty date."""
        if isinstance(date, CalendarDate) and not date:
            return ()
        oy, m, d = self._day(date, month, day, kind)
        return oy.properties(m, d) or ()

    def is_date_of(self, date: DateLike, marker: int, month: Optional[int] = None, day: Optional[int] = None, kind: Any = JULIAN) -> bool:
        return marker in self.date_properties(date, month, day, kind)

    # ============================================================
    # Searches
    # ============================================================

    def _single(self, year: YearLike, kind: Any, query: Callable[[OrthYear], Optional[ShortDate]]) -> Optional[CalendarDate]:
        kind = CalendarKind.coerce(kind)
        if kind is CalendarKind.JULIAN:
            oy = self.year(year)
            x = query(oy)
            return CalendarDate(oy.year, x[0], x[1]) if x is not None else None
        return self._single_in_period(CalendarDate(year, 1, 1, kind), CalendarDate(year, 12, 31, kind), query)

    def _single_in_period(self, d1: CalendarDate, d2: CalendarDate,
                          query: Callable[[OrthYear], Optional[ShortDate]]) -> Optional[CalendarDate]:
        lo, hi = _bounds(d1, d2)
        for y in range(lo.year(), hi.year() + 1):
            x = query(self.year(y))
            if x is None:
                continue
            d = CalendarDate(y, x[0], x[1])
            if lo <= d <= hi:
                return d
        return None

    def _many(self, year: YearLike, kind: Any, query: Callable[[OrthYear], Optional[List[ShortDate]]]) -> List[CalendarDate]:
        kind = CalendarKind.coerce(kind)
        if kind is CalendarKind.JULIAN:
            oy = self.year(year)
            return [CalendarDate(oy.year, m, d) for m, d in query(oy) or ()]
        return self._many_in_period(CalendarDate(year, 1, 1, kind), CalendarDate(year, 12, 31, kind), query)

    def _many_in_period(self, d1: CalendarDate, d2: CalendarDate,
                        query: Callable[[OrthYear], Optional[List[ShortDate]]]) -> List[CalendarDate]:
        lo, hi = _bounds(d1, d2)
        found: List[CalendarDate] = []
        for y in range(lo.year(), hi.year() + 1):
            found.extend(CalendarDate(y, m, d) for m, d in query(self.year(y)) or ())
        return [d for d in sorted(found) if lo <= d <= hi]

    def get_date_with(self, year: YearLike, marker: int, kind: Any = JULIAN) -> Optional[CalendarDate]:
        return self._single(year, kind, lambda oy: oy.date_with(marker))

    def get_date_inperiod_with(self, d1: CalendarDate, d2: CalendarDate, marker: int) -> Optional[CalendarDate]:
        return self._single_in_period(d1, d2, lambda oy: oy.date_with(marker))

    def get_alldates_with(self, year: YearLike, marker: int, kind: Any = JULIAN) -> List[CalendarDate]:
        return self._many(year, kind, lambda oy: oy.alldates_with(marker))

    def get_alldates_inperiod_with(self, d1: CalendarDate, d2: CalendarDate, marker: int) -> List[CalendarDate]:
        return self._many_in_period(d1, d2, lambda oy: oy.alldates_with(marker))

    def get_date_withanyof(self, year: YearLike, markers: Sequence[int], kind: Any = JULIAN) -> Optional[CalendarDate]:
        return self._single(year, kind, lambda oy: oy.date_withanyof(markers))

    def get_date_inperiod_withanyof(self, d1: CalendarDate, d2: CalendarDate, markers: Sequence[int]) -> Optional[CalendarDate]:
        return self._single_in_period(d1, d2, lambda oy: oy.date_withanyof(markers))

    def get_date_withallof(self, year: YearLike, markers: Sequence[int], kind: Any = JULIAN) -> Optional[CalendarDate]:
        return self._single(year, kind, lambda oy: oy.date_withallof(markers))

    def get_date_inperiod_withallof(self, d1: CalendarDate, d2: CalendarDate, markers: Sequence[int]) -> Optional[CalendarDate]:
        return self._single_in_period(d1, d2, lambda oy: oy.date_withallof(markers))

    def get_alldates_withanyof(self, year: YearLike, markers: Sequence[int], kind: Any = JULIAN) -> List[CalendarDate]:
        return self._many(year, kind, lambda oy: oy.alldates_withanyof(markers))

    def get_alldates_inperiod_withanyof(self, d1: CalendarDate, d2: CalendarDate, markers: Sequence[int]) -> List[CalendarDate]:
        return self._many_in_period(d1, d2, lambda oy: oy.alldates_withanyof(markers))

    # ============================================================
    # Descriptions
    # ============================================================

    def get_description_for_date(self, date: CalendarDate, fmt: str = DEFAULT_FORMAT) -> str:
        if not date:
            return ""
        props = self.date_properties(date)
        buf = ""
        for m in props:
            if m < _DESCRIPTION_CUTOFF:
                buf += (marker_title(m) or "") + " "
        for m in _DESCRIBED_FASTS:
            if m in props:
                buf += (marker_title(m) or "") + ". "
        return (date.format(fmt) + " " + buf).strip(" ")

    def get_description_for_dates(self, dates: Iterable[CalendarDate], fmt: str = DEFAULT_FORMAT,
                                  separator: str = "\n") -> str:
        out = ""
        for i, d in enumerate(dates):
            s = self.get_description_for_date(d, fmt)
            if s:
                if i:
                    out += separator
                out += s
        return out


def _bounds(d1: CalendarDate, d2: CalendarDate) -> Tuple[CalendarDate, CalendarDate]:
    if not d1 or not d2:
        raise InvalidDate("invalid date")
    return min(d1, d2), max(d1, d2)
