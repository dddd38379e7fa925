from __future__ import annotations

from dataclasses import replace
from typing import Any, List, Optional, Sequence, Tuple

from .attributes.registry import compute_attributes
from .calendar import OrthodoxCalendar
from .core.bigyear import YearLike
from .core.date import DEFAULT_FORMAT, CalendarDate
from .core.types import JULIAN, DayInfo, Reading
from .engines.paschalion import ShortDate
from .reference.titles import marker_title

_calendar: Optional[OrthodoxCalendar] = None

def set_default_calendar(cal: OrthodoxCalendar) -> None:
    global _calendar
    _calendar = cal

def default_calendar() -> OrthodoxCalendar:
    if _calendar is None:
        raise RuntimeError("Default calendar not initialized")
    return _calendar

def _as_date(d: Any, kind: Any = JULIAN) -> CalendarDate:
    """Accept a CalendarDate or a (year, month, day) triple."""
    if isinstance(d, CalendarDate):
        return d
    y, m, dd = d
    return CalendarDate(y, m, dd, kind)

def day_info(d: Any, *, kind: Any = JULIAN, attributes: Sequence[str] = ()) -> DayInfo:
    date = _as_date(d, kind)
    cal = default_calendar()
    rec = cal.date_record(date)
    markers = rec.markers if rec is not None else ()
    titles = tuple(t for t in (marker_title(m) for m in markers) if t)
    info = DayInfo(date=date, markers=markers, titles=titles, record=rec)
    if attributes:
        attrs = compute_attributes(info, attributes)
        info = replace(info, attributes=attrs)
    return info

# ============================================================
# Year-level
# ============================================================

def julian_pascha(year: YearLike) -> ShortDate:
    return default_calendar().julian_pascha(year)

def pascha(year: YearLike, kind: Any = JULIAN) -> Optional[CalendarDate]:
    return default_calendar().pascha(year, kind)

def winter_indent(year: YearLike) -> int:
    return default_calendar().winter_indent(year)

def spring_indent(year: YearLike) -> int:
    return default_calendar().spring_indent(year)

def apostol_post_length(year: YearLike) -> int:
    return default_calendar().apostol_post_length(year)

def get_options() -> Tuple[List[int], bool]:
    return default_calendar().get_options()

# ============================================================
# Per-date
# ============================================================

def date_glas(d: Any, kind: Any = JULIAN) -> int:
    return default_calendar().date_glas(_as_date(d, kind))

def date_n50(d: Any, kind: Any = JULIAN) -> int:
    return default_calendar().date_n50(_as_date(d, kind))

def date_properties(d: Any, kind: Any = JULIAN) -> Tuple[int, ...]:
    return default_calendar().date_properties(_as_date(d, kind))

def date_apostol(d: Any, kind: Any = JULIAN) -> Reading:
    return default_calendar().date_apostol(_as_date(d, kind))

def date_evangelie(d: Any, kind: Any = JULIAN) -> Reading:
    return default_calendar().date_evangelie(_as_date(d, kind))

def resurrect_evangelie(d: Any, kind: Any = JULIAN) -> Reading:
    return default_calendar().resurrect_evangelie(_as_date(d, kind))

def is_date_of(d: Any, marker: int, kind: Any = JULIAN) -> bool:
    return default_calendar().is_date_of(_as_date(d, kind), marker)

# ============================================================
# Searches
# ============================================================

def get_date_with(year: YearLike, marker: int, kind: Any = JULIAN) -> Optional[CalendarDate]:
    return default_calendar().get_date_with(year, marker, kind)

def get_date_inperiod_with(d1: CalendarDate, d2: CalendarDate, marker: int) -> Optional[CalendarDate]:
    return default_calendar().get_date_inperiod_with(d1, d2, marker)

def get_alldates_with(year: YearLike, marker: int, kind: Any = JULIAN) -> List[CalendarDate]:
    return default_calendar().get_alldates_with(year, marker, kind)

def get_alldates_inperiod_with(d1: CalendarDate, d2: CalendarDate, marker: int) -> List[CalendarDate]:
    return default_calendar().get_alldates_inperiod_with(d1, d2, marker)

def get_date_withanyof(year: YearLike, markers: Sequence[int], kind: Any = JULIAN) -> Optional[CalendarDate]:
    return default_calendar().get_date_withanyof(year, markers, kind)

def get_date_inperiod_withanyof(d1: CalendarDate, d2: CalendarDate, markers: Sequence[int]) -> Optional[CalendarDate]:
    return default_calendar().get_date_inperiod_withanyof(d1, d2, markers)

def get_date_withallof(year: YearLike, markers: Sequence[int], kind: Any = JULIAN) -> Optional[CalendarDate]:
    return default_calendar().get_date_withallof(year, markers, kind)

def get_date_inperiod_withallof(d1: CalendarDate, d2: CalendarDate, markers: Sequence[int]) -> Optional[CalendarDate]:
    return default_calendar().get_date_inperiod_withallof(d1, d2, markers)

def get_alldates_withanyof(year: YearLike, markers: Sequence[int], kind: Any = JULIAN) -> List[CalendarDate]:
    return default_calendar().get_alldates_withanyof(year, markers, kind)

def get_alldates_inperiod_withanyof(d1: CalendarDate, d2: CalendarDate, markers: Sequence[int]) -> List[CalendarDate]:
    return default_calendar().get_alldates_inperiod_withanyof(d1, d2, markers)

# ============================================================
# Descriptions
# ============================================================

def get_description_for_date(d: Any, fmt: str = DEFAULT_FORMAT, kind: Any = JULIAN) -> str:
    return default_calendar().get_description_for_date(_as_date(d, kind), fmt)

def get_description_for_dates(dates: Sequence[CalendarDate], fmt: str = DEFAULT_FORMAT, separator: str = "\n") -> str:
    return default_calendar().get_description_for_dates(dates, fmt, separator)
