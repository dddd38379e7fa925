"""orthocal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize the default calendar on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    day_info,
    default_calendar,
    set_default_calendar,
    julian_pascha,
    pascha,
    winter_indent,
    spring_indent,
    apostol_post_length,
    get_options,
    date_glas,
    date_n50,
    date_properties,
    date_apostol,
    date_evangelie,
    resurrect_evangelie,
    is_date_of,
    get_date_with,
    get_date_inperiod_with,
    get_alldates_with,
    get_alldates_inperiod_with,
    get_date_withanyof,
    get_date_inperiod_withanyof,
    get_date_withallof,
    get_date_inperiod_withallof,
    get_alldates_withanyof,
    get_alldates_inperiod_withanyof,
    get_description_for_date,
    get_description_for_dates,
)
from .calendar import OrthodoxCalendar
from .core.bigyear import is_leap_year
from .core.config import IndentConfiguration
from .core.date import CalendarDate
from .core.errors import (
    OrthocalError,
    InvalidDate,
    InvalidConfiguration,
    NumericConversionError,
    OutOfRange,
    InvariantViolation,
)
from .core.types import Book, CalendarKind, JULIAN, MILANKOVIC, GREGORIAN, DayInfo, Reading
from .reference.markers import (
    MovableDay,
    FixedDay,
    DerivedDay,
    FeastRank,
    FastPeriod,
    TheotokosIcon,
    SaintDay,
    parse_marker,
)
from .reference.titles import marker_title

__all__ = [
    "day_info",
    "default_calendar",
    "set_default_calendar",
    "julian_pascha",
    "pascha",
    "winter_indent",
    "spring_indent",
    "apostol_post_length",
    "get_options",
    "date_glas",
    "date_n50",
    "date_properties",
    "date_apostol",
    "date_evangelie",
    "resurrect_evangelie",
    "is_date_of",
    "get_date_with",
    "get_date_inperiod_with",
    "get_alldates_with",
    "get_alldates_inperiod_with",
    "get_date_withanyof",
    "get_date_inperiod_withanyof",
    "get_date_withallof",
    "get_date_inperiod_withallof",
    "get_alldates_withanyof",
    "get_alldates_inperiod_withanyof",
    "get_description_for_date",
    "get_description_for_dates",
    "OrthodoxCalendar",
    "is_leap_year",
    "IndentConfiguration",
    "CalendarDate",
    "OrthocalError",
    "InvalidDate",
    "InvalidConfiguration",
    "NumericConversionError",
    "OutOfRange",
    "InvariantViolation",
    "CalendarKind",
    "JULIAN",
    "MILANKOVIC",
    "GREGORIAN",
    "DayInfo",
    "Reading",
    "Book",
    "MovableDay",
    "FixedDay",
    "DerivedDay",
    "FeastRank",
    "FastPeriod",
    "TheotokosIcon",
    "SaintDay",
    "parse_marker",
    "marker_title",
]
