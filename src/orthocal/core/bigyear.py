"""
orthocal.core.bigyear
---------------------
Arbitrary-precision year arithmetic shared by the date engine.

Years travel as decimal strings at the public boundary and as Python ints
internally; the division helpers pin down the rounding convention the
day-count formulas rely on.
"""

from __future__ import annotations

from typing import Tuple, Union

from .errors import NumericConversionError, OutOfRange
from .types import CalendarKind

MIN_YEAR_VALUE = 2

YearLike = Union[int, str]


def fdiv(a: int, b: int) -> int:
    """Floor division (quotient rounded toward minus infinity)."""
    return a // b


def pdiv(a: int, b: int) -> Tuple[int, int]:
    """Quotient and non-negative remainder, for either sign of b."""
    q, r = divmod(a, b)
    if r < 0:
        q += 1
        r -= b
    return q, r


def string_to_big_int(s: YearLike) -> int:
    if isinstance(s, bool):
        raise NumericConversionError(f"cannot convert {s!r} to an integer")
    if isinstance(s, int):
        return s
    text = str(s).strip()
    try:
        return int(text, 10)
    except ValueError:
        raise NumericConversionError(f"cannot convert string '{s}' to an integer") from None


def string_to_year(s: YearLike) -> int:
    y = string_to_big_int(s)
    if y < MIN_YEAR_VALUE:
        raise OutOfRange(f"year '{y}' is below the supported minimum {MIN_YEAR_VALUE}")
    return y


def is_leap_year(year: YearLike, kind: CalendarKind) -> bool:
    y = string_to_big_int(year)
    kind = CalendarKind.coerce(kind)
    if kind is CalendarKind.GREGORIAN:
        return y % 400 == 0 or (y % 100 != 0 and y % 4 == 0)
    if kind is CalendarKind.JULIAN:
        return y % 4 == 0
    # Milankovic: century years leap only when (y/100) mod 9 is 2 or 6
    if y % 4 != 0:
        return False
    if y % 100 == 0:
        return (y // 100) % 9 in (2, 6)
    return True


def month_length(month: int, leap: bool) -> int:
    if month in (1, 3, 5, 7, 8, 10, 12):
        return 31
    if month in (4, 6, 9, 11):
        return 30
    if month == 2:
        return 29 if leap else 28
    return 0
