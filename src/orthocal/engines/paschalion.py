"""
orthocal.engines.paschalion
---------------------------
Julian Pascha by the Gauss method, plus the (month, day) stepping used by
the year builder.

All dates here are Julian (month, day) pairs inside one civil year.  A step
that would leave the year returns the starting date unchanged; callers test
for that to detect the year boundary.
"""

from __future__ import annotations

from typing import Dict, Tuple

from ..core.bigyear import YearLike, month_length, string_to_big_int

ShortDate = Tuple[int, int]

NO_DATE: ShortDate = (-1, -1)


def julian_pascha(year: YearLike) -> ShortDate:
    """(month, day) of Pascha in the Julian calendar for `year`."""
    y = string_to_big_int(year)
    a = y % 19
    b = y % 4
    c = y % 7
    d = (19 * a + 15) % 30
    e = (2 * b + 4 * c + 6 * d + 6) % 7
    p = 22 + d + e
    if p > 31:
        return 4, d + e - 9
    return 3, p


def is_julian_leap(year: int) -> bool:
    return year % 4 == 0


def step_forward(date: ShortDate, days: int, leap: bool) -> ShortDate:
    """`date` moved `days` ahead, or `date` itself when that crosses Dec 31."""
    if days < 1:
        return date
    m, d = date
    if not 1 <= m <= 12 or not 1 <= d <= month_length(m, leap):
        return date
    d += days
    u = month_length(m, leap)
    while d > u:
        d -= u
        m += 1
        if m > 12:
            return date
        u = month_length(m, leap)
    return m, d


def step_back(date: ShortDate, days: int, leap: bool) -> ShortDate:
    """`date` moved `days` back, or `date` itself when that crosses Jan 1."""
    if days < 1:
        return date
    m, d = date
    if not 1 <= m <= 12 or not 1 <= d <= month_length(m, leap):
        return date
    d -= days
    while d < 1:
        m -= 1
        if m < 1:
            return date
        d += month_length(m, leap)
    return m, d


def weekday_map(year: int) -> Dict[ShortDate, int]:
    """
    Weekday (0 = Sunday) of every day of Julian `year`, radiating from Pascha
    in 7-day strides.  Empty for years below 1.
    """
    if year < 1:
        return {}
    leap = is_julian_leap(year)
    pascha = julian_pascha(year)
    out: Dict[ShortDate, int] = {}
    for i in range(7):
        d1 = step_forward(pascha, i, leap)
        out[d1] = i
        d2 = step_forward(d1, 7, leap)
        while d2 != d1:
            out[d2] = i
            d1, d2 = d2, step_forward(d2, 7, leap)
        d1 = step_back(pascha, 7 - i, leap)
        if d1 != pascha:
            out[d1] = i
        d2 = step_back(d1, 7, leap)
        while d2 != d1:
            out[d2] = i
            d1, d2 = d2, step_back(d2, 7, leap)
    return dict(sorted(out.items()))
