"""
orthocal.core.date
------------------
Tri-calendar date engine.

A CalendarDate owns one Chronological Julian Day Number (CJDN) and the
three (year, month, day) triples it maps to in the Julian, New-Julian
(Milankovic) and Gregorian calendars.  Conversions follow L. Strous'
integer formulas (https://aa.quae.nl/en/reken/juliaansedag.html) and are
exact for arbitrarily large years.
"""

from __future__ import annotations

from functools import total_ordering
from typing import Any, Optional, Tuple

from .bigyear import MIN_YEAR_VALUE, YearLike, fdiv, is_leap_year, month_length, pdiv, string_to_big_int
from .errors import InvalidDate, OrthocalError
from .names import month_name, month_short_name, weekday_name, weekday_short_name
from .types import CalendarKind

EMPTY_CJDN = -1
MIN_CJDN_VALUE = 1721791

DEFAULT_FORMAT = "%Jd %JM %JY г."

YMD = Tuple[int, int, int]


# ============================================================
# Strous conversions
# ============================================================

def gregorian_to_cjdn(y: int, m: int, d: int) -> int:
    c0 = fdiv(m - 3, 12)
    x1 = m - 12 * c0 - 3
    x3, x2 = pdiv(y + c0, 100)
    return (
        d + 1721119
        + fdiv(146097 * x3, 4)
        + fdiv(36525 * x2, 100)
        + fdiv(153 * x1 + 2, 5)
    )


def julian_to_cjdn(y: int, m: int, d: int) -> int:
    c0 = fdiv(m - 3, 12)
    j1 = fdiv(1461 * (y + c0), 4)
    j2 = fdiv(153 * m - 1836 * c0 - 457, 5)
    return j1 + j2 + d + 1721117


def milankovic_to_cjdn(y: int, m: int, d: int) -> int:
    c0 = fdiv(m - 3, 12)
    x4 = y + c0
    x3 = fdiv(x4, 100)
    x2 = x4 % 100
    x1 = m - 12 * c0 - 3
    return (
        d + 1721119
        + fdiv(328718 * x3 + 6, 9)
        + fdiv(36525 * x2, 100)
        + fdiv(153 * x1 + 2, 5)
    )


def cjdn_to_gregorian(n: int) -> YMD:
    x3, r3 = pdiv(4 * n - 6884477, 146097)
    x2, r2 = pdiv(100 * fdiv(r3, 4) + 99, 36525)
    x1, r1 = pdiv(5 * fdiv(r2, 100) + 2, 153)
    c0 = fdiv(x1 + 2, 12)
    return x3 * 100 + x2 + c0, x1 - 12 * c0 + 3, fdiv(r1, 5) + 1


def cjdn_to_julian(n: int) -> YMD:
    k2 = 4 * (n - 1721118) + 3
    k1 = 5 * fdiv(k2 % 1461, 4) + 2
    x1 = fdiv(k1, 153)
    c0 = fdiv(x1 + 2, 12)
    return fdiv(k2, 1461) + c0, x1 - 12 * c0 + 3, fdiv(k1 % 153, 5) + 1


def cjdn_to_milankovic(n: int) -> YMD:
    k3 = 9 * (n - 1721120) + 2
    x3 = fdiv(k3, 328718)
    k2 = 100 * fdiv(k3 % 328718, 9) + 99
    x2 = fdiv(k2, 36525)
    k1 = 5 * fdiv(k2 % 36525, 100) + 2
    x1 = fdiv(k1, 153)
    c0 = fdiv(x1 + 2, 12)
    return x3 * 100 + x2 + c0, x1 - 12 * c0 + 3, fdiv(k1 % 153, 5) + 1


_TO_CJDN = {
    CalendarKind.JULIAN: julian_to_cjdn,
    CalendarKind.MILANKOVIC: milankovic_to_cjdn,
    CalendarKind.GREGORIAN: gregorian_to_cjdn,
}


def _triples(n: int) -> Optional[Tuple[YMD, YMD, YMD]]:
    if n < MIN_CJDN_VALUE:
        return None
    j = cjdn_to_julian(n)
    g = cjdn_to_gregorian(n)
    m = cjdn_to_milankovic(n)
    if j[0] < MIN_YEAR_VALUE or g[0] < MIN_YEAR_VALUE or m[0] < MIN_YEAR_VALUE:
        return None
    return j, g, m


# ============================================================
# CalendarDate
# ============================================================

@total_ordering
class CalendarDate:
    """
    Immutable calendar date.

    CalendarDate(year, month, day, kind) validates its input and raises
    InvalidDate; CalendarDate.from_cjdn(n) does the same for a day count.
    CalendarDate.empty() is the falsy sentinel returned by failed
    arithmetic.  Equality, ordering and hashing follow the CJDN.
    """

    __slots__ = ("_cjdn", "_julian", "_gregorian", "_milankovic")

    def __init__(self, year: YearLike, month: int, day: int, kind: Any = CalendarKind.JULIAN):
        kind = CalendarKind.coerce(kind)
        try:
            y = string_to_big_int(year)
        except OrthocalError:
            raise InvalidDate(f"invalid date '{year}.{month}.{day}'") from None
        if not (1 <= month <= 12) or y < MIN_YEAR_VALUE:
            raise InvalidDate(f"invalid date '{year}.{month}.{day}'")
        if day < 1 or day > month_length(month, is_leap_year(y, kind)):
            raise InvalidDate(f"invalid date '{year}.{month}.{day}'")
        n = _TO_CJDN[kind](y, month, day)
        tr = _triples(n)
        if tr is None:
            raise InvalidDate(f"invalid date '{year}.{month}.{day}'")
        self._set(n, tr)

    def _set(self, n: int, tr: Optional[Tuple[YMD, YMD, YMD]]) -> None:
        object.__setattr__(self, "_cjdn", n)
        if tr is None:
            tr = ((0, 0, 0),) * 3
        object.__setattr__(self, "_julian", tr[0])
        object.__setattr__(self, "_gregorian", tr[1])
        object.__setattr__(self, "_milankovic", tr[2])

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("CalendarDate is immutable")

    @classmethod
    def from_cjdn(cls, n: int) -> "CalendarDate":
        tr = _triples(int(n))
        if tr is None:
            raise InvalidDate(f"invalid date : cjdn = {n}")
        obj = cls.__new__(cls)
        obj._set(int(n), tr)
        return obj

    @classmethod
    def empty(cls) -> "CalendarDate":
        obj = cls.__new__(cls)
        obj._set(EMPTY_CJDN, None)
        return obj

    @staticmethod
    def check(year: YearLike, month: int, day: int, kind: Any = CalendarKind.JULIAN) -> bool:
        try:
            CalendarDate(year, month, day, kind)
        except InvalidDate:
            return False
        return True

    # ----- accessors -----

    @property
    def cjdn(self) -> int:
        return self._cjdn

    def is_valid(self) -> bool:
        return self._cjdn != EMPTY_CJDN

    def __bool__(self) -> bool:
        return self.is_valid()

    def ymd(self, kind: Any = CalendarKind.JULIAN) -> YMD:
        kind = CalendarKind.coerce(kind)
        if kind is CalendarKind.JULIAN:
            return self._julian
        if kind is CalendarKind.GREGORIAN:
            return self._gregorian
        return self._milankovic

    def year(self, kind: Any = CalendarKind.JULIAN) -> int:
        return self.ymd(kind)[0]

    def month(self, kind: Any = CalendarKind.JULIAN) -> int:
        return self.ymd(kind)[1]

    def day(self, kind: Any = CalendarKind.JULIAN) -> int:
        return self.ymd(kind)[2]

    @property
    def weekday(self) -> int:
        """0 = Sunday .. 6 = Saturday; -1 for the empty date."""
        if not self.is_valid():
            return -1
        return (self._cjdn + 1) % 7

    # ----- arithmetic -----

    def inc_by_days(self, n: int) -> "CalendarDate":
        """Date n days later, or the empty date when that leaves the valid range."""
        if not self.is_valid():
            return CalendarDate.empty()
        tr = _triples(self._cjdn + n)
        obj = CalendarDate.__new__(CalendarDate)
        obj._set(self._cjdn + n if tr is not None else EMPTY_CJDN, tr)
        return obj

    def dec_by_days(self, n: int) -> "CalendarDate":
        return self.inc_by_days(-n)

    # ----- comparisons -----

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._cjdn == other._cjdn

    def __lt__(self, other: "CalendarDate") -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._cjdn < other._cjdn

    def __hash__(self) -> int:
        return hash(self._cjdn)

    def __repr__(self) -> str:
        if not self.is_valid():
            return "CalendarDate.empty()"
        y, m, d = self._julian
        gy, gm, gd = self._gregorian
        return f"CalendarDate(J {y}-{m:02d}-{d:02d} / G {gy}-{gm:02d}-{gd:02d})"

    def __str__(self) -> str:
        return self.format()

    # ----- formatting -----

    def _token(self, c: str) -> str:
        if c == "%%":
            return "%"
        if c == "wd":
            return str(self.weekday)
        if c == "WD":
            return weekday_name(self.weekday)
        if c == "Wd":
            return weekday_short_name(self.weekday)
        try:
            kind = CalendarKind(c[0])
        except ValueError:
            return "%" + c
        if self.is_valid():
            y, m, d = self.ymd(kind)
            ys, ms, ds = str(y), str(m), str(d)
        else:
            y = m = d = 0
            ys = ms = ds = ""
        t = c[1]
        if t == "Y":
            return ys
        if t == "q":
            return ms
        if t == "d":
            return ds
        if t == "y":
            return ys if len(ys) < 3 else ys[-2:]
        if t == "M":
            return month_name(m) if ms else ms
        if t == "F":
            return month_name(m, genitive=False) if ms else ms
        if t == "m":
            return month_short_name(m) if ms else ms
        if t == "Q":
            return "0" + ms if len(ms) == 1 else ms
        if t == "D":
            return "0" + ds if len(ds) == 1 else ds
        return "%" + c

    def format(self, fmt: str = DEFAULT_FORMAT) -> str:
        """
        Substitute %XY tokens: %% ; %JY %Jy %Jq %JQ %Jd %JD %JM %JF %Jm (and the
        same with G/M prefixes) ; %wd %WD %Wd.  Unknown tokens are copied as-is.
        """
        if len(fmt) < 3:
            return fmt
        pos = fmt.find("%")
        while pos != -1:
            if pos >= len(fmt) - 2:
                return fmt
            repl = self._token(fmt[pos + 1:pos + 3])
            fmt = fmt[:pos] + repl + fmt[pos + 3:]
            pos = fmt.find("%", pos + len(repl))
        return fmt
