from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Dict, Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .date import CalendarDate


class CalendarKind(Enum):
    JULIAN = "J"
    MILANKOVIC = "M"
    GREGORIAN = "G"

    @property
    def prefix(self) -> str:
        return self.value

    @classmethod
    def coerce(cls, v: Any) -> "CalendarKind":
        """Accept a member, its prefix letter, or its name in any case."""
        if isinstance(v, cls):
            return v
        s = str(v).strip()
        if s.upper() in cls.__members__:
            return cls[s.upper()]
        for k in cls:
            if k.value == s.upper():
                return k
        raise ValueError(f"Unknown calendar kind {v!r}; expected one of J, M, G")


JULIAN = CalendarKind.JULIAN
MILANKOVIC = CalendarKind.MILANKOVIC
GREGORIAN = CalendarKind.GREGORIAN


class Book(IntEnum):
    APOSTOL = 1
    MATTHEW = 2
    MARK = 3
    LUKE = 4
    JOHN = 5


@dataclass(frozen=True)
class Reading:
    """A liturgy reading: code = (pericope << 4) | book; code 0 means none."""
    code: int = 0
    text: str = ""

    @property
    def book(self) -> Optional[Book]:
        return Book(self.code & 0xF) if self.code else None

    @property
    def pericope(self) -> int:
        return self.code >> 4

    def __bool__(self) -> bool:
        return self.code != 0

    def __str__(self) -> str:
        return self.text


EMPTY_READING = Reading()


@dataclass(frozen=True)
class DayRecord:
    weekday: int
    glas: int = -1
    n50: int = -1
    apostol: Reading = EMPTY_READING
    evangelie: Reading = EMPTY_READING
    matins: Reading = EMPTY_READING
    markers: Tuple[int, ...] = ()


@dataclass(frozen=True)
class DayInfo:
    date: "CalendarDate"
    markers: Tuple[int, ...] = ()
    titles: Tuple[str, ...] = ()
    record: Optional[DayRecord] = None
    attributes: Optional[Dict[str, Any]] = None
