"""
orthocal.engines.marker_index
-----------------------------
Two-way index between the days of one liturgical year and their markers.

Both directions are kept in step by every mutation:
  date   -> sorted set of markers (at most MAX_MARKERS_PER_DAY)
  marker -> sorted list of dates
"""

from __future__ import annotations

from bisect import insort
from typing import Dict, Iterable, List, Optional, Set, Tuple

from ..core.errors import InvariantViolation
from .paschalion import ShortDate

MAX_MARKERS_PER_DAY = 12


class MarkerIndex:
    def __init__(self, days: Iterable[ShortDate]):
        self._by_date: Dict[ShortDate, Set[int]] = {d: set() for d in days}
        self._by_marker: Dict[int, List[ShortDate]] = {}

    def __contains__(self, date: ShortDate) -> bool:
        return date in self._by_date

    def __len__(self) -> int:
        return len(self._by_date)

    def add(self, date: ShortDate, *markers: int) -> None:
        slot = self._by_date.get(date)
        if slot is None:
            raise InvariantViolation(f"date {date} is not part of the year")
        for m in markers:
            if m in slot:
                raise InvariantViolation(f"marker {int(m)} already set on {date}")
            if len(slot) >= MAX_MARKERS_PER_DAY:
                raise InvariantViolation(f"more than {MAX_MARKERS_PER_DAY} markers on {date}")
            slot.add(m)
            insort(self._by_marker.setdefault(m, []), date)

    def remove(self, date: ShortDate, marker: int) -> None:
        slot = self._by_date.get(date)
        if slot is None or marker not in slot:
            raise InvariantViolation(f"marker {int(marker)} is not set on {date}")
        slot.discard(marker)
        dates = self._by_marker[marker]
        dates.remove(date)
        if not dates:
            del self._by_marker[marker]

    def has(self, date: ShortDate, marker: int) -> bool:
        slot = self._by_date.get(date)
        return slot is not None and marker in slot

    def markers_for(self, date: ShortDate) -> Tuple[int, ...]:
        return tuple(sorted(self._by_date.get(date, ())))

    def dates_for(self, marker: int) -> List[ShortDate]:
        return list(self._by_marker.get(marker, ()))

    def first_date(self, marker: int) -> Optional[ShortDate]:
        dates = self._by_marker.get(marker)
        return dates[0] if dates else None

    def dates(self) -> List[ShortDate]:
        return sorted(self._by_date)

    def check(self) -> None:
        """Raise InvariantViolation unless both directions describe the same pairs."""
        forward = {(d, m) for d, ms in self._by_date.items() for m in ms}
        backward = {(d, m) for m, ds in self._by_marker.items() for d in ds}
        if forward != backward:
            raise InvariantViolation("marker index directions disagree")
        for m, ds in self._by_marker.items():
            if len(ds) != len(set(ds)):
                raise InvariantViolation(f"marker {int(m)} listed twice on one date")
