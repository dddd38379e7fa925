"""
orthocal.core.config
--------------------
Reading-indent configuration.

When the span between the Sunday after Theophany and the Sunday of the
Publican is shorter than the regular week sequence, the missing weeks
("winter indent", 1..5 weeks) are filled from a configurable list of week
numbers.  The "spring indent" (autumn side of the Exaltation) has its own
two substitute weeks, and may optionally apply to the Apostol as well.

The flat options form is 17 integers in the order
    w1, w2[0..1], w3[0..2], w4[0..3], w5[0..4], spring[0..1]
followed by the spring_apostol flag.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Sequence, Tuple

from .errors import InvalidConfiguration

MIN_WEEK = 1
MAX_WEEK = 33
OPTIONS_LENGTH = 17


def _check_weeks(name: str, values: Sequence[int], length: int) -> Tuple[int, ...]:
    vals = tuple(values)
    if len(vals) != length:
        raise InvalidConfiguration(f"{name} must hold {length} week numbers, got {len(vals)}")
    for v in vals:
        if isinstance(v, bool) or not isinstance(v, int):
            raise InvalidConfiguration(f"{name}: week number {v!r} is not an integer")
        if not (MIN_WEEK <= v <= MAX_WEEK):
            raise InvalidConfiguration(f"{name}: week number {v} outside {MIN_WEEK}..{MAX_WEEK}")
    return vals


@dataclass(frozen=True)
class IndentConfiguration:
    winter_1: Tuple[int, ...] = (33,)
    winter_2: Tuple[int, ...] = (32, 33)
    winter_3: Tuple[int, ...] = (31, 32, 33)
    winter_4: Tuple[int, ...] = (30, 31, 32, 33)
    winter_5: Tuple[int, ...] = (30, 31, 17, 32, 33)
    spring: Tuple[int, ...] = (10, 11)
    spring_apostol: bool = False

    def __post_init__(self) -> None:
        for k in range(1, 6):
            name = f"winter_{k}"
            object.__setattr__(self, name, _check_weeks(name, getattr(self, name), k))
        object.__setattr__(self, "spring", _check_weeks("spring", self.spring, 2))
        object.__setattr__(self, "spring_apostol", bool(self.spring_apostol))

    def winter(self, weeks: int) -> Tuple[int, ...]:
        """Substitute week list for a winter indent of `weeks` (1..5)."""
        if not 1 <= weeks <= 5:
            raise ValueError("winter indent must be 1..5 weeks")
        return getattr(self, f"winter_{weeks}")

    def with_winter(self, weeks: int, values: Sequence[int]) -> "IndentConfiguration":
        if not 1 <= weeks <= 5:
            raise InvalidConfiguration("winter indent must be 1..5 weeks")
        return replace(self, **{f"winter_{weeks}": tuple(values)})

    def with_spring(self, values: Sequence[int]) -> "IndentConfiguration":
        return replace(self, spring=tuple(values))

    def with_spring_apostol(self, value: bool) -> "IndentConfiguration":
        return replace(self, spring_apostol=bool(value))

    def to_options(self) -> Tuple[List[int], bool]:
        flat: List[int] = []
        for k in range(1, 6):
            flat.extend(self.winter(k))
        flat.extend(self.spring)
        return flat, self.spring_apostol

    @classmethod
    def from_options(cls, values: Sequence[int], spring_apostol: bool = False) -> "IndentConfiguration":
        vals = list(values)
        if len(vals) != OPTIONS_LENGTH:
            raise InvalidConfiguration(f"expected {OPTIONS_LENGTH} week numbers, got {len(vals)}")
        return cls(
            winter_1=tuple(vals[0:1]),
            winter_2=tuple(vals[1:3]),
            winter_3=tuple(vals[3:6]),
            winter_4=tuple(vals[6:10]),
            winter_5=tuple(vals[10:15]),
            spring=tuple(vals[15:17]),
            spring_apostol=spring_apostol,
        )

    def cache_key(self) -> Tuple[int, ...]:
        flat, flag = self.to_options()
        return tuple(flat) + (int(flag),)


DEFAULT_CONFIGURATION = IndentConfiguration()
