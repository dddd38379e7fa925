from __future__ import annotations
from typing import Any, Dict

from ..core.names import weekday_name
from ..reference.markers import FastPeriod
from ..reference.titles import marker_title
from .registry import register_attribute, record

# weekday of a regular Wednesday/Friday fast
_FAST_WEEKDAYS = (3, 5)

_FAST_FREE = (
    FastPeriod.FAST_FREE_BRIGHT,
    FastPeriod.FAST_FREE_TRINITY,
    FastPeriod.FAST_FREE_CHRISTMASTIDE,
    FastPeriod.FAST_FREE_PUBLICAN,
    FastPeriod.FAST_FREE_CHEESEFARE,
)
_FAST_SEASONS = (
    FastPeriod.GREAT_LENT,
    FastPeriod.APOSTLES_FAST,
    FastPeriod.DORMITION_FAST,
    FastPeriod.NATIVITY_FAST,
)

def weekday(info) -> Dict[str, Any]:
    # Convention: 0=Sun..6=Sat.
    w = info.date.weekday
    return {"weekday": w, "weekday_name": weekday_name(w)}

def tone(info) -> Dict[str, Any]:
    g = record(info).glas
    return {"tone": g if g > 0 else None}

def n50(info) -> Dict[str, Any]:
    n = record(info).n50
    return {"n50": n if n >= 0 else None}

def readings(info) -> Dict[str, Any]:
    r = record(info)
    return {
        "apostol": r.apostol.text or None,
        "gospel": r.evangelie.text or None,
        "gospel_book": r.evangelie.book.name if r.evangelie else None,
    }

def resurrection_gospel(info) -> Dict[str, Any]:
    return {"resurrection_gospel": record(info).matins.text or None}

def fast(info) -> Dict[str, Any]:
    """Fasting season of the day and whether the Wednesday/Friday fast is lifted."""
    markers = set(info.markers)
    season = next((m for m in _FAST_SEASONS if m in markers), None)
    fast_free = any(m in markers for m in _FAST_FREE)
    weekly = info.date.weekday in _FAST_WEEKDAYS and not fast_free
    return {
        "fast_season": marker_title(season) if season is not None else None,
        "fast_free": fast_free,
        "fast_day": season is not None or weekly,
    }

register_attribute("weekday", weekday)
register_attribute("tone", tone)
register_attribute("n50", n50)
register_attribute("readings", readings)
register_attribute("resurrection_gospel", resurrection_gospel)
register_attribute("fast", fast)
