"""Russian month and weekday names used by date formatting."""

from __future__ import annotations

_MONTHS_GENITIVE = (
    "Января", "Февраля", "Марта", "Апреля", "Мая", "Июня",
    "Июля", "Августа", "Сентября", "Октября", "Ноября", "Декабря",
)

_MONTHS_NOMINATIVE = (
    "Январь", "Февраль", "Март", "Апрель", "Май", "Июнь",
    "Июль", "Август", "Сентябрь", "Октябрь", "Ноябрь", "Декабрь",
)

_MONTHS_SHORT = (
    "янв", "фев", "мар", "апр", "мая", "июн",
    "июл", "авг", "сен", "окт", "ноя", "дек",
)

_WEEKDAYS = ("Воскресенье", "Понедельник", "Вторник", "Среда", "Четверг", "Пятница", "Суббота")
_WEEKDAYS_SHORT = ("Вс", "Пн", "Вт", "Ср", "Чт", "Пт", "Сб")


def month_name(m: int, genitive: bool = True) -> str:
    """Month name; '' for a month outside 1..12."""
    if not 1 <= m <= 12:
        return ""
    return (_MONTHS_GENITIVE if genitive else _MONTHS_NOMINATIVE)[m - 1]


def month_short_name(m: int) -> str:
    return _MONTHS_SHORT[m - 1] if 1 <= m <= 12 else ""


def weekday_name(w: int) -> str:
    """Weekday name, 0 = Sunday; '' outside 0..6."""
    return _WEEKDAYS[w] if 0 <= w <= 6 else ""


def weekday_short_name(w: int) -> str:
    return _WEEKDAYS_SHORT[w] if 0 <= w <= 6 else ""
