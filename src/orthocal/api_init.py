"""Default calendar bootstrap (import side-effect)."""
from .api import set_default_calendar
from .calendar import OrthodoxCalendar
from .attributes import standard as _standard  # noqa: F401  (registers attributes)

set_default_calendar(OrthodoxCalendar())
