"""Diagnostics package.

- pascha_table: Pascha dates in the three calendars over a year range
- pascha_scatter: plot of Pascha dates (optional numpy + matplotlib extras)
- round_trip: randomized date conversion checks across calendar kinds
"""

__all__ = ["pascha_table", "pascha_scatter", "round_trip"]
