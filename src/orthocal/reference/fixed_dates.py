"""
orthocal.reference.fixed_dates
------------------------------
Julian (month, day) of every fixed-cycle marker, plus the Christmastide
fast-free days.
"""

from __future__ import annotations

from typing import Tuple

from .markers import FixedDay

FIXED_DATES: Tuple[Tuple[FixedDay, int, int], ...] = (
    (FixedDay.JAN_01, 1, 1),
    (FixedDay.JAN_02, 1, 2),
    (FixedDay.JAN_03, 1, 3),
    (FixedDay.JAN_04, 1, 4),
    (FixedDay.JAN_05, 1, 5),
    (FixedDay.JAN_06, 1, 6),
    (FixedDay.JAN_07, 1, 7),
    (FixedDay.JAN_08, 1, 8),
    (FixedDay.JAN_09, 1, 9),
    (FixedDay.JAN_10, 1, 10),
    (FixedDay.JAN_11, 1, 11),
    (FixedDay.JAN_12, 1, 12),
    (FixedDay.JAN_13, 1, 13),
    (FixedDay.JAN_14, 1, 14),
    (FixedDay.MAR_25, 3, 25),
    (FixedDay.JUN_24, 6, 24),
    (FixedDay.JUN_25, 6, 25),
    (FixedDay.JUN_29, 6, 29),
    (FixedDay.AUG_05, 8, 5),
    (FixedDay.AUG_06, 8, 6),
    (FixedDay.AUG_07, 8, 7),
    (FixedDay.AUG_08, 8, 8),
    (FixedDay.AUG_09, 8, 9),
    (FixedDay.AUG_10, 8, 10),
    (FixedDay.AUG_11, 8, 11),
    (FixedDay.AUG_12, 8, 12),
    (FixedDay.AUG_13, 8, 13),
    (FixedDay.AUG_14, 8, 14),
    (FixedDay.AUG_15, 8, 15),
    (FixedDay.AUG_16, 8, 16),
    (FixedDay.AUG_17, 8, 17),
    (FixedDay.AUG_18, 8, 18),
    (FixedDay.AUG_19, 8, 19),
    (FixedDay.AUG_20, 8, 20),
    (FixedDay.AUG_21, 8, 21),
    (FixedDay.AUG_22, 8, 22),
    (FixedDay.AUG_23, 8, 23),
    (FixedDay.SEP_07, 9, 7),
    (FixedDay.SEP_08, 9, 8),
    (FixedDay.SEP_09, 9, 9),
    (FixedDay.SEP_10, 9, 10),
    (FixedDay.SEP_11, 9, 11),
    (FixedDay.SEP_12, 9, 12),
    (FixedDay.SEP_13, 9, 13),
    (FixedDay.SEP_14, 9, 14),
    (FixedDay.SEP_15, 9, 15),
    (FixedDay.SEP_16, 9, 16),
    (FixedDay.SEP_17, 9, 17),
    (FixedDay.SEP_18, 9, 18),
    (FixedDay.SEP_19, 9, 19),
    (FixedDay.SEP_20, 9, 20),
    (FixedDay.SEP_21, 9, 21),
    (FixedDay.AUG_29, 8, 29),
    (FixedDay.OCT_01, 10, 1),
    (FixedDay.NOV_20, 11, 20),
    (FixedDay.NOV_21, 11, 21),
    (FixedDay.NOV_22, 11, 22),
    (FixedDay.NOV_23, 11, 23),
    (FixedDay.NOV_24, 11, 24),
    (FixedDay.NOV_25, 11, 25),
    (FixedDay.DEC_20, 12, 20),
    (FixedDay.DEC_21, 12, 21),
    (FixedDay.DEC_22, 12, 22),
    (FixedDay.DEC_23, 12, 23),
    (FixedDay.DEC_24, 12, 24),
    (FixedDay.DEC_25, 12, 25),
    (FixedDay.DEC_26, 12, 26),
    (FixedDay.DEC_27, 12, 27),
    (FixedDay.DEC_28, 12, 28),
    (FixedDay.DEC_29, 12, 29),
    (FixedDay.DEC_30, 12, 30),
    (FixedDay.DEC_31, 12, 31),
)

CHRISTMASTIDE: Tuple[Tuple[int, int], ...] = (
    (1, 1), (1, 2), (1, 3), (1, 4),
    (12, 25), (12, 26), (12, 27), (12, 28), (12, 29), (12, 30), (12, 31),
)
