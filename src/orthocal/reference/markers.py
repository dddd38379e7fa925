"""
orthocal.reference.markers
--------------------------
Closed enumerations of day markers, one IntEnum per numeric band.

A marker is an opaque small integer; members compare equal to their
values, so sets of markers sort in band order.  Titles live in
orthocal.reference.titles.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Dict, Tuple, Type, Union


class MovableDay(IntEnum):
    """Days of the movable cycle, fixed relative to Pascha."""

    PASCHA = 1
    BRIGHT_MON = 2
    BRIGHT_TUE = 3
    BRIGHT_WED = 4
    BRIGHT_THU = 5
    BRIGHT_FRI = 6
    BRIGHT_SAT = 7
    SUNDAY_2_OF_PASCHA = 8
    PASCHA_WEEK_2_MON = 9
    PASCHA_WEEK_2_TUE = 10
    PASCHA_WEEK_2_WED = 11
    PASCHA_WEEK_2_THU = 12
    PASCHA_WEEK_2_FRI = 13
    PASCHA_WEEK_2_SAT = 14
    SUNDAY_3_OF_PASCHA = 15
    PASCHA_WEEK_3_MON = 16
    PASCHA_WEEK_3_TUE = 17
    PASCHA_WEEK_3_WED = 18
    PASCHA_WEEK_3_THU = 19
    PASCHA_WEEK_3_FRI = 20
    PASCHA_WEEK_3_SAT = 21
    SUNDAY_4_OF_PASCHA = 22
    PASCHA_WEEK_4_MON = 23
    PASCHA_WEEK_4_TUE = 24
    PASCHA_WEEK_4_WED = 25
    PASCHA_WEEK_4_THU = 26
    PASCHA_WEEK_4_FRI = 27
    PASCHA_WEEK_4_SAT = 28
    SUNDAY_5_OF_PASCHA = 29
    PASCHA_WEEK_5_MON = 30
    PASCHA_WEEK_5_TUE = 31
    PASCHA_WEEK_5_WED = 32
    PASCHA_WEEK_5_THU = 33
    PASCHA_WEEK_5_FRI = 34
    PASCHA_WEEK_5_SAT = 35
    SUNDAY_6_OF_PASCHA = 36
    PASCHA_WEEK_6_MON = 37
    PASCHA_WEEK_6_TUE = 38
    PASCHA_WEEK_6_WED = 39
    PASCHA_WEEK_6_THU = 40
    PASCHA_WEEK_6_FRI = 41
    PASCHA_WEEK_6_SAT = 42
    SUNDAY_7_OF_PASCHA = 43
    PASCHA_WEEK_7_MON = 44
    PASCHA_WEEK_7_TUE = 45
    PASCHA_WEEK_7_WED = 46
    PASCHA_WEEK_7_THU = 47
    PASCHA_WEEK_7_FRI = 48
    PASCHA_WEEK_7_SAT = 49
    PENTECOST = 50
    PENTECOST_WEEK_MON = 51
    PENTECOST_WEEK_TUE = 52
    PENTECOST_WEEK_WED = 53
    PENTECOST_WEEK_THU = 54
    PENTECOST_WEEK_FRI = 55
    PENTECOST_WEEK_SAT = 56
    SUNDAY_1_AFTER_PENTECOST = 57
    SUNDAY_2_AFTER_PENTECOST = 58
    SUNDAY_3_AFTER_PENTECOST = 59
    SUNDAY_4_AFTER_PENTECOST = 60
    SAT_BEFORE_EXALTATION = 61
    SUN_BEFORE_EXALTATION = 62
    SAT_AFTER_EXALTATION = 63
    SUN_AFTER_EXALTATION = 64
    FATHERS_OF_SEVENTH_COUNCIL = 65
    DEMETRIUS_SATURDAY = 66
    SUNDAY_OF_FOREFATHERS = 67
    SAT_BEFORE_NATIVITY = 68
    SUN_BEFORE_NATIVITY = 69
    SAT_AFTER_NATIVITY = 70
    SUN_AFTER_NATIVITY = 71
    SUNDAY_OF_PUBLICAN = 72
    SUNDAY_OF_PRODIGAL_SON = 73
    MEATFARE_SATURDAY = 74
    MEATFARE_SUNDAY = 75
    CHEESEFARE_MON = 76
    CHEESEFARE_TUE = 77
    CHEESEFARE_WED = 78
    CHEESEFARE_THU = 79
    CHEESEFARE_FRI = 80
    CHEESEFARE_SAT = 81
    CHEESEFARE_SUNDAY = 82
    LENT_WEEK_1_MON = 83
    LENT_WEEK_1_TUE = 84
    LENT_WEEK_1_WED = 85
    LENT_WEEK_1_THU = 86
    LENT_WEEK_1_FRI = 87
    LENT_WEEK_1_SAT = 88
    LENT_WEEK_2_SUN = 89
    LENT_WEEK_2_MON = 90
    LENT_WEEK_2_TUE = 91
    LENT_WEEK_2_WED = 92
    LENT_WEEK_2_THU = 93
    LENT_WEEK_2_FRI = 94
    LENT_WEEK_2_SAT = 95
    LENT_WEEK_3_SUN = 96
    LENT_WEEK_3_MON = 97
    LENT_WEEK_3_TUE = 98
    LENT_WEEK_3_WED = 99
    LENT_WEEK_3_THU = 100
    LENT_WEEK_3_FRI = 101
    LENT_WEEK_3_SAT = 102
    LENT_WEEK_4_SUN = 103
    LENT_WEEK_4_MON = 104
    LENT_WEEK_4_TUE = 105
    LENT_WEEK_4_WED = 106
    LENT_WEEK_4_THU = 107
    LENT_WEEK_4_FRI = 108
    LENT_WEEK_4_SAT = 109
    LENT_WEEK_5_SUN = 110
    LENT_WEEK_5_MON = 111
    LENT_WEEK_5_TUE = 112
    LENT_WEEK_5_WED = 113
    LENT_WEEK_5_THU = 114
    LENT_WEEK_5_FRI = 115
    LENT_WEEK_5_SAT = 116
    LENT_WEEK_6_SUN = 117
    LENT_WEEK_6_MON = 118
    LENT_WEEK_6_TUE = 119
    LENT_WEEK_6_WED = 120
    LENT_WEEK_6_THU = 121
    LENT_WEEK_6_FRI = 122
    LENT_WEEK_6_SAT = 123
    LENT_WEEK_7_SUN = 124
    LENT_WEEK_7_MON = 125
    LENT_WEEK_7_TUE = 126
    LENT_WEEK_7_WED = 127
    LENT_WEEK_7_THU = 128
    LENT_WEEK_7_FRI = 129
    LENT_WEEK_7_SAT = 130


class FixedDay(IntEnum):
    """Fixed feasts, forefeasts and afterfeasts of the menaion cycle."""

    JAN_01 = 1001
    JAN_02 = 1002
    JAN_03 = 1003
    JAN_04 = 1004
    JAN_05 = 1005
    JAN_06 = 1006
    JAN_07 = 1007
    JAN_08 = 1008
    JAN_09 = 1009
    JAN_10 = 1010
    JAN_11 = 1011
    JAN_12 = 1012
    JAN_13 = 1013
    JAN_14 = 1014
    MAR_25 = 1015
    JUN_24 = 1016
    JUN_25 = 1017
    JUN_29 = 1018
    AUG_05 = 1019
    AUG_06 = 1020
    AUG_07 = 1021
    AUG_08 = 1022
    AUG_09 = 1023
    AUG_10 = 1024
    AUG_11 = 1025
    AUG_12 = 1026
    AUG_13 = 1027
    AUG_14 = 1028
    AUG_15 = 1029
    AUG_16 = 1030
    AUG_17 = 1031
    AUG_18 = 1032
    AUG_19 = 1033
    AUG_20 = 1034
    AUG_21 = 1035
    AUG_22 = 1036
    AUG_23 = 1037
    SEP_07 = 1038
    SEP_08 = 1039
    SEP_09 = 1040
    SEP_10 = 1041
    SEP_11 = 1042
    SEP_12 = 1043
    SEP_13 = 1044
    SEP_14 = 1045
    SEP_15 = 1046
    SEP_16 = 1047
    SEP_17 = 1048
    SEP_18 = 1049
    SEP_19 = 1050
    SEP_20 = 1051
    SEP_21 = 1052
    AUG_29 = 1053
    OCT_01 = 1054
    NOV_20 = 1055
    NOV_21 = 1056
    NOV_22 = 1057
    NOV_23 = 1058
    NOV_24 = 1059
    NOV_25 = 1060
    DEC_20 = 1061
    DEC_21 = 1062
    DEC_22 = 1063
    DEC_23 = 1064
    DEC_24 = 1065
    DEC_25 = 1066
    DEC_26 = 1067
    DEC_27 = 1068
    DEC_28 = 1069
    DEC_29 = 1070
    DEC_30 = 1071
    DEC_31 = 1072


class DerivedDay(IntEnum):
    """Days placed by weekday-seeking and collision rules."""

    SAT_BEFORE_THEOPHANY = 2001
    SUN_BEFORE_THEOPHANY = 2002
    SAT_AFTER_THEOPHANY = 2003
    SUN_AFTER_THEOPHANY = 2004
    NEW_MARTYRS_OF_RUSSIA = 2005
    THREE_HIERARCHS = 2006
    MEETING_FOREFEAST = 2007
    MEETING_OF_THE_LORD = 2008
    MEETING_AFTERFEAST_1 = 2009
    MEETING_AFTERFEAST_2 = 2010
    MEETING_AFTERFEAST_3 = 2011
    MEETING_AFTERFEAST_4 = 2012
    MEETING_AFTERFEAST_5 = 2013
    MEETING_AFTERFEAST_6 = 2014
    MEETING_LEAVETAKING = 2015
    FIRST_SECOND_FINDING_OF_HEAD = 2016
    FORTY_MARTYRS = 2017
    ANNUNCIATION_FOREFEAST = 2018
    ANNUNCIATION_LEAVETAKING = 2019
    GEORGE_THE_VICTORIOUS = 2020
    THIRD_FINDING_OF_HEAD = 2021
    FATHERS_OF_SIX_COUNCILS = 2022
    THEODORE_TYRO = 2023
    GREGORY_PALAMAS = 2024
    JOHN_CLIMACUS = 2025
    MARY_OF_EGYPT = 2026
    SAT_AFTER_NATIVITY_READINGS = 2027
    SUN_AFTER_NATIVITY_READINGS = 2028
    SAT_BEFORE_THEOPHANY_READINGS = 2029
    SUN_BEFORE_THEOPHANY_READINGS = 2030
    RIGHTEOUS_GODFATHERS = 2031
    ALL_SAINTS_OF_RUSSIA = 2032


class FeastRank(IntEnum):
    """Classification tags attached to other markers' dates."""

    TWELVE_GREAT_MOVABLE = 3001
    TWELVE_GREAT_FIXED = 3002
    GREAT_FEAST = 3003


class FastPeriod(IntEnum):
    """Fasting seasons and fast-free weeks."""

    GREAT_LENT = 4001
    APOSTLES_FAST = 4002
    DORMITION_FAST = 4003
    NATIVITY_FAST = 4004
    FAST_FREE_CHRISTMASTIDE = 4005
    FAST_FREE_PUBLICAN = 4006
    FAST_FREE_CHEESEFARE = 4007
    FAST_FREE_BRIGHT = 4008
    FAST_FREE_TRINITY = 4009


class TheotokosIcon(IntEnum):
    """Movable commemorations of icons of the Theotokos."""

    ICON_01 = 5001
    ICON_02 = 5002
    ICON_03 = 5003
    ICON_04 = 5004
    ICON_05 = 5005
    ICON_06 = 5006
    ICON_07 = 5007
    ICON_08 = 5008
    ICON_09 = 5009
    ICON_10 = 5010
    ICON_11 = 5011
    ICON_12 = 5012
    ICON_13 = 5013
    ICON_14 = 5014
    ICON_15 = 5015
    ICON_16 = 5016
    ICON_17 = 5017
    ICON_18 = 5018
    ICON_19 = 5019
    ICON_20 = 5020
    ICON_21 = 5021
    ICON_22 = 5022
    ICON_23 = 5023
    ICON_24 = 5024
    ICON_25 = 5025


class SaintDay(IntEnum):
    """Movable commemorations of saints and synaxes."""

    VALAAM_FATHERS = 6001
    VARLAAM_OF_KHUTYN = 6002
    PETER_AND_FEVRONIA_RELICS = 6003
    UNMERCENARIES = 6004
    TVER_SAINTS = 6005
    KUZBASS_SAINTS = 6006
    PACHOMIUS_OF_KENSK = 6007
    SHIO_OF_MGVIME = 6008
    DAVID_GAREJA_MARTYRS = 6009
    CHRISTODULUS_AND_ANASTASIA = 6010
    JOSEPH_OF_ARIMATHEA = 6011
    TAMAR_OF_GEORGIA = 6012
    ABRAHAM_OF_BULGARIA_RELICS = 6013
    TABITHA = 6014
    FEREYDAN_MARTYRS = 6015
    DODO_OF_GAREJA = 6016
    DAVID_OF_GAREJA = 6017
    SOKOLOVSK_FATHERS = 6018
    ARSENIUS_OF_TVER = 6019
    LIPSI_MARTYRS = 6020
    ALTAI_SAINTS = 6021
    ATHONITE_FATHERS = 6022
    BELARUSIAN_SAINTS = 6023
    VOLOGDA_SAINTS = 6024
    NOVGOROD_SAINTS = 6025
    PSKOV_SAINTS = 6026
    PETERSBURG_SAINTS = 6027
    UDMURT_SAINTS = 6028
    VOLGOGRAD_SAINTS = 6029
    IBERIAN_SAINTS = 6030
    KUBAN_SAINTS = 6031
    CHELYABINSK_SAINTS = 6032
    MOSCOW_SAINTS = 6033
    NIZHNY_NOVGOROD_SAINTS = 6034
    SARATOV_SAINTS = 6035
    BUTOVO_MARTYRS = 6036
    KAZAKHSTAN_MARTYRS = 6037
    KARELIAN_MARTYRS = 6038
    PERM_SAINTS = 6039
    PSKOV_CAVES_FATHERS = 6040
    SINAI_FATHERS = 6041
    KHOLM_MARTYRS = 6042
    ALL_VENERABLE_FATHERS = 6043
    KIEV_CAVES_FATHERS = 6044
    SMOLENSK_SAINTS = 6045
    ALANIAN_SAINTS = 6046
    GERMAN_LANDS_SAINTS = 6047


Marker = Union[MovableDay, FixedDay, DerivedDay, FeastRank, FastPeriod, TheotokosIcon, SaintDay]

MARKER_TYPES: Tuple[Type[IntEnum], ...] = (
    MovableDay,
    FixedDay,
    DerivedDay,
    FeastRank,
    FastPeriod,
    TheotokosIcon,
    SaintDay,
)

_BY_VALUE: Dict[int, Marker] = {int(m): m for cls in MARKER_TYPES for m in cls}


def to_marker(value: int) -> Marker:
    """Map a raw integer onto its enum member; ValueError if no band holds it."""
    try:
        return _BY_VALUE[int(value)]
    except KeyError:
        raise ValueError(f"Unknown marker value {value!r}") from None


def all_markers() -> Tuple[Marker, ...]:
    return tuple(_BY_VALUE[v] for v in sorted(_BY_VALUE))


def marker_name(m: int) -> str:
    """Qualified name such as 'MovableDay.PASCHA'."""
    mk = to_marker(m)
    return f"{type(mk).__name__}.{mk.name}"


def parse_marker(text: str) -> Marker:
    """Accept 'PASCHA', 'MovableDay.PASCHA' or a decimal value."""
    s = text.strip()
    if s.isdigit():
        return to_marker(int(s))
    if "." in s:
        cls_name, _, name = s.partition(".")
        for cls in MARKER_TYPES:
            if cls.__name__ == cls_name:
                try:
                    return cls[name.upper()]
                except KeyError:
                    break
        raise ValueError(f"Unknown marker {text!r}")
    key = s.upper()
    for cls in MARKER_TYPES:
        if key in cls.__members__:
            return cls[key]
    raise ValueError(f"Unknown marker {text!r}")
