"""
orthocal.reference.titles
-------------------------
Church Slavonic/Russian titles for every day marker.
"""

from __future__ import annotations

from typing import Dict, Optional

from .markers import (
    DerivedDay,
    FastPeriod,
    FeastRank,
    FixedDay,
    Marker,
    MovableDay,
    SaintDay,
    TheotokosIcon,
)

TITLES: Dict[Marker, str] = {
    MovableDay.PASCHA: "Светлое Христово Воскресение. ПАСХА.",
    MovableDay.BRIGHT_MON: "Понедельник Светлой седмицы.",
    MovableDay.BRIGHT_TUE: "Вторник Светлой седмицы.",
    MovableDay.BRIGHT_WED: "Среда Светлой седмицы.",
    MovableDay.BRIGHT_THU: "Четверг Светлой седмицы.",
    MovableDay.BRIGHT_FRI: "Пятница Светлой седмицы.",
    MovableDay.BRIGHT_SAT: "Суббота Светлой седмицы.",
    MovableDay.SUNDAY_2_OF_PASCHA: "Неделя 2-я по Пасхе, апостола Фомы́. Антипасха.",
    MovableDay.PASCHA_WEEK_2_MON: "Понедельник 2-й седмицы по Пасхе.",
    MovableDay.PASCHA_WEEK_2_TUE: "Вторник 2-й седмицы по Пасхе. Ра́доница. Поминовение усопших.",
    MovableDay.PASCHA_WEEK_2_WED: "Среда 2-й седмицы по Пасхе.",
    MovableDay.PASCHA_WEEK_2_THU: "Четверг 2-й седмицы по Пасхе.",
    MovableDay.PASCHA_WEEK_2_FRI: "Пятница 2-й седмицы по Пасхе.",
    MovableDay.PASCHA_WEEK_2_SAT: "Суббота 2-й седмицы по Пасхе.",
    MovableDay.SUNDAY_3_OF_PASCHA: "Неделя 3-я по Пасхе, святых жен-мироносиц: Марии Магдалины, Марии Клеоповой, Саломии, Иоанны, Марфы и Марии, Сусанны и иных.",
    MovableDay.PASCHA_WEEK_3_MON: "Понедельник 3-й седмицы по Пасхе.",
    MovableDay.PASCHA_WEEK_3_TUE: "Вторник 3-й седмицы по Пасхе.",
    MovableDay.PASCHA_WEEK_3_WED: "Среда 3-й седмицы по Пасхе.",
    MovableDay.PASCHA_WEEK_3_THU: "Четверг 3-й седмицы по Пасхе.",
    MovableDay.PASCHA_WEEK_3_FRI: "Пятница 3-й седмицы по Пасхе.",
    MovableDay.PASCHA_WEEK_3_SAT: "Суббота 3-й седмицы по Пасхе.",
    MovableDay.SUNDAY_4_OF_PASCHA: "Неделя 4-я по Пасхе, о расслабленном.",
    MovableDay.PASCHA_WEEK_4_MON: "Понедельник 4-й седмицы по Пасхе.",
    MovableDay.PASCHA_WEEK_4_TUE: "Вторник 4-й седмицы по Пасхе.",
    MovableDay.PASCHA_WEEK_4_WED: "Среда 4-й седмицы по Пасхе. Преполове́ние Пятидесятницы.",
    MovableDay.PASCHA_WEEK_4_THU: "Четверг 4-й седмицы по Пасхе.",
    MovableDay.PASCHA_WEEK_4_FRI: "Пятница 4-й седмицы по Пасхе.",
    MovableDay.PASCHA_WEEK_4_SAT: "Суббота 4-й седмицы по Пасхе.",
    MovableDay.SUNDAY_5_OF_PASCHA: "Неделя 5-я по Пасхе, о самаряны́не.",
    MovableDay.PASCHA_WEEK_5_MON: "Понедельник 5-й седмицы по Пасхе.",
    MovableDay.PASCHA_WEEK_5_TUE: "Вторник 5-й седмицы по Пасхе.",
    MovableDay.PASCHA_WEEK_5_WED: "Среда 5-й седмицы по Пасхе. Отдание праздника Преполовения Пятидесятницы.",
    MovableDay.PASCHA_WEEK_5_THU: "Четверг 5-й седмицы по Пасхе.",
    MovableDay.PASCHA_WEEK_5_FRI: "Пятница 5-й седмицы по Пасхе.",
    MovableDay.PASCHA_WEEK_5_SAT: "Суббота 5-й седмицы по Пасхе.",
    MovableDay.SUNDAY_6_OF_PASCHA: "Неделя 6-я по Пасхе, о слепом.",
    MovableDay.PASCHA_WEEK_6_MON: "Понедельник 6-й седмицы по Пасхе.",
    MovableDay.PASCHA_WEEK_6_TUE: "Вторник 6-й седмицы по Пасхе.",
    MovableDay.PASCHA_WEEK_6_WED: "Среда 6-й седмицы по Пасхе. Отдание праздника Пасхи. Предпразднство Вознесения.",
    MovableDay.PASCHA_WEEK_6_THU: "Четверг 6-й седмицы по Пасхе. Вознесе́ние Госпо́дне.",
    MovableDay.PASCHA_WEEK_6_FRI: "Пятница 6-й седмицы по Пасхе. Попразднство Вознесения.",
    MovableDay.PASCHA_WEEK_6_SAT: "Суббота 6-й седмицы по Пасхе. Попразднство Вознесения.",
    MovableDay.SUNDAY_7_OF_PASCHA: "Неделя 7-я по Пасхе. Попразднство Вознесения. Святых отцов Первого Вселенского Собора.",
    MovableDay.PASCHA_WEEK_7_MON: "Понедельник 7-й седмицы по Пасхе. Попразднство Вознесения.",
    MovableDay.PASCHA_WEEK_7_TUE: "Вторник 7-й седмицы по Пасхе. Попразднство Вознесения.",
    MovableDay.PASCHA_WEEK_7_WED: "Среда 7-й седмицы по Пасхе. Попразднство Вознесения.",
    MovableDay.PASCHA_WEEK_7_THU: "Четверг 7-й седмицы по Пасхе. Попразднство Вознесения.",
    MovableDay.PASCHA_WEEK_7_FRI: "Пятница 7-й седмицы по Пасхе. Отдание праздника Вознесения Господня.",
    MovableDay.PASCHA_WEEK_7_SAT: "Суббота 7-й седмицы по Пасхе. Троицкая родительская суббота.",
    MovableDay.PENTECOST: "Неделя 8-я по Пасхе. День Святой Тро́ицы. Пятидеся́тница.",
    MovableDay.PENTECOST_WEEK_MON: "Понедельник Пятидесятницы. День Святаго Духа.",
    MovableDay.PENTECOST_WEEK_TUE: "Вторник Пятидесятницы.",
    MovableDay.PENTECOST_WEEK_WED: "Среда Пятидесятницы.",
    MovableDay.PENTECOST_WEEK_THU: "Четверг Пятидесятницы.",
    MovableDay.PENTECOST_WEEK_FRI: "Пятница Пятидесятницы.",
    MovableDay.PENTECOST_WEEK_SAT: "Суббота Пятидесятницы. Отдание праздника Пятидесятницы.",
    MovableDay.SUNDAY_1_AFTER_PENTECOST: "Неделя 1-я по Пятидесятнице, Всех святых.",
    MovableDay.SUNDAY_2_AFTER_PENTECOST: "Неделя 2-я по Пятидесятнице, Всех святых, в земле Русской просиявших.",
    MovableDay.SUNDAY_3_AFTER_PENTECOST: "Неделя 3-я по Пятидесятнице.",
    MovableDay.SUNDAY_4_AFTER_PENTECOST: "Неделя 4-я по Пятидесятнице.",
    MovableDay.SAT_BEFORE_EXALTATION: "Суббота пред Воздвижением.",
    MovableDay.SUN_BEFORE_EXALTATION: "Неделя пред Воздвижением.",
    MovableDay.SAT_AFTER_EXALTATION: "Суббота по Воздвижении.",
    MovableDay.SUN_AFTER_EXALTATION: "Неделя по Воздвижении.",
    MovableDay.FATHERS_OF_SEVENTH_COUNCIL: "Память святых отцов VII Вселенского Собора.",
    MovableDay.DEMETRIUS_SATURDAY: "Димитриевская родительская суббота.",
    MovableDay.SUNDAY_OF_FOREFATHERS: "Неделя святых пра́отец.",
    MovableDay.SAT_BEFORE_NATIVITY: "Суббота пред Рождеством Христовым.",
    MovableDay.SUN_BEFORE_NATIVITY: "Неделя пред Рождеством Христовым, святых отец.",
    MovableDay.SAT_AFTER_NATIVITY: "Суббота по Рождестве Христовом.",
    MovableDay.SUN_AFTER_NATIVITY: "Неделя по Рождестве Христовом.",
    MovableDay.SUNDAY_OF_PUBLICAN: "Неделя о мытаре́ и фарисе́е.",
    MovableDay.SUNDAY_OF_PRODIGAL_SON: "Неделя о блудном сыне.",
    MovableDay.MEATFARE_SATURDAY: "Суббота мясопу́стная. Вселенская родительская суббота.",
    MovableDay.MEATFARE_SUNDAY: "Неделя мясопу́стная, о Страшном Суде.",
    MovableDay.CHEESEFARE_MON: "Понедельник сырный.",
    MovableDay.CHEESEFARE_TUE: "Вторник сырный.",
    MovableDay.CHEESEFARE_WED: "Среда сырная.",
    MovableDay.CHEESEFARE_THU: "Четверг сырный.",
    MovableDay.CHEESEFARE_FRI: "Пятница сырная.",
    MovableDay.CHEESEFARE_SAT: "Суббота сырная.",
    MovableDay.CHEESEFARE_SUNDAY: "Неделя сыропустная. Воспоминание Адамова изгнания. Прощеное воскресенье.",
    MovableDay.LENT_WEEK_1_MON: "Понедельник 1-й седмицы. Начало Великого поста.",
    MovableDay.LENT_WEEK_1_TUE: "Вторник 1-й седмицы великого поста.",
    MovableDay.LENT_WEEK_1_WED: "Среда 1-й седмицы великого поста.",
    MovableDay.LENT_WEEK_1_THU: "Четверг 1-й седмицы великого поста.",
    MovableDay.LENT_WEEK_1_FRI: "Пятница 1-й седмицы великого поста.",
    MovableDay.LENT_WEEK_1_SAT: "Суббота 1-й седмицы великого поста.",
    MovableDay.LENT_WEEK_2_SUN: "Неделя 1-я Великого поста. Торжество Православия.",
    MovableDay.LENT_WEEK_2_MON: "Понедельник 2-й седмицы великого поста.",
    MovableDay.LENT_WEEK_2_TUE: "Вторник 2-й седмицы великого поста.",
    MovableDay.LENT_WEEK_2_WED: "Среда 2-й седмицы великого поста.",
    MovableDay.LENT_WEEK_2_THU: "Четверг 2-й седмицы великого поста.",
    MovableDay.LENT_WEEK_2_FRI: "Пятница 2-й седмицы великого поста.",
    MovableDay.LENT_WEEK_2_SAT: "Суббота 2-й седмицы великого поста.",
    MovableDay.LENT_WEEK_3_SUN: "Неделя 2-я Великого поста.",
    MovableDay.LENT_WEEK_3_MON: "Понедельник 3-й седмицы великого поста.",
    MovableDay.LENT_WEEK_3_TUE: "Вторник 3-й седмицы великого поста.",
    MovableDay.LENT_WEEK_3_WED: "Среда 3-й седмицы великого поста.",
    MovableDay.LENT_WEEK_3_THU: "Четверг 3-й седмицы великого поста.",
    MovableDay.LENT_WEEK_3_FRI: "Пятница 3-й седмицы великого поста.",
    MovableDay.LENT_WEEK_3_SAT: "Суббота 3-й седмицы великого поста.",
    MovableDay.LENT_WEEK_4_SUN: "Неделя 3-я Великого поста, Крестопоклонная.",
    MovableDay.LENT_WEEK_4_MON: "Понедельник 4-й седмицы вел. поста, Крестопоклонной.",
    MovableDay.LENT_WEEK_4_TUE: "Вторник 4-й седмицы вел. поста, Крестопоклонной.",
    MovableDay.LENT_WEEK_4_WED: "Среда 4-й седмицы вел. поста, Крестопоклонной.",
    MovableDay.LENT_WEEK_4_THU: "Четверг 4-й седмицы вел. поста, Крестопоклонной.",
    MovableDay.LENT_WEEK_4_FRI: "Пятница 4-й седмицы вел. поста, Крестопоклонной.",
    MovableDay.LENT_WEEK_4_SAT: "Суббота 4-й седмицы вел. поста, Крестопоклонной.",
    MovableDay.LENT_WEEK_5_SUN: "Неделя 4-я Великого поста.",
    MovableDay.LENT_WEEK_5_MON: "Понедельник 5-й седмицы великого поста.",
    MovableDay.LENT_WEEK_5_TUE: "Вторник 5-й седмицы великого поста.",
    MovableDay.LENT_WEEK_5_WED: "Среда 5-й седмицы великого поста.",
    MovableDay.LENT_WEEK_5_THU: "Четверг 5-й седмицы великого поста.",
    MovableDay.LENT_WEEK_5_FRI: "Пятница 5-й седмицы великого поста.",
    MovableDay.LENT_WEEK_5_SAT: "Суббота 5-й седмицы великого поста. Суббота Ака́фиста. Похвала́ Пресвятой Богородицы.",
    MovableDay.LENT_WEEK_6_SUN: "Неделя 5-я Великого поста.",
    MovableDay.LENT_WEEK_6_MON: "Понедельник 6-й седмицы великого поста, ва́ий.",
    MovableDay.LENT_WEEK_6_TUE: "Вторник 6-й седмицы великого поста, ва́ий.",
    MovableDay.LENT_WEEK_6_WED: "Среда 6-й седмицы великого поста, ва́ий.",
    MovableDay.LENT_WEEK_6_THU: "Четверг 6-й седмицы великого поста, ва́ий.",
    MovableDay.LENT_WEEK_6_FRI: "Пятница 6-й седмицы великого поста, ва́ий.",
    MovableDay.LENT_WEEK_6_SAT: "Суббота 6-й седмицы великого поста, ва́ий. Лазарева суббота.",
    MovableDay.LENT_WEEK_7_SUN: "Неделя ва́ий (цветоно́сная, Вербное воскресенье). Вход Господень в Иерусалим.",
    MovableDay.LENT_WEEK_7_MON: "Страстна́я седмица. Великий Понедельник.",
    MovableDay.LENT_WEEK_7_TUE: "Страстна́я седмица. Великий Вторник.",
    MovableDay.LENT_WEEK_7_WED: "Страстна́я седмица. Великая Среда.",
    MovableDay.LENT_WEEK_7_THU: "Страстна́я седмица. Великий Четверг. Воспоминание Тайной Ве́чери.",
    MovableDay.LENT_WEEK_7_FRI: "Страстна́я седмица. Великая Пятница.",
    MovableDay.LENT_WEEK_7_SAT: "Страстна́я седмица. Великая Суббота.",
    FixedDay.JAN_01: "Обре́зание Господне. Свт. Василия Великого, архиеп. Кесари́и Каппадоки́йской.",
    FixedDay.JAN_02: "Предпразднство Богоявления.",
    FixedDay.JAN_03: "Предпразднство Богоявления.",
    FixedDay.JAN_04: "Предпразднство Богоявления.",
    FixedDay.JAN_05: "Предпразднство Богоявления. На́вечерие Богоявления (Крещенский сочельник). День постный.",
    FixedDay.JAN_06: "Святое Богоявле́ние. Крещение Господа Бога и Спаса нашего Иисуса Христа.",
    FixedDay.JAN_07: "Попразднство Богоявления.",
    FixedDay.JAN_08: "Попразднство Богоявления.",
    FixedDay.JAN_09: "Попразднство Богоявления.",
    FixedDay.JAN_10: "Попразднство Богоявления.",
    FixedDay.JAN_11: "Попразднство Богоявления.",
    FixedDay.JAN_12: "Попразднство Богоявления.",
    FixedDay.JAN_13: "Попразднство Богоявления.",
    FixedDay.JAN_14: "Отдание праздника Богоявления.",
    FixedDay.MAR_25: "Благове́щение Пресвято́й Богоро́дицы.",
    FixedDay.JUN_24: "Рождество́ честно́го сла́вного Проро́ка, Предте́чи и Крести́теля Госпо́дня Иоа́нна.",
    FixedDay.JUN_25: "Отдание праздника рождества Предте́чи и Крести́теля Госпо́дня Иоа́нна.",
    FixedDay.JUN_29: "Славных и всехва́льных первоверхо́вных апостолов Петра и Павла.",
    FixedDay.AUG_05: "Предпразднство Преображения Господня.",
    FixedDay.AUG_06: "Преображение Господа Бога и Спаса нашего Иисуса Христа.",
    FixedDay.AUG_07: "Попразднство Преображения Господня.",
    FixedDay.AUG_08: "Попразднство Преображения Господня.",
    FixedDay.AUG_09: "Попразднство Преображения Господня.",
    FixedDay.AUG_10: "Попразднство Преображения Господня.",
    FixedDay.AUG_11: "Попразднство Преображения Господня.",
    FixedDay.AUG_12: "Попразднство Преображения Господня.",
    FixedDay.AUG_13: "Отдание праздника Преображения Господня.",
    FixedDay.AUG_14: "Предпразднство Успения Пресвятой Богородицы.",
    FixedDay.AUG_15: "Успе́ние Пресвятой Владычицы нашей Богородицы и Приснодевы Марии.",
    FixedDay.AUG_16: "Попразднство Успения Пресвятой Богородицы.",
    FixedDay.AUG_17: "Попразднство Успения Пресвятой Богородицы.",
    FixedDay.AUG_18: "Попразднство Успения Пресвятой Богородицы.",
    FixedDay.AUG_19: "Попразднство Успения Пресвятой Богородицы.",
    FixedDay.AUG_20: "Попразднство Успения Пресвятой Богородицы.",
    FixedDay.AUG_21: "Попразднство Успения Пресвятой Богородицы.",
    FixedDay.AUG_22: "Попразднство Успения Пресвятой Богородицы.",
    FixedDay.AUG_23: "Отдание праздника Успения Пресвятой Богородицы.",
    FixedDay.SEP_07: "Предпразднство Рождества Пресвятой Богородицы.",
    FixedDay.SEP_08: "Рождество Пресвятой Владычицы нашей Богородицы и Приснодевы Марии.",
    FixedDay.SEP_09: "Попразднство Рождества Пресвятой Богородицы.",
    FixedDay.SEP_10: "Попразднство Рождества Пресвятой Богородицы.",
    FixedDay.SEP_11: "Попразднство Рождества Пресвятой Богородицы.",
    FixedDay.SEP_12: "Отдание праздника Рождества Пресвятой Богородицы.",
    FixedDay.SEP_13: "Предпразднство Воздви́жения Честно́го и Животворя́щего Креста Господня.",
    FixedDay.SEP_14: "Всеми́рное Воздви́жение Честно́го и Животворя́щего Креста́ Госпо́дня. День постный.",
    FixedDay.SEP_15: "Попразднство Воздвижения Креста.",
    FixedDay.SEP_16: "Попразднство Воздвижения Креста.",
    FixedDay.SEP_17: "Попразднство Воздвижения Креста.",
    FixedDay.SEP_18: "Попразднство Воздвижения Креста.",
    FixedDay.SEP_19: "Попразднство Воздвижения Креста.",
    FixedDay.SEP_20: "Попразднство Воздвижения Креста.",
    FixedDay.SEP_21: "Отдание праздника Воздвижения Животворящего Креста Господня.",
    FixedDay.AUG_29: "Усекновение главы́ Пророка, Предтечи и Крестителя Господня Иоанна. День постный.",
    FixedDay.OCT_01: "Покро́в Пресвятой Владычицы нашей Богородицы и Приснодевы Марии.",
    FixedDay.NOV_20: "Предпразднство Введения (Входа) во храм Пресвятой Богородицы.",
    FixedDay.NOV_21: "Введе́ние (Вход) во храм Пресвятой Владычицы нашей Богородицы и Приснодевы Марии.",
    FixedDay.NOV_22: "Попразднство Введения.",
    FixedDay.NOV_23: "Попразднство Введения.",
    FixedDay.NOV_24: "Попразднство Введения.",
    FixedDay.NOV_25: "Отдание праздника Введения (Входа) во храм Пресвятой Богородицы.",
    FixedDay.DEC_20: "Предпразднство Рождества Христова.",
    FixedDay.DEC_21: "Предпразднство Рождества Христова.",
    FixedDay.DEC_22: "Предпразднство Рождества Христова.",
    FixedDay.DEC_23: "Предпразднство Рождества Христова.",
    FixedDay.DEC_24: "Предпразднство Рождества Христова. На́вечерие Рождества Христова (Рождественский сочельник).",
    FixedDay.DEC_25: "Рождество Господа Бога и Спаса нашего Иисуса Христа.",
    FixedDay.DEC_26: "Попразднство Рождества Христова.",
    FixedDay.DEC_27: "Попразднство Рождества Христова.",
    FixedDay.DEC_28: "Попразднство Рождества Христова.",
    FixedDay.DEC_29: "Попразднство Рождества Христова.",
    FixedDay.DEC_30: "Попразднство Рождества Христова.",
    FixedDay.DEC_31: "Отдание праздника Рождества Христова.",
    DerivedDay.SAT_BEFORE_THEOPHANY: "Суббота перед Богоявлением.",
    DerivedDay.SUN_BEFORE_THEOPHANY: "Неделя перед Богоявлением.",
    DerivedDay.SAT_AFTER_THEOPHANY: "Суббота по Богоявлении.",
    DerivedDay.SUN_AFTER_THEOPHANY: "Неделя по Богоявлении.",
    DerivedDay.NEW_MARTYRS_OF_RUSSIA: "Собор новомучеников и исповедников Церкви Русской.",
    DerivedDay.THREE_HIERARCHS: "Собор вселенских учителей и святителей Василия Великого, Григория Богослова и Иоанна Златоустого.",
    DerivedDay.MEETING_FOREFEAST: "Предпразднство Сре́тения Господня.",
    DerivedDay.MEETING_OF_THE_LORD: "Сре́тение Господа Бога и Спаса нашего Иисуса Христа.",
    DerivedDay.MEETING_AFTERFEAST_1: "День 1-й Попразднства Сретения Господня.",
    DerivedDay.MEETING_AFTERFEAST_2: "День 2-й Попразднства Сретения Господня.",
    DerivedDay.MEETING_AFTERFEAST_3: "День 3-й Попразднства Сретения Господня.",
    DerivedDay.MEETING_AFTERFEAST_4: "День 4-й Попразднства Сретения Господня.",
    DerivedDay.MEETING_AFTERFEAST_5: "День 5-й Попразднства Сретения Господня.",
    DerivedDay.MEETING_AFTERFEAST_6: "День 6-й Попразднства Сретения Господня.",
    DerivedDay.MEETING_LEAVETAKING: "Отдание праздника Сретения Господня.",
    DerivedDay.FIRST_SECOND_FINDING_OF_HEAD: "Первое и второе Обре́тение главы Иоанна Предтечи.",
    DerivedDay.FORTY_MARTYRS: "Святых сорока́ мучеников, в Севастийском е́зере мучившихся.",
    DerivedDay.ANNUNCIATION_FOREFEAST: "Предпразднство Благовещения Пресвятой Богородицы.",
    DerivedDay.ANNUNCIATION_LEAVETAKING: "Отдание праздника Благовещения Пресвятой Богородицы.",
    DerivedDay.GEORGE_THE_VICTORIOUS: "Вмч. Гео́ргия Победоно́сца. Мц. царицы Александры.",
    DerivedDay.THIRD_FINDING_OF_HEAD: "Третье обре́тение главы Предтечи и Крестителя Господня Иоанна.",
    DerivedDay.FATHERS_OF_SIX_COUNCILS: "Память святых отцов шести Вселенских Соборов.",
    DerivedDay.THEODORE_TYRO: "Вмч. Феодора Тирона (ок. 306) (переходящее празднование).",
    DerivedDay.GREGORY_PALAMAS: "Свт. Григория Паламы, архиеп. Фессалонитского (переходящее празднование).",
    DerivedDay.JOHN_CLIMACUS: "Прп. Иоанна Лествичника (переходящее празднование).",
    DerivedDay.MARY_OF_EGYPT: "Прп. Марии Египетской (переходящее празднование).",
    DerivedDay.SAT_AFTER_NATIVITY_READINGS: "Чтения субботы по Рождестве Христовом.",
    DerivedDay.SUN_AFTER_NATIVITY_READINGS: "Чтения недели по Рождестве Христовом.",
    DerivedDay.SAT_BEFORE_THEOPHANY_READINGS: "Чтения субботы пред Богоявлением.",
    DerivedDay.SUN_BEFORE_THEOPHANY_READINGS: "Чтения недели пред Богоявлением.",
    DerivedDay.RIGHTEOUS_GODFATHERS: "Правв. Иосифа Обручника, Давида царя и Иакова, брата Господня.",
    DerivedDay.ALL_SAINTS_OF_RUSSIA: "Всех святых, в земле Русской просиявших.",
    FeastRank.TWELVE_GREAT_MOVABLE: "Двунадесятые переходящие праздники",
    FeastRank.TWELVE_GREAT_FIXED: "Двунадесятые непереходящие праздники",
    FeastRank.GREAT_FEAST: "Великие праздники",
    FastPeriod.GREAT_LENT: "Великий пост",
    FastPeriod.APOSTLES_FAST: "Петров пост",
    FastPeriod.DORMITION_FAST: "Успенский пост",
    FastPeriod.NATIVITY_FAST: "Рождественский пост",
    FastPeriod.FAST_FREE_CHRISTMASTIDE: "Сплошная седмица. Святки",
    FastPeriod.FAST_FREE_PUBLICAN: "Сплошная седмица. Мытаря и фарисея",
    FastPeriod.FAST_FREE_CHEESEFARE: "Сплошная седмица. Сырная (Масленица)",
    FastPeriod.FAST_FREE_BRIGHT: "Сплошная седмица. Светлая",
    FastPeriod.FAST_FREE_TRINITY: "Сплошная седмица. Троицкая",
    TheotokosIcon.ICON_01: "иконы Божией Матери «Акафистная Дионисиатская (Мироточивая)»",
    TheotokosIcon.ICON_02: "иконы Божией Матери «Аз есмь с вами, и никтоже на вы (Леуши́нская)»",
    TheotokosIcon.ICON_03: "иконы Божией Матери «Девпетуровская-Тамбовская»",
    TheotokosIcon.ICON_04: "иконы Божией Матери «Дубенская (Красногорская)»",
    TheotokosIcon.ICON_05: "иконы Божией Матери «Дектоурская (Доктоурская)»",
    TheotokosIcon.ICON_06: "иконы Божией Матери «Живоносный Источник»",
    TheotokosIcon.ICON_07: "иконы Божией Матери «Межеричская (Жизнеподательница)»",
    TheotokosIcon.ICON_08: "иконы Божией Матери «Зна́мение Курская-Коренная»",
    TheotokosIcon.ICON_09: "иконы Божией Матери «Иверская»",
    TheotokosIcon.ICON_10: "иконы Божией Матери «Избавление От Бед Страждущих»",
    TheotokosIcon.ICON_11: "иконы Божией Матери «Кипрская (Стромынская)»",
    TheotokosIcon.ICON_12: "иконы Божией Матери «Кипрская»",
    TheotokosIcon.ICON_13: "иконы Божией Матери «Казанская Коробейниковская»",
    TheotokosIcon.ICON_14: "иконы Божией Матери «Моздокская (Иверская)»",
    TheotokosIcon.ICON_15: "иконы Божией Матери «Марьиногорская»",
    TheotokosIcon.ICON_16: "иконы Божией Матери «Нерушимая Стена»",
    TheotokosIcon.ICON_17: "иконы Божией Матери «Одигитрия Шуйская»",
    TheotokosIcon.ICON_18: "иконы Божией Матери «Прибавление Ума»",
    TheotokosIcon.ICON_19: "иконы Божией Матери «Споручница грешных Корецкая»",
    TheotokosIcon.ICON_20: "иконы Божией Матери «Тупичевская»",
    TheotokosIcon.ICON_21: "иконы Божией Матери «Табынская»",
    TheotokosIcon.ICON_22: "иконы Божией Матери «Умягчение Злых Сердец»",
    TheotokosIcon.ICON_23: "иконы Божией Матери «Умиление Псковско-Печерская»",
    TheotokosIcon.ICON_24: "иконы Божией Матери «Касперовская»",
    TheotokosIcon.ICON_25: "иконы Божией Матери «Челнская»",
    SaintDay.VALAAM_FATHERS: "Собо́р преподо́бных отце́в, на Валаа́ме просия́вших.",
    SaintDay.VARLAAM_OF_KHUTYN: "Прп. Варлаа́ма Ху́тынского (переходящее празднование).",
    SaintDay.PETER_AND_FEVRONIA_RELICS: "Перенесение мощей блгвв. кн. Петра, в иночестве Давида, и кн. Февронии, в иночестве Евфросинии, Муромских чудотворцев.",
    SaintDay.UNMERCENARIES: "Собор всех Бессребреников.",
    SaintDay.TVER_SAINTS: "Собор Тверских святых.",
    SaintDay.KUZBASS_SAINTS: "Собор Кузбасских святых.",
    SaintDay.PACHOMIUS_OF_KENSK: "Прп. Пахомия Кенского (XVI) (переходящее празднование).",
    SaintDay.SHIO_OF_MGVIME: "Прп.Шио Мгвимского (VI) (Груз.) (переходящее празднование).",
    SaintDay.DAVID_GAREJA_MARTYRS: "Преподобномучеников отцов Давидо-Гареджийских (1616) (Груз.)(переходящее празднование).",
    SaintDay.CHRISTODULUS_AND_ANASTASIA: "Мчч. Христодула и Анастасии Патрских, убиенных в Ахаии (1821) (переходящее празднование).",
    SaintDay.JOSEPH_OF_ARIMATHEA: "праведных Иосифа Аримафейского и Никодима (переходящее празднование).",
    SaintDay.TAMAR_OF_GEORGIA: "Блгв. Тамары, царицы Грузинской (переходящее празднование).",
    SaintDay.ABRAHAM_OF_BULGARIA_RELICS: "Перенесение мощей мч. Авраамия Болгарского (1230)(переходящее празднование).",
    SaintDay.TABITHA: "Прав. Тавифы (I)(переходящее празднование).",
    SaintDay.FEREYDAN_MARTYRS: "Мучеников, в долине Ферейдан (Иран) от персов пострадавших (XVII) (Груз.) (переходящее празднование).",
    SaintDay.DODO_OF_GAREJA: "Прп. Додо Гареджийского (Груз.)(623) (переходящее празднование).",
    SaintDay.DAVID_OF_GAREJA: "Прп. Давида Гареджийского (Груз.)(VI) (переходящее празднование).",
    SaintDay.SOKOLOVSK_FATHERS: "Прпп. Тихона, Василия и Никона Соколовских(XVI) (переходящее празднование).",
    SaintDay.ARSENIUS_OF_TVER: "Свт.Арсения, еп. Тверского (переходящее празднование).",
    SaintDay.LIPSI_MARTYRS: "Прмчч. Неофита, Ионы, Неофита, Ионы и Парфения Липсийских (переходящее празднование).",
    SaintDay.ALTAI_SAINTS: "Собор Алтайских святых.",
    SaintDay.ATHONITE_FATHERS: "Собор всех преподобных и Богоносных отцов, во Святой Горе Афонской просиявших",
    SaintDay.BELARUSIAN_SAINTS: "Собор Белорусских святых",
    SaintDay.VOLOGDA_SAINTS: "Собор Вологодских святых",
    SaintDay.NOVGOROD_SAINTS: "Собор Новгородских святых",
    SaintDay.PSKOV_SAINTS: "Собор Псковских святых",
    SaintDay.PETERSBURG_SAINTS: "Собор святых Санкт-Петербургской митрополии",
    SaintDay.UDMURT_SAINTS: "Собор святых Удмуртской земли",
    SaintDay.VOLGOGRAD_SAINTS: "Собор всех святых, в земле Волгоградской просиявших",
    SaintDay.IBERIAN_SAINTS: "Собор святых, в земле Испанской и Португальской просиявших",
    SaintDay.KUBAN_SAINTS: "Собор святых Кубанской митрополии",
    SaintDay.CHELYABINSK_SAINTS: "Собор святых Челябинской митрополии",
    SaintDay.MOSCOW_SAINTS: "Собор Московских святых",
    SaintDay.NIZHNY_NOVGOROD_SAINTS: "Собор святых Нижегородской митрополии",
    SaintDay.SARATOV_SAINTS: "Собор Саратовских святых",
    SaintDay.BUTOVO_MARTYRS: "Собор новомучеников, в Бутове пострадавших",
    SaintDay.KAZAKHSTAN_MARTYRS: "Собор новомучеников и исповедников Казахстанских",
    SaintDay.KARELIAN_MARTYRS: "Собор новомучеников и исповедников земли Карельской",
    SaintDay.PERM_SAINTS: "Собор святых Пермской митрополии",
    SaintDay.PSKOV_CAVES_FATHERS: "Собор преподобных отцов Псково-Печерских",
    SaintDay.SINAI_FATHERS: "Собор преподобных отцов, на Богошественной Горе Синай подвизавшихся",
    SaintDay.KHOLM_MARTYRS: "Собор мучеников Холмских и Подляшских",
    SaintDay.ALL_VENERABLE_FATHERS: "Собор всех преподобных отцов, в подвиге просиявших",
    SaintDay.KIEV_CAVES_FATHERS: "Собор всех преподобных отцов Киево-Печерских",
    SaintDay.SMOLENSK_SAINTS: "Собор Смоленских святых",
    SaintDay.ALANIAN_SAINTS: "Собор Аланских святых",
    SaintDay.GERMAN_LANDS_SAINTS: "Собор святых, в земле Германской просиявших",
}


def marker_title(marker: int) -> Optional[str]:
    """Title for a marker, or None when the value has no entry."""
    return TITLES.get(marker)
