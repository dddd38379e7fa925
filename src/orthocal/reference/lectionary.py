"""
orthocal.reference.lectionary
-----------------------------
Liturgy readings appended to the service Gospel and Apostol books.

Entries are (code, reference) pairs where code = (pericope << 4) | book,
book being 1=Apostol, 2=Mt, 3=Mk, 4=Lk, 5=Jn.

- *_WEEKS: 37 rows indexed by the week after Pentecost, 7 columns by
  weekday (0=Sunday).  Row 0 is Pentecost itself; rows 33..36 carry the
  Triodion weeks from the Publican to Cheesefare Sunday.
- *_TRIODION: readings from the start of Great Lent to the Trinity
  Saturday, keyed by movable-day marker.
- RESURRECTION_GOSPELS / FEAST_MATINS_GOSPELS: Sunday and feast matins.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from .markers import MovableDay

Entry = Tuple[int, str]

GOSPEL_WEEKS: Tuple[Tuple[Optional[Entry], ...], ...] = (
    (  # week 0
        (0x1B5, "Ин., 27 зач., VII, 37–52; VIII, 12."),
        None,
        None,
        None,
        None,
        None,
        None,
    ),
    (  # week 1
        (0x262, "Мф., 38 зач., X, 32–33, 37–38; XIX, 27–30."),
        (0x4B2, "Мф., 75 зач., XVIII, 10–20."),
        (0xA2, "Мф., 10 зач., IV, 25 – V, 12."),
        (0xC2, "Мф., 12 зач., V, 20–26."),
        (0xD2, "Мф., 13 зач., V, 27–32."),
        (0xE2, "Мф., 14 зач., V, 33–41."),
        (0xF2, "Мф., 15 зач., V, 42–48."),
    ),
    (  # week 2
        (0x92, "Мф., 9 зач., IV, 18–23."),
        (0x132, "Мф., 19 зач., VI, 31–34; VII, 9–11."),
        (0x162, "Мф., 22 зач., VII, 15–21."),
        (0x172, "Мф., 23 зач., VII, 21–23."),
        (0x1B2, "Мф., 27 зач., VIII, 23–27."),
        (0x1F2, "Мф., 31 зач., IX, 14–17."),
        (0x142, "Мф., 20 зач., VII, 1–8."),
    ),
    (  # week 3
        (0x122, "Мф., 18 зач., VI, 22–33."),
        (0x222, "Мф., 34 зач., IX, 36 – X, 8."),
        (0x232, "Мф., 35 зач., X, 9–15."),
        (0x242, "Мф., 36 зач., X, 16–22."),
        (0x252, "Мф., 37 зач., X, 23–31."),
        (0x262, "Мф., 38 зач., X, 32–36; XI, 1."),
        (0x182, "Мф., 24 зач., VII, 24 – VIII, 4."),
    ),
    (  # week 4
        (0x192, "Мф., 25 зач., VIII, 5–13."),
        (0x282, "Мф., 40 зач., XI, 2–15."),
        (0x292, "Мф., 41 зач., XI, 16–20."),
        (0x2A2, "Мф., 42 зач., XI, 20–26."),
        (0x2B2, "Мф., 43 зач., XI, 27–30."),
        (0x2C2, "Мф., 44 зач., XII, 1–8."),
        (0x1A2, "Мф., 26 зач., VIII, 14–23."),
    ),
    (  # week 5
        (0x1C2, "Мф., 28 зач., VIII, 28 - IX, 1."),
        (0x2D2, "Мф., 45 зач., XII, 9-13."),
        (0x2E2, "Мф., 46 зач., XII, 14–16, 22–30."),
        (0x302, "Мф., 48 зач., XII, 38–45."),
        (0x312, "Мф., 49 зач., XII, 46 – XIII, 3."),
        (0x322, "Мф., 50 зач., XIII, 3–9."),
        (0x1E2, "Мф., 30 зач., IX, 9–13."),
    ),
    (  # week 6
        (0x1D2, "Мф., 29 зач., IX, 1–8."),
        (0x332, "Мф., 51 зач., XIII, 10–23."),
        (0x342, "Мф., 52 зач., XIII, 24–30."),
        (0x352, "Мф., 53 зач., XIII, 31–36."),
        (0x362, "Мф., 54 зач., XIII, 36–43."),
        (0x372, "Мф., 55 зач., XIII, 44–54."),
        (0x202, "Мф., 32 зач., IX, 18–26."),
    ),
    (  # week 7
        (0x212, "Мф., 33 зач., IX, 27–35."),
        (0x382, "Мф., 56 зач., XIII, 54–58."),
        (0x392, "Мф., 57 зач., XIV, 1–13."),
        (0x3C2, "Мф., 60 зач., XIV, 35 – XV, 11."),
        (0x3D2, "Мф., 61 зач., XV, 12–21."),
        (0x3F2, "Мф., 63 зач., XV, 29–31."),
        (0x272, "Мф., 39 зач., X, 37 – XI, 1."),
    ),
    (  # week 8
        (0x3A2, "Мф., 58 зач., XIV, 14–22."),
        (0x412, "Мф., 65 зач., XVI, 1-6."),
        (0x422, "Мф., 66 зач., XVI, 6-12."),
        (0x442, "Мф., 68 зач., XVI, 20–24."),
        (0x452, "Мф., 69 зач., XVI, 24–28."),
        (0x472, "Мф., 71 зач., XVII, 10-18."),
        (0x2F2, "Мф., 47 зач., XII, 30–37."),
    ),
    (  # week 9
        (0x3B2, "Мф., 59 зач., XIV, 22–34."),
        (0x4A2, "Мф., 74 зач., XVIII, 1–11."),
        (0x4C2, "Мф., 76 зач., XVIII, 18–22; XIX, 1–2, 13–15."),
        (0x502, "Мф., 80 зач., XX, 1–16."),
        (0x512, "Мф., 81 зач., XX, 17–28."),
        (0x532, "Мф., 83 зач., XXI, 1–11, 15–17."),
        (0x402, "Мф., 64 зач., XV, 32–39."),
    ),
    (  # week 10
        (0x482, "Мф., 72 зач., XVII, 14–23."),
        (0x542, "Мф., 84 зач., XXI, 18–22."),
        (0x552, "Мф., 85 зач., XXI, 23–27."),
        (0x562, "Мф., 86 зач., XXI, 28–32."),
        (0x582, "Мф., 88 зач., XXI, 43-46."),
        (0x5B2, "Мф., 91 зач., XXII, 23–33."),
        (0x492, "Мф., 73 зач., XVII, 24 – XVIII, 4."),
    ),
    (  # week 11
        (0x4D2, "Мф., 77 зач., XVIII, 23–35."),
        (0x5E2, "Мф., 94 зач., XXIII, 13–22."),
        (0x5F2, "Мф., 95 зач., XXIII, 23-28."),
        (0x602, "Мф., 96 зач., XXIII, 29–39."),
        (0x632, "Мф., 99 зач., XXIV, 13–28."),
        (0x642, "Мф., 100 зач., XXIV, 27–33, 42–51."),
        (0x4E2, "Мф., 78 зач., XIX, 3–12."),
    ),
    (  # week 12
        (0x4F2, "Мф., 79 зач., XIX, 16–26."),
        (0x23, "Мк., 2 зач., I, 9–15."),
        (0x33, "Мк., 3 зач., I, 16–22."),
        (0x43, "Мк., 4 зач., I, 23–28."),
        (0x53, "Мк., 5 зач., I, 29-35."),
        (0x93, "Мк., 9 зач., II, 18–22."),
        (0x522, "Мф., 82 зач., XX, 29–34."),
    ),
    (  # week 13
        (0x572, "Мф., 87 зач., XXI, 33–42."),
        (0xB3, "Мк., 11 зач., III, 6–12."),
        (0xC3, "Мк., 12 зач., III, 13–19."),
        (0xD3, "Мк., 13 зач., III, 20–27."),
        (0xE3, "Мк., 14 зач., III, 28–35."),
        (0xF3, "Мк., 15 зач., IV, 1–9."),
        (0x5A2, "Мф., 90 зач., XXII, 15-22."),
    ),
    (  # week 14
        (0x592, "Мф., 89 зач., XXII, 1–14."),
        (0x103, "Мк., 16 зач., IV, 10–23."),
        (0x113, "Мк., 17 зач., IV, 24–34."),
        (0x123, "Мк., 18 зач., IV, 35–41."),
        (0x133, "Мк., 19 зач., V, 1-20."),
        (0x143, "Мк., 20 зач., V, 22–24, 35 – VI, 1."),
        (0x5D2, "Мф., 93 зач., XXIII, 1–12."),
    ),
    (  # week 15
        (0x5C2, "Мф., 92 зач., XXII, 35–46."),
        (0x153, "Мк., 21 зач., V, 24–34."),
        (0x163, "Мк., 22 зач., VI, 1-7."),
        (0x173, "Мк., 23 зач., VI, 7–13."),
        (0x193, "Мк., 25 зач., VI, 30–45."),
        (0x1A3, "Мк., 26 зач., VI, 45–53."),
        (0x612, "Мф., 97 зач., XXIV, 1–13."),
    ),
    (  # week 16
        (0x692, "Мф., 105 зач., XXV, 14-30."),
        (0x1B3, "Мк., 27 зач., VI, 54 - VII, 8."),
        (0x1C3, "Мк., 28 зач., VII, 5-16."),
        (0x1D3, "Мк., 29 зач., VII, 14–24."),
        (0x1E3, "Мк., 30 зач., VII, 24–30."),
        (0x203, "Мк., 32 зач., VIII, 1-10."),
        (0x652, "Мф., 101 зач., XXIV, 34–44."),
    ),
    (  # week 17
        (0x3E2, "Мф., 62 зач., XV, 21–28."),
        (0x303, "Мк., 48 зач., X, 46–52."),
        (0x323, "Мк., 50 зач., XI, 11–23."),
        (0x333, "Мк., 51 зач., XI, 23–26."),
        (0x343, "Мк., 52 зач., XI, 27–33."),
        (0x353, "Мк., 53 зач., XII, 1–12."),
        (0x682, "Мф., 104 зач., XXV, 1–13."),
    ),
    (  # week 18
        (0x114, "Лк., 17 зач., V, 1–11."),
        (0xA4, "Лк., 10 зач., III, 19–22."),
        (0xB4, "Лк., 11 зач., III, 23 – IV, 1."),
        (0xC4, "Лк., 12 зач., IV, 1-15."),
        (0xD4, "Лк., 13 зач., IV, 16–22."),
        (0xE4, "Лк., 14 зач., IV, 22–30."),
        (0xF4, "Лк., 15 зач., IV, 31–36."),
    ),
    (  # week 19
        (0x1A4, "Лк., 26 зач., VI, 31–36."),
        (0x104, "Лк., 16 зач., IV, 37–44."),
        (0x124, "Лк., 18 зач., V, 12-16."),
        (0x154, "Лк., 21 зач., V, 33–39."),
        (0x174, "Лк., 23 зач., VI, 12–19."),
        (0x184, "Лк., 24 зач., VI, 17–23."),
        (0x134, "Лк., 19 зач., V, 17–26."),
    ),
    (  # week 20
        (0x1E4, "Лк., 30 зач., VII, 11–16."),
        (0x194, "Лк., 25 зач., VI, 24–30."),
        (0x1B4, "Лк., 27 зач., VI, 37–45."),
        (0x1C4, "Лк., 28 зач., VI, 46 – VII, 1."),
        (0x1F4, "Лк., 31 зач., VII, 17–30."),
        (0x204, "Лк., 32 зач., VII, 31–35."),
        (0x144, "Лк., 20 зач., V, 27–32."),
    ),
    (  # week 21
        (0x234, "Лк., 35 зач., VIII, 5–15."),
        (0x214, "Лк., 33 зач., VII, 36–50."),
        (0x224, "Лк., 34 зач., VIII, 1–3."),
        (0x254, "Лк., 37 зач., VIII, 22–25."),
        (0x294, "Лк., 41 зач., IX, 7–11."),
        (0x2A4, "Лк., 42 зач., IX, 12–18."),
        (0x164, "Лк., 22 зач., VI, 1–10."),
    ),
    (  # week 22
        (0x534, "Лк., 83 зач., XVI, 19–31."),
        (0x2B4, "Лк., 43 зач., IX, 18–22."),
        (0x2C4, "Лк., 44 зач., IX, 23-27."),
        (0x2F4, "Лк., 47 зач., IX, 44–50."),
        (0x304, "Лк., 48 зач., IX, 49–56."),
        (0x324, "Лк., 50 зач., X, 1–15."),
        (0x1D4, "Лк., 29 зач., VII, 1–10."),
    ),
    (  # week 23
        (0x264, "Лк., 38 зач., VIII, 26–39."),
        (0x344, "Лк., 52 зач., X, 22–24."),
        (0x374, "Лк., 55 зач., XI, 1–10."),
        (0x384, "Лк., 56 зач., XI, 9–13."),
        (0x394, "Лк., 57 зач., XI, 14–23."),
        (0x3A4, "Лк., 58 зач., XI, 23–26."),
        (0x244, "Лк., 36 зач., VIII, 16–21."),
    ),
    (  # week 24
        (0x274, "Лк., 39 зач., VIII, 41–56."),
        (0x3B4, "Лк., 59 зач., XI, 29–33."),
        (0x3C4, "Лк., 60 зач., XI, 34–41."),
        (0x3D4, "Лк., 61 зач., XI, 42–46."),
        (0x3E4, "Лк., 62 зач., XI, 47 – XII, 1."),
        (0x3F4, "Лк., 63 зач., XII, 2–12."),
        (0x284, "Лк., 40 зач., IX, 1–6."),
    ),
    (  # week 25
        (0x354, "Лк., 53 зач., X, 25–37."),
        (0x414, "Лк., 65 зач., XII, 13–15, 22–31."),
        (0x444, "Лк., 68 зач., XII, 42–48."),
        (0x454, "Лк., 69 зач., XII, 48-59."),
        (0x464, "Лк., 70 зач., XIII, 1–9."),
        (0x494, "Лк., 73 зач., XIII, 31–35."),
        (0x2E4, "Лк., 46 зач., IX, 37–43."),
    ),
    (  # week 26
        (0x424, "Лк., 66 зач., XII, 16–21."),
        (0x4B4, "Лк., 75 зач., XIV, 12–15."),
        (0x4D4, "Лк., 77 зач., XIV, 25–35."),
        (0x4E4, "Лк., 78 зач., XV, 1–10."),
        (0x504, "Лк., 80 зач., XVI, 1-9."),
        (0x524, "Лк., 82 зач., XVI, 15–18; XVII, 1–4."),
        (0x314, "Лк., 49 зач., IX, 57–62."),
    ),
    (  # week 27
        (0x474, "Лк., 71 зач., XIII, 10–17."),
        (0x564, "Лк., 86 зач., XVII, 20–25."),
        (0x574, "Лк., 87 зач., XVII, 26–37."),
        (0x5A4, "Лк., 90 зач., XVIII, 15–17, 26–30."),
        (0x5C4, "Лк., 92 зач., XVIII, 31–34."),
        (0x5F4, "Лк., 95 зач., XIX, 12–28."),
        (0x334, "Лк., 51 зач., X, 16–21."),
    ),
    (  # week 28
        (0x4C4, "Лк., 76 зач., XIV, 16–24."),
        (0x614, "Лк., 97 зач., XIX, 37–44."),
        (0x624, "Лк., 98 зач., XIX, 45–48."),
        (0x634, "Лк., 99 зач., XX, 1–8."),
        (0x644, "Лк., 100 зач., XX, 9–18."),
        (0x654, "Лк., 101 зач., XX, 19-26."),
        (0x434, "Лк., 67 зач., XII, 32–40."),
    ),
    (  # week 29
        (0x554, "Лк., 85 зач., XVII, 12–19."),
        (0x664, "Лк., 102 зач., XX, 27–44."),
        (0x6A4, "Лк., 106 зач., XXI, 12–19."),
        (0x684, "Лк., 104 зач., XXI, 5–7, 10–11, 20–24."),
        (0x6B4, "Лк., 107 зач., XXI, 28–33."),
        (0x6C4, "Лк., 108 зач., XXI, 37 – XXII, 8."),
        (0x484, "Лк., 72 зач., XIII, 18–29."),
    ),
    (  # week 30
        (0x5B4, "Лк., 91 зач., XVIII, 18-27."),
        (0x213, "Мк., 33 зач., VIII, 11–21."),
        (0x223, "Мк., 34 зач., VIII, 22–26."),
        (0x243, "Мк., 36 зач., VIII, 30–34."),
        (0x273, "Мк., 39 зач., IX, 10–16."),
        (0x293, "Мк., 41 зач., IX, 33–41."),
        (0x4A4, "Лк., 74 зач., XIV, 1–11."),
    ),
    (  # week 31
        (0x5D4, "Лк., 93 зач., XVIII, 35-43."),
        (0x2A3, "Мк., 42 зач., IX, 42 – X, 1."),
        (0x2B3, "Мк., 43 зач., X, 2–12."),
        (0x2C3, "Мк., 44 зач., X, 11–16."),
        (0x2D3, "Мк., 45 зач., X, 17–27."),
        (0x2E3, "Мк., 46 зач., X, 23–32."),
        (0x514, "Лк., 81 зач., XVI, 10–15."),
    ),
    (  # week 32
        (0x5E4, "Лк., 94 зач., XIX, 1-10."),
        (0x303, "Мк., 48 зач., X, 46–52."),
        (0x323, "Мк., 50 зач., XI, 11–23."),
        (0x333, "Мк., 51 зач., XI, 23–26."),
        (0x343, "Мк., 52 зач., XI, 27–33."),
        (0x353, "Мк., 53 зач., XII, 1–12."),
        (0x544, "Лк., 84 зач., XVII, 3–10."),
    ),
    (  # week 33
        (0x594, "Лк., 89 зач., XVIII, 10–14."),
        (0x363, "Мк., 54 зач., XII, 13–17."),
        (0x373, "Мк., 55 зач., XII, 18–27."),
        (0x383, "Мк., 56 зач., XII, 28–37."),
        (0x393, "Мк., 57 зач., XII, 38–44."),
        (0x3A3, "Мк., 58 зач., XIII, 1–8."),
        (0x584, "Лк., 88 зач., XVIII, 2–8."),
    ),
    (  # week 34
        (0x4F4, "Лк., 79 зач., XV, 11–32."),
        (0x3B3, "Мк., 59 зач., XIII, 9–13."),
        (0x3C3, "Мк., 60 зач., XIII, 14-23."),
        (0x3D3, "Мк., 61 зач., XIII, 24–31."),
        (0x3E3, "Мк., 62 зач., XIII, 31 – XIV, 2."),
        (0x3F3, "Мк., 63 зач., XIV, 3-9."),
        (0x674, "Лк., 103 зач., XX, 45 – XXI, 4."),
    ),
    (  # week 35
        (0x6A2, "Мф., 106 зач., XXV, 31–46."),
        (0x313, "Мк., 49 зач., XI, 1–11."),
        (0x403, "Мк., 64 зач., XIV, 10–42."),
        (0x413, "Мк., 65 зач., XIV, 43 – XV, 1."),
        (0x423, "Мк., 66 зач., XV, 1–15."),
        (0x443, "Мк., 68 зач., XV, 22, 25, 33–41."),
        (0x694, "Лк., 105 зач., XXI, 8–9, 25–27, 33–36."),
    ),
    (  # week 36
        (0x112, "Мф., 17 зач., VI, 14–21."),
        (0x604, "Лк., 96 зач., XIX, 29–40; XXII, 7–39."),
        (0x6D4, "Лк., 109 зач., XXII, 39–42, 45 – XXIII, 1."),
        None,
        (0x6E4, "Лк., 110 зач., XXIII, 1–34, 44–56."),
        None,
        (0x102, "Мф., 16 зач., VI, 1–13."),
    ),
)

APOSTOL_WEEKS: Tuple[Tuple[Optional[Entry], ...], ...] = (
    (  # week 0
        (0x31, "Деян., 3 зач., II, 1–11."),
        None,
        None,
        None,
        None,
        None,
        None,
    ),
    (  # week 1
        (0x14A1, "Евр., 330 зач., XI, 33 – XII, 2."),
        (0xE51, "Еф., 229 зач., V, 8–19."),
        (0x4F1, "Рим., 79 зач., I, 1–7, 13–17."),
        (0x501, "Рим., 80 зач., I, 18–27."),
        (0x511, "Рим., 81 зач., I, 28 – II, 9."),
        (0x521, "Рим., 82 зач., II, 14–29."),
        (0x4F1, "Рим., 79 зач., I, 7-12."),
    ),
    (  # week 2
        (0x511, "Рим., 81 зач., II, 10-16."),
        (0x531, "Рим., 83 зач., II, 28 – III, 18."),
        (0x561, "Рим., 86 зач., IV, 4–12."),
        (0x571, "Рим., 87 зач., IV, 13–25."),
        (0x591, "Рим., 89 зач., V, 10–16."),
        (0x5A1, "Рим., 90 зач., V, 17 – VI, 2."),
        (0x541, "Рим., 84 зач., III, 19–26."),
    ),
    (  # week 3
        (0x581, "Рим., 88 зач., V, 1–10."),
        (0x5E1, "Рим., 94 зач., VII, 1–13."),
        (0x5F1, "Рим., 95 зач., VII, 14 – VIII, 2."),
        (0x601, "Рим., 96 зач., VIII, 2–13."),
        (0x621, "Рим., 98 зач., VIII, 22–27."),
        (0x651, "Рим., 101 зач., IX, 6–19."),
        (0x551, "Рим., 85 зач., III, 28 – IV, 3."),
    ),
    (  # week 4
        (0x5D1, "Рим., 93 зач., VI, 18-23."),
        (0x661, "Рим., 102 зач., IX, 18–33."),
        (0x681, "Рим., 104 зач., X, 11 – XI, 2."),
        (0x691, "Рим., 105 зач., XI, 2–12."),
        (0x6A1, "Рим., 106 зач., XI, 13–24."),
        (0x6B1, "Рим., 107 зач., XI, 25–36."),
        (0x5C1, "Рим., 92 зач., VI, 11–17."),
    ),
    (  # week 5
        (0x671, "Рим., 103 зач., X, 1–10."),
        (0x6D1, "Рим., 109 зач., XII, 4–5, 15–21."),
        (0x721, "Рим., 114 зач., XIV, 9–18."),
        (0x751, "Рим., 117 зач., XV, 7–16."),
        (0x761, "Рим., 118 зач., XV, 17–29."),
        (0x781, "Рим., 120 зач., XVI, 1–16."),
        (0x611, "Рим., 97 зач., VIII, 14–21."),
    ),
    (  # week 6
        (0x6E1, "Рим., 110 зач., XII, 6–14."),
        (0x791, "Рим., 121 зач., XVI, 17–24."),
        (0x7A1, "1 Кор., 122 зач., I, 1–9."),
        (0x7F1, "1 Кор., 127 зач., II, 9 – III, 8."),
        (0x811, "1 Кор., 129 зач., III, 18–23."),
        (0x821, "1 Кор., 130 зач., IV, 5-8."),
        (0x641, "Рим., 100 зач., IX, 1–5."),
    ),
    (  # week 7
        (0x741, "Рим., 116 зач., XV, 1–7."),
        (0x861, "1 Кор., 134 зач., V, 9 – VI, 11."),
        (0x881, "1 Кор., 136 зач., VI, 20 – VII, 12."),
        (0x891, "1 Кор., 137 зач., VII, 12–24."),
        (0x8A1, "1 Кор., 138 зач., VII, 24–35."),
        (0x8B1, "1 Кор., 139 зач., VII, 35 – VIII, 7."),
        (0x6C1, "Рим., 108 зач., XII, 1–3."),
    ),
    (  # week 8
        (0x7C1, "1 Кор., 124 зач., I, 10–18."),
        (0x8E1, "1 Кор., 142 зач., IX, 13–18."),
        (0x901, "1 Кор., 144 зач., X, 5–12."),
        (0x911, "1 Кор., 145 зач., X, 12–22."),
        (0x931, "1 Кор., 147 зач., X, 28 – XI, 7."),
        (0x941, "1 Кор., 148 зач., XI, 8–22."),
        (0x6F1, "Рим., 111 зач., XIII, 1–10."),
    ),
    (  # week 9
        (0x801, "1 Кор., 128 зач., III, 9–17."),
        (0x961, "1 Кор., 150 зач., XI, 31 – XII, 6."),
        (0x981, "1 Кор., 152 зач., XII, 12–26."),
        (0x9A1, "1 Кор., 154 зач., XIII, 4 – XIV, 5."),
        (0x9B1, "1 Кор., 155 зач., XIV, 6–19."),
        (0x9D1, "1 Кор., 157 зач., XIV, 26–40."),
        (0x711, "Рим., 113 зач., XIV, 6–9."),
    ),
    (  # week 10
        (0x831, "1 Кор., 131 зач., IV, 9–16."),
        (0x9F1, "1 Кор., 159 зач., XV, 12–19."),
        (0xA11, "1 Кор., 161 зач., XV, 29–38."),
        (0xA51, "1 Кор., 165 зач., XVI, 4–12."),
        (0xA71, "2 Кор., 167 зач., I, 1–7."),
        (0xA91, "2 Кор., 169 зач., I, 12–20."),
        (0x771, "Рим., 119 зач., XV, 30–33."),
    ),
    (  # week 11
        (0x8D1, "1 Кор., 141 зач., IX, 2–12."),
        (0xAB1, "2 Кор., 171 зач., II, 3–15."),
        (0xAC1, "2 Кор., 172 зач., II, 14 – III, 3."),
        (0xAD1, "2 Кор., 173 зач., III, 4–11."),
        (0xAF1, "2 Кор., 175 зач., IV, 1–6."),
        (0xB11, "2 Кор., 177 зач., IV, 13–18."),
        (0x7B1, "1 Кор., 123 зач., I, 3–9."),
    ),
    (  # week 12
        (0x9E1, "1 Кор., 158 зач., XV, 1-11."),
        (0xB31, "2 Кор., 179 зач., V, 10–15."),
        (0xB41, "2 Кор., 180 зач., V, 15–21."),
        (0xB61, "2 Кор., 182 зач., VI, 11–16."),
        (0xB71, "2 Кор., 183 зач., VII, 1–10."),
        (0xB81, "2 Кор., 184 зач., VII, 10–16."),
        (0x7D1, "1 Кор., 125 зач., I, 18-24."),
    ),
    (  # week 13
        (0xA61, "1 Кор., 166 зач., XVI, 13–24."),
        (0xBA1, "2 Кор., 186 зач., VIII, 7–15."),
        (0xBB1, "2 Кор., 187 зач., VIII, 16 – IX, 5."),
        (0xBD1, "2 Кор., 189 зач., IX, 12 – X, 7."),
        (0xBE1, "2 Кор., 190 зач., X, 7–18."),
        (0xC01, "2 Кор., 192 зач., XI, 5–21."),
        (0x7E1, "1 Кор., 126 зач., II, 6–9."),
    ),
    (  # week 14
        (0xAA1, "2 Кор., 170 зач., I, 21 – II, 4."),
        (0xC31, "2 Кор., 195 зач., XII, 10–19."),
        (0xC41, "2 Кор., 196 зач., XII, 20 – XIII, 2."),
        (0xC51, "2 Кор., 197 зач., XIII, 3–13."),
        (0xC61, "Гал., 198 зач., I, 1–10, 20 – II, 5."),
        (0xC91, "Гал., 201 зач., II, 6–10."),
        (0x821, "1 Кор., 130 зач., IV, 1–5."),
    ),
    (  # week 15
        (0xB01, "2 Кор., 176 зач., IV, 6–15."),
        (0xCA1, "Гал., 202 зач., II, 11–16."),
        (0xCC1, "Гал., 204 зач., II, 21 – III, 7."),
        (0xCF1, "Гал., 207 зач., III, 15–22."),
        (0xD01, "Гал., 208 зач., III, 23 - IV, 5."),
        (0xD21, "Гал., 210 зач., IV, 8–21."),
        (0x841, "1 Кор., 132 зач., IV, 17 – V, 5."),
    ),
    (  # week 16
        (0xB51, "2 Кор., 181 зач., VI, 1–10."),
        (0xD31, "Гал., 211 зач., IV, 28 – V, 10."),
        (0xD41, "Гал., 212 зач., V, 11–21."),
        (0xD61, "Гал., 214 зач., VI, 2–10."),
        (0xD81, "Еф., 216 зач., I, 1–9."),
        (0xD91, "Еф., 217 зач., I, 7–17."),
        (0x921, "1 Кор., 146 зач., X, 23–28."),
    ),
    (  # week 17
        (0xB61, "2 Кор., 182 зач., VI, 16 - VII, 1."),
        (0xDB1, "Еф., 219 зач., I, 22 – II, 3."),
        (0xDE1, "Еф., 222 зач., II, 19 – III, 7."),
        (0xDF1, "Еф., 223 зач., III, 8–21."),
        (0xE11, "Еф., 225 зач., IV, 14–19."),
        (0xE21, "Еф., 226 зач., IV, 17–25."),
        (0x9C1, "1 Кор., 156 зач., XIV, 20–25."),
    ),
    (  # week 18
        (0xBC1, "2 Кор., 188 зач., IX, 6–11."),
        (0xE31, "Еф., 227 зач., IV, 25–32."),
        (0xE61, "Еф., 230 зач., V, 20–26."),
        (0xE71, "Еф., 231 зач., V, 25–33."),
        (0xE81, "Еф., 232 зач., V, 33 – VI, 9."),
        (0xEA1, "Еф., 234 зач., VI, 18–24."),
        (0xA21, "1 Кор., 162 зач., XV, 39–45."),
    ),
    (  # week 19
        (0xC21, "2 Кор., 194 зач., XI, 31 – XII, 9."),
        (0xEB1, "Флп., 235 зач., I, 1–7."),
        (0xEC1, "Флп., 236 зач., I, 8–14."),
        (0xED1, "Флп., 237 зач., I, 12–20."),
        (0xEE1, "Флп., 238 зач., I, 20–27."),
        (0xEF1, "Флп., 239 зач., I, 27 – II, 4."),
        (0xA41, "1 Кор., 164 зач., XV, 58 – XVI, 3."),
    ),
    (  # week 20
        (0xC81, "Гал., 200 зач., I, 11–19."),
        (0xF11, "Флп., 241 зач., II, 12–16."),
        (0xF21, "Флп., 242 зач., II, 16–23."),
        (0xF31, "Флп., 243 зач., II, 24–30."),
        (0xF41, "Флп., 244 зач., III, 1–8."),
        (0xF51, "Флп., 245 зач., III, 8–19."),
        (0xA81, "2 Кор., 168 зач., I, 8–11."),
    ),
    (  # week 21
        (0xCB1, "Гал., 203 зач., II, 16–20."),
        (0xF81, "Флп., 248 зач., IV, 10–23."),
        (0xF91, "Кол., 249 зач., I, 1–2, 7–11."),
        (0xFB1, "Кол., 251 зач., I, 18–23."),
        (0xFC1, "Кол., 252 зач., I, 24–29."),
        (0xFD1, "Кол., 253 зач., II, 1–7."),
        (0xAE1, "2 Кор., 174 зач., III, 12–18."),
    ),
    (  # week 22
        (0xD71, "Гал., 215 зач., VI, 11–18."),
        (0xFF1, "Кол., 255 зач., II, 13–20."),
        (0x1001, "Кол., 256 зач., II, 20 – III, 3."),
        (0x1031, "Кол., 259 зач., III, 17 – IV, 1."),
        (0x1041, "Кол., 260 зач., IV, 2–9."),
        (0x1051, "Кол., 261 зач., IV, 10–18."),
        (0xB21, "2 Кор., 178 зач., V, 1–10."),
    ),
    (  # week 23
        (0xDC1, "Еф., 220 зач., II, 4–10."),
        (0x1061, "1 Сол., 262 зач., I, 1–5."),
        (0x1071, "1 Сол., 263 зач., I, 6–10."),
        (0x1081, "1 Сол., 264 зач., II, 1–8."),
        (0x1091, "1 Сол., 265 зач., II, 9–14."),
        (0x10A1, "1 Сол., 266 зач., II, 14–19."),
        (0xB91, "2 Кор., 185 зач., VIII, 1–5."),
    ),
    (  # week 24
        (0xDD1, "Еф., 221 зач., II, 14–22."),
        (0x10B1, "1 Сол., 267 зач., II, 20 – III, 8."),
        (0x10C1, "1 Сол., 268 зач., III, 9–13."),
        (0x10D1, "1 Сол., 269 зач., IV, 1–12."),
        (0x10F1, "1 Сол., 271 зач., V, 1–8."),
        (0x1101, "1 Сол., 272 зач., V, 9–13, 24–28."),
        (0xBF1, "2 Кор., 191 зач., XI, 1–6."),
    ),
    (  # week 25
        (0xE01, "Еф., 224 зач., IV, 1–6."),
        (0x1121, "2 Сол., 274 зач., I, 1–10."),
        (0x1121, "2 Сол., 274 зач., I, 10 - II, 2."),
        (0x1131, "2 Сол., 275 зач., II, 1–12."),
        (0x1141, "2 Сол., 276 зач., II, 13 – III, 5."),
        (0x1151, "2 Сол., 277 зач., III, 6–18."),
        (0xC71, "Гал., 199 зач., I, 3–10."),
    ),
    (  # week 26
        (0xE51, "Еф., 229 зач., V, 8–19."),
        (0x1161, "1 Тим., 278 зач., I, 1–7."),
        (0x1171, "1 Тим., 279 зач., I, 8–14."),
        (0x1191, "1 Тим., 281 зач., I, 18–20; II, 8–15."),
        (0x11B1, "1 Тим., 283 зач., III, 1–13."),
        (0x11D1, "1 Тим., 285 зач., IV, 4–8, 16."),
        (0xCD1, "Гал., 205 зач., III, 8–12."),
    ),
    (  # week 27
        (0xE91, "Еф., 233 зач., VI, 10–17."),
        (0x11D1, "1 Тим., 285 зач., V, 1-10."),
        (0x11E1, "1 Тим., 286 зач., V, 11–21."),
        (0x11F1, "1 Тим., 287 зач., V, 22 – VI, 11."),
        (0x1211, "1 Тим., 289 зач., VI, 17–21."),
        (0x1221, "2 Тим., 290 зач., I, 1–2, 8–18."),
        (0xD51, "Гал., 213 зач., V, 22 – VI, 2."),
    ),
    (  # week 28
        (0xFA1, "Кол., 250 зач., I, 12–18."),
        (0x1261, "2 Тим., 294 зач., II, 20–26."),
        (0x1291, "2 Тим., 297 зач., III, 16 – IV, 4."),
        (0x12B1, "2 Тим., 299 зач., IV, 9–22."),
        (0x12C1, "Тит., 300 зач., I, 5 - II, 1."),
        (0x12D1, "Тит., 301 зач., I, 15 – II, 10."),
        (0xDA1, "Еф., 218 зач., I, 16–23."),
    ),
    (  # week 29
        (0x1011, "Кол., 257 зач., III, 4-11."),
        (0x1341, "Евр., 308 зач., III, 5–11, 17–19."),
        (0x1361, "Евр., 310 зач., IV, 1–13."),
        (0x1381, "Евр., 312 зач., V, 11 – VI, 8."),
        (0x13B1, "Евр., 315 зач., VII, 1–6."),
        (0x13D1, "Евр., 317 зач., VII, 18–25."),
        (0xDC1, "Еф., 220 зач., II, 11-13."),
    ),
    (  # week 30
        (0x1021, "Кол., 258 зач., III, 12–16."),
        (0x13F1, "Евр., 319 зач., VIII, 7–13."),
        (0x1411, "Евр., 321 зач., IX, 8–10, 15–23."),
        (0x1431, "Евр., 323 зач., X, 1–18."),
        (0x1461, "Евр., 326 зач., X, 35 – XI, 7."),
        (0x1471, "Евр., 327 зач., XI, 8, 11–16."),
        (0xE41, "Еф., 228 зач., V, 1–8."),
    ),
    (  # week 31
        (0x1181, "1 Тим., 280 зач., I, 15-17."),
        (0x1491, "Евр., 329 зач., XI, 17–23, 27–31."),
        (0x14D1, "Евр., 333 зач., XII, 25–26; XIII, 22–25."),
        (0x321, "Иак., 50 зач., I, 1-18."),
        (0x331, "Иак., 51 зач., I, 19-27."),
        (0x341, "Иак., 52 зач., II, 1–13."),
        (0xF91, "Кол., 249 зач., I, 3-6."),
    ),
    (  # week 32
        (0x11D1, "1 Тим., 285 зач., IV, 9-15."),
        (0x351, "Иак., 53 зач., II, 14–26."),
        (0x361, "Иак., 54 зач., III, 1–10."),
        (0x371, "Иак., 55 зач., III, 11 – IV, 6."),
        (0x381, "Иак., 56 зач., IV, 7 – V, 9."),
        (0x3A1, "1 Пет., 58 зач., I, 1–2, 10–12; II, 6–10."),
        (0x1111, "1 Сол., 273 зач., V, 14–23."),
    ),
    (  # week 33
        (0x1281, "2 Тим., 296 зач., III, 10–15."),
        (0x3B1, "1 Пет., 59 зач., II, 21 – III, 9."),
        (0x3C1, "1 Пет., 60 зач., III, 10–22."),
        (0x3D1, "1 Пет., 61 зач., IV, 1–11."),
        (0x3E1, "1 Пет., 62 зач., IV, 12 – V, 5."),
        (0x401, "2 Пет., 64 зач., I, 1–10."),
        (0x1251, "2 Тим., 293 зач., II, 11–19."),
    ),
    (  # week 34
        (0x871, "1 Кор., 135 зач., VI, 12-20."),
        (0x421, "2 Пет., 66 зач., I, 20 – II, 9."),
        (0x431, "2 Пет., 67 зач., II, 9–22."),
        (0x441, "2 Пет., 68 зач., III, 1–18."),
        (0x451, "1 Ин., 69 зач., I, 8 – II, 6."),
        (0x461, "1 Ин., 70 зач., II, 7–17."),
        (0x1271, "2 Тим., 295 зач., III, 1–9."),
    ),
    (  # week 35
        (0x8C1, "1 Кор., 140 зач., VIII, 8 – IX, 2."),
        (0x471, "1 Ин., 71 зач., II, 18 – III, 10."),
        (0x481, "1 Ин., 72 зач., III, 10–20."),
        (0x491, "1 Ин., 73 зач., III, 21 – IV, 6."),
        (0x4A1, "1 Ин., 74 зач., IV, 20 – V, 21."),
        (0x4B1, "2 Ин., 75 зач., I, 1–13."),
        (0x921, "1 Кор., 146 зач., X, 23–28."),
    ),
    (  # week 36
        (0x701, "Рим., 112 зач., XIII, 11 – XIV, 4."),
        (0x4C1, "3 Ин., 76 зач., I, 1–15."),
        (0x4D1, "Иуд., 77 зач., I, 1–10."),
        None,
        (0x4E1, "Иуд., 78 зач., I, 11–25."),
        None,
        (0x731, "Рим., 115 зач., XIV, 19–26."),
    ),
)

GOSPEL_TRIODION: Dict[MovableDay, Entry] = {
    MovableDay.PASCHA: (0x15, "Ин., 1 зач., I, 1–17."),
    MovableDay.BRIGHT_MON: (0x25, "Ин., 2 зач., I, 18–28."),
    MovableDay.BRIGHT_TUE: (0x714, "Лк., 113 зач., XXIV, 12–35."),
    MovableDay.BRIGHT_WED: (0x45, "Ин., 4 зач., I, 35–51."),
    MovableDay.BRIGHT_THU: (0x85, "Ин., 8 зач., III, 1–15."),
    MovableDay.BRIGHT_FRI: (0x75, "Ин., 7 зач., II, 12–22."),
    MovableDay.BRIGHT_SAT: (0xB5, "Ин., 11 зач., III, 22–33."),
    MovableDay.SUNDAY_2_OF_PASCHA: (0x415, "Ин., 65 зач., XX, 19–31."),
    MovableDay.PASCHA_WEEK_2_MON: (0x65, "Ин., 6 зач., II, 1–11."),
    MovableDay.PASCHA_WEEK_2_TUE: (0xA5, "Ин., 10 зач., III, 16–21."),
    MovableDay.PASCHA_WEEK_2_WED: (0xF5, "Ин., 15 зач., V, 17–24."),
    MovableDay.PASCHA_WEEK_2_THU: (0x105, "Ин., 16 зач., V, 24–30."),
    MovableDay.PASCHA_WEEK_2_FRI: (0x115, "Ин., 17 зач., V, 30 – VI, 2."),
    MovableDay.PASCHA_WEEK_2_SAT: (0x135, "Ин., 19 зач., VI, 14–27."),
    MovableDay.SUNDAY_3_OF_PASCHA: (0x453, "Мк., 69 зач., XV, 43–47."),
    MovableDay.PASCHA_WEEK_3_MON: (0xD5, "Ин., 13 зач., IV, 46–54."),
    MovableDay.PASCHA_WEEK_3_TUE: (0x145, "Ин., 20 зач., VI, 27–33."),
    MovableDay.PASCHA_WEEK_3_WED: (0x155, "Ин., 21 зач., VI, 35–39."),
    MovableDay.PASCHA_WEEK_3_THU: (0x165, "Ин., 22 зач., VI, 40–44."),
    MovableDay.PASCHA_WEEK_3_FRI: (0x175, "Ин., 23 зач., VI, 48–54."),
    MovableDay.PASCHA_WEEK_3_SAT: (0x345, "Ин., 52 зач., XV, 17 – XVI, 2."),
    MovableDay.SUNDAY_4_OF_PASCHA: (0xE5, "Ин., 14 зач., V, 1–15."),
    MovableDay.PASCHA_WEEK_4_MON: (0x185, "Ин., 24 зач., VI, 56–69."),
    MovableDay.PASCHA_WEEK_4_TUE: (0x195, "Ин., 25 зач., VII, 1–13."),
    MovableDay.PASCHA_WEEK_4_WED: (0x1A5, "Ин., 26 зач., VII, 14–30."),
    MovableDay.PASCHA_WEEK_4_THU: (0x1D5, "Ин., 29 зач., VIII, 12–20."),
    MovableDay.PASCHA_WEEK_4_FRI: (0x1E5, "Ин., 30 зач., VIII, 21–30."),
    MovableDay.PASCHA_WEEK_4_SAT: (0x1F5, "Ин., 31 зач., VIII, 31–42."),
    MovableDay.SUNDAY_5_OF_PASCHA: (0xC5, "Ин., 12 зач., IV, 5–42."),
    MovableDay.PASCHA_WEEK_5_MON: (0x205, "Ин., 32 зач., VIII, 42–51."),
    MovableDay.PASCHA_WEEK_5_TUE: (0x215, "Ин., 33 зач., VIII, 51–59."),
    MovableDay.PASCHA_WEEK_5_WED: (0x125, "Ин., 18 зач., VI, 5–14."),
    MovableDay.PASCHA_WEEK_5_THU: (0x235, "Ин., 35 зач., IX, 39 – X, 9."),
    MovableDay.PASCHA_WEEK_5_FRI: (0x255, "Ин., 37 зач., X, 17–28."),
    MovableDay.PASCHA_WEEK_5_SAT: (0x265, "Ин., 38 зач., X, 27–38."),
    MovableDay.SUNDAY_6_OF_PASCHA: (0x225, "Ин., 34 зач., IX, 1–38."),
    MovableDay.PASCHA_WEEK_6_MON: (0x285, "Ин., 40 зач., XI, 47–57."),
    MovableDay.PASCHA_WEEK_6_TUE: (0x2A5, "Ин., 42 зач., XII, 19–36."),
    MovableDay.PASCHA_WEEK_6_WED: (0x2B5, "Ин., 43 зач., XII, 36–47."),
    MovableDay.PASCHA_WEEK_6_THU: (0x724, "Лк., 114 зач., XXIV, 36–53."),
    MovableDay.PASCHA_WEEK_6_FRI: (0x2F5, "Ин., 47 зач., XIV, 1–11."),
    MovableDay.PASCHA_WEEK_6_SAT: (0x305, "Ин., 48 зач., XIV, 10–21."),
    MovableDay.SUNDAY_7_OF_PASCHA: (0x385, "Ин., 56 зач., XVII, 1–13."),
    MovableDay.PASCHA_WEEK_7_MON: (0x315, "Ин., 49 зач., XIV, 27 – XV, 7."),
    MovableDay.PASCHA_WEEK_7_TUE: (0x355, "Ин., 53 зач., XVI, 2–13."),
    MovableDay.PASCHA_WEEK_7_WED: (0x365, "Ин., 54 зач., XVI, 15–23."),
    MovableDay.PASCHA_WEEK_7_THU: (0x375, "Ин., 55 зач., XVI, 23–33."),
    MovableDay.PASCHA_WEEK_7_FRI: (0x395, "Ин., 57 зач., XVII, 18–26."),
    MovableDay.PASCHA_WEEK_7_SAT: (0x435, "Ин., 67 зач., XXI, 15–25."),
    MovableDay.LENT_WEEK_1_SAT: (0xA3, "Мк., 10 зач., II, 23 – III, 5."),
    MovableDay.LENT_WEEK_2_SUN: (0x55, "Ин., 5 зач., I, 43–51."),
    MovableDay.LENT_WEEK_2_SAT: (0x63, "Мк., 6 зач., I, 35–44."),
    MovableDay.LENT_WEEK_3_SUN: (0x73, "Мк., 7 зач., II, 1–12."),
    MovableDay.LENT_WEEK_3_SAT: (0x83, "Мк., 8 зач., II, 14–17."),
    MovableDay.LENT_WEEK_4_SUN: (0x253, "Мк., 37 зач., VIII, 34 – IX, 1."),
    MovableDay.LENT_WEEK_4_SAT: (0x1F3, "Мк., 31 зач., VII, 31–37."),
    MovableDay.LENT_WEEK_5_SUN: (0x283, "Мк., 40 зач., IX, 17–31."),
    MovableDay.LENT_WEEK_5_SAT: (0x233, "Мк., 35 зач., VIII, 27–31."),
    MovableDay.LENT_WEEK_6_SUN: (0x2F3, "Мк., 47 зач., X, 32–45."),
    MovableDay.LENT_WEEK_6_SAT: (0x275, "Ин., 39 зач., XI, 1–45."),
    MovableDay.LENT_WEEK_7_SUN: (0x295, "Ин., 41 зач., XII, 1–18."),
    MovableDay.LENT_WEEK_7_MON: (0x622, "Мф., 98 зач., XXIV, 3–35."),
    MovableDay.LENT_WEEK_7_TUE: (0x662, "Мф., 102 зач., XXIV, 36 - XXVI, 2."),
    MovableDay.LENT_WEEK_7_WED: (0x6C2, "Мф., 108 зач., XXVI, 6-16."),
    MovableDay.LENT_WEEK_7_THU: (0x6B2, "Мф., 107 зач., XXVI, 1–20. Ин., 44 зач., XIII, 3–17. Мф., 108 зач.(от полу́), XXVI, 21–39. Лк., 109 зач., XXII, 43–45. Мф., 108 зач., XXVI, 40 – XXVII, 2."),
    MovableDay.LENT_WEEK_7_SAT: (0x732, "Мф., 115 зач., XXVIII, 1–20."),
}

APOSTOL_TRIODION: Dict[MovableDay, Entry] = {
    MovableDay.PASCHA: (0x11, "Деян., 1 зач., I, 1–8."),
    MovableDay.BRIGHT_MON: (0x21, "Деян., 2 зач., I, 12–17, 21–26."),
    MovableDay.BRIGHT_TUE: (0x41, "Деян., 4 зач., II, 14–21."),
    MovableDay.BRIGHT_WED: (0x51, "Деян., 5 зач., II, 22–36."),
    MovableDay.BRIGHT_THU: (0x61, "Деян., 6 зач., II, 38–43."),
    MovableDay.BRIGHT_FRI: (0x71, "Деян., 7 зач., III, 1–8."),
    MovableDay.BRIGHT_SAT: (0x81, "Деян., 8 зач., III, 11–16."),
    MovableDay.SUNDAY_2_OF_PASCHA: (0xE1, "Деян., 14 зач., V, 12–20."),
    MovableDay.PASCHA_WEEK_2_MON: (0x91, "Деян., 9 зач., III, 19–26."),
    MovableDay.PASCHA_WEEK_2_TUE: (0xA1, "Деян., 10 зач., IV, 1–10."),
    MovableDay.PASCHA_WEEK_2_WED: (0xB1, "Деян., 11 зач., IV, 13–22."),
    MovableDay.PASCHA_WEEK_2_THU: (0xC1, "Деян., 12 зач., IV, 23–31."),
    MovableDay.PASCHA_WEEK_2_FRI: (0xD1, "Деян., 13 зач., V, 1–11."),
    MovableDay.PASCHA_WEEK_2_SAT: (0xF1, "Деян., 15 зач., V, 21–33."),
    MovableDay.SUNDAY_3_OF_PASCHA: (0x101, "Деян., 16 зач., VI, 1-7."),
    MovableDay.PASCHA_WEEK_3_MON: (0x111, "Деян., 17 зач., VI, 8 – VII, 5, 47–60."),
    MovableDay.PASCHA_WEEK_3_TUE: (0x121, "Деян., 18 зач., VIII, 5–17."),
    MovableDay.PASCHA_WEEK_3_WED: (0x131, "Деян., 19 зач., VIII, 18–25."),
    MovableDay.PASCHA_WEEK_3_THU: (0x141, "Деян., 20 зач., VIII, 26–39."),
    MovableDay.PASCHA_WEEK_3_FRI: (0x151, "Деян., 21 зач., VIII, 40 – IX, 19."),
    MovableDay.PASCHA_WEEK_3_SAT: (0x161, "Деян., 22 зач., IX, 19–31."),
    MovableDay.SUNDAY_4_OF_PASCHA: (0x171, "Деян., 23 зач., IX, 32-42."),
    MovableDay.PASCHA_WEEK_4_MON: (0x181, "Деян., 24 зач., X, 1–16."),
    MovableDay.PASCHA_WEEK_4_TUE: (0x191, "Деян., 25 зач., X, 21–33."),
    MovableDay.PASCHA_WEEK_4_WED: (0x221, "Деян., 34 зач., XIV, 6–18."),
    MovableDay.PASCHA_WEEK_4_THU: (0x1A1, "Деян., 26 зач., X, 34–43."),
    MovableDay.PASCHA_WEEK_4_FRI: (0x1B1, "Деян., 27 зач., X, 44 – XI, 10."),
    MovableDay.PASCHA_WEEK_4_SAT: (0x1D1, "Деян., 29 зач., XII, 1–11."),
    MovableDay.SUNDAY_5_OF_PASCHA: (0x1C1, "Деян., 28 зач., XI, 19–26, 29–30."),
    MovableDay.PASCHA_WEEK_5_MON: (0x1E1, "Деян., 30 зач., XII, 12–17."),
    MovableDay.PASCHA_WEEK_5_TUE: (0x1F1, "Деян., 31 зач., XII, 25 – XIII, 12."),
    MovableDay.PASCHA_WEEK_5_WED: (0x201, "Деян., 32 зач., XIII, 13–24."),
    MovableDay.PASCHA_WEEK_5_THU: (0x231, "Деян., 35 зач., XIV, 20–27."),
    MovableDay.PASCHA_WEEK_5_FRI: (0x241, "Деян., 36 зач., XV, 5–34."),
    MovableDay.PASCHA_WEEK_5_SAT: (0x251, "Деян., 37 зач., XV, 35–41."),
    MovableDay.SUNDAY_6_OF_PASCHA: (0x261, "Деян., 38 зач., XVI, 16–34."),
    MovableDay.PASCHA_WEEK_6_MON: (0x271, "Деян., 39 зач., XVII, 1–15."),
    MovableDay.PASCHA_WEEK_6_TUE: (0x281, "Деян., 40 зач., XVII, 19-28."),
    MovableDay.PASCHA_WEEK_6_WED: (0x291, "Деян., 41 зач., XVIII, 22–28."),
    MovableDay.PASCHA_WEEK_6_THU: (0x11, "Деян., 1 зач., I, 1–12."),
    MovableDay.PASCHA_WEEK_6_FRI: (0x2A1, "Деян., 42 зач., XIX, 1–8."),
    MovableDay.PASCHA_WEEK_6_SAT: (0x2B1, "Деян., 43 зач., XX, 7–12."),
    MovableDay.SUNDAY_7_OF_PASCHA: (0x2C1, "Деян., 44 зач., XX, 16-18, 28-36."),
    MovableDay.PASCHA_WEEK_7_MON: (0x2D1, "Деян., 45 зач., XXI, 8–14."),
    MovableDay.PASCHA_WEEK_7_TUE: (0x2E1, "Деян., 46 зач., XXI, 26–32."),
    MovableDay.PASCHA_WEEK_7_WED: (0x2F1, "Деян., 47 зач., XXIII, 1–11."),
    MovableDay.PASCHA_WEEK_7_THU: (0x301, "Деян., 48 зач., XXV, 13–19."),
    MovableDay.PASCHA_WEEK_7_FRI: (0x321, "Деян., 50 зач., XXVII, 1–44."),
    MovableDay.PASCHA_WEEK_7_SAT: (0x331, "Деян., 51 зач., XXVIII, 1–31."),
    MovableDay.LENT_WEEK_1_SAT: (0x12F1, "Евр., 303 зач., I, 1–12."),
    MovableDay.LENT_WEEK_2_SUN: (0x1491, "Евр., 329 зач., XI, 24-26, 32 - XII, 2."),
    MovableDay.LENT_WEEK_2_SAT: (0x1351, "Евр., 309 зач., III, 12–16."),
    MovableDay.LENT_WEEK_3_SUN: (0x1301, "Евр., 304 зач., I, 10 – II, 3."),
    MovableDay.LENT_WEEK_3_SAT: (0x1451, "Евр., 325 зач., X, 32–38."),
    MovableDay.LENT_WEEK_4_SUN: (0x1371, "Евр., 311 зач., IV, 14 – V, 6."),
    MovableDay.LENT_WEEK_4_SAT: (0x1391, "Евр., 313 зач., VI, 9–12."),
    MovableDay.LENT_WEEK_5_SUN: (0x13A1, "Евр., 314 зач., VI, 13–20."),
    MovableDay.LENT_WEEK_5_SAT: (0x1421, "Евр., 322 зач., IX, 24–28."),
    MovableDay.LENT_WEEK_6_SUN: (0x1411, "Евр., 321 зач., IX, 11-14."),
    MovableDay.LENT_WEEK_6_SAT: (0x14D1, "Евр., 333 зач., XII, 28 - XIII, 8."),
    MovableDay.LENT_WEEK_7_SUN: (0xF71, "Флп., 247 зач., IV, 4-9."),
    MovableDay.LENT_WEEK_7_THU: (0x951, "1 Кор., 149 зач., XI, 23–32."),
    MovableDay.LENT_WEEK_7_SAT: (0x5B1, "Рим., 91 зач., VI, 3–11."),
}

# eleven Sunday matins (resurrection) Gospels, in cycle order
RESURRECTION_GOSPELS: Tuple[Entry, ...] = (
    (0x742, "Мф., 116 зач., XXVIII, 16–20."),
    (0x463, "Мк., 70 зач., XVI, 1–8."),
    (0x473, "Мк., 71 зач., XVI, 9–20."),
    (0x704, "Лк., 112 зач., XXIV, 1–12."),
    (0x714, "Лк., 113 зач., XXIV, 12–35."),
    (0x724, "Лк., 114 зач., XXIV, 36–53."),
    (0x3F5, "Ин., 63 зач., XX, 1–10."),
    (0x405, "Ин., 64 зач., XX, 11–18."),
    (0x415, "Ин., 65 зач., XX, 19–31."),
    (0x425, "Ин., 66 зач., XXI, 1–14."),
    (0x435, "Ин., 67 зач., XXI, 15–25."),
)

FEAST_MATINS_GOSPELS: Dict[str, Entry] = {
    "palm_sunday": (0x532, "Мф., 83 зач., XXI, 1–11, 15–17."),
    "theophany": (0x23, "Мк., 2 зач., I, 9–11."),
    "meeting": (0x84, "Лк., 8 зач., II, 25–32."),
    "theotokos": (0x44, "Лк., 4 зач., I, 39–49, 56."),
    "transfiguration": (0x2D4, "Лк., 45 зач., IX, 28–36."),
    "exaltation": (0x2A5, "Ин., 42 зач., XII, 28-36."),
    "nativity": (0x22, "Мф., 2 зач., I, 18–25."),
}
