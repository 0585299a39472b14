"""Known strike locations and the keywords that indicate a strike.

Place lookup walks STRIKE_PLACES in order and the first name found wins.
"""

STRIKE_PLACES = {
    "Tehran": (35.6892, 51.3890),
    "Isfahan": (32.6546, 51.6680),
    "Natanz": (33.5133, 51.9164),
    "Fordow": (34.8850, 50.9960),
    "Tabriz": (38.0800, 46.2919),
    "Shiraz": (29.5918, 52.5837),
    "Kermanshah": (34.3142, 47.0650),
    "Bandar Abbas": (27.1832, 56.2666),
    "Tel Aviv": (32.0853, 34.7818),
    "Jerusalem": (31.7683, 35.2137),
    "Haifa": (32.7940, 34.9896),
    "Beersheba": (31.2520, 34.7915),
    "Dimona": (31.0700, 35.0300),
    "Eilat": (29.5577, 34.9519),
    "Beirut": (33.8938, 35.5018),
    "Damascus": (33.5138, 36.2765),
    "Baghdad": (33.3152, 44.3661),
    "Sanaa": (15.3694, 44.1910),
    "Hodeidah": (14.7978, 42.9545),
}

STRIKE_KEYWORDS = (
    "explosion", "airstrike", "air strike", "missile strike", "intercepted",
    "blast", "struck",
)

SCAN_LIMIT = 50
DEDUP_WINDOW_MINUTES = 60
RECORD_TTL_HOURS = 6
