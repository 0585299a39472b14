"""Keyword tables for advertisement and relevance classification.

All entries are lower case and matched as substrings.
"""

# Promotional phrases commonly found in feed ads
AD_KEYWORDS = (
    "sponsored", "advertisement", "promotion", "subscribe", "shop",
    "offer", "deal", "limited time", "gift card", "save now",
    "partner content", "special report: sponsored", "buy now",
)

# Link path segments of shop / subscription pages
AD_LINK_SEGMENTS = ("/shop/", "/subscribe")

MIN_EXCERPT_LENGTH = 20
BREAKING_MARKER = "breaking"

LOCATION_KEYWORDS = (
    "iran", "israel", "tehran", "tel aviv", "jerusalem", "haifa",
    "gaza", "lebanon", "beirut", "syria", "damascus", "yemen",
    "iraq", "baghdad", "isfahan", "red sea", "gulf", "middle east",
)

CONFLICT_KEYWORDS = (
    "strike", "missile", "attack", "war", "defense", "explosion",
    "conflict", "military", "drone", "airspace", "siren", "retaliation",
    "operation", "threat", "ballistic", "uav", "rocket", "bomb",
    "intercept", "troops",
)

# High-precision terms that imply relevance on their own
STRONG_KEYWORDS = (
    "idf", "irgc", "hezbollah", "houthi", "iron dome", "ballistic missile",
)

# Sufficient on their own for sources in the relaxed set
RELAXED_KEYWORDS = ("strike", "missile", "airstrike", "rocket")

MIN_TITLE_LENGTH = 5
