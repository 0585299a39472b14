"""Fixed narrative taxonomy. Order here is output order."""

NARRATIVE_TOPICS = {
    "Iranian Front": ("iran", "tehran", "irgc", "isfahan", "natanz"),
    "Northern Border": ("lebanon", "hezbollah", "north"),
    "Southern Front": ("gaza", "hamas", "rafah", "khan younis"),
    "Red Sea": ("houthi", "yemen", "red sea", "shipping"),
    "Air Defense": ("iron dome", "intercept", "siren", "arrow", "david's sling"),
    "Diplomacy": ("ceasefire", "talks", "negotiat", "security council", "sanction"),
}

MAX_CLUSTER_MEMBERS = 3
MIN_CLUSTER_MEMBERS = 2
