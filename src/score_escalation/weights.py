"""Keyword weights for the escalation score."""

ESCALATION_WEIGHTS = {
    "nuclear": 10,
    "invasion": 8,
    "mobilization": 7,
    "war": 6,
    "ballistic": 6,
    "missile": 5,
    "casualties": 5,
    "retaliation": 5,
    "escalation": 5,
    "strike": 4,
    "explosion": 4,
    "attack": 4,
    "killed": 4,
    "drone": 3,
    "rocket": 3,
    "intercept": 3,
    "evacuat": 3,
    "troops": 3,
    "siren": 2,
    "threat": 2,
}

# Raw total that maps to a score of 100
ESCALATION_CEILING = 200

SCORING_WINDOW = 30

NOMINAL_MAX = 40
ELEVATED_MAX = 75
