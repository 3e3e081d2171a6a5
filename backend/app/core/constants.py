"""Shared application constants.

Centralizes the fixed challenge numbers so the aggregation engine, settings
and seed scripts agree on them.
"""

# Length of the challenge in days
CHALLENGE_DAYS = 20

# Cumulative flashcard goal over the whole challenge (~30 cards/day)
FLASHCARD_TARGET = 574

# Cumulative study hours goal over the whole challenge (4 h/day)
HOURS_TARGET = 80.0

# Number of entries shown in the recent activity list
RECENT_ACTIVITY_LIMIT = 8

# Named metrics inserted by the seed script: (name, value, target, unit)
DEFAULT_METRICS = [
    ("JSM", 0, 100, "percent"),
    ("GFE", 0, FLASHCARD_TARGET, "flashcards"),
    ("FEM", 0, 4, "hours"),
]

# Upper bounds for a single day's entry (Integer column / hours in a day)
MAX_DAILY_FLASHCARDS = 2**31 - 1
MAX_DAILY_HOURS = 24.0
