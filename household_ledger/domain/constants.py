"""Domain constants for household bookkeeping rules."""

from decimal import Decimal

ADULT_AGE = 18
MIN_AGE = 0
MAX_AGE = 150

MAX_PERSON_NAME_LENGTH = 200
MAX_DESCRIPTION_LENGTH = 400

# Largest amount whose cents survive a round trip through a JSON number.
MAX_AMOUNT = Decimal("999999999999.99")

DEFAULT_RECENT_LIMIT = 10
MAX_RECENT_LIMIT = 100


__all__ = [
    "ADULT_AGE",
    "MIN_AGE",
    "MAX_AGE",
    "MAX_PERSON_NAME_LENGTH",
    "MAX_DESCRIPTION_LENGTH",
    "MAX_AMOUNT",
    "DEFAULT_RECENT_LIMIT",
    "MAX_RECENT_LIMIT",
]
