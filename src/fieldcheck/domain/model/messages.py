"""Failure messages used by validator presets.

Literal English text, not localized.
"""

EMPTY_SUBJECT = "Empty subject"
WRONG_PHONE_NUMBER = "Wrong phone number"
DIGITS_ONLY = "Please digits only"
POSITIVE_DIGITS_ONLY = "Please positive digits only"


def minimum_characters(minimum: int) -> str:
    """Message for a minimum length rule, e.g. "Minimum 6 characters."."""
    return f"Minimum {minimum} characters."
