"""Rule library."""

from fieldcheck.domain.rules.character_rules import (
    PHONE_CHARACTERS,
    AllowedCharactersRule,
    DigitsOnlyRule,
    phone_number_rule,
)
from fieldcheck.domain.rules.number_rules import PositiveNumberRule
from fieldcheck.domain.rules.text_rules import MinimumLengthRule, NonEmptyRule

__all__ = [
    "PHONE_CHARACTERS",
    "AllowedCharactersRule",
    "DigitsOnlyRule",
    "MinimumLengthRule",
    "NonEmptyRule",
    "PositiveNumberRule",
    "phone_number_rule",
]
