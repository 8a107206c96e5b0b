"""Domain predicates over optional field text."""

from fieldcheck.domain.predicates.base import ValuePredicate
from fieldcheck.domain.predicates.number_predicates import (
    is_positive_number,
    parse_decimal,
)
from fieldcheck.domain.predicates.text_predicates import (
    DIGITS,
    grapheme_length,
    has_min_length,
    has_only_characters,
    is_digits_only,
    is_not_empty,
)

__all__ = [
    # Type aliases
    "ValuePredicate",
    # Text predicates
    "DIGITS",
    "grapheme_length",
    "is_not_empty",
    "has_min_length",
    "has_only_characters",
    "is_digits_only",
    # Number predicates
    "parse_decimal",
    "is_positive_number",
]
