"""Number predicates."""

import math
import re

from fieldcheck.domain.predicates.base import ValuePredicate

# Plain decimal literal over ASCII digits: optional sign, digits with optional fraction,
# optional exponent.
# No surrounding whitespace, no underscores, no "inf"/"nan".
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_decimal(value: str) -> float | None:
    """Parse a plain decimal literal.

    Args:
        value: Text to parse

    Returns:
        Finite float, or None if value is not a finite decimal literal
    """
    if _DECIMAL.fullmatch(value) is None:
        return None
    number = float(value)
    if not math.isfinite(number):
        return None
    return number


def is_positive_number() -> ValuePredicate:
    """Create predicate: value is a finite decimal number greater than zero.

    Unparsable text fails; it never raises.

    Returns:
        Predicate function
    """

    def predicate(value: str | None) -> bool:
        if value is None:
            return False
        number = parse_decimal(value)
        return number is not None and number > 0

    return predicate
