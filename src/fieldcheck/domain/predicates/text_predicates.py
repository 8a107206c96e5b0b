"""Text predicates: presence, length, character sets.

Length is counted in grapheme clusters (user-perceived characters).
Character-set membership is checked per code point.
"""

from collections.abc import Iterable

import regex

from fieldcheck.domain.predicates.base import ValuePredicate

DIGITS = frozenset("0123456789")

_GRAPHEME = regex.compile(r"\X")


def grapheme_length(text: str) -> int:
    """Count user-perceived characters in text.

    "e" + combining acute accent and a family emoji built from several
    code points each count as one.

    Args:
        text: Text to measure

    Returns:
        Number of extended grapheme clusters
    """
    return len(_GRAPHEME.findall(text))


def is_not_empty() -> ValuePredicate:
    """Create predicate: value is present and non-empty.

    Returns:
        Predicate function
    """

    def predicate(value: str | None) -> bool:
        return value is not None and len(value) > 0

    return predicate


def has_min_length(minimum: int) -> ValuePredicate:
    """Create predicate: value has at least `minimum` grapheme clusters.

    Args:
        minimum: Minimum number of user-perceived characters

    Returns:
        Predicate function

    Raises:
        ValueError: If minimum is negative
    """
    if minimum < 0:
        raise ValueError(f"minimum must be >= 0, got {minimum}")

    def predicate(value: str | None) -> bool:
        return value is not None and grapheme_length(value) >= minimum

    return predicate


def has_only_characters(allowed: Iterable[str]) -> ValuePredicate:
    """Create predicate: every character of value is in `allowed`.

    An empty value passes (nothing to reject).

    Args:
        allowed: Allowed characters. A string is split into characters.

    Returns:
        Predicate function

    Raises:
        ValueError: If allowed is empty or holds items that are not single characters
    """
    charset = frozenset(allowed)
    if not charset:
        raise ValueError("allowed characters must not be empty")
    if any(not isinstance(char, str) or len(char) != 1 for char in charset):
        raise ValueError("allowed characters must be single characters")

    def predicate(value: str | None) -> bool:
        return value is not None and all(char in charset for char in value)

    return predicate


def is_digits_only() -> ValuePredicate:
    """Create predicate: value consists of ASCII digits 0-9 only.

    Other Unicode digits (e.g. Arabic-Indic) are rejected.

    Returns:
        Predicate function
    """
    return has_only_characters(DIGITS)
