"""Character set rules: digits only and allowed characters."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from fieldcheck.domain.exceptions.definition import RuleDefinitionError
from fieldcheck.domain.model.rule import Rule
from fieldcheck.domain.predicates.text_predicates import (
    has_only_characters,
    is_digits_only,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from fieldcheck.domain.predicates.base import ValuePredicate

# Characters accepted in phone numbers: digits, "+", space, ".", "(", ")", "-", "*", "#"
PHONE_CHARACTERS = frozenset("0123456789+ .()-*#")


@dataclass(slots=True)
class DigitsOnlyRule(Rule):
    """Fails unless every character is an ASCII digit.

    "" passes. Chain after NonEmptyRule to reject it.

    Attributes:
        message: Failure message
    """

    message: str | None = None
    _predicate: ValuePredicate = field(
        init=False, repr=False, compare=False, default_factory=is_digits_only
    )

    @property
    def name(self) -> str:
        return "digits-only"

    def test(self, value: str | None) -> bool:
        return self._predicate(value)


@dataclass(slots=True)
class AllowedCharactersRule(Rule):
    """Fails if value holds any character outside `allowed`.

    "" passes. Chain after NonEmptyRule to reject it.

    Attributes:
        allowed: Allowed characters (a string is split into characters)
        message: Failure message
    """

    allowed: Iterable[str]
    message: str | None = None
    _predicate: ValuePredicate = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Normalize to frozenset and validate. FAIL-FIRST."""
        self.allowed = frozenset(self.allowed)
        try:
            self._predicate = has_only_characters(self.allowed)
        except ValueError as e:
            raise RuleDefinitionError("allowed-characters", str(e)) from e

    @property
    def name(self) -> str:
        return "allowed-characters"

    def test(self, value: str | None) -> bool:
        return self._predicate(value)


def phone_number_rule(message: str | None = None) -> AllowedCharactersRule:
    """Create allowed-characters rule for phone numbers.

    Args:
        message: Failure message

    Returns:
        AllowedCharactersRule over PHONE_CHARACTERS
    """
    return AllowedCharactersRule(PHONE_CHARACTERS, message=message)
