"""Text rules: non-empty and minimum length."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from fieldcheck.domain.exceptions.definition import RuleDefinitionError
from fieldcheck.domain.model.rule import Rule
from fieldcheck.domain.predicates.text_predicates import has_min_length, is_not_empty

if TYPE_CHECKING:
    from fieldcheck.domain.predicates.base import ValuePredicate


@dataclass(slots=True)
class NonEmptyRule(Rule):
    """Fails on None and on "".

    Attributes:
        message: Failure message
    """

    message: str | None = None
    _predicate: ValuePredicate = field(
        init=False, repr=False, compare=False, default_factory=is_not_empty
    )

    @property
    def name(self) -> str:
        return "non-empty"

    def test(self, value: str | None) -> bool:
        return self._predicate(value)


@dataclass(slots=True)
class MinimumLengthRule(Rule):
    """Fails unless value has at least `minimum_length` grapheme clusters.

    Attributes:
        minimum_length: Minimum number of user-perceived characters (>= 0)
        message: Failure message
    """

    minimum_length: int
    message: str | None = None
    _predicate: ValuePredicate = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if isinstance(self.minimum_length, bool) or not isinstance(self.minimum_length, int):
            raise RuleDefinitionError(
                "min-length", f"minimum_length must be int, got {self.minimum_length!r}"
            )
        if self.minimum_length < 0:
            raise RuleDefinitionError(
                "min-length", f"minimum_length must be >= 0, got {self.minimum_length}"
            )
        self._predicate = has_min_length(self.minimum_length)

    @property
    def name(self) -> str:
        return "min-length"

    def test(self, value: str | None) -> bool:
        return self._predicate(value)
