"""Number rules."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from fieldcheck.domain.model.rule import Rule
from fieldcheck.domain.predicates.number_predicates import is_positive_number

if TYPE_CHECKING:
    from fieldcheck.domain.predicates.base import ValuePredicate


@dataclass(slots=True)
class PositiveNumberRule(Rule):
    """Fails unless value is a finite decimal number greater than zero.

    Text that does not parse fails; no exception escapes.

    Attributes:
        message: Failure message
    """

    message: str | None = None
    _predicate: ValuePredicate = field(
        init=False, repr=False, compare=False, default_factory=is_positive_number
    )

    @property
    def name(self) -> str:
        return "positive-number"

    def test(self, value: str | None) -> bool:
        return self._predicate(value)
