"""Rule base class and generic predicate rule."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from fieldcheck.domain.exceptions.definition import RuleDefinitionError

if TYPE_CHECKING:
    from fieldcheck.domain.predicates.base import ValuePredicate


class Rule(ABC):
    """Abstract base class for field rules.

    A rule is one predicate over optional field text plus the message
    shown when it fails. Rules are pure: test() has no side effects.

    Parameters are fixed at construction. Only `message` may be
    reassigned afterwards.

    Subclasses must implement:
    - name: Rule identifier
    - test: Predicate
    """

    __slots__ = ()

    message: str | None

    @property
    @abstractmethod
    def name(self) -> str:
        """Rule identifier."""
        ...

    @abstractmethod
    def test(self, value: str | None) -> bool:
        """Check value against rule.

        Args:
            value: Field text, None if the field holds nothing

        Returns:
            True if value satisfies the rule. None always fails.
        """
        ...


@dataclass(slots=True)
class PredicateRule(Rule):
    """Rule wrapping an arbitrary predicate function.

    Attributes:
        predicate: Function deciding acceptance
        message: Failure message
        rule_name: Identifier reported on failure
    """

    predicate: ValuePredicate
    message: str | None = None
    rule_name: str = "predicate"

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.rule_name:
            raise RuleDefinitionError("predicate", "rule_name must not be empty")
        if not callable(self.predicate):
            raise RuleDefinitionError(self.rule_name, "predicate must be callable")

    @property
    def name(self) -> str:
        return self.rule_name

    def test(self, value: str | None) -> bool:
        return bool(self.predicate(value))
