"""Validator: ordered, short-circuiting rule chain bound to one field."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fieldcheck.domain.model.evaluation import EvaluationResult
from fieldcheck.domain.ports.field import field_label

if TYPE_CHECKING:
    from collections.abc import Iterable

    from fieldcheck.domain.model.rule import Rule
    from fieldcheck.domain.ports.field import BindableField

logger = logging.getLogger(__name__)


class Validator:
    """Ordered chain of rules bound to a field.

    Rules run in the order they were added. The first failing rule
    stops the chain; its message is the only one reported. A validator
    with no rules accepts every value.

    The field is not owned: the validator reads `field.value` and calls
    its feedback methods, nothing else.

    Not thread-safe. Serialize evaluate() calls on one instance.
    """

    def __init__(self, field: BindableField, rules: Iterable[Rule] = ()) -> None:
        """Initialize validator.

        Args:
            field: Field to read from and report to
            rules: Initial rules, in evaluation order
        """
        self._field = field
        self._rules: list[Rule] = list(rules)
        self._last_result: EvaluationResult | None = None

    @property
    def field(self) -> BindableField:
        """Bound field."""
        return self._field

    @property
    def rules(self) -> tuple[Rule, ...]:
        """Snapshot of rules in evaluation order."""
        return tuple(self._rules)

    @property
    def last_result(self) -> EvaluationResult | None:
        """Result of the latest validate() call, None before the first."""
        return self._last_result

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        names = ", ".join(rule.name for rule in self._rules)
        return f"Validator(field={field_label(self._field)!r}, rules=[{names}])"

    def add_rule(self, rule: Rule) -> None:
        """Append rule to the end of the chain.

        Args:
            rule: Rule to append
        """
        self._rules.append(rule)

    def check(self, value: str | None) -> EvaluationResult:
        """Run the rule chain against value without touching the field.

        Args:
            value: Value to check

        Returns:
            EvaluationResult naming the first failing rule, or a success
        """
        for rule in self._rules:
            if not rule.test(value):
                return EvaluationResult.failure(value, rule)
        return EvaluationResult.success(value)

    def validate(self) -> EvaluationResult:
        """Validate the field's current value and report to the field.

        Reads field.value once. On the first failing rule calls
        field.mark_invalid(rule.message), otherwise field.mark_valid().
        Exactly one feedback call per validation.

        Returns:
            EvaluationResult (also kept as last_result)
        """
        value = self._field.value
        result = self.check(value)
        self._last_result = result

        if result.failed:
            logger.debug(
                "Field %r rejected by rule %s",
                field_label(self._field),
                result.rule_name,
            )
            self._field.mark_invalid(result.message)
        else:
            logger.debug("Field %r passed %d rules", field_label(self._field), len(self._rules))
            self._field.mark_valid()

        return result

    def evaluate(self) -> str | None:
        """Validate the field and return its value if it is valid.

        Returns:
            The field value unchanged if every rule passed, None otherwise
        """
        return self.validate().valid_value
