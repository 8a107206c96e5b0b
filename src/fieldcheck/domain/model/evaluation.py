"""Evaluation results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Self

if TYPE_CHECKING:
    from fieldcheck.domain.model.rule import Rule


@dataclass(frozen=True, slots=True)
class EvaluationResult:
    """Outcome of running a rule chain against one value.

    Attributes:
        value: Value that was checked (unchanged)
        passed: True if every rule accepted the value
        rule_name: Name of the first failing rule (None if passed)
        message: Message of the first failing rule (None if passed)
    """

    value: str | None
    passed: bool
    rule_name: str | None = None
    message: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.passed and self.rule_name is not None:
            raise ValueError("passed=True contradicts a failing rule_name")
        if self.passed and self.message is not None:
            raise ValueError("passed=True contradicts a failure message")
        if not self.passed and not self.rule_name:
            raise ValueError("passed=False requires rule_name")

    @classmethod
    def success(cls, value: str | None) -> Self:
        """Create a passing result."""
        return cls(value=value, passed=True)

    @classmethod
    def failure(cls, value: str | None, rule: Rule) -> Self:
        """Create a failing result from the rule that rejected value."""
        return cls(value=value, passed=False, rule_name=rule.name, message=rule.message)

    @property
    def failed(self) -> bool:
        """True if some rule rejected the value."""
        return not self.passed

    @property
    def valid_value(self) -> str | None:
        """Value if passed, None otherwise."""
        return self.value if self.passed else None


@dataclass(frozen=True, slots=True)
class FieldReport:
    """Evaluation result of one field, for reporting.

    Attributes:
        label: Field label ("" if the field has none)
        result: Evaluation result
    """

    label: str
    result: EvaluationResult
