"""Test factories for fields, rules and reports.

Centralized helpers to avoid duplication across test modules.
"""

from fieldcheck.domain.model.evaluation import EvaluationResult, FieldReport
from fieldcheck.domain.model.rule import PredicateRule


class RecordingField:
    """Field that records every interaction in order.

    calls holds entries like ("value",), ("mark_valid",),
    ("mark_invalid", message).
    """

    def __init__(self, value: str | None = None, label: str = "") -> None:
        self._value = value
        self.label = label
        self.calls: list[tuple[object, ...]] = []

    @property
    def value(self) -> str | None:
        self.calls.append(("value",))
        return self._value

    def mark_valid(self) -> None:
        self.calls.append(("mark_valid",))

    def mark_invalid(self, message: str | None) -> None:
        self.calls.append(("mark_invalid", message))

    @property
    def value_reads(self) -> int:
        return sum(1 for call in self.calls if call == ("value",))

    @property
    def feedback(self) -> list[tuple[object, ...]]:
        return [call for call in self.calls if call != ("value",)]


def make_rule(
    passes: bool,
    message: str | None = None,
    name: str = "stub",
    seen: list[str] | None = None,
) -> PredicateRule:
    """Create a rule with a fixed outcome.

    Args:
        passes: Outcome of every test() call
        message: Failure message
        name: Rule name
        seen: If given, the rule appends its name here when tested
    """

    def predicate(value: str | None) -> bool:
        if seen is not None:
            seen.append(name)
        return passes

    return PredicateRule(predicate, message=message, rule_name=name)


def make_report(
    label: str = "Field",
    value: str | None = "value",
    *,
    rule_name: str | None = None,
    message: str | None = None,
) -> FieldReport:
    """Create a FieldReport. Passing if rule_name is None."""
    if rule_name is None:
        result = EvaluationResult.success(value)
    else:
        result = EvaluationResult(value=value, passed=False, rule_name=rule_name, message=message)
    return FieldReport(label=label, result=result)
