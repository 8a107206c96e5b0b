"""Rule definition exceptions."""

from fieldcheck.domain.exceptions.base import FieldCheckError


class RuleDefinitionError(FieldCheckError):
    """Error in rule parameters.

    Raised when a rule is constructed with invalid parameters.
    FAIL-FIRST: validates inputs immediately.

    Attributes:
        rule_name: Name of invalid rule (must not be empty)
        reason: Why rule is invalid (must not be empty)
    """

    def __init__(self, rule_name: str, reason: str) -> None:
        if not rule_name:
            raise ValueError("rule_name must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.rule_name = rule_name
        self.reason = reason
        super().__init__(f"Invalid rule '{rule_name}': {reason}")
