"""Tests for domain/exceptions/definition.py."""

import pytest

from fieldcheck.domain.exceptions.base import FieldCheckError
from fieldcheck.domain.exceptions.definition import RuleDefinitionError


class TestRuleDefinitionError:
    """Tests for RuleDefinitionError exception."""

    def test_is_fieldcheck_error(self) -> None:
        assert issubclass(RuleDefinitionError, FieldCheckError)

    def test_attributes(self) -> None:
        err = RuleDefinitionError("min-length", "minimum_length must be >= 0, got -1")
        assert err.rule_name == "min-length"
        assert err.reason == "minimum_length must be >= 0, got -1"

    def test_message_format(self) -> None:
        err = RuleDefinitionError("allowed-characters", "allowed characters must not be empty")
        assert str(err) == (
            "Invalid rule 'allowed-characters': allowed characters must not be empty"
        )

    def test_empty_rule_name_raises(self) -> None:
        with pytest.raises(ValueError, match="rule_name must not be empty"):
            RuleDefinitionError("", "reason")

    def test_empty_reason_raises(self) -> None:
        with pytest.raises(ValueError, match="reason must not be empty"):
            RuleDefinitionError("rule", "")

    def test_can_catch_as_fieldcheck_error(self) -> None:
        with pytest.raises(FieldCheckError) as exc_info:
            raise RuleDefinitionError("rule", "reason")
        assert isinstance(exc_info.value, RuleDefinitionError)
