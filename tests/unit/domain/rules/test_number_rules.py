"""Tests for domain/rules/number_rules.py."""

from fieldcheck.domain.rules.number_rules import PositiveNumberRule


class TestPositiveNumberRule:
    """Tests for PositiveNumberRule."""

    def test_name(self) -> None:
        assert PositiveNumberRule().name == "positive-number"

    def test_none_fails(self) -> None:
        assert PositiveNumberRule().test(None) is False

    def test_positive_decimal_passes(self) -> None:
        assert PositiveNumberRule().test("3.5") is True

    def test_positive_integer_passes(self) -> None:
        assert PositiveNumberRule().test("42") is True

    def test_negative_fails(self) -> None:
        assert PositiveNumberRule().test("-5") is False

    def test_zero_fails(self) -> None:
        assert PositiveNumberRule().test("0") is False

    def test_non_numeric_fails(self) -> None:
        assert PositiveNumberRule().test("abc") is False

    def test_message(self) -> None:
        rule = PositiveNumberRule(message="Please positive digits only")
        assert rule.message == "Please positive digits only"
