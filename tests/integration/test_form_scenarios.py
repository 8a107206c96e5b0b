"""End-to-end scenarios: presets bound to fields, evaluated, reported."""

import pytest

from fieldcheck import (
    InMemoryField,
    amount_validator,
    code_validator,
    evaluate_all,
    mobile_validator,
    password_validator,
)
from fieldcheck.application.reporters import ConsoleReporter
from fieldcheck.application.validators import all_passed


class TestScenarios:
    """Reference scenarios for the presets."""

    def test_short_password(self) -> None:
        field = InMemoryField("abc")
        assert password_validator(field, min_length=6).evaluate() is None
        assert field.is_valid is False
        assert field.error_message == "Minimum 6 characters."

    def test_valid_password(self) -> None:
        field = InMemoryField("abcdef")
        assert password_validator(field, min_length=6).evaluate() == "abcdef"
        assert field.is_valid is True

    def test_valid_mobile(self) -> None:
        field = InMemoryField("+1 (555) 123-4567")
        assert mobile_validator(field).evaluate() == "+1 (555) 123-4567"

    def test_mobile_with_letters(self) -> None:
        field = InMemoryField("555-CALL")
        assert mobile_validator(field).evaluate() is None
        assert field.error_message == "Wrong phone number"

    def test_empty_code(self) -> None:
        field = InMemoryField("")
        assert code_validator(field, min_length=4).evaluate() is None
        assert field.error_message == "Empty subject"

    @pytest.mark.parametrize(
        ("value", "expected", "message"),
        [
            ("-5", None, "Please positive digits only"),
            ("3.5", "3.5", None),
        ],
    )
    def test_amount(self, value: str, expected: str | None, message: str | None) -> None:
        field = InMemoryField(value)
        assert amount_validator(field).evaluate() == expected
        assert field.error_message == message


class TestSignUpForm:
    """A whole form evaluated on submit."""

    def test_report(self) -> None:
        fields = {
            "password": InMemoryField("abc", label="Password"),
            "mobile": InMemoryField("+1 (555) 123-4567", label="Mobile"),
            "code": InMemoryField("", label="Code"),
            "amount": InMemoryField("3.5", label="Amount"),
        }
        reports = evaluate_all(
            [
                password_validator(fields["password"], min_length=6),
                mobile_validator(fields["mobile"]),
                code_validator(fields["code"], min_length=4),
                amount_validator(fields["amount"]),
            ]
        )

        assert all_passed(reports) is False
        assert [r.result.passed for r in reports] == [False, True, False, True]

        text = ConsoleReporter().report(reports)
        assert "valid: 2, invalid: 2" in text
        assert "Minimum 6 characters." in text
        assert "Empty subject" in text
        assert "FAILED" in text

    def test_values_untouched(self) -> None:
        field = InMemoryField("555-CALL", label="Mobile")
        evaluate_all([mobile_validator(field)])
        assert field.value == "555-CALL"
