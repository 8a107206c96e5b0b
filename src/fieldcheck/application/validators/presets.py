"""Validator presets for common field types.

Each preset starts from empty_value_validator() and appends its rules.
Rule order is part of the contract: the non-empty check always runs first.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fieldcheck.application.validators.validator import Validator
from fieldcheck.domain.model import messages
from fieldcheck.domain.rules.character_rules import DigitsOnlyRule, phone_number_rule
from fieldcheck.domain.rules.number_rules import PositiveNumberRule
from fieldcheck.domain.rules.text_rules import MinimumLengthRule, NonEmptyRule

if TYPE_CHECKING:
    from fieldcheck.domain.ports.field import BindableField


def empty_value_validator(field: BindableField) -> Validator:
    """Non-empty.

    Args:
        field: Field to bind

    Returns:
        Validator with a single non-empty rule
    """
    validator = Validator(field)
    validator.add_rule(NonEmptyRule(message=messages.EMPTY_SUBJECT))
    return validator


def password_validator(field: BindableField, min_length: int) -> Validator:
    """Non-empty, then at least `min_length` characters.

    Args:
        field: Field to bind
        min_length: Minimum number of characters

    Returns:
        Configured validator

    Raises:
        RuleDefinitionError: If min_length is negative
    """
    validator = empty_value_validator(field)
    validator.add_rule(
        MinimumLengthRule(min_length, message=messages.minimum_characters(min_length))
    )
    return validator


def mobile_validator(field: BindableField) -> Validator:
    """Non-empty, then phone characters only."""
    validator = empty_value_validator(field)
    validator.add_rule(phone_number_rule(message=messages.WRONG_PHONE_NUMBER))
    return validator


def code_validator(field: BindableField, min_length: int) -> Validator:
    """Non-empty, then at least `min_length` characters, then digits only.

    Args:
        field: Field to bind
        min_length: Minimum number of digits

    Returns:
        Configured validator

    Raises:
        RuleDefinitionError: If min_length is negative
    """
    validator = empty_value_validator(field)
    validator.add_rule(
        MinimumLengthRule(min_length, message=messages.minimum_characters(min_length))
    )
    validator.add_rule(DigitsOnlyRule(message=messages.DIGITS_ONLY))
    return validator


def amount_validator(field: BindableField) -> Validator:
    """Non-empty, then a positive number."""
    validator = empty_value_validator(field)
    validator.add_rule(PositiveNumberRule(message=messages.POSITIVE_DIGITS_ONLY))
    return validator
