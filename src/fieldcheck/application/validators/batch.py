"""Evaluate several independent validators at once (e.g. on form submit)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fieldcheck.domain.model.evaluation import FieldReport
from fieldcheck.domain.ports.field import field_label

if TYPE_CHECKING:
    from collections.abc import Iterable

    from fieldcheck.application.validators.validator import Validator


def evaluate_all(validators: Iterable[Validator]) -> tuple[FieldReport, ...]:
    """Validate every validator in order.

    Failures do not stop the batch and each field gets its own feedback.
    Validators do not see each other's values.

    Args:
        validators: Validators to run

    Returns:
        One FieldReport per validator, in input order
    """
    return tuple(
        FieldReport(label=field_label(validator.field), result=validator.validate())
        for validator in validators
    )


def all_passed(reports: Iterable[FieldReport]) -> bool:
    """True if every report passed. Empty = True."""
    return all(report.result.passed for report in reports)
