"""fieldcheck - rule-based form field validation."""

__version__ = "0.1.0"

from fieldcheck.application.validators import (
    Validator,
    amount_validator,
    build_preset,
    code_validator,
    empty_value_validator,
    evaluate_all,
    mobile_validator,
    password_validator,
)
from fieldcheck.domain.model.evaluation import EvaluationResult, FieldReport
from fieldcheck.domain.model.rule import PredicateRule, Rule
from fieldcheck.domain.ports.field import BindableField
from fieldcheck.infrastructure.fields import InMemoryField

__all__ = [
    "BindableField",
    "EvaluationResult",
    "FieldReport",
    "InMemoryField",
    "PredicateRule",
    "Rule",
    "Validator",
    "__version__",
    "amount_validator",
    "build_preset",
    "code_validator",
    "empty_value_validator",
    "evaluate_all",
    "mobile_validator",
    "password_validator",
]
