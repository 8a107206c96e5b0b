"""Domain model."""

from fieldcheck.domain.model.evaluation import EvaluationResult, FieldReport
from fieldcheck.domain.model.rule import PredicateRule, Rule

__all__ = [
    "EvaluationResult",
    "FieldReport",
    "PredicateRule",
    "Rule",
]
